from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class DeclarationArtifact:
    """Ambient module declaration emitted next to the library bundle."""

    module_specifier: str
    output_root: str
    relative_name: str

    @property
    def payload(self) -> str:
        return f'declare module "{self.module_specifier}";\n'

    def target_path(self, working_directory: Path) -> Path:
        """Return ``<working_directory>/<output_root>/<relative_name>``."""
        return Path(working_directory) / self.output_root / self.relative_name


DECLARATION_ARTIFACT = DeclarationArtifact(
    module_specifier="@polygonjs/vue3",
    output_root="dist",
    relative_name="@polygonjs/vue3.common.d.ts",
)
