"""Post-build typings for the @polygonjs/vue3 library bundle."""

from .build_config import BuildToolConfig, CssOptions, render_build_config
from .models import DECLARATION_ARTIFACT, DeclarationArtifact
from .writer import write_declaration_stub

__all__ = [
    "BuildToolConfig",
    "CssOptions",
    "DECLARATION_ARTIFACT",
    "DeclarationArtifact",
    "render_build_config",
    "write_declaration_stub",
]
