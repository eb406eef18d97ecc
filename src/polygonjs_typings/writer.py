from __future__ import annotations

import logging
from pathlib import Path

from .models import DECLARATION_ARTIFACT, DeclarationArtifact

logger = logging.getLogger(__name__)


def write_declaration_stub(
    working_directory: Path,
    artifact: DeclarationArtifact = DECLARATION_ARTIFACT,
) -> Path:
    """
    Write the declaration stub under the build output of ``working_directory``.

    The namespace directory (``dist/@polygonjs``) must already exist; it is
    produced by the library build. Existing content is replaced. Any
    ``OSError`` from the write propagates unchanged.
    """
    target = artifact.target_path(working_directory)
    logger.debug("Writing declaration stub for %s to %s", artifact.module_specifier, target)
    with open(target, "w", encoding="utf-8", newline="\n") as handle:
        handle.write(artifact.payload)
    return target
