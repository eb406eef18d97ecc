import argparse
import logging
import sys
from pathlib import Path

from .build_config import render_build_config
from .config import settings
from .writer import write_declaration_stub

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polygonjs-typings",
        description=(
            "Write dist/@polygonjs/vue3.common.d.ts after the library build. "
            "Run from the project root; dist/@polygonjs/ must already exist."
        ),
    )
    parser.add_argument(
        "--print-build-config",
        action="store_true",
        help="Print the vue.config.js used for the library build and exit without writing.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log at DEBUG level (overrides POLYGONJS_TYPINGS_LOG_LEVEL).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.POLYGONJS_TYPINGS_LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.print_build_config:
        sys.stdout.write(render_build_config())
        return 0

    # I/O errors are left to the interpreter's default reporting.
    target = write_declaration_stub(Path.cwd())
    logger.info("Declaration stub written: %s", target)
    return 0


if __name__ == "__main__":
    sys.exit(main())
