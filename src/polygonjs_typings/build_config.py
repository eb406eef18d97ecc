"""Options handed to the Vue CLI service when building the library bundle."""

from __future__ import annotations

import json
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class CssOptions(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Inline styles into the JS bundle instead of emitting separate .css files.
    extract: bool = False


class BuildToolConfig(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    transpile_dependencies: bool = Field(default=True, alias="transpileDependencies")
    css: CssOptions = Field(default_factory=CssOptions)

    def to_options(self) -> dict[str, Any]:
        """Return the option object using the build tool's key names."""
        return self.model_dump(by_alias=True)


def _js_literal(value: Any, indent: int = 0) -> str:
    """Render ``value`` as a JS object literal (bare keys, trailing commas), not JSON."""
    pad = "  " * indent
    if isinstance(value, dict):
        if not value:
            return "{}"
        lines = [
            f"{pad}  {key}: {_js_literal(item, indent + 1)},"
            for key, item in value.items()
        ]
        return "{\n" + "\n".join(lines) + f"\n{pad}}}"
    return json.dumps(value)


def render_build_config(config: Optional[BuildToolConfig] = None) -> str:
    """Render ``vue.config.js`` for ``config`` (defaults when omitted)."""
    options = (config or BuildToolConfig()).to_options()
    return (
        "const { defineConfig } = require('@vue/cli-service')\n"
        f"module.exports = defineConfig({_js_literal(options)})\n"
    )
