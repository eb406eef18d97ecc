import logging
from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    POLYGONJS_TYPINGS_LOG_LEVEL: LogLevel = "WARNING"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @field_validator("POLYGONJS_TYPINGS_LOG_LEVEL", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        """Upper-case the level; unknown names fall back to WARNING so the stub is still written."""
        level = str(value).strip().upper()
        if level not in _LOG_LEVELS:
            logger.warning(
                "Unknown POLYGONJS_TYPINGS_LOG_LEVEL %r; using WARNING", value
            )
            return "WARNING"
        return level

settings = Settings()
