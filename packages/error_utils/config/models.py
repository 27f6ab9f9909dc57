"""Typed configuration models for error_utils runtime settings."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "error_utils" / "error_utils.yaml"
ENV_PREFIX = "ERROR_UTILS_"


class LoggingSettings(BaseModel):
    """Logging configuration applied by ``setup_logging``."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_output: bool = True
    service: str = "error_utils"
    environment: str = "dev"


class BoundarySettings(BaseModel):
    """Behavior switches for the exception and errno boundaries."""

    propagate_interrupts: bool = True
    """Let ``KeyboardInterrupt`` and ``SystemExit`` escape ``try_catch``."""

    chain_nested_failures: bool = False
    """Append the text of the failure being handled when another was raised."""

    log_classified_failures: bool = True
    """Emit one DEBUG record per failure a boundary classifies."""


class ErrorUtilsSettings(BaseSettings):
    """Root settings; sources are merged by ``load_settings`` and passed as kwargs."""

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        extra="ignore",
        nested_model_default_partial_update=True,
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    boundaries: BoundarySettings = Field(default_factory=BoundarySettings)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Only init kwargs; ``load_settings`` owns the env and file cascade."""
        return (init_settings,)
