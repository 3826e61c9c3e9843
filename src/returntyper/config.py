"""Configuration management for returntyper."""

import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Output format type
OutputFormat = Literal["table", "json"]


def _config_paths() -> list[Path]:
    return [
        Path("returntyper.yaml"),
        Path("returntyper.yml"),
        Path.home() / ".config" / "returntyper" / "config.yaml",
        Path.home() / ".config" / "returntyper" / "config.yml",
    ]


def _load_yaml_config() -> dict[str, Any]:
    """Load YAML config file if it exists."""
    for path in _config_paths():
        if path.exists():
            logger.debug(f"Loading config from {path}")
            with open(path) as f:
                return yaml.safe_load(f) or {}

    return {}


class Settings(BaseSettings):
    """Application settings loaded from YAML + environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RETURNTYPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    output_format: OutputFormat = "table"
    # Record functions the oracle cannot type instead of aborting the file
    continue_on_error: bool = True
    log_level: str = "WARNING"
    type_table: Path | None = Field(default=None, description="Default YAML type table")

    @model_validator(mode="before")
    @classmethod
    def load_yaml_config(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Load YAML config and merge with env vars.

        Priority: Environment Variables > YAML Config > Defaults
        """
        yaml_config = _load_yaml_config()

        # Merge YAML config into values only if not already set (env vars take precedence)
        for key, val in yaml_config.items():
            if val is not None and key not in values:
                values[key] = val

        return values

    @model_validator(mode="after")
    def expand_paths(self) -> "Settings":
        """Expand ~ in paths to the user's home directory."""
        if self.type_table is not None:
            self.type_table = Path(self.type_table).expanduser()
        return self

    @model_validator(mode="after")
    def normalize_log_level(self) -> "Settings":
        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        self.log_level = level
        return self


settings = Settings()


def get_settings() -> Settings:
    """Get the current settings instance."""
    return settings


def reload_settings() -> Settings:
    """Reload settings (useful after environment changes)."""
    global settings
    settings = Settings()
    return settings
