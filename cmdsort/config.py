"""cmdsort configuration management using Pydantic."""

from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, Field, ValidationError

from cmdsort.constants import DEFAULT_CONFIG_PATH, DEFAULT_EXCLUDES, DEFAULT_JOBS, MAX_JOBS
from cmdsort.exceptions import ConfigurationError


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="warning", pattern="^(debug|info|warning|error)$")
    directory: str | None = None


class CmdsortConfig(BaseModel):
    """Complete cmdsort configuration."""

    paths: list[str] = Field(default_factory=list)
    exclude: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDES))
    jobs: int = Field(default=DEFAULT_JOBS, ge=1, le=MAX_JOBS)
    output_format: str = Field(default="text", pattern="^(text|json|sarif)$")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: str | Path | None = None) -> "CmdsortConfig":
        """Load configuration from YAML file.

        Args:
            config_path: Path to config file. Defaults to .cmdsort.yaml

        Returns:
            CmdsortConfig instance

        Raises:
            ConfigurationError: If the file is unreadable or invalid
        """
        config_path = Path(DEFAULT_CONFIG_PATH) if config_path is None else Path(config_path)

        if not config_path.exists():
            return cls()

        try:
            with open(config_path) as f:
                data = yaml.safe_load(f) or {}
        except (yaml.YAMLError, OSError) as e:
            raise ConfigurationError(f"Cannot load {config_path}", {"error": str(e)}) from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config {config_path} must be a mapping")

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CmdsortConfig":
        """Create configuration from dictionary.

        Args:
            data: Configuration dictionary

        Returns:
            CmdsortConfig instance
        """
        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigurationError("Invalid configuration", {"errors": e.errors()}) from e

    def save(self, config_path: str | Path | None = None) -> None:
        """Save configuration to YAML file.

        Args:
            config_path: Path to save config. Defaults to .cmdsort.yaml
        """
        config_path = Path(DEFAULT_CONFIG_PATH) if config_path is None else Path(config_path)

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump()
