"""Configuration management for metabind."""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .instrumentation import TracingConfig

_TRUE_VALUES = {"1", "true", "yes", "on"}


def _env_flag(value: str) -> bool:
    return value.strip().lower() in _TRUE_VALUES


@dataclass
class Config:
    """Main decoder configuration.

    Attributes:
        descriptor_path: TOML descriptor holding the metadata table, if any.
        metadata_table: Name of the table inside the descriptor.
        atomic_bind: Resolve every binding before applying any of them.
        log_level: Level used by configure_logging().
        tracing: OpenTelemetry tracing settings.
    """

    descriptor_path: Path | None = None
    metadata_table: str = "metadata"
    atomic_bind: bool = False
    log_level: str = "WARNING"
    tracing: TracingConfig = field(default_factory=TracingConfig)

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        config = cls()
        config._apply_env()
        return config

    @classmethod
    def from_file(cls, path: Path | str) -> "Config":
        """Load configuration from a TOML file, then apply env overrides."""
        with open(path, "rb") as f:
            data = tomllib.load(f)

        config = cls()
        config._apply_mapping(data)
        config._apply_env()
        return config

    @classmethod
    def from_env_or_file(cls, path: Path | str | None = None) -> "Config":
        """Load from an explicit path, METABIND_CONFIG, or the environment only."""
        config_path = path or os.environ.get("METABIND_CONFIG")
        if config_path:
            return cls.from_file(config_path)
        return cls.from_env()

    def _apply_mapping(self, data: dict[str, Any]) -> None:
        if "descriptor_path" in data:
            self.descriptor_path = Path(data["descriptor_path"])
        if "metadata_table" in data:
            self.metadata_table = str(data["metadata_table"])
        if "atomic_bind" in data:
            self.atomic_bind = bool(data["atomic_bind"])
        if "log_level" in data:
            self.log_level = str(data["log_level"]).upper()

        tracing = data.get("tracing", {})
        for name in ("enabled", "endpoint", "service_name", "service_version", "sample_rate"):
            if name in tracing:
                setattr(self.tracing, name, tracing[name])

    def _apply_env(self) -> None:
        if path := os.environ.get("METABIND_DESCRIPTOR"):
            self.descriptor_path = Path(path)

        if table := os.environ.get("METABIND_TABLE"):
            self.metadata_table = table

        if atomic := os.environ.get("METABIND_ATOMIC"):
            self.atomic_bind = _env_flag(atomic)

        if level := os.environ.get("METABIND_LOG_LEVEL"):
            self.log_level = level.upper()

        # Tracing
        if enabled := os.environ.get("METABIND_TRACING"):
            self.tracing.enabled = _env_flag(enabled)
        if endpoint := os.environ.get("METABIND_TRACING_ENDPOINT"):
            self.tracing.endpoint = endpoint
