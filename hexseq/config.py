"""
hexseq - Configuration Management

Handles loading and managing codec configuration from JSON files or
environment variables.
"""

import json
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Mapping, Optional

from .constants import ENV_PREFIX, LOG_LEVELS, MAX_RANDOM_BYTES, MAX_SAFE_INTEGER
from .errors import ConfigurationError


_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")


@dataclass
class CodecConfig:
    """
    Codec limits and logging settings.

    Example codec_config.json:
    {
        "max_random_bytes": 1024,
        "max_safe_integer": 9223372036854775807,
        "log_level": "DEBUG",
        "json_logs": false
    }
    """
    max_random_bytes: int = MAX_RANDOM_BYTES
    max_safe_integer: int = MAX_SAFE_INTEGER
    log_level: str = "WARNING"
    json_logs: bool = True

    def __post_init__(self):
        self.log_level = str(self.log_level).upper()
        self.validate()

    def validate(self) -> None:
        """
        Check every field.

        Raises:
            ConfigurationError: If a value is out of range or of the wrong type.
        """
        for name in ("max_random_bytes", "max_safe_integer"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ConfigurationError(
                    f"{name} must be a positive integer",
                    {"field": name, "value": value}
                )
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(
                f"Unknown log level: {self.log_level}",
                {"field": "log_level", "allowed": list(LOG_LEVELS)}
            )
        if not isinstance(self.json_logs, bool):
            raise ConfigurationError(
                "json_logs must be a boolean",
                {"field": "json_logs", "value": self.json_logs}
            )

    @classmethod
    def from_file(cls, path: str) -> "CodecConfig":
        """
        Load configuration from a JSON file.

        Missing keys fall back to the defaults.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigurationError: If the file is not a JSON object or holds bad values.
        """
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(config_path) as f:
            try:
                data = json.load(f)
            except json.JSONDecodeError as e:
                raise ConfigurationError(f"Invalid JSON in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file must hold a JSON object: {path}")

        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ConfigurationError(
                f"Unknown config keys: {', '.join(sorted(unknown))}",
                {"path": str(path)}
            )

        return cls(**data)

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX, environ: Optional[Mapping[str, str]] = None) -> "CodecConfig":
        """
        Load configuration from environment variables.

        Reads ``<prefix>MAX_RANDOM_BYTES``, ``<prefix>MAX_SAFE_INTEGER``,
        ``<prefix>LOG_LEVEL`` and ``<prefix>JSON_LOGS``; unset variables
        keep their defaults.

        Example:
            export HEXSEQ_LOG_LEVEL=DEBUG
            config = CodecConfig.from_env()
        """
        env = os.environ if environ is None else environ
        kwargs = {}

        for name in ("max_random_bytes", "max_safe_integer"):
            raw = env.get(prefix + name.upper())
            if raw is None or raw.strip() == "":
                continue
            try:
                kwargs[name] = int(raw.strip(), 0)
            except ValueError as e:
                raise ConfigurationError(
                    f"{prefix}{name.upper()} must be an integer, got {raw!r}"
                ) from e

        level = env.get(prefix + "LOG_LEVEL")
        if level and level.strip():
            kwargs["log_level"] = level.strip()

        json_logs = env.get(prefix + "JSON_LOGS")
        if json_logs and json_logs.strip():
            flag = json_logs.strip().lower()
            if flag in _TRUE:
                kwargs["json_logs"] = True
            elif flag in _FALSE:
                kwargs["json_logs"] = False
            else:
                raise ConfigurationError(f"{prefix}JSON_LOGS must be a boolean, got {json_logs!r}")

        return cls(**kwargs)

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str) -> None:
        """Save config to JSON file."""
        with open(path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)
