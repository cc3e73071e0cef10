"""
System configuration for FINBAR.

One YAML file configures the whole application. Sections:
- series: synthetic chart generator parameters
- display: presentation defaults (currency, default window)
- logging: logging system settings

Lookup order for the file: explicit path, $FINBAR_CONFIG, config/finbar.yaml.
Missing files or keys fall back to built-in defaults. String values may
reference environment variables as ${VAR}.
"""

import os
import re
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import yaml

from finbar.system import log_system

DEFAULT_CONFIG_PATH = Path("config/finbar.yaml")
CONFIG_ENV_VAR = "FINBAR_CONFIG"

_ENV_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


@dataclass
class SeriesConfig:
    """Parameters of the random-walk demo series."""

    starting_value: float = 50_000.0
    trend: float = 0.001
    volatility: float = 0.02
    floor_value: float = 10_000.0
    all_years: int = 2


@dataclass
class DisplayConfig:
    """Presentation defaults."""

    currency: str = "ILS"
    default_window: str = "ALL"


@dataclass
class LoggingConfig:
    """Logging section as written in the YAML file."""

    level: str = "INFO"
    format: str = "console"
    timestamp_format: str = "compact"
    enable_file: bool = True
    file_path: str = "logs/finbar.log"
    file_level: str = "WARNING"
    file_rotation: bool = True
    max_file_size_mb: int = 10
    backup_count: int = 3

    def to_logger_config(self) -> log_system.LoggingConfig:
        """Convert to the pydantic model consumed by LoggerFactory."""
        return log_system.LoggingConfig(
            level=self.level.upper(),  # type: ignore[arg-type]
            format=self.format,  # type: ignore[arg-type]
            timestamp_format=self.timestamp_format,  # type: ignore[arg-type]
            enable_file=self.enable_file,
            file_path=Path(self.file_path),
            file_level=self.file_level.upper(),  # type: ignore[arg-type]
            file_rotation=self.file_rotation,
            max_file_size_mb=self.max_file_size_mb,
            backup_count=self.backup_count,
        )


@dataclass
class SystemConfig:
    """Complete system configuration."""

    series: SeriesConfig = field(default_factory=SeriesConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> "SystemConfig":
        """
        Load configuration from YAML, merged over built-in defaults.

        Args:
            path: Config file path. If None, uses $FINBAR_CONFIG or config/finbar.yaml.

        Returns:
            SystemConfig instance (all defaults if the file does not exist)
        """
        if path is None:
            env_path = os.environ.get(CONFIG_ENV_VAR)
            path = Path(env_path) if env_path else DEFAULT_CONFIG_PATH

        merged = asdict(cls())
        if path.exists():
            with open(path, encoding="utf-8") as f:
                user_config = yaml.safe_load(f) or {}
            merged = _deep_merge(merged, user_config)

        return cls._from_dict(_substitute_env_vars(merged))

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "SystemConfig":
        """Build config from a (possibly partial) dictionary."""
        return cls(
            series=SeriesConfig(**data.get("series", {})),
            display=DisplayConfig(**data.get("display", {})),
            logging=LoggingConfig(**data.get("logging", {})),
        )


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge override into a copy of base. Override wins on conflict."""
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _substitute_env_vars(value: Any) -> Any:
    """Replace ${VAR} references with environment values. Undefined vars are kept as-is."""
    if isinstance(value, dict):
        return {key: _substitute_env_vars(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_substitute_env_vars(item) for item in value]
    if isinstance(value, str):
        return _ENV_PATTERN.sub(lambda match: os.environ.get(match.group(1), match.group(0)), value)
    return value


_system_config: SystemConfig | None = None


def get_system_config(path: Path | None = None) -> SystemConfig:
    """
    Get the system config singleton.

    Args:
        path: Optional explicit path; when given the config is reloaded from it.
    """
    global _system_config
    if path is not None:
        _system_config = SystemConfig.load(path)
    elif _system_config is None:
        _system_config = SystemConfig.load()
    return _system_config


def reload_system_config(path: Path | None = None) -> SystemConfig:
    """Force reload of the system config singleton."""
    global _system_config
    _system_config = SystemConfig.load(path)
    return _system_config
