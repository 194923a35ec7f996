from __future__ import annotations

import logging
import os
from collections.abc import Callable, Mapping
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator

from redis_console.core.common.exceptions import ConfigurationError
from redis_console.core.interfaces.model_bases import DomainModel

logger = logging.getLogger(__name__)


def _to_bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _to_int(value: str, fallback: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return fallback


def _to_float(value: str, fallback: float | None) -> float | None:
    try:
        return float(value)
    except (TypeError, ValueError):
        return fallback


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class LogLevel(str, Enum):
    """Log levels for configuration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log format options."""

    JSON = "json"
    CONSOLE = "console"


class LoggingConfig(DomainModel):
    """Logging configuration."""

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.CONSOLE
    request_logging: bool = False
    response_logging: bool = False
    log_file: str | None = None


class StoreConfig(DomainModel):
    """Connection settings for the Redis store."""

    host: str = "localhost"
    port: int = Field(default=6379, ge=1, le=65535)
    username: str | None = None
    password: str | None = None
    db: int = Field(default=0, ge=0)
    socket_timeout: float | None = 5.0

    @field_validator("password", "username", mode="before")
    @classmethod
    def empty_to_none(cls, v: Any) -> Any:
        """The web frontend sends empty strings for unset credentials."""
        if isinstance(v, str) and not v:
            return None
        return v

    @property
    def address(self) -> str:
        return f"{self.host}:{self.port}"


class InterpreterConfig(DomainModel):
    """Command interpreter settings."""

    # Forward verbs without a registered spec to the store verbatim
    allow_passthrough: bool = True


class CorsConfig(DomainModel):
    allow_origins: list[str] = Field(default_factory=lambda: ["*"])
    allow_methods: list[str] = Field(
        default_factory=lambda: ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
    )
    allow_headers: list[str] = Field(default_factory=lambda: ["Content-Type"])


class AppConfig(DomainModel):
    """Complete application configuration."""

    host: str = "0.0.0.0"
    port: int = 8080
    # Connect to the configured store when the application starts
    auto_connect: bool = False

    store: StoreConfig = Field(default_factory=StoreConfig)
    interpreter: InterpreterConfig = Field(default_factory=InterpreterConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    cors: CorsConfig = Field(default_factory=CorsConfig)

    def save(self, path: str | Path) -> None:
        """Save the current configuration to a YAML file."""
        import yaml

        p = Path(path)
        data = self.model_dump(mode="json", exclude_none=True)
        with p.open("w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, sort_keys=False)

    @classmethod
    def from_env(cls, *, environ: Mapping[str, str] | None = None) -> AppConfig:
        """Create AppConfig from environment variables.

        Returns:
            AppConfig instance
        """
        env: Mapping[str, str] = os.environ if environ is None else environ
        return cls.model_validate(_collect_env_overrides(env))


# (environment variable, dotted config path, transform)
_ENV_BINDINGS: list[tuple[str, str, Callable[[str], Any]]] = [
    ("APP_HOST", "host", str),
    ("APP_PORT", "port", lambda v: _to_int(v, 8080)),
    ("AUTO_CONNECT", "auto_connect", _to_bool),
    ("REDIS_HOST", "store.host", str),
    ("REDIS_PORT", "store.port", lambda v: _to_int(v, 6379)),
    ("REDIS_USERNAME", "store.username", str),
    ("REDIS_PASSWORD", "store.password", str),
    ("REDIS_DB", "store.db", lambda v: _to_int(v, 0)),
    ("REDIS_SOCKET_TIMEOUT", "store.socket_timeout", lambda v: _to_float(v, 5.0)),
    ("ALLOW_PASSTHROUGH", "interpreter.allow_passthrough", _to_bool),
    ("LOG_LEVEL", "logging.level", lambda v: v.strip().upper()),
    ("LOG_FORMAT", "logging.format", lambda v: v.strip().lower()),
    ("LOG_FILE", "logging.log_file", str),
    ("REQUEST_LOGGING", "logging.request_logging", _to_bool),
    ("RESPONSE_LOGGING", "logging.response_logging", _to_bool),
    ("CORS_ALLOW_ORIGINS", "cors.allow_origins", _split_csv),
]


def _set_by_path(data: dict[str, Any], path: str, value: Any) -> None:
    parts = path.split(".")
    target = data
    for part in parts[:-1]:
        target = target.setdefault(part, {})
    target[parts[-1]] = value


def _collect_env_overrides(env: Mapping[str, str]) -> dict[str, Any]:
    """Return a nested dict holding only the settings present in ``env``."""
    overrides: dict[str, Any] = {}
    for name, path, transform in _ENV_BINDINGS:
        if name in env:
            _set_by_path(overrides, path, transform(env[name]))
    return overrides


def _merge_dicts(base: dict[str, Any], override: Mapping[str, Any]) -> None:
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(base.get(key), dict):
            _merge_dicts(base[key], value)
        else:
            base[key] = value


def load_config(
    config_path: str | Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> AppConfig:
    """
    Load configuration from file and environment.

    Environment variables take precedence over the file.

    Args:
        config_path: Optional path to a YAML configuration file

    Returns:
        AppConfig instance
    """
    env: Mapping[str, str] = os.environ if environ is None else environ
    config_data: dict[str, Any] = AppConfig().model_dump()

    if config_path:
        import yaml

        path = Path(config_path)
        if not path.exists():
            logger.warning(f"Configuration file not found: {config_path}")
        else:
            if path.suffix.lower() not in [".yaml", ".yml"]:
                raise ConfigurationError(
                    f"Unsupported configuration file format: {path.suffix}. Use YAML (.yaml/.yml)."
                )
            try:
                with open(path, encoding="utf-8") as f:
                    file_config: Any = yaml.safe_load(f) or {}
            except yaml.YAMLError as exc:
                logger.critical(f"Error loading configuration file: {exc!s}")
                raise ConfigurationError(
                    f"Invalid YAML in {path}: {exc}", details={"path": str(path)}
                ) from exc
            if not isinstance(file_config, dict):
                raise ConfigurationError(
                    f"Configuration file {path} must contain a mapping",
                    details={"path": str(path)},
                )
            _merge_dicts(config_data, file_config)

    _merge_dicts(config_data, _collect_env_overrides(env))
    return AppConfig.model_validate(config_data)
