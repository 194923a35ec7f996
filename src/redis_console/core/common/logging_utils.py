"""
Logging utilities for the application.

This module provides utilities for logging, including:
- Root logger configuration with test/production environment tagging
- structlog configuration on top of the stdlib logging tree
- Redaction of sensitive values such as store passwords
"""

import logging
import os
import sys
from typing import Any, Literal

import structlog

from redis_console.core.config.app_config import LogFormat, LoggingConfig

DEFAULT_LOG_FORMAT = (
    "%(asctime)s [%(levelname)-8s] [%(env_tag)s] %(name)s:%(lineno)d %(message)s"
)


def _is_running_under_pytest() -> bool:
    """Detect if we're running under pytest.

    Returns:
        True if running under pytest, False otherwise
    """
    return "pytest" in sys.modules or os.getenv("PYTEST_CURRENT_TEST") is not None


def _get_environment_tag() -> str:
    return "test" if _is_running_under_pytest() else "prod"


class EnvironmentTaggingFilter(logging.Filter):
    """Logging filter that adds environment tags to log records."""

    def __init__(self) -> None:
        super().__init__()
        self._env_tag = _get_environment_tag()

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.env_tag = self._env_tag
        return True


class EnvironmentTaggingFormatter(logging.Formatter):
    """Logging formatter that includes environment tags."""

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        style: Literal["%", "{", "$"] = "%",
    ) -> None:
        super().__init__(fmt or DEFAULT_LOG_FORMAT, datefmt, style=style)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger.

    Args:
        name: Optional logger name

    Returns:
        A structured logger
    """
    return structlog.get_logger(name)  # type: ignore


def redact(value: str | None, mask: str = "***") -> str | None:
    """Redact a sensitive value.

    Args:
        value: The value to redact
        mask: The mask to use

    Returns:
        The redacted value
    """
    if not value:
        return value

    # Keep first and last two characters of long values
    if len(value) > 6:
        return f"{value[0:2]}{mask}{value[-2:]}"
    return mask


def configure_structlog(log_format: LogFormat = LogFormat.CONSOLE) -> None:
    """Route structlog events through the stdlib logging tree."""
    renderer: Any
    if log_format is LogFormat.JSON:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def configure_logging(config: LoggingConfig | None = None) -> None:
    """Configure stdlib logging and structlog.

    Args:
        config: Logging configuration; defaults are used when omitted
    """
    config = config or LoggingConfig()
    formatter = EnvironmentTaggingFormatter()
    tag_filter = EnvironmentTaggingFilter()

    handlers: list[logging.Handler] = []

    console_handler = logging.StreamHandler()
    handlers.append(console_handler)

    if config.log_file:
        handlers.append(logging.FileHandler(config.log_file))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.addFilter(tag_filter)

    logging.basicConfig(
        level=getattr(logging, config.level.value),
        handlers=handlers,
        force=True,  # Override any existing configuration
    )

    configure_structlog(config.format)
