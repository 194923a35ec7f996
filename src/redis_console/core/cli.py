"""
Command line entry point for the Redis web console server.
"""

import argparse
import logging
import os
from collections.abc import Sequence
from typing import Any

import uvicorn

from redis_console.core.app.application_factory import build_app
from redis_console.core.common.logging_utils import configure_logging
from redis_console.core.config.app_config import AppConfig, LogLevel, load_config

logger = logging.getLogger(__name__)


def build_cli_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run the Redis web console server")

    parser.add_argument(
        "--config",
        dest="config_file",
        default=os.getenv("CONSOLE_CONFIG"),
        help="Path to a YAML configuration file",
    )

    # Basic server options
    parser.add_argument("--host")
    parser.add_argument("--port", type=int)

    # Store connection
    parser.add_argument("--redis-host")
    parser.add_argument("--redis-port", type=int)
    parser.add_argument("--redis-password")
    parser.add_argument("--redis-db", type=int)
    parser.add_argument(
        "--auto-connect",
        action="store_true",
        default=None,
        help="Connect to the configured store on startup",
    )

    parser.add_argument(
        "--no-passthrough",
        dest="allow_passthrough",
        action="store_false",
        default=None,
        help="Reject commands that have no registered validation instead of forwarding them",
    )
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        help="Set the logging level (default: use config or INFO)",
    )
    return parser


def apply_cli_args(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    """Return a copy of ``config`` with command line overrides applied."""
    updates: dict[str, Any] = {}
    if args.host is not None:
        updates["host"] = args.host
    if args.port is not None:
        updates["port"] = args.port
    if args.auto_connect is not None:
        updates["auto_connect"] = args.auto_connect

    store_updates: dict[str, Any] = {}
    if args.redis_host is not None:
        store_updates["host"] = args.redis_host
    if args.redis_port is not None:
        store_updates["port"] = args.redis_port
    if args.redis_password is not None:
        store_updates["password"] = args.redis_password
    if args.redis_db is not None:
        store_updates["db"] = args.redis_db
    if store_updates:
        updates["store"] = config.store.model_copy(update=store_updates)

    if args.allow_passthrough is not None:
        updates["interpreter"] = config.interpreter.model_copy(
            update={"allow_passthrough": args.allow_passthrough}
        )
    if args.log_level is not None:
        updates["logging"] = config.logging.model_copy(
            update={"level": LogLevel(args.log_level)}
        )

    return config.model_copy(update=updates) if updates else config


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_cli_parser()
    args = parser.parse_args(argv)

    config = apply_cli_args(load_config(args.config_file), args)
    configure_logging(config.logging)

    logger.info(
        "Starting Redis web console on %s:%d (store %s)",
        config.host,
        config.port,
        config.store.address,
    )
    app = build_app(config)
    uvicorn.run(
        app,
        host=config.host,
        port=config.port,
        log_level=config.logging.level.value.lower(),
    )


if __name__ == "__main__":
    main()
