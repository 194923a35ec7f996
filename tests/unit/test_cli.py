from unittest.mock import patch

import pytest

from redis_console.core.cli import apply_cli_args, build_cli_parser, main
from redis_console.core.config.app_config import AppConfig, LogLevel, StoreConfig


def test_parser_defaults_leave_config_untouched() -> None:
    args = build_cli_parser().parse_args([])
    config = AppConfig()

    assert apply_cli_args(config, args) is config


def test_store_options_override_config() -> None:
    args = build_cli_parser().parse_args(
        [
            "--redis-host",
            "cache.internal",
            "--redis-port",
            "6380",
            "--redis-password",
            "pw",
            "--redis-db",
            "5",
        ]
    )
    config = AppConfig(store=StoreConfig(host="old", username="admin"))

    updated = apply_cli_args(config, args)

    assert updated.store.host == "cache.internal"
    assert updated.store.port == 6380
    assert updated.store.password == "pw"
    assert updated.store.db == 5
    assert updated.store.username == "admin"
    assert config.store.host == "old"


def test_server_and_interpreter_options() -> None:
    args = build_cli_parser().parse_args(
        [
            "--host",
            "127.0.0.1",
            "--port",
            "9001",
            "--auto-connect",
            "--no-passthrough",
            "--log-level",
            "DEBUG",
        ]
    )

    updated = apply_cli_args(AppConfig(), args)

    assert updated.host == "127.0.0.1"
    assert updated.port == 9001
    assert updated.auto_connect is True
    assert updated.interpreter.allow_passthrough is False
    assert updated.logging.level is LogLevel.DEBUG


def test_invalid_log_level_is_rejected() -> None:
    with pytest.raises(SystemExit):
        build_cli_parser().parse_args(["--log-level", "verbose"])


def test_main_runs_uvicorn_with_resolved_config() -> None:
    with (
        patch("redis_console.core.cli.load_config", return_value=AppConfig()) as load,
        patch("redis_console.core.cli.configure_logging") as configure,
        patch("redis_console.core.cli.uvicorn.run") as run,
    ):
        main(["--config", "console.yaml", "--port", "9100"])

    load.assert_called_once_with("console.yaml")
    configure.assert_called_once()
    kwargs = run.call_args.kwargs
    assert kwargs["port"] == 9100
    assert kwargs["host"] == "0.0.0.0"
    assert kwargs["log_level"] == "info"
