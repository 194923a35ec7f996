"""Unit tests for the command service façade."""

import pytest

from redis_console.core.common.exceptions import ErrorKind
from redis_console.core.domain.command_results import ValueKind
from redis_console.core.services.command_service import CommandService


@pytest.mark.asyncio
async def test_quoted_value_is_stored_as_one_token(command_service: CommandService, store) -> None:
    result = await command_service.execute('SET foo "hello world"')

    assert result.success is True
    assert store.calls == [("execute", ("SET", "foo", "hello world"))]


@pytest.mark.asyncio
async def test_unclosed_quote_never_reaches_dispatcher(
    command_service: CommandService, store
) -> None:
    result = await command_service.execute('SET "unterminated')

    assert result.error.kind is ErrorKind.UNCLOSED_QUOTE
    assert result.message == "unclosed quotes"
    assert store.calls == []


@pytest.mark.asyncio
async def test_blank_line_is_no_command(command_service: CommandService) -> None:
    result = await command_service.execute("   ")

    assert result.error.kind is ErrorKind.NO_COMMAND


@pytest.mark.asyncio
async def test_extra_args_are_appended(command_service: CommandService, store) -> None:
    store.data["l"] = ["a", "b", "c"]

    result = await command_service.execute("LRANGE", ["l", 0, -1])

    assert result.value.kind is ValueKind.LIST
    assert result.value.value == ["a", "b", "c"]
    assert store.calls == [("lrange", ("l", 0, -1))]


@pytest.mark.asyncio
async def test_validation_error_message(command_service: CommandService) -> None:
    result = await command_service.execute("lpush mylist")

    assert result.error.kind is ErrorKind.INVALID_ARGUMENTS
    assert result.message == "lpush requires at least 2 arguments"
