"""List commands."""

from __future__ import annotations

from redis_console.core.commands.command import ArgSpec, ArgType
from redis_console.core.commands.registry import command
from redis_console.core.interfaces.store_client_interface import IStoreClient


@command("lpush", ArgSpec("key"), ArgSpec("value", variadic=True))
async def lpush(store: IStoreClient, key: str, *values: str) -> int:
    """Push values onto the head of a list, in the order given."""
    return await store.lpush(key, *values)


@command("rpush", ArgSpec("key"), ArgSpec("value", variadic=True))
async def rpush(store: IStoreClient, key: str, *values: str) -> int:
    """Push values onto the tail of a list, in the order given."""
    return await store.rpush(key, *values)


@command("lpop", ArgSpec("key"))
async def lpop(store: IStoreClient, key: str) -> str | None:
    """Remove and return the head of a list."""
    return await store.lpop(key)


@command("rpop", ArgSpec("key"))
async def rpop(store: IStoreClient, key: str) -> str | None:
    """Remove and return the tail of a list."""
    return await store.rpop(key)


@command(
    "lrange",
    ArgSpec("key"),
    ArgSpec("start", ArgType.INTEGER),
    ArgSpec("stop", ArgType.INTEGER),
)
async def lrange(store: IStoreClient, key: str, start: int, stop: int) -> list[str]:
    """Return list elements between two inclusive indices."""
    return await store.lrange(key, start, stop)


@command("llen", ArgSpec("key"))
async def llen(store: IStoreClient, key: str) -> int:
    """Return the length of a list."""
    return await store.llen(key)
