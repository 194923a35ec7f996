"""Keyspace commands."""

from __future__ import annotations

from redis_console.core.commands.command import ArgSpec, ArgType
from redis_console.core.commands.registry import command
from redis_console.core.interfaces.store_client_interface import IStoreClient


@command("get", ArgSpec("key"))
async def get(store: IStoreClient, key: str) -> str | None:
    """Return the string value of a key."""
    return await store.get(key)


@command("del", ArgSpec("key", variadic=True))
async def delete(store: IStoreClient, *keys: str) -> int:
    """Delete keys and return how many were removed."""
    return await store.delete(*keys)


@command("keys", ArgSpec("pattern"), min_args=0)
async def keys(store: IStoreClient, pattern: str = "*") -> list[str]:
    """List keys matching a glob pattern."""
    return sorted(await store.keys(pattern))


@command("type", ArgSpec("key"))
async def key_type(store: IStoreClient, key: str) -> str:
    """Return the type stored at a key."""
    return await store.type(key)


@command("ttl", ArgSpec("key"))
async def ttl(store: IStoreClient, key: str) -> int:
    """Return a key's remaining time to live in seconds."""
    return await store.ttl(key)


@command("expire", ArgSpec("key"), ArgSpec("seconds", ArgType.INTEGER))
async def expire(store: IStoreClient, key: str, seconds: int) -> bool:
    """Set a key's time to live in seconds."""
    return await store.expire(key, seconds)
