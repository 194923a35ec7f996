"""Set, hash and sorted-set reads."""

from __future__ import annotations

from redis_console.core.commands.command import ArgSpec, ArgType
from redis_console.core.commands.registry import command
from redis_console.core.domain.command_results import CommandValue, ValueKind
from redis_console.core.interfaces.store_client_interface import IStoreClient

WITHSCORES = "WITHSCORES"


@command("smembers", ArgSpec("key"))
async def smembers(store: IStoreClient, key: str) -> list[str]:
    """Return the members of a set."""
    return sorted(await store.smembers(key))


@command("hgetall", ArgSpec("key"))
async def hgetall(store: IStoreClient, key: str) -> dict[str, str]:
    """Return every field and value of a hash."""
    return await store.hgetall(key)


@command(
    "zrange",
    ArgSpec("key"),
    ArgSpec("start", ArgType.INTEGER),
    ArgSpec("stop", ArgType.INTEGER),
    ArgSpec("withscores", choices=(WITHSCORES,)),
    min_args=3,
)
async def zrange(
    store: IStoreClient, key: str, start: int, stop: int, withscores: str = ""
) -> list[str] | CommandValue:
    """Return sorted-set members by rank, optionally with their scores."""
    if withscores != WITHSCORES:
        return await store.zrange(key, start, stop)
    members = await store.zrange(key, start, stop, withscores=True)
    # Tagged explicitly so an empty range keeps its shape
    return CommandValue(ValueKind.SCORED_MEMBERS, list(members))
