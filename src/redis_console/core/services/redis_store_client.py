"""
Redis implementation of the store client.

Built on ``redis.asyncio``. The client holds one connection pool shared by all
requests; every redis-py failure is re-raised as ``StoreError`` carrying the
original message.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable
from typing import Any, TypeVar

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from redis_console.core.common.exceptions import StoreError, StoreNotConnectedError
from redis_console.core.common.logging_utils import redact
from redis_console.core.config.app_config import StoreConfig
from redis_console.core.domain.command_results import ScoredMember
from redis_console.core.domain.redis_models import KeyEntry
from redis_console.core.interfaces.store_client_interface import IStoreClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RedisStoreClient(IStoreClient):
    """Store client backed by a redis-py asyncio connection pool."""

    def __init__(self, client: aioredis.Redis | None = None) -> None:
        self._client = client
        self._config: StoreConfig | None = None
        self._lock = asyncio.Lock()

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    @property
    def config(self) -> StoreConfig | None:
        return self._config

    def _require_client(self) -> aioredis.Redis:
        if self._client is None:
            raise StoreNotConnectedError()
        return self._client

    async def _run(self, awaitable: Awaitable[T]) -> T:
        try:
            return await awaitable
        except (RedisError, UnicodeDecodeError) as exc:
            raise StoreError(str(exc), details={"type": type(exc).__name__}) from exc

    async def connect(self, config: StoreConfig) -> None:
        async with self._lock:
            await self._close_current()
            await self._open(config)

    async def _open(self, config: StoreConfig) -> None:
        logger.info(
            "Connecting to Redis at %s db=%d (password=%s)",
            config.address,
            config.db,
            redact(config.password),
        )
        client = aioredis.Redis(
            host=config.host,
            port=config.port,
            username=config.username,
            password=config.password,
            db=config.db,
            socket_timeout=config.socket_timeout,
            socket_connect_timeout=config.socket_timeout,
            decode_responses=True,
            # Undecodable bytes become U+FFFD
            encoding_errors="replace",
        )
        try:
            await self._run(client.ping())
        except StoreError:
            await client.aclose()
            raise
        self._client = client
        self._config = config

    async def disconnect(self) -> None:
        async with self._lock:
            await self._close_current()

    async def _close_current(self) -> None:
        client, self._client = self._client, None
        self._config = None
        if client is None:
            return
        await self._run(client.aclose())
        logger.info("Disconnected from Redis")

    async def keys(self, pattern: str = "*") -> list[str]:
        return list(await self._run(self._require_client().keys(pattern)))

    async def get(self, key: str) -> str | None:
        return await self._run(self._require_client().get(key))

    async def set(self, key: str, value: Any, ttl_ms: int = 0) -> None:
        client = self._require_client()
        await self._run(client.set(key, value, px=ttl_ms if ttl_ms > 0 else None))

    async def delete(self, *keys: str) -> int:
        return await self._run(self._require_client().delete(*keys))

    async def lpush(self, key: str, *values: str) -> int:
        return await self._run(self._require_client().lpush(key, *values))

    async def rpush(self, key: str, *values: str) -> int:
        return await self._run(self._require_client().rpush(key, *values))

    async def lpop(self, key: str) -> str | None:
        return await self._run(self._require_client().lpop(key))

    async def rpop(self, key: str) -> str | None:
        return await self._run(self._require_client().rpop(key))

    async def lrange(self, key: str, start: int, stop: int) -> list[str]:
        return await self._run(self._require_client().lrange(key, start, stop))

    async def llen(self, key: str) -> int:
        return await self._run(self._require_client().llen(key))

    async def smembers(self, key: str) -> list[str]:
        return sorted(await self._run(self._require_client().smembers(key)))

    async def hgetall(self, key: str) -> dict[str, str]:
        return dict(await self._run(self._require_client().hgetall(key)))

    async def zrange(
        self, key: str, start: int, stop: int, withscores: bool = False
    ) -> list[str] | list[ScoredMember]:
        client = self._require_client()
        if not withscores:
            return list(await self._run(client.zrange(key, start, stop)))
        pairs = await self._run(client.zrange(key, start, stop, withscores=True))
        return [ScoredMember(member, float(score)) for member, score in pairs]

    async def type(self, key: str) -> str:
        return await self._run(self._require_client().type(key))

    async def ttl(self, key: str) -> int:
        return await self._run(self._require_client().ttl(key))

    async def expire(self, key: str, seconds: int) -> bool:
        return bool(await self._run(self._require_client().expire(key, seconds)))

    async def get_key(self, key: str) -> KeyEntry:
        client = self._require_client()
        key_type = await self._run(client.type(key))
        ttl_ms = await self._run(client.pttl(key))

        value: Any = None
        if key_type == "string":
            value = await self.get(key)
        elif key_type == "list":
            value = await self.lrange(key, 0, -1)
        elif key_type == "set":
            value = await self.smembers(key)
        elif key_type == "hash":
            value = await self.hgetall(key)
        elif key_type == "zset":
            members = await self.zrange(key, 0, -1, withscores=True)
            value = [m.to_dict() for m in members if isinstance(m, ScoredMember)]

        return KeyEntry(key=key, type=key_type, value=value, ttl=ttl_ms)

    async def execute(self, *tokens: str) -> Any:
        return await self._run(self._require_client().execute_command(*tokens))
