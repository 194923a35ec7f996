from __future__ import annotations

import fnmatch
from collections.abc import Iterator
from typing import Any

import pytest
from fastapi.testclient import TestClient

from redis_console.core.app.application_factory import build_app
from redis_console.core.commands.dispatcher import Dispatcher
from redis_console.core.common.exceptions import StoreError, StoreNotConnectedError
from redis_console.core.config.app_config import AppConfig, StoreConfig
from redis_console.core.domain.command_results import ScoredMember
from redis_console.core.domain.redis_models import KeyEntry
from redis_console.core.interfaces.store_client_interface import IStoreClient
from redis_console.core.services.command_service import CommandService


def _redis_range(length: int, start: int, stop: int) -> range:
    """Translate inclusive Redis indices (negative from the end) into a range."""
    if start < 0:
        start = max(length + start, 0)
    if stop < 0:
        stop = length + stop
    stop = min(stop, length - 1)
    if start > stop:
        return range(0)
    return range(start, stop + 1)


class InMemoryStoreClient(IStoreClient):
    """In-memory store double following Redis semantics for the covered verbs.

    Every call is recorded in ``calls``. Setting ``fail_with`` makes the next
    store call raise ``StoreError`` with that message.
    """

    def __init__(self, connected: bool = True) -> None:
        self.data: dict[str, Any] = {}
        self.expiry: dict[str, int] = {}
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.fail_with: str | None = None
        self.connected_config: StoreConfig | None = StoreConfig() if connected else None

    @property
    def is_connected(self) -> bool:
        return self.connected_config is not None

    def _record(self, name: str, *args: Any) -> None:
        self.calls.append((name, args))
        if self.connected_config is None and name not in ("connect", "disconnect"):
            raise StoreNotConnectedError()
        if self.fail_with is not None:
            message, self.fail_with = self.fail_with, None
            raise StoreError(message)

    def _typed(self, key: str, kind: type) -> Any:
        value = self.data.get(key)
        if value is not None and not isinstance(value, kind):
            raise StoreError(
                "WRONGTYPE Operation against a key holding the wrong kind of value"
            )
        return value

    async def connect(self, config: StoreConfig) -> None:
        self._record("connect", config)
        self.connected_config = config

    async def disconnect(self) -> None:
        self._record("disconnect")
        self.connected_config = None

    async def keys(self, pattern: str = "*") -> list[str]:
        self._record("keys", pattern)
        return [k for k in self.data if fnmatch.fnmatchcase(k, pattern)]

    async def get(self, key: str) -> str | None:
        self._record("get", key)
        return self._typed(key, str)

    async def set(self, key: str, value: Any, ttl_ms: int = 0) -> None:
        self._record("set", key, value, ttl_ms)
        self.data[key] = str(value)
        if ttl_ms > 0:
            self.expiry[key] = ttl_ms // 1000

    async def delete(self, *keys: str) -> int:
        self._record("delete", *keys)
        removed = 0
        for key in keys:
            if self.data.pop(key, None) is not None:
                removed += 1
            self.expiry.pop(key, None)
        return removed

    async def lpush(self, key: str, *values: str) -> int:
        self._record("lpush", key, *values)
        items = self._typed(key, list) or []
        for value in values:
            items.insert(0, value)
        self.data[key] = items
        return len(items)

    async def rpush(self, key: str, *values: str) -> int:
        self._record("rpush", key, *values)
        items = self._typed(key, list) or []
        items.extend(values)
        self.data[key] = items
        return len(items)

    async def lpop(self, key: str) -> str | None:
        self._record("lpop", key)
        items = self._typed(key, list)
        if not items:
            return None
        value = items.pop(0)
        if not items:
            del self.data[key]
        return value

    async def rpop(self, key: str) -> str | None:
        self._record("rpop", key)
        items = self._typed(key, list)
        if not items:
            return None
        value = items.pop()
        if not items:
            del self.data[key]
        return value

    async def lrange(self, key: str, start: int, stop: int) -> list[str]:
        self._record("lrange", key, start, stop)
        items = self._typed(key, list) or []
        return [items[i] for i in _redis_range(len(items), start, stop)]

    async def llen(self, key: str) -> int:
        self._record("llen", key)
        return len(self._typed(key, list) or [])

    async def smembers(self, key: str) -> list[str]:
        self._record("smembers", key)
        return sorted(self._typed(key, set) or set())

    async def hgetall(self, key: str) -> dict[str, str]:
        self._record("hgetall", key)
        return dict(self._typed(key, dict) or {})

    async def zrange(
        self, key: str, start: int, stop: int, withscores: bool = False
    ) -> list[str] | list[ScoredMember]:
        self._record("zrange", key, start, stop, withscores)
        ranked = sorted(
            (self._typed(key, ZSet) or ZSet()).items(), key=lambda kv: (kv[1], kv[0])
        )
        selected = [ranked[i] for i in _redis_range(len(ranked), start, stop)]
        if withscores:
            return [ScoredMember(member, score) for member, score in selected]
        return [member for member, _ in selected]

    @staticmethod
    def _type_name(value: Any) -> str:
        if value is None:
            return "none"
        return {str: "string", list: "list", set: "set", dict: "hash", ZSet: "zset"}[
            type(value)
        ]

    async def type(self, key: str) -> str:
        self._record("type", key)
        return self._type_name(self.data.get(key))

    async def ttl(self, key: str) -> int:
        self._record("ttl", key)
        if key not in self.data:
            return -2
        return self.expiry.get(key, -1)

    async def expire(self, key: str, seconds: int) -> bool:
        self._record("expire", key, seconds)
        if key not in self.data:
            return False
        self.expiry[key] = seconds
        return True

    async def get_key(self, key: str) -> KeyEntry:
        self._record("get_key", key)
        if key not in self.data:
            return KeyEntry(key=key, type="none", value=None, ttl=-2)
        value = self.data[key]
        key_type = self._type_name(value)
        if isinstance(value, ZSet):
            value = [{"member": m, "score": s} for m, s in sorted(value.items())]
        elif isinstance(value, set):
            value = sorted(value)
        ttl = self.expiry[key] * 1000 if key in self.expiry else -1
        return KeyEntry(key=key, type=key_type, value=value, ttl=ttl)

    async def execute(self, *tokens: str) -> Any:
        self._record("execute", *tokens)
        verb = tokens[0].upper()
        if verb == "PING":
            return "PONG" if len(tokens) == 1 else tokens[1]
        if verb == "SET" and len(tokens) == 3:
            self.data[tokens[1]] = tokens[2]
            return True
        if verb == "DBSIZE":
            return len(self.data)
        raise StoreError(
            f"ERR unknown command '{tokens[0]}', with args beginning with: "
            + " ".join(f"'{t}'" for t in tokens[1:])
        )


class ZSet(dict):
    """Sorted-set payload: member -> score."""


@pytest.fixture
def store() -> InMemoryStoreClient:
    return InMemoryStoreClient()


@pytest.fixture
def dispatcher(store: InMemoryStoreClient) -> Dispatcher:
    return Dispatcher(store)


@pytest.fixture
def command_service(dispatcher: Dispatcher) -> CommandService:
    return CommandService(dispatcher)


@pytest.fixture
def zset_type() -> type[ZSet]:
    return ZSet


@pytest.fixture
def test_client(store: InMemoryStoreClient) -> Iterator[TestClient]:
    """A TestClient over an app wired to the in-memory store."""
    app = build_app(AppConfig(), store=store)
    client = TestClient(app)
    with client:
        yield client


@pytest.fixture
def offline_store() -> InMemoryStoreClient:
    return InMemoryStoreClient(connected=False)
