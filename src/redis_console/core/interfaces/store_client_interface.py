"""Interface for the key/value store the console drives."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from redis_console.core.config.app_config import StoreConfig
    from redis_console.core.domain.command_results import ScoredMember
    from redis_console.core.domain.redis_models import KeyEntry


class IStoreClient(ABC):
    """
    Store client contract.

    Implementations raise ``StoreError`` for every store-level failure, with
    the store's message unmodified, and ``StoreNotConnectedError`` when used
    before ``connect``. They must be safe for concurrent use.
    """

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """Whether a connection has been established."""

    @abstractmethod
    async def connect(self, config: StoreConfig) -> None:
        """Connect to the store and verify the connection."""

    @abstractmethod
    async def disconnect(self) -> None:
        """Close the connection, if any."""

    @abstractmethod
    async def keys(self, pattern: str = "*") -> list[str]:
        pass

    @abstractmethod
    async def get(self, key: str) -> str | None:
        pass

    @abstractmethod
    async def set(self, key: str, value: Any, ttl_ms: int = 0) -> None:
        """Set a string value; a positive ``ttl_ms`` sets an expiry."""

    @abstractmethod
    async def delete(self, *keys: str) -> int:
        pass

    @abstractmethod
    async def lpush(self, key: str, *values: str) -> int:
        pass

    @abstractmethod
    async def rpush(self, key: str, *values: str) -> int:
        pass

    @abstractmethod
    async def lpop(self, key: str) -> str | None:
        pass

    @abstractmethod
    async def rpop(self, key: str) -> str | None:
        pass

    @abstractmethod
    async def lrange(self, key: str, start: int, stop: int) -> list[str]:
        pass

    @abstractmethod
    async def llen(self, key: str) -> int:
        pass

    @abstractmethod
    async def smembers(self, key: str) -> list[str]:
        pass

    @abstractmethod
    async def hgetall(self, key: str) -> dict[str, str]:
        pass

    @abstractmethod
    async def zrange(
        self, key: str, start: int, stop: int, withscores: bool = False
    ) -> list[str] | list[ScoredMember]:
        pass

    @abstractmethod
    async def type(self, key: str) -> str:
        pass

    @abstractmethod
    async def ttl(self, key: str) -> int:
        """Seconds to live; -1 without expiry, -2 when the key is missing."""

    @abstractmethod
    async def expire(self, key: str, seconds: int) -> bool:
        pass

    @abstractmethod
    async def get_key(self, key: str) -> KeyEntry:
        """Fetch a key's type, TTL in milliseconds and value in one call."""

    @abstractmethod
    async def execute(self, *tokens: str) -> Any:
        """Run an arbitrary command verbatim and return the raw reply."""
