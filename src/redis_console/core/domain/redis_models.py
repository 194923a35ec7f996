"""
API and domain models exchanged over the HTTP boundary.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, StrictFloat, StrictInt, StrictStr

from redis_console.core.interfaces.model_bases import DomainModel


class KeyEntry(DomainModel):
    """A key together with its type, value and remaining TTL."""

    key: str
    type: str
    value: Any = None
    # Milliseconds; -1 without expiry, -2 when the key is missing
    ttl: int = -1


class CommandRequest(DomainModel):
    """A raw command line, optionally with extra pre-split arguments."""

    command: str
    # Strings and numbers only; each is appended as str(arg)
    args: list[StrictStr | StrictInt | StrictFloat] | None = None


class SetKeyRequest(DomainModel):
    key: str = Field(min_length=1)
    value: Any
    # Milliseconds; 0 or less means no expiry
    ttl: int = 0


class ExpireRequest(DomainModel):
    key: str = Field(min_length=1)
    seconds: int


class MessageResponse(DomainModel):
    message: str
