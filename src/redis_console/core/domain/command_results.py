"""
Command Results Domain Model

This module defines the tagged result variant returned by the command
interpreter. A result is either a success carrying a ``CommandValue`` or a
failure carrying an ``ErrorKind`` and message, never both.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from redis_console.core.common.exceptions import ConsoleError, ErrorKind


class ValueKind(str, Enum):
    """Shapes a successful command value can take."""

    NIL = "nil"
    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    LIST = "list"
    MAPPING = "mapping"
    SCORED_MEMBERS = "scored_members"


@dataclass(frozen=True)
class ScoredMember:
    """A sorted-set member paired with its score."""

    member: str
    score: float

    def to_dict(self) -> dict[str, Any]:
        return {"member": self.member, "score": self.score}


def _to_json(value: Any) -> Any:
    if isinstance(value, ScoredMember):
        return value.to_dict()
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, Mapping):
        return {_to_json(k): _to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_to_json(v) for v in value]
    return value


@dataclass(frozen=True)
class CommandValue:
    """A successful command payload tagged with its shape."""

    kind: ValueKind
    value: Any = None

    @classmethod
    def from_raw(cls, raw: Any) -> CommandValue:
        """Tag a raw store reply without altering its payload."""
        if raw is None:
            return cls(ValueKind.NIL)
        # bool is a subclass of int, so it has to be checked first
        if isinstance(raw, bool):
            return cls(ValueKind.BOOLEAN, raw)
        if isinstance(raw, int):
            return cls(ValueKind.INTEGER, raw)
        if isinstance(raw, float):
            return cls(ValueKind.FLOAT, raw)
        if isinstance(raw, (str, bytes)):
            return cls(ValueKind.STRING, raw)
        if isinstance(raw, Mapping):
            return cls(ValueKind.MAPPING, dict(raw))
        if isinstance(raw, (set, frozenset)):
            return cls(ValueKind.LIST, sorted(raw, key=str))
        if isinstance(raw, Sequence):
            items = list(raw)
            if items and all(isinstance(item, ScoredMember) for item in items):
                return cls(ValueKind.SCORED_MEMBERS, items)
            return cls(ValueKind.LIST, items)
        return cls(ValueKind.STRING, str(raw))

    def to_json(self) -> Any:
        return _to_json(self.value)


@dataclass(frozen=True)
class CommandError:
    """Failure half of a command result."""

    kind: ErrorKind
    message: str
    details: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class CommandResult:
    """
    Result of a command execution.

    Exactly one of ``value`` and ``error`` is set. Build instances with
    ``CommandResult.ok`` and ``CommandResult.fail``.
    """

    name: str = ""
    value: CommandValue | None = None
    error: CommandError | None = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("CommandResult needs exactly one of value or error")

    @property
    def success(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str:
        return self.error.message if self.error is not None else ""

    @classmethod
    def ok(cls, raw: Any, name: str = "") -> CommandResult:
        value = raw if isinstance(raw, CommandValue) else CommandValue.from_raw(raw)
        return cls(name=name, value=value)

    @classmethod
    def fail(
        cls,
        kind: ErrorKind,
        message: str,
        name: str = "",
        details: dict[str, Any] | None = None,
    ) -> CommandResult:
        return cls(name=name, error=CommandError(kind, message, details or {}))

    @classmethod
    def from_exception(cls, exc: ConsoleError, name: str = "") -> CommandResult:
        return cls.fail(exc.kind, exc.message, name=name, details=exc.details)

    def to_response(self) -> dict[str, Any]:
        """Render the result the way the HTTP boundary returns it."""
        if self.error is not None:
            return {"error": self.error.message, "kind": self.error.kind.value}
        assert self.value is not None
        return {"result": self.value.to_json(), "kind": self.value.kind.value}
