"""
Core data structures for the command system.
"""

from __future__ import annotations

import re
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any

from redis_console.core.common.exceptions import InvalidArgumentsError

if TYPE_CHECKING:
    from redis_console.core.interfaces.store_client_interface import IStoreClient

StoreOperation = Callable[..., Awaitable[Any]]

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class ArgType(str, Enum):
    """Coercions applied to a positional argument."""

    STRING = "string"
    INTEGER = "integer"


@dataclass(frozen=True)
class ArgSpec:
    """
    Describes one positional argument.

    Attributes:
        name: Name used in usage strings and error messages.
        type: Coercion applied to the raw token.
        choices: Case-insensitive literals the token must match, if any.
        variadic: The argument repeats for all remaining tokens.
    """

    name: str
    type: ArgType = ArgType.STRING
    choices: tuple[str, ...] = ()
    variadic: bool = False

    def coerce(self, command_name: str, raw: str) -> Any:
        if self.choices:
            for choice in self.choices:
                if raw.lower() == choice.lower():
                    return choice
            allowed = ", ".join(self.choices)
            raise InvalidArgumentsError(
                f"{command_name} {self.name} must be one of: {allowed}",
                command_name=command_name,
                details={"argument": self.name, "value": raw},
            )
        if self.type is ArgType.INTEGER:
            if not _INTEGER_PATTERN.fullmatch(raw):
                raise InvalidArgumentsError(
                    f"invalid {self.name} index for {command_name}: "
                    f"'{raw}' is not an integer",
                    command_name=command_name,
                    details={"argument": self.name, "value": raw},
                )
            return int(raw)
        return raw


@dataclass(frozen=True)
class CommandSpec:
    """
    Static contract for one command.

    Attributes:
        name: Lower-case command name.
        params: Positional argument specs; only the last may be variadic.
        min_args: Minimum number of arguments after the command name.
        max_args: Maximum number of arguments, or None when unbounded.
        operation: Coroutine function called as ``operation(store, *args)``.
        summary: One-line description.
    """

    name: str
    params: tuple[ArgSpec, ...]
    min_args: int
    max_args: int | None
    operation: StoreOperation
    summary: str = ""

    @property
    def usage(self) -> str:
        parts = [self.name.upper()]
        for index, param in enumerate(self.params):
            label = param.choices[0] if param.choices else param.name
            if param.variadic:
                label = f"{label} [{label} ...]"
            if index >= self.min_args:
                label = f"[{label}]"
            parts.append(label)
        return " ".join(parts)

    def _arity_message(self) -> str:
        plural = "argument" if self.min_args == 1 else "arguments"
        if self.max_args is None:
            return f"{self.name} requires at least {self.min_args} {plural}"
        if self.max_args == self.min_args:
            return f"{self.name} requires exactly {self.min_args} {plural}"
        return (
            f"{self.name} requires between {self.min_args} and "
            f"{self.max_args} arguments"
        )

    def _param_for(self, index: int) -> ArgSpec:
        if index < len(self.params):
            return self.params[index]
        return self.params[-1]

    def validate(self, args: Sequence[str]) -> list[Any]:
        """
        Check arity and coerce each argument.

        Args:
            args: Tokens following the command name.

        Returns:
            The coerced arguments, in order.

        Raises:
            InvalidArgumentsError: On arity or type violations.
        """
        count = len(args)
        if count < self.min_args or (
            self.max_args is not None and count > self.max_args
        ):
            raise InvalidArgumentsError(
                self._arity_message(),
                command_name=self.name,
                details={"usage": self.usage, "received": count},
            )
        return [
            self._param_for(index).coerce(self.name, raw)
            for index, raw in enumerate(args)
        ]

    async def invoke(self, store: IStoreClient, args: Sequence[Any]) -> Any:
        return await self.operation(store, *args)
