"""
A decorator-based command registry.

Handler modules register their commands at import time; ``build_command_table``
imports every handler module and freezes the result into a read-only mapping.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
from collections.abc import Callable, Mapping
from types import MappingProxyType

from redis_console.core.commands.command import ArgSpec, CommandSpec, StoreOperation

logger = logging.getLogger(__name__)

HANDLERS_PACKAGE = "redis_console.core.commands.handlers"

_registry: dict[str, CommandSpec] = {}


def command(
    name: str,
    *params: ArgSpec,
    min_args: int | None = None,
    max_args: int | None = -1,
    summary: str = "",
) -> Callable[[StoreOperation], StoreOperation]:
    """
    A decorator to register a store operation as a command.

    Args:
        name: The name of the command to register.
        params: Positional argument specs.
        min_args: Minimum argument count; defaults to ``len(params)``.
        max_args: Maximum argument count; defaults to ``len(params)``, or
            unbounded when the last param is variadic. Pass None for unbounded.
        summary: One-line description of the command.

    Returns:
        A decorator that registers the operation.
    """
    key = name.lower()
    variadic = bool(params) and params[-1].variadic
    if any(p.variadic for p in params[:-1]):
        raise ValueError(f"Command '{key}': only the last argument may be variadic.")
    lower = len(params) if min_args is None else min_args
    if max_args == -1:
        upper = None if variadic else len(params)
    else:
        upper = max_args

    def decorator(func: StoreOperation) -> StoreOperation:
        if key in _registry:
            raise ValueError(f"Command '{key}' is already registered.")
        _registry[key] = CommandSpec(
            name=key,
            params=tuple(params),
            min_args=lower,
            max_args=upper,
            operation=func,
            summary=summary or (func.__doc__ or "").strip().split("\n")[0],
        )
        return func

    return decorator


def get_command_spec(name: str) -> CommandSpec | None:
    """
    Gets the spec for a given command name.

    Args:
        name: The name of the command, in any case.

    Returns:
        The command spec, or None if not found.
    """
    return _registry.get(name.lower())


def get_all_commands() -> dict[str, CommandSpec]:
    """
    Gets all registered command specs.

    Returns:
        A dictionary of command names to their specs.
    """
    return _registry.copy()


def _import_command_handlers() -> None:
    """Import every handler module so decorator registration runs."""
    package = importlib.import_module(HANDLERS_PACKAGE)
    for m in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{HANDLERS_PACKAGE}.{m.name}")


def build_command_table() -> Mapping[str, CommandSpec]:
    """
    Build the read-only command table used by the dispatcher.

    Returns:
        An immutable mapping of lower-case command names to specs.
    """
    _import_command_handlers()
    table = MappingProxyType(dict(_registry))
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Command table built with %d commands: %s", len(table), sorted(table))
    return table
