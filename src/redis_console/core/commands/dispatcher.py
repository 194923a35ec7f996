"""
Routes tokenized commands to store operations.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from redis_console.core.commands.command import CommandSpec
from redis_console.core.commands.registry import build_command_table
from redis_console.core.common.exceptions import (
    ConsoleError,
    NoCommandError,
    UnsupportedCommandError,
)
from redis_console.core.domain.command_results import CommandResult
from redis_console.core.interfaces.store_client_interface import IStoreClient

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Maps the first token to a command spec and runs it against the store.

    Tokens naming a registered command are validated before the store is
    touched. Anything else is forwarded verbatim to ``IStoreClient.execute``
    unless pass-through is disabled. Each call makes at most one store call
    and never retries.
    """

    def __init__(
        self,
        store: IStoreClient,
        table: Mapping[str, CommandSpec] | None = None,
        allow_passthrough: bool = True,
    ) -> None:
        """
        Initializes the dispatcher.

        Args:
            store: The store client commands run against.
            table: Command table; built from the registered handlers if omitted.
            allow_passthrough: Forward unknown verbs to the store verbatim.
        """
        self.store = store
        self.table = table if table is not None else build_command_table()
        self.allow_passthrough = allow_passthrough

    async def dispatch(self, tokens: Sequence[str]) -> CommandResult:
        """
        Dispatches a token sequence.

        Args:
            tokens: The command name followed by its arguments.

        Returns:
            A successful result with the store's reply, or a failed result.
        """
        if not tokens:
            return CommandResult.from_exception(NoCommandError())

        name = tokens[0].lower()
        try:
            spec = self.table.get(name)
            if spec is not None:
                args = spec.validate(tokens[1:])
                raw = await spec.invoke(self.store, args)
            elif self.allow_passthrough:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("Forwarding unregistered command '%s' verbatim", name)
                raw = await self.store.execute(*tokens)
            else:
                raise UnsupportedCommandError(
                    f"unsupported command: {name}", command_name=name
                )
        except ConsoleError as exc:
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Command '%s' failed: %s", name, exc.message)
            return CommandResult.from_exception(exc, name=name)

        return CommandResult.ok(raw, name=name)
