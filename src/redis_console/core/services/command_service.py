from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from redis_console.core.commands.dispatcher import Dispatcher
from redis_console.core.commands.tokenizer import tokenize
from redis_console.core.common.exceptions import UnclosedQuoteError
from redis_console.core.common.logging_utils import get_logger
from redis_console.core.domain.command_results import CommandResult

logger = get_logger(__name__)


class CommandService:
    """
    Runs a raw command line through the tokenizer and the dispatcher.
    """

    def __init__(self, dispatcher: Dispatcher) -> None:
        """
        Initializes the command service.

        Args:
            dispatcher: The dispatcher tokens are routed to.
        """
        self.dispatcher = dispatcher

    async def execute(
        self, line: str, extra_args: Sequence[Any] | None = None
    ) -> CommandResult:
        """
        Executes one command line.

        Args:
            line: The raw command line as typed by the user.
            extra_args: Pre-split arguments appended after the line's tokens,
                each converted with ``str``.

        Returns:
            The command result. Tokenization errors are returned as failed
            results and never reach the dispatcher.
        """
        try:
            tokens = tokenize(line)
        except UnclosedQuoteError as exc:
            logger.info("Command rejected", error_kind=exc.kind.value, reason=exc.message)
            return CommandResult.from_exception(exc)

        if extra_args:
            tokens.extend(str(arg) for arg in extra_args)

        result = await self.dispatcher.dispatch(tokens)
        if result.success:
            logger.info("Command executed", command=result.name, kind=result.value.kind.value)  # type: ignore[union-attr]
        else:
            logger.info(
                "Command failed",
                command=result.name,
                error_kind=result.error.kind.value,  # type: ignore[union-attr]
                reason=result.message,
            )
        return result
