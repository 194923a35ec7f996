"""
Splits a raw command line into tokens.

The scanner is a two-state machine: ``NORMAL`` and ``IN_QUOTE``. Quote
characters open and close a quoted run and are never part of the token; a
quote of the other kind inside a quoted run is literal. Spaces outside quotes
separate tokens and collapse when repeated.
"""

from __future__ import annotations

from enum import Enum

from redis_console.core.common.exceptions import UnclosedQuoteError

QUOTE_CHARS = ('"', "'")
SEPARATOR = " "


class ScanState(Enum):
    NORMAL = "normal"
    IN_QUOTE = "in_quote"


class Tokenizer:
    """Finite-state scanner over a single command line."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        self.state = ScanState.NORMAL
        self.quote_char: str | None = None
        self._tokens: list[str] = []
        self._current: list[str] = []
        # True once a token has begun, even if it is still empty (e.g. "")
        self._started = False

    def _flush(self) -> None:
        if self._started:
            self._tokens.append("".join(self._current))
        self._current = []
        self._started = False

    def feed(self, char: str) -> None:
        """Advance the scanner by one character."""
        if self.state is ScanState.NORMAL:
            if char in QUOTE_CHARS:
                self.state = ScanState.IN_QUOTE
                self.quote_char = char
                self._started = True
            elif char == SEPARATOR:
                self._flush()
            else:
                self._current.append(char)
                self._started = True
            return

        if char == self.quote_char:
            self.state = ScanState.NORMAL
            self.quote_char = None
        else:
            self._current.append(char)

    def finish(self) -> list[str]:
        """Close the scan and return the tokens.

        Raises:
            UnclosedQuoteError: If the input ended inside a quoted run.
        """
        if self.state is ScanState.IN_QUOTE:
            quote_char = self.quote_char
            self.reset()
            raise UnclosedQuoteError(quote_char=quote_char)
        self._flush()
        tokens = self._tokens
        self.reset()
        return tokens

    def tokenize(self, line: str) -> list[str]:
        self.reset()
        for char in line:
            self.feed(char)
        return self.finish()


def tokenize(line: str) -> list[str]:
    """
    Tokenize a command line, honoring single and double quotes.

    Args:
        line: The raw command line.

    Returns:
        The ordered tokens; an empty list for a blank line.

    Raises:
        UnclosedQuoteError: If a quoted run is never closed.
    """
    return Tokenizer().tokenize(line)
