"""Unit tests for the quote-aware tokenizer."""

import pytest

from redis_console.core.commands.tokenizer import ScanState, Tokenizer, tokenize
from redis_console.core.common.exceptions import ErrorKind, UnclosedQuoteError


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ('SET foo "hello world"', ["SET", "foo", "hello world"]),
        ("GET 'a b' c", ["GET", "a b", "c"]),
        ("", []),
        ("     ", []),
        ("PING", ["PING"]),
        ("  LPUSH   mylist  a   b ", ["LPUSH", "mylist", "a", "b"]),
        ('SET k ""', ["SET", "k", ""]),
        ("SET k ''", ["SET", "k", ""]),
        ('""', [""]),
        ('SET k "it\'s"', ["SET", "k", "it's"]),
        ("SET k 'say \"hi\"'", ["SET", "k", 'say "hi"']),
        ('SET k "  padded  "', ["SET", "k", "  padded  "]),
        ('SET k ab"c d"ef', ["SET", "k", "abc def"]),
        ('"a""b"', ["ab"]),
        ("SET k tab\there", ["SET", "k", "tab\there"]),
    ],
)
def test_tokenize(line: str, expected: list[str]) -> None:
    assert tokenize(line) == expected


def test_empty_quoted_string_is_distinct_from_no_token() -> None:
    assert tokenize('GET ""') == ["GET", ""]
    assert tokenize("GET ") == ["GET"]


@pytest.mark.parametrize(
    "line",
    ['SET "unterminated', "GET 'a b c", 'SET k "mixed\'', '"'],
)
def test_unclosed_quote_raises(line: str) -> None:
    with pytest.raises(UnclosedQuoteError) as exc_info:
        tokenize(line)
    assert exc_info.value.kind is ErrorKind.UNCLOSED_QUOTE
    assert exc_info.value.status_code == 400


def test_unclosed_quote_reports_quote_char() -> None:
    with pytest.raises(UnclosedQuoteError) as exc_info:
        tokenize("GET 'oops")
    assert exc_info.value.quote_char == "'"
    assert exc_info.value.details == {"quote_char": "'"}


@pytest.mark.parametrize("token", ["foo", "mylist", "-1", "key:with:colons", "a.b-c_d"])
def test_plain_token_round_trips_unchanged(token: str) -> None:
    assert tokenize(token) == [token]
    assert tokenize(" ".join(tokenize(token))) == [token]


class TestTokenizerStates:
    def test_starts_in_normal_state(self) -> None:
        scanner = Tokenizer()
        assert scanner.state is ScanState.NORMAL
        assert scanner.quote_char is None

    def test_quote_switches_state_and_same_quote_closes(self) -> None:
        scanner = Tokenizer()
        scanner.feed('"')
        assert scanner.state is ScanState.IN_QUOTE
        assert scanner.quote_char == '"'

        scanner.feed("'")
        assert scanner.state is ScanState.IN_QUOTE

        scanner.feed('"')
        assert scanner.state is ScanState.NORMAL
        assert scanner.finish() == ["'"]

    def test_finish_resets_after_error(self) -> None:
        scanner = Tokenizer()
        for char in "GET 'partial":
            scanner.feed(char)
        with pytest.raises(UnclosedQuoteError):
            scanner.finish()

        assert scanner.state is ScanState.NORMAL
        assert scanner.tokenize("GET key") == ["GET", "key"]

    def test_instance_is_reusable(self) -> None:
        scanner = Tokenizer()
        assert scanner.tokenize("a b") == ["a", "b"]
        assert scanner.tokenize("c") == ["c"]
