"""Command interpreter: tokenizer, command table and dispatcher."""

from redis_console.core.commands.command import ArgSpec, ArgType, CommandSpec
from redis_console.core.commands.dispatcher import Dispatcher
from redis_console.core.commands.registry import build_command_table, command
from redis_console.core.commands.tokenizer import Tokenizer, tokenize

__all__ = [
    "ArgSpec",
    "ArgType",
    "CommandSpec",
    "Dispatcher",
    "Tokenizer",
    "build_command_table",
    "command",
    "tokenize",
]
