from .dispatcher import CommandDispatcher, CommandEntry, DEFAULT_REGISTRY
from .exceptions import (
    ParseError,
    InvalidCommandFormatError,
    UnknownCommandError,
    ArgumentParseError,
)
from .tokenizer import ArgumentMultimap, tokenize

__all__ = [
    "CommandDispatcher",
    "CommandEntry",
    "DEFAULT_REGISTRY",
    "ParseError",
    "InvalidCommandFormatError",
    "UnknownCommandError",
    "ArgumentParseError",
    "ArgumentMultimap",
    "tokenize",
]
