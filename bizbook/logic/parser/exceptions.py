# bizbook/logic/parser/exceptions.py

from typing import Optional

from bizbook.errors import BizbookError
from bizbook.messages import MESSAGE_INVALID_COMMAND_FORMAT, MESSAGE_UNKNOWN_COMMAND


class ParseError(BizbookError):
    """User input could not be turned into a Command."""
    pass


class InvalidCommandFormatError(ParseError):
    """The input did not even split into a command word and its arguments."""

    def __init__(self, usage: str):
        super().__init__(MESSAGE_INVALID_COMMAND_FORMAT.format(usage=usage))
        self.usage = usage


class UnknownCommandError(ParseError):
    def __init__(self, command_word: str):
        super().__init__(MESSAGE_UNKNOWN_COMMAND)
        self.command_word = command_word


class ArgumentParseError(ParseError):
    """
    The arguments of a known command are invalid. The message always ends
    with the usage of that command.
    """

    def __init__(self, usage: str, reason: Optional[str] = None):
        if reason is None:
            message = MESSAGE_INVALID_COMMAND_FORMAT.format(usage=usage)
        else:
            message = f"{reason}\n{usage}"
        super().__init__(message)
        self.usage = usage
        self.reason = reason
