# bizbook/logic/commands/base.py
"""
Command layer. A Command is the only way to read or mutate the BusinessBook
from user input: parsers build them, the LogicManager executes them.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from bizbook.messages import MESSAGE_INDEX_OUT_OF_RANGE
from bizbook.model.book import BusinessBook, Collection

from .exceptions import CommandError


@dataclass(frozen=True)
class CommandResult:
    feedback_to_user: str
    show_help: bool = False
    exit: bool = False
    # Name of the collection whose displayed list should be shown, if any.
    collection: Optional[str] = None


@dataclass(frozen=True)
class Command(ABC):
    """Base class for all commands."""

    COMMAND_WORD: ClassVar[str] = ""
    MESSAGE_USAGE: ClassVar[str] = ""

    @abstractmethod
    def execute(self, book: BusinessBook) -> CommandResult:
        ...


def get_displayed(collection: Collection, index: int, kind: str):
    """Resolves a one-based index against the displayed list of `collection`."""
    displayed: Tuple = collection.filtered()
    if index < 1 or index > len(displayed):
        raise CommandError(MESSAGE_INDEX_OUT_OF_RANGE.format(kind=kind, size=len(displayed)))
    return displayed[index - 1]
