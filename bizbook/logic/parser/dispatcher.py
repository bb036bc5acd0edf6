# bizbook/logic/parser/dispatcher.py
"""
Turns one line of user input into a Command.

The dispatcher splits the line into a command word and the rest, looks the
word up in a fixed registry and either builds the command directly (commands
without arguments) or hands the rest to that command's parser.
"""

import logging
import re
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Type

from bizbook.logic.commands import (
    Command,
    AddClientCommand, EditClientCommand, DeleteClientCommand, FindClientCommand,
    ListClientCommand, ClearClientCommand,
    AddServiceCommand, EditServiceCommand, DeleteServiceCommand, FindServiceCommand,
    ListServiceCommand, ClearServiceCommand,
    AddExpenseCommand, EditExpenseCommand, DeleteExpenseCommand, FindExpenseCommand,
    ListExpenseCommand, ClearExpenseCommand,
    AddAppointmentCommand, EditAppointmentCommand, DeleteAppointmentCommand,
    DoneAppointmentCommand, UnDoneAppointmentCommand, FindAppointmentCommand,
    ListAppointmentCommand, ClearAppointmentCommand,
    FindRevenueCommand, ListRevenueCommand, ClearRevenueCommand,
    HelpCommand, ExitCommand, ProfitCommand,
)
from bizbook.model.book import ReadOnlyBook

from . import appointment, client, expense, revenue, service
from .exceptions import InvalidCommandFormatError, UnknownCommandError

logger = logging.getLogger(__name__)

ArgumentParser = Callable[[str, Optional[ReadOnlyBook]], Command]

BASIC_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)


@dataclass(frozen=True)
class CommandEntry:
    """
    One registered command. Without a parser the command takes no arguments
    and is built directly, whatever follows the command word.
    """
    command_class: Type[Command]
    parser: Optional[ArgumentParser] = None

    @property
    def command_word(self) -> str:
        return self.command_class.COMMAND_WORD

    @property
    def takes_arguments(self) -> bool:
        return self.parser is not None


# --- Registry ---

CLIENT_COMMANDS: Tuple[CommandEntry, ...] = (
    CommandEntry(AddClientCommand, client.parse_add_client),
    CommandEntry(EditClientCommand, client.parse_edit_client),
    CommandEntry(DeleteClientCommand, client.parse_delete_client),
    CommandEntry(FindClientCommand, client.parse_find_client),
    CommandEntry(ListClientCommand),
    CommandEntry(ClearClientCommand),
)

SERVICE_COMMANDS: Tuple[CommandEntry, ...] = (
    CommandEntry(AddServiceCommand, service.parse_add_service),
    CommandEntry(EditServiceCommand, service.parse_edit_service),
    CommandEntry(DeleteServiceCommand, service.parse_delete_service),
    CommandEntry(FindServiceCommand, service.parse_find_service),
    CommandEntry(ListServiceCommand),
    CommandEntry(ClearServiceCommand),
)

EXPENSE_COMMANDS: Tuple[CommandEntry, ...] = (
    CommandEntry(AddExpenseCommand, expense.parse_add_expense),
    CommandEntry(EditExpenseCommand, expense.parse_edit_expense),
    CommandEntry(DeleteExpenseCommand, expense.parse_delete_expense),
    CommandEntry(FindExpenseCommand, expense.parse_find_expense),
    CommandEntry(ListExpenseCommand),
    CommandEntry(ClearExpenseCommand),
)

APPOINTMENT_COMMANDS: Tuple[CommandEntry, ...] = (
    CommandEntry(AddAppointmentCommand, appointment.parse_add_appointment),
    CommandEntry(EditAppointmentCommand, appointment.parse_edit_appointment),
    CommandEntry(DeleteAppointmentCommand, appointment.parse_delete_appointment),
    CommandEntry(DoneAppointmentCommand, appointment.parse_done_appointment),
    CommandEntry(UnDoneAppointmentCommand, appointment.parse_undone_appointment),
    CommandEntry(FindAppointmentCommand, appointment.parse_find_appointment),
    CommandEntry(ListAppointmentCommand),
    CommandEntry(ClearAppointmentCommand),
)

REVENUE_COMMANDS: Tuple[CommandEntry, ...] = (
    CommandEntry(FindRevenueCommand, revenue.parse_find_revenue),
    CommandEntry(ListRevenueCommand),
    CommandEntry(ClearRevenueCommand),
)

GENERAL_COMMANDS: Tuple[CommandEntry, ...] = (
    CommandEntry(ProfitCommand, revenue.parse_profit),
    CommandEntry(HelpCommand),
    CommandEntry(ExitCommand),
)

DEFAULT_REGISTRY: Tuple[CommandEntry, ...] = (
    CLIENT_COMMANDS
    + SERVICE_COMMANDS
    + EXPENSE_COMMANDS
    + APPOINTMENT_COMMANDS
    + REVENUE_COMMANDS
    + GENERAL_COMMANDS
)


class CommandDispatcher:
    """
    Holds no state besides the registry (and an optional read-only view of the
    book used to bounds-check indexes), so one instance serves every input line.
    """

    def __init__(
        self,
        registry: Iterable[CommandEntry] = DEFAULT_REGISTRY,
        lookup: Optional[ReadOnlyBook] = None,
    ):
        self._entries: Dict[str, CommandEntry] = {}
        for entry in registry:
            if entry.command_word in self._entries:
                raise ValueError(f"Duplicate command word: {entry.command_word}")
            self._entries[entry.command_word] = entry
        self._lookup = lookup

    def command_words(self) -> List[str]:
        return list(self._entries)

    def usages(self) -> List[str]:
        return [entry.command_class.MESSAGE_USAGE for entry in self._entries.values()]

    def parse_command(self, user_input: str) -> Command:
        """
        Parses user input into a command for execution.
        Raises a ParseError subclass if it cannot.
        """
        matcher = BASIC_COMMAND_FORMAT.fullmatch(user_input.strip())
        if matcher is None:
            raise InvalidCommandFormatError(HelpCommand.MESSAGE_USAGE)

        command_word = matcher.group("command_word")
        arguments = matcher.group("arguments")

        entry = self._entries.get(command_word)
        if entry is None:
            logger.debug(f"Unknown command word: {command_word}")
            raise UnknownCommandError(command_word)

        if not entry.takes_arguments:
            return entry.command_class()

        logger.debug(f"Dispatching '{command_word}' with arguments '{arguments}'")
        return entry.parser(arguments, self._lookup)
