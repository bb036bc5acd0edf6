# tests/test_dispatcher.py

import pytest

from bizbook.logic.commands import (
    AddClientCommand,
    DeleteClientCommand,
    ExitCommand,
    HelpCommand,
    ListClientCommand,
)
from bizbook.logic.parser import (
    DEFAULT_REGISTRY,
    ArgumentParseError,
    CommandDispatcher,
    CommandEntry,
    InvalidCommandFormatError,
    UnknownCommandError,
)
from bizbook.messages import MESSAGE_UNKNOWN_COMMAND
from bizbook.model.book import BusinessBook

from conftest import make_client

NO_ARGUMENT_ENTRIES = [e for e in DEFAULT_REGISTRY if not e.takes_arguments]


@pytest.fixture
def dispatcher() -> CommandDispatcher:
    return CommandDispatcher()


@pytest.mark.parametrize("word", ["addx", "add", "list", "foo", "ADDCLI", "Listcli", "addcli2"])
def test_unregistered_word_is_unknown(dispatcher: CommandDispatcher, word: str):
    with pytest.raises(UnknownCommandError) as excinfo:
        dispatcher.parse_command(word + " x")
    assert str(excinfo.value) == MESSAGE_UNKNOWN_COMMAND
    assert excinfo.value.command_word == word


def test_unknown_word_wins_over_argument_errors(dispatcher: CommandDispatcher):
    """`addx n/Alice` must fail as an unknown command, not as a parser error."""
    with pytest.raises(UnknownCommandError):
        dispatcher.parse_command("addx n/Alice")


@pytest.mark.parametrize("entry", NO_ARGUMENT_ENTRIES, ids=lambda e: e.command_word)
@pytest.mark.parametrize("trailing", ["", " ", "   ", " extra words 1 n/x"])
def test_no_argument_commands_ignore_trailing_text(dispatcher: CommandDispatcher, entry: CommandEntry, trailing: str):
    command = dispatcher.parse_command(entry.command_word + trailing)
    assert type(command) is entry.command_class


def test_list_with_trailing_whitespace(dispatcher: CommandDispatcher):
    assert isinstance(dispatcher.parse_command("listcli "), ListClientCommand)
    assert isinstance(dispatcher.parse_command("   listcli"), ListClientCommand)


@pytest.mark.parametrize("user_input", ["", "   ", "\t\n"])
def test_blank_input_is_invalid_format(dispatcher: CommandDispatcher, user_input: str):
    with pytest.raises(InvalidCommandFormatError) as excinfo:
        dispatcher.parse_command(user_input)
    assert HelpCommand.MESSAGE_USAGE in str(excinfo.value)


def test_argument_command_is_delegated_to_its_parser(dispatcher: CommandDispatcher):
    command = dispatcher.parse_command("addcli n/Alice Tan p/91234567")

    assert isinstance(command, AddClientCommand)
    assert command.client == make_client(name="Alice Tan", phone="91234567")


def test_parser_failure_carries_usage(dispatcher: CommandDispatcher):
    with pytest.raises(ArgumentParseError) as excinfo:
        dispatcher.parse_command("addcli n/Alice")
    assert AddClientCommand.MESSAGE_USAGE in str(excinfo.value)


def test_dispatcher_is_reusable(dispatcher: CommandDispatcher):
    first = dispatcher.parse_command("deletecli 1")
    with pytest.raises(UnknownCommandError):
        dispatcher.parse_command("nope")
    second = dispatcher.parse_command("deletecli 1")

    assert first == second == DeleteClientCommand(1)


def test_every_default_command_word_is_registered(dispatcher: CommandDispatcher):
    words = dispatcher.command_words()
    assert len(words) == len(set(words)) == len(DEFAULT_REGISTRY)
    for word in ["addcli", "addsvc", "addexp", "addapt", "listrev", "profit", "done", "undone", "help", "exit"]:
        assert word in words


def test_usages_follow_registry(dispatcher: CommandDispatcher):
    assert dispatcher.usages() == [e.command_class.MESSAGE_USAGE for e in DEFAULT_REGISTRY]


def test_duplicate_command_word_rejected():
    with pytest.raises(ValueError, match="Duplicate command word: exit"):
        CommandDispatcher([CommandEntry(ExitCommand), CommandEntry(ExitCommand)])


def test_custom_registry_is_closed():
    dispatcher = CommandDispatcher([CommandEntry(ExitCommand)])

    assert isinstance(dispatcher.parse_command("exit"), ExitCommand)
    with pytest.raises(UnknownCommandError):
        dispatcher.parse_command("help")


class TestIndexBoundsWithLookup:
    """With a read-only view of the book, indexes are checked while parsing."""

    @pytest.fixture
    def book_with_one_client(self, book: BusinessBook) -> BusinessBook:
        book.clients.add(make_client())
        return book

    def test_index_in_range(self, book_with_one_client: BusinessBook):
        dispatcher = CommandDispatcher(lookup=book_with_one_client)
        assert dispatcher.parse_command("deletecli 1") == DeleteClientCommand(1)

    def test_index_out_of_range(self, book_with_one_client: BusinessBook):
        dispatcher = CommandDispatcher(lookup=book_with_one_client)

        with pytest.raises(ArgumentParseError) as excinfo:
            dispatcher.parse_command("deletecli 2")
        message = str(excinfo.value)
        assert "out of range (1 to 1)" in message
        assert DeleteClientCommand.MESSAGE_USAGE in message

    def test_without_lookup_only_syntax_is_checked(self):
        assert CommandDispatcher().parse_command("deletecli 99") == DeleteClientCommand(99)

    def test_bounds_follow_displayed_list(self, book_with_one_client: BusinessBook):
        book_with_one_client.clients.update_filter(lambda client: False)
        dispatcher = CommandDispatcher(lookup=book_with_one_client)

        with pytest.raises(ArgumentParseError):
            dispatcher.parse_command("deletecli 1")
