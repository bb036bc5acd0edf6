# bizbook/logic/commands/client.py

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional, Tuple

from bizbook.messages import MESSAGE_LISTED_OVERVIEW
from bizbook.model.book import BusinessBook
from bizbook.model.types import Client

from .base import Command, CommandResult, get_displayed
from .exceptions import CommandError

MESSAGE_DUPLICATE_CLIENT = "This client already exists in the book"
MESSAGE_REVENUE_CLASH = "Another revenue record already exists for this phone at the same slot"


def name_contains_keywords(keywords: Tuple[str, ...]):
    """Predicate: any keyword matches a whole word of the client's name, ignoring case."""
    lowered = {k.lower() for k in keywords}

    def predicate(client: Client) -> bool:
        return any(word.lower() in lowered for word in client.name.split())

    return predicate


@dataclass(frozen=True)
class AddClientCommand(Command):
    COMMAND_WORD = "addcli"
    MESSAGE_USAGE = (
        "addcli: Adds a client to the book. "
        "Parameters: n/NAME p/PHONE [e/EMAIL] [t/TAG]...\n"
        "Example: addcli n/John Doe p/98765432 e/johnd@example.com t/regular"
    )

    client: Client

    def execute(self, book: BusinessBook) -> CommandResult:
        if book.clients.contains(self.client):
            raise CommandError(MESSAGE_DUPLICATE_CLIENT)
        book.clients.add(self.client)
        return CommandResult(f"New client added: {self.client}")


@dataclass(frozen=True)
class EditClientDescriptor:
    """Fields to change on a client. None means leave as is, an empty email removes it."""
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    tags: Optional[FrozenSet[str]] = None

    def updates(self) -> Dict[str, Any]:
        changes = {k: v for k, v in vars(self).items() if v is not None}
        if changes.get("email") == "":
            changes["email"] = None
        return changes

    def is_any_field_edited(self) -> bool:
        return bool(self.updates())


@dataclass(frozen=True)
class EditClientCommand(Command):
    COMMAND_WORD = "editcli"
    MESSAGE_USAGE = (
        "editcli: Edits the client identified by the index number used in the displayed client list. "
        "Existing values will be overwritten by the input values; t/ replaces all tags, an empty e/ or t/ removes them.\n"
        "Parameters: INDEX (must be a positive integer) [n/NAME] [p/PHONE] [e/EMAIL] [t/TAG]...\n"
        "Example: editcli 1 p/91234567 e/johndoe@example.com"
    )

    index: int
    descriptor: EditClientDescriptor = field(default_factory=EditClientDescriptor)

    def execute(self, book: BusinessBook) -> CommandResult:
        target: Client = get_displayed(book.clients, self.index, "client")
        edited = target.model_copy(update=self.descriptor.updates())

        if not target.is_same(edited) and book.clients.contains(edited):
            raise CommandError(MESSAGE_DUPLICATE_CLIENT)

        revenues = [(r, r.model_copy(update={"client": edited})) for r in book.revenues_of_client(target)]
        for revenue, moved in revenues:
            if not revenue.is_same(moved) and book.revenues.contains(moved):
                raise CommandError(MESSAGE_REVENUE_CLASH)

        book.clients.set_item(target, edited)
        # Appointments and revenue keep pointing at the client, under its new details.
        for appointment in book.appointments_of_client(target):
            book.appointments.set_item(appointment, appointment.model_copy(update={"client": edited}))
        for revenue, moved in revenues:
            book.revenues.set_item(revenue, moved)
        book.clients.update_filter(None)
        return CommandResult(f"Edited client: {edited}")


@dataclass(frozen=True)
class DeleteClientCommand(Command):
    COMMAND_WORD = "deletecli"
    MESSAGE_USAGE = (
        "deletecli: Deletes the client identified by the index number used in the displayed client list, "
        "together with their appointments.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: deletecli 1"
    )

    index: int

    def execute(self, book: BusinessBook) -> CommandResult:
        target: Client = get_displayed(book.clients, self.index, "client")
        for appointment in book.appointments_of_client(target):
            book.appointments.remove(appointment)
        book.clients.remove(target)
        return CommandResult(f"Deleted client: {target}")


@dataclass(frozen=True)
class FindClientCommand(Command):
    COMMAND_WORD = "findcli"
    MESSAGE_USAGE = (
        "findcli: Finds all clients whose names contain any of the given keywords (case-insensitive).\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: findcli alice bob"
    )

    keywords: Tuple[str, ...]

    def execute(self, book: BusinessBook) -> CommandResult:
        book.clients.update_filter(name_contains_keywords(self.keywords))
        count = len(book.clients.filtered())
        return CommandResult(MESSAGE_LISTED_OVERVIEW.format(count=count, kind="clients"), collection="clients")


@dataclass(frozen=True)
class ListClientCommand(Command):
    COMMAND_WORD = "listcli"
    MESSAGE_USAGE = "listcli: Lists all clients."

    def execute(self, book: BusinessBook) -> CommandResult:
        book.clients.update_filter(None)
        return CommandResult("Listed all clients", collection="clients")


@dataclass(frozen=True)
class ClearClientCommand(Command):
    COMMAND_WORD = "clearcli"
    MESSAGE_USAGE = "clearcli: Deletes all clients and their appointments."

    def execute(self, book: BusinessBook) -> CommandResult:
        book.appointments.clear()
        book.clients.clear()
        return CommandResult("Client list has been cleared!")
