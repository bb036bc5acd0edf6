# bizbook/logic/commands/service.py

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple

from bizbook.messages import MESSAGE_LISTED_OVERVIEW
from bizbook.model.book import BusinessBook
from bizbook.model.types import Service

from .base import Command, CommandResult, get_displayed
from .exceptions import CommandError


def title_or_code_matches(keywords: Tuple[str, ...]):
    lowered = {k.lower() for k in keywords}

    def predicate(service: Service) -> bool:
        if service.service_code.lower() in lowered:
            return True
        return any(word.lower() in lowered for word in service.title.split())

    return predicate


@dataclass(frozen=True)
class AddServiceCommand(Command):
    COMMAND_WORD = "addsvc"
    MESSAGE_USAGE = (
        "addsvc: Adds a service to the book. A service code is assigned automatically.\n"
        "Parameters: t/TITLE du/DURATION (hours, multiple of 0.5) a/AMOUNT\n"
        "Example: addsvc t/Interior Painting du/1.5 a/50"
    )

    title: str
    duration: Decimal
    amount: Decimal

    def execute(self, book: BusinessBook) -> CommandResult:
        service_code = book.next_service_code()
        if len(service_code) > len("SC000"):
            raise CommandError("No service codes left, delete unused services first")
        service = Service(
            service_code=service_code,
            title=self.title,
            duration=self.duration,
            amount=self.amount,
        )
        book.services.add(service)
        return CommandResult(f"New service added: {service}")


@dataclass(frozen=True)
class EditServiceDescriptor:
    title: Optional[str] = None
    duration: Optional[Decimal] = None
    amount: Optional[Decimal] = None

    def updates(self) -> Dict[str, Any]:
        return {k: v for k, v in vars(self).items() if v is not None}

    def is_any_field_edited(self) -> bool:
        return bool(self.updates())


@dataclass(frozen=True)
class EditServiceCommand(Command):
    COMMAND_WORD = "editsvc"
    MESSAGE_USAGE = (
        "editsvc: Edits the service identified by the index number used in the displayed service list. "
        "The service code cannot be changed.\n"
        "Parameters: INDEX (must be a positive integer) [t/TITLE] [du/DURATION] [a/AMOUNT]\n"
        "Example: editsvc 1 a/60"
    )

    index: int
    descriptor: EditServiceDescriptor = field(default_factory=EditServiceDescriptor)

    def execute(self, book: BusinessBook) -> CommandResult:
        target: Service = get_displayed(book.services, self.index, "service")
        edited = target.model_copy(update=self.descriptor.updates())
        book.services.set_item(target, edited)
        for appointment in book.appointments_of_service(target):
            book.appointments.set_item(appointment, appointment.model_copy(update={"service": edited}))
        book.services.update_filter(None)
        return CommandResult(f"Edited service: {edited}")


@dataclass(frozen=True)
class DeleteServiceCommand(Command):
    COMMAND_WORD = "deletesvc"
    MESSAGE_USAGE = (
        "deletesvc: Deletes the service identified by the index number used in the displayed service list, "
        "together with its appointments.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: deletesvc 1"
    )

    index: int

    def execute(self, book: BusinessBook) -> CommandResult:
        target: Service = get_displayed(book.services, self.index, "service")
        for appointment in book.appointments_of_service(target):
            book.appointments.remove(appointment)
        book.services.remove(target)
        return CommandResult(f"Deleted service: {target}")


@dataclass(frozen=True)
class FindServiceCommand(Command):
    COMMAND_WORD = "findsvc"
    MESSAGE_USAGE = (
        "findsvc: Finds all services whose title contains any of the keywords, or whose code is given.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: findsvc painting SC002"
    )

    keywords: Tuple[str, ...]

    def execute(self, book: BusinessBook) -> CommandResult:
        book.services.update_filter(title_or_code_matches(self.keywords))
        count = len(book.services.filtered())
        return CommandResult(MESSAGE_LISTED_OVERVIEW.format(count=count, kind="services"), collection="services")


@dataclass(frozen=True)
class ListServiceCommand(Command):
    COMMAND_WORD = "listsvc"
    MESSAGE_USAGE = "listsvc: Lists all services."

    def execute(self, book: BusinessBook) -> CommandResult:
        book.services.update_filter(None)
        return CommandResult("Listed all services", collection="services")


@dataclass(frozen=True)
class ClearServiceCommand(Command):
    COMMAND_WORD = "clearsvc"
    MESSAGE_USAGE = "clearsvc: Deletes all services and all appointments."

    def execute(self, book: BusinessBook) -> CommandResult:
        book.appointments.clear()
        book.services.clear()
        return CommandResult("Service list has been cleared!")
