# bizbook/logic/commands/appointment.py

import datetime
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from bizbook.messages import MESSAGE_LISTED_OVERVIEW
from bizbook.model.book import BusinessBook
from bizbook.model.types import Appointment, Revenue, Service

from .base import Command, CommandResult, get_displayed
from .exceptions import CommandError

MESSAGE_DUPLICATE_APPOINTMENT = "An appointment already exists at this date and time"
MESSAGE_UNKNOWN_SERVICE = "No service with code {code} exists"
MESSAGE_ALREADY_DONE = "This appointment is already marked as done"
MESSAGE_NOT_DONE = "This appointment is not marked as done"
MESSAGE_EDIT_DONE = "A done appointment cannot be edited, mark it as undone first"
MESSAGE_REVENUE_MISSING = "No revenue record was found for this appointment"


def _require_service(book: BusinessBook, service_code: str) -> Service:
    service = book.find_service(service_code)
    if service is None:
        raise CommandError(MESSAGE_UNKNOWN_SERVICE.format(code=service_code))
    return service


@dataclass(frozen=True)
class AddAppointmentCommand(Command):
    COMMAND_WORD = "addapt"
    MESSAGE_USAGE = (
        "addapt: Adds an appointment for a client in the displayed client list.\n"
        "Parameters: c/CLIENT_INDEX s/SERVICE_CODE dt/DATE (DD-MM-YYYY) @/TIME (HHMM)\n"
        "Example: addapt c/1 s/SC000 dt/28-10-2024 @/1300"
    )

    client_index: int
    service_code: str
    date: datetime.date
    start_time: datetime.time

    def execute(self, book: BusinessBook) -> CommandResult:
        client = get_displayed(book.clients, self.client_index, "client")
        service = _require_service(book, self.service_code)
        appointment = Appointment(client=client, service=service, date=self.date, start_time=self.start_time)
        if book.appointments.contains(appointment):
            raise CommandError(MESSAGE_DUPLICATE_APPOINTMENT)
        book.appointments.add(appointment)
        return CommandResult(f"New appointment added: {appointment}")


@dataclass(frozen=True)
class EditAppointmentDescriptor:
    client_index: Optional[int] = None
    service_code: Optional[str] = None
    date: Optional[datetime.date] = None
    start_time: Optional[datetime.time] = None

    def is_any_field_edited(self) -> bool:
        return any(v is not None for v in vars(self).values())


@dataclass(frozen=True)
class EditAppointmentCommand(Command):
    COMMAND_WORD = "editapt"
    MESSAGE_USAGE = (
        "editapt: Edits the appointment identified by the index number used in the displayed appointment list.\n"
        "Parameters: INDEX (must be a positive integer) [c/CLIENT_INDEX] [s/SERVICE_CODE] [dt/DATE] [@/TIME]\n"
        "Example: editapt 1 dt/29-10-2024 @/0930"
    )

    index: int
    descriptor: EditAppointmentDescriptor = field(default_factory=EditAppointmentDescriptor)

    def execute(self, book: BusinessBook) -> CommandResult:
        target: Appointment = get_displayed(book.appointments, self.index, "appointment")
        if target.is_done:
            raise CommandError(MESSAGE_EDIT_DONE)

        updates: Dict[str, Any] = {}
        if self.descriptor.client_index is not None:
            updates["client"] = get_displayed(book.clients, self.descriptor.client_index, "client")
        if self.descriptor.service_code is not None:
            updates["service"] = _require_service(book, self.descriptor.service_code)
        if self.descriptor.date is not None:
            updates["date"] = self.descriptor.date
        if self.descriptor.start_time is not None:
            updates["start_time"] = self.descriptor.start_time
        edited = target.model_copy(update=updates)

        if not target.is_same(edited) and book.appointments.contains(edited):
            raise CommandError(MESSAGE_DUPLICATE_APPOINTMENT)

        book.appointments.set_item(target, edited)
        book.appointments.update_filter(None)
        return CommandResult(f"Edited appointment: {edited}")


@dataclass(frozen=True)
class DeleteAppointmentCommand(Command):
    COMMAND_WORD = "deleteapt"
    MESSAGE_USAGE = (
        "deleteapt: Deletes the appointment identified by the index number used in the displayed appointment list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: deleteapt 1"
    )

    index: int

    def execute(self, book: BusinessBook) -> CommandResult:
        target: Appointment = get_displayed(book.appointments, self.index, "appointment")
        book.appointments.remove(target)
        return CommandResult(f"Deleted appointment: {target}")


@dataclass(frozen=True)
class DoneAppointmentCommand(Command):
    """Marks an appointment done and books the revenue it earned."""

    COMMAND_WORD = "done"
    MESSAGE_USAGE = (
        "done: Marks the appointment identified by the index number used in the displayed appointment list "
        "as done, and records its revenue.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: done 1"
    )

    index: int

    def execute(self, book: BusinessBook) -> CommandResult:
        target: Appointment = get_displayed(book.appointments, self.index, "appointment")
        if target.is_done:
            raise CommandError(MESSAGE_ALREADY_DONE)

        revenue = Revenue.from_appointment(target)
        if book.revenues.contains(revenue):
            raise CommandError("Revenue for this appointment has already been recorded")

        edited = target.model_copy(update={"is_done": True})
        book.appointments.set_item(target, edited)
        book.revenues.add(revenue)
        return CommandResult(f"Appointment marked as done: {edited}")


@dataclass(frozen=True)
class UnDoneAppointmentCommand(Command):
    """Reverts `done`, dropping the revenue it recorded."""

    COMMAND_WORD = "undone"
    MESSAGE_USAGE = (
        "undone: Marks the appointment identified by the index number used in the displayed appointment list "
        "as not done, and removes its revenue.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: undone 1"
    )

    index: int

    def execute(self, book: BusinessBook) -> CommandResult:
        target: Appointment = get_displayed(book.appointments, self.index, "appointment")
        if not target.is_done:
            raise CommandError(MESSAGE_NOT_DONE)

        revenue = Revenue.from_appointment(target)
        if not book.revenues.contains(revenue):
            raise CommandError(MESSAGE_REVENUE_MISSING)

        edited = target.model_copy(update={"is_done": False})
        book.appointments.set_item(target, edited)
        book.revenues.remove(revenue)
        return CommandResult(f"Appointment marked as not done: {edited}")


@dataclass(frozen=True)
class FindAppointmentCommand(Command):
    COMMAND_WORD = "findapt"
    MESSAGE_USAGE = (
        "findapt: Finds all appointments matching every given criterion.\n"
        "Parameters: [n/CLIENT_NAME] [s/SERVICE_CODE] [dt/DATE] (at least one)\n"
        "Example: findapt n/Alice dt/28-10-2024"
    )

    client_name: Optional[str] = None
    service_code: Optional[str] = None
    date: Optional[datetime.date] = None

    def matches(self, appointment: Appointment) -> bool:
        if self.client_name is not None:
            words = {w.lower() for w in appointment.client.name.split()}
            if not all(k.lower() in words for k in self.client_name.split()):
                return False
        if self.service_code is not None and appointment.service.service_code != self.service_code:
            return False
        if self.date is not None and appointment.date != self.date:
            return False
        return True

    def execute(self, book: BusinessBook) -> CommandResult:
        book.appointments.update_filter(self.matches)
        count = len(book.appointments.filtered())
        return CommandResult(MESSAGE_LISTED_OVERVIEW.format(count=count, kind="appointments"), collection="appointments")


@dataclass(frozen=True)
class ListAppointmentCommand(Command):
    COMMAND_WORD = "listapt"
    MESSAGE_USAGE = "listapt: Lists all appointments."

    def execute(self, book: BusinessBook) -> CommandResult:
        book.appointments.update_filter(None)
        return CommandResult("Listed all appointments", collection="appointments")


@dataclass(frozen=True)
class ClearAppointmentCommand(Command):
    COMMAND_WORD = "clearapt"
    MESSAGE_USAGE = "clearapt: Deletes all appointments."

    def execute(self, book: BusinessBook) -> CommandResult:
        book.appointments.clear()
        return CommandResult("Appointment list has been cleared!")
