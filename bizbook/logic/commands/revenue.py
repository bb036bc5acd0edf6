# bizbook/logic/commands/revenue.py

import datetime
from dataclasses import dataclass
from typing import Optional

from bizbook.messages import MESSAGE_LISTED_OVERVIEW
from bizbook.model.book import BusinessBook
from bizbook.model.types import Revenue

from .base import Command, CommandResult


@dataclass(frozen=True)
class FindRevenueCommand(Command):
    COMMAND_WORD = "findrev"
    MESSAGE_USAGE = (
        "findrev: Finds all revenue records matching every given criterion.\n"
        "Parameters: [s/SERVICE_CODE] [dt/DATE] (at least one)\n"
        "Example: findrev s/SC000 dt/28-10-2024"
    )

    service_code: Optional[str] = None
    date: Optional[datetime.date] = None

    def matches(self, revenue: Revenue) -> bool:
        if self.service_code is not None and revenue.service.service_code != self.service_code:
            return False
        if self.date is not None and revenue.date != self.date:
            return False
        return True

    def execute(self, book: BusinessBook) -> CommandResult:
        book.revenues.update_filter(self.matches)
        count = len(book.revenues.filtered())
        return CommandResult(MESSAGE_LISTED_OVERVIEW.format(count=count, kind="revenues"), collection="revenues")


@dataclass(frozen=True)
class ListRevenueCommand(Command):
    COMMAND_WORD = "listrev"
    MESSAGE_USAGE = "listrev: Lists all revenue records."

    def execute(self, book: BusinessBook) -> CommandResult:
        book.revenues.update_filter(None)
        return CommandResult("Listed all revenues", collection="revenues")


@dataclass(frozen=True)
class ClearRevenueCommand(Command):
    COMMAND_WORD = "clearrev"
    MESSAGE_USAGE = "clearrev: Deletes all revenue records and marks every appointment as not done."

    def execute(self, book: BusinessBook) -> CommandResult:
        book.revenues.clear()
        for appointment in book.appointments.items:
            if appointment.is_done:
                book.appointments.set_item(appointment, appointment.model_copy(update={"is_done": False}))
        return CommandResult("Revenue list has been cleared!")
