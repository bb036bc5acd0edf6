# bizbook/logic/commands/expense.py

import datetime
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Optional, Tuple

from bizbook.messages import MESSAGE_LISTED_OVERVIEW
from bizbook.model.book import BusinessBook
from bizbook.model.types import Expense

from .base import Command, CommandResult, get_displayed
from .exceptions import CommandError

MESSAGE_DUPLICATE_EXPENSE = "This expense already exists in the book"


def description_contains_keywords(keywords: Tuple[str, ...]):
    lowered = {k.lower() for k in keywords}

    def predicate(expense: Expense) -> bool:
        return any(word.lower() in lowered for word in expense.description.split())

    return predicate


@dataclass(frozen=True)
class AddExpenseCommand(Command):
    COMMAND_WORD = "addexp"
    MESSAGE_USAGE = (
        "addexp: Adds an expense to the book. Fixed expenses recur every month.\n"
        "Parameters: d/DESCRIPTION v/VALUE dt/DATE (DD-MM-YYYY) [f/IS_FIXED (y or n)] [t/TAG]\n"
        "Example: addexp d/Paint brushes v/12.50 dt/01-03-2024 f/n t/supplies"
    )

    expense: Expense

    def execute(self, book: BusinessBook) -> CommandResult:
        if book.expenses.contains(self.expense):
            raise CommandError(MESSAGE_DUPLICATE_EXPENSE)
        book.expenses.add(self.expense)
        return CommandResult(f"New expense added: {self.expense}")


@dataclass(frozen=True)
class EditExpenseDescriptor:
    description: Optional[str] = None
    value: Optional[Decimal] = None
    date: Optional[datetime.date] = None
    is_fixed: Optional[bool] = None
    tag: Optional[str] = None

    def updates(self) -> Dict[str, Any]:
        changes = {k: v for k, v in vars(self).items() if v is not None}
        # An empty tag removes it.
        if changes.get("tag") == "":
            changes["tag"] = None
        return changes

    def is_any_field_edited(self) -> bool:
        return bool(self.updates())


@dataclass(frozen=True)
class EditExpenseCommand(Command):
    COMMAND_WORD = "editexp"
    MESSAGE_USAGE = (
        "editexp: Edits the expense identified by the index number used in the displayed expense list. "
        "An empty t/ removes the tag.\n"
        "Parameters: INDEX (must be a positive integer) [d/DESCRIPTION] [v/VALUE] [dt/DATE] [f/IS_FIXED] [t/TAG]\n"
        "Example: editexp 2 v/15"
    )

    index: int
    descriptor: EditExpenseDescriptor = field(default_factory=EditExpenseDescriptor)

    def execute(self, book: BusinessBook) -> CommandResult:
        target: Expense = get_displayed(book.expenses, self.index, "expense")
        edited = target.model_copy(update=self.descriptor.updates())

        if not target.is_same(edited) and book.expenses.contains(edited):
            raise CommandError(MESSAGE_DUPLICATE_EXPENSE)

        book.expenses.set_item(target, edited)
        book.expenses.update_filter(None)
        return CommandResult(f"Edited expense: {edited}")


@dataclass(frozen=True)
class DeleteExpenseCommand(Command):
    COMMAND_WORD = "deleteexp"
    MESSAGE_USAGE = (
        "deleteexp: Deletes the expense identified by the index number used in the displayed expense list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: deleteexp 1"
    )

    index: int

    def execute(self, book: BusinessBook) -> CommandResult:
        target: Expense = get_displayed(book.expenses, self.index, "expense")
        book.expenses.remove(target)
        return CommandResult(f"Deleted expense: {target}")


@dataclass(frozen=True)
class FindExpenseCommand(Command):
    COMMAND_WORD = "findexp"
    MESSAGE_USAGE = (
        "findexp: Finds all expenses whose description contains any of the given keywords.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: findexp rent brushes"
    )

    keywords: Tuple[str, ...]

    def execute(self, book: BusinessBook) -> CommandResult:
        book.expenses.update_filter(description_contains_keywords(self.keywords))
        count = len(book.expenses.filtered())
        return CommandResult(MESSAGE_LISTED_OVERVIEW.format(count=count, kind="expenses"), collection="expenses")


@dataclass(frozen=True)
class ListExpenseCommand(Command):
    COMMAND_WORD = "listexp"
    MESSAGE_USAGE = "listexp: Lists all expenses."

    def execute(self, book: BusinessBook) -> CommandResult:
        book.expenses.update_filter(None)
        return CommandResult("Listed all expenses", collection="expenses")


@dataclass(frozen=True)
class ClearExpenseCommand(Command):
    COMMAND_WORD = "clearexp"
    MESSAGE_USAGE = "clearexp: Deletes all expenses."

    def execute(self, book: BusinessBook) -> CommandResult:
        book.expenses.clear()
        return CommandResult("Expense list has been cleared!")
