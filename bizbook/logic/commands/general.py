# bizbook/logic/commands/general.py

from dataclasses import dataclass
from decimal import Decimal

from bizbook.model.book import BusinessBook

from .base import Command, CommandResult


@dataclass(frozen=True)
class HelpCommand(Command):
    COMMAND_WORD = "help"
    MESSAGE_USAGE = "help: Shows how to use every command.\nExample: help"

    SHOWING_HELP_MESSAGE = "Showing help."

    def execute(self, book: BusinessBook) -> CommandResult:
        return CommandResult(self.SHOWING_HELP_MESSAGE, show_help=True)


@dataclass(frozen=True)
class ExitCommand(Command):
    COMMAND_WORD = "exit"
    MESSAGE_USAGE = "exit: Exits the program.\nExample: exit"

    def execute(self, book: BusinessBook) -> CommandResult:
        return CommandResult("Exiting bizbook as requested ...", exit=True)


@dataclass(frozen=True)
class ProfitCommand(Command):
    """
    Revenue minus expenses for one calendar month.
    Fixed expenses count in every month from the month they were recorded in.
    """

    COMMAND_WORD = "profit"
    MESSAGE_USAGE = (
        "profit: Shows the profit for a month: revenue earned minus expenses incurred.\n"
        "Parameters: m/MONTH (1-12) y/YEAR\n"
        "Example: profit m/10 y/2024"
    )

    month: int
    year: int

    def execute(self, book: BusinessBook) -> CommandResult:
        revenue = sum(
            (r.value for r in book.revenues.items
             if (r.date.year, r.date.month) == (self.year, self.month)),
            Decimal(0),
        )
        expenses = sum(
            (e.value for e in book.expenses.items if e.applies_to(self.year, self.month)),
            Decimal(0),
        )
        profit = revenue - expenses
        label = "Profit" if profit >= 0 else "Loss"
        return CommandResult(
            f"{label} for {self.month:02d}-{self.year}: ${abs(profit)} "
            f"(revenue ${revenue}, expenses ${expenses})"
        )
