# bizbook/logic/parser/expense.py

from typing import Optional

from bizbook.logic.commands.expense import (
    AddExpenseCommand,
    EditExpenseCommand,
    EditExpenseDescriptor,
    DeleteExpenseCommand,
    FindExpenseCommand,
)
from bizbook.messages import MESSAGE_NOT_EDITED
from bizbook.model import fields
from bizbook.model.book import ReadOnlyBook
from bizbook.model.types import Expense

from .exceptions import ArgumentParseError
from .parser_util import (
    PREFIX_DATE, PREFIX_DESCRIPTION, PREFIX_FIXED, PREFIX_TAG, PREFIX_VALUE,
    build, parse_clearable, parse_field, parse_index, parse_keywords, parse_optional,
    require_empty_preamble, require_prefixes,
)
from .tokenizer import tokenize

EXPENSE_PREFIXES = (PREFIX_DESCRIPTION, PREFIX_VALUE, PREFIX_DATE, PREFIX_FIXED, PREFIX_TAG)


def parse_add_expense(arguments: str, lookup: Optional[ReadOnlyBook] = None) -> AddExpenseCommand:
    usage = AddExpenseCommand.MESSAGE_USAGE
    argmap = tokenize(arguments, *EXPENSE_PREFIXES)
    require_prefixes(argmap, usage, PREFIX_DESCRIPTION, PREFIX_VALUE, PREFIX_DATE)
    require_empty_preamble(argmap, usage)

    is_fixed = parse_optional(fields.parse_fixed, argmap, PREFIX_FIXED, usage)
    expense = build(
        Expense,
        usage,
        description=parse_field(fields.parse_description, argmap.get_value(PREFIX_DESCRIPTION), usage),
        value=parse_field(fields.parse_amount, argmap.get_value(PREFIX_VALUE), usage),
        date=parse_field(fields.parse_date, argmap.get_value(PREFIX_DATE), usage),
        is_fixed=bool(is_fixed),
        tag=parse_optional(fields.parse_tag, argmap, PREFIX_TAG, usage),
    )
    return AddExpenseCommand(expense)


def parse_edit_expense(arguments: str, lookup: Optional[ReadOnlyBook] = None) -> EditExpenseCommand:
    usage = EditExpenseCommand.MESSAGE_USAGE
    argmap = tokenize(arguments, *EXPENSE_PREFIXES)
    index = parse_index(argmap.preamble, usage, lookup, "expenses", "expense")

    descriptor = EditExpenseDescriptor(
        description=parse_optional(fields.parse_description, argmap, PREFIX_DESCRIPTION, usage),
        value=parse_optional(fields.parse_amount, argmap, PREFIX_VALUE, usage),
        date=parse_optional(fields.parse_date, argmap, PREFIX_DATE, usage),
        is_fixed=parse_optional(fields.parse_fixed, argmap, PREFIX_FIXED, usage),
        tag=parse_clearable(fields.parse_tag, argmap, PREFIX_TAG, usage),
    )
    if not descriptor.is_any_field_edited():
        raise ArgumentParseError(usage, MESSAGE_NOT_EDITED)
    return EditExpenseCommand(index, descriptor)


def parse_delete_expense(arguments: str, lookup: Optional[ReadOnlyBook] = None) -> DeleteExpenseCommand:
    usage = DeleteExpenseCommand.MESSAGE_USAGE
    return DeleteExpenseCommand(parse_index(arguments, usage, lookup, "expenses", "expense"))


def parse_find_expense(arguments: str, lookup: Optional[ReadOnlyBook] = None) -> FindExpenseCommand:
    return FindExpenseCommand(parse_keywords(arguments, FindExpenseCommand.MESSAGE_USAGE))
