# bizbook/logic/parser/revenue.py

from typing import Optional

from bizbook.logic.commands.general import ProfitCommand
from bizbook.logic.commands.revenue import FindRevenueCommand
from bizbook.model import fields
from bizbook.model.book import ReadOnlyBook

from .exceptions import ArgumentParseError
from .parser_util import (
    PREFIX_DATE, PREFIX_MONTH, PREFIX_SERVICE, PREFIX_YEAR,
    parse_field, parse_optional, require_empty_preamble, require_prefixes,
)
from .tokenizer import tokenize


def parse_find_revenue(arguments: str, lookup: Optional[ReadOnlyBook] = None) -> FindRevenueCommand:
    usage = FindRevenueCommand.MESSAGE_USAGE
    argmap = tokenize(arguments, PREFIX_SERVICE, PREFIX_DATE)
    require_empty_preamble(argmap, usage)
    if not (argmap.has(PREFIX_SERVICE) or argmap.has(PREFIX_DATE)):
        raise ArgumentParseError(usage)

    return FindRevenueCommand(
        service_code=parse_optional(fields.parse_service_code, argmap, PREFIX_SERVICE, usage),
        date=parse_optional(fields.parse_date, argmap, PREFIX_DATE, usage),
    )


def parse_profit(arguments: str, lookup: Optional[ReadOnlyBook] = None) -> ProfitCommand:
    usage = ProfitCommand.MESSAGE_USAGE
    argmap = tokenize(arguments, PREFIX_MONTH, PREFIX_YEAR)
    require_prefixes(argmap, usage, PREFIX_MONTH, PREFIX_YEAR)
    require_empty_preamble(argmap, usage)

    return ProfitCommand(
        month=parse_field(fields.parse_month, argmap.get_value(PREFIX_MONTH), usage),
        year=parse_field(fields.parse_year, argmap.get_value(PREFIX_YEAR), usage),
    )
