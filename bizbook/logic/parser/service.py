# bizbook/logic/parser/service.py

from typing import Optional

from bizbook.logic.commands.service import (
    AddServiceCommand,
    EditServiceCommand,
    EditServiceDescriptor,
    DeleteServiceCommand,
    FindServiceCommand,
)
from bizbook.messages import MESSAGE_NOT_EDITED
from bizbook.model import fields
from bizbook.model.book import ReadOnlyBook

from .exceptions import ArgumentParseError
from .parser_util import (
    PREFIX_AMOUNT, PREFIX_DURATION, PREFIX_TITLE,
    parse_field, parse_index, parse_keywords, parse_optional,
    require_empty_preamble, require_prefixes,
)
from .tokenizer import tokenize


def parse_add_service(arguments: str, lookup: Optional[ReadOnlyBook] = None) -> AddServiceCommand:
    usage = AddServiceCommand.MESSAGE_USAGE
    argmap = tokenize(arguments, PREFIX_TITLE, PREFIX_DURATION, PREFIX_AMOUNT)
    require_prefixes(argmap, usage, PREFIX_TITLE, PREFIX_DURATION, PREFIX_AMOUNT)
    require_empty_preamble(argmap, usage)

    return AddServiceCommand(
        title=parse_field(fields.parse_title, argmap.get_value(PREFIX_TITLE), usage),
        duration=parse_field(fields.parse_duration, argmap.get_value(PREFIX_DURATION), usage),
        amount=parse_field(fields.parse_amount, argmap.get_value(PREFIX_AMOUNT), usage),
    )


def parse_edit_service(arguments: str, lookup: Optional[ReadOnlyBook] = None) -> EditServiceCommand:
    usage = EditServiceCommand.MESSAGE_USAGE
    argmap = tokenize(arguments, PREFIX_TITLE, PREFIX_DURATION, PREFIX_AMOUNT)
    index = parse_index(argmap.preamble, usage, lookup, "services", "service")

    descriptor = EditServiceDescriptor(
        title=parse_optional(fields.parse_title, argmap, PREFIX_TITLE, usage),
        duration=parse_optional(fields.parse_duration, argmap, PREFIX_DURATION, usage),
        amount=parse_optional(fields.parse_amount, argmap, PREFIX_AMOUNT, usage),
    )
    if not descriptor.is_any_field_edited():
        raise ArgumentParseError(usage, MESSAGE_NOT_EDITED)
    return EditServiceCommand(index, descriptor)


def parse_delete_service(arguments: str, lookup: Optional[ReadOnlyBook] = None) -> DeleteServiceCommand:
    usage = DeleteServiceCommand.MESSAGE_USAGE
    return DeleteServiceCommand(parse_index(arguments, usage, lookup, "services", "service"))


def parse_find_service(arguments: str, lookup: Optional[ReadOnlyBook] = None) -> FindServiceCommand:
    return FindServiceCommand(parse_keywords(arguments, FindServiceCommand.MESSAGE_USAGE))
