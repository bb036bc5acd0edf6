# bizbook/logic/parser/client.py

from typing import FrozenSet, List, Optional

from bizbook.logic.commands.client import (
    AddClientCommand,
    EditClientCommand,
    EditClientDescriptor,
    DeleteClientCommand,
    FindClientCommand,
)
from bizbook.messages import MESSAGE_NOT_EDITED
from bizbook.model import fields
from bizbook.model.book import ReadOnlyBook
from bizbook.model.types import Client

from .exceptions import ArgumentParseError
from .parser_util import (
    PREFIX_EMAIL, PREFIX_NAME, PREFIX_PHONE, PREFIX_TAG,
    build, parse_clearable, parse_field, parse_index, parse_keywords, parse_optional,
    require_empty_preamble, require_prefixes,
)
from .tokenizer import tokenize


def _parse_tags(values: List[str], usage: str) -> FrozenSet[str]:
    return frozenset(parse_field(fields.parse_tag, v, usage) for v in values)


def parse_add_client(arguments: str, lookup: Optional[ReadOnlyBook] = None) -> AddClientCommand:
    usage = AddClientCommand.MESSAGE_USAGE
    argmap = tokenize(arguments, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_TAG)
    require_prefixes(argmap, usage, PREFIX_NAME, PREFIX_PHONE)
    require_empty_preamble(argmap, usage)

    client = build(
        Client,
        usage,
        name=parse_field(fields.parse_name, argmap.get_value(PREFIX_NAME), usage),
        phone=parse_field(fields.parse_phone, argmap.get_value(PREFIX_PHONE), usage),
        email=parse_optional(fields.parse_email, argmap, PREFIX_EMAIL, usage),
        tags=_parse_tags(argmap.get_all_values(PREFIX_TAG), usage),
    )
    return AddClientCommand(client)


def parse_edit_client(arguments: str, lookup: Optional[ReadOnlyBook] = None) -> EditClientCommand:
    usage = EditClientCommand.MESSAGE_USAGE
    argmap = tokenize(arguments, PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_TAG)
    index = parse_index(argmap.preamble, usage, lookup, "clients", "client")

    tags = None
    if argmap.has(PREFIX_TAG):
        values = argmap.get_all_values(PREFIX_TAG)
        # A lone `t/` clears all tags.
        tags = frozenset() if values == [""] else _parse_tags(values, usage)

    descriptor = EditClientDescriptor(
        name=parse_optional(fields.parse_name, argmap, PREFIX_NAME, usage),
        phone=parse_optional(fields.parse_phone, argmap, PREFIX_PHONE, usage),
        email=parse_clearable(fields.parse_email, argmap, PREFIX_EMAIL, usage),
        tags=tags,
    )
    if not descriptor.is_any_field_edited():
        raise ArgumentParseError(usage, MESSAGE_NOT_EDITED)
    return EditClientCommand(index, descriptor)


def parse_delete_client(arguments: str, lookup: Optional[ReadOnlyBook] = None) -> DeleteClientCommand:
    usage = DeleteClientCommand.MESSAGE_USAGE
    return DeleteClientCommand(parse_index(arguments, usage, lookup, "clients", "client"))


def parse_find_client(arguments: str, lookup: Optional[ReadOnlyBook] = None) -> FindClientCommand:
    return FindClientCommand(parse_keywords(arguments, FindClientCommand.MESSAGE_USAGE))
