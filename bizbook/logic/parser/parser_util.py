# bizbook/logic/parser/parser_util.py

import re
from typing import Callable, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from bizbook.messages import MESSAGE_INDEX_OUT_OF_RANGE, MESSAGE_INVALID_INDEX
from bizbook.model.book import ReadOnlyBook

from .exceptions import ArgumentParseError
from .tokenizer import ArgumentMultimap

V = TypeVar("V")
M = TypeVar("M", bound=BaseModel)

# Prefixes
PREFIX_NAME = "n/"
PREFIX_PHONE = "p/"
PREFIX_EMAIL = "e/"
PREFIX_TAG = "t/"
PREFIX_TITLE = "t/"
PREFIX_DURATION = "du/"
PREFIX_AMOUNT = "a/"
PREFIX_DESCRIPTION = "d/"
PREFIX_VALUE = "v/"
PREFIX_DATE = "dt/"
PREFIX_FIXED = "f/"
PREFIX_CLIENT = "c/"
PREFIX_SERVICE = "s/"
PREFIX_TIME = "@/"
PREFIX_MONTH = "m/"
PREFIX_YEAR = "y/"

_INDEX_RE = re.compile(r"[1-9][0-9]*")


def parse_index(
    text: str,
    usage: str,
    lookup: Optional[ReadOnlyBook] = None,
    collection: str = "",
    kind: str = "",
) -> int:
    """
    Parses a one-based index. When a lookup is given, the index is also
    checked against the size of the displayed `collection`.
    """
    text = text.strip()
    if not _INDEX_RE.fullmatch(text):
        raise ArgumentParseError(usage, MESSAGE_INVALID_INDEX)
    index = int(text)
    if lookup is not None and collection:
        size = lookup.displayed_size(collection)
        if index > size:
            raise ArgumentParseError(usage, MESSAGE_INDEX_OUT_OF_RANGE.format(kind=kind, size=size))
    return index


def parse_field(parse: Callable[[str], V], text: str, usage: str) -> V:
    try:
        return parse(text)
    except ValueError as e:
        raise ArgumentParseError(usage, str(e))


def parse_optional(parse: Callable[[str], V], argmap: ArgumentMultimap, prefix: str, usage: str) -> Optional[V]:
    text = argmap.get_value(prefix)
    return None if text is None else parse_field(parse, text, usage)


def parse_clearable(parse: Callable[[str], V], argmap: ArgumentMultimap, prefix: str, usage: str) -> Optional[V]:
    """As parse_optional, but a prefix with an empty value gives "", meaning remove the field."""
    text = argmap.get_value(prefix)
    if text is not None and not text.strip():
        return ""
    return parse_optional(parse, argmap, prefix, usage)


def require_prefixes(argmap: ArgumentMultimap, usage: str, *prefixes: str) -> None:
    if not all(argmap.has(p) for p in prefixes):
        raise ArgumentParseError(usage)


def require_empty_preamble(argmap: ArgumentMultimap, usage: str) -> None:
    if argmap.preamble:
        raise ArgumentParseError(usage)


def parse_keywords(arguments: str, usage: str) -> Tuple[str, ...]:
    keywords = tuple(arguments.split())
    if not keywords:
        raise ArgumentParseError(usage)
    return keywords


def build(model: Type[M], usage: str, **values) -> M:
    """Constructs an entity, turning pydantic's ValidationError into an ArgumentParseError."""
    try:
        return model(**values)
    except ValidationError as e:
        message = str(e.errors()[0]["msg"]).removeprefix("Value error, ")
        raise ArgumentParseError(usage, message)
