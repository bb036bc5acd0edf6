from .item import UniqueListItem
from .unique_list import UniqueList
from .exceptions import UniqueListError, DuplicateItemError, ItemNotFoundError

__all__ = [
    "UniqueListItem",
    "UniqueList",
    "UniqueListError",
    "DuplicateItemError",
    "ItemNotFoundError",
]
