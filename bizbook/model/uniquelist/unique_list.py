# bizbook/model/uniquelist/unique_list.py
"""
An ordered list that holds at most one item per identity.

Identity is decided by `UniqueListItem.is_same`, not by `==`. Two items are
treated as the same if either one says so, so an asymmetric `is_same` cannot
sneak a duplicate in.
"""

from typing import Generic, Iterable, Iterator, List, Tuple, TypeVar

from .exceptions import DuplicateItemError, ItemNotFoundError
from .item import UniqueListItem

T = TypeVar("T", bound=UniqueListItem)


def _same(a: UniqueListItem, b: UniqueListItem) -> bool:
    return a.is_same(b) or b.is_same(a)


class UniqueList(Generic[T]):
    """
    Supports a minimal set of list operations. Every mutation keeps the
    invariant that no two elements are the same; a failed mutation leaves the
    list untouched.
    """

    def __init__(self, items: Iterable[T] = ()):
        self._items: List[T] = []
        self.set_all(items)

    # --- Queries ---

    def contains(self, item: T) -> bool:
        return any(_same(existing, item) for existing in self._items)

    def __contains__(self, item: object) -> bool:
        return isinstance(item, UniqueListItem) and self.contains(item)

    def index_of(self, item: T) -> int:
        """Position of the element that is the same as `item`."""
        for i, existing in enumerate(self._items):
            if _same(existing, item):
                return i
        raise ItemNotFoundError()

    def as_list(self) -> Tuple[T, ...]:
        """Snapshot of the current contents; later mutations do not show up in it."""
        return tuple(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.as_list())

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniqueList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"UniqueList({self._items!r})"

    # --- Mutations ---

    def add(self, item: T) -> None:
        """Appends `item`. Raises DuplicateItemError if an equivalent item is present."""
        if self.contains(item):
            raise DuplicateItemError()
        self._items.append(item)

    def set_item(self, target: T, edited: T) -> None:
        """
        Replaces `target` with `edited`, keeping its position.
        `edited` may be the same as `target`, but not the same as any other element.
        """
        index = self.index_of(target)
        for i, existing in enumerate(self._items):
            if i != index and _same(existing, edited):
                raise DuplicateItemError()
        self._items[index] = edited

    def remove(self, target: T) -> None:
        index = self.index_of(target)
        del self._items[index]

    def set_all(self, items: Iterable[T]) -> None:
        """
        Replaces the whole contents. Nothing changes if `items` holds a duplicate pair.
        """
        replacement = list(items)
        if not self._all_unique(replacement):
            raise DuplicateItemError()
        self._items = replacement

    @staticmethod
    def _all_unique(items: List[T]) -> bool:
        for i in range(len(items)):
            for j in range(i + 1, len(items)):
                if _same(items[i], items[j]):
                    return False
        return True
