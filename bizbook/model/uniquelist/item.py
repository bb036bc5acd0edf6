# bizbook/model/uniquelist/item.py

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class UniqueListItem(Protocol):
    """
    The one capability an item needs to live in a UniqueList.

    `is_same` tells whether two items stand for the same real-world entity.
    It is weaker than `==`: a client whose name changed is still the same client.
    """

    def is_same(self, other: Any) -> bool:
        ...
