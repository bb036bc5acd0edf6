# bizbook/model/book.py

import logging
from typing import Callable, Generic, Optional, Protocol, Sequence, Tuple, TypeVar

from .types import Client, Service, Expense, Appointment, Revenue
from .uniquelist import UniqueList, UniqueListItem

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=UniqueListItem)

Predicate = Callable[[T], bool]


def show_all(item: object) -> bool:
    return True


class Collection(Generic[T]):
    """
    One kind of entity in the book: the UniqueList that owns the items plus
    the filter deciding which of them are currently displayed.
    Indexes typed by the user always refer to the displayed list.
    """

    def __init__(self, name: str):
        self.name = name
        self.items: UniqueList[T] = UniqueList()
        self._predicate: Predicate = show_all

    def add(self, item: T) -> None:
        self.items.add(item)

    def set_item(self, target: T, edited: T) -> None:
        self.items.set_item(target, edited)

    def remove(self, target: T) -> None:
        self.items.remove(target)

    def set_all(self, items: Sequence[T]) -> None:
        self.items.set_all(items)

    def contains(self, item: T) -> bool:
        return self.items.contains(item)

    def clear(self) -> None:
        self.items.set_all([])

    # --- Displayed view ---

    def filtered(self) -> Tuple[T, ...]:
        return tuple(item for item in self.items if self._predicate(item))

    def update_filter(self, predicate: Optional[Predicate]) -> None:
        self._predicate = predicate or show_all
        logger.debug(f"Filter on {self.name} updated: {len(self.filtered())}/{len(self.items)} shown")

    def __len__(self) -> int:
        return len(self.items)


class ReadOnlyBook(Protocol):
    """What argument parsers may look at: the displayed lists, never the mutators."""

    def displayed_size(self, collection_name: str) -> int:
        ...


class BusinessBook:
    """
    The in-memory state of the application: one Collection per domain kind.
    Commands are the only code that mutates it.
    """

    def __init__(self):
        self.clients: Collection[Client] = Collection("clients")
        self.services: Collection[Service] = Collection("services")
        self.expenses: Collection[Expense] = Collection("expenses")
        self.appointments: Collection[Appointment] = Collection("appointments")
        self.revenues: Collection[Revenue] = Collection("revenues")

    def collection(self, name: str) -> Collection:
        collection = getattr(self, name, None)
        if not isinstance(collection, Collection):
            raise KeyError(f"No such collection: {name}")
        return collection

    def displayed_size(self, collection_name: str) -> int:
        return len(self.collection(collection_name).filtered())

    # --- Lookups used across collections ---

    def find_service(self, service_code: str) -> Optional[Service]:
        for service in self.services.items:
            if service.service_code == service_code:
                return service
        return None

    def next_service_code(self) -> str:
        used = [int(s.service_code[2:]) for s in self.services.items]
        return f"SC{(max(used) + 1) if used else 0:03d}"

    def appointments_of_client(self, client: Client) -> Tuple[Appointment, ...]:
        return tuple(a for a in self.appointments.items if a.client.is_same(client))

    def appointments_of_service(self, service: Service) -> Tuple[Appointment, ...]:
        return tuple(a for a in self.appointments.items if a.service.is_same(service))

    def revenues_of_client(self, client: Client) -> Tuple[Revenue, ...]:
        return tuple(r for r in self.revenues.items if r.client.is_same(client))
