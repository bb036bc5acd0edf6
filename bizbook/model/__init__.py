from .types import Client, Service, Expense, Appointment, Revenue
from .book import BusinessBook, Collection, ReadOnlyBook

__all__ = [
    "Client",
    "Service",
    "Expense",
    "Appointment",
    "Revenue",
    "BusinessBook",
    "Collection",
    "ReadOnlyBook",
]
