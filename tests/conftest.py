# tests/conftest.py

import datetime
from decimal import Decimal

import pytest

from bizbook.logic.manager import LogicManager
from bizbook.model.book import BusinessBook
from bizbook.model.types import Appointment, Client, Expense, Service


@pytest.fixture
def book() -> BusinessBook:
    """Provides a clean, empty BusinessBook for each test."""
    return BusinessBook()


@pytest.fixture
def logic(book: BusinessBook) -> LogicManager:
    return LogicManager(book)


def make_client(name: str = "Alice Tan", phone: str = "91234567", **kwargs) -> Client:
    return Client(name=name, phone=phone, **kwargs)


def make_service(code: str = "SC000", title: str = "Manicure", duration: str = "1", amount: str = "30") -> Service:
    return Service(service_code=code, title=title, duration=Decimal(duration), amount=Decimal(amount))


def make_expense(description: str = "Nail polish", value: str = "10", day: int = 5, **kwargs) -> Expense:
    return Expense(description=description, value=Decimal(value), date=datetime.date(2024, 10, day), **kwargs)


def make_appointment(client: Client = None, service: Service = None, hour: int = 13, day: int = 28) -> Appointment:
    return Appointment(
        client=client or make_client(),
        service=service or make_service(),
        date=datetime.date(2024, 10, day),
        start_time=datetime.time(hour, 0),
    )
