# tests/test_command_layer.py

import datetime
from decimal import Decimal

import pytest

from bizbook.logic.commands import (
    AddAppointmentCommand,
    AddClientCommand,
    AddServiceCommand,
    ClearClientCommand,
    CommandError,
    DeleteExpenseCommand,
    EditClientCommand,
    EditClientDescriptor,
    ListClientCommand,
    UnDoneAppointmentCommand,
)
from bizbook.model.book import BusinessBook
from bizbook.model.types import Revenue

from conftest import make_appointment, make_client, make_expense, make_service


def test_execute_add_client_command(book: BusinessBook):
    """AddClientCommand appends the client to the book."""
    assert len(book.clients) == 0

    result = AddClientCommand(make_client()).execute(book)

    assert len(book.clients) == 1
    assert result.feedback_to_user == f"New client added: {make_client()}"
    assert not result.exit and not result.show_help


def test_execute_add_service_command_assigns_next_free_code(book: BusinessBook):
    book.services.add(make_service(code="SC004"))

    AddServiceCommand(title="Pedicure", duration=Decimal("1"), amount=Decimal("40")).execute(book)

    assert book.find_service("SC005").title == "Pedicure"


def test_add_service_fails_when_codes_run_out(book: BusinessBook):
    book.services.add(make_service(code="SC999"))

    with pytest.raises(CommandError):
        AddServiceCommand(title="One more", duration=Decimal("1"), amount=Decimal("1")).execute(book)
    assert len(book.services) == 1


def test_execute_edit_client_command_changes_only_given_fields(book: BusinessBook):
    book.clients.add(make_client(email="alice@example.com", tags=frozenset({"vip"})))

    EditClientCommand(1, EditClientDescriptor(tags=frozenset())).execute(book)

    edited = book.clients.items.as_list()[0]
    assert edited.tags == frozenset()
    assert edited.email == "alice@example.com"


def test_execute_with_stale_index_fails(book: BusinessBook):
    """Without parse-time bounds checking, the command still checks the index itself."""
    book.expenses.add(make_expense())

    with pytest.raises(CommandError, match=r"out of range \(1 to 1\)"):
        DeleteExpenseCommand(2).execute(book)
    assert len(book.expenses) == 1


def test_add_appointment_uses_displayed_client(book: BusinessBook):
    book.clients.add(make_client(name="Alice Tan", phone="111"))
    book.clients.add(make_client(name="Bob Lee", phone="222"))
    book.services.add(make_service())
    book.clients.update_filter(lambda c: c.phone == "222")

    AddAppointmentCommand(1, "SC000", datetime.date(2024, 10, 28), datetime.time(9, 0)).execute(book)

    assert book.appointments.items.as_list()[0].client.name == "Bob Lee"


def test_list_resets_filter(book: BusinessBook):
    book.clients.add(make_client())
    book.clients.update_filter(lambda c: False)
    assert book.clients.filtered() == ()

    result = ListClientCommand().execute(book)

    assert result.collection == "clients"
    assert len(book.clients.filtered()) == 1


def test_clear_clients(book: BusinessBook):
    book.clients.add(make_client())
    ClearClientCommand().execute(book)
    assert len(book.clients) == 0


def test_commands_are_immutable():
    command = AddClientCommand(make_client())
    with pytest.raises(AttributeError):
        command.client = make_client(name="Other")


def test_undone_without_recorded_revenue_fails_and_changes_nothing(book: BusinessBook):
    """A done appointment whose revenue record is gone cannot be silently reverted."""
    book.appointments.add(make_appointment().model_copy(update={"is_done": True}))

    with pytest.raises(CommandError, match="No revenue record"):
        UnDoneAppointmentCommand(1).execute(book)
    assert book.appointments.items.as_list()[0].is_done


def test_edit_client_refuses_to_move_revenue_onto_an_existing_record(book: BusinessBook):
    alice = make_client(name="Alice Tan", phone="111")
    appointment = make_appointment(client=alice)
    book.clients.add(alice)
    book.revenues.add(Revenue.from_appointment(appointment))
    # Left behind by a deleted client with phone 222 at the same slot.
    book.revenues.add(Revenue.from_appointment(make_appointment(client=make_client(phone="222"))))

    with pytest.raises(CommandError):
        EditClientCommand(1, EditClientDescriptor(phone="222")).execute(book)
    assert book.clients.items.as_list() == (alice,)
    assert sorted(r.client.phone for r in book.revenues.items) == ["111", "222"]
