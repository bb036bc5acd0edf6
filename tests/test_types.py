# tests/test_types.py

import datetime
from decimal import Decimal

import pytest
from pydantic import ValidationError

from bizbook.config import Settings
from bizbook.model import fields
from bizbook.model.types import Revenue

from conftest import make_appointment, make_client, make_expense, make_service


@pytest.mark.parametrize(
    "kwargs, constraint",
    [
        ({"phone": "12"}, fields.PHONE_CONSTRAINTS),
        ({"name": " "}, fields.NAME_CONSTRAINTS),
        ({"email": "alice"}, fields.EMAIL_CONSTRAINTS),
        ({"tags": frozenset({"no spaces"})}, fields.TAG_CONSTRAINTS),
    ],
)
def test_client_rejects_invalid_fields(kwargs, constraint):
    with pytest.raises(ValidationError) as excinfo:
        make_client(**kwargs)
    assert constraint in str(excinfo.value)


def test_service_rejects_bad_code_and_duration():
    with pytest.raises(ValidationError):
        make_service(code="SC01")
    with pytest.raises(ValidationError):
        make_service(duration="0.75")


def test_entities_are_frozen():
    client = make_client()
    with pytest.raises(ValidationError):
        client.name = "Other"


def test_appointment_end_time_follows_service_duration():
    appointment = make_appointment(service=make_service(duration="1.5"), hour=13)
    assert appointment.end_time == datetime.time(14, 30)
    assert "1300-1430" in str(appointment)


def test_fixed_expense_applies_from_its_month_onwards():
    rent = make_expense(is_fixed=True)

    assert rent.applies_to(2024, 10)
    assert rent.applies_to(2025, 1)
    assert not rent.applies_to(2024, 9)
    assert not make_expense().applies_to(2024, 11)


def test_revenue_from_appointment():
    appointment = make_appointment(service=make_service(amount="45.50"))
    revenue = Revenue.from_appointment(appointment)

    assert revenue.value == Decimal("45.50")
    assert revenue.is_same(Revenue.from_appointment(appointment))
    assert not revenue.is_same(Revenue.from_appointment(make_appointment(hour=9)))


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("BIZBOOK_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("BIZBOOK_PROMPT", "> ")

    settings = Settings(_env_file=None)

    assert settings.log_level == "DEBUG"
    assert settings.prompt == "> "
    assert settings.log_file is None
