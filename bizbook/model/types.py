# bizbook/model/types.py
"""
Domain entities. Every entity is immutable; edits produce a new copy.

Each entity implements `is_same`, the identity test used by UniqueList.
"""

import datetime
from decimal import Decimal
from typing import FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from . import fields


class Client(BaseModel):
    """A customer of the business. Identified by phone number."""

    model_config = ConfigDict(frozen=True)

    name: str
    phone: str
    email: Optional[str] = None
    tags: FrozenSet[str] = frozenset()

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return fields.parse_name(v)

    @field_validator("phone")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        return fields.parse_phone(v)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else fields.parse_email(v)

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: FrozenSet[str]) -> FrozenSet[str]:
        return frozenset(fields.parse_tag(tag) for tag in v)

    def is_same(self, other: object) -> bool:
        return isinstance(other, Client) and other.phone == self.phone

    def __str__(self) -> str:
        text = f"{self.name} Phone: {self.phone}"
        if self.email:
            text += f" Email: {self.email}"
        if self.tags:
            text += " Tags: " + "".join(f"[{tag}]" for tag in sorted(self.tags))
        return text


class Service(BaseModel):
    """Something the business sells, e.g. a manicure. Identified by service code."""

    model_config = ConfigDict(frozen=True)

    service_code: str
    title: str
    duration: Decimal  # hours
    amount: Decimal

    @field_validator("service_code")
    @classmethod
    def validate_service_code(cls, v: str) -> str:
        return fields.parse_service_code(v)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return fields.parse_title(v)

    @field_validator("duration")
    @classmethod
    def validate_duration(cls, v: Decimal) -> Decimal:
        return fields.check_duration(v)

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v: Decimal) -> Decimal:
        return fields.check_amount(v)

    def is_same(self, other: object) -> bool:
        return isinstance(other, Service) and other.service_code == self.service_code

    def __str__(self) -> str:
        return f"{self.service_code} {self.title} Duration: {self.duration} hrs Amount: ${self.amount}"


class Expense(BaseModel):
    """
    Money spent by the business. Fixed expenses (rent, subscriptions) recur
    every month from their date onwards.
    """

    model_config = ConfigDict(frozen=True)

    description: str
    value: Decimal
    date: datetime.date
    is_fixed: bool = False
    tag: Optional[str] = None

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        return fields.parse_description(v)

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: Decimal) -> Decimal:
        return fields.check_amount(v)

    @field_validator("tag")
    @classmethod
    def validate_tag(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else fields.parse_tag(v)

    def is_same(self, other: object) -> bool:
        return (
            isinstance(other, Expense)
            and other.description == self.description
            and other.value == self.value
            and other.date == self.date
            and other.tag == self.tag
        )

    def applies_to(self, year: int, month: int) -> bool:
        if self.is_fixed:
            return (year, month) >= (self.date.year, self.date.month)
        return (year, month) == (self.date.year, self.date.month)

    def __str__(self) -> str:
        text = f"{self.description} Value: ${self.value} Date: {fields.format_date(self.date)}"
        if self.is_fixed:
            text += " (fixed)"
        if self.tag:
            text += f" [{self.tag}]"
        return text


class Appointment(BaseModel):
    """A booked slot of a service for a client. Identified by its date and start time."""

    model_config = ConfigDict(frozen=True)

    client: Client
    service: Service
    date: datetime.date
    start_time: datetime.time
    is_done: bool = False

    @property
    def end_time(self) -> datetime.time:
        minutes = self.start_time.hour * 60 + self.start_time.minute + int(self.service.duration * 60)
        # Wraps past midnight.
        hour, minute = divmod(minutes % (24 * 60), 60)
        return datetime.time(hour, minute)

    def is_same(self, other: object) -> bool:
        return (
            isinstance(other, Appointment)
            and other.date == self.date
            and other.start_time == self.start_time
        )

    def __str__(self) -> str:
        status = "Done" if self.is_done else "Not done"
        return (
            f"{fields.format_date(self.date)} {fields.format_time(self.start_time)}"
            f"-{fields.format_time(self.end_time)} {self.service.title} ({self.service.service_code})"
            f" for {self.client.name} [{status}]"
        )


class Revenue(BaseModel):
    """Income from one completed appointment."""

    model_config = ConfigDict(frozen=True)

    service: Service
    client: Client
    value: Decimal
    date: datetime.date
    time: datetime.time

    @classmethod
    def from_appointment(cls, appointment: Appointment) -> "Revenue":
        return cls(
            service=appointment.service,
            client=appointment.client,
            value=appointment.service.amount,
            date=appointment.date,
            time=appointment.start_time,
        )

    def is_same(self, other: object) -> bool:
        return (
            isinstance(other, Revenue)
            and other.service.service_code == self.service.service_code
            and other.client.phone == self.client.phone
            and other.date == self.date
            and other.time == self.time
        )

    def __str__(self) -> str:
        return (
            f"{self.service.service_code} {self.service.title} ${self.value}"
            f" from {self.client.name} on {fields.format_date(self.date)}"
        )
