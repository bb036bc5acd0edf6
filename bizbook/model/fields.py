# bizbook/model/fields.py
"""
Value rules shared by the entity models and the argument parsers.

Each `parse_*` function turns user text into a value and raises ValueError
with a user-facing message when the text is not acceptable. The entity
models run the same checks, so an entity can never hold a bad value.
"""

import re
from datetime import date, datetime, time
from decimal import Decimal

DATE_FORMAT = "%d-%m-%Y"
TIME_FORMAT = "%H%M"

NAME_CONSTRAINTS = "Names should only contain alphanumeric characters and spaces, and it should not be blank"
PHONE_CONSTRAINTS = "Phone numbers should only contain numbers, and it should be at least 3 digits long"
EMAIL_CONSTRAINTS = "Emails should be of the format local-part@domain"
TAG_CONSTRAINTS = "Tags should be alphanumeric"
TITLE_CONSTRAINTS = "Titles should not be blank"
DESCRIPTION_CONSTRAINTS = "Descriptions should not be blank"
AMOUNT_CONSTRAINTS = "Amounts should be non-negative numbers with at most 2 decimal places"
DURATION_CONSTRAINTS = "Durations should be positive multiples of 0.5 hours, at most 24 hours"
DATE_CONSTRAINTS = "Dates should be valid and of the format DD-MM-YYYY"
TIME_CONSTRAINTS = "Times should be valid and of the format HHMM"
SERVICE_CODE_CONSTRAINTS = "Service codes should be of the format SC followed by 3 digits, e.g. SC001"
FIXED_CONSTRAINTS = "Fixed flag should be either y or n"
MONTH_CONSTRAINTS = "Months should be a number from 1 to 12"
YEAR_CONSTRAINTS = "Years should be a 4 digit number"

_NAME_RE = re.compile(r"[A-Za-z0-9][A-Za-z0-9 ]*")
_PHONE_RE = re.compile(r"[0-9]{3,}")
_EMAIL_RE = re.compile(r"[\w.+-]+@[A-Za-z0-9-]+(\.[A-Za-z0-9-]+)*")
_TAG_RE = re.compile(r"[A-Za-z0-9]+")
_AMOUNT_RE = re.compile(r"[0-9]+(\.[0-9]{1,2})?")
_SERVICE_CODE_RE = re.compile(r"SC[0-9]{3}")
_TIME_RE = re.compile(r"[0-9]{4}")
_YEAR_RE = re.compile(r"[0-9]{4}")
_MONTH_RE = re.compile(r"[0-9]{1,2}")
_DURATION_RE = re.compile(r"[0-9]+(\.[0-9]+)?")
_DATE_RE = re.compile(r"[0-9]{2}-[0-9]{2}-[0-9]{4}")

HALF_HOUR = Decimal("0.5")
MAX_DURATION = Decimal("24")


def _check(pattern: re.Pattern, value: str, message: str) -> str:
    value = value.strip()
    if not pattern.fullmatch(value):
        raise ValueError(message)
    return value


# --- Text values ---

def parse_name(value: str) -> str:
    return _check(_NAME_RE, value, NAME_CONSTRAINTS)


def parse_phone(value: str) -> str:
    return _check(_PHONE_RE, value, PHONE_CONSTRAINTS)


def parse_email(value: str) -> str:
    return _check(_EMAIL_RE, value, EMAIL_CONSTRAINTS)


def parse_tag(value: str) -> str:
    return _check(_TAG_RE, value, TAG_CONSTRAINTS)


def parse_service_code(value: str) -> str:
    return _check(_SERVICE_CODE_RE, value, SERVICE_CODE_CONSTRAINTS)


def parse_title(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError(TITLE_CONSTRAINTS)
    return value


def parse_description(value: str) -> str:
    value = value.strip()
    if not value:
        raise ValueError(DESCRIPTION_CONSTRAINTS)
    return value


# --- Numbers ---

def check_amount(value: Decimal) -> Decimal:
    if value < 0 or value.as_tuple().exponent < -2:
        raise ValueError(AMOUNT_CONSTRAINTS)
    return value


def parse_amount(value: str) -> Decimal:
    return check_amount(Decimal(_check(_AMOUNT_RE, value, AMOUNT_CONSTRAINTS)))


def check_duration(value: Decimal) -> Decimal:
    if not value.is_finite() or not 0 < value <= MAX_DURATION or value % HALF_HOUR != 0:
        raise ValueError(DURATION_CONSTRAINTS)
    return value


def parse_duration(value: str) -> Decimal:
    return check_duration(Decimal(_check(_DURATION_RE, value, DURATION_CONSTRAINTS)))


def parse_fixed(value: str) -> bool:
    flag = value.strip().lower()
    if flag not in ("y", "n"):
        raise ValueError(FIXED_CONSTRAINTS)
    return flag == "y"


def parse_month(value: str) -> int:
    month = int(_check(_MONTH_RE, value, MONTH_CONSTRAINTS))
    if not 1 <= month <= 12:
        raise ValueError(MONTH_CONSTRAINTS)
    return month


def parse_year(value: str) -> int:
    return int(_check(_YEAR_RE, value, YEAR_CONSTRAINTS))


# --- Calendar ---

def parse_date(value: str) -> date:
    value = _check(_DATE_RE, value, DATE_CONSTRAINTS)
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise ValueError(DATE_CONSTRAINTS)


def parse_time(value: str) -> time:
    value = _check(_TIME_RE, value, TIME_CONSTRAINTS)
    try:
        return datetime.strptime(value, TIME_FORMAT).time()
    except ValueError:
        raise ValueError(TIME_CONSTRAINTS)


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def format_time(value: time) -> str:
    return value.strftime(TIME_FORMAT)
