# bizbook/logic/parser/appointment.py

from typing import Optional

from bizbook.logic.commands.appointment import (
    AddAppointmentCommand,
    EditAppointmentCommand,
    EditAppointmentDescriptor,
    DeleteAppointmentCommand,
    DoneAppointmentCommand,
    UnDoneAppointmentCommand,
    FindAppointmentCommand,
)
from bizbook.messages import MESSAGE_NOT_EDITED
from bizbook.model import fields
from bizbook.model.book import ReadOnlyBook

from .exceptions import ArgumentParseError
from .parser_util import (
    PREFIX_CLIENT, PREFIX_DATE, PREFIX_NAME, PREFIX_SERVICE, PREFIX_TIME,
    parse_field, parse_index, parse_optional,
    require_empty_preamble, require_prefixes,
)
from .tokenizer import tokenize

APPOINTMENT_PREFIXES = (PREFIX_CLIENT, PREFIX_SERVICE, PREFIX_DATE, PREFIX_TIME)


def parse_add_appointment(arguments: str, lookup: Optional[ReadOnlyBook] = None) -> AddAppointmentCommand:
    usage = AddAppointmentCommand.MESSAGE_USAGE
    argmap = tokenize(arguments, *APPOINTMENT_PREFIXES)
    require_prefixes(argmap, usage, *APPOINTMENT_PREFIXES)
    require_empty_preamble(argmap, usage)

    return AddAppointmentCommand(
        client_index=parse_index(argmap.get_value(PREFIX_CLIENT), usage, lookup, "clients", "client"),
        service_code=parse_field(fields.parse_service_code, argmap.get_value(PREFIX_SERVICE), usage),
        date=parse_field(fields.parse_date, argmap.get_value(PREFIX_DATE), usage),
        start_time=parse_field(fields.parse_time, argmap.get_value(PREFIX_TIME), usage),
    )


def parse_edit_appointment(arguments: str, lookup: Optional[ReadOnlyBook] = None) -> EditAppointmentCommand:
    usage = EditAppointmentCommand.MESSAGE_USAGE
    argmap = tokenize(arguments, *APPOINTMENT_PREFIXES)
    index = parse_index(argmap.preamble, usage, lookup, "appointments", "appointment")

    client_index = None
    if argmap.has(PREFIX_CLIENT):
        client_index = parse_index(argmap.get_value(PREFIX_CLIENT), usage, lookup, "clients", "client")

    descriptor = EditAppointmentDescriptor(
        client_index=client_index,
        service_code=parse_optional(fields.parse_service_code, argmap, PREFIX_SERVICE, usage),
        date=parse_optional(fields.parse_date, argmap, PREFIX_DATE, usage),
        start_time=parse_optional(fields.parse_time, argmap, PREFIX_TIME, usage),
    )
    if not descriptor.is_any_field_edited():
        raise ArgumentParseError(usage, MESSAGE_NOT_EDITED)
    return EditAppointmentCommand(index, descriptor)


def parse_delete_appointment(arguments: str, lookup: Optional[ReadOnlyBook] = None) -> DeleteAppointmentCommand:
    usage = DeleteAppointmentCommand.MESSAGE_USAGE
    return DeleteAppointmentCommand(parse_index(arguments, usage, lookup, "appointments", "appointment"))


def parse_done_appointment(arguments: str, lookup: Optional[ReadOnlyBook] = None) -> DoneAppointmentCommand:
    usage = DoneAppointmentCommand.MESSAGE_USAGE
    return DoneAppointmentCommand(parse_index(arguments, usage, lookup, "appointments", "appointment"))


def parse_undone_appointment(arguments: str, lookup: Optional[ReadOnlyBook] = None) -> UnDoneAppointmentCommand:
    usage = UnDoneAppointmentCommand.MESSAGE_USAGE
    return UnDoneAppointmentCommand(parse_index(arguments, usage, lookup, "appointments", "appointment"))


def parse_find_appointment(arguments: str, lookup: Optional[ReadOnlyBook] = None) -> FindAppointmentCommand:
    usage = FindAppointmentCommand.MESSAGE_USAGE
    argmap = tokenize(arguments, PREFIX_NAME, PREFIX_SERVICE, PREFIX_DATE)
    require_empty_preamble(argmap, usage)
    if not any(argmap.has(p) for p in (PREFIX_NAME, PREFIX_SERVICE, PREFIX_DATE)):
        raise ArgumentParseError(usage)

    client_name = argmap.get_value(PREFIX_NAME)
    if client_name is not None and not client_name.split():
        raise ArgumentParseError(usage)

    return FindAppointmentCommand(
        client_name=client_name,
        service_code=parse_optional(fields.parse_service_code, argmap, PREFIX_SERVICE, usage),
        date=parse_optional(fields.parse_date, argmap, PREFIX_DATE, usage),
    )
