from .base import Command, CommandResult
from .exceptions import CommandError
from .client import (
    AddClientCommand,
    EditClientCommand,
    EditClientDescriptor,
    DeleteClientCommand,
    FindClientCommand,
    ListClientCommand,
    ClearClientCommand,
)
from .service import (
    AddServiceCommand,
    EditServiceCommand,
    EditServiceDescriptor,
    DeleteServiceCommand,
    FindServiceCommand,
    ListServiceCommand,
    ClearServiceCommand,
)
from .expense import (
    AddExpenseCommand,
    EditExpenseCommand,
    EditExpenseDescriptor,
    DeleteExpenseCommand,
    FindExpenseCommand,
    ListExpenseCommand,
    ClearExpenseCommand,
)
from .appointment import (
    AddAppointmentCommand,
    EditAppointmentCommand,
    EditAppointmentDescriptor,
    DeleteAppointmentCommand,
    DoneAppointmentCommand,
    UnDoneAppointmentCommand,
    FindAppointmentCommand,
    ListAppointmentCommand,
    ClearAppointmentCommand,
)
from .revenue import FindRevenueCommand, ListRevenueCommand, ClearRevenueCommand
from .general import HelpCommand, ExitCommand, ProfitCommand
