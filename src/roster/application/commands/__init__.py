"""Commands: one immutable value per user intent, each with execute(model)."""

from roster.application.commands.appointment import (
    AddAppointmentCommand,
    DeleteAppointmentCommand,
    ListAppointmentsCommand,
)
from roster.application.commands.base import Command
from roster.application.commands.general import ExitCommand, HelpCommand
from roster.application.commands.person import (
    AddCommand,
    ArchiveCommand,
    ClearCommand,
    DeleteCommand,
    EditCommand,
    EditPersonDescriptor,
    FindCommand,
    GetCommand,
    ListArchiveCommand,
    ListCommand,
    RemarkCommand,
    SortCommand,
    UnarchiveCommand,
)

ALL_COMMANDS: tuple[type[Command], ...] = (
    AddCommand,
    EditCommand,
    DeleteCommand,
    FindCommand,
    GetCommand,
    ListCommand,
    ListArchiveCommand,
    ArchiveCommand,
    UnarchiveCommand,
    RemarkCommand,
    SortCommand,
    ClearCommand,
    AddAppointmentCommand,
    DeleteAppointmentCommand,
    ListAppointmentsCommand,
    HelpCommand,
    ExitCommand,
)

__all__ = [
    "ALL_COMMANDS",
    "AddAppointmentCommand",
    "AddCommand",
    "ArchiveCommand",
    "ClearCommand",
    "Command",
    "DeleteAppointmentCommand",
    "DeleteCommand",
    "EditCommand",
    "EditPersonDescriptor",
    "ExitCommand",
    "FindCommand",
    "GetCommand",
    "HelpCommand",
    "ListAppointmentsCommand",
    "ListArchiveCommand",
    "ListCommand",
    "RemarkCommand",
    "SortCommand",
    "UnarchiveCommand",
]
