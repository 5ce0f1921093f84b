"""Commands that schedule, cancel and list appointments."""

from dataclasses import dataclass
from datetime import date, time
from typing import ClassVar

from roster.application.commands.base import Command, displayed_person
from roster.application.dto import CommandResult
from roster.application.errors import CommandError
from roster.application.messages import (
    MESSAGE_INVALID_APPOINTMENT_DISPLAYED_INDEX,
    format_appointment,
)
from roster.application.model import Model
from roster.domain import Appointment, Index


@dataclass(frozen=True)
class AddAppointmentCommand(Command):
    COMMAND_WORD: ClassVar[str] = "appt"
    MESSAGE_USAGE: ClassVar[str] = (
        "appt: Schedules an appointment with the person identified by the index number used "
        "in the displayed person list.\n"
        "Parameters: INDEX (must be a positive integer) d/DATE from/START to/END [desc/DESCRIPTION]\n"
        "Example: appt 1 d/2024-03-14 from/09:00 to/10:30 desc/Annual review"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "New appointment added: {}"
    MESSAGE_CONFLICT: ClassVar[str] = "This appointment conflicts with:\n{}"
    MESSAGE_INVALID_WINDOW: ClassVar[str] = "The start time must be before the end time"
    mutates: ClassVar[bool] = True

    index: Index
    date: date
    start: time
    end: time
    description: str = ""

    def execute(self, model: Model) -> CommandResult:
        person = displayed_person(model, self.index)
        if self.start >= self.end:
            raise CommandError(self.MESSAGE_INVALID_WINDOW)
        appointment = Appointment(
            name=person.name,
            date=self.date,
            start=self.start,
            end=self.end,
            description=self.description,
        )
        conflicts = model.get_conflicting_appointments(appointment)
        if conflicts:
            raise CommandError(
                self.MESSAGE_CONFLICT.format("\n".join(format_appointment(a) for a in conflicts))
            )
        model.add_appointment(appointment)
        return CommandResult(self.MESSAGE_SUCCESS.format(format_appointment(appointment)))


@dataclass(frozen=True)
class DeleteAppointmentCommand(Command):
    COMMAND_WORD: ClassVar[str] = "deleteappt"
    MESSAGE_USAGE: ClassVar[str] = (
        "deleteappt: Deletes the appointment identified by the index number used in the "
        "displayed appointment list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: deleteappt 1"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Deleted Appointment: {}"
    mutates: ClassVar[bool] = True

    index: Index

    def execute(self, model: Model) -> CommandResult:
        if self.index.zero_based >= len(model.filtered_appointments):
            raise CommandError(MESSAGE_INVALID_APPOINTMENT_DISPLAYED_INDEX)
        removed = model.delete_appointment(self.index.zero_based)
        return CommandResult(self.MESSAGE_SUCCESS.format(format_appointment(removed)))


@dataclass(frozen=True)
class ListAppointmentsCommand(Command):
    COMMAND_WORD: ClassVar[str] = "listappt"
    MESSAGE_USAGE: ClassVar[str] = "listappt: Lists all appointments in chronological order."
    MESSAGE_EMPTY: ClassVar[str] = "No appointments scheduled."

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_appointment_list(lambda _appointment: True)
        shown = model.filtered_appointments
        if not shown:
            return CommandResult(self.MESSAGE_EMPTY)
        return CommandResult(
            "\n".join(f"{i}. {format_appointment(a)}" for i, a in enumerate(shown, start=1))
        )
