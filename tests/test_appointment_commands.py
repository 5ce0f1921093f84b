"""Tests for scheduling, deleting and listing appointments."""

from datetime import date, time

import pytest

from roster.application.commands import (
    AddAppointmentCommand,
    DeleteAppointmentCommand,
    ListAppointmentsCommand,
)
from roster.application.errors import CommandError
from roster.application.messages import (
    MESSAGE_INVALID_APPOINTMENT_DISPLAYED_INDEX,
    MESSAGE_INVALID_PERSON_DISPLAYED_INDEX,
)
from roster.application.model import AddressBook, Model
from roster.domain import Index, Person

DAY = date(2024, 3, 14)


def _person(name: str) -> Person:
    return Person(name=name, phone="94351253", email="someone@example.com", address="Street 1")


def _model() -> Model:
    return Model(AddressBook([_person("Alice"), _person("Benson")]))


def _appt(index: int, start: str, end: str, day: date = DAY, description: str = "") -> AddAppointmentCommand:
    return AddAppointmentCommand(
        index=Index.from_one_based(index),
        date=day,
        start=time.fromisoformat(start),
        end=time.fromisoformat(end),
        description=description,
    )


def test_add_appointment_for_displayed_person() -> None:
    model = _model()
    result = _appt(2, "09:00", "10:00", description="Checkup").execute(model)
    assert [a.name for a in model.address_book.appointments] == ["Benson"]
    assert result.feedback == (
        "New appointment added: Benson; Date: 2024-03-14; From: 09:00; To: 10:00; "
        "Description: Checkup"
    )


def test_conflicting_appointment_is_rejected() -> None:
    model = _model()
    _appt(1, "09:00", "10:00").execute(model)
    with pytest.raises(CommandError) as excinfo:
        _appt(1, "09:30", "11:00").execute(model)
    assert excinfo.value.message.startswith("This appointment conflicts with:\nAlice; Date: 2024-03-14")
    assert len(model.address_book.appointments) == 1


def test_non_overlapping_appointments_are_accepted() -> None:
    model = _model()
    _appt(1, "09:00", "10:00").execute(model)
    _appt(1, "10:00", "11:00").execute(model)
    _appt(2, "09:30", "10:30").execute(model)
    _appt(1, "09:00", "10:00", day=date(2024, 3, 15)).execute(model)
    assert len(model.address_book.appointments) == 4


def test_add_appointment_invalid_person_index() -> None:
    with pytest.raises(CommandError) as excinfo:
        _appt(3, "09:00", "10:00").execute(_model())
    assert excinfo.value.message == MESSAGE_INVALID_PERSON_DISPLAYED_INDEX


def test_list_appointments_is_chronological() -> None:
    model = _model()
    _appt(1, "13:00", "14:00").execute(model)
    _appt(2, "09:00", "10:00", day=date(2024, 3, 15)).execute(model)
    _appt(2, "08:00", "09:00").execute(model)
    result = ListAppointmentsCommand().execute(model)
    assert result.feedback.splitlines() == [
        "1. Benson; Date: 2024-03-14; From: 08:00; To: 09:00",
        "2. Alice; Date: 2024-03-14; From: 13:00; To: 14:00",
        "3. Benson; Date: 2024-03-15; From: 09:00; To: 10:00",
    ]


def test_list_appointments_empty() -> None:
    assert ListAppointmentsCommand().execute(_model()).feedback == ListAppointmentsCommand.MESSAGE_EMPTY


def test_delete_appointment_by_displayed_index() -> None:
    model = _model()
    _appt(1, "13:00", "14:00").execute(model)
    _appt(2, "08:00", "09:00").execute(model)
    result = DeleteAppointmentCommand(Index.from_one_based(1)).execute(model)
    assert result.feedback.startswith("Deleted Appointment: Benson")
    assert [a.name for a in model.address_book.appointments] == ["Alice"]


def test_delete_appointment_invalid_index() -> None:
    model = _model()
    _appt(1, "13:00", "14:00").execute(model)
    with pytest.raises(CommandError) as excinfo:
        DeleteAppointmentCommand(Index.from_one_based(2)).execute(model)
    assert excinfo.value.message == MESSAGE_INVALID_APPOINTMENT_DISPLAYED_INDEX
    assert len(model.address_book.appointments) == 1
