"""Tests for Person, Appointment and Index."""

from datetime import date, time

import pytest

from roster.domain import Appointment, Index, Person, Priority
from roster.domain.fields import EMAIL_CONSTRAINTS, NAME_CONSTRAINTS


def _person(name: str = "Alice Pauline", **changes) -> Person:
    values = dict(
        name=name,
        phone="94351253",
        email="alice@example.com",
        address="123, Jurong West Ave 6, #08-111",
    )
    values.update(changes)
    return Person(**values)


def _appointment(name: str = "Alice Pauline", start: str = "09:00", end: str = "10:00", **kw) -> Appointment:
    day = kw.pop("day", date(2024, 3, 14))
    return Appointment(
        name=name,
        date=day,
        start=time.fromisoformat(start),
        end=time.fromisoformat(end),
        **kw,
    )


def test_person_defaults() -> None:
    person = _person()
    assert person.priority is Priority.NONE
    assert person.remark == ""
    assert person.tags == frozenset()
    assert person.archived is False


def test_person_rejects_invalid_fields() -> None:
    with pytest.raises(ValueError, match=NAME_CONSTRAINTS):
        _person(name="")
    with pytest.raises(ValueError) as excinfo:
        _person(email="not-an-email")
    assert str(excinfo.value) == EMAIL_CONSTRAINTS
    with pytest.raises(ValueError):
        _person(tags={"best friend"})


def test_person_tags_are_frozen() -> None:
    person = _person(tags={"friends", "colleagues"})
    assert isinstance(person.tags, frozenset)
    assert person == _person(tags=["colleagues", "friends"])


def test_is_same_person_compares_names_only() -> None:
    alice = _person()
    assert alice.is_same_person(_person(phone="999", priority=Priority.HIGH))
    assert not alice.is_same_person(_person(name="Bob"))
    assert not alice.is_same_person(None)


def test_with_changes_returns_new_value() -> None:
    alice = _person()
    edited = alice.with_changes(phone="12345678")
    assert edited.phone == "12345678"
    assert alice.phone == "94351253"
    assert alice.archive().archived is True
    assert alice.archive().unarchive() == alice


def test_appointment_requires_start_before_end() -> None:
    with pytest.raises(ValueError):
        _appointment(start="10:00", end="10:00")
    with pytest.raises(ValueError):
        _appointment(start="11:00", end="10:00")


def test_appointment_overlap_same_person() -> None:
    base = _appointment(start="09:00", end="10:00")
    assert base.overlaps(_appointment(start="09:30", end="11:00"))
    assert base.overlaps(_appointment(start="08:00", end="12:00"))
    # Touching windows do not overlap.
    assert not base.overlaps(_appointment(start="10:00", end="11:00"))
    assert not base.overlaps(_appointment(start="08:00", end="09:00"))


def test_appointment_overlap_needs_same_person_and_day() -> None:
    base = _appointment()
    assert not base.overlaps(_appointment(name="Benson Meier"))
    assert not base.overlaps(_appointment(day=date(2024, 3, 15)))


def test_appointment_renamed() -> None:
    renamed = _appointment(description="Review").renamed("Alice Tan")
    assert renamed.name == "Alice Tan"
    assert renamed.description == "Review"


def test_index_conversions() -> None:
    assert Index.from_one_based(1).zero_based == 0
    assert Index.from_zero_based(4).one_based == 5
    assert Index.from_one_based(3) == Index.from_zero_based(2)
    assert str(Index.from_one_based(2)) == "2"
    with pytest.raises(ValueError):
        Index.from_one_based(0)
    with pytest.raises(ValueError):
        Index.from_zero_based(-1)
