"""Tests for AddressBook and Model: displayed views, replacement, appointment bookkeeping."""

from datetime import date, time

import pytest

from roster.application.dto import AddressBookData
from roster.application.model import AddressBook, MasterPredicate, Model
from roster.application.predicates import PersonFilter, sort_by_name
from roster.domain import Appointment, Person

DAY = date(2024, 3, 14)


def _person(name: str, **changes) -> Person:
    values = dict(phone="94351253", email="someone@example.com", address="Street 1")
    values.update(changes)
    return Person(name=name, **values)


def _appointment(name: str, start: int, end: int) -> Appointment:
    return Appointment(name, DAY, time(start), time(end))


def test_master_predicate_members_are_callable() -> None:
    current, archived = _person("Alice"), _person("Bob", archived=True)
    assert MasterPredicate.SHOW_ONLY_CURRENT(current)
    assert not MasterPredicate.SHOW_ONLY_CURRENT(archived)
    assert MasterPredicate.SHOW_ONLY_ARCHIVED(archived)
    assert not MasterPredicate.SHOW_ONLY_ARCHIVED(current)
    assert len(MasterPredicate) == 2


def test_default_view_shows_current_in_insertion_order() -> None:
    model = Model(AddressBook([_person("Carl"), _person("Alice", archived=True), _person("Bob")]))
    assert model.master_predicate is MasterPredicate.SHOW_ONLY_CURRENT
    assert [p.name for p in model.filtered_persons] == ["Carl", "Bob"]


def test_view_composes_master_content_and_sort() -> None:
    model = Model(
        AddressBook(
            [
                _person("Carl Lee", archived=True),
                _person("Alice Lee", archived=True),
                _person("Bob Lee"),
                _person("Amy Tan", archived=True),
            ]
        )
    )
    model.update_master_predicate(MasterPredicate.SHOW_ONLY_ARCHIVED)
    model.update_filtered_person_list(PersonFilter(names=("lee",)))
    model.update_sorting_order(sort_by_name)
    assert [p.name for p in model.filtered_persons] == ["Alice Lee", "Carl Lee"]


def test_view_is_recomputed_after_mutation() -> None:
    model = Model()
    model.update_filtered_person_list(PersonFilter(names=("a",)))
    shown_before = model.filtered_persons
    model.add_person(_person("Alice"))
    model.add_person(_person("Bob"))
    assert shown_before == []
    assert [p.name for p in model.filtered_persons] == ["Alice"]


def test_add_person_at_position() -> None:
    model = Model(AddressBook([_person("Alice"), _person("Carl")]))
    model.add_person_at(_person("Bob"), 1)
    assert [p.name for p in model.filtered_persons] == ["Alice", "Bob", "Carl"]


def test_address_book_rejects_duplicates() -> None:
    with pytest.raises(ValueError):
        AddressBook([_person("Alice"), _person("Alice", phone="999")])
    book = AddressBook([_person("Alice")])
    with pytest.raises(ValueError):
        book.add_person(_person("Alice", archived=True))


def test_set_person_keeps_position() -> None:
    alice, bob = _person("Alice"), _person("Bob")
    book = AddressBook([alice, bob])
    book.set_person(alice, alice.with_changes(name="Alicia"))
    assert [p.name for p in book.persons] == ["Alicia", "Bob"]
    with pytest.raises(ValueError):
        book.set_person(bob, bob.with_changes(name="Alicia"))
    with pytest.raises(KeyError):
        book.set_person(alice, alice)


def test_rename_cascades_to_appointments_only_for_that_person() -> None:
    alice, bob = _person("Alice"), _person("Bob")
    model = Model(AddressBook([alice, bob], [_appointment("Alice", 9, 10), _appointment("Bob", 9, 10)]))
    model.set_person(alice, alice.with_changes(name="Alicia"))
    assert sorted(a.name for a in model.address_book.appointments) == ["Alicia", "Bob"]


def test_delete_appointments_by_name() -> None:
    model = Model(
        AddressBook(
            [_person("Alice")],
            [_appointment("Alice", 9, 10), _appointment("Alice", 11, 12), _appointment("Bob", 9, 10)],
        )
    )
    model.delete_appointments("Alice")
    assert [a.name for a in model.address_book.appointments] == ["Bob"]


def test_conflicting_appointments_query() -> None:
    existing = [_appointment("Alice", 9, 10), _appointment("Alice", 11, 12), _appointment("Bob", 9, 12)]
    model = Model(AddressBook([], existing))
    assert model.get_conflicting_appointments(_appointment("Alice", 9, 12)) == existing[:2]
    assert model.get_conflicting_appointments(_appointment("Alice", 10, 11)) == []


def test_filtered_appointments_and_delete_by_index() -> None:
    model = Model(AddressBook([], [_appointment("Bob", 13, 14), _appointment("Alice", 9, 10)]))
    assert [a.name for a in model.filtered_appointments] == ["Alice", "Bob"]
    model.update_filtered_appointment_list(lambda a: a.name == "Bob")
    removed = model.delete_appointment(0)
    assert removed.name == "Bob"
    assert [a.name for a in model.address_book.appointments] == ["Alice"]


def test_data_round_trip() -> None:
    book = AddressBook([_person("Alice"), _person("Bob", archived=True)], [_appointment("Alice", 9, 10)])
    data = book.to_data()
    assert isinstance(data, AddressBookData)
    assert [p.name for p in data.current_persons] == ["Alice"]
    assert [p.name for p in data.archived_persons] == ["Bob"]
    assert AddressBook.from_data(data).to_data() == data
