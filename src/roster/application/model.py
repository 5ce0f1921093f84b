"""In-memory model: the address book plus the derived, displayed views of it."""

import logging
from collections.abc import Callable, Iterable
from enum import Enum

from roster.application.dto import AddressBookData
from roster.application.predicates import (
    PersonPredicate,
    PersonSortKey,
    appointments_of,
    show_all,
)
from roster.domain import Appointment, Person

logger = logging.getLogger(__name__)

AppointmentPredicate = Callable[[Appointment], bool]

MESSAGE_DUPLICATE_PERSON = "Person list contains duplicate person(s)."


class MasterPredicate(Enum):
    """Partition of the displayed list. Exactly one is active at a time."""

    SHOW_ONLY_CURRENT = ("current", lambda person: not person.archived)
    SHOW_ONLY_ARCHIVED = ("archived", lambda person: person.archived)

    def __init__(self, label: str, predicate: PersonPredicate) -> None:
        self.label = label
        self._predicate = predicate

    def __call__(self, person: Person) -> bool:
        return self._predicate(person)


class AddressBook:
    """Persons with unique names, in insertion order, and their appointments."""

    def __init__(
        self,
        persons: Iterable[Person] = (),
        appointments: Iterable[Appointment] = (),
    ) -> None:
        self._persons: list[Person] = []
        self._appointments: list[Appointment] = []
        for person in persons:
            if self.has_person(person):
                raise ValueError(MESSAGE_DUPLICATE_PERSON)
            self._persons.append(person)
        self._appointments.extend(appointments)

    @classmethod
    def from_data(cls, data: AddressBookData) -> "AddressBook":
        return cls(data.persons, data.appointments)

    def to_data(self) -> AddressBookData:
        return AddressBookData(
            persons=tuple(self._persons),
            appointments=tuple(self._appointments),
        )

    @property
    def persons(self) -> list[Person]:
        return list(self._persons)

    @property
    def appointments(self) -> list[Appointment]:
        return list(self._appointments)

    def has_person(self, person: Person) -> bool:
        return any(existing.is_same_person(person) for existing in self._persons)

    def add_person(self, person: Person, index: int | None = None) -> None:
        if self.has_person(person):
            raise ValueError(MESSAGE_DUPLICATE_PERSON)
        if index is None:
            self._persons.append(person)
        else:
            self._persons.insert(index, person)

    def _position_of(self, target: Person) -> int:
        for position, existing in enumerate(self._persons):
            if existing == target:
                return position
        raise KeyError(f"Person not in address book: {target.name}")

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace target with edited in place. edited must not clash with another person."""
        position = self._position_of(target)
        if not target.is_same_person(edited) and self.has_person(edited):
            raise ValueError(MESSAGE_DUPLICATE_PERSON)
        self._persons[position] = edited

    def remove_person(self, target: Person) -> None:
        del self._persons[self._position_of(target)]

    def add_appointment(self, appointment: Appointment) -> None:
        self._appointments.append(appointment)

    def remove_appointment(self, appointment: Appointment) -> None:
        self._appointments.remove(appointment)

    def rename_appointments(self, old_name: str, new_name: str) -> None:
        belongs = appointments_of(old_name)
        self._appointments = [
            a.renamed(new_name) if belongs(a) else a for a in self._appointments
        ]

    def remove_appointments_of(self, name: str) -> None:
        belongs = appointments_of(name)
        self._appointments = [a for a in self._appointments if not belongs(a)]

    def conflicting_appointments(self, candidate: Appointment) -> list[Appointment]:
        return [a for a in self._appointments if a.overlaps(candidate)]


class Model:
    """
    Address book plus display state. The displayed lists are projections
    recomputed from the book and the active predicates on every access.
    """

    def __init__(self, address_book: AddressBook | None = None) -> None:
        self._book = address_book if address_book is not None else AddressBook()
        self._master = MasterPredicate.SHOW_ONLY_CURRENT
        self._content: PersonPredicate = show_all
        self._sort_key: PersonSortKey | None = None
        self._appointment_filter: AppointmentPredicate = lambda _appointment: True

    @property
    def address_book(self) -> AddressBook:
        return self._book

    def set_address_book(self, address_book: AddressBook) -> None:
        self._book = address_book

    @property
    def master_predicate(self) -> MasterPredicate:
        return self._master

    # Person list

    @property
    def filtered_persons(self) -> list[Person]:
        shown = [p for p in self._book.persons if self._master(p) and self._content(p)]
        if self._sort_key is not None:
            shown.sort(key=self._sort_key)
        return shown

    def update_filtered_person_list(self, predicate: PersonPredicate) -> None:
        self._content = predicate

    def update_master_predicate(self, master: MasterPredicate) -> None:
        self._master = master

    def update_sorting_order(self, sort_key: PersonSortKey | None) -> None:
        self._sort_key = sort_key

    def has_person(self, person: Person) -> bool:
        return self._book.has_person(person)

    def add_person(self, person: Person) -> None:
        self._book.add_person(person)

    def add_person_at(self, person: Person, index: int) -> None:
        self._book.add_person(person, index)

    def delete_person(self, target: Person) -> None:
        """Remove target and every appointment that refers to it."""
        self._book.remove_person(target)
        self._book.remove_appointments_of(target.name)
        logger.debug("Deleted person %s", target.name)

    def set_person(self, target: Person, edited: Person) -> None:
        self._book.set_person(target, edited)
        if target.name != edited.name:
            self.update_appointments(target.name, edited.name)

    # Appointments

    @property
    def filtered_appointments(self) -> list[Appointment]:
        shown = [a for a in self._book.appointments if self._appointment_filter(a)]
        shown.sort(key=lambda a: (a.date, a.start, a.end))
        return shown

    def update_filtered_appointment_list(self, predicate: AppointmentPredicate) -> None:
        self._appointment_filter = predicate

    def add_appointment(self, appointment: Appointment) -> None:
        self._book.add_appointment(appointment)

    def delete_appointment(self, index: int) -> Appointment:
        """Remove and return the appointment at index of the displayed appointment list."""
        appointment = self.filtered_appointments[index]
        self._book.remove_appointment(appointment)
        return appointment

    def delete_appointments(self, name: str) -> None:
        self._book.remove_appointments_of(name)

    def update_appointments(self, old_name: str, new_name: str) -> None:
        self._book.rename_appointments(old_name, new_name)

    def get_conflicting_appointments(self, candidate: Appointment) -> list[Appointment]:
        return self._book.conflicting_appointments(candidate)
