"""Result types handed from commands to the presentation layer, and the storage payload."""

from dataclasses import dataclass

from roster.domain import Appointment, Person


@dataclass(frozen=True)
class CommandResult:
    """Feedback for the user plus flags the front end acts on."""

    feedback: str
    show_help: bool = False
    exit: bool = False


@dataclass(frozen=True)
class AddressBookData:
    """Everything persisted: persons of both partitions (see Person.archived) and appointments."""

    persons: tuple[Person, ...] = ()
    appointments: tuple[Appointment, ...] = ()

    @property
    def current_persons(self) -> list[Person]:
        return [p for p in self.persons if not p.archived]

    @property
    def archived_persons(self) -> list[Person]:
        return [p for p in self.persons if p.archived]
