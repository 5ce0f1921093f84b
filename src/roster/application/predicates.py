"""Person filters and sort keys used to shape the displayed list."""

from collections.abc import Callable
from dataclasses import dataclass

from roster.domain import Appointment, Person, Priority

PersonPredicate = Callable[[Person], bool]
PersonSortKey = Callable[[Person], object]


def show_all(_person: Person) -> bool:
    return True


@dataclass(frozen=True)
class PersonFilter:
    """
    Keyword filter over name, address and priority.
    Within one field any keyword may match; every field with keywords must match.
    Name and address match by case-insensitive substring, priority by equality.
    """

    names: tuple[str, ...] = ()
    addresses: tuple[str, ...] = ()
    priorities: tuple[Priority, ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "names", tuple(self.names))
        object.__setattr__(self, "addresses", tuple(self.addresses))
        object.__setattr__(self, "priorities", tuple(self.priorities))

    def __call__(self, person: Person) -> bool:
        return (
            _contains_any(person.name, self.names)
            and _contains_any(person.address, self.addresses)
            and (not self.priorities or person.priority in self.priorities)
        )


def _contains_any(value: str, keywords: tuple[str, ...]) -> bool:
    if not keywords:
        return True
    haystack = value.lower()
    return any(keyword.lower() in haystack for keyword in keywords)


def sort_by_name(person: Person) -> object:
    return person.name.lower()


def sort_by_priority(person: Person) -> object:
    return (person.priority.rank, person.name.lower())


def appointments_of(name: str) -> Callable[[Appointment], bool]:
    return lambda appointment: appointment.name == name
