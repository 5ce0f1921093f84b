"""Domain entities: Person, Appointment, and the Index value object."""

from dataclasses import dataclass, field, replace
from datetime import date, time

from roster.domain.fields import (
    ADDRESS_CONSTRAINTS,
    EMAIL_CONSTRAINTS,
    NAME_CONSTRAINTS,
    PHONE_CONSTRAINTS,
    TAG_CONSTRAINTS,
    Priority,
    is_valid_address,
    is_valid_email,
    is_valid_name,
    is_valid_phone,
    is_valid_tag,
)


@dataclass(frozen=True)
class Person:
    """
    Represents a contact in the address book.
    Identity is the name: two persons with the same name are the same person.
    A Person is immutable; edits produce a new value via with_changes.
    """

    name: str
    phone: str
    email: str
    address: str
    priority: Priority = Priority.NONE
    remark: str = ""
    tags: frozenset[str] = field(default_factory=frozenset)
    archived: bool = False

    def __post_init__(self):
        if not is_valid_name(self.name):
            raise ValueError(NAME_CONSTRAINTS)
        if not is_valid_phone(self.phone):
            raise ValueError(PHONE_CONSTRAINTS)
        if not is_valid_email(self.email):
            raise ValueError(EMAIL_CONSTRAINTS)
        if not is_valid_address(self.address):
            raise ValueError(ADDRESS_CONSTRAINTS)
        if not isinstance(self.priority, Priority):
            raise ValueError(f"Person priority must be a Priority, got {self.priority!r}.")
        object.__setattr__(self, "tags", frozenset(self.tags))
        for tag in self.tags:
            if not is_valid_tag(tag):
                raise ValueError(TAG_CONSTRAINTS)
        object.__setattr__(self, "remark", self.remark or "")

    def is_same_person(self, other: "Person | None") -> bool:
        """Weaker notion of equality: same name, other fields may differ."""
        return other is not None and other.name == self.name

    def with_changes(self, **changes) -> "Person":
        return replace(self, **changes)

    def archive(self) -> "Person":
        return self.with_changes(archived=True)

    def unarchive(self) -> "Person":
        return self.with_changes(archived=False)


@dataclass(frozen=True)
class Appointment:
    """
    A scheduled slot with a person. The person is referenced by name only;
    renaming or deleting the person must update appointments explicitly.
    """

    name: str
    date: date
    start: time
    end: time
    description: str = ""

    def __post_init__(self):
        if not is_valid_name(self.name):
            raise ValueError(NAME_CONSTRAINTS)
        if self.start >= self.end:
            raise ValueError("Appointment start time must be before its end time.")
        object.__setattr__(self, "description", (self.description or "").strip())

    def overlaps(self, other: "Appointment") -> bool:
        """True if both belong to the same person and their time windows intersect."""
        return (
            self.name == other.name
            and self.date == other.date
            and self.start < other.end
            and other.start < self.end
        )

    def renamed(self, name: str) -> "Appointment":
        return replace(self, name=name)


@dataclass(frozen=True, order=True)
class Index:
    """Position in a displayed list. Stored zero-based, shown to users one-based."""

    zero_based: int

    def __post_init__(self):
        if self.zero_based < 0:
            raise ValueError("Index must be non-negative.")

    @classmethod
    def from_zero_based(cls, value: int) -> "Index":
        return cls(value)

    @classmethod
    def from_one_based(cls, value: int) -> "Index":
        if value < 1:
            raise ValueError("Index must be a positive integer.")
        return cls(value - 1)

    @property
    def one_based(self) -> int:
        return self.zero_based + 1

    def __str__(self) -> str:
        return str(self.one_based)
