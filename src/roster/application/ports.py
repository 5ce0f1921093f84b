"""Application ports (interfaces). Implemented by infrastructure adapters."""

from typing import Protocol

from roster.application.dto import AddressBookData


class AddressBookStorage(Protocol):
    """Loads and saves the full collection (current and archived persons, appointments)."""

    def load(self) -> AddressBookData | None:
        """Return the stored data, or None when nothing has been saved yet."""
        ...

    def save(self, data: AddressBookData) -> None:
        """Replace the stored data with the given collection."""
        ...
