"""In-memory implementation of AddressBookStorage (no file, no DB)."""

from roster.application.dto import AddressBookData


class InMemoryAddressBookStorage:
    """Keeps the last saved data. save_count helps tests check when saving happened."""

    def __init__(self, data: AddressBookData | None = None) -> None:
        self._data = data
        self.save_count = 0

    def load(self) -> AddressBookData | None:
        return self._data

    def save(self, data: AddressBookData) -> None:
        self._data = data
        self.save_count += 1
