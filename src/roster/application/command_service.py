"""Command execution: text -> parsed command -> execute against the model -> save."""

import logging

from roster.application.dto import CommandResult
from roster.application.errors import CommandError, DataLoadingError, StorageError
from roster.application.model import AddressBook, Model
from roster.application.parsing import CommandParser
from roster.application.ports import AddressBookStorage

logger = logging.getLogger(__name__)

MESSAGE_SAVE_FAILED = "Could not save data to storage: {}"


def load_model(storage: AddressBookStorage) -> Model:
    """Build a Model from storage. An empty book is used when nothing is stored yet."""
    data = storage.load()
    if data is None:
        logger.info("No stored address book found; starting with an empty one")
        return Model()
    try:
        book = AddressBook.from_data(data)
    except ValueError as exc:
        raise DataLoadingError(str(exc)) from exc
    logger.info(
        "Loaded %d person(s) and %d appointment(s)",
        len(data.persons),
        len(data.appointments),
    )
    return Model(book)


class CommandService:
    """Runs one command at a time. Data is saved after every successful mutating command."""

    def __init__(
        self,
        model: Model,
        storage: AddressBookStorage,
        parser: CommandParser | None = None,
    ) -> None:
        self._model = model
        self._storage = storage
        self._parser = parser or CommandParser()

    @property
    def model(self) -> Model:
        return self._model

    def execute(self, command_text: str) -> CommandResult:
        """Parse and run command_text. Raises CommandFailure subclasses for user errors."""
        logger.info("----------------[USER COMMAND][%s]", command_text)
        command = self._parser.parse_command(command_text)
        result = command.execute(self._model)
        if command.mutates:
            self._save()
        return result

    def _save(self) -> None:
        try:
            self._storage.save(self._model.address_book.to_data())
        except (OSError, StorageError) as exc:
            logger.exception("Saving address book failed")
            raise CommandError(MESSAGE_SAVE_FAILED.format(exc)) from exc
