"""Application layer: model, parsing, commands, ports and DTOs. Depends only on domain."""

from roster.application.command_service import CommandService, load_model
from roster.application.dto import AddressBookData, CommandResult
from roster.application.errors import (
    CommandError,
    CommandFailure,
    DataLoadingError,
    ParseError,
    StorageError,
    ValidationError,
)
from roster.application.model import AddressBook, MasterPredicate, Model
from roster.application.parsing import CommandParser
from roster.application.ports import AddressBookStorage

__all__ = [
    "AddressBook",
    "AddressBookData",
    "AddressBookStorage",
    "CommandError",
    "CommandFailure",
    "CommandParser",
    "CommandResult",
    "CommandService",
    "DataLoadingError",
    "MasterPredicate",
    "Model",
    "ParseError",
    "StorageError",
    "ValidationError",
    "load_model",
]
