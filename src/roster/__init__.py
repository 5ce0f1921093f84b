"""
Roster core: clean-architecture layout.

- domain: entities (Person, Appointment, Index) and field rules. No outer dependencies.
- application: model and displayed views, parsing, commands, ports, DTOs.
- infrastructure: adapters (JsonAddressBookStorage, InMemoryAddressBookStorage, Neo4jAddressBookStorage).
"""

from roster.application import (
    AddressBook,
    AddressBookData,
    AddressBookStorage,
    CommandError,
    CommandFailure,
    CommandParser,
    CommandResult,
    CommandService,
    DataLoadingError,
    MasterPredicate,
    Model,
    ParseError,
    ValidationError,
    load_model,
)
from roster.domain import Appointment, Index, Person, Priority
from roster.infrastructure import (
    InMemoryAddressBookStorage,
    JsonAddressBookStorage,
    Neo4jAddressBookStorage,
)

__all__ = [
    "AddressBook",
    "AddressBookData",
    "AddressBookStorage",
    "Appointment",
    "CommandError",
    "CommandFailure",
    "CommandParser",
    "CommandResult",
    "CommandService",
    "DataLoadingError",
    "InMemoryAddressBookStorage",
    "Index",
    "JsonAddressBookStorage",
    "MasterPredicate",
    "Model",
    "Neo4jAddressBookStorage",
    "ParseError",
    "Person",
    "Priority",
    "ValidationError",
    "load_model",
]
