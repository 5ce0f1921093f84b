"""Infrastructure layer: concrete implementations of application ports."""

from roster.infrastructure.json_storage import JsonAddressBookStorage
from roster.infrastructure.memory_storage import InMemoryAddressBookStorage
from roster.infrastructure.neo4j_storage import Neo4jAddressBookStorage
from roster.infrastructure.phone import normalize_phone, phone_normalizer

__all__ = [
    "InMemoryAddressBookStorage",
    "JsonAddressBookStorage",
    "Neo4jAddressBookStorage",
    "normalize_phone",
    "phone_normalizer",
]
