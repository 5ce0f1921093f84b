"""Neo4j implementation of AddressBookStorage.
Graph: one AddressBook node per book id; persons and appointments hang off it.
(b:AddressBook {id})-[:HAS_PERSON {position}]->(p:Person {name, ..., archived}).
(b:AddressBook {id})-[:HAS_APPOINTMENT {position}]->(a:Appointment {name, date, ...}).
Appointments keep the person's name as a property, not a relationship to the Person node.
"""

import logging
from datetime import date, datetime, timezone

from neo4j.exceptions import DriverError, Neo4jError

from roster.application.dto import AddressBookData
from roster.application.errors import DataLoadingError, StorageError
from roster.domain import Appointment, Person, Priority

logger = logging.getLogger(__name__)

_TIME_FORMAT = "%H:%M"

_BOOK_EXISTS_QUERY = """
MATCH (b:AddressBook {id: $book_id})
RETURN b.id AS id
"""

_CLEAR_BOOK_QUERY = """
MATCH (b:AddressBook {id: $book_id})
OPTIONAL MATCH (b)-[:HAS_PERSON|HAS_APPOINTMENT]->(n)
DETACH DELETE n
"""

_MERGE_BOOK_QUERY = """
MERGE (b:AddressBook {id: $book_id})
SET b.updated_at = $updated_at
"""

_CREATE_PERSONS_QUERY = """
MATCH (b:AddressBook {id: $book_id})
UNWIND $rows AS row
CREATE (b)-[:HAS_PERSON {position: row.position}]->(:Person {
    name: row.name,
    phone: row.phone,
    email: row.email,
    address: row.address,
    priority: row.priority,
    remark: row.remark,
    tags: row.tags,
    archived: row.archived
})
"""

_CREATE_APPOINTMENTS_QUERY = """
MATCH (b:AddressBook {id: $book_id})
UNWIND $rows AS row
CREATE (b)-[:HAS_APPOINTMENT {position: row.position}]->(:Appointment {
    name: row.name,
    date: row.date,
    start_time: row.start_time,
    end_time: row.end_time,
    description: row.description
})
"""

_LIST_PERSONS_QUERY = """
MATCH (b:AddressBook {id: $book_id})-[r:HAS_PERSON]->(p:Person)
RETURN p
ORDER BY r.position
"""

_LIST_APPOINTMENTS_QUERY = """
MATCH (b:AddressBook {id: $book_id})-[r:HAS_APPOINTMENT]->(a:Appointment)
RETURN a
ORDER BY r.position
"""


class Neo4jAddressBookStorage:
    """Stores one address book in Neo4j, scoped by book_id. save replaces the whole book."""

    def __init__(self, driver: object, book_id: str = "default") -> None:
        self._driver = driver
        self._book_id = book_id

    def load(self) -> AddressBookData | None:
        try:
            with self._driver.session() as session:
                if session.run(_BOOK_EXISTS_QUERY, book_id=self._book_id).single() is None:
                    return None
                person_nodes = [
                    record["p"]
                    for record in session.run(_LIST_PERSONS_QUERY, book_id=self._book_id)
                ]
                appointment_nodes = [
                    record["a"]
                    for record in session.run(_LIST_APPOINTMENTS_QUERY, book_id=self._book_id)
                ]
        except (Neo4jError, DriverError) as exc:
            raise DataLoadingError(f"Could not read address book from Neo4j: {exc}") from exc
        return AddressBookData(
            persons=tuple(_node_to_person(node) for node in person_nodes),
            appointments=tuple(_node_to_appointment(node) for node in appointment_nodes),
        )

    def save(self, data: AddressBookData) -> None:
        person_rows = [
            {
                "position": position,
                "name": p.name,
                "phone": p.phone,
                "email": p.email,
                "address": p.address,
                "priority": p.priority.value,
                "remark": p.remark,
                "tags": sorted(p.tags),
                "archived": p.archived,
            }
            for position, p in enumerate(data.persons)
        ]
        appointment_rows = [
            {
                "position": position,
                "name": a.name,
                "date": a.date.isoformat(),
                "start_time": a.start.strftime(_TIME_FORMAT),
                "end_time": a.end.strftime(_TIME_FORMAT),
                "description": a.description,
            }
            for position, a in enumerate(data.appointments)
        ]
        try:
            with self._driver.session() as session:
                session.execute_write(
                    _replace_book,
                    self._book_id,
                    person_rows,
                    appointment_rows,
                )
        except (Neo4jError, DriverError) as exc:
            raise StorageError(f"Neo4j is unavailable: {exc}") from exc
        logger.debug("Saved address book %s to Neo4j", self._book_id)


def _replace_book(tx, book_id: str, person_rows: list[dict], appointment_rows: list[dict]) -> None:
    tx.run(_CLEAR_BOOK_QUERY, book_id=book_id)
    tx.run(
        _MERGE_BOOK_QUERY,
        book_id=book_id,
        updated_at=datetime.now(timezone.utc).isoformat(),
    )
    if person_rows:
        tx.run(_CREATE_PERSONS_QUERY, book_id=book_id, rows=person_rows)
    if appointment_rows:
        tx.run(_CREATE_APPOINTMENTS_QUERY, book_id=book_id, rows=appointment_rows)


def _node_tags(node) -> frozenset[str]:
    tags = node.get("tags")
    if tags is None:
        return frozenset()
    if not isinstance(tags, list) or not all(isinstance(tag, str) for tag in tags):
        raise DataLoadingError(f"Invalid tags in Neo4j for person {node.get('name')!r}")
    return frozenset(tags)


def _node_to_person(node) -> Person:
    try:
        return Person(
            name=node["name"],
            phone=node["phone"],
            email=node["email"],
            address=node["address"],
            priority=Priority.parse(node.get("priority") or Priority.NONE.value),
            remark=node.get("remark") or "",
            tags=_node_tags(node),
            archived=bool(node.get("archived")),
        )
    except (KeyError, TypeError, AttributeError, ValueError) as exc:
        raise DataLoadingError(f"Invalid person in Neo4j: {exc}") from exc


def _node_to_appointment(node) -> Appointment:
    try:
        return Appointment(
            name=node["name"],
            date=date.fromisoformat(node["date"]),
            start=datetime.strptime(node["start_time"], _TIME_FORMAT).time(),
            end=datetime.strptime(node["end_time"], _TIME_FORMAT).time(),
            description=node.get("description") or "",
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise DataLoadingError(f"Invalid appointment in Neo4j: {exc}") from exc
