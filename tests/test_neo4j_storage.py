"""Integration tests for Neo4jAddressBookStorage. Require Docker
(testcontainers)."""

from datetime import date, time

import pytest

from roster.application import AddressBookData, CommandService, load_model
from roster.domain import Appointment, Person, Priority
from roster.infrastructure import Neo4jAddressBookStorage

pytestmark = pytest.mark.integration


@pytest.fixture(scope="session")
def neo4j_driver():
    from testcontainers.neo4j import Neo4jContainer

    with Neo4jContainer() as neo4j:
        driver = neo4j.get_driver()
        try:
            yield driver
        finally:
            driver.close()


@pytest.fixture
def clean_neo4j(neo4j_driver):
    """Clear the graph before each test so tests are independent."""
    with neo4j_driver.session() as session:
        session.run("MATCH (n) DETACH DELETE n")
    yield neo4j_driver


def _data() -> AddressBookData:
    return AddressBookData(
        persons=(
            Person(
                name="Alice",
                phone="+12025551234",
                email="alice@example.com",
                address="Street 1",
                priority=Priority.HIGH,
                remark="Likes tea",
                tags=frozenset({"friends"}),
            ),
            Person(
                name="Bob",
                phone="98765432",
                email="bob@example.com",
                address="Street 2",
                archived=True,
            ),
        ),
        appointments=(Appointment("Alice", date(2024, 3, 14), time(9), time(10), "Review"),),
    )


def test_load_empty_book_returns_none(clean_neo4j):
    assert Neo4jAddressBookStorage(clean_neo4j).load() is None


def test_save_then_load_round_trip(clean_neo4j):
    storage = Neo4jAddressBookStorage(clean_neo4j)
    storage.save(_data())
    assert storage.load() == _data()


def test_save_replaces_previous_data(clean_neo4j):
    storage = Neo4jAddressBookStorage(clean_neo4j)
    storage.save(_data())
    storage.save(AddressBookData(persons=_data().persons[:1]))
    loaded = storage.load()
    assert [p.name for p in loaded.persons] == ["Alice"]
    assert loaded.appointments == ()


def test_books_are_scoped_by_id(clean_neo4j):
    Neo4jAddressBookStorage(clean_neo4j, book_id="a").save(_data())
    assert Neo4jAddressBookStorage(clean_neo4j, book_id="b").load() is None


def test_service_persists_to_neo4j(clean_neo4j):
    storage = Neo4jAddressBookStorage(clean_neo4j)
    service = CommandService(load_model(storage), storage)
    service.execute("add n/Carol p/91234567 e/carol@example.com a/Street 3")
    service.execute("archive 1")
    loaded = storage.load()
    assert [(p.name, p.archived) for p in loaded.persons] == [("Carol", True)]
