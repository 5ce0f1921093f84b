"""JSON file implementation of AddressBookStorage.

File shape:
    {"persons": [...], "archivedPersons": [...], "appointments": [...]}
Current and archived persons are kept in separate lists; the archived flag is
not stored per person but restored from the list a person was read from.
"""

import json
import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any

from roster.application.dto import AddressBookData
from roster.application.errors import DataLoadingError
from roster.domain import Appointment, Person, Priority

logger = logging.getLogger(__name__)

MESSAGE_MISSING_FIELD = "Person's {} field is missing!"
MESSAGE_MISSING_APPOINTMENT_FIELD = "Appointment's {} field is missing!"
MESSAGE_INVALID_TAGS = "Person's tags field must be a list of strings!"
MESSAGE_NOT_AN_OBJECT = "{} entries must be JSON objects!"
MESSAGE_NOT_TEXT = "The {} field must be text!"
MESSAGE_NOT_A_LIST = "The {} entry of the data file must be a list!"
_TIME_FORMAT = "%H:%M"


def person_to_dict(person: Person) -> dict[str, Any]:
    return {
        "name": person.name,
        "phone": person.phone,
        "email": person.email,
        "address": person.address,
        "priority": person.priority.value,
        "remark": person.remark,
        "tags": sorted(person.tags),
    }


def _optional_text(raw: dict[str, Any], key: str) -> str:
    value = raw.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise DataLoadingError(MESSAGE_NOT_TEXT.format(key))
    return value


def _tags_from(raw_tags: Any) -> frozenset[str]:
    if raw_tags is None:
        return frozenset()
    if not isinstance(raw_tags, list) or not all(isinstance(tag, str) for tag in raw_tags):
        raise DataLoadingError(MESSAGE_INVALID_TAGS)
    return frozenset(raw_tags)


def person_from_dict(raw: dict[str, Any], *, archived: bool) -> Person:
    """Build a Person from its JSON form. Raises DataLoadingError on missing or invalid values."""
    if not isinstance(raw, dict):
        raise DataLoadingError(MESSAGE_NOT_AN_OBJECT.format("Person"))
    for key in ("name", "phone", "email", "address"):
        if raw.get(key) is None:
            raise DataLoadingError(MESSAGE_MISSING_FIELD.format(key))
    try:
        return Person(
            name=raw["name"],
            phone=raw["phone"],
            email=raw["email"],
            address=raw["address"],
            priority=Priority.parse(raw.get("priority") or Priority.NONE.value),
            remark=_optional_text(raw, "remark"),
            tags=_tags_from(raw.get("tags")),
            archived=archived,
        )
    except (TypeError, AttributeError, ValueError) as exc:
        raise DataLoadingError(f"Invalid person {raw.get('name')!r}: {exc}") from exc


def appointment_to_dict(appointment: Appointment) -> dict[str, Any]:
    return {
        "name": appointment.name,
        "date": appointment.date.isoformat(),
        "startTime": appointment.start.strftime(_TIME_FORMAT),
        "endTime": appointment.end.strftime(_TIME_FORMAT),
        "description": appointment.description,
    }


def appointment_from_dict(raw: dict[str, Any]) -> Appointment:
    if not isinstance(raw, dict):
        raise DataLoadingError(MESSAGE_NOT_AN_OBJECT.format("Appointment"))
    for key in ("name", "date", "startTime", "endTime"):
        if raw.get(key) is None:
            raise DataLoadingError(MESSAGE_MISSING_APPOINTMENT_FIELD.format(key))
    try:
        return Appointment(
            name=raw["name"],
            date=date.fromisoformat(raw["date"]),
            start=datetime.strptime(raw["startTime"], _TIME_FORMAT).time(),
            end=datetime.strptime(raw["endTime"], _TIME_FORMAT).time(),
            description=_optional_text(raw, "description"),
        )
    except (TypeError, ValueError) as exc:
        raise DataLoadingError(str(exc)) from exc


def data_to_dict(data: AddressBookData) -> dict[str, Any]:
    return {
        "persons": [person_to_dict(p) for p in data.current_persons],
        "archivedPersons": [person_to_dict(p) for p in data.archived_persons],
        "appointments": [appointment_to_dict(a) for a in data.appointments],
    }


def _entries(raw: dict[str, Any], key: str) -> list[Any]:
    entries = raw.get(key)
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise DataLoadingError(MESSAGE_NOT_A_LIST.format(key))
    return entries


def data_from_dict(raw: dict[str, Any]) -> AddressBookData:
    if not isinstance(raw, dict):
        raise DataLoadingError("Address book file must hold a JSON object.")
    persons = [person_from_dict(p, archived=False) for p in _entries(raw, "persons")]
    # Older files have no archivedPersons list.
    persons += [person_from_dict(p, archived=True) for p in _entries(raw, "archivedPersons")]
    appointments = [appointment_from_dict(a) for a in _entries(raw, "appointments")]
    return AddressBookData(persons=tuple(persons), appointments=tuple(appointments))


class JsonAddressBookStorage:
    """Stores the address book in one JSON file."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> AddressBookData | None:
        if not self._path.exists():
            logger.info("Data file not found: %s", self._path)
            return None
        try:
            raw = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise DataLoadingError(f"Could not read data file {self._path}: {exc}") from exc
        return data_from_dict(raw)

    def save(self, data: AddressBookData) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(data_to_dict(data), indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
        logger.debug("Saved address book to %s", self._path)
