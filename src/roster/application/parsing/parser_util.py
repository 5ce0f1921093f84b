"""Helpers that turn raw argument strings into validated values."""

import re
from collections.abc import Callable, Iterable
from datetime import date, datetime, time

from roster.application.errors import ValidationError
from roster.domain import Index, Priority
from roster.domain.fields import (
    ADDRESS_CONSTRAINTS,
    EMAIL_CONSTRAINTS,
    NAME_CONSTRAINTS,
    PHONE_CONSTRAINTS,
    TAG_CONSTRAINTS,
    is_valid_address,
    is_valid_email,
    is_valid_name,
    is_valid_phone,
    is_valid_tag,
)

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
DATE_CONSTRAINTS = "Dates should be of the format YYYY-MM-DD and be a valid calendar date"
TIME_CONSTRAINTS = "Times should be of the format HH:MM (24-hour clock)"

PhoneNormalizer = Callable[[str], str | None]

_INDEX_SEPARATOR = re.compile(r"[\s,]+")
_INDEX_PATTERN = re.compile(r"[0-9]+")


def parse_index(raw: str) -> Index:
    """Parse a one-based index. Leading and trailing whitespace is ignored."""
    text = (raw or "").strip()
    if _INDEX_PATTERN.fullmatch(text) is None or int(text) < 1:
        raise ValidationError(MESSAGE_INVALID_INDEX)
    return Index.from_one_based(int(text))


def parse_indexes(raw: str) -> tuple[Index, ...]:
    """Parse one or more indexes separated by whitespace and/or commas, keeping input order."""
    parts = [part for part in _INDEX_SEPARATOR.split((raw or "").strip()) if part]
    if not parts:
        raise ValidationError(MESSAGE_INVALID_INDEX)
    return tuple(parse_index(part) for part in parts)


def parse_name(raw: str) -> str:
    name = (raw or "").strip()
    if not is_valid_name(name):
        raise ValidationError(NAME_CONSTRAINTS)
    return name


def parse_phone(raw: str, normalize: PhoneNormalizer | None = None) -> str:
    """Validate a phone number; when a normalizer is given the stored form is its result."""
    phone = (raw or "").strip()
    if not is_valid_phone(phone):
        raise ValidationError(PHONE_CONSTRAINTS)
    if normalize is None:
        return phone
    normalized = normalize(phone)
    if not normalized:
        raise ValidationError(PHONE_CONSTRAINTS)
    return normalized


def parse_email(raw: str) -> str:
    email = (raw or "").strip()
    if not is_valid_email(email):
        raise ValidationError(EMAIL_CONSTRAINTS)
    return email


def parse_address(raw: str) -> str:
    address = (raw or "").strip()
    if not is_valid_address(address):
        raise ValidationError(ADDRESS_CONSTRAINTS)
    return address


def parse_remark(raw: str | None) -> str:
    return (raw or "").strip()


def parse_priority(raw: str) -> Priority:
    try:
        return Priority.parse(raw)
    except ValueError as exc:
        raise ValidationError(str(exc)) from exc


def parse_tag(raw: str) -> str:
    tag = (raw or "").strip()
    if not is_valid_tag(tag):
        raise ValidationError(TAG_CONSTRAINTS)
    return tag


def parse_tags(raws: Iterable[str]) -> frozenset[str]:
    return frozenset(parse_tag(raw) for raw in raws)


def parse_date(raw: str) -> date:
    try:
        return date.fromisoformat((raw or "").strip())
    except ValueError as exc:
        raise ValidationError(DATE_CONSTRAINTS) from exc


def parse_time(raw: str) -> time:
    try:
        return datetime.strptime((raw or "").strip(), "%H:%M").time()
    except ValueError as exc:
        raise ValidationError(TIME_CONSTRAINTS) from exc
