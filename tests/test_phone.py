"""Tests for phone number normalization (E.164)."""

import pytest

from roster.application.errors import ParseError
from roster.application.parsing import CommandParser
from roster.infrastructure.phone import normalize_phone, phone_normalizer


def test_normalize_with_country_code_ignores_region():
    assert normalize_phone("+65 9435 1253", default_region="US") == "+6594351253"
    assert normalize_phone("+1 (202) 555-1234", default_region=None) == "+12025551234"


def test_normalize_local_number_uses_default_region():
    assert normalize_phone("9435 1253", default_region="SG") == "+6594351253"
    assert normalize_phone("(202) 555-1234", default_region="US") == "+12025551234"


def test_normalize_invalid_returns_none():
    assert normalize_phone("", default_region="SG") is None
    assert normalize_phone("   ", default_region="SG") is None
    assert normalize_phone("+65 123", default_region=None) is None
    assert normalize_phone("94351253", default_region="US") is None
    assert normalize_phone("94351253", default_region=None) is None


def test_normalize_whitespace_stripped():
    assert normalize_phone("  +6594351253  ", default_region=None) == "+6594351253"


def test_bound_normalizer_is_applied_by_add():
    parser = CommandParser(normalize_phone=phone_normalizer("US"))
    command = parser.parse_command("add n/Alice p/202 555 1234 e/alice@example.com a/Main St")
    assert command.person.phone == "+12025551234"


def test_bound_normalizer_keeps_unplaceable_local_numbers():
    normalize = phone_normalizer("US")
    assert normalize("94351253") == "94351253"
    assert normalize("+1 23") is None


def test_invalid_international_number_is_rejected_by_add():
    parser = CommandParser(normalize_phone=phone_normalizer("US"))
    with pytest.raises(ParseError):
        parser.parse_command("add n/Alice p/+1 23 e/alice@example.com a/Main St")
