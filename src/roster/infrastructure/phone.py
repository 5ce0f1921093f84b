"""Phone numbers: E.164 normalization for the numbers phonenumbers can place."""

from collections.abc import Callable

import phonenumbers
from phonenumbers import PhoneNumber


def _parse(text: str, region: str | None) -> PhoneNumber | None:
    try:
        number = phonenumbers.parse(text, region)
    except phonenumbers.NumberParseException:
        return None
    return number if phonenumbers.is_valid_number(number) else None


def normalize_phone(raw: str, default_region: str | None = None) -> str | None:
    """E.164 form of raw, or None when it is not a valid number.

    default_region applies only when raw has no leading + (e.g. "202 555 1234"
    in region "US").
    """
    text = str(raw or "").strip()
    if not text:
        return None
    number = _parse(text, default_region)
    if number is None:
        return None
    return phonenumbers.format_number(number, phonenumbers.PhoneNumberFormat.E164)


def phone_normalizer(default_region: str | None) -> Callable[[str], str | None]:
    """Normalizer for CommandParser.

    Numbers with an explicit country code must be valid. Local numbers that
    are not valid in default_region are kept as typed.
    """

    def normalize(raw: str) -> str | None:
        normalized = normalize_phone(raw, default_region)
        if normalized is not None:
            return normalized
        text = raw.strip()
        return None if text.startswith("+") else text

    return normalize
