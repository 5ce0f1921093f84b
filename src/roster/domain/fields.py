"""Field rules for person and appointment values. Pure functions, no outer dependencies."""

import re
from enum import Enum

NAME_CONSTRAINTS = (
    "Names should only contain alphanumeric characters and spaces, and it should not be blank"
)
PHONE_CONSTRAINTS = (
    "Phone numbers should only contain digits, an optional leading +, and spaces, "
    "dashes or brackets between digits, and it should be at least 3 digits long"
)
EMAIL_CONSTRAINTS = (
    "Emails should be of the format local-part@domain and adhere to the following constraints:\n"
    "1. The local-part should only contain alphanumeric characters and these special characters, "
    "excluding the parentheses, (+_.-). The local-part may not start or end with any special characters.\n"
    "2. This is followed by a '@' and then a domain name. The domain name is made up of domain labels "
    "separated by periods.\n"
    "The domain name must:\n"
    "    - end with a domain label at least 2 characters long\n"
    "    - have each domain label start and end with alphanumeric characters\n"
    "    - have each domain label consist of alphanumeric characters, separated only by hyphens, if any."
)
ADDRESS_CONSTRAINTS = "Addresses can take any values, and it should not be blank"
TAG_CONSTRAINTS = "Tags names should be alphanumeric"
PRIORITY_CONSTRAINTS = "Priority should be one of: high, medium, low, none"

# Letters and digits only; \w minus underscore keeps it unicode-aware.
NAME_PATTERN = re.compile(r"[^\W_](?:[^\W_]| )*")
ADDRESS_PATTERN = re.compile(r"\S.*", re.DOTALL)
TAG_PATTERN = re.compile(r"[^\W_]+")
PHONE_PATTERN = re.compile(r"\+?\d(?:[\d \-()]*\d)?")
_EMAIL_LOCAL = r"[^\W_](?:[\w+.\-]*[^\W_])?"
_EMAIL_LABEL = r"[^\W_](?:[^\W_\-]|-(?=[^\W_]))*"
EMAIL_PATTERN = re.compile(
    rf"{_EMAIL_LOCAL}@(?:{_EMAIL_LABEL}\.)*(?=[^\W_]{{2}}){_EMAIL_LABEL}"
)


def is_valid_name(value: str) -> bool:
    return NAME_PATTERN.fullmatch(value or "") is not None


def is_valid_phone(value: str) -> bool:
    if PHONE_PATTERN.fullmatch(value or "") is None:
        return False
    return sum(ch.isdigit() for ch in value) >= 3


def is_valid_email(value: str) -> bool:
    return EMAIL_PATTERN.fullmatch(value or "") is not None


def is_valid_address(value: str) -> bool:
    return ADDRESS_PATTERN.fullmatch(value or "") is not None


def is_valid_tag(value: str) -> bool:
    return TAG_PATTERN.fullmatch(value or "") is not None


class Priority(Enum):
    """How important a contact is. Declaration order is the sort order."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NONE = "none"

    @classmethod
    def parse(cls, text: str) -> "Priority":
        """Return the member named by text (case-insensitive). Raises ValueError otherwise."""
        key = (text or "").strip().lower()
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(PRIORITY_CONSTRAINTS)

    @property
    def rank(self) -> int:
        return list(Priority).index(self)

    def __str__(self) -> str:
        return self.value
