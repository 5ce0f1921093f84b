"""Prefixes recognized in command arguments."""

from roster.application.parsing.tokenizer import Prefix

PREFIX_NAME = Prefix("n/")
PREFIX_PHONE = Prefix("p/")
PREFIX_EMAIL = Prefix("e/")
PREFIX_ADDRESS = Prefix("a/")
PREFIX_PRIORITY = Prefix("pr/")
PREFIX_REMARK = Prefix("r/")
PREFIX_TAG = Prefix("t/")

PREFIX_DATE = Prefix("d/")
PREFIX_START = Prefix("from/")
PREFIX_END = Prefix("to/")
PREFIX_DESCRIPTION = Prefix("desc/")

PERSON_PREFIXES = (
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_EMAIL,
    PREFIX_ADDRESS,
    PREFIX_PRIORITY,
    PREFIX_REMARK,
    PREFIX_TAG,
)
