"""Parsers for person commands. Each takes the argument string and returns a command or raises ParseError."""

import re

from roster.application.commands import (
    AddCommand,
    ArchiveCommand,
    DeleteCommand,
    EditCommand,
    EditPersonDescriptor,
    FindCommand,
    GetCommand,
    RemarkCommand,
    SortCommand,
    UnarchiveCommand,
)
from roster.application.errors import ParseError, ValidationError
from roster.application.messages import invalid_format
from roster.application.parsing.parser_util import (
    PhoneNormalizer,
    parse_address,
    parse_email,
    parse_index,
    parse_indexes,
    parse_name,
    parse_phone,
    parse_priority,
    parse_remark,
    parse_tags,
)
from roster.application.parsing.syntax import (
    PERSON_PREFIXES,
    PREFIX_ADDRESS,
    PREFIX_EMAIL,
    PREFIX_NAME,
    PREFIX_PHONE,
    PREFIX_PRIORITY,
    PREFIX_REMARK,
    PREFIX_TAG,
)
from roster.application.parsing.tokenizer import tokenize
from roster.application.predicates import PersonFilter
from roster.domain import Index, Person, Priority
from roster.domain.fields import (
    ADDRESS_CONSTRAINTS,
    NAME_CONSTRAINTS,
    is_valid_address,
    is_valid_name,
)

KEYWORD_SEPARATOR = "|"
FIELD_SELECTOR_PATTERN = re.compile(r"[a-zA-Z]+/")

_WHITESPACE = re.compile(r"\s+")


def _format_error(usage: str) -> ParseError:
    return ParseError(invalid_format(usage), usage)


def _parse_index_or_fail(raw: str, usage: str) -> Index:
    try:
        return parse_index(raw)
    except ValidationError as exc:
        raise _format_error(usage) from exc


def parse_add(args: str, normalize_phone: PhoneNormalizer | None = None) -> AddCommand:
    multimap = tokenize(args, *PERSON_PREFIXES)
    required = (PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS)
    if not multimap.has_all(*required) or multimap.preamble:
        raise _format_error(AddCommand.MESSAGE_USAGE)
    multimap.verify_no_duplicate_prefixes_for(*required, PREFIX_PRIORITY, PREFIX_REMARK)

    priority_text = multimap.get_value(PREFIX_PRIORITY)
    person = Person(
        name=parse_name(multimap.get_value(PREFIX_NAME)),
        phone=parse_phone(multimap.get_value(PREFIX_PHONE), normalize_phone),
        email=parse_email(multimap.get_value(PREFIX_EMAIL)),
        address=parse_address(multimap.get_value(PREFIX_ADDRESS)),
        priority=parse_priority(priority_text) if priority_text is not None else Priority.NONE,
        remark=parse_remark(multimap.get_value(PREFIX_REMARK)),
        tags=parse_tags(multimap.get_all_values(PREFIX_TAG)),
    )
    return AddCommand(person)


def parse_edit(args: str, normalize_phone: PhoneNormalizer | None = None) -> EditCommand:
    multimap = tokenize(args, *PERSON_PREFIXES)
    index = _parse_index_or_fail(multimap.preamble, EditCommand.MESSAGE_USAGE)
    multimap.verify_no_duplicate_prefixes_for(
        PREFIX_NAME, PREFIX_PHONE, PREFIX_EMAIL, PREFIX_ADDRESS, PREFIX_PRIORITY, PREFIX_REMARK
    )

    def value(prefix):
        return multimap.get_value(prefix)

    tags = None
    if multimap.has_any(PREFIX_TAG):
        raw_tags = multimap.get_all_values(PREFIX_TAG)
        # A lone empty t/ clears every tag.
        tags = frozenset() if raw_tags == [""] else parse_tags(raw_tags)

    descriptor = EditPersonDescriptor(
        name=parse_name(value(PREFIX_NAME)) if value(PREFIX_NAME) is not None else None,
        phone=(
            parse_phone(value(PREFIX_PHONE), normalize_phone)
            if value(PREFIX_PHONE) is not None
            else None
        ),
        email=parse_email(value(PREFIX_EMAIL)) if value(PREFIX_EMAIL) is not None else None,
        address=(
            parse_address(value(PREFIX_ADDRESS)) if value(PREFIX_ADDRESS) is not None else None
        ),
        priority=(
            parse_priority(value(PREFIX_PRIORITY)) if value(PREFIX_PRIORITY) is not None else None
        ),
        remark=parse_remark(value(PREFIX_REMARK)) if value(PREFIX_REMARK) is not None else None,
        tags=tags,
    )
    if not descriptor.is_any_field_edited():
        raise ParseError(EditCommand.MESSAGE_NOT_EDITED, EditCommand.MESSAGE_USAGE)
    return EditCommand(index, descriptor)


def parse_delete(args: str) -> DeleteCommand:
    try:
        return DeleteCommand(parse_indexes(args))
    except ValidationError as exc:
        raise _format_error(DeleteCommand.MESSAGE_USAGE) from exc


def parse_find(args: str) -> FindCommand:
    """
    Build a FindCommand from name, address and priority filters.

    Name and address values are split on "|" (empty alternatives kept, so a
    trailing "|" is rejected as a blank keyword) and each keyword must satisfy
    its field's rule. Priority values are split on whitespace and each must be
    a priority. Any other prefix, or text before the first prefix, is an error.
    """
    usage = FindCommand.MESSAGE_USAGE
    if not (args or "").strip():
        raise _format_error(usage)

    multimap = tokenize(args, *PERSON_PREFIXES)
    if multimap.has_any(PREFIX_PHONE, PREFIX_EMAIL, PREFIX_REMARK, PREFIX_TAG) or multimap.preamble:
        raise _format_error(usage)

    names = _split_alternatives(multimap.get_all_values(PREFIX_NAME))
    if not all(is_valid_name(keyword) for keyword in names):
        raise ValidationError(NAME_CONSTRAINTS, usage)

    addresses = _split_alternatives(multimap.get_all_values(PREFIX_ADDRESS))
    if not all(is_valid_address(keyword) for keyword in addresses):
        raise ValidationError(ADDRESS_CONSTRAINTS, usage)

    priorities = []
    for token in _split_whitespace(multimap.get_all_values(PREFIX_PRIORITY)):
        try:
            priorities.append(parse_priority(token))
        except ValidationError as exc:
            raise ValidationError(exc.constraints, usage) from exc

    return FindCommand(PersonFilter(tuple(names), tuple(addresses), tuple(priorities)))


def _split_alternatives(values: list[str]) -> list[str]:
    return [part.strip() for value in values for part in value.split(KEYWORD_SEPARATOR)]


def _split_whitespace(values: list[str]) -> list[str]:
    return [part for value in values for part in _WHITESPACE.split(value)]


def parse_get(args: str) -> GetCommand:
    """Every whitespace-separated token must look like "letters/"; otherwise the whole command fails."""
    usage = GetCommand.MESSAGE_USAGE
    selectors = (args or "").split()
    try:
        if not selectors:
            raise ParseError("No field selectors given.")
        for selector in selectors:
            _check_field_selector(selector)
    except ParseError as exc:
        raise _format_error(usage) from exc
    return GetCommand(tuple(selectors))


def _check_field_selector(selector: str) -> None:
    if FIELD_SELECTOR_PATTERN.fullmatch(selector) is None:
        raise ParseError(f"Invalid field selector: {selector}")


def parse_archive(args: str) -> ArchiveCommand:
    return ArchiveCommand(_parse_index_or_fail(args, ArchiveCommand.MESSAGE_USAGE))


def parse_unarchive(args: str) -> UnarchiveCommand:
    return UnarchiveCommand(_parse_index_or_fail(args, UnarchiveCommand.MESSAGE_USAGE))


def parse_remark_command(args: str) -> RemarkCommand:
    multimap = tokenize(args, PREFIX_REMARK)
    index = _parse_index_or_fail(multimap.preamble, RemarkCommand.MESSAGE_USAGE)
    if not multimap.has_any(PREFIX_REMARK):
        raise _format_error(RemarkCommand.MESSAGE_USAGE)
    multimap.verify_no_duplicate_prefixes_for(PREFIX_REMARK)
    return RemarkCommand(index, parse_remark(multimap.get_value(PREFIX_REMARK)))


def parse_sort(args: str) -> SortCommand:
    multimap = tokenize(args, PREFIX_NAME, PREFIX_PRIORITY)
    keys = {PREFIX_NAME: "name", PREFIX_PRIORITY: "priority"}
    chosen = [prefix for prefix in keys if multimap.has_any(prefix)]
    if multimap.preamble or len(chosen) != 1 or multimap.get_all_values(chosen[0]) != [""]:
        raise _format_error(SortCommand.MESSAGE_USAGE)
    return SortCommand(keys[chosen[0]])
