"""Parsers for appointment commands."""

from roster.application.commands import AddAppointmentCommand, DeleteAppointmentCommand
from roster.application.errors import ParseError, ValidationError
from roster.application.messages import invalid_format
from roster.application.parsing.parser_util import parse_date, parse_index, parse_time
from roster.application.parsing.syntax import (
    PREFIX_DATE,
    PREFIX_DESCRIPTION,
    PREFIX_END,
    PREFIX_START,
)
from roster.application.parsing.tokenizer import tokenize

TIME_ORDER_CONSTRAINTS = "The start time must be before the end time"


def parse_add_appointment(args: str) -> AddAppointmentCommand:
    usage = AddAppointmentCommand.MESSAGE_USAGE
    multimap = tokenize(args, PREFIX_DATE, PREFIX_START, PREFIX_END, PREFIX_DESCRIPTION)
    if not multimap.has_all(PREFIX_DATE, PREFIX_START, PREFIX_END):
        raise ParseError(invalid_format(usage), usage)
    try:
        index = parse_index(multimap.preamble)
    except ValidationError as exc:
        raise ParseError(invalid_format(usage), usage) from exc
    multimap.verify_no_duplicate_prefixes_for(
        PREFIX_DATE, PREFIX_START, PREFIX_END, PREFIX_DESCRIPTION
    )

    start = parse_time(multimap.get_value(PREFIX_START))
    end = parse_time(multimap.get_value(PREFIX_END))
    if start >= end:
        raise ValidationError(TIME_ORDER_CONSTRAINTS, usage)
    return AddAppointmentCommand(
        index=index,
        date=parse_date(multimap.get_value(PREFIX_DATE)),
        start=start,
        end=end,
        description=multimap.get_value(PREFIX_DESCRIPTION) or "",
    )


def parse_delete_appointment(args: str) -> DeleteAppointmentCommand:
    usage = DeleteAppointmentCommand.MESSAGE_USAGE
    try:
        return DeleteAppointmentCommand(parse_index(args))
    except ValidationError as exc:
        raise ParseError(invalid_format(usage), usage) from exc
