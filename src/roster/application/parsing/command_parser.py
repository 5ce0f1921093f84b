"""Dispatch user input to the parser registered for its leading command word."""

import logging
import re
from collections.abc import Callable

from roster.application.commands import (
    AddAppointmentCommand,
    AddCommand,
    ArchiveCommand,
    ClearCommand,
    Command,
    DeleteAppointmentCommand,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    FindCommand,
    GetCommand,
    HelpCommand,
    ListAppointmentsCommand,
    ListArchiveCommand,
    ListCommand,
    RemarkCommand,
    SortCommand,
    UnarchiveCommand,
)
from roster.application.errors import ParseError
from roster.application.messages import MESSAGE_UNKNOWN_COMMAND, invalid_format
from roster.application.parsing.appointment_parsers import (
    parse_add_appointment,
    parse_delete_appointment,
)
from roster.application.parsing.parser_util import PhoneNormalizer
from roster.application.parsing.person_parsers import (
    parse_add,
    parse_archive,
    parse_delete,
    parse_edit,
    parse_find,
    parse_get,
    parse_remark_command,
    parse_sort,
    parse_unarchive,
)

logger = logging.getLogger(__name__)

BASIC_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)


class CommandParser:
    """Turns one line of user input into a Command.

    normalize_phone, when given, maps a raw phone to its stored form (or None
    if it is not a real number); it is applied by add and edit.
    """

    def __init__(self, normalize_phone: PhoneNormalizer | None = None) -> None:
        self._normalize_phone = normalize_phone
        self._parsers: dict[str, Callable[[str], Command]] = {
            AddCommand.COMMAND_WORD: lambda args: parse_add(args, self._normalize_phone),
            EditCommand.COMMAND_WORD: lambda args: parse_edit(args, self._normalize_phone),
            DeleteCommand.COMMAND_WORD: parse_delete,
            FindCommand.COMMAND_WORD: parse_find,
            GetCommand.COMMAND_WORD: parse_get,
            ArchiveCommand.COMMAND_WORD: parse_archive,
            UnarchiveCommand.COMMAND_WORD: parse_unarchive,
            RemarkCommand.COMMAND_WORD: parse_remark_command,
            SortCommand.COMMAND_WORD: parse_sort,
            AddAppointmentCommand.COMMAND_WORD: parse_add_appointment,
            DeleteAppointmentCommand.COMMAND_WORD: parse_delete_appointment,
            ListCommand.COMMAND_WORD: lambda _args: ListCommand(),
            ListArchiveCommand.COMMAND_WORD: lambda _args: ListArchiveCommand(),
            ListAppointmentsCommand.COMMAND_WORD: lambda _args: ListAppointmentsCommand(),
            ClearCommand.COMMAND_WORD: lambda _args: ClearCommand(),
            HelpCommand.COMMAND_WORD: lambda _args: HelpCommand(),
            ExitCommand.COMMAND_WORD: lambda _args: ExitCommand(),
        }

    def parse_command(self, user_input: str) -> Command:
        """Split off the command word; the argument string keeps its leading space."""
        matcher = BASIC_COMMAND_FORMAT.fullmatch((user_input or "").strip())
        if matcher is None:
            raise ParseError(invalid_format(HelpCommand.MESSAGE_USAGE), HelpCommand.MESSAGE_USAGE)
        return self.parse(matcher.group("command_word"), matcher.group("arguments"))

    def parse(self, command_word: str, arguments: str) -> Command:
        parser = self._parsers.get(command_word)
        if parser is None:
            logger.debug("Unknown command word: %s", command_word)
            raise ParseError(MESSAGE_UNKNOWN_COMMAND)
        logger.debug("Parsing %s with arguments %r", command_word, arguments)
        return parser(arguments)
