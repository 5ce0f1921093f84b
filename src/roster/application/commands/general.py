"""Commands that only talk to the front end."""

from dataclasses import dataclass
from typing import ClassVar

from roster.application.commands.base import Command
from roster.application.dto import CommandResult
from roster.application.model import Model


@dataclass(frozen=True)
class HelpCommand(Command):
    COMMAND_WORD: ClassVar[str] = "help"
    MESSAGE_USAGE: ClassVar[str] = "help: Shows program usage instructions.\nExample: help"
    MESSAGE_SUCCESS: ClassVar[str] = "Opened help window."

    def execute(self, model: Model) -> CommandResult:
        return CommandResult(self.MESSAGE_SUCCESS, show_help=True)


@dataclass(frozen=True)
class ExitCommand(Command):
    COMMAND_WORD: ClassVar[str] = "exit"
    MESSAGE_USAGE: ClassVar[str] = "exit: Exits the program."
    MESSAGE_SUCCESS: ClassVar[str] = "Exiting Address Book as requested ..."

    def execute(self, model: Model) -> CommandResult:
        return CommandResult(self.MESSAGE_SUCCESS, exit=True)
