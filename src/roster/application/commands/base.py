"""Command base class. A command is an immutable value holding one user intent."""

from abc import ABC, abstractmethod
from typing import ClassVar

from roster.application.dto import CommandResult
from roster.application.errors import CommandError
from roster.application.messages import MESSAGE_INVALID_PERSON_DISPLAYED_INDEX
from roster.application.model import Model
from roster.domain import Index, Person


class Command(ABC):
    """Subclasses are frozen dataclasses, so equality is by value."""

    COMMAND_WORD: ClassVar[str] = ""
    MESSAGE_USAGE: ClassVar[str] = ""
    # Whether a successful execute changes data that must be saved.
    mutates: ClassVar[bool] = False

    @abstractmethod
    def execute(self, model: Model) -> CommandResult:
        """Run against model. Raises CommandError when a precondition fails."""
        ...


def displayed_person(model: Model, index: Index) -> Person:
    """Person at index of the displayed list. Raises CommandError when out of range."""
    shown = model.filtered_persons
    if index.zero_based >= len(shown):
        raise CommandError(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
    return shown[index.zero_based]
