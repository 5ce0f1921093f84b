"""Failures reported back to the user. The command loop catches CommandFailure and keeps going."""


class CommandFailure(Exception):
    """Base class for every user-recoverable failure."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ParseError(CommandFailure):
    """Malformed command syntax or arguments. Carries the command's usage when known."""

    def __init__(self, message: str, usage: str | None = None) -> None:
        super().__init__(message)
        self.usage = usage


class ValidationError(ParseError):
    """A value was given but violates its field's constraints."""

    def __init__(self, constraints: str, usage: str | None = None) -> None:
        message = f"{constraints}\n{usage}" if usage else constraints
        super().__init__(message, usage)
        self.constraints = constraints


class CommandError(CommandFailure):
    """A precondition failed while executing a command (bad index, duplicate, conflict)."""


class DataLoadingError(CommandFailure):
    """Stored data could not be read or violates the model's constraints."""


class StorageError(Exception):
    """A storage backend could not write the address book."""
