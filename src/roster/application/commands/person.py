"""Commands that create, change, remove, filter and project persons."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, fields
from typing import ClassVar

from roster.application.commands.base import Command, displayed_person
from roster.application.dto import CommandResult
from roster.application.errors import CommandError
from roster.application.messages import (
    MESSAGE_INVALID_PERSON_DISPLAYED_INDEX,
    MESSAGE_PERSONS_LISTED_OVERVIEW,
    format_person,
)
from roster.application.model import AddressBook, MasterPredicate, Model
from roster.application.predicates import (
    PersonFilter,
    show_all,
    sort_by_name,
    sort_by_priority,
)
from roster.domain import Index, Person, Priority

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddCommand(Command):
    COMMAND_WORD: ClassVar[str] = "add"
    MESSAGE_USAGE: ClassVar[str] = (
        "add: Adds a person to the address book.\n"
        "Parameters: n/NAME p/PHONE e/EMAIL a/ADDRESS [pr/PRIORITY] [r/REMARK] [t/TAG]...\n"
        "Example: add n/John Doe p/98765432 e/johnd@example.com a/311, Clementi Ave 2 "
        "pr/high t/friends t/owesMoney"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "New person added: {}"
    MESSAGE_DUPLICATE_PERSON: ClassVar[str] = "This person already exists in the address book"
    mutates: ClassVar[bool] = True

    person: Person

    def execute(self, model: Model) -> CommandResult:
        if model.has_person(self.person):
            raise CommandError(self.MESSAGE_DUPLICATE_PERSON)
        model.add_person(self.person)
        return CommandResult(self.MESSAGE_SUCCESS.format(format_person(self.person)))


@dataclass(frozen=True)
class EditPersonDescriptor:
    """Fields to change on a person. None means leave the field unchanged."""

    name: str | None = None
    phone: str | None = None
    email: str | None = None
    address: str | None = None
    priority: Priority | None = None
    remark: str | None = None
    tags: frozenset[str] | None = None

    def is_any_field_edited(self) -> bool:
        return any(getattr(self, f.name) is not None for f in fields(self))

    def apply_to(self, person: Person) -> Person:
        changes = {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not None
        }
        return person.with_changes(**changes)


@dataclass(frozen=True)
class EditCommand(Command):
    COMMAND_WORD: ClassVar[str] = "edit"
    MESSAGE_USAGE: ClassVar[str] = (
        "edit: Edits the details of the person identified by the index number used in the "
        "displayed person list. Existing values will be overwritten by the input values.\n"
        "Parameters: INDEX (must be a positive integer) [n/NAME] [p/PHONE] [e/EMAIL] "
        "[a/ADDRESS] [pr/PRIORITY] [r/REMARK] [t/TAG]...\n"
        "Example: edit 1 p/91234567 e/johndoe@example.com"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Edited Person: {}"
    MESSAGE_NOT_EDITED: ClassVar[str] = "At least one field to edit must be provided."
    MESSAGE_DUPLICATE_PERSON: ClassVar[str] = "This person already exists in the address book."
    mutates: ClassVar[bool] = True

    index: Index
    descriptor: EditPersonDescriptor

    def execute(self, model: Model) -> CommandResult:
        target = displayed_person(model, self.index)
        edited = self.descriptor.apply_to(target)
        if not target.is_same_person(edited) and model.has_person(edited):
            raise CommandError(self.MESSAGE_DUPLICATE_PERSON)
        model.set_person(target, edited)
        return CommandResult(self.MESSAGE_SUCCESS.format(format_person(edited)))


@dataclass(frozen=True)
class DeleteCommand(Command):
    """
    Deletes the persons at the given displayed indexes.

    Every index is checked before anything is removed. Persons are resolved
    from one snapshot of the displayed list, walking the indexes from last to
    first, so earlier removals cannot shift what a later index refers to.
    """

    COMMAND_WORD: ClassVar[str] = "delete"
    MESSAGE_USAGE: ClassVar[str] = (
        "delete: Deletes the people identified by the index numbers used in the displayed person list.\n"
        "Parameters: INDEX [INDEX]... (must be positive integers)\n"
        "Example: delete 1, 2"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Deleted People: {}"
    MESSAGE_DUPLICATE_INDEXES: ClassVar[str] = "The same person index was given more than once"
    mutates: ClassVar[bool] = True

    target_indexes: tuple[Index, ...]

    def __post_init__(self):
        object.__setattr__(self, "target_indexes", tuple(self.target_indexes))

    def execute(self, model: Model) -> CommandResult:
        shown = model.filtered_persons
        for index in self.target_indexes:
            if index.zero_based >= len(shown):
                raise CommandError(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
        if len(set(self.target_indexes)) != len(self.target_indexes):
            raise CommandError(self.MESSAGE_DUPLICATE_INDEXES)

        to_delete = [shown[index.zero_based] for index in reversed(self.target_indexes)]
        for person in to_delete:
            model.delete_person(person)
        logger.info("Deleted %d person(s)", len(to_delete))
        return CommandResult(
            self.MESSAGE_SUCCESS.format("".join(f"{format_person(p)}\n" for p in to_delete))
        )


@dataclass(frozen=True)
class FindCommand(Command):
    COMMAND_WORD: ClassVar[str] = "find"
    MESSAGE_USAGE: ClassVar[str] = (
        "find: Finds all persons matching the given filters. Keywords for the same field are "
        "separated by | and any of them may match; different fields must all match.\n"
        "Parameters: [n/NAME_KEYWORD[|NAME_KEYWORD]...] [a/ADDRESS_KEYWORD[|ADDRESS_KEYWORD]...] "
        "[pr/PRIORITY [PRIORITY]...]\n"
        "Example: find n/alice|bob a/clementi pr/high medium"
    )

    person_filter: PersonFilter

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_person_list(self.person_filter)
        return CommandResult(
            MESSAGE_PERSONS_LISTED_OVERVIEW.format(len(model.filtered_persons))
        )


GET_FIELDS: dict[str, tuple[str, Callable[[Person], str]]] = {
    "n/": ("Name", lambda p: p.name),
    "p/": ("Phone", lambda p: p.phone),
    "e/": ("Email", lambda p: p.email),
    "a/": ("Address", lambda p: p.address),
    "pr/": ("Priority", lambda p: str(p.priority)),
    "r/": ("Remark", lambda p: p.remark),
    "t/": ("Tags", lambda p: ", ".join(sorted(p.tags))),
}


@dataclass(frozen=True)
class GetCommand(Command):
    COMMAND_WORD: ClassVar[str] = "get"
    MESSAGE_USAGE: ClassVar[str] = (
        "get: Shows only the chosen fields of every person in the displayed person list.\n"
        "Parameters: FIELD/ [FIELD/]... where FIELD is one of n, p, e, a, pr, r, t\n"
        "Example: get n/ p/"
    )
    MESSAGE_UNKNOWN_FIELD: ClassVar[str] = "Unknown field: {}"
    MESSAGE_NO_PERSONS: ClassVar[str] = "No persons to show."

    selectors: tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "selectors", tuple(self.selectors))

    def execute(self, model: Model) -> CommandResult:
        for selector in self.selectors:
            if selector not in GET_FIELDS:
                raise CommandError(self.MESSAGE_UNKNOWN_FIELD.format(selector))
        shown = model.filtered_persons
        if not shown:
            return CommandResult(self.MESSAGE_NO_PERSONS)
        lines = []
        for position, person in enumerate(shown, start=1):
            values = []
            for selector in self.selectors:
                label, getter = GET_FIELDS[selector]
                values.append(f"{label}: {getter(person)}")
            lines.append(f"{position}. " + "; ".join(values))
        return CommandResult("\n".join(lines))


@dataclass(frozen=True)
class ListCommand(Command):
    COMMAND_WORD: ClassVar[str] = "list"
    MESSAGE_USAGE: ClassVar[str] = "list: Lists all current (unarchived) persons."
    MESSAGE_SUCCESS: ClassVar[str] = "Listed all persons"

    def execute(self, model: Model) -> CommandResult:
        model.update_master_predicate(MasterPredicate.SHOW_ONLY_CURRENT)
        model.update_filtered_person_list(show_all)
        model.update_sorting_order(None)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class ListArchiveCommand(Command):
    COMMAND_WORD: ClassVar[str] = "listarchive"
    MESSAGE_USAGE: ClassVar[str] = "listarchive: Lists all archived persons."
    MESSAGE_SUCCESS: ClassVar[str] = "Listed all archived persons"

    def execute(self, model: Model) -> CommandResult:
        model.update_master_predicate(MasterPredicate.SHOW_ONLY_ARCHIVED)
        model.update_filtered_person_list(show_all)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class ArchiveCommand(Command):
    COMMAND_WORD: ClassVar[str] = "archive"
    MESSAGE_USAGE: ClassVar[str] = (
        "archive: Archives the person identified by the index number used in the displayed person list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: archive 1"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Archived Person: {}"
    MESSAGE_ALREADY_ARCHIVED: ClassVar[str] = "This person is already archived"
    mutates: ClassVar[bool] = True

    index: Index

    def execute(self, model: Model) -> CommandResult:
        target = displayed_person(model, self.index)
        if target.archived:
            raise CommandError(self.MESSAGE_ALREADY_ARCHIVED)
        model.set_person(target, target.archive())
        return CommandResult(self.MESSAGE_SUCCESS.format(format_person(target)))


@dataclass(frozen=True)
class UnarchiveCommand(Command):
    COMMAND_WORD: ClassVar[str] = "unarchive"
    MESSAGE_USAGE: ClassVar[str] = (
        "unarchive: Restores the person identified by the index number used in the displayed "
        "archived person list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        "Example: unarchive 1"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Unarchived Person: {}"
    MESSAGE_NOT_ARCHIVED: ClassVar[str] = "This person is not archived"
    mutates: ClassVar[bool] = True

    index: Index

    def execute(self, model: Model) -> CommandResult:
        target = displayed_person(model, self.index)
        if not target.archived:
            raise CommandError(self.MESSAGE_NOT_ARCHIVED)
        model.set_person(target, target.unarchive())
        return CommandResult(self.MESSAGE_SUCCESS.format(format_person(target)))


@dataclass(frozen=True)
class RemarkCommand(Command):
    COMMAND_WORD: ClassVar[str] = "remark"
    MESSAGE_USAGE: ClassVar[str] = (
        "remark: Edits the remark of the person identified by the index number used in the "
        "displayed person list. An empty remark removes it.\n"
        "Parameters: INDEX (must be a positive integer) r/[REMARK]\n"
        "Example: remark 1 r/Likes to swim."
    )
    MESSAGE_ADD_SUCCESS: ClassVar[str] = "Added remark to Person: {}"
    MESSAGE_DELETE_SUCCESS: ClassVar[str] = "Removed remark from Person: {}"
    mutates: ClassVar[bool] = True

    index: Index
    remark: str

    def execute(self, model: Model) -> CommandResult:
        target = displayed_person(model, self.index)
        edited = target.with_changes(remark=self.remark)
        model.set_person(target, edited)
        message = self.MESSAGE_ADD_SUCCESS if self.remark else self.MESSAGE_DELETE_SUCCESS
        return CommandResult(message.format(format_person(edited)))


SORT_KEYS = {
    "name": sort_by_name,
    "priority": sort_by_priority,
}


@dataclass(frozen=True)
class SortCommand(Command):
    COMMAND_WORD: ClassVar[str] = "sort"
    MESSAGE_USAGE: ClassVar[str] = (
        "sort: Sorts the displayed person list by name or by priority (high first).\n"
        "Parameters: n/ | pr/\n"
        "Example: sort pr/"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Sorted persons by {}"

    key: str

    def execute(self, model: Model) -> CommandResult:
        if self.key not in SORT_KEYS:
            raise CommandError(f"Cannot sort by {self.key}")
        model.update_sorting_order(SORT_KEYS[self.key])
        return CommandResult(self.MESSAGE_SUCCESS.format(self.key))


@dataclass(frozen=True)
class ClearCommand(Command):
    COMMAND_WORD: ClassVar[str] = "clear"
    MESSAGE_USAGE: ClassVar[str] = "clear: Removes every person and appointment."
    MESSAGE_SUCCESS: ClassVar[str] = "Address book has been cleared!"
    mutates: ClassVar[bool] = True

    def execute(self, model: Model) -> CommandResult:
        model.set_address_book(AddressBook())
        return CommandResult(self.MESSAGE_SUCCESS)
