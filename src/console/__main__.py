"""
Interactive console: read commands, run them against the address book, print feedback.
Run: python -m console (from repo root, with .env or env vars set), or the `roster` script.
"""
import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import TextIO

from roster.application import (
    AddressBookStorage,
    CommandFailure,
    CommandParser,
    CommandResult,
    CommandService,
    DataLoadingError,
    Model,
    load_model,
)
from roster.application.commands import ALL_COMMANDS
from roster.config import STORAGE_KINDS, STORAGE_NEO4J, Settings, load_env_file, load_settings
from roster.infrastructure import JsonAddressBookStorage, Neo4jAddressBookStorage, phone_normalizer

logger = logging.getLogger(__name__)

PROMPT = "> "
WELCOME = "Welcome to Roster. Type 'help' to see all commands."


def help_text() -> str:
    return "\n\n".join(command.MESSAGE_USAGE for command in ALL_COMMANDS)


def render(result: CommandResult, out: TextIO) -> None:
    """Presentation sink for command results."""
    print(result.feedback, file=out)
    if result.show_help:
        print(help_text(), file=out)


def open_neo4j_driver(settings: Settings):
    from neo4j import GraphDatabase

    return GraphDatabase.driver(settings.neo4j_uri, auth=(settings.neo4j_user, settings.neo4j_password))


def build_storage(settings: Settings, driver=None) -> AddressBookStorage:
    if settings.storage == STORAGE_NEO4J:
        return Neo4jAddressBookStorage(driver)
    return JsonAddressBookStorage(settings.data_file)


def run(service: CommandService, lines: TextIO, out: TextIO, *, prompt: str = PROMPT) -> None:
    """Read commands until exit or end of input. User errors are shown and the loop goes on."""
    while True:
        if prompt:
            print(prompt, end="", file=out, flush=True)
        line = lines.readline()
        if not line:
            break
        if not line.strip():
            continue
        try:
            result = service.execute(line.strip())
        except CommandFailure as exc:
            logger.info("Command failed: %s", exc.message)
            print(exc.message, file=out)
            continue
        render(result, out)
        if result.exit:
            break


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="roster", description="Contact and appointment manager")
    parser.add_argument("--data-file", type=Path, help="JSON data file (json storage only)")
    parser.add_argument("--storage", choices=STORAGE_KINDS, help="Storage backend")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    load_env_file()
    settings = load_settings()
    args = _parse_args(argv)
    if args.storage or args.data_file:
        settings = replace(
            settings,
            storage=args.storage or settings.storage,
            data_file=args.data_file or settings.data_file,
        )

    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, settings.log_level, logging.INFO),
    )

    driver = open_neo4j_driver(settings) if settings.storage == STORAGE_NEO4J else None
    try:
        storage = build_storage(settings, driver)
        try:
            model = load_model(storage)
        except DataLoadingError as exc:
            logger.warning("Data could not be loaded, starting with an empty address book: %s", exc)
            print(f"Data could not be loaded ({exc.message}); starting with an empty address book.")
            model = Model()

        service = CommandService(
            model,
            storage,
            CommandParser(normalize_phone=phone_normalizer(settings.default_region)),
        )
        logger.info("Roster started (storage=%s)", settings.storage)
        print(WELCOME)
        run(service, sys.stdin, sys.stdout)
    finally:
        if driver is not None:
            driver.close()


if __name__ == "__main__":
    main()
