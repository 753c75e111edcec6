"""Top-level menu and command-line entry point."""

from __future__ import annotations

import argparse
import signal
from contextlib import suppress
from pathlib import Path
from typing import Sequence

from rested.collections_menu import open_collection
from rested.prompts import PromptAborted, Prompter
from rested.request_editor import request_menu
from rested.storage import DB_FILE, Database, RestedRequest, StorageError

ROOT_ITEMS = ("New request", "Open collection", "Exit")


class ExitRequested(Exception):
    """Raised when the user chooses to leave the application."""


def root_menu(db: Database, prompter: Prompter) -> None:
    """Show the main menu until input ends; raises ExitRequested on Exit."""
    while True:
        try:
            _, choice = prompter.select("Select Action", ROOT_ITEMS)
            if choice == "New request":
                request_menu(db, RestedRequest(), prompter)
            elif choice == "Open collection":
                open_collection(db, prompter)
            else:
                raise ExitRequested
        except PromptAborted as exc:
            prompter.say(f"Prompt failed {exc}")
            return


def run(db_path: str | Path = DB_FILE, prompter: Prompter | None = None) -> int:
    """Load the database, run the menus and save; returns an exit status."""
    if prompter is None:
        prompter = Prompter()

    try:
        db = Database.load(db_path)
    except StorageError as exc:
        prompter.say(f"❌ Failed to load DB: {exc}")
        return 1

    try:
        root_menu(db, prompter)
    except ExitRequested:
        with suppress(StorageError):
            db.save(db_path)
        prompter.say("\nGoodbye!")
        return 0
    except KeyboardInterrupt:
        with suppress(StorageError):
            db.save(db_path)
        prompter.say("\n💾 Data saved. Goodbye!")
        return 0

    try:
        db.save(db_path)
    except StorageError as exc:
        prompter.say(f"❌ Failed to save DB: {exc}")
    else:
        prompter.say("💾 DB saved.")
    return 0


def _interrupt(signum, frame) -> None:
    raise KeyboardInterrupt


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(prog="rested", description="An interactive REST CLI")
    parser.add_argument("-t", "--toggle", action="store_true", help="unused toggle flag")
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("interactive", help="Interactively build or execute REST calls")
    parser.parse_args(argv)

    previous = signal.signal(signal.SIGTERM, _interrupt)
    try:
        return run(DB_FILE)
    finally:
        signal.signal(signal.SIGTERM, previous)