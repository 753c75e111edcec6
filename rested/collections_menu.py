"""Menus for browsing and creating request collections."""

from __future__ import annotations

from rested.prompts import PromptAborted, Prompter
from rested.request_editor import request_menu
from rested.storage import Collection, Database

NEW_COLLECTION = "+ New collection"
BACK = "Back"


def show_collection(db: Database, index: int, prompter: Prompter) -> None:
    """List the requests of one collection and open the one picked."""
    collection = db.collections[index]
    if not collection.requests:
        prompter.say("⚠️ No requests in this collection.")
        return

    labels = [f"{request.method} - {request.request_name}" for request in collection.requests]
    try:
        chosen, _ = prompter.select(collection.title, labels)
    except PromptAborted as exc:
        prompter.say(f"Prompt failed: {exc}")
        return

    request_menu(db, collection.requests[chosen], prompter)


def open_collection(db: Database, prompter: Prompter) -> None:
    """Let the user pick, create or leave collections until going back."""
    while True:
        titles = [collection.title for collection in db.collections]
        index, _ = prompter.select("Choose collection", [*titles, NEW_COLLECTION, BACK])
        if index == len(titles):
            add_collection(db, prompter)
        elif index == len(titles) + 1:
            return
        else:
            show_collection(db, index, prompter)


def _require_name(name: str) -> None:
    if not name:
        raise ValueError("collection name can't be empty")


def add_collection(db: Database, prompter: Prompter) -> Collection | None:
    """Ask for a name and append a new empty collection to *db*."""
    try:
        title = prompter.ask("Collection name", _require_name)
    except PromptAborted as exc:
        prompter.say(f"Collection creation cancelled: {exc}")
        return None

    collection = Collection(title=title)
    db.collections.append(collection)
    prompter.say(f"✅ Collection '{title}' added!\n")
    return collection