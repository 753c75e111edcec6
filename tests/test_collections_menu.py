import io

import pytest

from rested.collections_menu import add_collection, open_collection, show_collection
from rested.prompts import PromptAborted, Prompter
from rested.storage import Collection, Database, RestedRequest


def make_prompter(*answers):
    remaining = iter(answers)

    def fake_input(prompt):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    output = io.StringIO()
    return Prompter(input_func=fake_input, output=output), output


def test_add_collection_rejects_empty_then_accepts():
    db = Database()
    prompter, output = make_prompter("", "Work")
    created = add_collection(db, prompter)
    assert created is db.collections[0]
    assert [c.title for c in db.collections] == ["Work"]
    assert created.requests == []
    text = output.getvalue()
    assert "collection name can't be empty" in text
    assert "✅ Collection 'Work' added!" in text


def test_add_collection_aborted():
    db = Database()
    prompter, output = make_prompter()
    assert add_collection(db, prompter) is None
    assert db.collections == []
    assert "Collection creation cancelled" in output.getvalue()


def test_show_empty_collection_warns():
    db = Database(collections=[Collection(title="Empty")])
    prompter, output = make_prompter()
    show_collection(db, 0, prompter)
    assert "⚠️ No requests in this collection." in output.getvalue()


def test_show_collection_lists_and_opens_copy():
    saved = RestedRequest(method="GET", request_name="ping")
    db = Database(collections=[Collection(title="Work", requests=[saved])])
    prompter, output = make_prompter("1", "2", "renamed", "8")
    show_collection(db, 0, prompter)
    assert "GET - ping" in output.getvalue()
    assert db.collections[0].requests[0].request_name == "ping"


def test_show_collection_select_abort_reports():
    db = Database(collections=[Collection(title="W", requests=[RestedRequest(request_name="a")])])
    prompter, output = make_prompter()
    show_collection(db, 0, prompter)
    assert "Prompt failed" in output.getvalue()


def test_open_collection_dispatches_by_position():
    db = Database(collections=[Collection(title="Back")])
    prompter, output = make_prompter("1", "3")
    open_collection(db, prompter)
    assert "No requests in this collection." in output.getvalue()


def test_open_collection_abort_propagates():
    prompter, _ = make_prompter()
    with pytest.raises(PromptAborted):
        open_collection(Database(), prompter)