import io

import pytest

from rested.app import ExitRequested, main, root_menu, run
from rested.prompts import Prompter
from rested.storage import DB_FILE, Collection, Database


def make_prompter(*answers):
    remaining = iter(answers)

    def fake_input(prompt):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    output = io.StringIO()
    return Prompter(input_func=fake_input, output=output), output


def test_root_menu_exit_raises():
    prompter, _ = make_prompter("3")
    with pytest.raises(ExitRequested):
        root_menu(Database(), prompter)


def test_root_menu_end_of_input_returns():
    prompter, output = make_prompter()
    root_menu(Database(), prompter)
    assert "Prompt failed" in output.getvalue()


def test_root_menu_new_request_then_exit():
    db = Database(collections=[Collection(title="Work")])
    prompter, _ = make_prompter("1", "2", "Ping", "7", "1", "8", "3")
    with pytest.raises(ExitRequested):
        root_menu(db, prompter)
    assert [r.request_name for r in db.collections[0].requests] == ["Ping"]


def test_run_end_of_input_saves(tmp_path):
    path = tmp_path / "db.json"
    prompter, output = make_prompter()
    assert run(path, prompter) == 0
    assert path.exists()
    assert Database.load(path).collections == []
    assert "💾 DB saved." in output.getvalue()


def test_run_load_failure(tmp_path):
    path = tmp_path / "db.json"
    path.write_text("{broken", encoding="utf-8")
    prompter, output = make_prompter()
    assert run(path, prompter) == 1
    assert "❌ Failed to load DB" in output.getvalue()


def test_run_save_failure_reported(tmp_path):
    path = tmp_path / "missing-dir" / "db.json"
    prompter, output = make_prompter()
    assert run(path, prompter) == 0
    assert "❌ Failed to save DB" in output.getvalue()


def test_main_interactive_writes_default_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)

    def no_input(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    assert main(["interactive"]) == 0
    assert (tmp_path / DB_FILE).exists()
    assert "DB saved." in capsys.readouterr().out


def test_main_rejects_unknown_command():
    with pytest.raises(SystemExit):
        main(["bogus"])