"""End-to-end tests driving the menu with scripted input."""
import io

import pytest

from todolist.cli import TodoMenu, main, render_tasks
from todolist.console import Console
from todolist.models import Task
from todolist.store import TaskStore


class ScriptedInput:
    """Feeds lines to Console; raises EOFError once exhausted."""

    def __init__(self, *lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt=""):
        self.prompts.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)


@pytest.fixture
def path(tmp_path):
    return tmp_path / "tasks.json"


def run(path, *lines, extra_args=()):
    out = io.StringIO()
    console = Console(ScriptedInput(*lines), output=out)
    code = main(["--file", str(path), "--config", str(path.parent / "none.config"), *extra_args], console)
    return code, out.getvalue()


def test_add_then_show(path):
    code, out = run(path, "1", "Buy milk", "3", "", "5")
    assert code == 0
    assert "Task 'Buy milk' added." in out
    assert "1: [ ] Buy milk" in out
    assert TaskStore.load(path).list_tasks() == [(1, False, "Buy milk")]


def test_mark_done(path):
    TaskStore(path, [Task("Buy milk")]).save()
    code, out = run(path, "2", "1", "", "3", "", "5")
    assert "Task 'Buy milk' marked as done." in out
    assert "1: [X] Buy milk" in out
    assert TaskStore.load(path).list_tasks() == [(1, True, "Buy milk")]


def test_mark_done_invalid_index(path):
    TaskStore(path, [Task("Buy milk")]).save()
    _, out = run(path, "2", "2", "", "2", "0", "", "5")
    assert out.count("Invalid task index.") == 2
    assert TaskStore.load(path).list_tasks() == [(1, False, "Buy milk")]


def test_mark_done_non_numeric_index(path):
    TaskStore(path, [Task("Buy milk")]).save()
    _, out = run(path, "2", "first", "5")
    assert "Invalid input, enter a valid number" in out
    assert "Invalid task index." not in out


def test_delete(path):
    TaskStore(path, [Task("A"), Task("B"), Task("C")]).save()
    _, out = run(path, "4", "2", "", "5")
    assert "Task 'B' deleted." in out
    assert [e.description for e in TaskStore.load(path).list_tasks()] == ["A", "C"]


def test_delete_out_of_range(path):
    TaskStore(path, [Task("A")]).save()
    _, out = run(path, "4", "9", "", "5")
    assert "Invalid task index." in out
    assert len(TaskStore.load(path)) == 1


def test_show_empty(path):
    _, out = run(path, "3", "", "5")
    assert "No tasks available." in out


def test_bad_menu_choices(path):
    _, out = run(path, "x", "0", "6", "5")
    assert out.count("Invalid input, enter a valid number") == 1
    assert out.count("Invalid option, enter a number between 1-5") == 2
    assert out.count("--- Todo List Menu ---") == 4


def test_eof_ends_session(path):
    code, out = run(path, "1", "Buy milk")
    assert code == 0
    assert out.rstrip().endswith("Goodbye.")
    assert len(TaskStore.load(path)) == 1


def test_storage_error_exits_nonzero(tmp_path, capsys):
    target = tmp_path / "tasks.json"
    target.mkdir()
    code, out = run(target, "1", "Buy milk")
    assert code == 1
    assert "added" not in out
    assert "[ERROR] Failed to write tasks to" in capsys.readouterr().err


def test_pause_disabled_by_config(path):
    config = path.parent / "todolist.config"
    config.write_text("PAUSE_AFTER_COMMAND=no\n")
    TaskStore(path, [Task("A")]).save()
    scripted = ScriptedInput("3", "5")
    console = Console(scripted, output=io.StringIO())
    assert main(["--file", str(path), "--config", str(config)], console) == 0
    assert "Press Enter to go back to the main menu..." not in scripted.prompts


def test_tasks_file_from_config(tmp_path):
    config = tmp_path / "todolist.config"
    config.write_text(f"TASKS_FILE={tmp_path / 'custom.json'}\n")
    console = Console(ScriptedInput("1", "x", "5"), output=io.StringIO())
    assert main(["--config", str(config)], console) == 0
    assert TaskStore.load(tmp_path / "custom.json").list_tasks() == [(1, False, "x")]


def test_render_tasks(path):
    store = TaskStore(path, [Task("A", done=True), Task("B")])
    assert render_tasks(store) == ["1: [X] A", "2: [ ] B"]


def test_menu_dispatch_unknown_option(path):
    out = io.StringIO()
    TodoMenu(TaskStore(path), Console(ScriptedInput(), output=out)).dispatch(42)
    assert out.getvalue() == "Invalid option, enter a number between 1-5\n"


def test_oversized_numbers_are_invalid_input(path):
    TaskStore(path, [Task("A")]).save()
    code, out = run(path, "9" * 5000, "4", "9" * 5000, "5")
    assert code == 0
    assert out.count("Invalid input, enter a valid number") == 2
    assert len(TaskStore.load(path)) == 1


def test_unreadable_config_exits_nonzero(path, capsys):
    config = path.parent / "todolist.config"
    config.mkdir()
    console = Console(ScriptedInput("5"), output=io.StringIO())
    assert main(["--file", str(path), "--config", str(config)], console) == 1
    assert "[ERROR] Failed to read config" in capsys.readouterr().err
