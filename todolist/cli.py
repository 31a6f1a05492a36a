"""CLI entry point for the task list menu."""
import argparse
import sys

from todolist.config import (
    DEFAULT_CONFIG,
    ConfigError,
    get_config_bool,
    load_config,
    resolve_tasks_file,
)
from todolist.console import Console
from todolist.store import StorageError, TaskNotFoundError, TaskStore

MENU = """
--- Todo List Menu ---
1. Add new Task
2. Mark Task As Done
3. Show Tasks
4. Delete Task
5. Exit"""

INVALID_INPUT = "Invalid input, enter a valid number"
INVALID_INDEX = "Invalid task index."
INVALID_OPTION = "Invalid option, enter a number between 1-5"
EXIT_CHOICE = 5


def render_tasks(store: TaskStore) -> list[str]:
    entries = store.list_tasks()
    if not entries:
        return ["No tasks available."]
    return [
        f"{entry.index}: {'[X]' if entry.done else '[ ]'} {entry.description}"
        for entry in entries
    ]


class TodoMenu:
    """Menu loop dispatching numbered commands to a TaskStore."""

    def __init__(self, store: TaskStore, console: Console, pause: bool = True):
        self.store = store
        self.console = console
        self.pause = pause

    def run(self) -> None:
        """Loop until Exit is chosen or input ends."""
        try:
            while True:
                self.console.say(MENU)
                choice = self.console.read_number("Enter your choice: ")
                if choice is None:
                    self.console.say(INVALID_INPUT)
                    continue
                if choice == EXIT_CHOICE:
                    return
                self.dispatch(choice)
        except (KeyboardInterrupt, EOFError):
            self.console.say()
            self.console.say("Goodbye.")

    def dispatch(self, choice: int) -> None:
        if choice == 1:
            self.add()
        elif choice == 2:
            self.mark_done()
        elif choice == 3:
            self.show()
            self._pause()
        elif choice == 4:
            self.delete()
        else:
            self.console.say(INVALID_OPTION)

    def add(self) -> None:
        description = self.console.read_text("Enter task description: ")
        self.store.add(description)
        self.console.say(f"Task '{description}' added.")

    def show(self) -> None:
        for line in render_tasks(self.store):
            self.console.say(line)

    def mark_done(self) -> None:
        self.show()
        index = self.console.read_number("Enter the task index to mark as done: ")
        if index is None:
            self.console.say(INVALID_INPUT)
            return
        try:
            description = self.store.complete(index)
        except TaskNotFoundError:
            self.console.say(INVALID_INDEX)
        else:
            self.console.say(f"Task '{description}' marked as done.")
        self._pause()

    def delete(self) -> None:
        self.show()
        index = self.console.read_number("Enter the task index to delete: ")
        if index is None:
            self.console.say(INVALID_INPUT)
            return
        try:
            description = self.store.delete(index)
        except TaskNotFoundError:
            self.console.say(INVALID_INDEX)
        else:
            self.console.say(f"Task '{description}' deleted.")
        self._pause()

    def _pause(self) -> None:
        if self.pause:
            self.console.pause()


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="todolist", description="Terminal todo list")
    parser.add_argument("--file", help="Task file (default: TASKS_FILE from config, else tasks.json)")
    parser.add_argument("--config", default=DEFAULT_CONFIG, help="KEY=VALUE config file")
    return parser


def main(argv=None, console=None) -> int:
    args = create_parser().parse_args(argv)
    try:
        config = load_config(args.config)
    except ConfigError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1
    store = TaskStore.load(resolve_tasks_file(args.file, config))
    menu = TodoMenu(
        store,
        console or Console(),
        pause=get_config_bool(config, "PAUSE_AFTER_COMMAND", True),
    )
    try:
        menu.run()
    except StorageError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
