"""Interactive terminal front end for the task list.

Rows are addressed by the 1-based number shown next to each task.
"""
import argparse
from typing import Callable, List, Optional

from ..config import API_URL
from ..logging_setup import setup_logging
from .api import TaskClient
from .board import TaskItem, TaskList

HELP = [
    "Commands:",
    "  add <title...>   Add a new task",
    "  toggle <n>       Complete (or undo) task number n",
    "  delete <n>       Delete task number n",
    "  refresh          Re-fetch tasks from the server",
    "  help             Show this help",
    "  exit             Quit",
]


class TaskShell:
    def __init__(
        self,
        task_list: TaskList,
        input_fn: Callable[[str], str] = input,
        output_fn: Callable[[str], None] = print,
    ):
        self.task_list = task_list
        self.input_fn = input_fn
        self.output_fn = output_fn

    def run(self) -> None:
        """Mount the list, then read commands until exit or EOF."""
        self.task_list.mount()
        try:
            while True:
                self._show()
                line = self.input_fn("\n: ").strip()
                if not self.handle(line):
                    break
        except (KeyboardInterrupt, EOFError):
            pass
        self.output_fn("Goodbye.")

    def _show(self) -> None:
        self.output_fn("Tasks:")
        for row in self.task_list.render():
            self.output_fn(row)

    def handle(self, line: str) -> bool:
        """Run one command line. Returns False when the shell should stop."""
        tokens = line.split()
        if not tokens:
            return True
        cmd = tokens[0].lower()
        if cmd == "exit":
            return False
        if cmd == "help":
            for row in HELP:
                self.output_fn(row)
        elif cmd == "add":
            self._cmd_add(tokens)
        elif cmd == "toggle":
            task = self._row(tokens, "toggle")
            if task:
                self.task_list.toggle(task.id)
        elif cmd in ("delete", "rm"):
            task = self._row(tokens, "delete")
            if task:
                self.task_list.delete(task.id)
        elif cmd == "refresh":
            self.task_list.refresh()
        else:
            self.output_fn("Unknown command. Type 'help' for instructions.")
        return True

    def _cmd_add(self, tokens: List[str]) -> None:
        title = " ".join(tokens[1:]).strip()
        if not title:
            self.output_fn("Title required.")
            return
        self.task_list.add(title)

    def _row(self, tokens: List[str], cmd: str) -> Optional[TaskItem]:
        if len(tokens) != 2:
            self.output_fn(f"Usage: {cmd} <n>")
            return None
        raw = tokens[1].rstrip(".")
        if not raw.isdigit():
            self.output_fn("Invalid number.")
            return None
        index = int(raw) - 1
        if not 0 <= index < len(self.task_list.tasks):
            self.output_fn(f"No task number {raw}.")
            return None
        return self.task_list.tasks[index]


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Terminal client for the task tracker API")
    parser.add_argument("--url", default=API_URL, help="Base URL of the task API")
    parser.add_argument("--no-color", action="store_true", help="Mark completed tasks with ~~ instead of ANSI")
    args = parser.parse_args(argv)

    setup_logging()
    with TaskClient(base_url=args.url) as client:
        TaskShell(TaskList(client, color=not args.no_color)).run()


if __name__ == "__main__":  # pragma: no cover
    main()
