"""Task list component.

Keeps a local copy of the server's task collection. Every mutation is sent
to the API and followed by a full re-fetch; the local list is never edited
in place.
"""
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from .api import TaskClient, TaskClientError

logger = logging.getLogger(__name__)

STRIKE = "\033[9m"
RESET = "\033[0m"


@dataclass(frozen=True)
class TaskItem:
    id: str
    title: str
    completed: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TaskItem":
        return cls(id=str(data["id"]), title=data["title"], completed=bool(data.get("completed", False)))


class TaskList:
    def __init__(self, client: TaskClient, color: bool = True):
        self.client = client
        self.color = color
        self.tasks: List[TaskItem] = []
        self.new_title: str = ""

    def mount(self) -> None:
        self.refresh()

    def refresh(self) -> None:
        """Replace the displayed tasks with the server's collection."""
        try:
            self.tasks = [TaskItem.from_dict(t) for t in self.client.list_tasks()]
        except TaskClientError as exc:
            logger.error("Error fetching tasks: %s", exc)
        except (KeyError, TypeError) as exc:
            logger.error("Unexpected task list from server: %r", exc)

    def find(self, task_id: str) -> Optional[TaskItem]:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def add(self, title: Optional[str] = None) -> None:
        """Create a task from the input buffer; keep the input if it fails."""
        if title is not None:
            self.new_title = title
        try:
            self.client.create_task(self.new_title)
        except TaskClientError as exc:
            logger.error("Error adding task: %s", exc)
            return
        self.new_title = ""
        self.refresh()

    def toggle(self, task_id: str) -> None:
        task = self.find(task_id)
        if task is None:
            logger.warning("Task %s is not displayed", task_id)
            return
        try:
            self.client.update_task(task.id, not task.completed)
        except TaskClientError as exc:
            logger.error("Error updating task: %s", exc)
            return
        self.refresh()

    def delete(self, task_id: str) -> None:
        try:
            self.client.delete_task(task_id)
        except TaskClientError as exc:
            logger.error("Error deleting task: %s", exc)
            return
        self.refresh()

    def render(self) -> List[str]:
        if not self.tasks:
            return ["  (no tasks)"]
        lines = []
        for number, task in enumerate(self.tasks, start=1):
            title = task.title
            if task.completed:
                title = f"{STRIKE}{title}{RESET}" if self.color else f"~~{title}~~"
            toggle_label = "Undo" if task.completed else "Complete"
            lines.append(f"{number:>3}. {title}  [{toggle_label}] [Delete]")
        return lines
