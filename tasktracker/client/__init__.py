from .api import TaskClient, TaskClientError
from .board import TaskItem, TaskList

__all__ = ["TaskClient", "TaskClientError", "TaskItem", "TaskList"]
