"""Persistence for tasks.

``TaskStore`` owns the process-wide engine and opens one short-lived session
per operation. Every SQLAlchemy failure surfaces as ``StoreError``; a missing
record surfaces as ``TaskNotFound``.
"""
import logging
from typing import List

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select

from .database import create_tables, engine, get_session, session_factory
from .models import Task

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """The backing store could not complete the operation."""


class TaskNotFound(StoreError):
    """No task matches the given identifier."""

    def __init__(self, task_id: str):
        super().__init__(f"Task {task_id!r} not found")
        self.task_id = task_id


class TaskStore:
    def __init__(self, engine: Engine):
        self.engine = engine
        self._sessions = session_factory(engine)

    def create_tables(self) -> None:
        try:
            create_tables(self.engine)
        except SQLAlchemyError as exc:
            raise StoreError("Could not create tables") from exc

    def insert(self, title: str) -> Task:
        """Store a new, not yet completed task and return it."""
        try:
            with get_session(self._sessions) as session:
                task = Task(title=title)
                session.add(task)
                session.commit()
                session.refresh(task)
        except SQLAlchemyError as exc:
            raise StoreError("Could not insert task") from exc
        logger.debug("Inserted task %s", task.id)
        return task

    def list_all(self) -> List[Task]:
        try:
            with get_session(self._sessions) as session:
                return list(session.exec(select(Task).order_by(Task.created_at)).all())
        except SQLAlchemyError as exc:
            raise StoreError("Could not list tasks") from exc

    def update_completed(self, task_id: str, completed: bool) -> Task:
        """Set the completion flag of one task and return the updated record."""
        try:
            with get_session(self._sessions) as session:
                task = session.get(Task, task_id)
                if task is None:
                    raise TaskNotFound(task_id)
                task.completed = completed
                session.add(task)
                session.commit()
                session.refresh(task)
        except SQLAlchemyError as exc:
            raise StoreError("Could not update task") from exc
        logger.debug("Task %s completed=%s", task_id, completed)
        return task

    def delete_by_id(self, task_id: str) -> None:
        try:
            with get_session(self._sessions) as session:
                task = session.get(Task, task_id)
                if task is None:
                    raise TaskNotFound(task_id)
                session.delete(task)
                session.commit()
        except SQLAlchemyError as exc:
            raise StoreError("Could not delete task") from exc
        logger.debug("Deleted task %s", task_id)


default_store = TaskStore(engine)


def get_store() -> TaskStore:
    """Dependency returning the store bound to the configured database."""
    return default_store
