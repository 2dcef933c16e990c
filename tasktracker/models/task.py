from sqlmodel import SQLModel, Field
from datetime import datetime, timezone
from uuid import uuid4


class Task(SQLModel, table=True):
    """Task model for todo items."""
    __tablename__ = "tasks"

    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    title: str = Field(nullable=False)
    completed: bool = Field(default=False, nullable=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc), index=True)
