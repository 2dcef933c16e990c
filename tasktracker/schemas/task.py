from pydantic import BaseModel, Field, StrictBool, field_validator


class TaskCreate(BaseModel):
    """Schema for creating new tasks."""
    title: str = Field(min_length=1)

    @field_validator("title")
    @classmethod
    def _title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("title must not be empty")
        return value


class TaskUpdate(BaseModel):
    """Schema for updating a task. Only the completion flag can change."""
    completed: StrictBool


class Task(BaseModel):
    """Task as returned by the API."""
    id: str
    title: str
    completed: bool

    class Config:
        from_attributes = True
