from typing import List

from fastapi import APIRouter, Depends, Response, status

from ..schemas.task import Task as TaskSchema, TaskCreate, TaskUpdate
from ..store import TaskStore, get_store

router = APIRouter()


@router.post("/tasks", response_model=TaskSchema, status_code=status.HTTP_201_CREATED)
def create_task(task: TaskCreate, store: TaskStore = Depends(get_store)):
    """Create a new task."""
    return store.insert(task.title)


@router.get("/tasks", response_model=List[TaskSchema])
def get_tasks(store: TaskStore = Depends(get_store)):
    """Get all tasks."""
    return store.list_all()


@router.put("/tasks/{task_id}", response_model=TaskSchema)
def update_task(task_id: str, task_update: TaskUpdate, store: TaskStore = Depends(get_store)):
    """Mark a task as completed or not completed."""
    return store.update_completed(task_id, task_update.completed)


@router.delete("/tasks/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_task(task_id: str, store: TaskStore = Depends(get_store)):
    """Delete a task."""
    store.delete_by_id(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
