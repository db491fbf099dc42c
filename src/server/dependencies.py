"""Dependency helpers shared across FastAPI routes."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from fastapi import Request

from src.task_api import Config
from src.tasks import InvalidArgumentError, Task, TaskRepository, TaskService

from .schemas import TaskResponse


def get_config(request: Request) -> Config:
    """Configuration attached to the app by create_app()."""
    return request.app.state.config


def get_task_service(request: Request) -> TaskService:
    """Build a TaskService whose storage handle lives for this request only."""
    repository = TaskRepository(db_path=get_config(request).db_path)
    return TaskService(repository)


def parse_query_datetime(name: str, value: Optional[str]) -> datetime:
    """Parse an ISO date/datetime query parameter."""
    if value is None or not value.strip():
        raise InvalidArgumentError(name, f"Query parameter '{name}' is required.")
    try:
        return datetime.fromisoformat(value.strip())
    except ValueError as exc:
        raise InvalidArgumentError(
            name, f"Query parameter '{name}' must be an ISO date or datetime."
        ) from exc


def serialize_task(task: Task) -> TaskResponse:
    """Convert domain Task to API response."""
    return TaskResponse(
        id=task.id,
        title=task.title,
        description=task.description,
        due_date=task.due_date,
        status=task.status,
    )
