"""Pydantic schemas for the FastAPI server."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.tasks import TaskInput, TaskStatus


class HealthResponse(BaseModel):
    """Response for health check endpoint."""

    status: str


class ErrorResponse(BaseModel):
    """Structured error body returned for 400/404 responses."""

    error: str
    field: Optional[str] = None
    id: Optional[int] = None


class TaskResponse(BaseModel):
    """Serialized task."""

    id: int
    title: str
    description: str
    due_date: datetime
    status: TaskStatus

    model_config = ConfigDict(use_enum_values=True)


class TaskRequest(BaseModel):
    """Request body for creating or replacing a task."""

    id: Optional[int] = Field(
        default=None, description="Ignored; ids are assigned by the server"
    )
    title: Optional[str] = Field(default=None, description="Required, non-blank")
    description: Optional[str] = Field(default="")
    due_date: Optional[datetime] = Field(
        default=None, description="ISO date (YYYY-MM-DD) or datetime"
    )
    status: TaskStatus = Field(default=TaskStatus.PENDING)

    @field_validator("due_date", mode="before")
    @classmethod
    def parse_due_date(cls, value: Any) -> Any:
        """Accept date-only strings as midnight of that day."""
        if isinstance(value, str):
            if not value.strip():
                return None
            return datetime.fromisoformat(value)
        return value

    def to_input(self) -> TaskInput:
        return TaskInput(
            id=self.id,
            title=self.title,
            description=self.description,
            due_date=self.due_date,
            status=self.status,
        )
