"""Task resource service: models, storage and validation rules."""

from .errors import InvalidArgumentError, TaskError, TaskNotFoundError
from .models import UNSET_DATE, Task, TaskInput, TaskStatus
from .repository import TaskRepository
from .service import TaskService

__all__ = [
    "Task",
    "TaskInput",
    "TaskStatus",
    "UNSET_DATE",
    "TaskRepository",
    "TaskService",
    "TaskError",
    "TaskNotFoundError",
    "InvalidArgumentError",
]
