"""Task resource endpoints."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Callable, List, Optional, TypeVar

from fastapi import Body, Depends, FastAPI, HTTPException, Request, Response

from src.tasks import TaskError, TaskService

from ..dependencies import get_task_service, parse_query_datetime, serialize_task
from ..schemas import ErrorResponse, TaskRequest, TaskResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


async def _run(action: str, func: Callable[..., T], *args: Any) -> T:
    """Run a blocking service call in a worker thread.

    Domain errors propagate to the app's exception handlers; anything else is
    logged and reported as 500.
    """
    try:
        return await asyncio.to_thread(func, *args)
    except TaskError:
        raise
    except Exception as exc:
        logger.exception("Failed to %s: %s", action, exc)
        raise HTTPException(status_code=500, detail=f"Failed to {action}") from exc


def register_task_routes(app: FastAPI) -> None:
    """Register task CRUD and query endpoints."""

    # Fixed paths go first; ids only match digits, anything else is 404.
    @app.get("/tasks/all", response_model=List[TaskResponse])
    async def get_all_tasks(
        service: TaskService = Depends(get_task_service),
    ) -> List[TaskResponse]:
        """List every task, in storage order."""
        tasks = await _run("list tasks", service.get_all)
        return [serialize_task(task) for task in tasks]

    @app.get("/tasks/by-title", response_model=List[TaskResponse], responses=ERROR_RESPONSES)
    async def get_tasks_by_title(
        title: Optional[str] = None,
        service: TaskService = Depends(get_task_service),
    ) -> List[TaskResponse]:
        """Case-insensitive title substring search."""
        tasks = await _run("search tasks by title", service.get_by_title, title)
        return [serialize_task(task) for task in tasks]

    @app.get("/tasks/by-date", response_model=List[TaskResponse], responses=ERROR_RESPONSES)
    async def get_tasks_by_date(
        date: Optional[str] = None,
        service: TaskService = Depends(get_task_service),
    ) -> List[TaskResponse]:
        """Tasks due on the given calendar day; time of day is ignored."""
        target = parse_query_datetime("date", date)
        tasks = await _run("search tasks by date", service.get_by_date, target)
        return [serialize_task(task) for task in tasks]

    @app.get("/tasks/by-status", response_model=List[TaskResponse], responses=ERROR_RESPONSES)
    async def get_tasks_by_status(
        status: Optional[str] = None,
        service: TaskService = Depends(get_task_service),
    ) -> List[TaskResponse]:
        """Tasks with exactly the given status."""
        tasks = await _run("search tasks by status", service.get_by_status, status)
        return [serialize_task(task) for task in tasks]

    @app.get("/tasks/{task_id:int}", response_model=TaskResponse, responses=ERROR_RESPONSES)
    async def get_task(
        task_id: int,
        service: TaskService = Depends(get_task_service),
    ) -> TaskResponse:
        """Fetch a single task by id."""
        task = await _run("get task", service.get_by_id, task_id)
        return serialize_task(task)

    @app.post(
        "/tasks",
        response_model=TaskResponse,
        status_code=201,
        responses=ERROR_RESPONSES,
    )
    async def create_task(
        request: Request,
        response: Response,
        payload: Optional[TaskRequest] = Body(default=None),
        service: TaskService = Depends(get_task_service),
    ) -> TaskResponse:
        """Create a task and point the Location header at it."""
        task = await _run(
            "create task", service.create, payload.to_input() if payload else None
        )
        response.headers["Location"] = str(request.url_for("get_task", task_id=task.id))
        return serialize_task(task)

    @app.put("/tasks/{task_id:int}", response_model=TaskResponse, responses=ERROR_RESPONSES)
    async def update_task(
        task_id: int,
        payload: Optional[TaskRequest] = Body(default=None),
        service: TaskService = Depends(get_task_service),
    ) -> TaskResponse:
        """Replace title, description, due date and status of a task."""
        task = await _run(
            "update task",
            service.update,
            task_id,
            payload.to_input() if payload else None,
        )
        return serialize_task(task)

    @app.delete("/tasks/{task_id:int}", status_code=204, responses=ERROR_RESPONSES)
    async def delete_task(
        task_id: int,
        service: TaskService = Depends(get_task_service),
    ) -> Response:
        """Delete a task."""
        await _run("delete task", service.delete, task_id)
        return Response(status_code=204)
