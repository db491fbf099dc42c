"""Exception handlers translating domain errors into HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.tasks import InvalidArgumentError, TaskNotFoundError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Map TaskNotFoundError to 404 and invalid input to 400."""

    @app.exception_handler(TaskNotFoundError)
    async def handle_not_found(request: Request, exc: TaskNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content={"error": str(exc), "id": exc.task_id})

    @app.exception_handler(InvalidArgumentError)
    async def handle_invalid_argument(
        request: Request, exc: InvalidArgumentError
    ) -> JSONResponse:
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=400, content={"error": exc.message, "field": exc.field})

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = exc.errors()
        first = errors[0] if errors else {}
        location = first.get("loc") or ("request",)
        # JSON decode errors carry a character offset, not a field name
        if first.get("type") == "json_invalid" or isinstance(location[-1], int):
            field = "task"
        else:
            field = str(location[-1])
        message = first.get("msg", "Invalid request")
        logger.info("Rejected %s %s: %s (%s)", request.method, request.url.path, message, field)
        return JSONResponse(status_code=400, content={"error": message, "field": field})
