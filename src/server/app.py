"""FastAPI application bootstrap."""

from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.task_api import Config

from .errors import register_error_handlers
from .routes import register_task_routes
from .schemas import HealthResponse


def create_app(config: Optional[Config] = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(title="Task API", version="1.0.0")
    app.state.config = config or Config.load()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        """Simple health check endpoint."""
        return HealthResponse(status="ok")

    register_error_handlers(app)
    register_task_routes(app)

    return app


app = create_app()
