"""CLI entry point for launching the FastAPI app with uvicorn."""

import uvicorn

from src.task_api import Config, setup_logger

from .app import create_app


def main() -> None:
    """Run the server using host/port/logging from the app config."""
    config = Config.load()
    setup_logger(config)
    uvicorn.run(
        create_app(config),
        host=config.server.host,
        port=config.server.port,
    )


if __name__ == "__main__":
    main()
