"""Application-wide configuration and logging for the task API."""

from .config import Config, DatabaseConfig, ServerConfig
from .logger import setup_logger

__all__ = ["Config", "DatabaseConfig", "ServerConfig", "setup_logger"]
