"""
設定管理モジュール

関連クラス:
  - tasks.TaskRepository: database.pathを使用
  - server.run: server.host / server.portを使用
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "app_config.yaml"


@dataclass
class DatabaseConfig:
    """SQLite設定"""

    path: str = "data/tasks.db"


@dataclass
class ServerConfig:
    """HTTPサーバー設定"""

    host: str = "0.0.0.0"
    port: int = 8000


@dataclass
class Config:
    """アプリケーション設定クラス"""

    database: DatabaseConfig = None  # type: ignore
    server: ServerConfig = None  # type: ignore

    # ログ設定
    log_level: str = "INFO"
    log_file: str = "logs/task_api.log"

    def __post_init__(self):
        """デフォルト値の初期化"""
        if self.database is None:
            self.database = DatabaseConfig()
        if self.server is None:
            self.server = ServerConfig()

    @property
    def db_path(self) -> Path:
        """プロジェクトルート基準で解決したDBパス"""
        path = Path(self.database.path)
        return path if path.is_absolute() else PROJECT_ROOT / path

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "Config":
        """YAMLファイルから設定を読み込む

        Args:
            config_path: 設定ファイルパス（省略時はconfig/app_config.yamlを使用）

        Returns:
            Config: 設定インスタンス
        """
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        with open(config_path, "r", encoding="utf-8") as f:
            yaml_data: Dict[str, Any] = yaml.safe_load(f) or {}

        database_data = yaml_data.get("database", {})
        server_data = yaml_data.get("server", {})
        log_data = yaml_data.get("log", {})

        return cls(
            database=DatabaseConfig(
                path=os.getenv("TASK_API_DB_PATH", database_data.get("path", "data/tasks.db"))
            ),
            server=ServerConfig(
                host=server_data.get("host", "0.0.0.0"),
                port=int(server_data.get("port", 8000)),
            ),
            log_level=log_data.get("level", "INFO"),
            log_file=log_data.get("file", "logs/task_api.log"),
        )

    @classmethod
    def from_env(cls) -> "Config":
        """環境変数から設定を読み込む"""
        return cls(
            database=DatabaseConfig(path=os.getenv("TASK_API_DB_PATH", "data/tasks.db")),
            server=ServerConfig(
                host=os.getenv("TASK_API_HOST", "0.0.0.0"),
                port=int(os.getenv("TASK_API_PORT", "8000")),
            ),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_file=os.getenv("LOG_FILE", "logs/task_api.log"),
        )

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Config":
        """設定ファイルがあればYAML、なければ環境変数から読み込む"""
        path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        if path.exists():
            return cls.from_yaml(path)
        return cls.from_env()
