"""
ロギング設定モジュール

サーバー起動時にConfigのlog_level / log_fileから一度だけ設定する。
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .config import Config

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_log_level(name: str) -> int:
    """ログレベル名を数値に変換する

    Raises:
        ValueError: 未知のレベル名が指定された場合
    """
    try:
        return LOG_LEVELS[name.strip().upper()]
    except KeyError as exc:
        allowed = ", ".join(LOG_LEVELS)
        raise ValueError(f"Unknown log level '{name}'. Expected one of: {allowed}.") from exc


def setup_logger(config: "Config") -> Path:
    """
    Configの設定でルートロガーをセットアップする

    Args:
        config: アプリケーション設定（log_level, log_fileを使用）

    Returns:
        ログファイルのパス
    """
    level = resolve_log_level(config.log_level)
    log_path = Path(config.log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            logging.FileHandler(log_path, encoding="utf-8"),
            logging.StreamHandler(),
        ],
    )
    logging.getLogger(__name__).debug("Logging to %s at %s", log_path, config.log_level)
    return log_path
