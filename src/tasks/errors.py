"""タスクサービスのカスタム例外定義

HTTP層ではTaskNotFoundErrorが404、InvalidArgumentErrorが400に対応する。
"""

from __future__ import annotations


class TaskError(Exception):
    """タスクサービス基底例外"""

    pass


class TaskNotFoundError(TaskError):
    """指定IDのタスクが存在しない"""

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class InvalidArgumentError(TaskError):
    """入力値の検証エラー。fieldに違反したフィールド名を保持する。"""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message
