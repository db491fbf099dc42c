"""Task Resource Service

入力検証とフィルタ条件を担当し、永続化はTaskRepositoryに委譲する。
検証はすべて書き込み前に行うため、失敗時にストレージが変更されることはない。

Related Classes: TaskRepository (repository.py), Task (models.py)
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime, time
from typing import Optional, Union

from .errors import InvalidArgumentError, TaskNotFoundError
from .models import UNSET_DATE, Task, TaskInput, TaskStatus
from .repository import TaskRepository

logger = logging.getLogger(__name__)


def parse_status(value: Union[TaskStatus, str, None]) -> TaskStatus:
    """文字列をTaskStatusに変換する。

    Raises:
        InvalidArgumentError: 列挙値以外が指定された場合
    """
    if isinstance(value, TaskStatus):
        return value
    try:
        return TaskStatus(value)
    except ValueError as exc:
        allowed = "|".join(member.value for member in TaskStatus)
        raise InvalidArgumentError(
            "status", f"Invalid status '{value}'. Expected one of: {allowed}."
        ) from exc


def _calendar_date(value: Union[datetime, date]) -> date:
    return value.date() if isinstance(value, datetime) else value


def _as_datetime(value: Union[datetime, date, None]) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.combine(value, time())


class TaskService:
    """タスクのCRUDと検索。ストレージはリクエストごとに明示的に渡す。"""

    def __init__(self, repository: TaskRepository):
        self.repository = repository

    def get_by_id(self, task_id: int) -> Task:
        task = self.repository.find_by_id(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def get_all(self) -> list[Task]:
        return self.repository.scan_all()

    def get_by_title(self, title: Optional[str]) -> list[Task]:
        """タイトルの部分一致検索（大文字小文字を区別しない）"""
        if title is None or not title.strip():
            raise InvalidArgumentError("title", "Query parameter 'title' is required.")
        needle = title.casefold()
        return self.repository.scan_where(lambda task: needle in task.title.casefold())

    def get_by_date(self, value: Union[datetime, date]) -> list[Task]:
        """期限日の日付部分が一致するタスク。時刻は比較しない。"""
        target = _calendar_date(value)
        return self.repository.scan_where(lambda task: task.due_date.date() == target)

    def get_by_status(self, status: Union[TaskStatus, str]) -> list[Task]:
        wanted = parse_status(status)
        return self.repository.scan_where(lambda task: task.status is wanted)

    def create(self, payload: Optional[TaskInput]) -> Task:
        self._validate(payload)
        task = self.repository.insert(
            Task(
                id=0,
                title=payload.title,
                description=payload.description or "",
                due_date=_as_datetime(payload.due_date),
                status=parse_status(payload.status),
            )
        )
        logger.info("Created task %s: %s", task.id, task.title)
        return task

    def update(self, task_id: int, payload: Optional[TaskInput]) -> Task:
        # 存在チェックが入力検証より優先される
        current = self.get_by_id(task_id)
        self._validate(payload)
        updated = replace(
            current,
            title=payload.title,
            description=payload.description or "",
            due_date=_as_datetime(payload.due_date),
            status=parse_status(payload.status),
        )
        self.repository.update(updated)
        logger.info("Updated task %s", task_id)
        return updated

    def delete(self, task_id: int) -> None:
        task = self.get_by_id(task_id)
        self.repository.delete(task)
        logger.info("Deleted task %s", task_id)

    @staticmethod
    def _validate(payload: Optional[TaskInput]) -> None:
        if payload is None:
            raise InvalidArgumentError("task", "Task payload is required.")
        due_date = _as_datetime(payload.due_date)
        if due_date is None or due_date.replace(tzinfo=None) == UNSET_DATE:
            logger.debug("Rejected task payload without due_date")
            raise InvalidArgumentError("due_date", "Task due_date must not be empty.")
        if payload.title is None or not payload.title.strip():
            logger.debug("Rejected task payload without title")
            raise InvalidArgumentError("title", "Task title is required.")
