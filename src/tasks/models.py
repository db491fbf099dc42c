from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

# 期限日が指定されていないことを表す値
UNSET_DATE = datetime.min


class TaskStatus(str, Enum):
    """タスクのステータス。列挙値以外は受け付けない。"""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    DONE = "done"


@dataclass(slots=True)
class Task:
    """永続化済みタスクの表現。"""

    id: int
    title: str
    description: str
    due_date: datetime
    status: TaskStatus


@dataclass(slots=True)
class TaskInput:
    """作成・更新リクエストのペイロード。

    idは更新時に無視される（既存レコードのidが常に優先）。
    """

    title: Optional[str]
    due_date: Optional[datetime]
    description: Optional[str] = ""
    status: TaskStatus = TaskStatus.PENDING
    id: Optional[int] = None
