from __future__ import annotations

import os
import sqlite3
from datetime import datetime
from pathlib import Path
from typing import Callable, Optional

from .models import Task, TaskStatus


class TaskRepository:
    """SQLiteベースのタスク永続化。

    書き込みは1操作につき1接続・1ステートメントでコミットする
    （単一レコード単位のinsert/update/deleteがアトミック）。
    """

    def __init__(self, db_path: Optional[Path] = None):
        root = Path(__file__).resolve().parents[2]
        default_path = root / "data" / "tasks.db"
        env_path = os.getenv("TASK_API_DB_PATH")
        if db_path:
            self.db_path = Path(db_path)
        elif env_path:
            self.db_path = Path(env_path)
        else:
            self.db_path = default_path
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self._initialize()

    def _connect(self) -> sqlite3.Connection:
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        return conn

    def _initialize(self) -> None:
        """tasksテーブルの初期化"""
        with self._connect() as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT NOT NULL,
                    description TEXT NOT NULL DEFAULT '',
                    due_date TEXT NOT NULL,
                    status TEXT NOT NULL CHECK (status IN ('pending','in_progress','done'))
                )
                """
            )
            conn.execute("CREATE INDEX IF NOT EXISTS idx_tasks_status ON tasks(status)")
            conn.execute("CREATE INDEX IF NOT EXISTS idx_tasks_due ON tasks(due_date)")
            conn.commit()

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            due_date=datetime.fromisoformat(row["due_date"]),
            status=TaskStatus(row["status"]),
        )

    def find_by_id(self, task_id: int) -> Optional[Task]:
        with self._connect() as conn:
            row = conn.execute("SELECT * FROM tasks WHERE id = ?", (task_id,)).fetchone()
        return self._row_to_task(row) if row else None

    def scan_all(self) -> list[Task]:
        with self._connect() as conn:
            rows = conn.execute("SELECT * FROM tasks").fetchall()
        return [self._row_to_task(row) for row in rows]

    def scan_where(self, predicate: Callable[[Task], bool]) -> list[Task]:
        """predicateを満たすタスクのみを返す。"""
        return [task for task in self.scan_all() if predicate(task)]

    def insert(self, task: Task) -> Task:
        """タスクを追加し、採番されたidを持つTaskを返す。渡されたidは無視する。"""
        with self._connect() as conn:
            cursor = conn.execute(
                """
                INSERT INTO tasks (title, description, due_date, status)
                VALUES (?, ?, ?, ?)
                """,
                (task.title, task.description, task.due_date.isoformat(), task.status.value),
            )
            conn.commit()
            task_id = cursor.lastrowid
            row = conn.execute("SELECT * FROM tasks WHERE id = ?", (task_id,)).fetchone()
        return self._row_to_task(row)

    def update(self, task: Task) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                UPDATE tasks
                SET title = ?, description = ?, due_date = ?, status = ?
                WHERE id = ?
                """,
                (
                    task.title,
                    task.description,
                    task.due_date.isoformat(),
                    task.status.value,
                    task.id,
                ),
            )
            conn.commit()

    def delete(self, task: Task) -> None:
        with self._connect() as conn:
            conn.execute("DELETE FROM tasks WHERE id = ?", (task.id,))
            conn.commit()
