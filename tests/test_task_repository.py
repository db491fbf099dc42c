from datetime import datetime

from src.tasks.models import Task, TaskStatus
from src.tasks.repository import TaskRepository


def make_task(title: str, due: datetime, status: TaskStatus = TaskStatus.PENDING) -> Task:
    return Task(id=0, title=title, description="", due_date=due, status=status)


def test_task_repository_crud_cycle(tmp_path):
    repo = TaskRepository(db_path=tmp_path / "tasks.db")

    created = repo.insert(
        Task(
            id=0,
            title="Write report",
            description="Quarterly numbers",
            due_date=datetime(2025, 12, 1, 9, 30),
            status=TaskStatus.IN_PROGRESS,
        )
    )
    assert created.id > 0
    assert created.title == "Write report"
    assert created.status is TaskStatus.IN_PROGRESS
    assert created.due_date == datetime(2025, 12, 1, 9, 30)

    assert repo.find_by_id(created.id) == created
    assert len(repo.scan_all()) == 1

    created.status = TaskStatus.DONE
    created.description = "Finished and sent"
    repo.update(created)
    stored = repo.find_by_id(created.id)
    assert stored is not None
    assert stored.status is TaskStatus.DONE
    assert stored.description == "Finished and sent"

    repo.delete(created)
    assert repo.find_by_id(created.id) is None
    assert repo.scan_all() == []


def test_ids_are_not_reused_after_delete(tmp_path):
    repo = TaskRepository(db_path=tmp_path / "tasks.db")
    first = repo.insert(make_task("first", datetime(2026, 1, 1)))
    repo.delete(first)
    second = repo.insert(make_task("second", datetime(2026, 1, 1)))
    assert second.id > first.id


def test_scan_where_filters_with_predicate(tmp_path):
    repo = TaskRepository(db_path=tmp_path / "tasks.db")
    repo.insert(make_task("a", datetime(2026, 1, 1), TaskStatus.DONE))
    repo.insert(make_task("b", datetime(2026, 1, 2), TaskStatus.PENDING))

    done = repo.scan_where(lambda task: task.status is TaskStatus.DONE)
    assert [task.title for task in done] == ["a"]
    assert repo.scan_where(lambda task: False) == []


def test_db_path_from_environment(tmp_path, monkeypatch):
    db_path = tmp_path / "nested" / "env.db"
    monkeypatch.setenv("TASK_API_DB_PATH", str(db_path))
    repo = TaskRepository()
    assert repo.db_path == db_path
    assert db_path.exists()
