"""TaskService の検証・検索ロジックのテスト"""

from datetime import date, datetime

import pytest

from src.tasks import (
    UNSET_DATE,
    InvalidArgumentError,
    TaskInput,
    TaskNotFoundError,
    TaskRepository,
    TaskService,
    TaskStatus,
)


@pytest.fixture
def service(tmp_path):
    return TaskService(TaskRepository(db_path=tmp_path / "service.db"))


def payload(title="Report", due=datetime(2026, 2, 26), status=TaskStatus.PENDING, **kwargs):
    return TaskInput(title=title, due_date=due, status=status, **kwargs)


def test_create_assigns_new_id_and_is_fetchable(service):
    first = service.create(payload(description="numbers"))
    second = service.create(payload(title="Other"))

    assert first.id != second.id
    assert service.get_by_id(first.id) == first
    assert first.description == "numbers"
    assert first.status is TaskStatus.PENDING


def test_create_accepts_status_string(service):
    created = service.create(payload(status="in_progress"))
    assert created.status is TaskStatus.IN_PROGRESS


def test_create_with_plain_date_stores_midnight(service):
    created = service.create(payload(due=date(2026, 3, 1)))
    assert created.due_date == datetime(2026, 3, 1, 0, 0)


@pytest.mark.parametrize(
    "bad, field",
    [
        (None, "task"),
        (payload(due=UNSET_DATE), "due_date"),
        (payload(due=None), "due_date"),
        (payload(title=""), "title"),
        (payload(title="   "), "title"),
        (payload(title=None), "title"),
        (payload(status="archived"), "status"),
    ],
)
def test_create_rejects_invalid_payload_without_writing(service, bad, field):
    service.create(payload(title="existing"))
    before = service.get_all()

    with pytest.raises(InvalidArgumentError) as excinfo:
        service.create(bad)

    assert excinfo.value.field == field
    assert service.get_all() == before


def test_due_date_is_checked_before_title(service):
    with pytest.raises(InvalidArgumentError) as excinfo:
        service.create(payload(title="", due=UNSET_DATE))
    assert excinfo.value.field == "due_date"


def test_missing_ids_raise_not_found(service):
    with pytest.raises(TaskNotFoundError):
        service.get_by_id(999)
    with pytest.raises(TaskNotFoundError):
        service.update(999, payload())
    with pytest.raises(TaskNotFoundError):
        service.delete(999)


def test_update_not_found_takes_precedence_over_bad_payload(service):
    with pytest.raises(TaskNotFoundError):
        service.update(42, None)
    with pytest.raises(TaskNotFoundError):
        service.update(42, payload(title=""))


def test_update_replaces_fields_and_keeps_id(service):
    created = service.create(payload(description="draft"))

    updated = service.update(
        created.id,
        payload(
            title="Report v2",
            due=datetime(2026, 2, 27, 15, 0),
            status=TaskStatus.IN_PROGRESS,
            id=created.id + 100,
        ),
    )

    assert updated.id == created.id
    assert updated.title == "Report v2"
    assert updated.description == ""
    assert updated.status is TaskStatus.IN_PROGRESS
    assert service.get_by_id(created.id) == updated
    assert len(service.get_all()) == 1


@pytest.mark.parametrize(
    "bad, field",
    [
        (None, "task"),
        (payload(due=UNSET_DATE), "due_date"),
        (payload(title=" "), "title"),
    ],
)
def test_update_rejects_invalid_payload_without_writing(service, bad, field):
    created = service.create(payload())

    with pytest.raises(InvalidArgumentError) as excinfo:
        service.update(created.id, bad)

    assert excinfo.value.field == field
    assert service.get_by_id(created.id) == created


def test_delete_then_not_found_twice(service):
    created = service.create(payload())
    service.delete(created.id)

    with pytest.raises(TaskNotFoundError):
        service.get_by_id(created.id)
    with pytest.raises(TaskNotFoundError):
        service.delete(created.id)
    with pytest.raises(TaskNotFoundError):
        service.delete(created.id)


def test_get_by_title_is_case_insensitive_substring(service):
    service.create(payload(title="Quarterly Report"))
    service.create(payload(title="report card"))
    service.create(payload(title="Groceries"))

    titles = sorted(task.title for task in service.get_by_title("REPORT"))
    assert titles == ["Quarterly Report", "report card"]
    assert [t.title for t in service.get_by_title("terly")] == ["Quarterly Report"]
    assert service.get_by_title("missing") == []


def test_get_by_title_uses_unicode_case_folding(service):
    service.create(payload(title="Straße fegen"))
    assert len(service.get_by_title("STRASSE")) == 1


@pytest.mark.parametrize("title", ["", "   ", None])
def test_get_by_title_requires_value(service, title):
    with pytest.raises(InvalidArgumentError) as excinfo:
        service.get_by_title(title)
    assert excinfo.value.field == "title"


def test_get_by_date_ignores_time_of_day(service):
    late = service.create(payload(title="late", due=datetime(2026, 2, 26, 23, 0)))
    service.create(payload(title="next day", due=datetime(2026, 2, 27, 0, 30)))

    assert service.get_by_date(datetime(2026, 2, 26, 1, 0)) == [late]
    assert service.get_by_date(date(2026, 2, 26)) == [late]
    assert service.get_by_date(datetime(2026, 3, 1)) == []


def test_get_by_status_exact_match(service):
    service.create(payload(title="a", status=TaskStatus.PENDING))
    done = service.create(payload(title="b", status=TaskStatus.DONE))

    assert service.get_by_status(TaskStatus.DONE) == [done]
    assert service.get_by_status("done") == [done]
    assert service.get_by_status(TaskStatus.IN_PROGRESS) == []


@pytest.mark.parametrize("status", ["Done", "finished", "", None, "1"])
def test_get_by_status_rejects_unknown_values(service, status):
    with pytest.raises(InvalidArgumentError) as excinfo:
        service.get_by_status(status)
    assert excinfo.value.field == "status"
