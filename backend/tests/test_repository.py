"""Tests for the Supabase statistics repository against the stub client."""

from datetime import date, timedelta

import pytest

from app.core.exceptions import DataUnavailableError
from app.models.statistics import TaskKind
from app.services.statistics import StatisticsRepository


def test_fetch_active_definitions(repository, supabase_stub):
    kept = supabase_stub.add_definition("MIT", date(2024, 1, 1), text="Write")
    supabase_stub.add_definition("MIT", date(2024, 1, 1), active=False)
    supabase_stub.add_definition("MIT", date(2024, 1, 1), user_id="someone-else")
    supabase_stub.add_definition("MET", date(2024, 1, 1))

    definitions = repository.fetch_active_task_definitions("user-1", TaskKind.MIT)

    assert [d.id for d in definitions] == [kept["id"]]
    assert definitions[0].kind is TaskKind.MIT
    assert definitions[0].text == "Write"
    assert definitions[0].start_date == date(2024, 1, 1)
    assert definitions[0].end_date is None
    assert definitions[0].is_recurring is True


def test_fetch_completions_in_range(repository, supabase_stub):
    task = supabase_stub.add_definition("MET", date(2024, 1, 1))
    for day in (date(2023, 12, 31), date(2024, 1, 1), date(2024, 1, 5), date(2024, 1, 6)):
        supabase_stub.add_completion("MET", task, day)

    records = repository.fetch_completion_records("user-1", TaskKind.MET, date(2024, 1, 1), date(2024, 1, 5))

    assert [r.date for r in records] == [date(2024, 1, 1), date(2024, 1, 5)]
    assert all(r.task_definition_id == task["id"] for r in records)
    assert all(r.kind is TaskKind.MET for r in records)


def test_completions_of_deactivated_definition_excluded(repository, supabase_stub):
    task = supabase_stub.add_definition("MIT", date(2024, 1, 1))
    supabase_stub.add_completion("MIT", task, date(2024, 1, 2))
    task["is_active"] = False

    records = repository.fetch_completion_records("user-1", TaskKind.MIT, date(2024, 1, 1), date(2024, 1, 3))

    assert records == []


def test_completion_query_uses_inner_join(repository, supabase_stub):
    repository.fetch_completion_records("user-1", TaskKind.MIT, date(2024, 1, 1), date(2024, 1, 3))

    query = supabase_stub.queries[-1]
    assert "mits!inner(is_active)" in query.columns
    assert ("mits.is_active", True) in [(c, v) for c, _, v in query.filters]


def test_fetch_member_since(repository, supabase_stub):
    supabase_stub.tables["users"] = [{"id": "user-1", "created_at": "2023-05-01T10:00:00+00:00"}]
    assert repository.fetch_member_since("user-1") == "2023-05-01T10:00:00+00:00"
    assert repository.fetch_member_since("missing") is None


def test_store_failure_raises_data_unavailable(repository, supabase_stub):
    supabase_stub.fail = True
    with pytest.raises(DataUnavailableError):
        repository.fetch_active_task_definitions("user-1", TaskKind.MIT)
    with pytest.raises(DataUnavailableError):
        repository.fetch_completion_records("user-1", TaskKind.MIT, date(2024, 1, 1), date(2024, 1, 2))
    with pytest.raises(DataUnavailableError):
        repository.fetch_member_since("user-1")


def test_completions_paged_past_row_cap(supabase_stub):
    supabase_stub.max_rows = 5
    repository = StatisticsRepository(supabase_stub, page_size=5)
    task = supabase_stub.add_definition("MIT", date(2024, 1, 1))
    for offset in range(12):
        supabase_stub.add_completion("MIT", task, date(2024, 1, 1) + timedelta(days=offset))

    records = repository.fetch_completion_records("user-1", TaskKind.MIT, date(2024, 1, 1), date(2024, 1, 31))

    assert len(records) == 12
    assert [r.date for r in records] == [date(2024, 1, 1) + timedelta(days=i) for i in range(12)]
    assert len(supabase_stub.queries) == 3


def test_definitions_paged_past_row_cap(supabase_stub):
    supabase_stub.max_rows = 2
    repository = StatisticsRepository(supabase_stub, page_size=2)
    for _ in range(4):
        supabase_stub.add_definition("MET", date(2024, 1, 1))

    definitions = repository.fetch_active_task_definitions("user-1", TaskKind.MET)

    assert len(definitions) == 4
    # an exactly full last page needs one more, empty, request
    assert len(supabase_stub.queries) == 3
