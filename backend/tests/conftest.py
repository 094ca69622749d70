"""Shared test fixtures: an in-memory stand-in for the Supabase client."""

import operator
from datetime import date
from types import SimpleNamespace
from typing import Any, Dict, List, Optional

import pytest

from app.services.statistics import StatisticsRepository, StatisticsService

_TABLES = {
    "MIT": ("mits", "mit_completions", "mit_id"),
    "MET": ("mets", "met_checks", "met_id"),
}


def _lookup(row: Dict[str, Any], column: str) -> Any:
    value: Any = row
    for part in column.split("."):
        if not isinstance(value, dict):
            return None
        value = value.get(part)
    return value


class StubQuery:
    def __init__(self, rows: List[Dict[str, Any]], fail: bool = False,
                 max_rows: Optional[int] = None) -> None:
        self.rows = rows
        self.fail = fail
        self.max_rows = max_rows
        self.filters = []
        self.orders: List[str] = []
        self.bounds: Optional[tuple] = None
        self.columns: Optional[str] = None

    def select(self, columns: str) -> "StubQuery":
        self.columns = columns
        return self

    def _filter(self, column, op, value) -> "StubQuery":
        self.filters.append((column, op, value))
        return self

    def eq(self, column, value):
        return self._filter(column, operator.eq, value)

    def gte(self, column, value):
        return self._filter(column, operator.ge, value)

    def lte(self, column, value):
        return self._filter(column, operator.le, value)

    def order(self, column: str, desc: bool = False) -> "StubQuery":
        self.orders.append(column)
        return self

    def range(self, start: int, end: int) -> "StubQuery":
        self.bounds = (start, end)
        return self

    def execute(self) -> SimpleNamespace:
        if self.fail:
            raise ConnectionError("supabase unreachable")
        matched = []
        for row in self.rows:
            ok = True
            for column, op, value in self.filters:
                actual = _lookup(row, column)
                if actual is None or not op(actual, value):
                    ok = False
                    break
            if ok:
                matched.append(row)
        for column in reversed(self.orders):
            matched.sort(key=lambda r: _lookup(r, column))
        if self.bounds is not None:
            matched = matched[self.bounds[0]:self.bounds[1] + 1]
        if self.max_rows is not None:
            matched = matched[:self.max_rows]
        return SimpleNamespace(data=matched)


class StubSupabaseClient:
    """Holds rows per table; completion rows embed their definition row as the join."""

    def __init__(self) -> None:
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.fail = False
        # PostgREST caps every response at this many rows
        self.max_rows = 1000
        self.queries: List[StubQuery] = []
        self._next_id = 1

    def table(self, name: str) -> StubQuery:
        query = StubQuery(self.tables.setdefault(name, []), fail=self.fail, max_rows=self.max_rows)
        self.queries.append(query)
        return query

    def add_definition(self, kind: str, start: date, end: Optional[date] = None,
                       recurring: bool = True, active: bool = True,
                       user_id: str = "user-1", text: str = "task") -> Dict[str, Any]:
        table, _, _ = _TABLES[kind]
        row = {
            "id": self._next_id,
            "user_id": user_id,
            "text": text,
            "start_date": start.isoformat(),
            "end_date": end.isoformat() if end else None,
            "is_recurring": recurring,
            "is_active": active,
        }
        self._next_id += 1
        self.tables.setdefault(table, []).append(row)
        return row

    def add_completion(self, kind: str, definition: Dict[str, Any], day: date,
                       user_id: str = "user-1") -> Dict[str, Any]:
        table, log_table, fk = _TABLES[kind]
        row = {
            "id": self._next_id,
            "user_id": user_id,
            "date": day.isoformat(),
            fk: definition["id"],
            table: definition,
        }
        self._next_id += 1
        self.tables.setdefault(log_table, []).append(row)
        return row


@pytest.fixture
def supabase_stub() -> StubSupabaseClient:
    return StubSupabaseClient()


@pytest.fixture
def repository(supabase_stub) -> StatisticsRepository:
    return StatisticsRepository(supabase_stub)


@pytest.fixture
def make_service(repository):
    """Build a StatisticsService whose 'today' is fixed."""
    def _make(today: date, lookback_days: int = 90) -> StatisticsService:
        return StatisticsService(repository, clock=lambda: today, lookback_days=lookback_days)
    return _make
