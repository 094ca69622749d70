"""
Daily aggregation
Joins expected task definitions with completion records, one row per day
"""
from collections import Counter
from datetime import date, timedelta
from typing import Dict, Iterable, Iterator, List, Sequence

from app.core.exceptions import InvalidRangeError
from app.models.statistics import CompletionRecord, DailyAggregate, TaskDefinition
from .expectations import resolve_expected


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day from start to end, both inclusive"""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def group_completions_by_date(records: Iterable[CompletionRecord]) -> Dict[date, int]:
    """Count completion records per day in a single pass"""
    return Counter(record.date for record in records)


def build_daily_aggregates(
    mit_definitions: Sequence[TaskDefinition],
    met_definitions: Sequence[TaskDefinition],
    mit_completions: Iterable[CompletionRecord],
    met_completions: Iterable[CompletionRecord],
    start: date,
    end: date
) -> List[DailyAggregate]:
    """
    Build one DailyAggregate per day of [start, end], oldest first

    Completions are counted as logged: a day can report more completions than
    expected tasks (e.g. stale rows or a definition whose dates changed).

    Args:
        mit_definitions: Active MIT definitions
        met_definitions: Active MET definitions
        mit_completions: MIT completion records in range
        met_completions: MET check records in range
        start: First day (inclusive)
        end: Last day (inclusive)

    Returns:
        List of DailyAggregate ordered by ascending date

    Raises:
        InvalidRangeError: If start is after end
    """
    if start > end:
        raise InvalidRangeError(f"Start date {start} is after end date {end}")

    mit_by_date = group_completions_by_date(mit_completions)
    met_by_date = group_completions_by_date(met_completions)

    aggregates = []
    for day in iter_days(start, end):
        aggregates.append(DailyAggregate(
            date=day,
            mit_total=len(resolve_expected(mit_definitions, day)),
            mit_completed=mit_by_date.get(day, 0),
            met_total=len(resolve_expected(met_definitions, day)),
            met_completed=met_by_date.get(day, 0)
        ))

    return aggregates
