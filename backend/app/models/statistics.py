"""
Pydantic models for task definitions, completions and derived statistics
"""
from datetime import date, datetime
from enum import Enum
from typing import Any, List, Optional, Union

import pytz
from pydantic import BaseModel, Field, field_validator


class TaskKind(str, Enum):
    """MIT = most important task, MET = task the user tries to avoid"""
    MIT = "MIT"
    MET = "MET"


class DayStatus(str, Enum):
    """Streak classification of a single day"""
    SUCCESS = "success"
    FAILURE = "failure"
    NEUTRAL = "neutral"


class StatisticsPeriod(str, Enum):
    """Reporting windows offered to the statistics screens"""
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


def _to_calendar_date(v: Any) -> Any:
    """
    Reduce timestamps to their calendar day in UTC

    '2024-01-01T22:00:00-05:00' becomes 2024-01-02. Plain dates and naive
    timestamps keep the day as written.
    """
    if isinstance(v, str) and len(v) > 10:
        try:
            v = datetime.fromisoformat(v.replace("Z", "+00:00"))
        except ValueError:
            return v[:10]
    if isinstance(v, datetime):
        if v.tzinfo is not None:
            v = v.astimezone(pytz.utc)
        return v.date()
    return v


class TaskDefinition(BaseModel):
    """A MIT or MET the user has scheduled"""
    id: Union[int, str]
    kind: TaskKind
    text: str = ""
    start_date: date
    end_date: Optional[date] = None
    is_recurring: bool = False
    is_active: bool = True

    @field_validator('start_date', 'end_date', mode='before')
    @classmethod
    def validate_calendar_date(cls, v: Any) -> Any:
        return _to_calendar_date(v)


class CompletionRecord(BaseModel):
    """A dated completion (MIT) or check (MET) of a task definition"""
    id: Optional[Union[int, str]] = None
    task_definition_id: Union[int, str]
    kind: TaskKind
    date: date

    @field_validator('date', mode='before')
    @classmethod
    def validate_calendar_date(cls, v: Any) -> Any:
        return _to_calendar_date(v)


class DailyAggregate(BaseModel):
    """
    Expected and completed task counts for one calendar day.

    Completed counts are not capped at the totals.
    """
    date: date
    mit_total: int = Field(0, ge=0)
    mit_completed: int = Field(0, ge=0)
    met_total: int = Field(0, ge=0)
    met_completed: int = Field(0, ge=0)


class StreakResult(BaseModel):
    """Current and best run of fully completed MIT days"""
    current_streak: int = Field(0, ge=0)
    best_streak: int = Field(0, ge=0)


class PeriodSummary(BaseModel):
    """Totals over a reporting period"""
    period: StatisticsPeriod
    start_date: date
    end_date: date
    mit_completed: int = 0
    mit_expected: int = 0
    met_checked: int = 0
    met_expected: int = 0
    success_rate: int = 0


class EvolutionSeries(BaseModel):
    """Per-day series for the evolution charts, oldest day first"""
    period: StatisticsPeriod
    labels: List[str] = Field(default_factory=list)
    mit_completed: List[int] = Field(default_factory=list)
    mit_rate: List[int] = Field(default_factory=list)
    met_avoided: List[int] = Field(default_factory=list)
    met_rate: List[int] = Field(default_factory=list)


class UserStatistics(BaseModel):
    """Overview shown on the settings/profile screen"""
    member_since: Optional[str] = None
    current_streak: int = 0
    best_streak: int = 0
    average_daily_score: int = 0
    total_tasks_completed: int = 0
    objectives_total: int = 0
    objectives_completed: int = 0
    mit_completions_last_month: int = 0
    met_checks_last_month: int = 0
