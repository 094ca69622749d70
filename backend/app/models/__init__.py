"""
Pydantic models for the application
"""
from app.models.statistics import (
    TaskKind,
    DayStatus,
    StatisticsPeriod,
    TaskDefinition,
    CompletionRecord,
    DailyAggregate,
    StreakResult,
    PeriodSummary,
    EvolutionSeries,
    UserStatistics
)

__all__ = [
    "TaskKind",
    "DayStatus",
    "StatisticsPeriod",
    "TaskDefinition",
    "CompletionRecord",
    "DailyAggregate",
    "StreakResult",
    "PeriodSummary",
    "EvolutionSeries",
    "UserStatistics"
]
