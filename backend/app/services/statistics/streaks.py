"""
Streak calculation over daily aggregates
A day is a success when every expected MIT was completed; MET is not considered
"""
from typing import Iterable
import logging

from app.models.statistics import DailyAggregate, DayStatus, StreakResult

logger = logging.getLogger(__name__)


def classify_day(aggregate: DailyAggregate) -> DayStatus:
    """
    Classify a day for streak purposes

    Args:
        aggregate: The day's counts

    Returns:
        NEUTRAL when no MIT was expected, SUCCESS when completions reach the
        expected total, FAILURE otherwise
    """
    if aggregate.mit_total == 0:
        return DayStatus.NEUTRAL
    if aggregate.mit_completed >= aggregate.mit_total:
        return DayStatus.SUCCESS
    return DayStatus.FAILURE


def calculate_streaks(aggregates: Iterable[DailyAggregate]) -> StreakResult:
    """
    Compute the current and best streak of successful days

    Days are walked from the most recent backwards. Neutral days are skipped
    as if absent. The current streak stops growing at the first failure; the
    walk continues so older runs still count toward the best streak.

    Args:
        aggregates: Daily aggregates in any order

    Returns:
        StreakResult with current_streak and best_streak
    """
    ordered = sorted(aggregates, key=lambda a: a.date, reverse=True)

    current_streak = 0
    best_streak = 0
    running = 0
    current_open = True

    for aggregate in ordered:
        status = classify_day(aggregate)
        logger.debug(
            f"[STREAK] {aggregate.date}: {aggregate.mit_completed}/{aggregate.mit_total} MIT -> {status.value}"
        )

        if status is DayStatus.NEUTRAL:
            continue

        if status is DayStatus.SUCCESS:
            running += 1
            best_streak = max(best_streak, running)
            if current_open:
                current_streak += 1
        else:
            running = 0
            current_open = False

    return StreakResult(current_streak=current_streak, best_streak=best_streak)
