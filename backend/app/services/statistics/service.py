"""
Statistics Service - Business logic behind the statistics screens
Daily aggregates, streaks, period summaries and chart series for one user
"""
from datetime import date, timedelta
from typing import Callable, List, Optional, Tuple, Union
import logging
import math

from app.core.constants import (
    MAX_RANGE_DAYS,
    MONTH_PERIOD_DAYS,
    STREAK_LOOKBACK_DAYS,
    YEAR_PERIOD_DAYS
)
from app.core.exceptions import DataUnavailableError, InvalidPeriodError, InvalidRangeError
from app.models.statistics import (
    DailyAggregate,
    EvolutionSeries,
    PeriodSummary,
    StatisticsPeriod,
    StreakResult,
    TaskKind,
    UserStatistics
)
from app.utils.timezone import get_reporting_tz, get_today_date
from .aggregation import build_daily_aggregates
from .repository import StatisticsRepository, UserId
from .streaks import calculate_streaks

logger = logging.getLogger(__name__)


def percent(part: int, whole: int) -> int:
    """Whole-number percentage, halves rounded up"""
    return math.floor(part / whole * 100 + 0.5)


class StatisticsService:
    """
    Stateless statistics computations over a StatisticsRepository

    Every call refetches from the store. Store failures degrade to empty or
    zeroed results so the statistics screens can render "no data".
    """

    def __init__(self, repository: StatisticsRepository, timezone: Optional[str] = None,
                 clock: Optional[Callable[[], date]] = None,
                 lookback_days: int = STREAK_LOOKBACK_DAYS):
        self.repository = repository
        self.tz = get_reporting_tz(timezone)
        self.clock = clock or (lambda: get_today_date(self.tz))
        self.lookback_days = min(lookback_days, MAX_RANGE_DAYS)

    def today(self) -> date:
        """Today's date in the reporting timezone"""
        return self.clock()

    def get_daily_aggregates(self, user_id: UserId, start: date, end: date) -> List[DailyAggregate]:
        """
        Get one DailyAggregate per day of [start, end], oldest first

        Args:
            user_id: The user ID
            start: First day (inclusive)
            end: Last day (inclusive)

        Returns:
            List of DailyAggregate, empty if the store is unavailable

        Raises:
            InvalidRangeError: If start is after end or the range is too long
        """
        if start > end:
            raise InvalidRangeError(f"Start date {start} is after end date {end}")
        if (end - start).days > MAX_RANGE_DAYS:
            raise InvalidRangeError(
                f"Range {start} -> {end} is longer than {MAX_RANGE_DAYS} days"
            )

        try:
            mit_definitions = self.repository.fetch_active_task_definitions(user_id, TaskKind.MIT)
            met_definitions = self.repository.fetch_active_task_definitions(user_id, TaskKind.MET)
            mit_completions = self.repository.fetch_completion_records(user_id, TaskKind.MIT, start, end)
            met_completions = self.repository.fetch_completion_records(user_id, TaskKind.MET, start, end)
        except DataUnavailableError as e:
            logger.warning(f"[STATISTICS] No data for user {user_id} ({start} -> {end}): {e}")
            return []

        logger.info(
            f"[STATISTICS] User {user_id}: {len(mit_definitions)} MIT, {len(met_definitions)} MET active, "
            f"{len(mit_completions)} completions, {len(met_completions)} checks ({start} -> {end})"
        )

        return build_daily_aggregates(
            mit_definitions, met_definitions, mit_completions, met_completions, start, end
        )

    def get_streaks(self, user_id: UserId) -> StreakResult:
        """
        Get the user's current and best MIT streak over the lookback window

        Args:
            user_id: The user ID

        Returns:
            StreakResult, zeroed if the store is unavailable
        """
        end = self.today()
        start = end - timedelta(days=self.lookback_days)

        result = calculate_streaks(self.get_daily_aggregates(user_id, start, end))
        logger.info(
            f"[STREAK] User {user_id}: current={result.current_streak} best={result.best_streak}"
        )
        return result

    def get_period_window(self, period: Union[StatisticsPeriod, str]) -> Tuple[date, date]:
        """
        Resolve a reporting period into a date range ending today

        week starts on Monday of the current week; month and year reach back
        30 and 365 days.

        Raises:
            InvalidPeriodError: If the period name is unknown
        """
        try:
            period = StatisticsPeriod(period)
        except ValueError:
            raise InvalidPeriodError(f"Unknown statistics period: {period}")

        today = self.today()
        if period is StatisticsPeriod.WEEK:
            start = today - timedelta(days=today.weekday())
        elif period is StatisticsPeriod.MONTH:
            start = today - timedelta(days=MONTH_PERIOD_DAYS)
        else:
            start = today - timedelta(days=YEAR_PERIOD_DAYS)
        return start, today

    def get_period_summary(self, user_id: UserId, period: Union[StatisticsPeriod, str]) -> PeriodSummary:
        """
        Get completion totals and success rate for a period

        The success rate counts completed MITs plus avoided METs over
        everything expected.

        Args:
            user_id: The user ID
            period: week, month or year

        Returns:
            PeriodSummary (zero counts if the store is unavailable)
        """
        start, end = self.get_period_window(period)
        period = StatisticsPeriod(period)
        aggregates = self.get_daily_aggregates(user_id, start, end)

        mit_completed = sum(a.mit_completed for a in aggregates)
        mit_expected = sum(a.mit_total for a in aggregates)
        met_checked = sum(a.met_completed for a in aggregates)
        met_expected = sum(a.met_total for a in aggregates)

        expected = mit_expected + met_expected
        succeeded = mit_completed + (met_expected - met_checked)
        success_rate = percent(succeeded, expected) if expected > 0 else 0

        logger.info(
            f"[STATISTICS] {period.value} summary for user {user_id}: "
            f"{succeeded}/{expected} = {success_rate}%"
        )

        return PeriodSummary(
            period=period,
            start_date=start,
            end_date=end,
            mit_completed=mit_completed,
            mit_expected=mit_expected,
            met_checked=met_checked,
            met_expected=met_expected,
            success_rate=success_rate
        )

    def get_evolution(self, user_id: UserId, period: Union[StatisticsPeriod, str]) -> EvolutionSeries:
        """
        Get per-day chart series for a period

        MIT rate is completed over expected (0 on days with no MIT). MET
        series count avoided tasks, and the MET rate is 100 on days with no MET.
        """
        start, end = self.get_period_window(period)
        period = StatisticsPeriod(period)
        series = EvolutionSeries(period=period)

        for aggregate in self.get_daily_aggregates(user_id, start, end):
            met_avoided = max(0, aggregate.met_total - aggregate.met_completed)

            series.labels.append(aggregate.date.isoformat())
            series.mit_completed.append(aggregate.mit_completed)
            series.mit_rate.append(
                percent(aggregate.mit_completed, aggregate.mit_total) if aggregate.mit_total > 0 else 0
            )
            series.met_avoided.append(met_avoided)
            series.met_rate.append(
                percent(met_avoided, aggregate.met_total) if aggregate.met_total > 0 else 100
            )

        return series

    def get_user_statistics(self, user_id: UserId) -> UserStatistics:
        """Get the profile overview: membership, streaks and last month's totals"""
        try:
            member_since = self.repository.fetch_member_since(user_id)
        except DataUnavailableError as e:
            logger.warning(f"[STATISTICS] Could not load profile for user {user_id}: {e}")
            member_since = None

        streaks = self.get_streaks(user_id)
        month = self.get_period_summary(user_id, StatisticsPeriod.MONTH)
        met_avoided = max(0, month.met_expected - month.met_checked)

        return UserStatistics(
            member_since=member_since,
            current_streak=streaks.current_streak,
            best_streak=streaks.best_streak,
            average_daily_score=month.success_rate,
            total_tasks_completed=month.mit_completed + month.met_checked,
            objectives_total=month.mit_expected + month.met_expected,
            objectives_completed=month.mit_completed + met_avoided,
            mit_completions_last_month=month.mit_completed,
            met_checks_last_month=month.met_checked
        )
