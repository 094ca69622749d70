"""
Statistics module - Daily aggregation and streaks for MIT/MET tasks
"""
from . import expectations
from . import aggregation
from . import streaks
from . import repository
from . import service

from .expectations import is_expected, resolve_expected
from .aggregation import build_daily_aggregates, group_completions_by_date, iter_days
from .streaks import classify_day, calculate_streaks
from .repository import StatisticsRepository
from .service import StatisticsService

__all__ = [
    # Modules
    'expectations',
    'aggregation',
    'streaks',
    'repository',
    'service',

    # Pure computations
    'is_expected',
    'resolve_expected',
    'build_daily_aggregates',
    'group_completions_by_date',
    'iter_days',
    'classify_day',
    'calculate_streaks',

    # Store and service
    'StatisticsRepository',
    'StatisticsService'
]
