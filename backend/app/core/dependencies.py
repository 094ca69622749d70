"""
Dependency injection for shared clients and resources
"""
from functools import lru_cache

from supabase import create_client, Client

from app.core.config import settings
from app.services.statistics.repository import StatisticsRepository
from app.services.statistics.service import StatisticsService


@lru_cache(maxsize=1)
def get_supabase_client() -> Client:
    """Get Supabase client instance (created on first use)"""
    return create_client(settings.SUPABASE_URL, settings.SUPABASE_KEY)


def get_statistics_service() -> StatisticsService:
    """FastAPI dependency providing a StatisticsService bound to Supabase"""
    repository = StatisticsRepository(get_supabase_client())
    return StatisticsService(
        repository,
        timezone=settings.REPORTING_TIMEZONE,
        lookback_days=settings.STREAK_LOOKBACK_DAYS
    )
