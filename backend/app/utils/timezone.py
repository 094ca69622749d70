"""
Timezone Utilities - Centralized timezone handling
"""
from datetime import date, datetime
from typing import Optional

import pytz

from app.core.constants import DEFAULT_REPORTING_TIMEZONE


def get_reporting_tz(name: Optional[str] = None):
    """
    Get the timezone statistics are reported in

    Args:
        name: IANA timezone name, defaults to UTC

    Returns:
        pytz timezone object
    """
    return pytz.timezone(name or DEFAULT_REPORTING_TIMEZONE)


def get_now(tz=None) -> datetime:
    """
    Get current datetime in the reporting timezone

    Args:
        tz: Timezone name or pytz timezone (defaults to UTC)

    Returns:
        Timezone-aware datetime object
    """
    if tz is None or isinstance(tz, str):
        tz = get_reporting_tz(tz)
    return datetime.now(tz)


def get_today_date(tz=None) -> date:
    """
    Get today's date in the reporting timezone

    Returns:
        date object for today
    """
    return get_now(tz).date()
