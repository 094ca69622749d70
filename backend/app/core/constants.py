"""
Application constants
"""

# Days of history walked back from today when computing streaks
STREAK_LOOKBACK_DAYS = 90

# Used when REPORTING_TIMEZONE is not set
DEFAULT_REPORTING_TIMEZONE = "UTC"

# Period windows, in days back from today
MONTH_PERIOD_DAYS = 30
YEAR_PERIOD_DAYS = 365

# Supabase tables
MIT_TABLE = "mits"
MET_TABLE = "mets"
MIT_COMPLETIONS_TABLE = "mit_completions"
MET_CHECKS_TABLE = "met_checks"
USERS_TABLE = "users"

# Longest date range served in one request (a year window is 366 days)
MAX_RANGE_DAYS = 366

# PostgREST returns at most this many rows per request
PAGE_SIZE = 1000
