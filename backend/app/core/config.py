"""
Application configuration and environment variables
"""
import os
from dotenv import load_dotenv

from app.core.constants import DEFAULT_REPORTING_TIMEZONE, STREAK_LOOKBACK_DAYS

# Load environment variables
load_dotenv()


class Settings:
    """Application settings loaded from environment variables"""

    # Database
    SUPABASE_URL: str = os.getenv("SUPABASE_URL", "")
    SUPABASE_KEY: str = os.getenv("SUPABASE_KEY", "")

    # Statistics
    REPORTING_TIMEZONE: str = os.getenv("REPORTING_TIMEZONE", DEFAULT_REPORTING_TIMEZONE)
    STREAK_LOOKBACK_DAYS: int = int(os.getenv("STREAK_LOOKBACK_DAYS", str(STREAK_LOOKBACK_DAYS)))

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


# Create a global settings instance
settings = Settings()
