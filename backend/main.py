"""
FastAPI Application Entry Point
"""
import logging
from fastapi import FastAPI
from app.core.config import settings
from app.routes import health, statistics

# Configure logging
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

# Silence noisy third-party loggers
logging.getLogger('httpx').setLevel(logging.WARNING)
logging.getLogger('httpcore').setLevel(logging.WARNING)
logging.getLogger('hpack').setLevel(logging.WARNING)

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Habitus Statistics API",
    version="0.1.0"
)

# Register routes
app.include_router(health.router)
app.include_router(statistics.router)
