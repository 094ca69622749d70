"""
Business logic services
"""
from . import statistics

__all__ = [
    'statistics'
]
