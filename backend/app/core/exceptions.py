"""
Custom Exceptions - Application-specific error types
"""


class HabitusException(Exception):
    """Base exception for all Habitus statistics errors"""
    pass


class DatabaseError(HabitusException):
    """Raised when database operations fail"""
    pass


class DataUnavailableError(DatabaseError):
    """Raised when the task store cannot be reached or returns an error"""
    pass


class InvalidRangeError(HabitusException):
    """Raised when a date range starts after it ends"""
    pass


class InvalidPeriodError(HabitusException):
    """Raised when a statistics period name is not recognised"""
    pass
