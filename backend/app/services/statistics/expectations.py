"""
Daily expectation rules
Decides which task definitions a user was expected to act on for a given day
"""
from datetime import date
from typing import Iterable, List

from app.models.statistics import TaskDefinition


def is_expected(definition: TaskDefinition, day: date) -> bool:
    """
    Check whether a task definition is expected on a day

    One-off definitions are only expected on their start date, even when an
    end date is set. Recurring definitions are expected on every day of the
    closed interval [start_date, end_date], open-ended when end_date is None.

    Args:
        definition: The task definition
        day: Calendar day to check

    Returns:
        True if the definition counts toward that day's total
    """
    if not definition.is_active:
        return False

    if not definition.is_recurring:
        return definition.start_date == day

    if definition.start_date > day:
        return False
    return definition.end_date is None or day <= definition.end_date


def resolve_expected(definitions: Iterable[TaskDefinition], day: date) -> List[TaskDefinition]:
    """
    Get the definitions expected on a day, in input order

    Args:
        definitions: Task definitions (inactive ones are skipped)
        day: Calendar day

    Returns:
        List of expected definitions
    """
    return [d for d in definitions if is_expected(d, day)]
