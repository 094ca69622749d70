"""
Statistics Repository - Read-only Supabase access for task statistics
Queries for MIT/MET definitions, their completion logs, and user profiles
"""
from datetime import date
from typing import Any, Dict, List, Optional, Union
import logging

from supabase import Client

from app.core.constants import (
    MIT_TABLE,
    MET_TABLE,
    MIT_COMPLETIONS_TABLE,
    MET_CHECKS_TABLE,
    USERS_TABLE,
    PAGE_SIZE
)
from app.core.exceptions import DataUnavailableError
from app.models.statistics import CompletionRecord, TaskDefinition, TaskKind

logger = logging.getLogger(__name__)

UserId = Union[int, str]

# kind -> (definition table, log table, foreign key column in log table)
_TABLES = {
    TaskKind.MIT: (MIT_TABLE, MIT_COMPLETIONS_TABLE, "mit_id"),
    TaskKind.MET: (MET_TABLE, MET_CHECKS_TABLE, "met_id"),
}


class StatisticsRepository:
    """Reads task definitions and completion logs for one Supabase project"""

    def __init__(self, client: Client, page_size: int = PAGE_SIZE):
        self.client = client
        self.page_size = page_size

    def _fetch_all(self, build_query) -> List[Dict[str, Any]]:
        """
        Run a query page by page until a short page comes back

        Args:
            build_query: Callable returning a fresh, ordered query builder

        Returns:
            All matching rows
        """
        rows = []
        offset = 0
        while True:
            result = build_query().range(offset, offset + self.page_size - 1).execute()
            page = result.data or []
            rows.extend(page)
            if len(page) < self.page_size:
                return rows
            offset += self.page_size

    # ========================================================================
    # MITS / METS TABLES
    # ========================================================================

    def fetch_active_task_definitions(self, user_id: UserId, kind: TaskKind) -> List[TaskDefinition]:
        """
        Get all active task definitions of one kind for a user

        Args:
            user_id: The user ID
            kind: MIT or MET

        Returns:
            List of TaskDefinition

        Raises:
            DataUnavailableError: If query fails
        """
        table, _, _ = _TABLES[kind]
        try:
            rows = self._fetch_all(lambda: self.client.table(table)
                                   .select("id, text, start_date, end_date, is_recurring, is_active")
                                   .eq("user_id", user_id)
                                   .eq("is_active", True)
                                   .order("id"))
        except Exception as e:
            logger.error(f"Database error fetching {table} for user {user_id}: {e}")
            raise DataUnavailableError(f"Failed to fetch {kind.value} definitions: {e}")

        return [
            TaskDefinition(
                id=row["id"],
                kind=kind,
                text=row.get("text") or "",
                start_date=row["start_date"],
                end_date=row.get("end_date"),
                is_recurring=bool(row.get("is_recurring")),
                is_active=row.get("is_active", True)
            )
            for row in rows
        ]

    # ========================================================================
    # MIT_COMPLETIONS / MET_CHECKS TABLES
    # ========================================================================

    def fetch_completion_records(self, user_id: UserId, kind: TaskKind,
                                 start: date, end: date) -> List[CompletionRecord]:
        """
        Get completion records in [start, end] whose definition is still active

        Args:
            user_id: The user ID
            kind: MIT or MET
            start: First day (inclusive)
            end: Last day (inclusive)

        Returns:
            List of CompletionRecord

        Raises:
            DataUnavailableError: If query fails
        """
        table, log_table, fk = _TABLES[kind]
        try:
            rows = self._fetch_all(lambda: self.client.table(log_table)
                                   .select(f"id, date, {fk}, {table}!inner(is_active)")
                                   .eq("user_id", user_id)
                                   .eq(f"{table}.is_active", True)
                                   .gte("date", str(start))
                                   .lte("date", str(end))
                                   .order("date")
                                   .order("id"))
        except Exception as e:
            logger.error(f"Database error fetching {log_table} for user {user_id}: {e}")
            raise DataUnavailableError(f"Failed to fetch {kind.value} completions: {e}")

        return [
            CompletionRecord(
                id=row.get("id"),
                task_definition_id=row[fk],
                kind=kind,
                date=row["date"]
            )
            for row in rows
        ]

    # ========================================================================
    # USERS TABLE
    # ========================================================================

    def fetch_member_since(self, user_id: UserId) -> Optional[str]:
        """
        Get the user's account creation timestamp

        Args:
            user_id: The user ID

        Returns:
            ISO timestamp string or None if the user row is missing

        Raises:
            DataUnavailableError: If query fails
        """
        try:
            result = self.client.table(USERS_TABLE)\
                .select("created_at")\
                .eq("id", user_id)\
                .execute()
        except Exception as e:
            logger.error(f"Database error fetching profile for user {user_id}: {e}")
            raise DataUnavailableError(f"Failed to fetch user profile: {e}")

        return result.data[0].get("created_at") if result.data else None
