from __future__ import annotations

import uuid
from typing import Optional, Sequence

from ..common.datetime_utils import now_utc
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import DefaultHours
from .repository import DefaultHoursRepository

_COLUMNS = "id, day_of_week, start_time, end_time, updated_at"


def _to_hours(row: dict) -> DefaultHours:
    return DefaultHours(
        id=str(row["id"]),
        day_of_week=int(row["day_of_week"]),
        start_time=str(row["start_time"]),
        end_time=str(row["end_time"]),
        updated_at=row.get("updated_at"),
    )


class MySQLDefaultHoursRepository(DefaultHoursRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get_one(self, column: str, value) -> Optional[DefaultHours]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_default_hours WHERE {column}=%s LIMIT 1", (value,))
            row = fetchone(cur)
            return _to_hours(row) if row else None

    def list_all(self) -> Sequence[DefaultHours]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_default_hours ORDER BY day_of_week")
            return [_to_hours(r) for r in fetchall(cur)]

    def get_by_day(self, day_of_week: int) -> Optional[DefaultHours]:
        return self._get_one("day_of_week", day_of_week)

    def update(self, hours_id: str, *, start_time: str, end_time: str) -> Optional[DefaultHours]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE attendance_default_hours SET start_time=%s, end_time=%s, updated_at=%s WHERE id=%s",
                (start_time, end_time, now_utc(), hours_id),
            )
        return self._get_one("id", hours_id)

    def insert(self, *, day_of_week: int, start_time: str, end_time: str) -> DefaultHours:
        hours_id = str(uuid.uuid4())
        now = now_utc()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_default_hours(id, day_of_week, start_time, end_time, updated_at)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (hours_id, day_of_week, start_time, end_time, now),
            )
        return DefaultHours(
            id=hours_id, day_of_week=day_of_week, start_time=start_time, end_time=end_time, updated_at=now
        )

    def delete(self, hours_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_default_hours WHERE id=%s", (hours_id,))
            return cur.rowcount > 0
