from __future__ import annotations

import uuid
from typing import Optional, Sequence

from ..common.datetime_utils import now_utc
from ..core.enums import SpecialDayType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import SpecialDay, SpecialDayValues
from .repository import SpecialDayRepository

_COLUMNS = "id, date, type, name, start_time, end_time, note, created_at, updated_at"


def _to_special_day(row: dict) -> SpecialDay:
    return SpecialDay(
        id=str(row["id"]),
        date=row["date"],
        type=SpecialDayType(row["type"]),
        name=row.get("name"),
        start_time=row.get("start_time"),
        end_time=row.get("end_time"),
        note=row.get("note"),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


class MySQLSpecialDayRepository(SpecialDayRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get(self, special_day_id: str) -> Optional[SpecialDay]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_special_days WHERE id=%s", (special_day_id,))
            row = fetchone(cur)
            return _to_special_day(row) if row else None

    def list_all(self) -> Sequence[SpecialDay]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM attendance_special_days ORDER BY date")
            return [_to_special_day(r) for r in fetchall(cur)]

    def update(self, special_day_id: str, values: SpecialDayValues) -> Optional[SpecialDay]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_special_days
                SET date=%s, type=%s, name=%s, start_time=%s, end_time=%s, note=%s, updated_at=%s
                WHERE id=%s
                """,
                (
                    values.date,
                    values.type.value,
                    values.name,
                    values.start_time,
                    values.end_time,
                    values.note,
                    now_utc(),
                    special_day_id,
                ),
            )
        return self._get(special_day_id)

    def insert(self, values: SpecialDayValues) -> SpecialDay:
        special_day_id = str(uuid.uuid4())
        now = now_utc()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_special_days(id, date, type, name, start_time, end_time, note, created_at, updated_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    special_day_id,
                    values.date,
                    values.type.value,
                    values.name,
                    values.start_time,
                    values.end_time,
                    values.note,
                    now,
                    now,
                ),
            )
        created = self._get(special_day_id)
        if created is None:
            raise RuntimeError(f"Inserted special day {special_day_id} could not be read back")
        return created

    def delete(self, special_day_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_special_days WHERE id=%s", (special_day_id,))
            return cur.rowcount > 0
