from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import AbsenceStatus, SortOrder
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..profiles.mysql_profile_repository import profile_from_join
from .model import Absence, AbsenceFilters
from .repository import AbsenceRepository

_SELECT = """
    SELECT a.id, a.user_id, a.date, a.status, a.reason, a.photo_url,
           a.latitude, a.longitude, a.created_at,
           p.id AS p_id, p.email AS p_email, p.full_name AS p_full_name, p.role AS p_role,
           p.nis AS p_nis, p.class_name AS p_class_name, p.absence_number AS p_absence_number
    FROM absences a
    LEFT JOIN user_profiles p ON p.user_id = a.user_id
"""


def _to_absence(row: dict) -> Absence:
    return Absence(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        date=row["date"],
        status=AbsenceStatus(row["status"]),
        created_at=row["created_at"],
        reason=row.get("reason"),
        photo_url=row.get("photo_url"),
        latitude=float(row["latitude"]) if row.get("latitude") is not None else None,
        longitude=float(row["longitude"]) if row.get("longitude") is not None else None,
        profile=profile_from_join(row),
    )


class MySQLAbsenceRepository(AbsenceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find(self, filters: AbsenceFilters) -> Sequence[Absence]:
        clauses: list[str] = []
        params: list[Any] = []
        if filters.user_id:
            clauses.append("a.user_id=%s")
            params.append(filters.user_id)
        if filters.status:
            clauses.append("a.status=%s")
            params.append(filters.status.value)
        if filters.on_date:
            clauses.append("a.date=%s")
            params.append(filters.on_date)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        direction = "DESC" if filters.sort == SortOrder.DESC else "ASC"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"{_SELECT} {where} ORDER BY a.date {direction}, a.created_at {direction} LIMIT %s OFFSET %s",
                (*params, int(filters.limit), int(filters.offset)),
            )
            return [_to_absence(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[Absence]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY a.date DESC, a.created_at DESC")
            return [_to_absence(r) for r in fetchall(cur)]

    def get_by_id(self, absence_id: str) -> Optional[Absence]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE a.id=%s", (absence_id,))
            row = fetchone(cur)
            return _to_absence(row) if row else None
