from __future__ import annotations

import uuid
from typing import Optional

from ..common.datetime_utils import now_utc
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from .model import GeofenceSettings
from .repository import GeofenceRepository


def _to_settings(row: dict) -> GeofenceSettings:
    return GeofenceSettings(
        id=str(row["id"]),
        center_latitude=float(row["center_latitude"]),
        center_longitude=float(row["center_longitude"]),
        radius_meters=int(row["radius_meters"]),
        updated_at=row.get("updated_at"),
    )


class MySQLGeofenceRepository(GeofenceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get(self, settings_id: str) -> Optional[GeofenceSettings]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, center_latitude, center_longitude, radius_meters, updated_at "
                "FROM attendance_settings WHERE id=%s",
                (settings_id,),
            )
            row = fetchone(cur)
            return _to_settings(row) if row else None

    def get_first(self) -> Optional[GeofenceSettings]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT id, center_latitude, center_longitude, radius_meters, updated_at "
                "FROM attendance_settings ORDER BY updated_at ASC LIMIT 1"
            )
            row = fetchone(cur)
            return _to_settings(row) if row else None

    def update(
        self,
        settings_id: str,
        *,
        center_latitude: float,
        center_longitude: float,
        radius_meters: int,
    ) -> Optional[GeofenceSettings]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE attendance_settings
                SET center_latitude=%s, center_longitude=%s, radius_meters=%s, updated_at=%s
                WHERE id=%s
                """,
                (center_latitude, center_longitude, radius_meters, now_utc(), settings_id),
            )
        # rowcount is 0 for unchanged values too, so re-read instead.
        return self._get(settings_id)

    def insert(self, *, center_latitude: float, center_longitude: float, radius_meters: int) -> GeofenceSettings:
        settings_id = str(uuid.uuid4())
        now = now_utc()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO attendance_settings(id, center_latitude, center_longitude, radius_meters, updated_at)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (settings_id, center_latitude, center_longitude, radius_meters, now),
            )
        return GeofenceSettings(
            id=settings_id,
            center_latitude=center_latitude,
            center_longitude=center_longitude,
            radius_meters=radius_meters,
            updated_at=now,
        )
