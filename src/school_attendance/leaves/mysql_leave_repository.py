from __future__ import annotations

from typing import Any, Optional, Sequence

from ..core.enums import ApprovalStatus, LeaveCategory
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from ..profiles.mysql_profile_repository import profile_from_join
from .model import LeaveDecision, LeaveFilters, LeaveRequest
from .repository import LeaveRepository

_SELECT = """
    SELECT z.id, z.user_id, z.tanggal, z.kategori_izin, z.deskripsi, z.link_foto,
           z.approval_status, z.status, z.created_at, z.updated_at,
           z.approved_by, z.approved_at, z.rejection_reason, z.rejected_at, z.rejected_by,
           z.tanggal_utc_date,
           p.id AS p_id, p.email AS p_email, p.full_name AS p_full_name, p.role AS p_role,
           p.nis AS p_nis, p.class_name AS p_class_name, p.absence_number AS p_absence_number
    FROM perizinan z
    LEFT JOIN user_profiles p ON p.user_id = z.user_id
"""


def _to_leave(row: dict) -> LeaveRequest:
    return LeaveRequest(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        requested_at=row["tanggal"],
        category=LeaveCategory(row["kategori_izin"]),
        approval_status=ApprovalStatus(row["approval_status"]),
        status=bool(row.get("status")),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        description=row.get("deskripsi"),
        photo_url=row.get("link_foto"),
        approved_by=row.get("approved_by"),
        approved_at=row.get("approved_at"),
        rejection_reason=row.get("rejection_reason"),
        rejected_at=row.get("rejected_at"),
        rejected_by=row.get("rejected_by"),
        requested_date=row.get("tanggal_utc_date"),
        profile=profile_from_join(row),
    )


class MySQLLeaveRepository(LeaveRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find(self, filters: LeaveFilters) -> Sequence[LeaveRequest]:
        clauses: list[str] = []
        params: list[Any] = []
        if filters.user_id:
            clauses.append("z.user_id=%s")
            params.append(filters.user_id)
        if filters.category:
            clauses.append("z.kategori_izin=%s")
            params.append(filters.category.value)
        if filters.approval_status:
            clauses.append("z.approval_status=%s")
            params.append(filters.approval_status.value)
        if filters.status is not None:
            clauses.append("z.status=%s")
            params.append(1 if filters.status else 0)
        if filters.on_date:
            clauses.append("z.tanggal_utc_date=%s")
            params.append(filters.on_date)

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"{_SELECT} {where} ORDER BY z.created_at ASC LIMIT %s OFFSET %s",
                (*params, int(filters.limit), int(filters.offset)),
            )
            return [_to_leave(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} ORDER BY z.created_at DESC")
            return [_to_leave(r) for r in fetchall(cur)]

    def get_by_id(self, request_id: str) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_SELECT} WHERE z.id=%s", (request_id,))
            row = fetchone(cur)
            return _to_leave(row) if row else None

    def apply_decision(self, request_id: str, decision: LeaveDecision) -> Optional[LeaveRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE perizinan
                SET approval_status=%s, status=%s, updated_at=%s,
                    approved_by=%s, approved_at=%s,
                    rejection_reason=%s, rejected_at=%s, rejected_by=%s
                WHERE id=%s
                """,
                (
                    decision.approval_status.value,
                    1 if decision.status else 0,
                    decision.updated_at,
                    decision.approved_by,
                    decision.approved_at,
                    decision.rejection_reason,
                    decision.rejected_at,
                    decision.rejected_by,
                    request_id,
                ),
            )
        return self.get_by_id(request_id)
