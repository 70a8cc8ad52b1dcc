from __future__ import annotations

import uuid
from typing import Any, Collection, Optional, Sequence

from ..common.datetime_utils import now_utc
from ..core.enums import Role
from ..core.roles import parse_role, sorted_roles
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, escape_like, fetchall, fetchone, in_clause
from .model import UserProfile
from .repository import ProfileRepository

_COLUMNS = (
    "id, user_id, nis, full_name, email, avatar_url, absence_number, "
    "class_name, gender, role, created_at, updated_at"
)


def _to_profile(row: dict) -> UserProfile:
    return UserProfile(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        email=row.get("email"),
        full_name=row.get("full_name"),
        role=parse_role(row.get("role")),
        nis=row.get("nis"),
        class_name=row.get("class_name"),
        absence_number=row.get("absence_number"),
        gender=row.get("gender"),
        avatar_url=row.get("avatar_url"),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


def profile_from_join(row: dict) -> Optional[UserProfile]:
    """Profile summary from ``p_*`` columns of a LEFT JOIN on user_profiles."""
    if not row.get("p_id"):
        return None
    return UserProfile(
        id=str(row["p_id"]),
        user_id=str(row["user_id"]),
        email=row.get("p_email"),
        full_name=row.get("p_full_name"),
        role=parse_role(row.get("p_role")),
        nis=row.get("p_nis"),
        class_name=row.get("p_class_name"),
        absence_number=row.get("p_absence_number"),
    )


def _role_clause(roles: Collection[Role]) -> tuple[str, list[Any]]:
    """WHERE fragment for ``roles``.

    Rows whose stored role is NULL or unknown are read as ``user``, so they
    match whenever ``Role.USER`` is requested.
    """
    role_values = [r.value for r in sorted_roles(roles)]
    clause = f"role IN ({in_clause(role_values)})"
    params: list[Any] = list(role_values)
    if Role.USER in roles:
        known = [r.value for r in sorted_roles(Role)]
        clause = f"({clause} OR role IS NULL OR role NOT IN ({in_clause(known)}))"
        params.extend(known)
    return clause, params


def _where(roles: Collection[Role], search: Optional[str]) -> tuple[str, list[Any]]:
    role_sql, params = _role_clause(roles)
    clauses = [role_sql]
    if search:
        pattern = f"%{escape_like(search)}%"
        clauses.append("(full_name LIKE %s OR email LIKE %s)")
        params.extend([pattern, pattern])
    return " AND ".join(clauses), params


class MySQLProfileRepository(ProfileRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def _get_one(self, column: str, value: str) -> Optional[UserProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM user_profiles WHERE {column}=%s LIMIT 1", (value,))
            row = fetchone(cur)
            return _to_profile(row) if row else None

    def get_by_id(self, profile_id: str) -> Optional[UserProfile]:
        return self._get_one("id", profile_id)

    def get_by_user_id(self, user_id: str) -> Optional[UserProfile]:
        return self._get_one("user_id", user_id)

    def get_by_email(self, email: str) -> Optional[UserProfile]:
        return self._get_one("email", email)

    def search(
        self,
        *,
        roles: Collection[Role],
        search: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> Sequence[UserProfile]:
        where, params = _where(roles, search)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM user_profiles
                WHERE {where}
                ORDER BY role, full_name
                LIMIT %s OFFSET %s
                """,
                (*params, int(limit), int(offset)),
            )
            return [_to_profile(r) for r in fetchall(cur)]

    def count(self, *, roles: Collection[Role], search: Optional[str] = None) -> int:
        where, params = _where(roles, search)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS total FROM user_profiles WHERE {where}", tuple(params))
            row = fetchone(cur)
            return int(row["total"]) if row else 0

    def count_by_role(self, role: Role) -> int:
        where, params = _role_clause({role})
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT COUNT(*) AS total FROM user_profiles WHERE {where}", tuple(params))
            row = fetchone(cur)
            return int(row["total"]) if row else 0

    def create(
        self,
        *,
        email: str,
        full_name: str,
        role: Role,
        class_name: Optional[str] = None,
        nis: Optional[str] = None,
    ) -> UserProfile:
        profile_id = str(uuid.uuid4())
        now = now_utc()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO user_profiles(id, user_id, email, full_name, role, class_name, nis, created_at, updated_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (profile_id, str(uuid.uuid4()), email, full_name, role.value, class_name, nis, now, now),
            )
        created = self.get_by_id(profile_id)
        if created is None:
            raise RuntimeError(f"Inserted profile {profile_id} could not be read back")
        return created

    def update_role(self, profile_id: str, role: Role) -> Optional[UserProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE user_profiles SET role=%s, updated_at=%s WHERE id=%s",
                (role.value, now_utc(), profile_id),
            )
        return self.get_by_id(profile_id)

    def update_role_by_email(self, email: str, role: Role) -> Optional[UserProfile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE user_profiles SET role=%s, updated_at=%s WHERE email=%s",
                (role.value, now_utc(), email),
            )
        return self.get_by_email(email)

    def delete_by_id(self, profile_id: str) -> Optional[UserProfile]:
        existing = self.get_by_id(profile_id)
        if existing is None:
            return None
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM user_profiles WHERE id=%s", (profile_id,))
            if cur.rowcount <= 0:
                return None
        return existing
