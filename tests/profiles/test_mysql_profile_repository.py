from __future__ import annotations

import uuid

import pytest

from school_attendance.core.enums import Role
from school_attendance.profiles.mysql_profile_repository import (
    MySQLProfileRepository,
    _role_clause,
    _to_profile,
    _where,
)


class RecordingCursor:
    def __init__(self, rows):
        self._rows = rows
        self.executed = []
        self.rowcount = 0

    def execute(self, sql, params=None):
        self.executed.append((" ".join(sql.split()), tuple(params or ())))

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return list(self._rows)

    def close(self):
        pass


class RecordingConnection:
    def __init__(self, cursor):
        self._cursor = cursor

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        pass

    def rollback(self):
        pass

    def close(self):
        pass


class RecordingConnFactory:
    def __init__(self, rows=()):
        self.cursor = RecordingCursor(list(rows))

    def connect(self, with_database=True):
        return RecordingConnection(self.cursor)


def row(**overrides):
    values = {"id": str(uuid.uuid4()), "user_id": str(uuid.uuid4()), "email": "x@school.id", "role": "admin"}
    values.update(overrides)
    return values


@pytest.mark.parametrize("stored", [None, "", "owner", "Admin", "SUPERADMIN"])
def test_missing_or_unknown_stored_role_reads_as_user(stored):
    assert _to_profile(row(role=stored)).role == Role.USER


def test_known_stored_roles_are_kept():
    assert _to_profile(row(role="superadmin")).role == Role.SUPERADMIN


def test_user_filter_also_matches_null_and_unknown_roles():
    sql, params = _where({Role.USER}, None)
    assert sql == "(role IN (%s) OR role IS NULL OR role NOT IN (%s, %s, %s))"
    assert params == ["user", "user", "admin", "superadmin"]


def test_filters_without_user_stay_exact():
    sql, params = _role_clause({Role.ADMIN, Role.SUPERADMIN})
    assert sql == "role IN (%s, %s)"
    assert params == ["admin", "superadmin"]


def test_search_terms_follow_role_params():
    sql, params = _where({Role.USER, Role.ADMIN}, "an_di")
    assert sql.endswith("AND (full_name LIKE %s OR email LIKE %s)")
    assert params[-2:] == ["%an\\_di%", "%an\\_di%"]


def test_count_by_user_role_includes_unknown_roles():
    factory = RecordingConnFactory(rows=[{"total": 4}])
    assert MySQLProfileRepository(factory).count_by_role(Role.USER) == 4

    sql, params = factory.cursor.executed[0]
    assert "role IS NULL" in sql
    assert params == ("user", "user", "admin", "superadmin")


def test_count_by_admin_role_is_exact():
    factory = RecordingConnFactory(rows=[{"total": 2}])
    MySQLProfileRepository(factory).count_by_role(Role.ADMIN)

    sql, params = factory.cursor.executed[0]
    assert sql == "SELECT COUNT(*) AS total FROM user_profiles WHERE role IN (%s)"
    assert params == ("admin",)
