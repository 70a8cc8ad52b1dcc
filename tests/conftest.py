from __future__ import annotations

import uuid
from dataclasses import replace
from datetime import datetime
from typing import Optional

import pytest

from school_attendance.attendance_hours.model import DefaultHours
from school_attendance.auth.model import AuthContext, AuthSession
from school_attendance.core.enums import Role
from school_attendance.profiles.model import UserProfile
from school_attendance.special_days.model import SpecialDay


def make_profile(role: Role, email: str, full_name: str = "", **extra) -> UserProfile:
    return UserProfile(
        id=extra.pop("id", str(uuid.uuid4())),
        user_id=extra.pop("user_id", str(uuid.uuid4())),
        email=email,
        full_name=full_name or email.split("@")[0].title(),
        role=role,
        created_at=datetime(2026, 1, 1, 7, 0),
        updated_at=datetime(2026, 1, 1, 7, 0),
        **extra,
    )


def actor_for(profile: Optional[UserProfile], *, email: Optional[str] = None) -> AuthContext:
    if profile is None:
        return AuthContext(session=AuthSession(user_id=str(uuid.uuid4()), email=email), profile=None)
    return AuthContext(session=AuthSession(user_id=profile.user_id, email=profile.email), profile=profile)


class InMemoryProfiles:
    def __init__(self, *profiles: UserProfile):
        self.by_id: dict[str, UserProfile] = {p.id: p for p in profiles}
        self.search_calls = 0

    def add(self, profile: UserProfile) -> UserProfile:
        self.by_id[profile.id] = profile
        return profile

    def get_by_id(self, profile_id):
        return self.by_id.get(profile_id)

    def get_by_user_id(self, user_id):
        return next((p for p in self.by_id.values() if p.user_id == user_id), None)

    def get_by_email(self, email):
        return next((p for p in self.by_id.values() if p.email == email), None)

    def _matching(self, roles, search):
        items = [p for p in self.by_id.values() if p.role in roles]
        if search:
            needle = search.casefold()
            items = [
                p for p in items
                if needle in (p.full_name or "").casefold() or needle in (p.email or "").casefold()
            ]
        items.sort(key=lambda p: (p.role.value, p.full_name or ""))
        return items

    def search(self, *, roles, search=None, limit=20, offset=0):
        self.search_calls += 1
        return self._matching(roles, search)[offset:offset + limit]

    def count(self, *, roles, search=None):
        return len(self._matching(roles, search))

    def count_by_role(self, role):
        return sum(1 for p in self.by_id.values() if p.role == role)

    def create(self, *, email, full_name, role, class_name=None, nis=None):
        return self.add(make_profile(role, email, full_name, class_name=class_name, nis=nis))

    def update_role(self, profile_id, role):
        if profile_id not in self.by_id:
            return None
        self.by_id[profile_id] = replace(self.by_id[profile_id], role=role, updated_at=datetime(2026, 2, 1, 9, 0))
        return self.by_id[profile_id]

    def update_role_by_email(self, email, role):
        existing = self.get_by_email(email)
        return self.update_role(existing.id, role) if existing else None

    def delete_by_id(self, profile_id):
        return self.by_id.pop(profile_id, None)


class InMemoryDefaultHours:
    def __init__(self, *rows: DefaultHours):
        self.by_id: dict[str, DefaultHours] = {r.id: r for r in rows}

    def list_all(self):
        return sorted(self.by_id.values(), key=lambda r: r.day_of_week)

    def get_by_day(self, day_of_week):
        return next((r for r in self.by_id.values() if r.day_of_week == day_of_week), None)

    def update(self, hours_id, *, start_time, end_time):
        if hours_id not in self.by_id:
            return None
        self.by_id[hours_id] = replace(self.by_id[hours_id], start_time=start_time, end_time=end_time)
        return self.by_id[hours_id]

    def insert(self, *, day_of_week, start_time, end_time):
        row = DefaultHours(id=str(uuid.uuid4()), day_of_week=day_of_week, start_time=start_time, end_time=end_time)
        self.by_id[row.id] = row
        return row

    def delete(self, hours_id):
        return self.by_id.pop(hours_id, None) is not None


class InMemorySpecialDays:
    def __init__(self, *rows: SpecialDay):
        self.by_id: dict[str, SpecialDay] = {r.id: r for r in rows}

    def list_all(self):
        return sorted(self.by_id.values(), key=lambda r: r.date)

    def update(self, special_day_id, values):
        if special_day_id not in self.by_id:
            return None
        self.by_id[special_day_id] = SpecialDay(id=special_day_id, **vars(values))
        return self.by_id[special_day_id]

    def insert(self, values):
        row = SpecialDay(id=str(uuid.uuid4()), **vars(values))
        self.by_id[row.id] = row
        return row

    def delete(self, special_day_id):
        return self.by_id.pop(special_day_id, None) is not None


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 8, 0, 0)


@pytest.fixture
def superadmin() -> UserProfile:
    return make_profile(Role.SUPERADMIN, "head@school.id", "Head Master")


@pytest.fixture
def admin() -> UserProfile:
    return make_profile(Role.ADMIN, "teacher@school.id", "Bu Guru")


@pytest.fixture
def student() -> UserProfile:
    return make_profile(Role.USER, "siswa@school.id", "Andi Siswa", nis="1001", class_name="XI-A")


@pytest.fixture
def profiles(superadmin, admin, student) -> InMemoryProfiles:
    return InMemoryProfiles(superadmin, admin, student)
