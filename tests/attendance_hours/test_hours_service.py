from __future__ import annotations

import uuid

import pytest

from conftest import InMemoryDefaultHours, actor_for
from school_attendance.attendance_hours.service import DefaultHoursService
from school_attendance.core.exceptions import AuthorizationError, NotFoundError, ValidationError


def test_first_save_inserts_then_updates_same_day(admin):
    repo = InMemoryDefaultHours()
    svc = DefaultHoursService(repo)

    created = svc.upsert_day(actor_for(admin), day_of_week=1, start_time="07:00", end_time="14:00")
    updated = svc.upsert_day(actor_for(admin), day_of_week="1", start_time="07:15", end_time="13:00")

    assert updated.id == created.id
    assert (updated.start_time, updated.end_time) == ("07:15", "13:00")
    assert len(repo.list_all()) == 1


def test_days_are_listed_monday_first(admin):
    svc = DefaultHoursService(InMemoryDefaultHours())
    for day in (5, 1, 3):
        svc.upsert_day(actor_for(admin), day_of_week=day, start_time="07:00", end_time="14:00")
    assert [h.day_of_week for h in svc.list_hours()] == [1, 3, 5]


def test_student_cannot_change_hours(student):
    with pytest.raises(AuthorizationError):
        DefaultHoursService(InMemoryDefaultHours()).upsert_day(
            actor_for(student), day_of_week=1, start_time="07:00", end_time="14:00"
        )


@pytest.mark.parametrize(
    "day, start, end",
    [
        (0, "07:00", "14:00"),
        (8, "07:00", "14:00"),
        (1, "7:00", "14:00"),
        (1, "07:00", "24:00"),
        (1, "07:60", "14:00"),
        (1, "14:00", "07:00"),
        (1, "07:00", "07:00"),
    ],
)
def test_invalid_hours(admin, day, start, end):
    with pytest.raises(ValidationError):
        DefaultHoursService(InMemoryDefaultHours()).upsert_day(
            actor_for(admin), day_of_week=day, start_time=start, end_time=end
        )


def test_delete(admin):
    repo = InMemoryDefaultHours()
    svc = DefaultHoursService(repo)
    row = svc.upsert_day(actor_for(admin), day_of_week=2, start_time="07:00", end_time="14:00")

    svc.delete(actor_for(admin), row.id)
    assert repo.list_all() == []
    with pytest.raises(NotFoundError):
        svc.delete(actor_for(admin), str(uuid.uuid4()))
