from __future__ import annotations

import uuid
from datetime import date

import pytest

from conftest import InMemorySpecialDays, actor_for
from school_attendance.core.enums import SpecialDayType
from school_attendance.core.exceptions import AuthorizationError, NotFoundError, ValidationError
from school_attendance.special_days.service import SpecialDayService, build_values


def test_build_values():
    values = build_values(
        date="2026-03-20", day_type="early_dismissal", name="Rapat guru", end_time="11:00", note="Pulang cepat"
    )
    assert values.date == date(2026, 3, 20)
    assert values.type == SpecialDayType.EARLY_DISMISSAL
    assert (values.start_time, values.end_time) == (None, "11:00")


@pytest.mark.parametrize(
    "kwargs",
    [
        {"date": "2026-02-30", "day_type": "holiday"},
        {"date": "2026-03-01", "day_type": "libur"},
        {"date": "2026-03-01", "day_type": "holiday", "name": ""},
        {"date": "2026-03-01", "day_type": "holiday", "name": "x" * 121},
        {"date": "2026-03-01", "day_type": "custom", "note": "x" * 501},
        {"date": "2026-03-01", "day_type": "custom", "start_time": "9:00"},
        {"date": "2026-03-01", "day_type": "custom", "start_time": "12:00", "end_time": "08:00"},
    ],
)
def test_build_values_rejects(kwargs):
    with pytest.raises(ValidationError):
        build_values(**kwargs)


def test_upsert_inserts_without_id_and_updates_with_id(admin):
    repo = InMemorySpecialDays()
    svc = SpecialDayService(repo)

    created = svc.upsert(actor_for(admin), date="2026-08-17", day_type="holiday", name="HUT RI")
    updated = svc.upsert(
        actor_for(admin), special_day_id=created.id, date="2026-08-17", day_type="custom", start_time="08:00"
    )

    assert updated.id == created.id
    assert updated.type == SpecialDayType.CUSTOM
    assert updated.name is None
    assert len(repo.list_all()) == 1


def test_unknown_id_inserts_new_day(admin):
    repo = InMemorySpecialDays()
    saved = SpecialDayService(repo).upsert(
        actor_for(admin), special_day_id=str(uuid.uuid4()), date="2026-12-25", day_type="holiday"
    )
    assert [d.id for d in repo.list_all()] == [saved.id]


def test_list_is_ordered_by_date(admin):
    svc = SpecialDayService(InMemorySpecialDays())
    later = svc.upsert(actor_for(admin), date="2026-12-25", day_type="holiday")
    earlier = svc.upsert(actor_for(admin), date="2026-05-01", day_type="holiday")
    assert [d.id for d in svc.list_days()] == [earlier.id, later.id]


def test_student_cannot_edit(student):
    with pytest.raises(AuthorizationError):
        SpecialDayService(InMemorySpecialDays()).upsert(actor_for(student), date="2026-05-01", day_type="holiday")


def test_delete(admin):
    svc = SpecialDayService(InMemorySpecialDays())
    day = svc.upsert(actor_for(admin), date="2026-05-01", day_type="holiday")
    svc.delete(actor_for(admin), day.id)
    with pytest.raises(NotFoundError):
        svc.delete(actor_for(admin), day.id)
