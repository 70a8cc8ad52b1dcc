from __future__ import annotations

import uuid
from dataclasses import replace

import pytest

from conftest import actor_for
from school_attendance.core.exceptions import AuthorizationError, ValidationError
from school_attendance.geofence.model import GeofenceSettings
from school_attendance.geofence.service import GeofenceService, distance_meters, is_within


class FakeGeofenceRepo:
    def __init__(self, *rows: GeofenceSettings):
        self.rows = {r.id: r for r in rows}
        self.inserted = 0

    def get_first(self):
        return next(iter(self.rows.values()), None)

    def update(self, settings_id, *, center_latitude, center_longitude, radius_meters):
        if settings_id not in self.rows:
            return None
        self.rows[settings_id] = replace(
            self.rows[settings_id],
            center_latitude=center_latitude,
            center_longitude=center_longitude,
            radius_meters=radius_meters,
        )
        return self.rows[settings_id]

    def insert(self, *, center_latitude, center_longitude, radius_meters):
        self.inserted += 1
        row = GeofenceSettings(str(uuid.uuid4()), center_latitude, center_longitude, radius_meters)
        self.rows[row.id] = row
        return row


SCHOOL = GeofenceSettings(id=str(uuid.uuid4()), center_latitude=-6.2, center_longitude=106.8, radius_meters=100)


def test_get_returns_none_when_unset():
    assert GeofenceService(FakeGeofenceRepo()).get() is None


def test_upsert_inserts_first_row(admin):
    repo = FakeGeofenceRepo()
    saved = GeofenceService(repo).upsert(actor_for(admin), center_latitude=-6.2, center_longitude=106.8, radius_meters=150)
    assert repo.inserted == 1
    assert saved.radius_meters == 150


def test_upsert_updates_existing_row_when_id_unknown(admin):
    repo = FakeGeofenceRepo(SCHOOL)
    saved = GeofenceService(repo).upsert(
        actor_for(admin), center_latitude=-6.3, center_longitude=106.9, radius_meters=200, settings_id=str(uuid.uuid4())
    )
    assert saved.id == SCHOOL.id
    assert repo.inserted == 0
    assert len(repo.rows) == 1


def test_upsert_by_id(superadmin):
    repo = FakeGeofenceRepo(SCHOOL)
    saved = GeofenceService(repo).upsert(
        actor_for(superadmin), center_latitude=0, center_longitude=0, radius_meters=10, settings_id=SCHOOL.id
    )
    assert (saved.center_latitude, saved.center_longitude, saved.radius_meters) == (0.0, 0.0, 10)


def test_student_cannot_move_geofence(student):
    with pytest.raises(AuthorizationError):
        GeofenceService(FakeGeofenceRepo()).upsert(
            actor_for(student), center_latitude=0, center_longitude=0, radius_meters=100
        )


@pytest.mark.parametrize(
    "lat,lng,radius",
    [(91, 0, 100), (-90.5, 0, 100), (0, 181, 100), (0, 0, 9), (0, 0, 10001), (0, 0, 50.5), ("x", 0, 100)],
)
def test_upsert_validation(admin, lat, lng, radius):
    with pytest.raises(ValidationError):
        GeofenceService(FakeGeofenceRepo()).upsert(
            actor_for(admin), center_latitude=lat, center_longitude=lng, radius_meters=radius
        )


def test_distance_of_one_degree_latitude():
    assert distance_meters(0, 0, 1, 0) == pytest.approx(111_195, rel=1e-3)
    assert distance_meters(-6.2, 106.8, -6.2, 106.8) == 0


def test_is_within_radius():
    # ~0.0005 deg latitude is ~56 m
    assert is_within(SCHOOL, -6.2005, 106.8) is True
    assert is_within(SCHOOL, -6.202, 106.8) is False


def test_contains_without_settings_allows_everything():
    assert GeofenceService(FakeGeofenceRepo()).contains(10, 10) is True
    assert GeofenceService(FakeGeofenceRepo(SCHOOL)).contains(10, 10) is False
