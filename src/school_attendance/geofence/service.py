from __future__ import annotations

import logging
import math
from typing import Optional

from ..auth.model import AuthContext
from ..common.validators import require_float_range, require_int_range
from ..core.constants import EARTH_RADIUS_METERS, MAX_RADIUS_METERS, MIN_RADIUS_METERS
from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from ..core.roles import has_minimum_role
from .model import GeofenceSettings
from .repository import GeofenceRepository

logger = logging.getLogger(__name__)


def distance_meters(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance (haversine)."""
    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)
    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    return 2 * EARTH_RADIUS_METERS * math.asin(min(1.0, math.sqrt(a)))


def is_within(settings: GeofenceSettings, latitude: float, longitude: float) -> bool:
    d = distance_meters(settings.center_latitude, settings.center_longitude, latitude, longitude)
    return d <= settings.radius_meters


class GeofenceService:
    """Use case: read and maintain the attendance geofence (single row)."""

    def __init__(self, settings: GeofenceRepository):
        self._settings = settings

    def get(self) -> Optional[GeofenceSettings]:
        return self._settings.get_first()

    def upsert(
        self,
        actor: AuthContext,
        *,
        center_latitude,
        center_longitude,
        radius_meters,
        settings_id: Optional[str] = None,
    ) -> GeofenceSettings:
        if not has_minimum_role(actor.role, Role.ADMIN):
            raise AuthorizationError("Only admins can change the attendance location")

        values = dict(
            center_latitude=require_float_range(center_latitude, "centerLatitude", min_value=-90, max_value=90),
            center_longitude=require_float_range(center_longitude, "centerLongitude", min_value=-180, max_value=180),
            radius_meters=require_int_range(
                radius_meters, "radiusMeters", min_value=MIN_RADIUS_METERS, max_value=MAX_RADIUS_METERS
            ),
        )

        saved = None
        if settings_id:
            saved = self._settings.update(settings_id, **values)
        if saved is None:
            existing = self._settings.get_first()
            if existing:
                saved = self._settings.update(existing.id, **values)
        if saved is None:
            saved = self._settings.insert(**values)

        logger.info(
            "geofence %s set to (%.6f, %.6f) r=%dm by %s",
            saved.id, saved.center_latitude, saved.center_longitude, saved.radius_meters, actor.email,
        )
        return saved

    def contains(self, latitude: float, longitude: float) -> bool:
        """True when no geofence is configured or the point lies inside it."""
        current = self.get()
        if current is None:
            return True
        return is_within(current, latitude, longitude)
