from __future__ import annotations

from typing import Optional, Protocol

from .model import GeofenceSettings


class GeofenceRepository(Protocol):
    def get_first(self) -> Optional[GeofenceSettings]:
        raise NotImplementedError

    def update(
        self,
        settings_id: str,
        *,
        center_latitude: float,
        center_longitude: float,
        radius_meters: int,
    ) -> Optional[GeofenceSettings]:
        """Update one row; None when ``settings_id`` does not exist."""

        raise NotImplementedError

    def insert(self, *, center_latitude: float, center_longitude: float, radius_meters: int) -> GeofenceSettings:
        raise NotImplementedError
