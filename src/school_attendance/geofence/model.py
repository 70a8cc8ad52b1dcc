from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import isoformat_or_none


@dataclass(frozen=True)
class GeofenceSettings:
    """Center point and radius that check-ins must fall within."""

    id: str
    center_latitude: float
    center_longitude: float
    radius_meters: int
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "center_latitude": self.center_latitude,
            "center_longitude": self.center_longitude,
            "radius_meters": self.radius_meters,
            "updated_at": isoformat_or_none(self.updated_at),
        }
