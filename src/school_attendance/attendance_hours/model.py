from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import isoformat_or_none


@dataclass(frozen=True)
class DefaultHours:
    """Regular school hours for one weekday (1 = Monday ... 7 = Sunday)."""

    id: str
    day_of_week: int
    start_time: str
    end_time: str
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "day_of_week": self.day_of_week,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "updated_at": isoformat_or_none(self.updated_at),
        }
