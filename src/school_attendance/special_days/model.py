from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import isoformat_or_none
from ..core.enums import SpecialDayType


@dataclass(frozen=True)
class SpecialDay:
    """A date that overrides the default hours: holiday, early dismissal or custom."""

    id: str
    date: date
    type: SpecialDayType
    name: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    note: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "date": isoformat_or_none(self.date),
            "type": self.type.value,
            "name": self.name,
            "start_time": self.start_time,
            "end_time": self.end_time,
            "note": self.note,
            "created_at": isoformat_or_none(self.created_at),
            "updated_at": isoformat_or_none(self.updated_at),
        }


@dataclass(frozen=True)
class SpecialDayValues:
    """Validated column values for insert/update."""

    date: date
    type: SpecialDayType
    name: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    note: Optional[str] = None
