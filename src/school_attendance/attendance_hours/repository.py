from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import DefaultHours


class DefaultHoursRepository(Protocol):
    def list_all(self) -> Sequence[DefaultHours]:
        """All configured days, Monday first."""

        raise NotImplementedError

    def get_by_day(self, day_of_week: int) -> Optional[DefaultHours]:
        raise NotImplementedError

    def update(self, hours_id: str, *, start_time: str, end_time: str) -> Optional[DefaultHours]:
        raise NotImplementedError

    def insert(self, *, day_of_week: int, start_time: str, end_time: str) -> DefaultHours:
        raise NotImplementedError

    def delete(self, hours_id: str) -> bool:
        raise NotImplementedError
