from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import SpecialDay, SpecialDayValues


class SpecialDayRepository(Protocol):
    def list_all(self) -> Sequence[SpecialDay]:
        """Every special day, by date."""

        raise NotImplementedError

    def update(self, special_day_id: str, values: SpecialDayValues) -> Optional[SpecialDay]:
        """Update one row; None when ``special_day_id`` does not exist."""

        raise NotImplementedError

    def insert(self, values: SpecialDayValues) -> SpecialDay:
        raise NotImplementedError

    def delete(self, special_day_id: str) -> bool:
        raise NotImplementedError
