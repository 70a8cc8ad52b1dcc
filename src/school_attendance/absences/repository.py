from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Absence, AbsenceFilters


class AbsenceRepository(Protocol):
    def find(self, filters: AbsenceFilters) -> Sequence[Absence]:
        """Filtered page ordered by date (``filters.sort``), joined with profiles."""

        raise NotImplementedError

    def list_all(self) -> Sequence[Absence]:
        """Every record, newest date first."""

        raise NotImplementedError

    def get_by_id(self, absence_id: str) -> Optional[Absence]:
        raise NotImplementedError
