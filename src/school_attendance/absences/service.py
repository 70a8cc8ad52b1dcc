from __future__ import annotations

from typing import Optional, Sequence

from ..common.datetime_utils import parse_iso_date
from ..common.validators import require_choice, require_int_range, require_iso_date, require_uuid
from ..core.constants import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from ..core.enums import AbsenceStatus, SortOrder
from .model import Absence, AbsenceFilters
from .repository import AbsenceRepository


class AbsenceService:
    """Read side of attendance records."""

    def __init__(self, absences: AbsenceRepository):
        self._absences = absences

    def list_absences(
        self,
        *,
        user_id: Optional[str] = None,
        status: Optional[str] = None,
        on_date: Optional[str] = None,
        sort: Optional[str] = None,
        limit=DEFAULT_PAGE_LIMIT,
        offset=0,
    ) -> Sequence[Absence]:
        filters = AbsenceFilters(
            user_id=require_uuid(user_id, "userId") if user_id else None,
            status=require_choice(AbsenceStatus, status, "status") if status else None,
            on_date=parse_iso_date(require_iso_date(on_date, "date")) if on_date else None,
            sort=require_choice(SortOrder, sort, "sort") if sort else SortOrder.ASC,
            limit=require_int_range(limit, "limit", min_value=1, max_value=MAX_PAGE_LIMIT),
            offset=require_int_range(offset, "offset", min_value=0),
        )
        return self._absences.find(filters)

    def list_all(self) -> Sequence[Absence]:
        return self._absences.list_all()

    def get_by_id(self, absence_id: str) -> Optional[Absence]:
        return self._absences.get_by_id(require_uuid(absence_id))
