from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..auth.model import AuthContext
from ..common.datetime_utils import parse_iso_date
from ..common.validators import optional_text, require_choice, require_hhmm, require_iso_date, require_uuid
from ..core.constants import SPECIAL_DAY_NAME_MAX, SPECIAL_DAY_NOTE_MAX
from ..core.enums import Role, SpecialDayType
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..core.roles import has_minimum_role
from .model import SpecialDay, SpecialDayValues
from .repository import SpecialDayRepository

logger = logging.getLogger(__name__)


def build_values(
    *,
    date,
    day_type,
    name=None,
    start_time=None,
    end_time=None,
    note=None,
) -> SpecialDayValues:
    start = require_hhmm(start_time, "startTime") if start_time is not None else None
    end = require_hhmm(end_time, "endTime") if end_time is not None else None
    if start and end and end <= start:
        raise ValidationError("endTime must be later than startTime")

    return SpecialDayValues(
        date=parse_iso_date(require_iso_date(date, "date")),
        type=require_choice(SpecialDayType, day_type, "type"),
        name=optional_text(name, "name", min_length=1, max_length=SPECIAL_DAY_NAME_MAX),
        start_time=start,
        end_time=end,
        note=optional_text(note, "note", max_length=SPECIAL_DAY_NOTE_MAX),
    )


class SpecialDayService:
    def __init__(self, special_days: SpecialDayRepository):
        self._special_days = special_days

    @staticmethod
    def _require_admin(actor: AuthContext) -> None:
        if not has_minimum_role(actor.role, Role.ADMIN):
            raise AuthorizationError("Only admins can change special days")

    def list_days(self) -> Sequence[SpecialDay]:
        return self._special_days.list_all()

    def upsert(self, actor: AuthContext, *, special_day_id: Optional[str] = None, **fields) -> SpecialDay:
        """Update ``special_day_id`` when it exists, otherwise insert a new day."""
        self._require_admin(actor)
        values = build_values(**fields)

        saved = None
        if special_day_id:
            saved = self._special_days.update(require_uuid(special_day_id), values)
        if saved is None:
            saved = self._special_days.insert(values)

        logger.info("special day %s %s (%s) saved by %s", saved.id, saved.date, saved.type.value, actor.email)
        return saved

    def delete(self, actor: AuthContext, special_day_id: str) -> None:
        self._require_admin(actor)
        special_day_id = require_uuid(special_day_id)
        if not self._special_days.delete(special_day_id):
            raise NotFoundError("Special day not found")
        logger.info("special day %s deleted by %s", special_day_id, actor.email)
