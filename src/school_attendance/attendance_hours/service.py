from __future__ import annotations

import logging
from typing import Sequence

from ..auth.model import AuthContext
from ..common.validators import require_hhmm, require_int_range, require_uuid
from ..core.constants import MAX_DAY_OF_WEEK, MIN_DAY_OF_WEEK
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, NotFoundError, ValidationError
from ..core.roles import has_minimum_role
from .model import DefaultHours
from .repository import DefaultHoursRepository

logger = logging.getLogger(__name__)


class DefaultHoursService:
    """Use cases: weekly default school hours, at most one row per weekday."""

    def __init__(self, hours: DefaultHoursRepository):
        self._hours = hours

    @staticmethod
    def _require_admin(actor: AuthContext) -> None:
        if not has_minimum_role(actor.role, Role.ADMIN):
            raise AuthorizationError("Only admins can change school hours")

    def list_hours(self) -> Sequence[DefaultHours]:
        return self._hours.list_all()

    def upsert_day(self, actor: AuthContext, *, day_of_week, start_time, end_time) -> DefaultHours:
        self._require_admin(actor)
        day = require_int_range(day_of_week, "dayOfWeek", min_value=MIN_DAY_OF_WEEK, max_value=MAX_DAY_OF_WEEK)
        start = require_hhmm(start_time, "startTime")
        end = require_hhmm(end_time, "endTime")
        if end <= start:
            raise ValidationError("endTime must be later than startTime")

        existing = self._hours.get_by_day(day)
        saved = None
        if existing:
            saved = self._hours.update(existing.id, start_time=start, end_time=end)
        if saved is None:
            saved = self._hours.insert(day_of_week=day, start_time=start, end_time=end)

        logger.info("default hours day=%d set to %s-%s by %s", day, start, end, actor.email)
        return saved

    def delete(self, actor: AuthContext, hours_id: str) -> None:
        self._require_admin(actor)
        hours_id = require_uuid(hours_id)
        if not self._hours.delete(hours_id):
            raise NotFoundError("School hours not found")
        logger.info("default hours %s deleted by %s", hours_id, actor.email)
