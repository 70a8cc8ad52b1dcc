from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..auth.model import AuthContext
from ..common.datetime_utils import now_utc, parse_iso_date
from ..common.validators import require_choice, require_int_range, require_iso_date, require_uuid
from ..core.constants import DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT
from ..core.enums import ApprovalStatus, LeaveCategory, Role
from ..core.exceptions import AuthorizationError
from ..core.roles import has_minimum_role
from .model import LeaveDecision, LeaveFilters, LeaveRequest
from .repository import LeaveRepository

logger = logging.getLogger(__name__)


def build_decision(
    approval_status: ApprovalStatus,
    *,
    decided_by: str,
    rejection_reason: Optional[str] = None,
    now: Optional[datetime] = None,
) -> LeaveDecision:
    """Column values for a status change.

    Rejection fields are only kept for ``rejected``, approval fields only for
    ``approved``; moving back to ``pending`` clears both.
    """
    now = now or now_utc()
    rejected = approval_status == ApprovalStatus.REJECTED
    approved = approval_status == ApprovalStatus.APPROVED
    return LeaveDecision(
        approval_status=approval_status,
        status=approved,
        updated_at=now,
        approved_by=decided_by if approved else None,
        approved_at=now if approved else None,
        rejection_reason=((rejection_reason or "").strip() or None) if rejected else None,
        rejected_at=now if rejected else None,
        rejected_by=decided_by if rejected else None,
    )


class LeaveService:
    """Use cases: browse leave requests and decide on them (admin)."""

    def __init__(self, leaves: LeaveRepository):
        self._leaves = leaves

    def list_requests(
        self,
        *,
        user_id: Optional[str] = None,
        category: Optional[str] = None,
        approval_status: Optional[str] = None,
        status: Optional[bool] = None,
        on_date: Optional[str] = None,
        limit: int = DEFAULT_PAGE_LIMIT,
        offset: int = 0,
    ) -> Sequence[LeaveRequest]:
        filters = LeaveFilters(
            user_id=require_uuid(user_id, "userId") if user_id else None,
            category=require_choice(LeaveCategory, category, "kategoriIzin") if category else None,
            approval_status=require_choice(ApprovalStatus, approval_status, "approvalStatus") if approval_status else None,
            status=status,
            on_date=parse_iso_date(require_iso_date(on_date, "tanggal")) if on_date else None,
            limit=require_int_range(limit, "limit", min_value=1, max_value=MAX_PAGE_LIMIT),
            offset=require_int_range(offset, "offset", min_value=0),
        )
        return self._leaves.find(filters)

    def list_all(self) -> Sequence[LeaveRequest]:
        return self._leaves.list_all()

    def get_by_id(self, request_id: str) -> Optional[LeaveRequest]:
        return self._leaves.get_by_id(require_uuid(request_id))

    def update_status(
        self,
        actor: AuthContext,
        *,
        request_id: str,
        approval_status: str,
        rejection_reason: Optional[str] = None,
    ) -> Optional[LeaveRequest]:
        if not has_minimum_role(actor.role, Role.ADMIN):
            raise AuthorizationError("Only admins can decide leave requests")

        request_id = require_uuid(request_id)
        new_status = require_choice(ApprovalStatus, approval_status, "approvalStatus")
        decision = build_decision(new_status, decided_by=actor.session.user_id, rejection_reason=rejection_reason)

        updated = self._leaves.apply_decision(request_id, decision)
        if updated is not None:
            logger.info("leave %s -> %s by %s", request_id, new_status.value, actor.email)
        return updated
