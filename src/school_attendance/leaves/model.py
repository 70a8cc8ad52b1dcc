from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import isoformat_or_none
from ..core.constants import DEFAULT_PAGE_LIMIT
from ..core.enums import ApprovalStatus, LeaveCategory
from ..profiles.model import UserProfile


@dataclass(frozen=True)
class LeaveRequest:
    """A student's leave (perizinan) request."""

    id: str
    user_id: str
    requested_at: datetime
    category: LeaveCategory
    approval_status: ApprovalStatus
    status: bool
    created_at: datetime
    updated_at: datetime
    description: Optional[str] = None
    photo_url: Optional[str] = None
    approved_by: Optional[str] = None
    approved_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None
    rejected_at: Optional[datetime] = None
    rejected_by: Optional[str] = None
    requested_date: Optional[date] = None
    profile: Optional[UserProfile] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "requested_at": isoformat_or_none(self.requested_at),
            "requested_date": isoformat_or_none(self.requested_date),
            "category": self.category.value,
            "description": self.description,
            "photo_url": self.photo_url,
            "approval_status": self.approval_status.value,
            "status": self.status,
            "created_at": isoformat_or_none(self.created_at),
            "updated_at": isoformat_or_none(self.updated_at),
            "approved_by": self.approved_by,
            "approved_at": isoformat_or_none(self.approved_at),
            "rejection_reason": self.rejection_reason,
            "rejected_at": isoformat_or_none(self.rejected_at),
            "rejected_by": self.rejected_by,
            "profile": self.profile.to_dict() if self.profile else None,
        }


@dataclass(frozen=True)
class LeaveFilters:
    user_id: Optional[str] = None
    category: Optional[LeaveCategory] = None
    approval_status: Optional[ApprovalStatus] = None
    status: Optional[bool] = None
    on_date: Optional[date] = None
    limit: int = DEFAULT_PAGE_LIMIT
    offset: int = 0


@dataclass(frozen=True)
class LeaveDecision:
    """Column values written when an approval status changes."""

    approval_status: ApprovalStatus
    status: bool
    updated_at: datetime
    approved_by: Optional[str] = None
    approved_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None
    rejected_at: Optional[datetime] = None
    rejected_by: Optional[str] = None
