from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role stored verbatim in user_profiles.role."""

    USER = "user"
    ADMIN = "admin"
    SUPERADMIN = "superadmin"


class ApprovalStatus(str, Enum):
    """Approval workflow state of a leave request (perizinan)."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class LeaveCategory(str, Enum):
    """Leave category: sick (sakit) or away (pergi)."""

    SICK = "sakit"
    AWAY = "pergi"


class AbsenceStatus(str, Enum):
    """Attendance record kind: present for the day, arrival or departure."""

    PRESENT = "Hadir"
    ARRIVED = "Datang"
    LEFT = "Pulang"


class SpecialDayType(str, Enum):
    HOLIDAY = "holiday"
    EARLY_DISMISSAL = "early_dismissal"
    CUSTOM = "custom"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"
