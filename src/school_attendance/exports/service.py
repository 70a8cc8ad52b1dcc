from __future__ import annotations

import io

import pandas as pd

from ..absences.repository import AbsenceRepository
from ..auth.model import AuthContext
from ..common.datetime_utils import isoformat_or_none
from ..core.constants import EXPORT_BATCH_SIZE
from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from ..core.roles import get_managed_roles, has_minimum_role
from ..leaves.repository import LeaveRepository
from ..profiles.repository import ProfileRepository

PROFILE_COLUMNS = [
    "ID",
    "NIS",
    "Full Name",
    "Email",
    "Class",
    "Absence #",
    "Role",
    "Created At",
    "Updated At",
]

LEAVE_COLUMNS = [
    "ID",
    "Full Name",
    "Email",
    "NIS",
    "Class",
    "Tanggal",
    "Kategori",
    "Deskripsi",
    "Status",
    "Approved At",
    "Rejected At",
    "Rejection Reason",
    "Created At",
    "Updated At",
]

ABSENCE_COLUMNS = [
    "ID",
    "Full Name",
    "Email",
    "NIS",
    "Class",
    "Date",
    "Status",
    "Reason",
    "Created At",
]


def _profile_cells(profile) -> dict:
    return {
        "Full Name": profile.full_name if profile else None,
        "Email": profile.email if profile else None,
        "NIS": profile.nis if profile else None,
        "Class": profile.class_name if profile else None,
    }


def to_workbook(df: pd.DataFrame, sheet_name: str) -> bytes:
    """One-sheet .xlsx with an auto filter over the header row."""
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
        sheet = writer.sheets[sheet_name]
        sheet.auto_filter.ref = sheet.dimensions
    return output.getvalue()


class ExportService:
    """Excel exports of profiles, leave requests and attendance records."""

    def __init__(self, profiles: ProfileRepository, leaves: LeaveRepository, absences: AbsenceRepository):
        self._profiles = profiles
        self._leaves = leaves
        self._absences = absences

    @staticmethod
    def _require_admin(actor: AuthContext) -> None:
        if not has_minimum_role(actor.role, Role.ADMIN):
            raise AuthorizationError("Admin access required")

    def _profile_rows(self, roles):
        offset = 0
        while True:
            batch = list(self._profiles.search(roles=roles, limit=EXPORT_BATCH_SIZE, offset=offset))
            for p in batch:
                yield {
                    "ID": p.id,
                    "NIS": p.nis,
                    "Full Name": p.full_name,
                    "Email": p.email,
                    "Class": p.class_name,
                    "Absence #": p.absence_number,
                    "Role": p.role.value,
                    "Created At": isoformat_or_none(p.created_at),
                    "Updated At": isoformat_or_none(p.updated_at),
                }
            if len(batch) < EXPORT_BATCH_SIZE:
                return
            offset += EXPORT_BATCH_SIZE

    def profiles_frame(self, actor: AuthContext) -> pd.DataFrame:
        # Only profiles the actor manages; managing nobody is not "everyone".
        managed = get_managed_roles(actor.role)
        if not managed:
            raise AuthorizationError("You don't have permission to export profiles")
        return pd.DataFrame(list(self._profile_rows(managed)), columns=PROFILE_COLUMNS)

    def leaves_frame(self, actor: AuthContext) -> pd.DataFrame:
        self._require_admin(actor)
        rows = []
        for r in self._leaves.list_all():
            rows.append(
                {
                    "ID": r.id,
                    **_profile_cells(r.profile),
                    "Tanggal": isoformat_or_none(r.requested_at),
                    "Kategori": r.category.value,
                    "Deskripsi": r.description,
                    "Status": r.approval_status.value,
                    "Approved At": isoformat_or_none(r.approved_at),
                    "Rejected At": isoformat_or_none(r.rejected_at),
                    "Rejection Reason": r.rejection_reason,
                    "Created At": isoformat_or_none(r.created_at),
                    "Updated At": isoformat_or_none(r.updated_at),
                }
            )
        return pd.DataFrame(rows, columns=LEAVE_COLUMNS)

    def absences_frame(self, actor: AuthContext) -> pd.DataFrame:
        self._require_admin(actor)
        rows = []
        for r in self._absences.list_all():
            rows.append(
                {
                    "ID": r.id,
                    **_profile_cells(r.profile),
                    "Date": isoformat_or_none(r.date),
                    "Status": r.status.value,
                    "Reason": r.reason,
                    "Created At": isoformat_or_none(r.created_at),
                }
            )
        return pd.DataFrame(rows, columns=ABSENCE_COLUMNS)

    def profiles_workbook(self, actor: AuthContext) -> bytes:
        return to_workbook(self.profiles_frame(actor), "Profiles")

    def leaves_workbook(self, actor: AuthContext) -> bytes:
        return to_workbook(self.leaves_frame(actor), "Perizinan")

    def absences_workbook(self, actor: AuthContext) -> bytes:
        return to_workbook(self.absences_frame(actor), "Absensi")
