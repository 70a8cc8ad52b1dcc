from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .absences.mysql_absence_repository import MySQLAbsenceRepository
from .absences.repository import AbsenceRepository
from .absences.service import AbsenceService
from .admin.service import AdminService
from .attendance_hours.mysql_hours_repository import MySQLDefaultHoursRepository
from .attendance_hours.repository import DefaultHoursRepository
from .attendance_hours.service import DefaultHoursService
from .auth.guards import Guards
from .auth.identity import FlaskSessionIdentityProvider, IdentityProvider
from .auth.tokens import IdentityTokenVerifier
from .database.connection import DBConfig, DatabaseConnection
from .exports.service import ExportService
from .geofence.mysql_geofence_repository import MySQLGeofenceRepository
from .geofence.repository import GeofenceRepository
from .geofence.service import GeofenceService
from .leaves.mysql_leave_repository import MySQLLeaveRepository
from .leaves.repository import LeaveRepository
from .leaves.service import LeaveService
from .profiles.mysql_profile_repository import MySQLProfileRepository
from .profiles.repository import ProfileRepository
from .special_days.mysql_special_day_repository import MySQLSpecialDayRepository
from .special_days.repository import SpecialDayRepository
from .special_days.service import SpecialDayService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    profiles_repo: ProfileRepository
    leaves_repo: LeaveRepository
    absences_repo: AbsenceRepository
    geofence_repo: GeofenceRepository
    hours_repo: DefaultHoursRepository
    special_days_repo: SpecialDayRepository

    identity: IdentityProvider
    token_verifier: IdentityTokenVerifier
    guards: Guards

    admin_service: AdminService
    leave_service: LeaveService
    absence_service: AbsenceService
    geofence_service: GeofenceService
    hours_service: DefaultHoursService
    special_day_service: SpecialDayService
    export_service: ExportService


def wire_container(
    *,
    profiles_repo: ProfileRepository,
    leaves_repo: LeaveRepository,
    absences_repo: AbsenceRepository,
    geofence_repo: GeofenceRepository,
    hours_repo: DefaultHoursRepository,
    special_days_repo: SpecialDayRepository,
    token_verifier: IdentityTokenVerifier,
    identity: Optional[IdentityProvider] = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    identity = identity or FlaskSessionIdentityProvider()
    return Container(
        conn=conn,
        profiles_repo=profiles_repo,
        leaves_repo=leaves_repo,
        absences_repo=absences_repo,
        geofence_repo=geofence_repo,
        hours_repo=hours_repo,
        special_days_repo=special_days_repo,
        identity=identity,
        token_verifier=token_verifier,
        guards=Guards(identity, profiles_repo),
        admin_service=AdminService(profiles_repo),
        leave_service=LeaveService(leaves_repo),
        absence_service=AbsenceService(absences_repo),
        geofence_service=GeofenceService(geofence_repo),
        hours_service=DefaultHoursService(hours_repo),
        special_day_service=SpecialDayService(special_days_repo),
        export_service=ExportService(profiles_repo, leaves_repo, absences_repo),
    )


def build_container(*, db_config: dict, token_verifier: IdentityTokenVerifier) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return wire_container(
        profiles_repo=MySQLProfileRepository(conn),
        leaves_repo=MySQLLeaveRepository(conn),
        absences_repo=MySQLAbsenceRepository(conn),
        geofence_repo=MySQLGeofenceRepository(conn),
        hours_repo=MySQLDefaultHoursRepository(conn),
        special_days_repo=MySQLSpecialDayRepository(conn),
        token_verifier=token_verifier,
        conn=conn,
    )
