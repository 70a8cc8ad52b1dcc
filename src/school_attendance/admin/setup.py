"""Promote the first superadmin.

Run after the database exists and the person has signed in at least once
(signing in is what creates their profile row).
"""

from __future__ import annotations

import importlib
import logging
import sys
from typing import Optional, Sequence

from dotenv import load_dotenv

from ..common.validators import require_email
from ..config import get_settings_module
from ..core.enums import Role
from ..core.exceptions import DomainError, NotFoundError
from ..database.connection import DBConfig, DatabaseConnection
from ..profiles.mysql_profile_repository import MySQLProfileRepository
from ..profiles.model import UserProfile
from ..profiles.repository import ProfileRepository

logger = logging.getLogger(__name__)


def create_superadmin(profiles: ProfileRepository, email: str) -> UserProfile:
    email = require_email(email)
    if not profiles.get_by_email(email):
        raise NotFoundError(
            f"User with email {email} not found. Please ensure the user has logged in at least once."
        )

    updated = profiles.update_role_by_email(email, Role.SUPERADMIN)
    if updated is None:
        raise NotFoundError(f"User with email {email} disappeared during the update")

    logger.info("superadmin ready: id=%s email=%s name=%s", updated.id, updated.email, updated.full_name)
    return updated


def main(argv: Optional[Sequence[str]] = None, *, profiles: Optional[ProfileRepository] = None) -> int:
    """CLI: ``setup-superadmin <email>``. Returns the process exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: setup-superadmin <email>", file=sys.stderr)
        print("Example: setup-superadmin admin@example.com", file=sys.stderr)
        return 1

    email = args[0].strip()
    if "@" not in email:
        print("Please provide a valid email address", file=sys.stderr)
        return 1

    if profiles is None:
        load_dotenv(override=False)
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
        settings = importlib.import_module(get_settings_module())
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(settings.DB_CONFIG))
        profiles = MySQLProfileRepository(conn)

    try:
        create_superadmin(profiles, email)
    except DomainError as e:
        logger.error("failed to create superadmin: %s", e)
        return 1

    print(f"OK: {email} is now superadmin. The admin API is available under /api/admin")
    return 0
