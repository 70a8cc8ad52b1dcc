from __future__ import annotations

import pytest

from conftest import InMemoryProfiles
from school_attendance.admin.setup import create_superadmin, main
from school_attendance.core.enums import Role
from school_attendance.core.exceptions import NotFoundError


def test_promotes_existing_profile(profiles, student):
    updated = create_superadmin(profiles, student.email)
    assert updated.role == Role.SUPERADMIN


def test_unknown_email_raises():
    with pytest.raises(NotFoundError, match="logged in at least once"):
        create_superadmin(InMemoryProfiles(), "ghost@school.id")


def test_cli_requires_email(capsys):
    assert main([], profiles=InMemoryProfiles()) == 1
    assert "Usage" in capsys.readouterr().err


def test_cli_rejects_invalid_email():
    assert main(["nope"], profiles=InMemoryProfiles()) == 1


def test_cli_success(profiles, admin, capsys):
    assert main([admin.email], profiles=profiles) == 0
    assert profiles.get_by_email(admin.email).role == Role.SUPERADMIN
    assert "superadmin" in capsys.readouterr().out


def test_cli_missing_user_returns_error():
    assert main(["ghost@school.id"], profiles=InMemoryProfiles()) == 1
