"""Promote an existing user to superadmin.

Usage: python scripts/setup_superadmin.py <email>
"""

from __future__ import annotations

from school_attendance.admin.setup import main

if __name__ == "__main__":
    raise SystemExit(main())
