from __future__ import annotations

from functools import wraps

from flask import g, jsonify

from ..core.enums import Role
from ..core.roles import has_minimum_role
from ..profiles.repository import ProfileRepository
from .identity import IdentityProvider
from .model import AuthContext


class Guards:
    """View decorators: ``protected`` needs a session, ``admin_only`` also needs role >= admin.

    The authenticated actor is available as ``g.auth`` inside the view.
    """

    def __init__(self, identity: IdentityProvider, profiles: ProfileRepository):
        self._identity = identity
        self._profiles = profiles

    def load_context(self):
        auth_session = self._identity.get_session()
        if auth_session is None:
            return None
        return AuthContext(session=auth_session, profile=self._profiles.get_by_user_id(auth_session.user_id))

    def protected(self, view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            ctx = self.load_context()
            if ctx is None:
                return jsonify({"success": False, "message": "Please sign in to continue"}), 401
            g.auth = ctx
            return view(*args, **kwargs)

        return wrapper

    def admin_only(self, view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            ctx = self.load_context()
            if ctx is None:
                return jsonify({"success": False, "message": "Please sign in to continue"}), 401
            if not has_minimum_role(ctx.role, Role.ADMIN):
                return jsonify({"success": False, "message": "Admin access required"}), 403
            g.auth = ctx
            return view(*args, **kwargs)

        return wrapper
