from __future__ import annotations

from typing import Optional, Protocol

from flask import session

from .model import AuthSession


class IdentityProvider(Protocol):
    """Session collaborator backed by the external identity service."""

    def get_session(self) -> Optional[AuthSession]:
        raise NotImplementedError

    def start_session(self, auth: AuthSession, *, remember: bool = False) -> None:
        raise NotImplementedError

    def end_session(self) -> None:
        raise NotImplementedError


class FlaskSessionIdentityProvider(IdentityProvider):
    """Keeps the identity service's session in Flask's signed cookie."""

    def get_session(self) -> Optional[AuthSession]:
        user_id = session.get("user_id")
        if not user_id:
            return None
        return AuthSession(user_id=str(user_id), email=session.get("email"))

    def start_session(self, auth: AuthSession, *, remember: bool = False) -> None:
        session.clear()
        session.permanent = bool(remember)
        session["user_id"] = auth.user_id
        session["email"] = auth.email

    def end_session(self) -> None:
        session.clear()
