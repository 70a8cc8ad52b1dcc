"""Verification of access tokens issued by the identity service.

The identity service signs its tokens (HS256) with a secret shared with this
backend. ``sub`` carries the account id and ``email`` the address; only
values read from a verified token may end up in the session.
"""

from __future__ import annotations

import logging
from typing import Optional

import jwt

from ..common.validators import require_email, require_uuid
from ..core.exceptions import AuthenticationError, ValidationError
from .model import AuthSession

logger = logging.getLogger(__name__)


class IdentityTokenVerifier:
    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        audience: Optional[str] = None,
        leeway_seconds: int = 0,
    ):
        if not secret:
            raise ValueError("IDENTITY_SECRET is not configured")
        self._secret = secret
        self._algorithm = algorithm
        self._audience = audience or None
        self._leeway = leeway_seconds

    def verify(self, token: Optional[str]) -> AuthSession:
        if not token or not isinstance(token, str):
            raise AuthenticationError("Missing identity token")

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                audience=self._audience,
                leeway=self._leeway,
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Identity token has expired")
        except jwt.InvalidTokenError as e:
            logger.warning("rejected identity token: %s", e)
            raise AuthenticationError("Invalid identity token")

        try:
            return AuthSession(
                user_id=require_uuid(payload.get("sub"), "sub"),
                email=require_email(payload.get("email")),
            )
        except ValidationError as e:
            raise AuthenticationError(f"Invalid identity token: {e}")
