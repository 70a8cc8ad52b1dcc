"""Route protection for page requests.

- Public paths pass through.
- Signed-in users opening /login go back to /.
- Anonymous users on private paths go to /login?redirect=<original path>.

API routes are left to the ``Guards`` decorators, which answer with JSON.
"""

from __future__ import annotations

from urllib.parse import urlencode

from flask import Flask, redirect, request

from .identity import IdentityProvider

PUBLIC_PATHS = frozenset({"/login", "/auth/callback", "/favicon.ico", "/api"})
PUBLIC_PREFIXES = ("/static/", "/assets/", "/api/")


def is_public_path(pathname: str) -> bool:
    if pathname in PUBLIC_PATHS:
        return True
    return pathname.startswith(PUBLIC_PREFIXES)


def _login_url(path: str) -> str:
    return f"/login?{urlencode({'redirect': path})}"


def register_gate(app: Flask, identity: IdentityProvider) -> None:
    @app.before_request
    def _session_gate():
        path = request.path
        signed_in = identity.get_session() is not None

        if path == "/login" and signed_in:
            return redirect("/")

        if not signed_in and not is_public_path(path):
            return redirect(_login_url(path))

        return None
