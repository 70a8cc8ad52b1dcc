from __future__ import annotations

from flask import Flask, g, jsonify, redirect, request

from ..container import Container
from .gate import register_gate


def _safe_redirect(target) -> str:
    target = str(target or "/")
    # Local paths only; "//host" would leave the site.
    if not target.startswith("/") or target.startswith("//"):
        return "/"
    return target


def register(app: Flask, container: Container) -> None:
    register_gate(app, container.identity)

    @app.route("/login", methods=["GET"], endpoint="login")
    def login():
        return jsonify(
            {
                "success": True,
                "message": "Sign in through the school identity service",
                "redirect": request.args.get("redirect") or "/",
            }
        )

    @app.route("/auth/callback", methods=["POST"], endpoint="auth_callback")
    def auth_callback():
        body = request.get_json(silent=True) or {}
        auth = container.token_verifier.verify(body.get("access_token"))
        container.identity.start_session(auth, remember=bool(body.get("remember")))
        return jsonify({"success": True, "redirect": _safe_redirect(body.get("redirect"))})

    @app.route("/logout", methods=["GET", "POST"], endpoint="logout")
    def logout():
        container.identity.end_session()
        return redirect("/login")

    @app.route("/", methods=["GET"], endpoint="home")
    @container.guards.protected
    def home():
        return jsonify({"success": True, "data": container.admin_service.get_my_role(g.auth)})
