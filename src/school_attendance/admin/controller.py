from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..container import Container
from ..core.constants import DEFAULT_PAGE_LIMIT


def register(app: Flask, container: Container) -> None:
    guards = container.guards
    admin = container.admin_service

    @app.route("/api/admin/me", methods=["GET"], endpoint="admin_my_role")
    @guards.protected
    def my_role():
        return jsonify({"success": True, "data": admin.get_my_role(g.auth)})

    @app.route("/api/admin/users", methods=["GET"], endpoint="admin_list_users")
    @guards.admin_only
    def list_users():
        page = admin.list_managed_users(
            g.auth,
            limit=request.args.get("limit", DEFAULT_PAGE_LIMIT),
            offset=request.args.get("offset", 0),
            search=request.args.get("search"),
            role_filter=request.args.get("role") or None,
        )
        return jsonify({"success": True, **page.to_dict()})

    @app.route("/api/admin/users/<user_id>", methods=["GET"], endpoint="admin_get_user")
    @guards.admin_only
    def get_user(user_id: str):
        return jsonify({"success": True, "data": admin.get_user_by_id(g.auth, user_id).to_dict()})

    @app.route("/api/admin/users", methods=["POST"], endpoint="admin_create_user")
    @guards.admin_only
    def create_user():
        body = request.get_json(silent=True) or {}
        created = admin.create_user(
            g.auth,
            email=body.get("email", ""),
            full_name=body.get("full_name", ""),
            role=body.get("role") or "user",
            class_name=body.get("class_name"),
            nis=body.get("nis"),
        )
        return jsonify({"success": True, "data": created.to_dict()}), 201

    @app.route("/api/admin/users/<user_id>/role", methods=["PATCH"], endpoint="admin_update_role")
    @guards.admin_only
    def update_role(user_id: str):
        body = request.get_json(silent=True) or {}
        updated = admin.update_user_role(g.auth, user_id=user_id, new_role=body.get("role"))
        return jsonify({"success": True, "data": updated.to_dict()})

    @app.route("/api/admin/users/<user_id>", methods=["DELETE"], endpoint="admin_delete_user")
    @guards.admin_only
    def delete_user(user_id: str):
        deleted = admin.delete_user(g.auth, user_id=user_id)
        return jsonify({"success": True, "data": deleted.to_dict()})

    @app.route("/api/admin/stats", methods=["GET"], endpoint="admin_stats")
    @guards.admin_only
    def stats():
        return jsonify({"success": True, "data": admin.get_dashboard_stats(g.auth)})
