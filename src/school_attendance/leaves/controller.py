from __future__ import annotations

from typing import Optional

from flask import Flask, g, jsonify, request

from ..container import Container
from ..core.constants import DEFAULT_PAGE_LIMIT
from ..core.exceptions import NotFoundError, ValidationError


def _parse_bool(value: Optional[str]) -> Optional[bool]:
    if value is None or value == "":
        return None
    v = value.strip().lower()
    if v in {"1", "true", "yes"}:
        return True
    if v in {"0", "false", "no"}:
        return False
    raise ValidationError("status must be true or false")


def register(app: Flask, container: Container) -> None:
    guards = container.guards
    leaves = container.leave_service

    @app.route("/api/leaves", methods=["GET"], endpoint="leaves_list")
    @guards.protected
    def list_leaves():
        rows = leaves.list_requests(
            user_id=request.args.get("userId") or None,
            category=request.args.get("kategoriIzin") or None,
            approval_status=request.args.get("approvalStatus") or None,
            status=_parse_bool(request.args.get("status")),
            on_date=request.args.get("tanggal") or None,
            limit=request.args.get("limit", DEFAULT_PAGE_LIMIT),
            offset=request.args.get("offset", 0),
        )
        return jsonify({"success": True, "data": [r.to_dict() for r in rows]})

    @app.route("/api/leaves/all", methods=["GET"], endpoint="leaves_list_all")
    @guards.protected
    def list_all_leaves():
        return jsonify({"success": True, "data": [r.to_dict() for r in leaves.list_all()]})

    @app.route("/api/leaves/<request_id>", methods=["GET"], endpoint="leaves_get")
    @guards.protected
    def get_leave(request_id: str):
        row = leaves.get_by_id(request_id)
        return jsonify({"success": True, "data": row.to_dict() if row else None})

    @app.route("/api/leaves/<request_id>/status", methods=["PATCH"], endpoint="leaves_update_status")
    @guards.admin_only
    def update_leave_status(request_id: str):
        body = request.get_json(silent=True) or {}
        updated = leaves.update_status(
            g.auth,
            request_id=request_id,
            approval_status=body.get("approval_status", ""),
            rejection_reason=body.get("rejection_reason"),
        )
        if updated is None:
            raise NotFoundError("Leave request not found")
        return jsonify({"success": True, "data": updated.to_dict()})
