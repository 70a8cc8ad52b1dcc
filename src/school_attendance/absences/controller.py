from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.constants import DEFAULT_PAGE_LIMIT


def register(app: Flask, container: Container) -> None:
    guards = container.guards
    absences = container.absence_service

    @app.route("/api/absences", methods=["GET"], endpoint="absences_list")
    @guards.protected
    def list_absences():
        rows = absences.list_absences(
            user_id=request.args.get("userId") or None,
            status=request.args.get("status") or None,
            on_date=request.args.get("date") or None,
            sort=request.args.get("sort") or None,
            limit=request.args.get("limit", DEFAULT_PAGE_LIMIT),
            offset=request.args.get("offset", 0),
        )
        return jsonify({"success": True, "data": [r.to_dict() for r in rows]})

    @app.route("/api/absences/all", methods=["GET"], endpoint="absences_list_all")
    @guards.protected
    def list_all_absences():
        return jsonify({"success": True, "data": [r.to_dict() for r in absences.list_all()]})

    @app.route("/api/absences/<absence_id>", methods=["GET"], endpoint="absences_get")
    @guards.protected
    def get_absence(absence_id: str):
        row = absences.get_by_id(absence_id)
        return jsonify({"success": True, "data": row.to_dict() if row else None})
