from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    guards = container.guards
    hours = container.hours_service

    @app.route("/api/attendance/default-hours", methods=["GET"], endpoint="default_hours_list")
    @guards.protected
    def list_default_hours():
        return jsonify({"success": True, "data": [h.to_dict() for h in hours.list_hours()]})

    @app.route("/api/attendance/default-hours", methods=["PUT"], endpoint="default_hours_upsert")
    @guards.admin_only
    def upsert_default_hours():
        body = request.get_json(silent=True) or {}
        saved = hours.upsert_day(
            g.auth,
            day_of_week=body.get("day_of_week"),
            start_time=body.get("start_time"),
            end_time=body.get("end_time"),
        )
        return jsonify({"success": True, "data": saved.to_dict()})

    @app.route("/api/attendance/default-hours/<hours_id>", methods=["DELETE"], endpoint="default_hours_delete")
    @guards.admin_only
    def delete_default_hours(hours_id: str):
        hours.delete(g.auth, hours_id)
        return jsonify({"success": True})
