from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..container import Container


def register(app: Flask, container: Container) -> None:
    guards = container.guards
    special_days = container.special_day_service

    @app.route("/api/attendance/special-days", methods=["GET"], endpoint="special_days_list")
    @guards.protected
    def list_special_days():
        return jsonify({"success": True, "data": [d.to_dict() for d in special_days.list_days()]})

    @app.route("/api/attendance/special-days", methods=["PUT"], endpoint="special_days_upsert")
    @guards.admin_only
    def upsert_special_day():
        body = request.get_json(silent=True) or {}
        saved = special_days.upsert(
            g.auth,
            special_day_id=body.get("id"),
            date=body.get("date"),
            day_type=body.get("type"),
            name=body.get("name"),
            start_time=body.get("start_time"),
            end_time=body.get("end_time"),
            note=body.get("note"),
        )
        return jsonify({"success": True, "data": saved.to_dict()})

    @app.route("/api/attendance/special-days/<special_day_id>", methods=["DELETE"], endpoint="special_days_delete")
    @guards.admin_only
    def delete_special_day(special_day_id: str):
        special_days.delete(g.auth, special_day_id)
        return jsonify({"success": True})
