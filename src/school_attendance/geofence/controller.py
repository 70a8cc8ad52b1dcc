from __future__ import annotations

from flask import Flask, g, jsonify, request

from ..common.validators import require_float_range
from ..container import Container


def register(app: Flask, container: Container) -> None:
    guards = container.guards
    geofence = container.geofence_service

    @app.route("/api/geofence", methods=["GET"], endpoint="geofence_get")
    @guards.protected
    def get_geofence():
        current = geofence.get()
        return jsonify({"success": True, "data": current.to_dict() if current else None})

    @app.route("/api/geofence", methods=["PUT"], endpoint="geofence_upsert")
    @guards.admin_only
    def upsert_geofence():
        body = request.get_json(silent=True) or {}
        saved = geofence.upsert(
            g.auth,
            center_latitude=body.get("center_latitude"),
            center_longitude=body.get("center_longitude"),
            radius_meters=body.get("radius_meters"),
            settings_id=body.get("id"),
        )
        return jsonify({"success": True, "data": saved.to_dict()})

    @app.route("/api/geofence/check", methods=["GET"], endpoint="geofence_check")
    @guards.protected
    def check_location():
        lat = require_float_range(request.args.get("lat"), "lat", min_value=-90, max_value=90)
        lng = require_float_range(request.args.get("lng"), "lng", min_value=-180, max_value=180)
        return jsonify({"success": True, "data": {"inside": geofence.contains(lat, lng)}})
