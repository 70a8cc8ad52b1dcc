from __future__ import annotations

import io
from datetime import date

from flask import Flask, g, send_file

from ..container import Container

XLSX_MIMETYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _xlsx_response(content: bytes, prefix: str):
    filename = f"{prefix}_{date.today().strftime('%Y%m%d')}.xlsx"
    response = send_file(io.BytesIO(content), mimetype=XLSX_MIMETYPE, download_name=filename, as_attachment=True)
    response.headers["Cache-Control"] = "no-store"
    return response


def register(app: Flask, container: Container) -> None:
    guards = container.guards
    exports = container.export_service

    @app.route("/api/export/profiles", methods=["GET"], endpoint="export_profiles")
    @guards.admin_only
    def export_profiles():
        return _xlsx_response(exports.profiles_workbook(g.auth), "profiles")

    @app.route("/api/export/leaves", methods=["GET"], endpoint="export_leaves")
    @guards.admin_only
    def export_leaves():
        return _xlsx_response(exports.leaves_workbook(g.auth), "perizinan")

    @app.route("/api/export/absences", methods=["GET"], endpoint="export_absences")
    @guards.admin_only
    def export_absences():
        return _xlsx_response(exports.absences_workbook(g.auth), "absensi")
