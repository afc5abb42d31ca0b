# app/api_admin.py
from flask import Blueprint, Response, current_app, request, jsonify

from .context import get_store
from .security import admin_guard

admin_api = Blueprint("admin_api", __name__, url_prefix="/api/admin")


@admin_api.before_request
def _require_admin():
    admin_guard()


@admin_api.get("/export")
def export_database():
    statements = get_store().export_database()
    body = "".join(s + "\n" for s in statements)
    return Response(
        body,
        mimetype="text/plain",
        headers={"Content-Disposition": "attachment; filename=inventory_backup.sql"},
    )


@admin_api.post("/import")
def import_database():
    overwrite = request.args.get("overwrite", "0").lower() in ("1", "true", "yes")
    lines = request.get_data(as_text=True).splitlines()
    count = get_store().import_database(lines, overwrite=overwrite)
    current_app.logger.info("import via api statements=%s overwrite=%s", count, overwrite)
    return jsonify(ok=True, imported=count, overwrite=overwrite)
