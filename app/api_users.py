# app/api_users.py
from flask import Blueprint, request, jsonify

from models import User
from .auth import user_json
from .context import get_store, get_user_manager
from .security import admin_guard

users_api = Blueprint("users_api", __name__, url_prefix="/api/users")


@users_api.before_request
def _require_admin():
    admin_guard()


def _payload():
    data = request.get_json(force=True, silent=True) or {}
    return {
        "username": (data.get("username") or "").strip(),
        "password": data.get("password") or "",
        "first_name": (data.get("first_name") or "").strip(),
        "last_name": (data.get("last_name") or "").strip(),
        "administrator": bool(data.get("administrator", False)),
    }


@users_api.get("")
def users_list():
    users = get_user_manager().list_users()
    return jsonify(users=[user_json(u) for u in users])


@users_api.post("")
def user_create():
    user = User(**_payload())
    get_user_manager().create_user(user)
    return jsonify(user_json(user)), 201


@users_api.put("/<int:user_id>")
def user_update(user_id):
    existing = get_store().users.find_user(user_id)
    if not existing:
        return jsonify(error="User not found", code="E_USER_REF"), 404
    data = _payload()
    # blank password keeps the current one
    if not data["password"]:
        data["password"] = existing.password
    user = User(user_id=user_id, **data)
    get_user_manager().update_user(user)
    return jsonify(user_json(user))


@users_api.delete("/<int:user_id>")
def user_delete(user_id):
    existing = get_store().users.find_user(user_id)
    if not existing:
        return jsonify(error="User not found", code="E_USER_REF"), 404
    get_user_manager().delete_user(existing)
    return jsonify(ok=True, user_id=user_id)
