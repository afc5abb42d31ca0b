from flask import Blueprint, current_app, request, jsonify, session
from flask_login import LoginManager, UserMixin, login_user, logout_user, login_required, current_user

from .context import get_store

auth_bp = Blueprint("auth_bp", __name__)
login_manager = LoginManager()


class SessionUser(UserMixin):
    """Flask-Login wrapper around a stored ``models.User``."""

    def __init__(self, user):
        self.user = user

    def get_id(self):
        return str(self.user.user_id)

    @property
    def administrator(self) -> bool:
        return bool(self.user.administrator)


def user_json(u):
    return dict(
        user_id=u.user_id, username=u.username, first_name=u.first_name,
        last_name=u.last_name, administrator=bool(u.administrator),
    )


@login_manager.user_loader
def load_user(user_id):  # called by Flask-Login using session cookie
    try:
        user = get_store().users.find_user(int(user_id))
    except ValueError:
        return None
    return SessionUser(user) if user else None


@login_manager.unauthorized_handler
def _unauthorized():
    return jsonify(error="Login required.", code="Unauthorized"), 401


@auth_bp.route("/login", methods=["POST"])
def login():
    max_attempts = current_app.config["MAX_LOGIN_ATTEMPTS"]
    attempts = session.get("login_attempts", 0)
    if attempts >= max_attempts:
        return jsonify(error="Too many login attempts.", code="Forbidden"), 403

    data = request.get_json(force=True, silent=True) or {}
    username = (data.get("username") or "").strip()
    password = data.get("password") or ""
    if not username or not password:
        return jsonify(error="Username and password required.", code="Bad Request"), 400

    user = get_store().users.authenticate_user(username, password)
    if user is None:
        attempts += 1
        session["login_attempts"] = attempts
        current_app.logger.warning("failed login username=%s attempt=%s", username, attempts)
        return jsonify(
            error=f"Invalid username or password (Attempt {attempts} of {max_attempts})",
            code="Unauthorized", attempts=attempts,
        ), 401

    session.pop("login_attempts", None)
    login_user(SessionUser(user))
    return jsonify(user_json(user)), 200


@auth_bp.route("/me", methods=["GET"])
@login_required
def me():
    return jsonify(user_json(current_user.user)), 200


@auth_bp.route("/logout", methods=["POST"])
@login_required
def logout():
    logout_user()
    return jsonify(ok=True), 200
