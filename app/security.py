# app/security.py
from functools import wraps
from flask import abort
from flask_login import current_user


def admin_guard():
    if not current_user.is_authenticated:
        abort(401, description="Login required.")
    if not current_user.administrator:
        abort(403, description="Administrator rights required.")


def admin_required(fn):
    """Decorator for view functions."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        admin_guard()
        return fn(*args, **kwargs)
    return wrapper
