# app/__init__.py
import os
import logging
from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from database import (
    DB_FILENAME,
    InventoryStore,
    InventoryError,
    StorageError,
    InvalidUserAttributeError,
    LastAdministratorError,
    ItemReferenceError,
    UserReferenceError,
    InvalidFilterError,
)

from .auth import auth_bp, login_manager
from .api_inventory import bp as inventory_api_bp
from .api_users import users_api
from .api_admin import admin_api

# status code per error kind; first match wins
ERROR_STATUS = [
    (LastAdministratorError, 409),
    (InvalidUserAttributeError, 400),
    (UserReferenceError, 404),
    (ItemReferenceError, 400),
    (InvalidFilterError, 400),
    (StorageError, 500),
]


def _register_error_handlers(app: Flask):
    @app.errorhandler(InventoryError)
    def _inventory_error(e: InventoryError):
        status = next((code for kind, code in ERROR_STATUS if isinstance(e, kind)), 400)
        if status >= 500:
            app.logger.error("storage failure: %s", e)
        return jsonify(error=e.message, code=e.code), status

    @app.errorhandler(HTTPException)
    def _http_error(e: HTTPException):
        return jsonify(error=e.description, code=e.name), e.code


def create_app(config=None):
    app = Flask(__name__)

    BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    DB_PATH = os.environ.get("INVENTORY_DB", os.path.join(BASE_DIR, DB_FILENAME))

    app.config.update(
        SECRET_KEY=os.environ.get("SECRET_KEY", "dev"),
        INVENTORY_DB=DB_PATH,
        MAX_LOGIN_ATTEMPTS=3,
        SESSION_COOKIE_SAMESITE="Lax",
    )
    if config:
        app.config.update(config)

    # Helpful startup log
    app.logger.setLevel(logging.INFO)
    app.logger.info("Inventory DB: %s", app.config["INVENTORY_DB"])

    # Nothing works without the database, so failing here stops the process
    try:
        store = InventoryStore(app.config["INVENTORY_DB"])
    except StorageError as e:
        app.logger.critical("Unable to open inventory database: %s", e)
        raise
    app.extensions["inventory_store"] = store

    login_manager.init_app(app)

    app.register_blueprint(auth_bp, url_prefix="/api/auth")
    app.register_blueprint(inventory_api_bp)
    app.register_blueprint(users_api)
    app.register_blueprint(admin_api)

    _register_error_handlers(app)

    @app.get("/")
    def index():
        return jsonify(ok=True, service="inventory", database=str(store.path))

    return app
