import logging

from flask import Flask, jsonify
from werkzeug.exceptions import HTTPException

from recipebox import config
from recipebox.api import error_response, register_blueprints


# ================================
# INIT
# ================================
def create_app() -> Flask:
    logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s %(levelname)s:%(message)s")

    app = Flask(__name__)
    app.json.ensure_ascii = False
    register_blueprints(app)

    # ================================
    # ROUTES
    # ================================
    @app.route("/", methods=["GET"])
    def home():
        return "recipebox running"

    @app.route("/healthz", methods=["GET"])
    def healthz():
        return jsonify({"ok": True})

    # ================================
    # ERRORS
    # ================================
    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return error_response(e.description or e.name, e.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logging.exception("[UNHANDLED] %s", e)
        return error_response("Internal server error", 500)

    return app
