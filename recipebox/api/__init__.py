from __future__ import annotations

from typing import Any, Tuple

from flask import Flask, jsonify

JsonReply = Tuple[Any, int]


def error_response(message: str, status: int) -> JsonReply:
    return jsonify({"error": message}), status


def register_blueprints(app: Flask) -> None:
    from .favorites import favorites
    from .pantry import pantry
    from .recipes import recipes
    from .shopping import shopping

    app.register_blueprint(recipes)
    app.register_blueprint(pantry)
    app.register_blueprint(shopping)
    app.register_blueprint(favorites)
