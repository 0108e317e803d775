from __future__ import annotations

import logging
from typing import Any, Dict

from flask import Blueprint, jsonify, request

from recipebox.api import error_response
from recipebox.api.validator import validate_payload
from recipebox.services import supabase as db

pantry = Blueprint("pantry", __name__, url_prefix="/api/ingredients")

INGREDIENT_FIELDS = ("name", "quantity", "unit", "expiry_date", "category", "notes")


def _pick(body: Dict[str, Any]) -> Dict[str, Any]:
    return {k: body[k] for k in INGREDIENT_FIELDS if k in body}


@pantry.route("", methods=["GET"])
def list_ingredients() -> Any:
    user_id = request.args.get("userId")
    if not user_id:
        return error_response("User ID is required", 400)

    rows, error = db.list_ingredients(user_id)
    if error:
        return error_response(error, 500)
    return jsonify({"ingredients": rows or []})


@pantry.route("", methods=["POST"])
def add_ingredient() -> Any:
    body = request.get_json(silent=True)
    is_valid, err = validate_payload("ingredient_create", body)
    if not is_valid:
        logging.info("[PANTRY BAD INPUT] %s", err)
        return error_response("User ID and name are required", 400)

    record = _pick(body)
    record["user_id"] = body["user_id"]

    row, error = db.add_ingredient(record)
    if error:
        return error_response(error, 500)
    return jsonify({"ingredient": row}), 201


@pantry.route("/<ingredient_id>", methods=["PUT"])
def update_ingredient(ingredient_id: str) -> Any:
    body = request.get_json(silent=True)
    is_valid, err = validate_payload("ingredient_update", body)
    if not is_valid:
        logging.info("[PANTRY BAD INPUT] %s", err)
        return error_response("User ID is required", 400)

    row, error = db.update_ingredient(ingredient_id, body["user_id"], _pick(body))
    if error:
        return error_response(error, 500)
    if row is None:
        return error_response("Ingredient not found", 404)
    return jsonify({"ingredient": row})


@pantry.route("/<ingredient_id>", methods=["DELETE"])
def delete_ingredient(ingredient_id: str) -> Any:
    user_id = request.args.get("userId")
    if not user_id:
        return error_response("User ID is required", 400)

    _, error = db.delete_ingredient(ingredient_id, user_id)
    if error:
        return error_response(error, 500)
    return jsonify({"message": "Ingredient deleted successfully"})
