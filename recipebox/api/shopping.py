from __future__ import annotations

import logging
from typing import Any, Dict

from flask import Blueprint, jsonify, request

from recipebox.api import error_response
from recipebox.api.validator import validate_payload
from recipebox.services import supabase as db

shopping = Blueprint("shopping", __name__, url_prefix="/api/shopping-lists")

CREATE_FIELDS = ("recipe_id", "ingredient_name", "quantity", "unit", "priority", "notes")
UPDATE_FIELDS = ("ingredient_name", "quantity", "unit", "is_purchased", "priority", "notes")


def _pick(body: Dict[str, Any], fields) -> Dict[str, Any]:
    return {k: body[k] for k in fields if k in body}


@shopping.route("", methods=["GET"])
def list_items() -> Any:
    user_id = request.args.get("userId")
    if not user_id:
        return error_response("User ID is required", 400)

    rows, error = db.list_shopping_items(user_id)
    if error:
        return error_response(error, 500)
    return jsonify({"shoppingLists": rows or []})


@shopping.route("", methods=["POST"])
def add_item() -> Any:
    body = request.get_json(silent=True)
    is_valid, err = validate_payload("shopping_item_create", body)
    if not is_valid:
        logging.info("[SHOPPING BAD INPUT] %s", err)
        return error_response("User ID and ingredient name are required", 400)

    record = _pick(body, CREATE_FIELDS)
    record["user_id"] = body["user_id"]

    row, error = db.add_shopping_item(record)
    if error:
        return error_response(error, 500)
    return jsonify({"shoppingItem": row}), 201


@shopping.route("", methods=["PUT"])
def generate_from_recipe() -> Any:
    """
    Add every missing ingredient of a recipe to the shopping list.

    Body: {user_id, recipe_id, recipe_title, missing_ingredients: [{name, quantity, unit}]}
    """
    body = request.get_json(silent=True)
    is_valid, err = validate_payload("shopping_generate", body)
    if not is_valid:
        logging.info("[SHOPPING BAD INPUT] %s", err)
        return error_response("User ID, recipe ID, and missing ingredients are required", 400)

    rows, error = db.generate_shopping_items(
        user_id=body["user_id"],
        recipe_id=body["recipe_id"],
        recipe_title=body.get("recipe_title"),
        missing_ingredients=body["missing_ingredients"],
    )
    if error:
        return error_response(error, 500)
    return jsonify({
        "message": "Shopping list generated successfully",
        "items": rows or [],
    })


@shopping.route("/<item_id>", methods=["PUT"])
def update_item(item_id: str) -> Any:
    body = request.get_json(silent=True)
    is_valid, err = validate_payload("shopping_item_update", body)
    if not is_valid:
        logging.info("[SHOPPING BAD INPUT] %s", err)
        return error_response("User ID is required", 400)

    row, error = db.update_shopping_item(item_id, body["user_id"], _pick(body, UPDATE_FIELDS))
    if error:
        return error_response(error, 500)
    if row is None:
        return error_response("Shopping item not found", 404)
    return jsonify({"shoppingItem": row})


@shopping.route("/<item_id>", methods=["PATCH"])
def toggle_purchased(item_id: str) -> Any:
    body = request.get_json(silent=True)
    is_valid, err = validate_payload("shopping_item_toggle", body)
    if not is_valid:
        logging.info("[SHOPPING BAD INPUT] %s", err)
        return error_response("User ID and purchase state are required", 400)

    row, error = db.set_purchased(item_id, body["user_id"], body["is_purchased"])
    if error:
        return error_response(error, 500)
    if row is None:
        return error_response("Shopping item not found", 404)
    return jsonify({"shoppingItem": row})


@shopping.route("/<item_id>", methods=["DELETE"])
def delete_item(item_id: str) -> Any:
    user_id = request.args.get("userId")
    if not user_id:
        return error_response("User ID is required", 400)

    _, error = db.delete_shopping_item(item_id, user_id)
    if error:
        return error_response(error, 500)
    return jsonify({"message": "Shopping item deleted successfully"})
