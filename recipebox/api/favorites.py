from __future__ import annotations

import logging
from typing import Any

from flask import Blueprint, jsonify, request

from recipebox.api import error_response
from recipebox.api.validator import validate_payload
from recipebox.services import supabase as db

favorites = Blueprint("favorites", __name__, url_prefix="/api/favorites")

FAVORITE_FIELDS = (
    "user_id", "youtube_video_id", "title", "channel_name", "thumbnail_url",
    "description", "duration", "view_count", "published_at", "tags",
)


@favorites.route("", methods=["GET"])
def list_favorites() -> Any:
    user_id = request.args.get("userId")
    if not user_id:
        return error_response("User ID is required", 400)

    rows, error = db.list_favorites(user_id)
    if error:
        return error_response(error, 500)
    return jsonify({"favorites": rows or []})


@favorites.route("", methods=["POST"])
def add_favorite() -> Any:
    body = request.get_json(silent=True)
    is_valid, err = validate_payload("favorite_create", body)
    if not is_valid:
        logging.info("[FAVORITES BAD INPUT] %s", err)
        return error_response("User ID, YouTube video ID, and title are required", 400)

    existing, error = db.find_favorite(body["user_id"], body["youtube_video_id"])
    if error:
        return error_response(error, 500)
    if existing:
        return error_response("Recipe is already in favorites", 409)

    record = {k: body[k] for k in FAVORITE_FIELDS if k in body}
    row, error = db.add_favorite(record)
    if error:
        return error_response(error, 500)
    return jsonify({"favorite": row}), 201


@favorites.route("", methods=["DELETE"])
def delete_favorite() -> Any:
    user_id = request.args.get("userId")
    video_id = request.args.get("videoId")
    if not user_id or not video_id:
        return error_response("User ID and video ID are required", 400)

    _, error = db.delete_favorite(user_id, video_id)
    if error:
        return error_response(error, 500)
    return jsonify({"message": "Favorite recipe deleted successfully"})
