from __future__ import annotations

import logging
from typing import Any

from flask import Blueprint, jsonify, request

from recipebox import config
from recipebox.api import error_response
from recipebox.api.validator import validate_payload
from recipebox.extractor import extract
from recipebox.services import youtube

recipes = Blueprint("recipes", __name__, url_prefix="/api/youtube")


@recipes.route("/search", methods=["GET"])
def search() -> Any:
    """
    Recipe video search.

    Query params:
    - q: search text (required)
    - maxResults: defaults to 12
    """
    query = request.args.get("q", "").strip()
    max_results = request.args.get("maxResults") or config.DEFAULT_MAX_RESULTS

    if not query:
        return error_response("Search query is required", 400)

    try:
        videos = youtube.search_videos(query, max_results)
    except youtube.YouTubeConfigError as e:
        logging.error("[YOUTUBE CONFIG] %s", e)
        return error_response("YouTube API key is not configured", 500)
    except youtube.YouTubeAPIError as e:
        return error_response(e.message, e.status_code)
    except Exception as e:  # noqa: BLE001
        logging.exception("[YOUTUBE SEARCH ERROR] %s", e)
        return error_response("Internal server error", 500)

    return jsonify({"videos": videos})


@recipes.route("/extract-ingredients", methods=["POST"])
def extract_ingredients() -> Any:
    """
    Pull an ingredient list out of a video description.

    Body: {"description": "<text>"}
    Reply: {"ingredients": [...]}, possibly empty.
    """
    body = request.get_json(silent=True)

    is_valid, err = validate_payload("extract_request", body)
    if not is_valid:
        logging.info("[EXTRACT BAD INPUT] %s", err)
        return error_response("Description is required", 400)

    try:
        ingredients = extract(body["description"])
    except Exception as e:  # noqa: BLE001
        logging.exception("[EXTRACT ERROR] %s", e)
        return error_response("Internal server error", 500)

    logging.info("[EXTRACTED] %d ingredients", len(ingredients))
    return jsonify({"ingredients": ingredients})
