# recipebox/services/youtube.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import requests

from recipebox import config

# Appended to every query so results lean towards cooking videos
RECIPE_QUERY_SUFFIX = "レシピ 作り方"

Video = Dict[str, Any]


class YouTubeConfigError(RuntimeError):
    """No YOUTUBE_API_KEY in the environment."""


class YouTubeAPIError(Exception):
    def __init__(self, message: str, status_code: int = 502) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _get(endpoint: str, params: Dict[str, Any]) -> Dict[str, Any]:
    url = f"{config.YOUTUBE_API_BASE}/{endpoint}"
    response = requests.get(url, params=params, timeout=config.YOUTUBE_TIMEOUT)

    try:
        payload = response.json()
    except ValueError:
        payload = {}
    if not isinstance(payload, dict):
        payload = {}

    if not response.ok:
        error = payload.get("error")
        message = (error or {}).get("message") if isinstance(error, dict) else None
        logging.warning("[YOUTUBE ERROR %s] %s %s", endpoint, response.status_code, message)
        raise YouTubeAPIError(message or "YouTube API error", response.status_code)

    return payload


def _to_video(item: Dict[str, Any]) -> Video:
    snippet = item.get("snippet") or {}
    thumbnails = snippet.get("thumbnails") or {}
    thumbnail: Optional[Dict[str, Any]] = thumbnails.get("medium") or thumbnails.get("default") or {}
    details = item.get("contentDetails") or {}
    stats = item.get("statistics") or {}

    try:
        view_count = int(stats.get("viewCount") or 0)
    except (TypeError, ValueError):
        view_count = 0

    return {
        "videoId": item.get("id"),
        "title": snippet.get("title"),
        "channelName": snippet.get("channelTitle"),
        "description": snippet.get("description", ""),
        "thumbnailUrl": thumbnail.get("url"),
        "duration": details.get("duration"),
        "viewCount": view_count,
        "publishedAt": snippet.get("publishedAt"),
    }


def search_videos(query: str, max_results: int | str = config.DEFAULT_MAX_RESULTS) -> List[Video]:
    """
    Search YouTube for recipe videos and return flattened metadata records.

    Two calls: /search for the ids, then /videos for statistics and
    duration, which /search does not return.

    Raises:
        YouTubeConfigError if no API key is configured
        YouTubeAPIError on a non-2xx response
    """
    api_key = config.youtube_api_key()
    if not api_key:
        raise YouTubeConfigError("YouTube API key is not configured")

    search = _get(
        "search",
        {
            "part": "snippet",
            "q": f"{query} {RECIPE_QUERY_SUFFIX}",
            "type": "video",
            "maxResults": max_results,
            "order": "relevance",
            "key": api_key,
        },
    )

    video_ids = [
        (item.get("id") or {}).get("videoId")
        for item in search.get("items") or []
    ]
    video_ids = [v for v in video_ids if v]
    if not video_ids:
        return []

    videos = _get(
        "videos",
        {
            "part": "snippet,statistics,contentDetails",
            "id": ",".join(video_ids),
            "key": api_key,
        },
    )

    return [_to_video(item) for item in videos.get("items") or []]
