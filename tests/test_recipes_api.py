from __future__ import annotations

import unittest
from unittest.mock import patch

from recipebox.main import create_app
from recipebox.services.youtube import YouTubeAPIError, YouTubeConfigError


class ExtractIngredientsRouteTests(unittest.TestCase):
    def setUp(self) -> None:
        self.client = create_app().test_client()

    def test_extracts_from_description(self) -> None:
        resp = self.client.post(
            "/api/youtube/extract-ingredients",
            json={"description": "材料\n・トマト 2個\n・塩 少々\n作り方\n切る"},
        )
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_json(), {"ingredients": ["トマト", "塩"]})

    def test_empty_description_is_not_an_error(self) -> None:
        resp = self.client.post("/api/youtube/extract-ingredients", json={"description": ""})
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_json(), {"ingredients": []})

    def test_missing_or_invalid_description(self) -> None:
        for body in [{}, {"description": None}, {"description": 12}, ["材料"]]:
            with self.subTest(body=body):
                with patch("recipebox.api.recipes.extract") as extract:
                    resp = self.client.post("/api/youtube/extract-ingredients", json=body)
                    extract.assert_not_called()
                self.assertEqual(resp.status_code, 400)
                self.assertEqual(resp.get_json(), {"error": "Description is required"})

    def test_non_json_body(self) -> None:
        resp = self.client.post(
            "/api/youtube/extract-ingredients",
            data="材料",
            content_type="text/plain",
        )
        self.assertEqual(resp.status_code, 400)

    def test_unexpected_failure_is_a_server_error(self) -> None:
        with patch("recipebox.api.recipes.extract", side_effect=RuntimeError("boom")):
            resp = self.client.post("/api/youtube/extract-ingredients", json={"description": "x"})
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.get_json(), {"error": "Internal server error"})


class SearchRouteTests(unittest.TestCase):
    def setUp(self) -> None:
        self.client = create_app().test_client()

    def test_requires_query(self) -> None:
        resp = self.client.get("/api/youtube/search")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(resp.get_json(), {"error": "Search query is required"})

    def test_returns_videos(self) -> None:
        videos = [{"videoId": "abc", "title": "肉じゃが"}]
        with patch("recipebox.services.youtube.search_videos", return_value=videos) as search:
            resp = self.client.get("/api/youtube/search", query_string={"q": "肉じゃが", "maxResults": "5"})
        search.assert_called_once_with("肉じゃが", "5")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_json(), {"videos": videos})

    def test_default_max_results(self) -> None:
        with patch("recipebox.services.youtube.search_videos", return_value=[]) as search:
            self.client.get("/api/youtube/search", query_string={"q": "カレー"})
        search.assert_called_once_with("カレー", 12)

    def test_missing_api_key(self) -> None:
        with patch(
            "recipebox.services.youtube.search_videos",
            side_effect=YouTubeConfigError("YouTube API key is not configured"),
        ):
            resp = self.client.get("/api/youtube/search", query_string={"q": "カレー"})
        self.assertEqual(resp.status_code, 500)
        self.assertEqual(resp.get_json(), {"error": "YouTube API key is not configured"})

    def test_api_error_status_passes_through(self) -> None:
        with patch(
            "recipebox.services.youtube.search_videos",
            side_effect=YouTubeAPIError("quotaExceeded", 403),
        ):
            resp = self.client.get("/api/youtube/search", query_string={"q": "カレー"})
        self.assertEqual(resp.status_code, 403)
        self.assertEqual(resp.get_json(), {"error": "quotaExceeded"})


class AppTests(unittest.TestCase):
    def test_healthcheck(self) -> None:
        client = create_app().test_client()
        self.assertEqual(client.get("/healthz").get_json(), {"ok": True})

    def test_unknown_route_is_json(self) -> None:
        client = create_app().test_client()
        resp = client.get("/api/nope")
        self.assertEqual(resp.status_code, 404)
        self.assertIn("error", resp.get_json())


if __name__ == "__main__":
    unittest.main()
