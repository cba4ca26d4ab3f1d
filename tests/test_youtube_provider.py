import json
import unittest
from unittest.mock import patch

import requests

from ytsearch_api.providers.youtube import YouTubeSearchProvider
from ytsearch_api.utils.text import parse_count


def video_renderer(video_id, title, length="3:45", views="1,234,567 views", owner="Lofi Girl"):
    return {
        "videoRenderer": {
            "videoId": video_id,
            "title": {"runs": [{"text": title}]},
            "lengthText": {"simpleText": length},
            "viewCountText": {"simpleText": views},
            "ownerText": {"runs": [{"text": owner}]},
        }
    }


def search_page(items):
    data = {
        "contents": {
            "twoColumnSearchResultsRenderer": {
                "primaryContents": {
                    "sectionListRenderer": {
                        "contents": [
                            {"itemSectionRenderer": {"contents": items}},
                            {"continuationItemRenderer": {}},
                        ]
                    }
                }
            }
        }
    }
    return (
        "<html><body><script>var ytInitialData = "
        + json.dumps(data)
        + ";</script><script>var other = {};</script></body></html>"
    )


class FakeResponse:
    def __init__(self, status=200, text=""):
        self.status_code = status
        self.text = text

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")


class YouTubeSearchProviderTests(unittest.TestCase):
    @patch("requests.get")
    def test_parses_video_renderers_in_page_order(self, mock_get):
        mock_get.return_value = FakeResponse(
            text=search_page(
                [
                    {"adSlotRenderer": {}},
                    video_renderer("abc123", "Lofi Beats Mix"),
                    {"shelfRenderer": {"title": {"simpleText": "Related"}}},
                    video_renderer("def456", "Second", length="10:00", views="No views"),
                ]
            )
        )
        candidates = YouTubeSearchProvider().search("lofi beats")

        self.assertEqual([c["title"] for c in candidates], ["Lofi Beats Mix", "Second"])
        first = candidates[0]
        self.assertEqual(first["url"], "https://youtube.com/watch?v=abc123")
        self.assertEqual(first["duration"], {"timestamp": "3:45"})
        self.assertEqual(first["thumbnail"], "https://i.ytimg.com/vi/abc123/hqdefault.jpg")
        self.assertEqual(first["author"], {"name": "Lofi Girl"})
        self.assertEqual(first["views"], 1234567)
        self.assertEqual(candidates[1]["views"], 0)

        _, kwargs = mock_get.call_args
        self.assertEqual(kwargs["params"], {"search_query": "lofi beats", "hl": "en"})
        self.assertIn("timeout", kwargs)

    @patch("requests.get")
    def test_page_without_results_yields_empty_list(self, mock_get):
        mock_get.return_value = FakeResponse(text=search_page([]))
        self.assertEqual(YouTubeSearchProvider().search("zzzzznonexistentqueryzzzzz"), [])

    @patch("requests.get")
    def test_missing_initial_data_raises(self, mock_get):
        mock_get.return_value = FakeResponse(text="<html>consent page</html>")
        with self.assertRaises(ValueError):
            YouTubeSearchProvider().search("lofi beats")

    @patch("requests.get")
    def test_http_error_propagates(self, mock_get):
        mock_get.return_value = FakeResponse(status=429)
        with self.assertRaises(requests.HTTPError):
            YouTubeSearchProvider().search("lofi beats")


class TextHelperTests(unittest.TestCase):
    def test_parse_count(self):
        self.assertEqual(parse_count("1,234 views"), 1234)
        self.assertEqual(parse_count("No views"), 0)
        self.assertEqual(parse_count(""), 0)


if __name__ == "__main__":
    unittest.main()
