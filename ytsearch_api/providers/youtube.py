from __future__ import annotations

import json
import logging
import re
from typing import Iterator

import requests

from .base import BaseSearchProvider
from ..utils.text import join_runs, parse_count


logger = logging.getLogger(__name__)

SEARCH_URL = "https://www.youtube.com/results"

HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/123.0.0.0 Safari/537.36"
    ),
    "Accept-Language": "en-US,en;q=0.9",
}

INITIAL_DATA_PATTERN = re.compile(
    r"ytInitialData\"?\]?\s*=\s*(\{.*?\})\s*;\s*</script>",
    re.DOTALL,
)


def _extract_initial_data(html: str) -> dict:
    match = INITIAL_DATA_PATTERN.search(html)
    if not match:
        raise ValueError("Failed to find ytInitialData in YouTube search page")
    try:
        return json.loads(match.group(1))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Failed to decode ytInitialData: {exc}") from exc


def _iter_video_renderers(data: dict) -> Iterator[dict]:
    sections = (
        data.get("contents", {})
        .get("twoColumnSearchResultsRenderer", {})
        .get("primaryContents", {})
        .get("sectionListRenderer", {})
        .get("contents", [])
    )
    for section in sections:
        items = section.get("itemSectionRenderer", {}).get("contents", [])
        for item in items:
            renderer = item.get("videoRenderer")
            if renderer and renderer.get("videoId"):
                yield renderer


def _renderer_to_candidate(renderer: dict) -> dict:
    video_id = renderer["videoId"]
    timestamp = join_runs(renderer.get("lengthText"))
    return {
        "url": f"https://youtube.com/watch?v={video_id}",
        "title": join_runs(renderer.get("title")),
        "duration": {"timestamp": timestamp},
        "thumbnail": f"https://i.ytimg.com/vi/{video_id}/hqdefault.jpg",
        "author": {"name": join_runs(renderer.get("ownerText") or renderer.get("longBylineText"))},
        "views": parse_count(join_runs(renderer.get("viewCountText"))),
    }


class YouTubeSearchProvider(BaseSearchProvider):
    name = "youtube"

    def __init__(self, timeout: float = 20) -> None:
        self.timeout = timeout

    def fetch_page(self, query: str) -> str:
        response = requests.get(
            SEARCH_URL,
            params={"search_query": query, "hl": "en"},
            headers=HEADERS,
            timeout=self.timeout,
        )
        response.raise_for_status()
        return response.text

    def search(self, query: str) -> list[dict]:
        data = _extract_initial_data(self.fetch_page(query))
        candidates = [_renderer_to_candidate(r) for r in _iter_video_renderers(data)]
        logger.debug("[youtube] query=%r candidates=%d", query, len(candidates))
        return candidates
