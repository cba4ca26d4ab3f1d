from __future__ import annotations

import logging
from typing import Any, Mapping

from ..providers.base import BaseSearchProvider
from ..providers.youtube import YouTubeSearchProvider
from .errors import NotFoundError, ProviderError
from .models import SOURCE_SEARCH_RESULT, UNKNOWN_DURATION, VideoResult


logger = logging.getLogger(__name__)


def _nested_text(value: Any, key: str) -> str | None:
    if isinstance(value, Mapping):
        value = value.get(key)
    if value is None:
        return None
    if not isinstance(value, (str, int, float)):
        raise ValueError(f"Unexpected {key} value: {value!r}")
    return str(value)


def candidate_to_result(candidate: Any) -> VideoResult:
    """Coerce a provider candidate into a search-result VideoResult.

    Raises ValueError when the candidate does not have the expected shape.
    """
    if not isinstance(candidate, Mapping):
        raise ValueError(f"Candidate is not a mapping: {type(candidate).__name__}")

    url = candidate.get("url")
    if not isinstance(url, str) or not url:
        raise ValueError("Candidate is missing url")

    title = candidate.get("title")
    if not isinstance(title, str):
        raise ValueError("Candidate is missing title")

    thumbnail = candidate.get("thumbnail") or ""
    if not isinstance(thumbnail, str):
        raise ValueError("Candidate thumbnail is not a string")

    views = candidate.get("views")
    if views is not None:
        if isinstance(views, bool):
            raise ValueError(f"Candidate views is not a number: {views!r}")
        try:
            views = int(views)
        except (TypeError, ValueError, OverflowError):
            raise ValueError(f"Candidate views is not a number: {views!r}") from None

    return VideoResult(
        url=url,
        title=title,
        duration=_nested_text(candidate.get("duration"), "timestamp") or UNKNOWN_DURATION,
        thumbnail=thumbnail,
        author=_nested_text(candidate.get("author"), "name"),
        views=views,
        source=SOURCE_SEARCH_RESULT,
    )


class SearchOrchestrator:
    def __init__(self, provider: BaseSearchProvider | None = None) -> None:
        self.provider = provider or YouTubeSearchProvider()

    def find_first(self, query: str) -> VideoResult:
        logger.info("[search] searching for: %s", query)
        try:
            candidates = self.provider.search(query)
        except Exception as exc:
            logger.error("[search] provider %s failed: %s", self.provider.name, exc)
            raise ProviderError(str(exc), query=query) from exc

        if candidates is not None and not isinstance(candidates, (list, tuple)):
            message = f"Provider returned {type(candidates).__name__} instead of a list"
            logger.error("[search] %s", message)
            raise ProviderError(message, query=query)

        if not candidates:
            logger.info("[search] no video found for: %s", query)
            raise NotFoundError(query)

        try:
            result = candidate_to_result(candidates[0])
        except ValueError as exc:
            logger.error("[search] malformed candidate from %s: %s", self.provider.name, exc)
            raise ProviderError(str(exc), query=query) from exc

        logger.info("[search] found: %s", result.title)
        return result
