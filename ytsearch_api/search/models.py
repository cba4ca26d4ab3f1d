from dataclasses import dataclass
from typing import Optional


SOURCE_DIRECT_URL = "direct_url"
SOURCE_SEARCH_RESULT = "search_result"

DIRECT_URL_TITLE = "Direct YouTube URL"
UNKNOWN_DURATION = "Unknown"


@dataclass
class VideoResult:
    url: str
    title: str
    duration: str
    thumbnail: str
    source: str
    author: Optional[str] = None
    views: Optional[int] = None

    def __post_init__(self) -> None:
        if self.source not in (SOURCE_DIRECT_URL, SOURCE_SEARCH_RESULT):
            raise ValueError(f"Unknown result source: {self.source}")
        if not self.url:
            raise ValueError("VideoResult requires a non-empty url")

    @classmethod
    def direct(cls, url: str) -> "VideoResult":
        return cls(
            url=url,
            title=DIRECT_URL_TITLE,
            duration=UNKNOWN_DURATION,
            thumbnail="",
            source=SOURCE_DIRECT_URL,
        )

    def to_dict(self) -> dict:
        if self.source == SOURCE_DIRECT_URL:
            return {
                "url": self.url,
                "title": self.title,
                "duration": self.duration,
                "thumbnail": self.thumbnail,
                "source": self.source,
            }
        return {
            "url": self.url,
            "title": self.title,
            "duration": self.duration,
            "thumbnail": self.thumbnail,
            "author": self.author,
            "views": self.views,
            "source": self.source,
        }
