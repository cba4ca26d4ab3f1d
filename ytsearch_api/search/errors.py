from __future__ import annotations


SEARCH_EXAMPLE = "/api/ytsearch?q=your search term"


class SearchAPIError(RuntimeError):
    """Base for errors that end a search request with a JSON body."""

    status_code: int = 500

    def to_payload(self) -> dict:
        return {"error": str(self)}


class ValidationError(SearchAPIError):
    status_code = 400

    def __init__(self, message: str = "Missing query parameter 'q'", example: str = SEARCH_EXAMPLE):
        super().__init__(message)
        self.example = example

    def to_payload(self) -> dict:
        return {"error": str(self), "example": self.example}


class NotFoundError(SearchAPIError):
    status_code = 404

    def __init__(self, query: str, suggestion: str = "Try a different search term"):
        super().__init__("No video found")
        self.query = query
        self.suggestion = suggestion

    def to_payload(self) -> dict:
        return {"error": str(self), "query": self.query, "suggestion": self.suggestion}


class ProviderError(SearchAPIError):
    status_code = 500

    def __init__(self, message: str, query: str):
        super().__init__("Search failed")
        self.message = message
        self.query = query

    def to_payload(self) -> dict:
        return {"error": str(self), "message": self.message, "query": self.query}
