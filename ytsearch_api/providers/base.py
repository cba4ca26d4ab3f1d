from __future__ import annotations

from abc import ABC, abstractmethod


class BaseSearchProvider(ABC):
    name: str = "base"

    @abstractmethod
    def search(self, query: str) -> list[dict]:
        """Return candidates for ``query`` in the provider's ranking order."""
        raise NotImplementedError
