from __future__ import annotations

import hashlib
import threading
from functools import lru_cache
from typing import Protocol

from campus_portal.core.errors import ExtractionError
from campus_portal.schemas.resume import AnalysisResult


class AnalysisCache(Protocol):
    def get(self, key: str) -> AnalysisResult | None:
        """Return the stored result for a content hash, if any."""

    def set(self, key: str, result: AnalysisResult) -> None:
        """Store a result under a content hash."""


class InMemoryAnalysisCache(AnalysisCache):
    """Process-lifetime map of content hash to result.

    Entries are never evicted; growth is bounded only by the number of
    distinct documents analysed while the process is alive.
    """

    def __init__(self) -> None:
        self._entries: dict[str, AnalysisResult] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> AnalysisResult | None:
        with self._lock:
            return self._entries.get(key)

    def set(self, key: str, result: AnalysisResult) -> None:
        with self._lock:
            self._entries[key] = result

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


def content_hash(content: bytes) -> str:
    try:
        return hashlib.sha256(content).hexdigest()
    except (TypeError, ValueError) as exc:
        raise ExtractionError(f"Unable to hash resume content: {exc}") from exc


@lru_cache(maxsize=1)
def get_default_analysis_cache() -> AnalysisCache:
    return InMemoryAnalysisCache()
