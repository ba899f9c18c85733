import time
from typing import Optional

from ..models.analysis import AnalysisResult, HistoryItem


def now_ms() -> int:
    return int(time.time() * 1000)


class HistoryStore:
    """In-memory analysis history keyed by article URL, newest first."""

    def __init__(self, items: Optional[list[HistoryItem]] = None) -> None:
        self._items: dict[str, HistoryItem] = {}
        for item in sorted(items or [], key=lambda entry: entry.timestamp):
            self._items[item.id] = item

    def __contains__(self, url: str) -> bool:
        return url in self._items

    def __len__(self) -> int:
        return len(self._items)

    def get(self, url: str) -> Optional[HistoryItem]:
        return self._items.get(url)

    def add(self, url: str, analysis: AnalysisResult, timestamp: Optional[int] = None) -> HistoryItem:
        """Record an analysis, replacing any entry for the same URL."""
        item = HistoryItem(
            id=url,
            url=url,
            title=analysis.article_title,
            analysis=analysis,
            timestamp=timestamp if timestamp is not None else now_ms(),
        )
        self._items.pop(url, None)
        self._items[url] = item
        return item

    def update(self, url: str, analysis: AnalysisResult) -> Optional[HistoryItem]:
        """Swap in a new analysis (e.g. a translation) keeping position and timestamp."""
        item = self._items.get(url)
        if item is None:
            return None
        item.analysis = analysis
        return item

    def items(self) -> list[HistoryItem]:
        # Insertion order is oldest first; add() moves an entry to the end
        return list(reversed(list(self._items.values())))

    def clear(self) -> None:
        self._items.clear()
