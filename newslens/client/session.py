import logging
from typing import Optional

from ..models.analysis import AnalysisResult, HistoryItem
from .api_client import NewsLensClient
from .history import HistoryStore

logger = logging.getLogger(__name__)

NEWS_CATEGORIES = ["Political", "International", "Indian"]


class AnalysisSession:
    """The front-end's analysis flow: history lookup, analysis, re-translation."""

    def __init__(self, client: NewsLensClient, history: Optional[HistoryStore] = None,
                 language: str = "English") -> None:
        self.client = client
        self.history = history if history is not None else HistoryStore()
        self.language = language
        self.active_url: Optional[str] = None
        self.result: Optional[AnalysisResult] = None

    def submit_url(self, url: str) -> AnalysisResult:
        """Analyze ``url``, serving a cached history entry when one exists."""
        url = url.strip()
        cached = self.history.get(url)
        if cached is not None:
            logger.info(f"Serving {url} from history")
            self.active_url, self.result = url, cached.analysis
            return cached.analysis

        try:
            result = self.client.analyze_article(url, self.language)
        except Exception:
            self.active_url = None
            raise
        self.history.add(url, result)
        self.active_url, self.result = url, result
        return result

    def select(self, url: str) -> Optional[AnalysisResult]:
        item = self.history.get(url)
        if item is None:
            return None
        self.active_url, self.result = item.id, item.analysis
        return item.analysis

    def reconvert(self, language: str) -> Optional[AnalysisResult]:
        """Translate the active analysis into ``language`` and update its history entry."""
        self.language = language
        if self.result is None or self.active_url is None:
            return None
        translated = self.client.translate_analysis(self.result, language)
        self.result = translated
        self.history.update(self.active_url, translated)
        return translated

    def clear_history(self) -> None:
        self.history.clear()
        self.active_url = None
        self.result = None

    def category_labels(self) -> dict[str, str]:
        """Headline category names in the session language."""
        if not self.language or self.language == "English":
            return {category: category for category in NEWS_CATEGORIES}
        return self.client.translate_texts(NEWS_CATEGORIES, self.language)

    def latest_news(self, category: str = NEWS_CATEGORIES[0]):
        return self.client.fetch_latest_news(category)

    @property
    def history_items(self) -> list[HistoryItem]:
        return self.history.items()
