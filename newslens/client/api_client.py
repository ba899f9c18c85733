import logging
from typing import Optional, Union

import requests

from ..errors import ClientError
from ..models.analysis import AnalysisResult, NewsHeadline

logger = logging.getLogger(__name__)

# Shown when the live headline fetch fails or comes back empty
MOCK_HEADLINES = [
    NewsHeadline(title="Global Summit Addresses Climate Change Urgently", source="Associated Press", url="#"),
    NewsHeadline(title="New Breakthrough in AI Could Revolutionize Medicine", source="Reuters", url="#"),
    NewsHeadline(title="Stock Markets React to New Economic Policies", source="The Wall Street Journal", url="#"),
    NewsHeadline(title="Archaeologists Uncover Lost City in the Amazon", source="National Geographic", url="#"),
    NewsHeadline(title="Space Mission Successfully Launches to Explore Jupiter's Moons", source="BBC News", url="#"),
]


class NewsLensClient:
    """Calls the NewsLens proxy the same way the browser front-end does."""

    def __init__(self, base_url: str = "http://localhost:5000", session: Optional[requests.Session] = None,
                 timeout: float = 60) -> None:
        self.endpoint = base_url.rstrip("/") + "/api/analyze"
        self.session = session or requests.Session()
        self.timeout = timeout

    def _call(self, action: str, **params):
        try:
            response = self.session.post(
                self.endpoint,
                json={"action": action, **params},
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as exc:
            raise ClientError(f"Could not reach the NewsLens proxy: {exc}") from exc

        if not response.ok:
            try:
                body = response.json()
            except ValueError:
                body = None
            message = body.get("error") if isinstance(body, dict) else None
            raise ClientError(message or f"Request failed with status {response.status_code}",
                              status_code=response.status_code)
        return response.json()

    def analyze_article(self, article_url: str, language: str) -> AnalysisResult:
        try:
            return AnalysisResult.model_validate(self._call("analyze", articleUrl=article_url, language=language))
        except (ClientError, ValueError) as exc:
            logger.error(f"Error analyzing news article: {exc}")
            raise ClientError(f"Failed to get analysis from the AI model: {exc}") from exc

    def translate_analysis(self, analysis: Union[AnalysisResult, dict], target_language: str) -> AnalysisResult:
        if isinstance(analysis, AnalysisResult):
            analysis = analysis.to_wire()
        try:
            data = self._call("translate", analysis=analysis, targetLanguage=target_language)
            return AnalysisResult.model_validate(data)
        except (ClientError, ValueError) as exc:
            logger.error(f"Error translating analysis result: {exc}")
            raise ClientError(f"Failed to translate the analysis: {exc}") from exc

    def translate_texts(self, texts: list[str], target_language: str) -> dict[str, str]:
        """Translate short UI words, falling back to the originals on any failure."""
        try:
            data = self._call("translateTexts", texts=texts, targetLanguage=target_language)
        except (ClientError, ValueError) as exc:
            logger.error(f"Error translating texts: {exc}")
            return {text: text for text in texts}
        if not isinstance(data, dict):
            return {text: text for text in texts}
        return {text: data.get(text) or text for text in texts}

    def fetch_latest_news(self, category: str) -> tuple[list[NewsHeadline], str]:
        """Return ``(headlines, source)`` where source is ``"live"`` or ``"mock"``."""
        try:
            data = self._call("fetchNews", category=category)
        except (ClientError, ValueError) as exc:
            logger.error(f"Error fetching latest news: {exc}")
            return list(MOCK_HEADLINES), "mock"

        if not isinstance(data, list):
            logger.warning(f"API for fetch news did not return an array: {data!r}")
            return list(MOCK_HEADLINES), "mock"
        try:
            headlines = [NewsHeadline.model_validate(item) for item in data]
        except ValueError as exc:
            logger.warning(f"Invalid headline in fetch news response: {exc}")
            return list(MOCK_HEADLINES), "mock"
        if not headlines:
            return list(MOCK_HEADLINES), "mock"
        return headlines, "live"
