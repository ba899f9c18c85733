import logging
from typing import Union

from ..errors import MissingFieldError, ResponseFormatError, UpstreamError
from ..models.analysis import AnalysisResult, NewsHeadline
from . import prompts
from .extractor import extract_article_text
from .gemini_client import ANALYSIS_SCHEMA, translation_map_schema
from .normalizer import normalize_analysis, normalize_headlines, normalize_translations, validate_analysis

logger = logging.getLogger(__name__)

ANALYSIS_TEMPERATURE = 0.2
TRANSLATION_TEMPERATURE = 0.1
NEWS_TEMPERATURE = 0.1


class NewsAnalysisService:
    """The four proxy operations, each one prompt and one normalized reply."""

    def __init__(self, gemini, extractor: str = "model", min_article_length: int = 150,
                 headline_count: int = 5):
        self.gemini = gemini
        self.extractor = extractor
        self.min_article_length = min_article_length
        self.headline_count = headline_count

    @classmethod
    def from_config(cls, config, gemini) -> "NewsAnalysisService":
        return cls(
            gemini,
            extractor=config.get('ARTICLE_EXTRACTOR', 'model'),
            min_article_length=config.get('MIN_ARTICLE_LENGTH', 150),
            headline_count=config.get('NEWS_HEADLINE_COUNT', 5),
        )

    def analyze(self, article_url: str, language: str) -> AnalysisResult:
        article_content = extract_article_text(article_url, self.gemini, self.extractor)
        if not article_content or len(article_content.strip()) < self.min_article_length:
            raise UpstreamError(
                "Could not retrieve sufficient article content from the provided URL. "
                "It might be behind a paywall or inaccessible."
            )

        logger.info(f"Analyzing article ({len(article_content)} chars) in {language}: {article_url}")
        try:
            text = self.gemini.generate(
                prompts.build_analysis_prompt(article_content, language),
                temperature=ANALYSIS_TEMPERATURE,
                response_schema=ANALYSIS_SCHEMA,
            )
            return normalize_analysis(text)
        except (UpstreamError, ResponseFormatError) as e:
            logger.error(f"Error analyzing news article content: {e}")
            raise type(e)(f"Failed to get analysis from the AI model: {e}") from e

    def translate(self, analysis: Union[AnalysisResult, dict], target_language: str) -> AnalysisResult:
        """Translate every string of an analysis except the tone classification."""
        original = self._coerce_analysis(analysis)
        try:
            text = self.gemini.generate(
                prompts.build_translation_prompt(original.to_wire(), target_language),
                temperature=TRANSLATION_TEMPERATURE,
                response_schema=ANALYSIS_SCHEMA,
            )
            # The tone label stays in English whatever the model did with it
            return normalize_analysis(text, tone_classification=original.bias_analysis.tone.classification)
        except (UpstreamError, ResponseFormatError) as e:
            logger.error(f"Error translating analysis result: {e}")
            raise type(e)(f"Failed to translate the analysis: {e}") from e

    def translate_texts(self, texts: list[str], target_language: str) -> dict[str, str]:
        if target_language.strip().lower() == "english":
            return {text: text for text in texts}

        try:
            text = self.gemini.generate(
                prompts.build_texts_translation_prompt(texts, target_language),
                temperature=TRANSLATION_TEMPERATURE,
                response_schema=translation_map_schema(texts),
            )
            return normalize_translations(text, texts)
        except (UpstreamError, ResponseFormatError) as e:
            logger.error(f"Error translating texts: {e}")
            raise type(e)(f"Failed to translate texts: {e}") from e

    def fetch_news(self, category: str) -> list[NewsHeadline]:
        # Search grounding cannot be combined with a response schema
        try:
            text = self.gemini.generate(
                prompts.build_headlines_prompt(category, self.headline_count),
                temperature=NEWS_TEMPERATURE,
                use_search=True,
            )
            headlines = normalize_headlines(text)
        except (UpstreamError, ResponseFormatError) as e:
            logger.error(f"Error fetching latest news: {e}")
            raise type(e)(f"Failed to fetch latest news: {e}") from e

        logger.info(f"Fetched {len(headlines)} {category} headlines")
        return headlines

    @staticmethod
    def _coerce_analysis(analysis) -> AnalysisResult:
        if isinstance(analysis, AnalysisResult):
            return analysis
        if not isinstance(analysis, dict):
            raise MissingFieldError("analysis must be a JSON object")
        try:
            return validate_analysis(analysis)
        except ResponseFormatError as e:
            raise MissingFieldError(f"Invalid analysis to translate: {e}") from e
