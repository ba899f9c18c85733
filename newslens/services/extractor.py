import logging

from ..errors import UpstreamError
from .prompts import build_extraction_prompt

logger = logging.getLogger(__name__)

EXTRACTORS = ("model", "newspaper")


def extract_article_text(article_url: str, gemini, method: str = "model") -> str:
    """Return the body text of the article at ``article_url``."""
    if method == "newspaper":
        return _extract_with_newspaper(article_url)
    if method != "model":
        raise ValueError(f"Unknown article extractor: {method}")

    logger.info(f"Extracting article content with search grounding: {article_url}")
    try:
        return gemini.generate(build_extraction_prompt(article_url), temperature=0, use_search=True)
    except UpstreamError as e:
        logger.error(f"Error fetching article content: {e}")
        raise UpstreamError("Failed to retrieve article content from the URL.") from e


def _extract_with_newspaper(article_url: str) -> str:
    from newspaper import Article, ArticleException

    logger.info(f"Scraping content from URL: {article_url}")
    article = Article(article_url)
    try:
        article.download()
        article.parse()
    except ArticleException as e:
        logger.error(f"Error scraping article content: {e}")
        raise UpstreamError("Failed to retrieve article content from the URL.") from e

    return article.text or article.meta_description or article.title or ""
