import json
import logging
from typing import Optional

from pydantic import ValidationError

from ..errors import ResponseFormatError
from ..models.analysis import AnalysisResult, NewsHeadline

logger = logging.getLogger(__name__)

REQUIRED_ANALYSIS_KEYS = ("articleTitle", "neutralSummary", "biasAnalysis")
REQUIRED_HEADLINE_KEYS = ("title", "source", "url")


def strip_code_fences(text: str) -> str:
    """Remove a surrounding markdown code fence, if the model added one."""
    clean = text.strip()
    if clean.startswith("```json"):
        clean = clean[len("```json"):]
    elif clean.startswith("```"):
        clean = clean[len("```"):]
    else:
        return clean
    if clean.rstrip().endswith("```"):
        clean = clean.rstrip()[:-3]
    return clean.strip()


def parse_json(text: str):
    if text is None:
        raise ResponseFormatError("Empty response from the AI model.")
    try:
        return json.loads(strip_code_fences(text))
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse model response: {e}")
        raise ResponseFormatError(f"Could not parse the response from the AI model: {e.msg}") from e


def normalize_analysis(text: str, tone_classification: Optional[str] = None) -> AnalysisResult:
    """Parse and validate an analysis reply.

    When ``tone_classification`` is given it replaces whatever label the model
    returned for ``biasAnalysis.tone.classification`` before validation.
    """
    data = parse_json(text)
    if not isinstance(data, dict) or not all(data.get(key) for key in REQUIRED_ANALYSIS_KEYS):
        logger.error(f"Parsed JSON missing required fields: {data}")
        raise ResponseFormatError("Invalid JSON structure received from AI for article analysis.")
    if tone_classification is not None:
        tone = data["biasAnalysis"].get("tone") if isinstance(data["biasAnalysis"], dict) else None
        if isinstance(tone, dict) and tone.get("classification") != tone_classification:
            logger.warning(
                f"Model changed tone classification to {tone.get('classification')!r}; "
                f"restoring {tone_classification!r}"
            )
            tone["classification"] = tone_classification
    return validate_analysis(data)


def validate_analysis(data: dict) -> AnalysisResult:
    try:
        return AnalysisResult.model_validate(data)
    except ValidationError as e:
        logger.error(f"Failed to validate analysis: {e}")
        raise ResponseFormatError(f"Invalid analysis format: {_first_error(e)}") from e


def normalize_headlines(text: str) -> list[NewsHeadline]:
    """Parse a headline list. An empty list is a valid reply."""
    data = parse_json(text)
    if not isinstance(data, list) or not all(
        isinstance(item, dict) and all(item.get(key) for key in REQUIRED_HEADLINE_KEYS)
        for item in data
    ):
        logger.warning(f"API for fetch news did not return a valid array: {data}")
        raise ResponseFormatError("Invalid JSON structure received from API for news fetch.")
    try:
        return [NewsHeadline.model_validate(item) for item in data]
    except ValidationError as e:
        logger.error(f"Failed to validate headlines: {e}")
        raise ResponseFormatError(f"Invalid headline format: {_first_error(e)}") from e


def normalize_translations(text: str, texts: list[str]) -> dict[str, str]:
    data = parse_json(text)
    if not isinstance(data, dict):
        raise ResponseFormatError("Invalid JSON structure received from API for text translation.")
    missing = [t for t in texts if not isinstance(data.get(t), str)]
    if missing:
        raise ResponseFormatError(f"Translation response is missing: {', '.join(missing)}")
    return {t: data[t] for t in texts}


def _first_error(error: ValidationError) -> str:
    details = error.errors()
    if not details:
        return str(error)
    first = details[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first.get('msg')}" if location else first.get("msg", "")
