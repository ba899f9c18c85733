import logging
from typing import Optional

from google import genai
from google.genai import errors
from google.genai import types

from ..errors import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)

# Process-wide handle, created on first use
_client: Optional[genai.Client] = None

# Response schemas in the Gemini OpenAPI subset
BIAS_POINT_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "finding": {"type": "STRING"},
        "evidence": {"type": "ARRAY", "items": {"type": "STRING"}},
    },
    "required": ["finding", "evidence"],
}

TONE_POINT_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "classification": {"type": "STRING", "enum": ["Positive", "Negative", "Neutral"]},
        "finding": {"type": "STRING"},
        "evidence": {"type": "ARRAY", "items": {"type": "STRING"}},
    },
    "required": ["classification", "finding", "evidence"],
}

ANALYSIS_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "articleTitle": {"type": "STRING"},
        "neutralSummary": {"type": "STRING"},
        "factOnlySummary": {"type": "STRING"},
        "eli10Summary": {"type": "STRING"},
        "biasAnalysis": {
            "type": "OBJECT",
            "properties": {
                "tone": TONE_POINT_SCHEMA,
                "favoritism": BIAS_POINT_SCHEMA,
                "chargedLanguage": BIAS_POINT_SCHEMA,
                "missingPerspectives": BIAS_POINT_SCHEMA,
                "politicalLeaning": BIAS_POINT_SCHEMA,
            },
            "required": ["tone", "favoritism", "chargedLanguage", "missingPerspectives", "politicalLeaning"],
        },
    },
    "required": ["articleTitle", "neutralSummary", "factOnlySummary", "eli10Summary", "biasAnalysis"],
}


def translation_map_schema(texts: list[str]) -> dict:
    """Object schema with one required string property per word."""
    return {
        "type": "OBJECT",
        "properties": {text: {"type": "STRING"} for text in texts},
        "required": list(texts),
    }


def get_genai_client(api_key: Optional[str]) -> genai.Client:
    """Return the shared google-genai client, creating it on first call."""
    global _client
    if _client is not None:
        return _client
    if not api_key:
        raise ConfigurationError("GOOGLE_API_KEY environment variable not set.")
    _client = genai.Client(api_key=api_key)
    logger.info("Initialized Google GenAI client")
    return _client


class GeminiClient:
    def __init__(self, client: genai.Client, model: str = "gemini-2.5-flash"):
        self.client = client
        self.model = model

    def generate(self, prompt: str, *, temperature: float, use_search: bool = False,
                 response_schema: Optional[dict] = None) -> str:
        """Run one generate_content call and return the reply text."""
        options = {"temperature": temperature}
        if use_search:
            options["tools"] = [types.Tool(google_search=types.GoogleSearch())]
        if response_schema is not None:
            options["response_mime_type"] = "application/json"
            options["response_schema"] = response_schema
        config = types.GenerateContentConfig(**options)

        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=config,
            )
        except errors.APIError as e:
            logger.error(f"Gemini API error ({e.code}): {e.message}")
            raise UpstreamError(f"Gemini API error: {e.message or e}") from e
        except Exception as e:
            logger.error(f"Unexpected error calling Gemini: {e}", exc_info=True)
            raise UpstreamError(f"Could not reach the Gemini API: {e}") from e

        if not response.text:
            raise UpstreamError("Empty response from Gemini")
        return response.text
