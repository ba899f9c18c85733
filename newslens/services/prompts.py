"""Prompt text for the four proxy operations.

Every prompt states the JSON contract it expects back. For the analysis and
translation calls the contract is also enforced with a response schema; the
headline prompt runs with web search, where schemas are unavailable, so the
wording is the only constraint there.
"""
import json


def build_extraction_prompt(article_url: str) -> str:
    return f"""
    Please extract and return ONLY the main text content of the news article at the following URL.
    Do not include any ads, navigation links, comments, or boilerplate text from the website's template.
    Focus solely on the body of the article.
    URL: {article_url}
    """


def build_analysis_prompt(article_content: str, language: str) -> str:
    return f"""
    You are an expert news analyst. Your task is to analyze the content of the article provided below and produce a detailed report.

    ARTICLE CONTENT:
    ---
    {article_content}
    ---

    Based on the article content above, provide the following in a single JSON object:
    1.  **articleTitle**: The original title of the article. If you cannot find it, create a suitable title based on the content.
    2.  **Summaries**:
        *   **neutralSummary**: An objective and balanced overview.
        *   **factOnlySummary**: A list of verifiable facts without interpretation.
        *   **eli10Summary**: An 'Explain Like I'm 10' summary.
    3.  **biasAnalysis**: A detailed, evidence-based analysis. For each point, provide a 'finding' and an 'evidence' array of direct quotes from the provided article content.
        *   **tone**: Overall tone. 'classification' MUST be 'Positive', 'Negative', or 'Neutral'.
        *   **favoritism**: Does it favor or criticize any person, group, or entity?
        *   **chargedLanguage**: Use of emotionally charged or loaded words.
        *   **missingPerspectives**: Significant viewpoints or context that are missing.
        *   **politicalLeaning**: Any discernible political leaning (e.g., left, right, center, libertarian, etc.).

    **LANGUAGE REQUIREMENT**: The entire JSON response, including all summaries, findings, and evidence, MUST be in **{language}**. The only exception is the 'classification' field for tone, which must remain in English.
    """


def build_translation_prompt(analysis: dict, target_language: str) -> str:
    """Ask for a key-preserving translation of a serialized AnalysisResult."""
    return f"""
    You are an expert translator. Your task is to translate the user-facing text content of the following JSON object into the specified target language.
    Target Language: **{target_language}**
    JSON object to translate: {json.dumps(analysis, indent=2, ensure_ascii=False)}
    **Instructions**:
    1.  Translate ALL string values in the JSON object, including titles, summaries, findings, and evidence quotes.
    2.  The JSON structure MUST be preserved exactly as in the original. Do not add, remove, or rename any keys.
    3.  **VERY IMPORTANT EXCEPTION**: The value for the key `biasAnalysis.tone.classification` MUST remain in English and be one of 'Positive', 'Negative', or 'Neutral'. Do NOT translate this specific value.
    4.  Ensure the translations are natural and maintain the original meaning and context of the news analysis.
    Provide your entire response as a single, valid JSON object that conforms to the schema. Do not include any other text or markdown formatting.
    """


def build_texts_translation_prompt(texts: list[str], target_language: str) -> str:
    return f"""
    Translate the following English words into {target_language}.
    Provide the response as a single JSON object where keys are the original English words and values are their translations.
    Words to translate: {json.dumps(texts, ensure_ascii=False)}
    """


def build_headlines_prompt(category: str, count: int = 5) -> str:
    return f"""
    List {count} recent and significant {category} news headlines from reputable, major news sources.
    For each headline, provide:
    1. The full title of the article.
    2. The name of the source (e.g., Reuters, BBC News, Associated Press).
    3. The direct URL to the article.
    Your entire response MUST be a valid JSON array of objects. Each object must have the following keys: "title", "source", "url".
    Do not include any text, explanation, or markdown formatting before or after the JSON array.
    """
