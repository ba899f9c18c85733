import pytest
import newspaper

from conftest import ARTICLE_TEXT, FakeGemini
from newslens.errors import UpstreamError
from newslens.services.extractor import extract_article_text


class FakeArticle:
    text = ""
    meta_description = "A description used when the body is empty."
    title = "Title"

    def __init__(self, url):
        self.url = url

    def download(self):
        pass

    def parse(self):
        pass


def test_model_extraction_uses_search():
    gemini = FakeGemini(ARTICLE_TEXT)
    assert extract_article_text("https://example.com/a", gemini) == ARTICLE_TEXT
    assert gemini.calls[0]["use_search"] is True


def test_model_extraction_failure_is_reported():
    gemini = FakeGemini(UpstreamError("Gemini API error: unavailable"))
    with pytest.raises(UpstreamError, match="Failed to retrieve article content"):
        extract_article_text("https://example.com/a", gemini)


def test_newspaper_extraction_falls_back_to_meta_description(monkeypatch):
    monkeypatch.setattr(newspaper, "Article", FakeArticle)
    gemini = FakeGemini()

    text = extract_article_text("https://example.com/a", gemini, method="newspaper")

    assert text == FakeArticle.meta_description
    assert gemini.calls == []


def test_unknown_extractor():
    with pytest.raises(ValueError):
        extract_article_text("https://example.com/a", FakeGemini(), method="selenium")
