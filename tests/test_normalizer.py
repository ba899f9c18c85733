import json
import pytest

from newslens.errors import ResponseFormatError
from newslens.services.normalizer import (
    normalize_analysis,
    normalize_headlines,
    normalize_translations,
    parse_json,
    strip_code_fences,
)


@pytest.mark.parametrize("raw,expected", [
    ('```json\n{"a": 1}\n```', '{"a": 1}'),
    ('```\n[1, 2]\n```', '[1, 2]'),
    ('  {"a": 1}  ', '{"a": 1}'),
    ('```json{"a": 1}', '{"a": 1}'),
])
def test_strip_code_fences(raw, expected):
    assert strip_code_fences(raw) == expected


def test_parse_json_rejects_prose():
    with pytest.raises(ResponseFormatError):
        parse_json("Here are the headlines you asked for")


def test_normalize_analysis_accepts_fenced_reply(sample_analysis):
    result = normalize_analysis("```json\n" + json.dumps(sample_analysis) + "\n```")
    assert result.article_title == sample_analysis["articleTitle"]
    assert result.bias_analysis.tone.classification == "Neutral"
    assert result.to_wire() == sample_analysis


@pytest.mark.parametrize("missing", ["articleTitle", "neutralSummary", "biasAnalysis"])
def test_normalize_analysis_rejects_missing_required_key(sample_analysis, missing):
    del sample_analysis[missing]
    with pytest.raises(ResponseFormatError, match="Invalid JSON structure"):
        normalize_analysis(json.dumps(sample_analysis))


def test_normalize_analysis_rejects_missing_nested_field(sample_analysis):
    del sample_analysis["biasAnalysis"]["politicalLeaning"]
    with pytest.raises(ResponseFormatError, match="politicalLeaning"):
        normalize_analysis(json.dumps(sample_analysis))


def test_normalize_analysis_rejects_unknown_tone_classification(sample_analysis):
    sample_analysis["biasAnalysis"]["tone"]["classification"] = "Neutre"
    with pytest.raises(ResponseFormatError):
        normalize_analysis(json.dumps(sample_analysis))


def test_normalize_headlines():
    reply = '```json\n[{"title": "A", "source": "Reuters", "url": "https://reuters.com/a", "date": "today"}]\n```'
    headlines = normalize_headlines(reply)
    assert [h.to_wire() for h in headlines] == [
        {"title": "A", "source": "Reuters", "url": "https://reuters.com/a"}
    ]


def test_normalize_headlines_allows_empty_list():
    assert normalize_headlines("[]") == []


@pytest.mark.parametrize("reply", [
    '{"title": "A", "source": "B", "url": "C"}',
    '[{"title": "A", "source": "B"}]',
    '[{"title": "", "source": "B", "url": "C"}]',
])
def test_normalize_headlines_rejects_bad_shapes(reply):
    with pytest.raises(ResponseFormatError):
        normalize_headlines(reply)


def test_normalize_translations_keeps_requested_words_only():
    reply = json.dumps({"Political": "Politique", "Indian": "Indien", "extra": "x"})
    assert normalize_translations(reply, ["Political", "Indian"]) == {
        "Political": "Politique",
        "Indian": "Indien",
    }


def test_normalize_translations_rejects_missing_word():
    with pytest.raises(ResponseFormatError, match="International"):
        normalize_translations('{"Political": "Politique"}', ["Political", "International"])


def test_normalize_headlines_rejects_non_string_fields():
    reply = json.dumps([{"title": 5, "source": "Reuters", "url": "https://reuters.com/t"}])
    with pytest.raises(ResponseFormatError, match="Invalid headline format: title"):
        normalize_headlines(reply)


def test_normalize_analysis_overrides_tone_classification(sample_analysis):
    sample_analysis["biasAnalysis"]["tone"]["classification"] = "Neutre"
    result = normalize_analysis(json.dumps(sample_analysis), tone_classification="Neutral")
    assert result.bias_analysis.tone.classification == "Neutral"
