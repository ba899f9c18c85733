import os
import sys
import copy
import pytest

# Setup Flask test env before config is imported
os.environ.setdefault("GOOGLE_API_KEY", "test-google-key")
os.environ.setdefault("FLASK_ENV", "development")

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import get_config
from newslens import create_app
from newslens.errors import UpstreamError
from newslens.services.analysis_service import NewsAnalysisService


SAMPLE_ANALYSIS = {
    "articleTitle": "City Council Approves New Transit Budget",
    "neutralSummary": "The council voted 7-2 to fund three new bus routes.",
    "factOnlySummary": "Vote was 7-2. Three routes. Budget of $12 million.",
    "eli10Summary": "The city decided to spend money on more buses.",
    "biasAnalysis": {
        "tone": {
            "classification": "Neutral",
            "finding": "The article reports the vote without judgement.",
            "evidence": ["The council voted 7-2"],
        },
        "favoritism": {"finding": "No clear favoritism.", "evidence": []},
        "chargedLanguage": {"finding": "Minimal charged language.", "evidence": ["sweeping plan"]},
        "missingPerspectives": {"finding": "Riders were not quoted.", "evidence": []},
        "politicalLeaning": {"finding": "Center.", "evidence": []},
    },
}

ARTICLE_TEXT = (
    "The city council on Tuesday approved a sweeping plan to fund three new bus routes, "
    "voting 7-2 after a lengthy debate. The $12 million budget will be drawn from the "
    "general transportation fund and service is expected to start next spring."
)


class FakeGemini:
    """Stands in for GeminiClient: returns queued replies and records every call."""

    model = "gemini-test"

    def __init__(self, *replies):
        self.replies = list(replies)
        self.calls = []

    def queue(self, *replies):
        self.replies.extend(replies)

    def generate(self, prompt, *, temperature, use_search=False, response_schema=None):
        self.calls.append({
            "prompt": prompt,
            "temperature": temperature,
            "use_search": use_search,
            "response_schema": response_schema,
        })
        if not self.replies:
            raise UpstreamError("Empty response from Gemini")
        reply = self.replies.pop(0)
        if isinstance(reply, Exception):
            raise reply
        return reply


@pytest.fixture
def sample_analysis():
    return copy.deepcopy(SAMPLE_ANALYSIS)


@pytest.fixture
def gemini():
    return FakeGemini()


@pytest.fixture
def service(gemini):
    return NewsAnalysisService(gemini)


@pytest.fixture
def app(service):
    app = create_app(get_config(), analysis_service=service)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    with app.test_client() as c:
        yield c
