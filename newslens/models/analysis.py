from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# Pydantic models for the structured JSON exchanged with the model and the client.
# Field aliases keep the camelCase wire names used by the browser front-end.
class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)

class BiasPoint(WireModel):
    finding: str
    evidence: list[str] = Field(default_factory=list)

class TonePoint(BiasPoint):
    classification: Literal["Positive", "Negative", "Neutral"]

class BiasAnalysisDetails(WireModel):
    tone: TonePoint
    favoritism: BiasPoint
    charged_language: BiasPoint = Field(alias="chargedLanguage")
    missing_perspectives: BiasPoint = Field(alias="missingPerspectives")
    political_leaning: BiasPoint = Field(alias="politicalLeaning")

class AnalysisResult(WireModel):
    article_title: str = Field(alias="articleTitle")
    neutral_summary: str = Field(alias="neutralSummary")
    fact_only_summary: str = Field(alias="factOnlySummary")
    eli10_summary: str = Field(alias="eli10Summary")
    bias_analysis: BiasAnalysisDetails = Field(alias="biasAnalysis")

class NewsHeadline(WireModel):
    # Search-grounded replies often carry extra keys such as dates
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str
    source: str
    url: str

class HistoryItem(WireModel):
    """A cached analysis, keyed by the article URL."""
    id: str
    url: str
    title: str
    analysis: AnalysisResult
    timestamp: int
