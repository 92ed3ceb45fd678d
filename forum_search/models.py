"""
Data models exchanged between the engine and its callers.

All models serialize with camelCase aliases (``model_dump(by_alias=True)``)
so a search handler can hand them straight to a JSON response, and they
accept either snake_case or camelCase input.
"""

from collections.abc import Mapping
from typing import Any, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

SentimentLabel = Literal[
    "positive", "slightly_positive", "neutral", "slightly_negative", "negative"
]
Category = Literal["solution", "problem", "discussion", "question", "general", "unknown"]
QueryType = Literal["question", "problem_report", "seeking_solution", "general"]
Intent = Literal["find_answers", "find_solutions", "find_similar_solved", "general_search"]
SortBy = Literal["relevance", "popular"]


class _EngineModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class DetectedKeyword(_EngineModel):
    """Forum keyword hit recorded during sentiment scoring"""
    original: str
    stemmed: str
    weight: float


class SentimentSummary(_EngineModel):
    """Per-document sentiment consumed by the intent boost"""
    category: Category
    sentiment: SentimentLabel


class SentimentResult(_EngineModel):
    score: float = Field(0.0, ge=-1.0, le=1.0, description="Normalized polarity, 3 decimals")
    sentiment: SentimentLabel = "neutral"
    confidence: float = Field(0.0, ge=0.0, le=1.0, description="Confidence estimate, 2 decimals")
    category: Category = "unknown"
    keyword_matches: int = Field(0, ge=0, description="Forum keyword hits (uncapped)")
    detected_keywords: List[DetectedKeyword] = Field(
        default_factory=list, description="First 5 forum keyword hits"
    )

    def summary(self) -> SentimentSummary:
        return SentimentSummary(category=self.category, sentiment=self.sentiment)


class QueryAnalysis(_EngineModel):
    sentiment: SentimentResult
    query_type: QueryType = "general"
    intent: Intent = "general_search"
    tokens: List[str] = Field(default_factory=list, description="First 10 corrected tokens")


class SortingStrategy(_EngineModel):
    """Ranking preferences for the result-ordering stage"""
    preferred_sentiments: Optional[List[SentimentLabel]] = None
    sort_by: SortBy = "relevance"
    boost_solved: bool = False
    boost_high_upvotes: bool = False
    min_upvotes: int = Field(0, ge=0)


class CandidateDocument(_EngineModel):
    """
    Post or comment supplied by the document source.

    Missing or null text fields are read as empty, a missing upvote count
    as zero. Unknown fields (ids, authors, timestamps) are ignored.
    """
    title: str = ""
    content: str = ""
    tags: List[str] = Field(default_factory=list)
    upvotes: int = Field(0, ge=0)
    text_score: Optional[float] = None
    sentiment_summary: Optional[SentimentSummary] = None

    @field_validator("title", "content", mode="before")
    @classmethod
    def _null_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("tags", mode="before")
    @classmethod
    def _null_tags(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("upvotes", mode="before")
    @classmethod
    def _null_upvotes(cls, value: Any) -> Any:
        return 0 if value is None else value

    @classmethod
    def coerce(cls, document: Any) -> "CandidateDocument":
        """Accept a CandidateDocument, a mapping, or any object with matching attributes"""
        if isinstance(document, cls):
            return document
        if isinstance(document, Mapping):
            return cls.model_validate(dict(document))
        return cls.model_validate(document, from_attributes=True)
