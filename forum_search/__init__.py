"""
Query understanding and relevance scoring for forum search.

Given a raw query the engine corrects spelling, expands the query into
related terms, classifies the querier's intent and scores candidate posts
and comments. Persistence, HTTP routing and final result ordering belong
to the caller.

Components:
- lexicon: vocabulary, spelling correction, synonym expansion
- lexical_db: external synonym sources (WordNet)
- text: tokenizer and Porter stemmer
- sentiment: forum-tuned sentiment scoring, intent and sorting strategy
- scoring: field-weighted match score and intent boost
- engine: SearchEngine facade wiring the above
"""

from .config import EngineSettings, load_environment
from .engine import SearchEngine, get_engine
from .logging_config import setup_logging, setup_logging_from_settings
from .models import (
    CandidateDocument,
    DetectedKeyword,
    QueryAnalysis,
    SentimentResult,
    SentimentSummary,
    SortingStrategy,
)

__version__ = "0.1.0"

__all__ = [
    "EngineSettings",
    "load_environment",
    "SearchEngine",
    "get_engine",
    "setup_logging",
    "setup_logging_from_settings",
    "CandidateDocument",
    "DetectedKeyword",
    "QueryAnalysis",
    "SentimentResult",
    "SentimentSummary",
    "SortingStrategy",
]
