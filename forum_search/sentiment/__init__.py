"""
Sentiment scoring and query intent classification.

Components:
- keywords: stemmed forum keyword weights and negation words
- scorer: lexicon + keyword sentiment with category and confidence
- intent: query type, intent and sorting strategy
"""

from .keywords import FORUM_KEYWORDS, NEGATIONS
from .scorer import SentimentScorer, classify_score, load_polarity_lexicon
from .intent import (
    DEFAULT_SORTING_STRATEGY,
    SORTING_STRATEGIES,
    QueryIntentClassifier,
    classify_query_type,
    determine_intent,
    get_sorting_strategy,
)

__all__ = [
    "FORUM_KEYWORDS",
    "NEGATIONS",
    "SentimentScorer",
    "classify_score",
    "load_polarity_lexicon",
    "QueryIntentClassifier",
    "classify_query_type",
    "determine_intent",
    "get_sorting_strategy",
    "SORTING_STRATEGIES",
    "DEFAULT_SORTING_STRATEGY",
]
