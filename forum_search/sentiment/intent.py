"""
Query intent classification and intent → sorting strategy lookup.

Query type (first group with a hit wins):
1. question: an interrogative among the first 3 tokens
2. problem_report: failure vocabulary anywhere (token or raw-text substring)
3. seeking_solution: resolution vocabulary anywhere (token or raw-text substring)
4. general: nothing matched

Questions are front-loaded grammatically, so interrogatives further into
the query do not count; problem and solution words count anywhere.

Intent combines query type with the query's sentiment category:
    question type or question category → find_answers
    problem_report type or problem category → find_solutions
    seeking_solution type or solution category → find_similar_solved
    otherwise → general_search
"""

import logging
from types import MappingProxyType
from typing import Any, Callable, List, Mapping, Tuple, Union

from ..models import QueryAnalysis, SentimentResult, SortingStrategy
from .scorer import SentimentScorer

logger = logging.getLogger(__name__)

QUESTION_WINDOW = 3
MAX_ANALYSIS_TOKENS = 10

QUERY_PATTERNS: Tuple[Tuple[str, Tuple[str, ...]], ...] = (
    ("question", (
        "how", "what", "when", "where", "why", "who", "which",
        "can", "could", "would", "should",
    )),
    ("problem_report", (
        "problem", "issue", "error", "bug", "not working", "failed", "broken",
        "stuck", "cant", "cannot", "doesnt", "wont", "crash",
    )),
    ("seeking_solution", (
        "solved", "solution", "fix", "resolved", "answer", "how to fix", "how to solve",
    )),
)

SORTING_STRATEGIES: Mapping[str, SortingStrategy] = MappingProxyType({
    "find_answers": SortingStrategy(
        preferred_sentiments=["positive", "slightly_positive"],
        sort_by="relevance",
        boost_solved=True,
        boost_high_upvotes=True,
        min_upvotes=1,
    ),
    "find_solutions": SortingStrategy(
        preferred_sentiments=["positive", "neutral"],
        sort_by="relevance",
        boost_solved=True,
        boost_high_upvotes=True,
        min_upvotes=0,
    ),
    "find_similar_solved": SortingStrategy(
        preferred_sentiments=["positive"],
        sort_by="popular",
        boost_solved=True,
        boost_high_upvotes=True,
        min_upvotes=2,
    ),
})

DEFAULT_SORTING_STRATEGY = SortingStrategy(
    preferred_sentiments=None,
    sort_by="relevance",
    boost_solved=False,
    boost_high_upvotes=False,
    min_upvotes=0,
)


def classify_query_type(tokens: List[str], lowered_query: str) -> str:
    """
    Pick the query type from tokens and the lower-cased raw query.

    Examples:
        >>> classify_query_type(["how", "do", "i", "fix", "the", "wifi"], "how do i fix the wifi?")
        'question'
        >>> classify_query_type(["my", "wifi", "is", "broken", "how", "to", "fix"], "my wifi is broken, how to fix")
        'problem_report'
    """
    for query_type, patterns in QUERY_PATTERNS:
        for pattern in patterns:
            if query_type == "question":
                if pattern in tokens[:QUESTION_WINDOW]:
                    return query_type
            elif pattern in tokens or pattern in lowered_query:
                return query_type
    return "general"


def determine_intent(sentiment: SentimentResult, query_type: str) -> str:
    if query_type == "question" or sentiment.category == "question":
        return "find_answers"
    if query_type == "problem_report" or sentiment.category == "problem":
        return "find_solutions"
    if query_type == "seeking_solution" or sentiment.category == "solution":
        return "find_similar_solved"
    return "general_search"


def get_sorting_strategy(analysis: Union[QueryAnalysis, str]) -> SortingStrategy:
    """
    Ranking preferences for a query analysis (or a bare intent name).

    Unknown intents get the default strategy.
    """
    intent = analysis.intent if isinstance(analysis, QueryAnalysis) else analysis
    return SORTING_STRATEGIES.get(intent, DEFAULT_SORTING_STRATEGY)


class QueryIntentClassifier:
    """Combines sentiment and keyword patterns into a QueryAnalysis"""

    def __init__(self, sentiment_scorer: SentimentScorer, tokenizer: Callable[[str], List[str]]):
        self.sentiment_scorer = sentiment_scorer
        self.tokenizer = tokenizer

    def analyze_query(self, query: Any) -> QueryAnalysis:
        """
        Classify a raw query.

        Args:
            query: Raw user query; non-string input is treated as empty

        Returns:
            QueryAnalysis with sentiment, query type, intent and the first 10 tokens
        """
        sentiment = self.sentiment_scorer.analyze(query)

        text = query if isinstance(query, str) else ""
        tokens = self.tokenizer(text)
        query_type = classify_query_type(tokens, text.lower())
        intent = determine_intent(sentiment, query_type)

        logger.debug(
            f"Query '{text}': type={query_type}, intent={intent}, "
            f"sentiment={sentiment.sentiment} ({sentiment.score})"
        )

        return QueryAnalysis(
            sentiment=sentiment,
            query_type=query_type,
            intent=intent,
            tokens=tokens[:MAX_ANALYSIS_TOKENS],
        )
