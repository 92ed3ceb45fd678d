"""
Search engine facade: the library surface used by the search handler.

Wires the vocabulary, spelling corrector, synonym expander, sentiment scorer,
intent classifier and relevance scorer together. Every table is built once
in the constructor and only read afterwards, so one engine can serve
concurrent requests.

Usage:
    engine = get_engine()

    terms = await engine.expand_query_for_search("hostle wifi not working")
    analysis = engine.analyze_query("hostle wifi not working")
    strategy = engine.get_sorting_strategy(analysis)

    for post in candidates:
        match = engine.score_document_match(post, terms)
        boosted = engine.boost_by_intent({**post, "textScore": match}, analysis)
"""

import logging
from typing import Any, Iterable, List, Mapping, Optional, Set, Union

from .config import EngineSettings, load_environment
from .lexical_db import BaseLexicalDatabase, LexicalDatabaseFactory
from .lexicon import VOCABULARY, SpellingCorrector, SynonymExpander, VocabularyStore
from .models import (
    CandidateDocument,
    QueryAnalysis,
    SentimentResult,
    SentimentSummary,
    SortingStrategy,
)
from .scoring import RelevanceScorer
from .sentiment import QueryIntentClassifier, SentimentScorer, get_sorting_strategy
from .text import stem, tokenize

logger = logging.getLogger(__name__)


class SearchEngine:
    """Query understanding and per-document relevance scoring"""

    def __init__(
        self,
        settings: Optional[EngineSettings] = None,
        lexical_db: Optional[BaseLexicalDatabase] = None,
        lexicon: Optional[Mapping[str, float]] = None,
        vocabulary: Iterable[str] = VOCABULARY,
    ):
        """
        Args:
            settings: Engine settings; read from the environment when omitted
            lexical_db: External synonym source; built by LexicalDatabaseFactory when omitted
            lexicon: Polarity lexicon (word → valence); VADER lexicon when omitted
            vocabulary: Domain words for spelling correction
        """
        self.settings = settings if settings is not None else EngineSettings.from_env()

        self.vocabulary = VocabularyStore(vocabulary)
        self.corrector = SpellingCorrector(self.vocabulary)

        if lexical_db is None:
            lexical_db = LexicalDatabaseFactory.create(settings=self.settings)
        self.expander = SynonymExpander(
            self.corrector,
            lexical_db=lexical_db,
            lookup_timeout=self.settings.lookup_timeout,
            max_external_synonyms=self.settings.max_external_synonyms,
            max_terms=self.settings.max_expanded_terms,
        )

        self.sentiment_scorer = SentimentScorer(
            self.tokenize,
            lexicon=lexicon,
            auto_download=self.settings.nltk_auto_download,
        )
        self.intent_classifier = QueryIntentClassifier(self.sentiment_scorer, self.tokenize)
        self.relevance_scorer = RelevanceScorer()

        logger.info("Search engine initialized")

    # Text normalization

    def tokenize(self, text: str) -> List[str]:
        """Cleaned, spell-corrected tokens of a text."""
        return tokenize(text, correct=self.corrector.correct)

    @staticmethod
    def stem(token: str) -> str:
        return stem(token)

    def correct_spelling(self, word: str) -> str:
        return self.corrector.correct(word)

    # Query expansion

    async def expand_synonyms(self, word: str) -> Set[str]:
        return await self.expander.expand_synonyms(word)

    async def expand_query_for_search(self, query: str) -> List[str]:
        """Expanded term set for a raw query (at most MAX_EXPANDED_TERMS terms)."""
        return await self.expander.expand_query(query)

    # Sentiment and intent

    def analyze_sentiment(self, text: Any) -> SentimentResult:
        return self.sentiment_scorer.analyze(text)

    def summarize_document(self, document: Any) -> SentimentSummary:
        """Sentiment summary of a post/comment, for precomputing boost inputs."""
        return self.sentiment_scorer.summarize_document(document)

    def analyze_query(self, query: Any) -> QueryAnalysis:
        return self.intent_classifier.analyze_query(query)

    def get_sorting_strategy(self, analysis: Union[QueryAnalysis, str]) -> SortingStrategy:
        return get_sorting_strategy(analysis)

    # Relevance

    def score_document_match(
        self,
        document: Union[CandidateDocument, Mapping, Any],
        terms: Iterable[str],
        is_comment: bool = False,
    ) -> float:
        return self.relevance_scorer.score_document_match(document, terms, is_comment=is_comment)

    def boost_by_intent(
        self,
        document: Union[CandidateDocument, Mapping, Any],
        analysis: Union[QueryAnalysis, str],
        sentiment: Optional[Union[SentimentSummary, SentimentResult, Mapping]] = None,
    ) -> float:
        return self.relevance_scorer.boost_by_intent(document, analysis, sentiment)


_engine: Optional[SearchEngine] = None


def get_engine(force_reload: bool = False) -> SearchEngine:
    """
    Get the process-wide engine, building it on first use.

    Loads .env.local / .env before reading settings.
    """
    global _engine
    if _engine is None or force_reload:
        load_environment()
        _engine = SearchEngine(settings=EngineSettings.from_env())
    return _engine
