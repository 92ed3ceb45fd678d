"""
Lexical sentiment scoring tuned for forum posts and queries.

Score (per text):
    base     = Σ negator × valence(token) / token_count    (polarity lexicon)
    forum    = Σ FORUM_KEYWORDS[stem(token)]                (domain keywords)
    combined = base × 0.5 + forum × 0.5
    score    = clamp(combined / max(token_count, 1), -1, 1)

Where:
    valence = lexicon value of the token, else of its stem
    negator = -1 once a negation word has been seen, else 1

Classification (fixed thresholds on score):
    > 0.4   positive / solution
    < -0.4  negative / problem
    > 0.15  slightly_positive / discussion
    < -0.15 slightly_negative / question
    else    neutral / general

Confidence:
    (min(1, tokens/30) + min(1, keyword_matches × 0.15) + |score|) / 3

The default polarity lexicon is NLTK's VADER lexicon (word → valence in
[-4, 4]); any word → valence mapping can be injected instead.
"""

import logging
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

import nltk

from ..models import CandidateDocument, DetectedKeyword, SentimentResult, SentimentSummary
from ..text import stem
from .keywords import FORUM_KEYWORDS, NEGATIONS

logger = logging.getLogger(__name__)

VADER_RESOURCE = "sentiment/vader_lexicon.zip"

MAX_DETECTED_KEYWORDS = 5

# Exclusive bounds, checked in the order classify_score lists them
POSITIVE_THRESHOLD = 0.4
NEGATIVE_THRESHOLD = -0.4
SLIGHTLY_POSITIVE_THRESHOLD = 0.15
SLIGHTLY_NEGATIVE_THRESHOLD = -0.15


def load_polarity_lexicon(auto_download: bool = True) -> Dict[str, float]:
    """
    Load NLTK's VADER lexicon as a plain word → valence dict.

    Args:
        auto_download: Fetch the lexicon with nltk.download() when it is not installed

    Raises:
        LookupError: lexicon missing and auto_download disabled (or download failed)
    """
    try:
        nltk.data.find(VADER_RESOURCE)
    except LookupError:
        if not auto_download:
            raise
        logger.info("Downloading NLTK resource: vader_lexicon")
        nltk.download("vader_lexicon", quiet=True)

    from nltk.sentiment.vader import SentimentIntensityAnalyzer

    lexicon = dict(SentimentIntensityAnalyzer().lexicon)
    logger.info(f"Loaded VADER polarity lexicon: {len(lexicon)} entries")
    return lexicon


def classify_score(score: float) -> Tuple[str, str]:
    """
    Map a normalized score to (sentiment, category).

    Examples:
        >>> classify_score(0.5)
        ('positive', 'solution')
        >>> classify_score(-0.2)
        ('slightly_negative', 'question')
    """
    if score > POSITIVE_THRESHOLD:
        return "positive", "solution"
    if score < NEGATIVE_THRESHOLD:
        return "negative", "problem"
    if score > SLIGHTLY_POSITIVE_THRESHOLD:
        return "slightly_positive", "discussion"
    if score < SLIGHTLY_NEGATIVE_THRESHOLD:
        return "slightly_negative", "question"
    return "neutral", "general"


def neutral_result() -> SentimentResult:
    """Default result for empty or unusable input"""
    return SentimentResult(
        score=0.0,
        sentiment="neutral",
        confidence=0.0,
        category="unknown",
        keyword_matches=0,
        detected_keywords=[],
    )


class SentimentScorer:
    """
    Sentiment scorer over corrected tokens.

    Lexicon and keyword tables are fixed at construction.
    """

    def __init__(
        self,
        tokenizer: Callable[[str], List[str]],
        lexicon: Optional[Mapping[str, float]] = None,
        keyword_weights: Mapping[str, float] = FORUM_KEYWORDS,
        negations: Iterable[str] = NEGATIONS,
        auto_download: bool = True,
    ):
        """
        Args:
            tokenizer: Text → corrected tokens (see text.tokenize)
            lexicon: Word → valence mapping; VADER lexicon when omitted
            keyword_weights: Stem → forum weight mapping
            negations: Words that invert polarity of the tokens after them
            auto_download: Allow downloading the VADER lexicon when it is missing
        """
        self.tokenizer = tokenizer
        self.keyword_weights = keyword_weights
        self.negations = frozenset(negations)

        if lexicon is None:
            lexicon = load_polarity_lexicon(auto_download=auto_download)
        self.lexicon: Dict[str, float] = dict(lexicon)

        # Stem-keyed copy so inflected forms ("failing", "thanked") still hit
        self.stemmed_lexicon: Dict[str, float] = {}
        for word, valence in self.lexicon.items():
            self.stemmed_lexicon.setdefault(stem(word), valence)

    def base_sentiment(self, tokens: List[str]) -> float:
        """Average lexicon polarity of the token sequence, with negation inversion."""
        if not tokens:
            return 0.0

        score = 0.0
        negator = 1
        for token in tokens:
            if token in self.negations:
                negator = -1
                continue
            valence = self.lexicon.get(token)
            if valence is None:
                valence = self.stemmed_lexicon.get(stem(token))
            if valence is not None:
                score += negator * valence

        return score / len(tokens)

    def analyze(self, text: Any) -> SentimentResult:
        """
        Score a text.

        Args:
            text: Raw text; anything that is not a non-blank string gets the neutral default

        Returns:
            SentimentResult with score rounded to 3 decimals and confidence to 2
        """
        if not isinstance(text, str) or not text.strip():
            return neutral_result()

        tokens = self.tokenizer(text)
        if not tokens:
            return neutral_result()

        base = self.base_sentiment(tokens)

        forum_score = 0.0
        keyword_matches = 0
        detected: List[DetectedKeyword] = []
        for token in tokens:
            stemmed = stem(token)
            weight = self.keyword_weights.get(stemmed)
            if weight is None:
                continue
            forum_score += weight
            keyword_matches += 1
            if len(detected) < MAX_DETECTED_KEYWORDS:
                detected.append(DetectedKeyword(original=token, stemmed=stemmed, weight=weight))

        combined = base * 0.5 + forum_score * 0.5
        normalized = max(-1.0, min(1.0, combined / max(len(tokens), 1)))
        score = round(normalized, 3)

        # Classify the reported score so labels always agree with it
        sentiment, category = classify_score(score)

        length_confidence = min(1.0, len(tokens) / 30)
        keyword_confidence = min(1.0, keyword_matches * 0.15)
        score_confidence = abs(normalized)
        confidence = (length_confidence + keyword_confidence + score_confidence) / 3

        return SentimentResult(
            score=score,
            sentiment=sentiment,
            confidence=round(confidence, 2),
            category=category,
            keyword_matches=keyword_matches,
            detected_keywords=detected,
        )

    def summarize_document(self, document: Any) -> SentimentSummary:
        """Sentiment summary of a post or comment (title and content together)."""
        document = CandidateDocument.coerce(document)
        text = f"{document.title} {document.content}".strip()
        return self.analyze(text).summary()
