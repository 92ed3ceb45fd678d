"""
Relevance scoring for forum posts and comments.

Field-weighted match score (query terms vs one document):
    score = Σ_term (10 × title_hits + 3 × content_hits + 5 × tag_hits) + 0.5 × upvotes
    score × 0.7 for comments

Where:
    *_hits = non-overlapping, case-insensitive literal occurrences of the term
             (regex metacharacters escaped, so "c++" or "(help)" match literally)
    tags are joined with spaces and searched as one field

Intent boost (query intent vs document sentiment):
    boosted = text_score
            + 5  if intent is find_answers and category is solution
            + 4  else if intent is find_solutions and category is solution
            + 3  else if intent is find_answers and sentiment is positive
            + min(0.5 × upvotes, 10)  if upvotes > 5

Only the first matching bonus applies. Documents are never modified.
"""

import re
from collections.abc import Mapping
from typing import Any, Iterable, Optional, Union

from ..models import CandidateDocument, QueryAnalysis, SentimentResult, SentimentSummary


class RelevanceScorer:
    """
    Per-document relevance scores for the search handler.

    Final ordering and pagination stay with the caller.
    """

    ANSWER_SOLUTION_BONUS = 5.0
    SOLUTIONS_SOLUTION_BONUS = 4.0
    ANSWER_POSITIVE_BONUS = 3.0
    HIGH_UPVOTE_THRESHOLD = 5
    UPVOTE_BOOST_CAP = 10.0

    def __init__(
        self,
        title_weight: float = 10.0,
        content_weight: float = 3.0,
        tag_weight: float = 5.0,
        upvote_weight: float = 0.5,
        comment_factor: float = 0.7,
    ):
        """
        Initialize relevance scorer.

        Args:
            title_weight: Points per term occurrence in the title
            content_weight: Points per term occurrence in the content
            tag_weight: Points per term occurrence in the joined tags
            upvote_weight: Points per upvote (match score and intent boost)
            comment_factor: Multiplier applied to comment scores
                Comments are shorter and rank below posts with equal matches
        """
        self.title_weight = title_weight
        self.content_weight = content_weight
        self.tag_weight = tag_weight
        self.upvote_weight = upvote_weight
        self.comment_factor = comment_factor

    def score_document_match(
        self,
        document: Union[CandidateDocument, Any],
        terms: Iterable[str],
        is_comment: bool = False,
    ) -> float:
        """
        Compute the field-weighted match score of a document.

        Args:
            document: CandidateDocument, mapping or object with title/content/tags/upvotes
            terms: Expanded search terms (any case); empty terms are skipped
            is_comment: Apply the comment multiplier

        Returns:
            Match score (higher = more relevant)

        Example:
            >>> scorer = RelevanceScorer()
            >>> scorer.score_document_match(
            ...     {"title": "wifi issue", "content": "wifi is broken in hostel",
            ...      "tags": ["network"], "upvotes": 6},
            ...     ["wifi", "hostel"],
            ... )
            19.0  # title 10 + content 3 + 3, upvotes 3
        """
        document = CandidateDocument.coerce(document)

        title = document.title.lower()
        content = document.content.lower()
        tags = " ".join(document.tags).lower()

        score = 0.0
        for term in terms:
            if not term:
                continue
            pattern = re.compile(re.escape(term.lower()), re.IGNORECASE)

            score += len(pattern.findall(title)) * self.title_weight
            score += len(pattern.findall(content)) * self.content_weight
            score += len(pattern.findall(tags)) * self.tag_weight

        score += document.upvotes * self.upvote_weight

        if is_comment:
            score *= self.comment_factor

        return score

    def boost_by_intent(
        self,
        document: Union[CandidateDocument, Any],
        analysis: Union[QueryAnalysis, str],
        sentiment: Optional[Union[SentimentSummary, SentimentResult, Mapping]] = None,
    ) -> float:
        """
        Boost a document's precomputed text score by query intent.

        Args:
            document: Document with optional text_score (0 when absent)
            analysis: QueryAnalysis of the query, or a bare intent name
            sentiment: Document sentiment summary; the document's own
                sentiment_summary is used when omitted

        Returns:
            Boosted score; the unchanged text score when no sentiment is known
        """
        document = CandidateDocument.coerce(document)
        score = document.text_score or 0.0

        if sentiment is None:
            sentiment = document.sentiment_summary
        if sentiment is None:
            return score
        if isinstance(sentiment, Mapping):
            sentiment = SentimentSummary.model_validate(dict(sentiment))

        intent = analysis.intent if isinstance(analysis, QueryAnalysis) else analysis
        category = sentiment.category
        label = sentiment.sentiment

        if intent == "find_answers" and category == "solution":
            score += self.ANSWER_SOLUTION_BONUS
        elif intent == "find_solutions" and category == "solution":
            score += self.SOLUTIONS_SOLUTION_BONUS
        elif intent == "find_answers" and label == "positive":
            score += self.ANSWER_POSITIVE_BONUS

        if document.upvotes > self.HIGH_UPVOTE_THRESHOLD:
            score += min(document.upvotes * self.upvote_weight, self.UPVOTE_BOOST_CAP)

        return score
