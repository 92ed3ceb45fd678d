"""
Spelling correction against the domain vocabulary.

Rules, in order:
1. Words shorter than 3 characters are returned unchanged
2. Fuzzy match with similarity > 0.70 → the matched vocabulary word
3. Levenshtein fallback: closest vocabulary word if its distance is ≤ 2 and
   below ceil(0.4 × word length); ties go to the earlier vocabulary word
4. Otherwise the lower-cased word
"""

import logging
import math

from rapidfuzz.distance import Levenshtein

from .vocabulary import VocabularyStore

logger = logging.getLogger(__name__)


class SpellingCorrector:
    """Per-token corrector; pure apart from debug logging"""

    def __init__(
        self,
        vocabulary: VocabularyStore,
        similarity_threshold: float = 0.7,
        max_distance: int = 2,
        distance_ratio: float = 0.4,
    ):
        """
        Args:
            vocabulary: Store to correct against
            similarity_threshold: Minimum fuzzy similarity (exclusive) to accept a match
            max_distance: Largest edit distance the fallback accepts
            distance_ratio: Fallback distance must stay below ceil(ratio × word length)
        """
        self.vocabulary = vocabulary
        self.similarity_threshold = similarity_threshold
        self.max_distance = max_distance
        self.distance_ratio = distance_ratio

    def correct(self, word: str) -> str:
        """
        Correct a single word.

        Examples:
            >>> corrector = SpellingCorrector(VocabularyStore())
            >>> corrector.correct("helo")
            'help'
            >>> corrector.correct("XYZ123")
            'xyz123'
        """
        if len(word) < 3:
            return word

        lowered = word.lower()

        match = self.vocabulary.nearest_match(lowered)
        if match is not None:
            candidate, similarity = match
            if similarity > self.similarity_threshold:
                if candidate != lowered:
                    logger.debug(f"Spelling: '{word}' → '{candidate}' (fuzzy similarity {similarity:.2f})")
                return candidate

        best_match = lowered
        min_distance = math.ceil(len(word) * self.distance_ratio)
        for candidate in self.vocabulary:
            distance = Levenshtein.distance(lowered, candidate)
            if distance < min_distance and distance <= self.max_distance:
                min_distance = distance
                best_match = candidate

        if best_match != lowered:
            logger.debug(f"Spelling: '{word}' → '{best_match}' (edit distance {min_distance})")

        return best_match
