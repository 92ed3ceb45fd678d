"""
Domain vocabulary and approximate (fuzzy) matcher.

The matcher works like a classic fuzzy set:
1. Exact member → similarity 1.0
2. Character n-grams (size 3, then 2) of the padded word (letters, digits,
   accented Latin-1 and Cyrillic letters kept) are compared to every
   vocabulary word by cosine similarity
3. The 50 best cosine candidates are re-scored by normalized Levenshtein
   similarity: 1 - distance / max(len)
4. Candidates scoring below 0.33 are dropped; the best survivor wins

Larger grams are tried first; the smaller size is only used when the larger
one produces no surviving candidate.
"""

import logging
import math
import re
from collections import Counter
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from rapidfuzz.distance import Levenshtein

logger = logging.getLogger(__name__)

# Campus forum vocabulary: core forum words, synonyms of the most searched
# topics (rules, classroom, hostel, society) and common academic terms
VOCABULARY = (
    # Core forum words
    "rules", "classroom", "hostel", "society", "comment", "post",
    "question", "answer", "problem", "solution", "help", "error",
    "issue", "fixed", "solved", "working",
    # Rules
    "regulations", "directives", "guidelines", "policies", "standards",
    "principles", "laws", "norms", "code", "requirements", "bylaws",
    "ordinances", "decree", "statute", "mandate", "protocol",
    # Classroom
    "class", "room", "lecture", "hall", "course", "lectureroom",
    "auditorium", "seminar", "tutorial", "workshop",
    # Hostel
    "dormitory", "dorm", "residence", "accommodation", "lodging",
    "quarters", "housing", "residency", "dwelling", "lodge",
    # Society
    "community", "association", "organization", "group", "club",
    "collective", "fellowship", "league", "union", "guild",
    # Academic
    "assignment", "homework", "exam", "test", "grade", "professor",
    "teacher", "student", "library", "cafeteria", "wifi", "internet",
    "parking", "facility", "campus", "university", "college", "school",
    "schedule", "timetable", "syllabus", "curriculum",
    "degree", "diploma", "certificate", "transcript", "enrollment",
    "registration", "admission", "scholarship", "tuition", "fees",
)

GRAM_SIZE_UPPER = 3
GRAM_SIZE_LOWER = 2
MIN_MATCH_SCORE = 0.33
CANDIDATE_POOL = 50

# Latin letters and digits, Latin-1 accented letters, Cyrillic
_NON_GRAM_CHARS = re.compile(r"[^a-z0-9\u00c0-\u00ff\u0400-\u04ff, ]+")


def _gram_counts(value: str, size: int) -> Counter:
    """Count padded character n-grams ("wifi", 3 → -wi, wif, ifi, fi-)"""
    simplified = "-" + _NON_GRAM_CHARS.sub("", value.lower()) + "-"
    if len(simplified) < size:
        simplified += "-" * (size - len(simplified))
    return Counter(simplified[i:i + size] for i in range(len(simplified) - size + 1))


def _norm(counts: Counter) -> float:
    return math.sqrt(sum(c * c for c in counts.values()))


class VocabularyStore:
    """
    Immutable, insertion-ordered word set with fuzzy lookup.

    Built once at startup; iteration order is the order words were given,
    minus duplicates, which makes every tie-break deterministic.
    """

    def __init__(self, words: Iterable[str] = VOCABULARY):
        self._words: Tuple[str, ...] = tuple(dict.fromkeys(w.strip().lower() for w in words if w and w.strip()))
        self._exact = frozenset(self._words)

        # gram size → gram → [(word index, count)], plus per-word vector norms
        self._index: Dict[int, Dict[str, List[Tuple[int, int]]]] = {}
        self._norms: Dict[int, Tuple[float, ...]] = {}
        for size in range(GRAM_SIZE_LOWER, GRAM_SIZE_UPPER + 1):
            postings: Dict[str, List[Tuple[int, int]]] = {}
            norms = []
            for position, word in enumerate(self._words):
                counts = _gram_counts(word, size)
                norms.append(_norm(counts))
                for gram, count in counts.items():
                    postings.setdefault(gram, []).append((position, count))
            self._index[size] = postings
            self._norms[size] = tuple(norms)

        logger.info(f"Vocabulary store built: {len(self._words)} words")

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._exact

    def nearest_match(self, word: str) -> Optional[Tuple[str, float]]:
        """
        Find the closest vocabulary word.

        Args:
            word: Word to look up (case-insensitive)

        Returns:
            (candidate, similarity in [0, 1]) or None when nothing is close enough

        Examples:
            >>> store = VocabularyStore()
            >>> store.nearest_match("hostel")
            ('hostel', 1.0)
            >>> store.nearest_match("hostle")[0]
            'hostel'
        """
        if not word:
            return None

        lowered = word.lower()
        if lowered in self._exact:
            return lowered, 1.0

        for size in range(GRAM_SIZE_UPPER, GRAM_SIZE_LOWER - 1, -1):
            matches = self._score_candidates(lowered, size)
            if matches:
                return matches[0]

        return None

    def _score_candidates(self, lowered: str, size: int) -> List[Tuple[str, float]]:
        counts = _gram_counts(lowered, size)
        query_norm = _norm(counts)
        if query_norm == 0:
            return []

        dot_products: Dict[int, int] = {}
        postings = self._index[size]
        for gram, count in counts.items():
            for position, word_count in postings.get(gram, ()):
                dot_products[position] = dot_products.get(position, 0) + count * word_count

        norms = self._norms[size]
        cosine = [
            (dot / (query_norm * norms[position]), position)
            for position, dot in sorted(dot_products.items())
        ]
        # Stable sort keeps vocabulary order among equal scores
        cosine.sort(key=lambda item: item[0], reverse=True)

        rescored = [
            (self._words[position], Levenshtein.normalized_similarity(lowered, self._words[position]))
            for _, position in cosine[:CANDIDATE_POOL]
        ]
        rescored.sort(key=lambda item: item[1], reverse=True)

        return [match for match in rescored if match[1] >= MIN_MATCH_SCORE]
