"""
Vocabulary-driven spelling correction and synonym expansion.

Components:
- vocabulary: fixed domain word list + fuzzy matcher
- spelling: per-token correction (fuzzy match, then edit-distance fallback)
- synonyms: static manual synonym table
- expander: per-word and per-query expansion with time-bounded external lookups
"""

from .vocabulary import VOCABULARY, VocabularyStore
from .spelling import SpellingCorrector
from .synonyms import MANUAL_SYNONYMS
from .expander import SynonymExpander

__all__ = [
    "VOCABULARY",
    "VocabularyStore",
    "SpellingCorrector",
    "MANUAL_SYNONYMS",
    "SynonymExpander",
]
