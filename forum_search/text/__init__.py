"""
Text normalization shared by query expansion and sentiment scoring.

Components:
- tokenizer: whitespace split, punctuation stripping, per-token correction
- stemmer: Porter stemming (NLTK)
"""

from .tokenizer import tokenize
from .stemmer import stem

__all__ = [
    "tokenize",
    "stem",
]
