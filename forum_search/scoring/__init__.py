"""
Per-document relevance scoring.

Components:
- relevance: field-weighted term match score and intent-aware boost
"""

from .relevance import RelevanceScorer

__all__ = [
    "RelevanceScorer",
]
