"""
Abstract base class for lexical database lookups.

All lexical databases must implement this interface to be swappable.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class LexicalEntry:
    """Single lookup result (one sense of the word)"""
    synonyms: Tuple[str, ...] = ()  # Raw synonym phrases, e.g. "living_quarters"
    lemma: Optional[str] = None     # Head word of the sense
    gloss: Optional[str] = None     # Definition; examples appear in double quotes


class LexicalDatabaseError(RuntimeError):
    """Backing resource of a lexical database is unavailable"""


class BaseLexicalDatabase(ABC):
    """
    Abstract base class for lexical database implementations.

    Lookups are async and may be slow; callers bound them with a deadline.
    """

    @abstractmethod
    async def lookup(self, word: str) -> List[LexicalEntry]:
        """
        Look up all senses of a word.

        Args:
            word: Lower-cased word

        Returns:
            List of LexicalEntry (empty when the word is unknown)

        Raises:
            LexicalDatabaseError: backing resource cannot be loaded
        """
        pass

    @abstractmethod
    def get_info(self) -> dict:
        """
        Get information about the lexical database.

        Returns:
            Dict with keys: name, type, loaded
        """
        pass

    def close(self):
        """Optional cleanup (release corpora, close clients, etc.)"""
        pass


class NullLexicalDatabase(BaseLexicalDatabase):
    """Lexical database that knows no words; used when external lookups are disabled"""

    async def lookup(self, word: str) -> List[LexicalEntry]:
        return []

    def get_info(self) -> dict:
        return {"name": "none", "type": "null", "loaded": True}
