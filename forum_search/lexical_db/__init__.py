"""
Lexical database lookups for synonym expansion.

Usage:
    # Get lexical database (auto-configured from env):
    from forum_search.lexical_db import get_lexical_database

    lexical_db = get_lexical_database()
    entries = await lexical_db.lookup("hostel")

    # Or create a specific implementation:
    from forum_search.lexical_db import WordNetLexicalDatabase

    lexical_db = WordNetLexicalDatabase(auto_download=False)
"""

from typing import Optional

from ..config import EngineSettings
from .base import BaseLexicalDatabase, LexicalDatabaseError, LexicalEntry, NullLexicalDatabase
from .wordnet import WordNetLexicalDatabase
from .factory import LexicalDatabaseFactory


def get_lexical_database(
    settings: Optional[EngineSettings] = None,
    force_reload: bool = False,
) -> BaseLexicalDatabase:
    """
    Get configured lexical database instance (factory convenience function).

    Returns NullLexicalDatabase if lookups are disabled via LEXICAL_DB_ENABLED=false
    """
    return LexicalDatabaseFactory.create(settings=settings, force_reload=force_reload)


__all__ = [
    'BaseLexicalDatabase',
    'LexicalEntry',
    'LexicalDatabaseError',
    'NullLexicalDatabase',
    'WordNetLexicalDatabase',
    'LexicalDatabaseFactory',
    'get_lexical_database',
]
