"""
Factory to create lexical database instances based on configuration.
"""

from typing import Optional
import logging

from ..config import EngineSettings
from .base import BaseLexicalDatabase, NullLexicalDatabase
from .wordnet import WordNetLexicalDatabase

logger = logging.getLogger(__name__)


class LexicalDatabaseFactory:
    """Factory to create lexical database instances based on configuration."""

    _instance: Optional[BaseLexicalDatabase] = None  # Singleton cache
    _settings: Optional[EngineSettings] = None  # Settings the cached instance was built from

    @classmethod
    def create(cls, settings: Optional[EngineSettings] = None, force_reload: bool = False) -> BaseLexicalDatabase:
        """
        Create lexical database based on settings (environment by default).

        Config (env vars):
            LEXICAL_DB_ENABLED: "false" to disable external lookups
            LEXICAL_DB_TYPE: "wordnet" | "none" (default: wordnet)

        Supported types:
            - wordnet: NLTK WordNet corpus (local, downloaded once)
            - none: no external synonyms, manual table only

        The cached instance is reused only while the (resolved) settings are
        equal to the ones it was built from.

        Args:
            settings: Engine settings; read from the environment when omitted
            force_reload: If True, recreate instance even if cached

        Returns:
            Lexical database instance (NullLexicalDatabase when disabled)
        """
        if settings is None:
            settings = EngineSettings.from_env()

        # Return cached instance
        if cls._instance is not None and not force_reload and settings == cls._settings:
            logger.debug(f"Returning cached lexical database instance: {cls._instance}")
            return cls._instance

        logger.info(
            f"Lexical database config: enabled={settings.lexical_db_enabled}, type={settings.lexical_db_type}"
        )

        db_type = settings.lexical_db_type
        if not settings.lexical_db_enabled:
            instance = NullLexicalDatabase()
        elif db_type == "wordnet":
            logger.info("Creating WordNet lexical database")
            instance = WordNetLexicalDatabase(auto_download=settings.nltk_auto_download)
        elif db_type == "none":
            instance = NullLexicalDatabase()
        else:
            raise ValueError(
                f"Unknown lexical database type: {db_type}. "
                f"Valid options: wordnet, none"
            )

        cls._instance = instance
        cls._settings = settings
        return cls._instance

    @classmethod
    def cleanup(cls):
        """Cleanup cached lexical database instance."""
        if cls._instance is not None:
            logger.info("Cleaning up lexical database instance")
            cls._instance.close()
            cls._instance = None
        cls._settings = None
