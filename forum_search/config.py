"""
Engine configuration from environment variables.

Variables (all optional):
    LEXICAL_DB_ENABLED: "true" to query the external lexical database (default: true)
    LEXICAL_DB_TYPE: "wordnet" | "none" (default: wordnet)
    SYNONYM_LOOKUP_TIMEOUT_MS: Deadline per external lookup (default: 3000)
    MAX_EXTERNAL_SYNONYMS: Synonyms kept per external lookup (default: 15)
    MAX_EXPANDED_TERMS: Terms kept per expanded query (default: 100)
    NLTK_AUTO_DOWNLOAD: "true" to fetch missing NLTK data on first use (default: true)
    LOG_LEVEL: Console log level (default: INFO)
    LOG_FILE: Base path of the rotating log file (default: logs/forum-search.log)

Local development reads .env.local first (highest priority), then .env.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent

_TRUE_VALUES = ("1", "true", "yes", "on")


def load_environment(project_root: Path = PROJECT_ROOT) -> Optional[Path]:
    """
    Load .env.local (or .env as fallback) into os.environ.

    Variables already set in the process environment win.

    Returns:
        Path of the file that was loaded, or None when neither exists
    """
    env_local = project_root / ".env.local"
    env_file = project_root / ".env"

    for candidate in (env_local, env_file):
        if candidate.exists():
            logger.info(f"Loading environment from: {candidate}")
            load_dotenv(candidate, override=False)
            return candidate

    logger.debug("No .env.local or .env file found - using system environment variables only")
    return None


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in _TRUE_VALUES


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}")


@dataclass(frozen=True)
class EngineSettings:
    """Immutable runtime settings shared by every engine component"""
    lexical_db_enabled: bool = True
    lexical_db_type: str = "wordnet"
    lookup_timeout_ms: int = 3000
    max_external_synonyms: int = 15
    max_expanded_terms: int = 100
    nltk_auto_download: bool = True
    log_level: str = "INFO"
    log_file: str = "logs/forum-search.log"

    def __post_init__(self):
        if self.lookup_timeout_ms <= 0:
            raise ValueError("SYNONYM_LOOKUP_TIMEOUT_MS must be positive")
        if self.max_external_synonyms <= 0:
            raise ValueError("MAX_EXTERNAL_SYNONYMS must be positive")
        if self.max_expanded_terms <= 0:
            raise ValueError("MAX_EXPANDED_TERMS must be positive")

    @property
    def lookup_timeout(self) -> float:
        """Lookup deadline in seconds"""
        return self.lookup_timeout_ms / 1000

    @classmethod
    def from_env(cls) -> "EngineSettings":
        """Build settings from os.environ, falling back to defaults."""
        defaults = cls()
        return cls(
            lexical_db_enabled=_env_bool("LEXICAL_DB_ENABLED", defaults.lexical_db_enabled),
            lexical_db_type=(os.getenv("LEXICAL_DB_TYPE") or defaults.lexical_db_type).strip().lower(),
            lookup_timeout_ms=_env_int("SYNONYM_LOOKUP_TIMEOUT_MS", defaults.lookup_timeout_ms),
            max_external_synonyms=_env_int("MAX_EXTERNAL_SYNONYMS", defaults.max_external_synonyms),
            max_expanded_terms=_env_int("MAX_EXPANDED_TERMS", defaults.max_expanded_terms),
            nltk_auto_download=_env_bool("NLTK_AUTO_DOWNLOAD", defaults.nltk_auto_download),
            log_level=(os.getenv("LOG_LEVEL") or defaults.log_level).strip().upper(),
            log_file=os.getenv("LOG_FILE") or defaults.log_file,
        )
