"""Unit test configuration - fakes for isolated testing"""

import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env.local FIRST (before any engine settings are read)
env_file = Path(__file__).parent.parent.parent / ".env.local"
if env_file.exists():
    load_dotenv(env_file)

# Unit tests never touch the network: no corpus downloads, no WordNet by default
os.environ.setdefault("NLTK_AUTO_DOWNLOAD", "false")
os.environ.setdefault("LEXICAL_DB_ENABLED", "false")

from forum_search.config import EngineSettings
from forum_search.engine import SearchEngine
from forum_search.lexical_db import LexicalDatabaseFactory
from forum_search.lexicon import SpellingCorrector, VocabularyStore
from forum_search.sentiment import SentimentScorer
from forum_search.text import tokenize

from fakes import HOSTEL_ENTRIES, TEST_LEXICON, FakeLexicalDatabase


@pytest.fixture(autouse=True)
def reset_lexical_db_factory():
    """Reset factory singleton around each test"""
    LexicalDatabaseFactory._instance = None
    LexicalDatabaseFactory._settings = None
    yield
    LexicalDatabaseFactory.cleanup()


@pytest.fixture(scope="session")
def vocabulary():
    return VocabularyStore()


@pytest.fixture(scope="session")
def corrector(vocabulary):
    return SpellingCorrector(vocabulary)


@pytest.fixture
def sentiment_scorer(corrector):
    return SentimentScorer(
        lambda text: tokenize(text, correct=corrector.correct),
        lexicon=TEST_LEXICON,
    )


@pytest.fixture
def fake_lexical_db():
    return FakeLexicalDatabase({"hostel": HOSTEL_ENTRIES})


@pytest.fixture
def test_settings():
    return EngineSettings(lexical_db_enabled=False, nltk_auto_download=False)


@pytest.fixture
def engine(test_settings, fake_lexical_db):
    return SearchEngine(settings=test_settings, lexical_db=fake_lexical_db, lexicon=TEST_LEXICON)
