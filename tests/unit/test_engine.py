"""
Unit tests for the SearchEngine facade (end-to-end over fakes).
"""

from unittest.mock import patch

import pytest

import forum_search.engine as engine_module
from forum_search import SearchEngine, get_engine
from forum_search.config import EngineSettings
from forum_search.lexical_db import NullLexicalDatabase, WordNetLexicalDatabase

from fakes import TEST_LEXICON

pytestmark = pytest.mark.unit


class TestSearchEngine:
    """Test the search handler's view of the engine"""

    def test_text_helpers(self, engine):
        assert engine.tokenize("Hostle WiFi?") == ["hostel", "wifi"]
        assert engine.stem("solved") == "solv"
        assert engine.correct_spelling("helo") == "help"

    @pytest.mark.asyncio
    async def test_expand_synonyms(self, engine):
        expanded = await engine.expand_synonyms("hostel")

        assert "dormitory" in expanded
        assert "youth hostel" in expanded

    @pytest.mark.asyncio
    async def test_expand_query_for_search(self, engine):
        terms = await engine.expand_query_for_search("Hostle wifi not working")

        assert terms[0] == "hostle wifi not working"
        assert "hostel" in terms
        assert "dormitory" in terms
        assert "youth hostel" in terms
        assert len(terms) <= engine.settings.max_expanded_terms

    def test_analyze_sentiment(self, engine):
        assert engine.analyze_sentiment("").category == "unknown"
        assert engine.analyze_sentiment("solved").category == "solution"

    def test_analyze_query_and_strategy(self, engine):
        analysis = engine.analyze_query("How do I fix the wifi?")
        strategy = engine.get_sorting_strategy(analysis)

        assert analysis.intent == "find_answers"
        assert strategy.boost_solved is True
        assert strategy.min_upvotes == 1

    @pytest.mark.asyncio
    async def test_search_flow(self, engine):
        """Expand, score, summarize, boost: the full per-request flow"""
        query = "wifi not working in hostel"
        terms = await engine.expand_query_for_search(query)
        analysis = engine.analyze_query(query)

        solved_post = {
            "id": "p1",
            "title": "Hostel wifi fixed",
            "content": "Solved, thanks!",
            "tags": ["wifi"],
            "upvotes": 8,
        }
        open_post = {
            "id": "p2",
            "title": "Hostel wifi",
            "content": "error again, still broken",
            "tags": [],
            "upvotes": 0,
        }

        scores = {}
        for post in (solved_post, open_post):
            text_score = engine.score_document_match(post, terms)
            summary = engine.summarize_document(post)
            scores[post["id"]] = engine.boost_by_intent({**post, "textScore": text_score}, analysis, summary)

        assert analysis.intent == "find_solutions"
        assert engine.summarize_document(solved_post).category == "solution"
        assert scores["p1"] > scores["p2"]

    def test_comment_scores_lower(self, engine):
        document = {"title": "", "content": "wifi in the hostel", "tags": [], "upvotes": 2}

        post_score = engine.score_document_match(document, ["wifi"])
        comment_score = engine.score_document_match(document, ["wifi"], is_comment=True)

        assert comment_score == pytest.approx(post_score * 0.7)

    def test_settings_flow_into_expander(self, test_settings, fake_lexical_db):
        engine = SearchEngine(settings=test_settings, lexical_db=fake_lexical_db, lexicon=TEST_LEXICON)

        assert engine.expander.lookup_timeout == pytest.approx(test_settings.lookup_timeout)
        assert engine.expander.max_terms == test_settings.max_expanded_terms
        assert engine.expander.lexical_db is fake_lexical_db

    def test_lexical_db_from_factory(self, test_settings):
        engine = SearchEngine(settings=test_settings, lexicon=TEST_LEXICON)
        assert isinstance(engine.expander.lexical_db, NullLexicalDatabase)


class TestGetEngine:
    """Test process-wide engine construction"""

    @pytest.fixture(autouse=True)
    def reset_engine(self, monkeypatch):
        monkeypatch.setattr(engine_module, "_engine", None)
        monkeypatch.setenv("LEXICAL_DB_ENABLED", "false")
        monkeypatch.setenv("NLTK_AUTO_DOWNLOAD", "false")

    def test_singleton(self):
        with patch("forum_search.sentiment.scorer.load_polarity_lexicon", return_value=TEST_LEXICON) as mock_load:
            first = get_engine()
            second = get_engine()

        assert first is second
        mock_load.assert_called_once_with(auto_download=False)

    def test_force_reload(self):
        with patch("forum_search.sentiment.scorer.load_polarity_lexicon", return_value=TEST_LEXICON):
            first = get_engine()
            second = get_engine(force_reload=True)

        assert first is not second
        assert engine_module._engine is second

    def test_reload_after_environment_change(self, monkeypatch):
        monkeypatch.setenv("LEXICAL_DB_ENABLED", "true")
        monkeypatch.setenv("LEXICAL_DB_TYPE", "wordnet")

        with patch("forum_search.sentiment.scorer.load_polarity_lexicon", return_value=TEST_LEXICON):
            first = get_engine()
            monkeypatch.setenv("LEXICAL_DB_ENABLED", "false")
            second = get_engine(force_reload=True)

        assert isinstance(first.expander.lexical_db, WordNetLexicalDatabase)
        assert isinstance(second.expander.lexical_db, NullLexicalDatabase)

    def test_engines_with_different_settings(self):
        enabled = SearchEngine(
            settings=EngineSettings(lexical_db_type="wordnet", nltk_auto_download=False),
            lexicon=TEST_LEXICON,
        )
        disabled = SearchEngine(
            settings=EngineSettings(lexical_db_enabled=False, nltk_auto_download=False),
            lexicon=TEST_LEXICON,
        )

        assert isinstance(enabled.expander.lexical_db, WordNetLexicalDatabase)
        assert isinstance(disabled.expander.lexical_db, NullLexicalDatabase)
