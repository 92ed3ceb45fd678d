"""
Unit tests for SpellingCorrector.
"""

import pytest

from forum_search.lexicon import SpellingCorrector, VocabularyStore

pytestmark = pytest.mark.unit


class TestSpellingCorrector:
    """Test correction rules against the campus vocabulary"""

    def test_fuzzy_correction(self, corrector):
        assert corrector.correct("helo") == "help"
        assert corrector.correct("dormitry") == "dormitory"

    def test_levenshtein_fallback(self, corrector):
        """Transposition fails the fuzzy threshold but is within 2 edits"""
        assert corrector.correct("hostle") == "hostel"

    def test_exact_word_lowercased(self, corrector):
        assert corrector.correct("Hostel") == "hostel"

    def test_unknown_word_lowercased(self, corrector):
        assert corrector.correct("xyz123") == "xyz123"
        assert corrector.correct("XYZ123") == "xyz123"

    @pytest.mark.parametrize("word", ["", "a", "Hi", "OK"])
    def test_short_words_unchanged(self, corrector, word):
        """Words under 3 characters are returned as given (case kept)"""
        assert corrector.correct(word) == word

    @pytest.mark.parametrize("word", ["the", "how", "not", "can", "fix", "great", "broken", "thanks"])
    def test_common_words_not_mangled(self, corrector, word):
        """No vocabulary word is close enough to steal these"""
        assert corrector.correct(word) == word

    def test_correction_is_in_vocabulary_or_lowercased_input(self, corrector, vocabulary):
        for word in ["Helo", "hostle", "clasroom", "libary", "qwerty", "Exm"]:
            corrected = corrector.correct(word)
            assert corrected in vocabulary or corrected == word.lower()

    def test_fallback_respects_length_ratio(self):
        """Distance must stay below ceil(0.4 × length)"""
        corrector = SpellingCorrector(VocabularyStore(["abcd"]))
        # 4 letters → ceil(1.6) = 2, so only distance 1 is accepted
        assert corrector.correct("abxy") == "abxy"

    def test_fallback_ties_keep_vocabulary_order(self):
        corrector = SpellingCorrector(VocabularyStore(["abcdef", "abcdxy"]), similarity_threshold=0.99)
        # Both at distance 2 from "abcdzz"; the earlier word wins
        assert corrector.correct("abcdzz") == "abcdef"

    def test_deterministic(self, corrector):
        assert [corrector.correct("hostle") for _ in range(5)] == ["hostel"] * 5
