"""Tests for syllable estimation and readability scoring."""

import pytest

from seo_keyword_engine.readability import (
    _sentence_variety_bonus,
    _transition_bonus,
    calculate_readability,
    estimate_syllables,
    round_half_up,
    split_readability_sentences,
)


class TestEstimateSyllables:
    """Tests for the vowel-run syllable heuristic."""

    @pytest.mark.parametrize("word", ["a", "the", "cat", "Sky"])
    def test_short_words_are_one_syllable(self, word):
        """Words of three letters or fewer count as one syllable."""
        assert estimate_syllables(word) == 1

    def test_counts_vowel_runs(self):
        """Each maximal vowel run is one syllable."""
        assert estimate_syllables("table") == 2
        assert estimate_syllables("hello") == 2
        assert estimate_syllables("beautiful") == 3

    def test_silent_endings_are_dropped(self):
        """Trailing es/ed/e after a consonant do not add a syllable."""
        assert estimate_syllables("characterizes") == 4
        assert estimate_syllables("create") == 1

    def test_leading_y_is_ignored(self):
        """A leading y is treated as a consonant."""
        assert estimate_syllables("yellow") == 2

    def test_case_insensitive(self):
        """Uppercase input gives the same count."""
        assert estimate_syllables("BEAUTIFUL") == estimate_syllables("beautiful")

    @pytest.mark.parametrize("word", ["rhythm", "bcdfgh", "psst!!"])
    def test_never_below_one(self, word):
        """Words without vowel runs still count as one syllable."""
        assert estimate_syllables(word) >= 1


class TestRoundHalfUp:
    """Tests for display rounding."""

    def test_half_rounds_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(0.25, 1) == 0.3

    def test_below_half_rounds_down(self):
        assert round_half_up(2.49) == 2


class TestCalculateReadability:
    """Tests for the adjusted Flesch Reading Ease score."""

    def test_score_is_int_in_range(self, sample_article):
        """Scores are integers between 0 and 100."""
        score = calculate_readability(sample_article)
        assert isinstance(score, int)
        assert 0 <= score <= 100

    def test_empty_content_is_bounded(self):
        """Empty input does not divide by zero."""
        assert calculate_readability("") == 100

    def test_short_dense_content_gets_floor(self):
        """Content under 100 words never scores below 40."""
        text = "Incomprehensibility characterizes institutionalization."
        assert calculate_readability(text) == 40

    def test_simple_text_beats_dense_text(self):
        """Short words and sentences read more easily."""
        simple = "The cat sat. The dog ran. We had fun."
        dense = "Incomprehensibility characterizes institutionalization."
        assert calculate_readability(simple) > calculate_readability(dense)

    def test_long_dense_content_can_hit_zero(self):
        """Content over 100 words gets no floor."""
        text = " ".join(["institutionalization"] * 120) + "."
        assert calculate_readability(text) == 0


class TestReadabilityBonuses:
    """Tests for sentence variety and transition adjustments."""

    def test_split_sentences_drops_blanks(self):
        assert split_readability_sentences("One. Two!! Three?") == ["One", "Two", "Three"]

    def test_variety_bonus_for_moderate_spread(self):
        """A spread of 5-15 words between sentences earns five points."""
        sentences = ["Short one here", "This sentence is a fair bit longer than the first one is"]
        assert _sentence_variety_bonus(sentences) == 5

    def test_no_variety_bonus_for_uniform_sentences(self):
        sentences = ["Same length here", "Same length there"]
        assert _sentence_variety_bonus(sentences) == 0

    def test_no_variety_bonus_for_single_sentence(self):
        assert _sentence_variety_bonus(["Only one sentence here"]) == 0

    def test_transition_bonus_per_word(self):
        """Two points per distinct transition word."""
        assert _transition_bonus("However, it works. Therefore we ship.") == 4

    def test_transition_bonus_is_capped(self):
        text = "however moreover furthermore additionally therefore consequently"
        assert _transition_bonus(text) == 8
