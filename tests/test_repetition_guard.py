"""Tests for repetition detection and cleanup."""

from seo_keyword_engine.repetition_guard import (
    cleanup_repetitions,
    count_word_occurrences,
    has_immediate_repetition,
    keyword_present,
)


class TestCleanupRepetitions:
    """Tests for the post-insertion artifact scrubber."""

    def test_repeated_word(self):
        assert cleanup_repetitions("The promotion promotion works.") == "The promotion works."

    def test_repeated_word_case_insensitive(self):
        assert cleanup_repetitions("Growth growth matters.") == "Growth matters."

    def test_repeated_two_word_phrase(self):
        text = "We offer fast shipping fast shipping today."
        assert cleanup_repetitions(text) == "We offer fast shipping today."

    def test_triple_repetition(self):
        assert cleanup_repetitions("sales sales sales rise") == "sales rise"

    def test_compound_after_pattern(self):
        text = "promotion, promotion especially after promotion especially especially"
        assert cleanup_repetitions(text) == "promotion especially"

    def test_repeated_discourse_marker(self):
        assert cleanup_repetitions("Prices rise during during winter.") == "Prices rise during winter."

    def test_comma_runs(self):
        assert cleanup_repetitions("apples,, pears") == "apples, pears"

    def test_whitespace_collapsed_and_trimmed(self):
        assert cleanup_repetitions("  one  two\n\nthree ") == "one two three"

    def test_clean_text_unchanged(self):
        text = "Good content reads naturally."
        assert cleanup_repetitions(text) == text

    def test_partial_word_not_collapsed(self):
        """Word boundaries stop 'art artist' from collapsing."""
        assert cleanup_repetitions("art artist") == "art artist"


class TestOccurrenceHelpers:
    """Tests for occurrence counting and presence checks."""

    def test_count_word_boundary(self):
        assert count_word_occurrences("Growth, growth and regrowth.", "growth") == 2

    def test_count_phrase(self):
        text = "Content marketing works. Good content marketing wins."
        assert count_word_occurrences(text, "content marketing") == 2

    def test_count_escapes_special_characters(self):
        assert count_word_occurrences("We use c.a.t tools", "c.a.t") == 1
        assert count_word_occurrences("We use cat tools", "c.a.t") == 0

    def test_count_terms_with_edge_punctuation(self):
        """Terms like C++ and .NET match as whole words."""
        text = "We write C++ and .NET services, not ASP.NET or C++x."
        assert count_word_occurrences(text, "C++") == 1
        assert count_word_occurrences(text, ".net") == 1
        assert count_word_occurrences("Teams love C# today.", "c#") == 1

    def test_count_blank_term(self):
        assert count_word_occurrences("anything", "  ") == 0

    def test_keyword_present_phrase_substring(self):
        assert keyword_present("Content Marketing works.", "content marketing")

    def test_keyword_present_single_word_boundary(self):
        assert not keyword_present("Artificial intelligence", "art")
        assert keyword_present("Modern art sells.", "Art")

    def test_keyword_present_blank(self):
        assert not keyword_present("anything", "")


class TestHasImmediateRepetition:
    """Tests for has_immediate_repetition."""

    def test_detects_doubled_word(self):
        assert has_immediate_repetition("Plan growth growth now.", "growth")

    def test_separated_words_not_flagged(self):
        assert not has_immediate_repetition("growth plans need growth", "growth")

    def test_doubled_term_with_edge_punctuation(self):
        assert has_immediate_repetition("We use C++ C++ daily.", "C++")
        assert not has_immediate_repetition("We use C++ and C++ daily.", "C++")

    def test_blank_word(self):
        assert not has_immediate_repetition("a a", "")
