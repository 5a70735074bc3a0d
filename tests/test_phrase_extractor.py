"""Tests for frequency-based keyword phrase extraction."""

from seo_keyword_engine.lexicon import GENERIC_KEYWORDS
from seo_keyword_engine.phrase_extractor import (
    MAX_SUGGESTIONS,
    extract_common_phrases,
    generate_contextual_keywords,
    tokenize,
)


class TestTokenize:
    """Tests for word tokenization."""

    def test_lowercases_and_strips_punctuation(self):
        assert tokenize("Hello, World! It's 2024.") == ["hello", "world", "it", "s", "2024"]


class TestExtractCommonPhrases:
    """Tests for extract_common_phrases."""

    def test_most_frequent_phrase_first(self):
        """Repeated two-word phrases rank ahead of everything else."""
        content = (
            "Email marketing drives sales. Email marketing builds trust. "
            "Email marketing works."
        )
        phrases = extract_common_phrases(content)
        assert phrases[0] == "email marketing"

    def test_result_size_and_uniqueness(self, sample_article):
        """Between 1 and 8 suggestions, unique case-insensitively."""
        phrases = extract_common_phrases(sample_article)
        assert 1 <= len(phrases) <= MAX_SUGGESTIONS
        lowered = [p.lower() for p in phrases]
        assert len(lowered) == len(set(lowered))

    def test_empty_content_uses_generic_keywords(self):
        """Nothing to extract falls back to the generic list."""
        assert extract_common_phrases("") == list(GENERIC_KEYWORDS[:3])

    def test_stop_words_only_uses_generic_keywords(self):
        assert extract_common_phrases("the and of to it is") == list(GENERIC_KEYWORDS[:3])

    def test_short_content_falls_back_to_frequent_words(self):
        """Words too short for the thresholds still beat the generic list."""
        phrases = extract_common_phrases("Cats nap. Cats eat. Dogs nap.")
        assert phrases[0] in ("cats", "nap")
        assert "content optimization" not in phrases

    def test_digits_excluded_from_frequency_fallback(self):
        phrases = extract_common_phrases("7 7 7 cats")
        assert "7" not in phrases
        assert phrases == ["cats"]

    def test_generic_verbs_excluded_from_phrases(self):
        """Phrases containing generic verbs like 'making' are dropped."""
        content = "Making money online. Making money online. Making money online."
        phrases = extract_common_phrases(content)
        assert all("making" not in p.split() for p in phrases if " " in p)
        assert "money online" in phrases

    def test_contextual_keywords_appended(self):
        """Domain trigger words add topic keywords after extracted terms."""
        content = "Great marketing wins."
        phrases = extract_common_phrases(content)
        assert "brand awareness" in phrases
        assert "customer engagement" in phrases


class TestGenerateContextualKeywords:
    """Tests for topic keyword generation."""

    def test_triggers_in_topic_order(self):
        keywords = generate_contextual_keywords("Software for every business.")
        assert keywords == ["digital solutions", "technology innovation", "business strategy"]

    def test_no_triggers(self):
        assert generate_contextual_keywords("Cats nap in the sun.") == []
