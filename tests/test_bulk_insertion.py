"""Tests for ordered bulk keyword insertion."""

from unittest.mock import patch

from seo_keyword_engine.insertion import insert_keywords_bulk


class TestBulkInsertion:
    """Tests for insert_keywords_bulk."""

    def test_overlapping_keywords_checked_against_updated_content(self, plain_paragraph):
        """The second keyword sees the content the first one produced."""
        result = insert_keywords_bulk(plain_paragraph, ["growth", "growth strategy"])

        assert result.inserted[0] == "growth"
        assert "growth" in result.content.lower()
        assert set(result.inserted) | set(result.skipped) == {"growth", "growth strategy"}

    def test_partition_preserves_request_order(self, plain_paragraph):
        keywords = ["growth", "owners", "cloud hosting", "budget tracking"]
        result = insert_keywords_bulk(plain_paragraph, keywords)

        assert "owners" in result.skipped
        assert not set(result.inserted) & set(result.skipped)
        assert sorted(result.inserted + result.skipped) == sorted(keywords)
        assert result.inserted == [kw for kw in keywords if kw in result.inserted]
        assert result.skipped == [kw for kw in keywords if kw in result.skipped]
        assert result.total_inserted == len(result.inserted)

    def test_repeated_keyword_skipped_second_time(self, plain_paragraph):
        result = insert_keywords_bulk(plain_paragraph, ["cloud hosting", "cloud hosting"])

        assert result.inserted == ["cloud hosting"]
        assert result.skipped == ["cloud hosting"]
        assert result.content.lower().count("cloud hosting") == 1

    def test_repeated_punctuated_keyword_skipped(self, plain_paragraph):
        result = insert_keywords_bulk(plain_paragraph, ["C#", "C#"])

        assert result.inserted == ["C#"]
        assert result.skipped == ["C#"]
        assert result.content.count("C#") == 1

    def test_empty_keyword_skipped(self, plain_paragraph):
        result = insert_keywords_bulk(plain_paragraph, ["", "cloud hosting"])

        assert result.skipped == [""]
        assert result.inserted == ["cloud hosting"]

    def test_all_present_leaves_content_clean(self):
        content = "Growth needs a plan.  Owners   review it."
        result = insert_keywords_bulk(content, ["growth", "owners"])

        assert result.inserted == []
        assert result.content == "Growth needs a plan. Owners review it."

    def test_doubled_first_word_skipped(self, plain_paragraph):
        """A splice that doubles the keyword's first word is not committed."""
        with patch(
            "seo_keyword_engine.insertion.splice_keyword",
            return_value=plain_paragraph + " growth growth target.",
        ):
            result = insert_keywords_bulk(plain_paragraph, ["growth target"])

        assert result.skipped == ["growth target"]
        assert result.content == plain_paragraph

    def test_noop_splice_skipped(self, plain_paragraph):
        with patch(
            "seo_keyword_engine.insertion.splice_keyword",
            return_value=plain_paragraph,
        ):
            result = insert_keywords_bulk(plain_paragraph, ["cloud hosting"])

        assert result.skipped == ["cloud hosting"]
