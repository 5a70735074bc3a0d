"""Tests for the seo-keywords command-line interface."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from seo_keyword_engine.cli import main
from seo_keyword_engine.models import (
    AnalysisResult,
    Difficulty,
    KeywordSuggestion,
    OptimizationTip,
    TipType,
)


@pytest.fixture
def runner(monkeypatch) -> CliRunner:
    """CLI runner with enrichment disabled."""
    monkeypatch.delenv("TEXTRAZOR_API_KEY", raising=False)
    monkeypatch.delenv("SEO_API_KEY", raising=False)
    monkeypatch.delenv("SEO_FALLBACK_PROFILE", raising=False)
    return CliRunner()


@pytest.fixture
def article_file(tmp_path: Path, plain_paragraph: str) -> Path:
    path = tmp_path / "article.txt"
    path.write_text(plain_paragraph, encoding="utf-8")
    return path


class TestAnalyzeCommand:
    """Tests for `seo-keywords analyze`."""

    def test_json_output(self, runner, article_file):
        result = runner.invoke(main, ["analyze", str(article_file), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output)
        assert 0 <= data["seoScore"] <= 100
        assert data["optimizationTips"][-1]["title"] == "Optimize meta description"

    def test_table_output(self, runner, article_file):
        result = runner.invoke(main, ["analyze", str(article_file)])

        assert result.exit_code == 0
        assert "SEO score" in result.output
        assert "Optimization Tips" in result.output

    def test_missing_keywords_listed(self, runner, article_file):
        """Suggestions absent from the content are called out under the table."""
        canned = AnalysisResult(
            readability_score=70,
            seo_score=55,
            keyword_density=1.2,
            suggested_keywords=[
                KeywordSuggestion("small shops", "1.2K", Difficulty.LOW, inserted=True),
                KeywordSuggestion("cloud hosting", "3.4K", Difficulty.HIGH),
            ],
            optimization_tips=[
                OptimizationTip(TipType.INFO, "Optimize meta description", "Add one."),
            ],
        )
        with patch("seo_keyword_engine.cli.SeoAnalyzer.analyze", return_value=canned):
            result = runner.invoke(main, ["analyze", str(article_file)])

        assert result.exit_code == 0
        assert "Not yet in content: cloud hosting" in result.output

    def test_blank_file(self, runner, tmp_path):
        path = tmp_path / "blank.txt"
        path.write_text("   \n")

        result = runner.invoke(main, ["analyze", str(path)])

        assert result.exit_code == 1
        assert "Invalid content" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(main, ["analyze", str(tmp_path / "nope.txt")])
        assert result.exit_code != 0


class TestInsertCommand:
    """Tests for `seo-keywords insert`."""

    def test_insert_to_file(self, runner, article_file, tmp_path):
        output = tmp_path / "out.txt"
        result = runner.invoke(
            main,
            ["insert", str(article_file), "-k", "growth strategy", "-o", str(output)],
        )

        assert result.exit_code == 0
        assert "Inserted" in result.output
        assert "growth strategy" in output.read_text(encoding="utf-8").lower()

    def test_duplicate_reported(self, runner, article_file, tmp_path):
        output = tmp_path / "out.txt"
        result = runner.invoke(
            main,
            ["insert", str(article_file), "-k", "owners", "-o", str(output)],
        )

        assert result.exit_code == 0
        assert "Skipped" in result.output
        assert output.read_text(encoding="utf-8") == article_file.read_text(encoding="utf-8")

    def test_blank_keyword(self, runner, article_file):
        result = runner.invoke(main, ["insert", str(article_file), "-k", "  "])
        assert result.exit_code == 1


class TestBulkCommand:
    """Tests for `seo-keywords bulk`."""

    def test_keywords_from_options(self, runner, article_file, tmp_path):
        output = tmp_path / "out.txt"
        result = runner.invoke(
            main,
            ["bulk", str(article_file), "-k", "cloud hosting", "-k", "owners", "-o", str(output)],
        )

        assert result.exit_code == 0
        assert "Total inserted: 1" in result.output
        assert "cloud hosting" in output.read_text(encoding="utf-8")

    def test_keywords_file(self, runner, article_file, sample_keywords_txt, tmp_path):
        output = tmp_path / "out.txt"
        result = runner.invoke(
            main,
            ["bulk", str(article_file), "--keywords-file", str(sample_keywords_txt),
             "-o", str(output)],
        )

        assert result.exit_code == 0
        assert output.exists()

    def test_no_keywords(self, runner, article_file):
        result = runner.invoke(main, ["bulk", str(article_file)])

        assert result.exit_code == 1
        assert "at least one" in result.output

    def test_bad_keywords_file(self, runner, article_file, tmp_path):
        bad = tmp_path / "bad.csv"
        bad.write_text("volume\n10\n")

        result = runner.invoke(main, ["bulk", str(article_file), "--keywords-file", str(bad)])

        assert result.exit_code == 1
        assert "Keyword loading error" in result.output
