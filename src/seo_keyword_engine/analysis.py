"""
Content SEO analysis module.

This module analyzes content to:
- Suggest keywords (local phrase extraction plus optional enrichment)
- Measure keyword density against the suggested terms
- Compute a composite 0-100 SEO score and readability score
- Produce ordered optimization tips
"""

import logging
import re
from collections import Counter
from typing import Optional

from .config import EngineConfig
from .enrichment import EnrichmentError, EnrichmentResult, TextRazorClient
from .keyword_metrics import SyntheticKeywordMetrics
from .lexicon import STOP_WORDS
from .models import (
    AnalysisResult,
    ContentStats,
    KeywordSuggestion,
    OptimizationTip,
    SeoScoreBreakdown,
    TipType,
)
from .phrase_extractor import extract_common_phrases, tokenize
from .readability import calculate_readability, round_half_up, split_readability_sentences
from .repetition_guard import count_word_occurrences, keyword_present

logger = logging.getLogger(__name__)

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
_MARKDOWN_HEADING = re.compile(r"^\s*#{1,6}\s", re.MULTILINE)
_LIST_MARKER = re.compile(r"^\s*(?:[-*•]|\d+[.)])\s+", re.MULTILINE)

REDUCED_SUGGESTION_LIMIT = 5
DEGRADED_DATA = {"error": "API unavailable, using fallback analysis"}


class ContentValidationError(ValueError):
    """Raised when content submitted for analysis is empty."""
    pass


# =============================================================================
# Statistics
# =============================================================================

def _has_heading_lines(content: str) -> bool:
    """Markdown headings, or a short standalone line without end punctuation."""
    if _MARKDOWN_HEADING.search(content):
        return True

    lines = [line.strip() for line in content.splitlines() if line.strip()]
    if len(lines) < 2:
        return False
    return any(
        5 < len(line) < 60 and not line.endswith((".", "!", "?"))
        for line in lines
    )


def count_repeated_words(content: str) -> int:
    """Count distinct content words (> 4 chars, not stop words) used at least twice."""
    counts = Counter(
        w for w in tokenize(content) if len(w) > 4 and w not in STOP_WORDS
    )
    return sum(1 for count in counts.values() if count >= 2)


def calculate_keyword_density(content: str, terms: list[str]) -> tuple[int, float]:
    """
    Count every occurrence of every term and derive density.

    Args:
        content: Text to scan.
        terms: Keyword terms.

    Returns:
        Tuple of (total_occurrences, density_percent rounded to one decimal).
    """
    word_count = len(content.split())
    occurrences = sum(count_word_occurrences(content, term) for term in terms)
    density = round_half_up(occurrences / max(word_count, 1) * 100, 1)
    return occurrences, density


def compute_content_stats(content: str, terms: list[str]) -> ContentStats:
    """
    Gather the statistics the score and tips are built from.

    Args:
        content: Text to analyze.
        terms: Suggested keyword terms.

    Returns:
        ContentStats for the content.
    """
    words = content.split()
    paragraphs = [p for p in _PARAGRAPH_BREAK.split(content) if p.strip()]
    avg_paragraph_length = (
        sum(len(p.split()) for p in paragraphs) / max(len(paragraphs), 1)
    )
    occurrences, density = calculate_keyword_density(content, terms)

    return ContentStats(
        word_count=len(words),
        sentence_count=len(split_readability_sentences(content)),
        paragraph_count=len(paragraphs),
        avg_paragraph_length=avg_paragraph_length,
        keyword_occurrences=occurrences,
        keyword_density=density,
        repeated_word_count=count_repeated_words(content),
        has_headings=_has_heading_lines(content),
        has_lists=bool(_LIST_MARKER.search(content)),
        has_links="http" in content or "www." in content,
    )


# =============================================================================
# Scoring
# =============================================================================

def _length_points(word_count: int) -> int:
    if 300 <= word_count <= 2000:
        return 25
    if 150 <= word_count < 300:
        return 20
    if 50 <= word_count < 150:
        return 15
    if word_count < 50:
        return 5
    return 15


def _paragraph_points(stats: ContentStats) -> int:
    if stats.has_good_paragraphs:
        return 20
    if stats.paragraph_count >= 1 and stats.avg_paragraph_length <= 200:
        return 15
    return 8


def _density_points(density: float) -> int:
    if 1.5 <= density <= 4:
        return 20
    if 1 <= density < 1.5:
        return 15
    if 0.5 <= density < 1:
        return 10
    if 4 < density <= 6:
        return 12
    # Stuffing and near-zero density score the same
    return 5


def _readability_points(readability: int) -> int:
    if readability >= 70:
        return 20
    if readability >= 50:
        return 18
    if readability >= 35:
        return 15
    if readability >= 20:
        return 12
    return 8


def score_content(stats: ContentStats, readability: int) -> SeoScoreBreakdown:
    """
    Compute the composite SEO score from content statistics.

    Args:
        stats: Statistics from compute_content_stats.
        readability: Readability score (0-100).

    Returns:
        SeoScoreBreakdown; ``total`` is the clamped 0-100 score.
    """
    occurrences = stats.keyword_occurrences
    density = stats.keyword_density
    repeated = stats.repeated_word_count

    keyword_points = (
        _density_points(density)
        + min(occurrences * 3, 15)
        + min(repeated * 2, 10)
    )

    readability_points = _readability_points(readability)
    # Rewards keyword presence that has not cost readability
    if occurrences >= 2 and readability >= 50:
        readability_points += 5

    structure_points = sum(
        5 for signal in (stats.has_headings, stats.has_lists, stats.sentence_count > 1)
        if signal
    )

    bonus = 0
    if occurrences >= 3:
        bonus += 5
    if 1.5 <= density <= 3.5:
        bonus += 5
    if repeated >= 2:
        bonus += 3

    return SeoScoreBreakdown(
        length=_length_points(stats.word_count),
        paragraphs=_paragraph_points(stats),
        keywords=keyword_points,
        readability=readability_points,
        structure=structure_points,
        optimization_bonus=min(bonus, 10),
    )


# =============================================================================
# Tips
# =============================================================================

def _keyword_tip(stats: ContentStats, readability: int) -> OptimizationTip:
    density = stats.keyword_density

    if stats.keyword_occurrences == 0:
        return OptimizationTip(
            TipType.ERROR,
            "No keywords detected",
            "Add relevant keywords from the suggestions to improve SEO performance",
        )
    if density < 1:
        return OptimizationTip(
            TipType.INFO,
            "Good keyword foundation",
            f"You have {stats.keyword_occurrences} keywords. "
            "Consider adding more for better optimization",
        )
    if density <= 4:
        if readability >= 50:
            return OptimizationTip(
                TipType.SUCCESS,
                "Perfect SEO-readability balance",
                f"Excellent {density}% keyword density with {readability} readability score",
            )
        return OptimizationTip(
            TipType.SUCCESS,
            "Good keyword optimization",
            f"Solid {density}% keyword density. "
            "Content could be simplified for better readability",
        )
    if density <= 6:
        return OptimizationTip(
            TipType.WARNING,
            "High keyword density",
            f"{density}% density may impact readability. Consider more natural phrasing",
        )
    return OptimizationTip(
        TipType.ERROR,
        "Keyword stuffing detected",
        "Reduce keyword repetition to improve both SEO and readability",
    )


def build_optimization_tips(
    stats: ContentStats,
    readability: int,
    enrichment_degraded: bool = False,
) -> list[OptimizationTip]:
    """
    Build ordered optimization tips mirroring the scoring factors.

    The meta description tip is always last.

    Args:
        stats: Content statistics.
        readability: Readability score.
        enrichment_degraded: Whether enrichment failed for this analysis.

    Returns:
        List of OptimizationTip.
    """
    tips: list[OptimizationTip] = []

    if stats.has_good_paragraphs:
        tips.append(OptimizationTip(
            TipType.SUCCESS,
            "Good paragraph length",
            "Your paragraphs are well-sized for readability",
        ))
    else:
        tips.append(OptimizationTip(
            TipType.WARNING,
            "Optimize paragraph length",
            "Keep paragraphs under 150 words for better readability",
        ))

    if stats.has_headings:
        tips.append(OptimizationTip(
            TipType.SUCCESS,
            "Good heading structure",
            "Your content includes proper headings",
        ))
    else:
        tips.append(OptimizationTip(
            TipType.WARNING,
            "Add more subheadings",
            "Break up text with H2 and H3 tags for better structure",
        ))

    if stats.has_links:
        tips.append(OptimizationTip(
            TipType.SUCCESS,
            "Contains links",
            "Your content includes helpful links",
        ))
    else:
        tips.append(OptimizationTip(
            TipType.ERROR,
            "Include internal links",
            "Add 2-3 links to related content on your site",
        ))

    if stats.word_count < 300:
        tips.append(OptimizationTip(
            TipType.WARNING,
            "Increase content length",
            "Aim for at least 300 words for better SEO performance",
        ))

    tips.append(_keyword_tip(stats, readability))

    if readability >= 70:
        tips.append(OptimizationTip(
            TipType.SUCCESS,
            "Excellent readability",
            "Your content is clear and easy to understand",
        ))
    elif readability < 40:
        tips.append(OptimizationTip(
            TipType.WARNING,
            "Improve readability",
            "Consider shorter sentences and simpler words for better user experience",
        ))

    if stats.repeated_word_count >= 3:
        tips.append(OptimizationTip(
            TipType.SUCCESS,
            "Rich topical content",
            "Your content shows good thematic consistency with varied vocabulary",
        ))

    if enrichment_degraded:
        tips.append(OptimizationTip(
            TipType.INFO,
            "Basic analysis completed",
            "Keyword suggestions come from local analysis only; "
            "the enrichment service was unavailable",
        ))

    tips.append(OptimizationTip(
        TipType.INFO,
        "Optimize meta description",
        "Create a compelling 150-160 character meta description",
    ))

    return tips


# =============================================================================
# Analyzer
# =============================================================================

class SeoAnalyzer:
    """
    Runs the full analysis pipeline over a piece of content.

    Enrichment is optional. When it is configured but fails, the analyzer
    logs a warning and answers from local heuristics.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        enrichment_client: Optional[TextRazorClient] = None,
        metrics: Optional[SyntheticKeywordMetrics] = None,
    ):
        self.config = config or EngineConfig.local_only()
        if enrichment_client is None and self.config.has_enrichment:
            enrichment_client = TextRazorClient.from_config(self.config)
        self.enrichment_client = enrichment_client
        self.metrics = metrics or SyntheticKeywordMetrics(seed=self.config.metrics_seed)

    def analyze(self, content: str) -> AnalysisResult:
        """
        Analyze content for readability, keyword usage and SEO quality.

        Args:
            content: Text to analyze.

        Returns:
            AnalysisResult.

        Raises:
            ContentValidationError: If content is empty or whitespace.
        """
        if not content or not content.strip():
            raise ContentValidationError("Content is required")

        enrichment: Optional[EnrichmentResult] = None
        degraded = False

        if self.enrichment_client is not None and self.enrichment_client.is_available:
            try:
                enrichment = self.enrichment_client.extract(content)
            except EnrichmentError as e:
                logger.warning(f"Enrichment unavailable, using local analysis: {e}")
                degraded = True
                if self.config.uses_reduced_fallback:
                    return self.reduced_analysis(content)

        readability = calculate_readability(content)
        enrichment_terms = enrichment.keywords if enrichment else []
        suggestions = self.build_suggestions(content, enrichment_terms)

        stats = compute_content_stats(content, [kw.term for kw in suggestions])
        breakdown = score_content(stats, readability)
        tips = build_optimization_tips(stats, readability, enrichment_degraded=degraded)

        if enrichment is not None:
            raw = enrichment.raw
        elif degraded:
            raw = dict(DEGRADED_DATA)
        else:
            raw = {}

        logger.debug(
            f"Analysis: {stats.word_count} words, seo={breakdown.total}, "
            f"readability={readability}, density={stats.keyword_density}"
        )

        return AnalysisResult(
            readability_score=readability,
            seo_score=breakdown.total,
            keyword_density=stats.keyword_density,
            suggested_keywords=suggestions,
            optimization_tips=tips,
            raw_external_data=raw,
        )

    def build_suggestions(
        self,
        content: str,
        enrichment_terms: Optional[list[str]] = None,
    ) -> list[KeywordSuggestion]:
        """
        Merge provider keywords with locally extracted phrases.

        Provider keywords come first; local terms are added unless already
        present case-insensitively. ``inserted`` is checked against content.

        Args:
            content: Current content.
            enrichment_terms: Keyword texts from the enrichment provider.

        Returns:
            Ordered list of KeywordSuggestion.
        """
        suggestions: list[KeywordSuggestion] = []
        seen: set[str] = set()

        limit = self.config.enrichment_keyword_limit
        sources = [(term, "enrichment") for term in (enrichment_terms or [])[:limit]]
        sources += [(term, "content") for term in extract_common_phrases(content)]

        for term, source in sources:
            key = term.lower()
            if key in seen:
                continue
            seen.add(key)
            suggestions.append(self._suggestion(content, term, source))

        return suggestions

    def reduced_analysis(self, content: str) -> AnalysisResult:
        """
        Word-count-scaled analysis used when enrichment is unavailable
        and the reduced fallback profile is configured.

        Scores are estimates; density is still counted from the content.
        """
        word_count = len(content.split())
        terms = extract_common_phrases(content)[:REDUCED_SUGGESTION_LIMIT]
        suggestions = [self._suggestion(content, term, "content") for term in terms]
        _, density = calculate_keyword_density(content, terms)

        readability = int(round_half_up(max(60.0, min(90.0, word_count * 0.1 + 50))))
        seo_score = min(85, 70 if word_count > 200 else 45)

        return AnalysisResult(
            readability_score=readability,
            seo_score=seo_score,
            keyword_density=density,
            suggested_keywords=suggestions,
            optimization_tips=[
                OptimizationTip(
                    TipType.INFO,
                    "Basic analysis completed",
                    "Full analysis requires API connection",
                ),
            ],
            raw_external_data=dict(DEGRADED_DATA),
        )

    def _suggestion(self, content: str, term: str, source: str) -> KeywordSuggestion:
        return KeywordSuggestion(
            term=term,
            volume=self.metrics.volume(term, source),
            difficulty=self.metrics.difficulty(term, source),
            inserted=keyword_present(content, term),
        )


def analyze_content(content: str, config: Optional[EngineConfig] = None) -> AnalysisResult:
    """
    Analyze content with a one-off analyzer.

    Args:
        content: Text to analyze.
        config: Optional configuration; defaults to local-only analysis.

    Returns:
        AnalysisResult.
    """
    return SeoAnalyzer(config=config).analyze(content)
