"""
Data models for the SEO Keyword Engine.

This module defines the value objects produced by analysis and insertion.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class Difficulty(str, Enum):
    """Ranking difficulty label for a keyword suggestion."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


class TipType(str, Enum):
    """Severity of an optimization tip."""
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"
    INFO = "info"


@dataclass
class KeywordSuggestion:
    """A suggested keyword with display metadata.

    ``inserted`` is derived from the content the suggestion was built
    against and is recomputed on every analysis pass.
    """
    term: str
    volume: str
    difficulty: Difficulty
    inserted: bool = False

    def to_dict(self) -> dict:
        return {
            "term": self.term,
            "volume": self.volume,
            "difficulty": self.difficulty.value,
            "inserted": self.inserted,
        }


@dataclass
class OptimizationTip:
    """A single piece of optimization feedback."""
    type: TipType
    title: str
    description: str

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "title": self.title,
            "description": self.description,
        }


@dataclass
class AnalysisResult:
    """Complete result of an SEO analysis pass."""
    readability_score: int
    seo_score: int
    keyword_density: float
    suggested_keywords: list[KeywordSuggestion] = field(default_factory=list)
    optimization_tips: list[OptimizationTip] = field(default_factory=list)
    raw_external_data: dict[str, Any] = field(default_factory=dict)

    @property
    def missing_keywords(self) -> list[str]:
        """Suggested terms not yet present in the analyzed content."""
        return [kw.term for kw in self.suggested_keywords if not kw.inserted]

    def to_dict(self) -> dict:
        """Serialize using the camelCase wire names."""
        return {
            "readabilityScore": self.readability_score,
            "seoScore": self.seo_score,
            "keywordDensity": self.keyword_density,
            "suggestedKeywords": [kw.to_dict() for kw in self.suggested_keywords],
            "optimizationTips": [tip.to_dict() for tip in self.optimization_tips],
            "analysisResults": self.raw_external_data,
        }


@dataclass
class SeoScoreBreakdown:
    """Per-factor contributions to the composite SEO score."""
    length: int = 0
    paragraphs: int = 0
    keywords: int = 0
    readability: int = 0
    structure: int = 0
    optimization_bonus: int = 0

    @property
    def total(self) -> int:
        raw = (
            self.length + self.paragraphs + self.keywords
            + self.readability + self.structure + self.optimization_bonus
        )
        return max(0, min(100, raw))


@dataclass
class ContentStats:
    """Word, sentence and keyword statistics for one piece of content."""
    word_count: int
    sentence_count: int
    paragraph_count: int
    avg_paragraph_length: float
    keyword_occurrences: int
    keyword_density: float
    repeated_word_count: int
    has_headings: bool
    has_lists: bool
    has_links: bool

    @property
    def has_good_paragraphs(self) -> bool:
        return self.paragraph_count >= 2 and 30 <= self.avg_paragraph_length <= 150


@dataclass
class InsertionOutcome:
    """Result of inserting a single keyword."""
    content: str
    keyword: str
    inserted: bool
    skip_reason: Optional[str] = None


@dataclass
class BulkInsertionResult:
    """Result of inserting several keywords in order."""
    content: str
    inserted: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)

    @property
    def total_inserted(self) -> int:
        return len(self.inserted)


@dataclass
class AnalysisRecord:
    """A stored analysis request.

    Analysis fields stay ``None``; only the request content is recorded.
    """
    id: int
    content: str
    readability_score: Optional[float] = None
    seo_score: Optional[float] = None
    keyword_density: Optional[float] = None
    suggested_keywords: Optional[list[dict]] = None
    optimization_tips: Optional[list[dict]] = None
    analysis_results: Optional[dict[str, Any]] = None
    created_at: datetime = field(default_factory=datetime.now)
