"""
SEO Keyword Engine

A content SEO toolkit that:
- Scores text for readability and search-engine friendliness
- Suggests keywords from the text (optionally enriched by an NLP API)
- Inserts keywords into prose with natural-sounding splices
"""

__version__ = "1.0.0"
__author__ = "SEO Keyword Engine Team"

from .config import EngineConfig

from .models import (
    AnalysisRecord,
    AnalysisResult,
    BulkInsertionResult,
    Difficulty,
    InsertionOutcome,
    KeywordSuggestion,
    OptimizationTip,
    TipType,
)

from .analysis import (
    ContentValidationError,
    SeoAnalyzer,
    analyze_content,
)

from .insertion import (
    find_duplicate_reason,
    insert_keyword,
    insert_keyword_with_outcome,
    insert_keywords_bulk,
)

from .enrichment import (
    EnrichmentError,
    TextRazorClient,
)

from .keyword_loader import KeywordLoadError, load_keywords
from .readability import calculate_readability, estimate_syllables
from .phrase_extractor import extract_common_phrases
from .repetition_guard import cleanup_repetitions
from .storage import InMemoryAnalysisStore

__all__ = [
    "__version__",
    "EngineConfig",
    "AnalysisRecord",
    "AnalysisResult",
    "BulkInsertionResult",
    "Difficulty",
    "InsertionOutcome",
    "KeywordSuggestion",
    "OptimizationTip",
    "TipType",
    "ContentValidationError",
    "SeoAnalyzer",
    "analyze_content",
    "find_duplicate_reason",
    "insert_keyword",
    "insert_keyword_with_outcome",
    "insert_keywords_bulk",
    "EnrichmentError",
    "TextRazorClient",
    "KeywordLoadError",
    "load_keywords",
    "calculate_readability",
    "estimate_syllables",
    "extract_common_phrases",
    "cleanup_repetitions",
    "InMemoryAnalysisStore",
]
