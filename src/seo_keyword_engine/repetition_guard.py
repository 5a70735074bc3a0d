"""
Repetition detection and cleanup module.

Prevents:
- Immediately repeated words and phrases left behind by keyword splicing
- Doubled discourse markers and comma runs
- Re-inserting keywords the content already contains

Also provides the word-boundary occurrence counts shared by the
analyzer and the insertion engine.
"""

import re
from typing import Pattern

from .lexicon import DISCOURSE_MARKERS

# Ordered cleanup passes: (pattern, replacement)
_CLEANUP_PASSES: list[tuple[Pattern[str], str]] = [
    # "promotion promotion" -> "promotion"
    (re.compile(r"\b(\w+)(?:\s+\1\b)+", re.IGNORECASE), r"\1"),
    # "promotion especially promotion especially" -> "promotion especially"
    (re.compile(r"\b(\w+\s+\w+)\s+\1\b", re.IGNORECASE), r"\1"),
    # Triple repetition
    (re.compile(r"\b(\w+)\s+\1\s+\1\b", re.IGNORECASE), r"\1"),
    # "promotion, promotion especially after promotion especially especially"
    (re.compile(r"\b(\w+),\s*\1\s+(\w+)\s+after\s+\1\s+\2\s+\2\b", re.IGNORECASE), r"\1 \2"),
    (re.compile(r"\b(\w+),\s*\1\s+(\w+)\s+after\s+\1\s+\2\b", re.IGNORECASE), r"\1 \2"),
    # "especially especially"
    (
        re.compile(r"\b(" + "|".join(DISCOURSE_MARKERS) + r")\s+\1\b", re.IGNORECASE),
        r"\1",
    ),
    (re.compile(r",\s*,+"), ","),
    (re.compile(r"\s+"), " "),
]


def word_pattern(term: str) -> Pattern[str]:
    """
    Case-insensitive whole-word pattern for a literal term.

    Lookarounds instead of \\b, so terms that start or end with
    punctuation ("C++", ".NET") still match.
    """
    return re.compile(rf"(?<!\w){re.escape(term)}(?!\w)", re.IGNORECASE)


def count_word_occurrences(text: str, term: str) -> int:
    """
    Count word-boundary, case-insensitive occurrences of a term.

    Args:
        text: Content to search.
        term: Word or phrase to count.

    Returns:
        Number of non-overlapping matches.
    """
    if not term.strip():
        return 0
    return len(word_pattern(term.strip()).findall(text))


def keyword_present(text: str, keyword: str) -> bool:
    """
    Check whether a keyword already appears in the text.

    Phrases use a case-insensitive substring match, single words a
    word-boundary match.
    """
    keyword = keyword.strip()
    if not keyword:
        return False
    if " " in keyword:
        return keyword.lower() in text.lower()
    return count_word_occurrences(text, keyword) > 0


def has_immediate_repetition(text: str, word: str) -> bool:
    """
    Check for a word immediately followed by itself ("growth growth").

    Args:
        text: Content to check.
        word: The word to look for.

    Returns:
        True if the doubled word occurs anywhere in the text.
    """
    word = word.strip()
    if not word:
        return False
    escaped = re.escape(word)
    return re.search(rf"(?<!\w){escaped}\s+{escaped}(?!\w)", text, re.IGNORECASE) is not None


def cleanup_repetitions(text: str) -> str:
    """
    Remove repetition artifacts introduced by keyword insertion.

    Best effort only: targets the patterns splicing is known to produce.
    Whitespace runs, including line breaks, collapse to single spaces.

    Args:
        text: Content to clean.

    Returns:
        Cleaned, trimmed text.
    """
    result = text
    for pattern, replacement in _CLEANUP_PASSES:
        result = pattern.sub(replacement, result)
    return result.strip()
