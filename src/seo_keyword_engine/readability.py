"""
Readability scoring.

Provides a heuristic syllable estimator and a Flesch Reading Ease score
with adjustments for short content, sentence variety and transitions.
"""

import math
import re

from .lexicon import READABILITY_TRANSITIONS

_SILENT_ENDING = re.compile(r"(?:[^laeiouy]es|ed|[^laeiouy]e)$")
_LEADING_Y = re.compile(r"^y")
_VOWEL_RUN = re.compile(r"[aeiouy]+")
_SENTENCE_BREAK = re.compile(r"[.!?]+")

SHORT_CONTENT_WORDS = 100
SHORT_CONTENT_FLOOR = 40


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with halves going up, matching display rounding."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def estimate_syllables(word: str) -> int:
    """
    Estimate the syllable count of a single word.

    Counts runs of vowels after stripping a silent trailing ``e``/``es``/``ed``
    and a leading ``y``. Heuristic only; always returns at least 1.

    Args:
        word: A single word in any case, possibly with punctuation.

    Returns:
        Estimated syllable count (>= 1).
    """
    word = word.lower()
    if len(word) <= 3:
        return 1

    word = _SILENT_ENDING.sub("", word)
    word = _LEADING_Y.sub("", word)

    runs = _VOWEL_RUN.findall(word)
    return len(runs) if runs else 1


def split_readability_sentences(content: str) -> list[str]:
    """Split on runs of terminal punctuation, dropping blank pieces."""
    return [s.strip() for s in _SENTENCE_BREAK.split(content) if s.strip()]


def calculate_readability(content: str) -> int:
    """
    Calculate a 0-100 readability score for content.

    Args:
        content: Text to score.

    Returns:
        Integer readability score, higher is easier to read.
    """
    words = content.split()
    sentences = split_readability_sentences(content)

    avg_words_per_sentence = len(words) / max(len(sentences), 1)
    avg_syllables_per_word = (
        sum(estimate_syllables(w) for w in words) / max(len(words), 1)
    )

    score = 206.835 - (1.015 * avg_words_per_sentence) - (84.6 * avg_syllables_per_word)

    # Fragments would otherwise score unfairly low
    if len(words) < SHORT_CONTENT_WORDS:
        score = max(score, SHORT_CONTENT_FLOOR)

    score += _sentence_variety_bonus(sentences)
    score += _transition_bonus(content)

    return int(round_half_up(max(0.0, min(100.0, score))))


def _sentence_variety_bonus(sentences: list[str]) -> int:
    """Reward a moderate spread of sentence lengths."""
    lengths = [len(s.split()) for s in sentences if len(s) > 5]
    if len(lengths) < 2:
        return 0
    variety = max(lengths) - min(lengths)
    return 5 if 5 <= variety <= 15 else 0


def _transition_bonus(content: str) -> int:
    """Reward natural transitions, two points per distinct word up to eight."""
    lowered = content.lower()
    count = sum(1 for word in READABILITY_TRANSITIONS if word in lowered)
    return min(count * 2, 8)
