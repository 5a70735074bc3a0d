"""
Frequency-based keyword phrase extraction.

Finds candidate keyword phrases and words in raw text, filtered against
a stop-word list, and augments them with contextual topic keywords.
"""

import re
from collections import Counter

from .lexicon import (
    CONTEXTUAL_TOPICS,
    GENERIC_KEYWORDS,
    GENERIC_VERBS,
    STOP_WORDS,
)

MAX_SUGGESTIONS = 8
MAX_PHRASES = 5
MAX_WORDS = 3
MAX_CONTEXTUAL = 3
FALLBACK_WORDS = 5
GENERIC_FALLBACK_COUNT = 3

_WORD_TOKEN = re.compile(r"\b\w+\b")


def tokenize(content: str) -> list[str]:
    """Lowercase word tokens, punctuation discarded."""
    return _WORD_TOKEN.findall(content.lower())


def _is_phrase_word(word: str) -> bool:
    return len(word) > 3 and word not in STOP_WORDS


def _count_phrases(words: list[str]) -> Counter:
    """Count 2- and 3-word windows made only of content words."""
    phrases: Counter = Counter()

    for i in range(len(words) - 1):
        pair = words[i:i + 2]
        if all(_is_phrase_word(w) for w in pair) and not GENERIC_VERBS.intersection(pair):
            phrases[" ".join(pair)] += 1

        if i < len(words) - 2:
            triple = words[i:i + 3]
            phrase = " ".join(triple)
            if (
                all(_is_phrase_word(w) for w in triple)
                and len(phrase) > 10
                and not GENERIC_VERBS.intersection(triple)
            ):
                phrases[phrase] += 1

    return phrases


def _rank(counts: Counter, limit: int) -> list[str]:
    # sorted() is stable so equal counts keep first-seen order
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    return [term for term, _ in ranked[:limit]]


def generate_contextual_keywords(content: str) -> list[str]:
    """
    Pick topic keywords triggered by domain words in the content.

    Args:
        content: Text to scan.

    Returns:
        Up to three contextual keyword phrases.
    """
    lowered = content.lower()
    contextual: list[str] = []

    for triggers, keywords in CONTEXTUAL_TOPICS:
        if any(trigger in lowered for trigger in triggers):
            contextual.extend(keywords)

    return contextual[:MAX_CONTEXTUAL]


def _dedupe(terms: list[str]) -> list[str]:
    seen: set[str] = set()
    unique = []
    for term in terms:
        key = term.lower()
        if key not in seen:
            seen.add(key)
            unique.append(term)
    return unique


def extract_common_phrases(content: str) -> list[str]:
    """
    Extract candidate keyword phrases and words from content.

    Phrases rank ahead of single words, followed by contextual topic
    keywords. Falls back to the most frequent content words, then to a
    generic keyword list, so the result is never empty.

    Args:
        content: Raw text.

    Returns:
        Between 1 and 8 distinct (case-insensitive) keyword strings.
    """
    words = tokenize(content)

    single_words = Counter(
        w for w in words if len(w) > 4 and w not in STOP_WORDS
    )

    phrase_counts = _count_phrases(words)
    phrase_counts = Counter({
        phrase: count for phrase, count in phrase_counts.items()
        if 8 < len(phrase) < 35
    })
    phrase_suggestions = _rank(phrase_counts, MAX_PHRASES)

    word_counts = Counter({
        word: count for word, count in single_words.items()
        if 5 < len(word) < 15
    })
    word_suggestions = _rank(word_counts, MAX_WORDS)

    suggestions = _dedupe(
        phrase_suggestions + word_suggestions + generate_contextual_keywords(content)
    )[:MAX_SUGGESTIONS]

    if suggestions:
        return suggestions

    # Nothing passed the thresholds; use raw frequency
    frequent = Counter(w for w in words if w not in STOP_WORDS and not w.isdigit())
    suggestions = _rank(frequent, FALLBACK_WORDS)
    if suggestions:
        return suggestions

    return list(GENERIC_KEYWORDS[:GENERIC_FALLBACK_COUNT])
