"""
Keyword insertion engine.

Splices a keyword into existing text with minimal grammatical damage:

1. Duplicate gate - never insert a keyword the content already has
2. Sentence selection - score sentences for topical and structural fit
3. Word position - prefer clause boundaries over arbitrary splits
4. Natural splice - add a light connector ("and", "including", "a")
5. Repetition cleanup - scrub doubled words the splice created

Bulk insertion applies the same steps keyword by keyword, each one
seeing the content produced by the previous insertion.
"""

import logging
import math
import re
from typing import Optional

from .lexicon import (
    ACTION_VERBS,
    ARTICLE_BLOCKERS,
    ARTICLE_BLOCKERS_AFTER,
    COORDINATING_CONJUNCTIONS,
    DETERMINERS,
    EMPHASIS_ADJECTIVES,
    NON_NOUN_SUFFIXES,
    NOUN_SUFFIXES,
    PREPOSITIONS,
    RELATIVE_PRONOUNS,
    SPLICE_STOP_WORDS,
    SUBORDINATING_WORDS,
    TOPIC_RELATED_TERMS,
    TRANSITION_WORDS,
)
from .models import BulkInsertionResult, InsertionOutcome
from .repetition_guard import (
    cleanup_repetitions,
    count_word_occurrences,
    has_immediate_repetition,
)

logger = logging.getLogger(__name__)

_SENTENCE_SPLIT = re.compile(r"(?<=[.!?])\s+")
_TERMINAL = re.compile(r"[.!?]")
_NON_WORD = re.compile(r"[^\w]")
_WORD = re.compile(r"\w+")
_PURE_PUNCTUATION = re.compile(r"^\W+$")

# Words this short never trigger the phrase-overlap gate
MIN_GATED_WORD_LENGTH = 4


# =============================================================================
# Duplicate gate
# =============================================================================

def find_duplicate_reason(content: str, keyword: str) -> Optional[str]:
    """
    Decide whether inserting a keyword would duplicate existing content.

    Phrases are rejected when the whole phrase is already present, or when
    any of their longer words already appears twice. Single words are
    rejected on any existing occurrence.

    Args:
        content: Current content.
        keyword: Keyword or phrase to insert.

    Returns:
        A human-readable reason if the keyword should be skipped, else None.
    """
    keyword_lower = keyword.lower().strip()
    if not keyword_lower:
        return "keyword is empty"

    if " " in keyword_lower:
        if keyword_lower in content.lower():
            return f"phrase '{keyword}' already exists in content"

        for word in keyword_lower.split():
            if len(word) >= MIN_GATED_WORD_LENGTH:
                matches = count_word_occurrences(content, word)
                if matches >= 2:
                    return f"word '{word}' already appears {matches} times"
        return None

    matches = count_word_occurrences(content, keyword_lower)
    if matches >= 1:
        return f"keyword '{keyword}' already appears {matches} times"
    return None


# =============================================================================
# Sentence selection
# =============================================================================

def split_sentences(content: str) -> list[str]:
    """
    Split content into sentences, keeping each terminator attached.

    Content with no terminal punctuation at all has no sentences.
    """
    if not _TERMINAL.search(content):
        return []
    return [s for s in _SENTENCE_SPLIT.split(content) if s.strip()]


def get_topic_words(keyword: str) -> tuple[str, ...]:
    """Related terms for the first topic the keyword belongs to."""
    keyword_lower = keyword.lower()
    for topic, words in TOPIC_RELATED_TERMS.items():
        if topic in keyword_lower or any(word in keyword_lower for word in words):
            return words
    return ()


def score_sentence(sentence: str, index: int, total: int, keyword: str) -> int:
    """
    Score how well a sentence suits a keyword insertion.

    Args:
        sentence: Candidate sentence.
        index: Position of the sentence in the document.
        total: Number of sentences in the document.
        keyword: Keyword to insert.

    Returns:
        Non-negative fit score.
    """
    keyword_words = keyword.lower().split()
    sentence_lower = sentence.lower()
    sentence_words = _WORD.findall(sentence_lower)
    score = 0

    for kw in keyword_words:
        for sw in sentence_words:
            if sw in kw or kw in sw:
                score += 3
            if len(sw) > 3 and len(kw) > 3:
                if sw[:3] == kw[:3]:
                    score += 2
                if sw[-3:] == kw[-3:]:
                    score += 1

    for topic_word in get_topic_words(keyword):
        if topic_word in sentence_lower:
            score += 2

    # Skip the opening sentence and the tail of the document
    if 0 < index < total * 0.7:
        score += 1

    if 8 < len(sentence.split()) < 25:
        score += 1

    # Simple comma clauses splice cleanly
    if "," in sentence and ";" not in sentence and ":" not in sentence:
        score += 1

    return score


def find_optimal_insertion_position(sentences: list[str], keyword: str) -> int:
    """
    Pick the sentence index best suited for inserting a keyword.

    Ties go to the earliest sentence. Without any positive signal, the
    longest sentence in the middle of the document wins.

    Args:
        sentences: Sentences of the content, in order.
        keyword: Keyword to insert.

    Returns:
        Index into ``sentences``.
    """
    total = len(sentences)
    best_score = -1
    best_index = 0

    for index, sentence in enumerate(sentences):
        score = score_sentence(sentence, index, total, keyword)
        if score > best_score:
            best_score = score
            best_index = index

    if best_score > 0:
        return best_index

    return _longest_middle_sentence(sentences)


def _longest_middle_sentence(sentences: list[str]) -> int:
    total = len(sentences)
    start = math.floor(total * 0.2)
    end = math.floor(total * 0.8)

    # Keep off the first and last sentence when there is room to
    if total >= 3:
        start = max(start, 1)
        end = min(max(end, start + 1), total - 1)

    longest_index = min(start, total - 1)
    longest_length = 0
    for i in range(start, end):
        length = len(sentences[i].split())
        if length > longest_length and length > 6:
            longest_length = length
            longest_index = i

    return longest_index


# =============================================================================
# Word position
# =============================================================================

def _bare(word: str) -> str:
    return _NON_WORD.sub("", word.lower())


def find_best_word_position(words: list[str], keyword: str) -> int:
    """
    Choose where inside a sentence the keyword goes.

    Searches positions 1..len-2 for, in order: a coordinating conjunction,
    a transition adverb, a relative or subordinating word, the word after
    a comma, and the best semantic-flow position. Falls back to 40% of the
    way in, stepping past determiners.

    Args:
        words: Whitespace-split words of the sentence.
        keyword: Keyword to insert.

    Returns:
        Index the keyword is inserted before.
    """
    min_pos = 1
    max_pos = max(len(words) - 2, 1)
    candidates = range(min_pos, min(max_pos, len(words) - 1) + 1)

    for vocabulary in (COORDINATING_CONJUNCTIONS, TRANSITION_WORDS, SUBORDINATING_WORDS):
        for i in candidates:
            if _bare(words[i]) in vocabulary:
                return i

    for i in candidates:
        if "," in words[i] and '"' not in words[i]:
            return _clamp(i + 1, min_pos, max_pos)

    semantic_pos = _best_semantic_position(words, keyword, candidates)
    if semantic_pos is not None:
        return semantic_pos

    fallback = math.floor(len(words) * 0.4)
    # Do not split a determiner from its noun
    while fallback < len(words) - 1 and _bare(words[fallback]) in DETERMINERS:
        fallback += 1

    return _clamp(fallback, min_pos, max_pos)


def _best_semantic_position(words: list[str], keyword: str, candidates: range) -> Optional[int]:
    keyword_prefixes = [kw[:3] for kw in keyword.lower().split()]
    best_pos = None
    best_score = 0

    for i in candidates:
        before = " ".join(words[max(0, i - 2):i]).lower()
        after = " ".join(words[i:i + 3]).lower()

        score = 0
        for prefix in keyword_prefixes:
            if prefix in before or prefix in after:
                score += 2
        if 2 < i < len(words) - 2:
            score += 1

        if score > best_score:
            best_score = score
            best_pos = i

    return best_pos


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


# =============================================================================
# Natural splice
# =============================================================================

def is_noun(word: str) -> bool:
    """Suffix heuristic for nouns; no tagging involved."""
    return word.endswith(NOUN_SUFFIXES) or (
        len(word) > 4 and not word.endswith(NON_NOUN_SUFFIXES)
    )


def needs_article(prev_word: str, next_word: str) -> bool:
    """Check the neighbors do not already supply or forbid a determiner."""
    return prev_word not in ARTICLE_BLOCKERS and next_word not in ARTICLE_BLOCKERS_AFTER


def is_content_word(word: str) -> bool:
    return word not in SPLICE_STOP_WORDS and len(word) > 2


def contains_related_terms(context: str, keyword: str) -> bool:
    """Check if context shares a word root with any keyword word."""
    context_words = context.split()
    for kw in keyword.lower().split():
        if len(kw) >= 4 and kw[:4] in context:
            return True
        if len(kw) > 3 and any(
            len(cw) > 3 and cw[:3] == kw[:3] for cw in context_words
        ):
            return True
    return False


def _indefinite_article(word: str) -> str:
    return "an" if word[:1].lower() in "aeiou" else "a"


def build_insertion(words: list[str], keyword: str, position: int) -> list[str]:
    """
    Build the words to splice in at a position, with a connector if needed.

    Args:
        words: Sentence words.
        keyword: Keyword to insert (case preserved).
        position: Index the insertion goes before.

    Returns:
        Words to insert.
    """
    keyword_words = keyword.split()
    prev_raw = words[position - 1] if position > 0 else ""
    prev_word = _bare(prev_raw)
    next_word = _bare(words[position]) if position < len(words) else ""

    if prev_word in ACTION_VERBS:
        return ["and", *keyword_words]
    if next_word in RELATIVE_PRONOUNS:
        return [*keyword_words, "which"]
    if prev_word in PREPOSITIONS:
        return keyword_words
    if prev_raw.endswith(",") or prev_word == "and":
        return keyword_words
    if prev_word in TRANSITION_WORDS:
        return keyword_words
    if next_word in EMPHASIS_ADJECTIVES:
        return [*keyword_words, "and"]

    context = " ".join(words[max(0, position - 2):position]).lower()
    if context and contains_related_terms(context, keyword):
        return ["including", *keyword_words]

    if len(keyword_words) == 1:
        keyword_lower = keyword_words[0].lower()
        if is_noun(keyword_lower) and needs_article(prev_word, next_word):
            return [_indefinite_article(keyword_lower), *keyword_words]

    if prev_word and is_content_word(prev_word):
        return ["and", *keyword_words]

    return keyword_words


def create_natural_insertion(words: list[str], keyword: str, position: int) -> str:
    """
    Splice a keyword into a sentence's words and rejoin them.

    Args:
        words: Sentence words.
        keyword: Keyword to insert.
        position: Index the insertion goes before.

    Returns:
        The rewritten sentence.
    """
    insertion = build_insertion(words, keyword, position)

    at_start = position == 0 or (
        position == 1 and bool(words) and _PURE_PUNCTUATION.match(words[0])
    )
    if at_start:
        insertion[0] = insertion[0][:1].upper() + insertion[0][1:]

    spliced = words[:position] + insertion + words[position:]
    return re.sub(r"\s+", " ", " ".join(spliced)).strip()


def insert_keyword_in_sentence(sentences: list[str], index: int, keyword: str) -> str:
    """Insert a keyword into one sentence and reassemble the content."""
    words = sentences[index].split()
    position = find_best_word_position(words, keyword)

    rebuilt = list(sentences)
    rebuilt[index] = create_natural_insertion(words, keyword, position)
    return " ".join(rebuilt)


# =============================================================================
# Public operations
# =============================================================================

def splice_keyword(content: str, keyword: str, position: Optional[int] = None) -> str:
    """
    Insert a keyword without the final repetition cleanup.

    Args:
        content: Current content.
        keyword: Keyword to insert.
        position: Optional sentence index override.

    Returns:
        New content, or the original content if the keyword is a duplicate.
    """
    keyword = keyword.strip()
    reason = find_duplicate_reason(content, keyword)
    if reason:
        logger.info(f"Skipping keyword insertion: {reason}")
        return content

    sentences = split_sentences(content)
    if not sentences:
        return f"{keyword}. {content}"

    if position is not None and 0 <= position < len(sentences):
        index = position
    else:
        index = find_optimal_insertion_position(sentences, keyword)

    logger.debug(f"Inserting '{keyword}' into sentence {index} of {len(sentences)}")
    return insert_keyword_in_sentence(sentences, index, keyword)


def insert_keyword_with_outcome(
    content: str,
    keyword: str,
    position: Optional[int] = None,
) -> InsertionOutcome:
    """
    Insert a keyword and clean up repetition artifacts.

    The outcome is a no-op (original content, ``inserted=False``) when the
    duplicate gate rejects the keyword or the cleaned result would not be
    longer than the input.

    Args:
        content: Current content.
        keyword: Keyword to insert.
        position: Optional sentence index override.

    Returns:
        InsertionOutcome describing what happened.
    """
    reason = find_duplicate_reason(content, keyword)
    if reason:
        logger.info(f"Skipping keyword insertion: {reason}")
        return InsertionOutcome(content=content, keyword=keyword, inserted=False, skip_reason=reason)

    spliced = splice_keyword(content, keyword, position)
    cleaned = cleanup_repetitions(spliced)

    if len(cleaned) <= len(content):
        logger.info(f"Insertion of '{keyword}' did not grow the content; leaving it unchanged")
        return InsertionOutcome(
            content=content,
            keyword=keyword,
            inserted=False,
            skip_reason="insertion did not change the content",
        )

    return InsertionOutcome(content=cleaned, keyword=keyword, inserted=True)


def insert_keyword(content: str, keyword: str, position: Optional[int] = None) -> str:
    """
    Insert a keyword into content at the most natural position.

    Args:
        content: Current content.
        keyword: Keyword or phrase to insert.
        position: Optional sentence index; used directly when in range.

    Returns:
        The edited content, or the original content when nothing was inserted.
    """
    return insert_keyword_with_outcome(content, keyword, position).content


def insert_keywords_bulk(content: str, keywords: list[str]) -> BulkInsertionResult:
    """
    Insert several keywords in order.

    Each keyword is checked against the content as modified by the
    keywords before it, so order matters. A keyword is skipped when the
    duplicate gate rejects it, when its insertion changes nothing, or when
    it would double its own first word. Cleanup runs once at the end.

    Args:
        content: Original content.
        keywords: Keywords in the order to insert them.

    Returns:
        BulkInsertionResult with the final content and per-keyword outcomes.
    """
    logger.info(f"Bulk inserting {len(keywords)} keywords into content")

    current = content
    inserted: list[str] = []
    skipped: list[str] = []

    for keyword in keywords:
        reason = find_duplicate_reason(current, keyword)
        if reason:
            logger.info(f"Skipping '{keyword}': {reason}")
            skipped.append(keyword)
            continue

        candidate = splice_keyword(current, keyword)
        if len(candidate) <= len(current):
            skipped.append(keyword)
            continue

        first_word = keyword.strip().split()[0]
        if has_immediate_repetition(candidate, first_word):
            logger.info(f"Skipping '{keyword}' - would create repetition")
            skipped.append(keyword)
            continue

        current = candidate
        inserted.append(keyword)

    current = cleanup_repetitions(current)

    logger.info(
        f"Bulk insertion complete: {len(inserted)} inserted, {len(skipped)} skipped"
    )
    return BulkInsertionResult(content=current, inserted=inserted, skipped=skipped)
