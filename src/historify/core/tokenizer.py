"""Tokenizer and suffix-stripping stemmer.

The index, the query side of every strategy, the scorer and the highlighter
all normalize text through :func:`tokenize`, so a term produced from a
document and a term produced from a query agree whenever their surface forms
share a stem.
"""

from __future__ import annotations

import re

STOP_WORDS: frozenset[str] = frozenset(
    {
        "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
        "is", "are", "was", "were", "be", "been", "being", "have", "has", "had", "do", "does", "did",
        "will", "would", "could", "should", "may", "might", "can", "must", "shall",
    }
)  # fmt: skip

# Order matters: the first suffix that fits wins.
STEM_SUFFIXES: tuple[str, ...] = ("ing", "ed", "er", "est", "ly", "tion", "sion", "ness", "ment")

MIN_TOKEN_LENGTH = 3

_NON_WORD = re.compile(r"[^\w\s]")


def stem_word(word: str) -> str:
    """Strip one known suffix from ``word``.

    A suffix is removed only when at least three characters remain, so
    ``"bed"`` and ``"ring"`` survive untouched while ``"working"`` becomes
    ``"work"``.  Stemming is applied once; the result is not re-stemmed.
    """
    for suffix in STEM_SUFFIXES:
        if word.endswith(suffix) and len(word) > len(suffix) + 2:
            return word[: -len(suffix)]
    return word


def tokenize(text: str | None) -> list[str]:
    """Normalize text into a list of index terms.

    Lowercases, turns punctuation into whitespace, drops tokens shorter than
    three characters and stop words, then stems what is left.

    Args:
        text: Raw text; ``None`` and ``""`` yield no terms.

    Returns:
        Terms in their original order, duplicates kept.
    """
    if not text:
        return []

    words = _NON_WORD.sub(" ", text.lower()).split()
    return [stem_word(word) for word in words if len(word) >= MIN_TOKEN_LENGTH and word not in STOP_WORDS]
