"""Text normalization helpers shared by the density engine and the detector."""

from __future__ import annotations

import re

_NON_WORD_RE = re.compile(r"[^\w\s]")
_SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
_PARAGRAPH_SPLIT = "\n\n"

DEFAULT_MIN_TOKEN_LENGTH = 3


def tokenize(text: str, min_length: int = DEFAULT_MIN_TOKEN_LENGTH) -> list[str]:
    """Lower-case ``text``, blank out punctuation and split on whitespace.

    Tokens shorter than ``min_length`` characters are dropped, so the default
    keeps words of three letters or more.
    """
    cleaned = _NON_WORD_RE.sub(" ", text.lower())
    return [token for token in cleaned.split() if len(token) >= min_length]


def split_sentences(text: str) -> list[str]:
    return [s.strip() for s in _SENTENCE_SPLIT_RE.split(text) if s.strip()]


def split_paragraphs(text: str) -> list[str]:
    return [p for p in text.split(_PARAGRAPH_SPLIT) if p.strip()]


def word_count(text: str) -> int:
    return len(text.split())
