# Pattern signal extractors for the AI-content detector.
#
# Each extractor is a pure function of the raw (non-normalized) text so that
# punctuation and case still carry signal. Word lists and compiled patterns live
# in a frozen ``SignalPatterns`` table that callers can swap out.

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from data_designer_content_scan.tokenizer import split_sentences, word_count

# ---------------------------------------------------------------------------
# Pattern tables
# ---------------------------------------------------------------------------

_FORMAL_WORDS = frozenset({
    "furthermore", "moreover", "consequently", "subsequently", "therefore",
    "however", "nevertheless", "nonetheless", "additionally", "specifically",
    "particularly", "essentially", "ultimately", "fundamentally", "accordingly",
})

_PERSONAL_TOUCH_RES = (
    re.compile(r"\bi\s+(think|believe|feel|remember|learned|experienced|noticed|realized)", re.IGNORECASE),
    re.compile(r"\bmy\s+(experience|opinion|perspective|approach|journey|story)", re.IGNORECASE),
    re.compile(r"\bwhen\s+i\s+(first|started|began|was|tried)", re.IGNORECASE),
    re.compile(r"\byou know\b", re.IGNORECASE),
    re.compile(r"\bhonestly\b", re.IGNORECASE),
    re.compile(r"\bfrankly\b", re.IGNORECASE),
    re.compile(r"\bbetween you and me\b", re.IGNORECASE),
    re.compile(r"\bin my opinion\b", re.IGNORECASE),
    re.compile(r"\blet me tell you\b", re.IGNORECASE),
    re.compile(r"\bhere's the thing\b", re.IGNORECASE),
)

_IMPERFECTION_RES = (
    re.compile(r"\b(\w+)\s+\1\b", re.IGNORECASE),  # doubled word
    re.compile(r"\.[A-Za-z]"),  # no space after a period
    re.compile(r"\s+,"),
    re.compile(r" {2,}"),
)

_GENERIC_PHRASE_RES = (
    re.compile(r"\bin conclusion\b", re.IGNORECASE),
    re.compile(r"\bin summary\b", re.IGNORECASE),
    re.compile(r"\bto sum up\b", re.IGNORECASE),
    re.compile(r"\bfirst and foremost\b", re.IGNORECASE),
    re.compile(r"\blast but not least\b", re.IGNORECASE),
    re.compile(r"\bit is important to note\b", re.IGNORECASE),
    re.compile(r"\bit should be noted\b", re.IGNORECASE),
    re.compile(r"\bit is worth mentioning\b", re.IGNORECASE),
    re.compile(r"\bmany experts believe\b", re.IGNORECASE),
    re.compile(r"\bstudies have shown\b", re.IGNORECASE),
    re.compile(r"\bresearch indicates\b", re.IGNORECASE),
    re.compile(r"\baccording to experts\b", re.IGNORECASE),
)

_HUMAN_MARKER_RES = (
    re.compile(r"\b(um|uh|er|ah)\b", re.IGNORECASE),
    re.compile(r"\b(well|you know|i mean|like|actually|basically|literally)\b", re.IGNORECASE),
    re.compile(r"\b(kinda|sorta|gonna|wanna)\b", re.IGNORECASE),
    re.compile(r"\([^)]*\)"),  # parenthetical aside
    re.compile(r"\btrust me\b", re.IGNORECASE),
    re.compile(r"\bbelieve me\b", re.IGNORECASE),
    re.compile(r"\bto be honest\b", re.IGNORECASE),
    re.compile(r"\breal talk\b", re.IGNORECASE),
    re.compile(r"\bno kidding\b", re.IGNORECASE),
    re.compile(r"\bfor real\b", re.IGNORECASE),
)

_CONNECTOR_RES = (
    re.compile(r"\?"),
    re.compile(r"!"),
    re.compile(r"\b(but|and|so|because|since|while)\s+", re.IGNORECASE),
    re.compile(r"\byou\b", re.IGNORECASE),
    re.compile(r"\bwe\b", re.IGNORECASE),
    re.compile(r"\blet's\b", re.IGNORECASE),
    re.compile(r"\bhere's\b", re.IGNORECASE),
    re.compile(r"\bthere's\b", re.IGNORECASE),
)


@dataclass(frozen=True)
class SignalPatterns:
    """Word lists, compiled patterns and constants used by the extractors."""

    formal_words: frozenset[str] = _FORMAL_WORDS
    personal_touch: tuple[re.Pattern[str], ...] = _PERSONAL_TOUCH_RES
    imperfections: tuple[re.Pattern[str], ...] = _IMPERFECTION_RES
    generic_phrases: tuple[re.Pattern[str], ...] = _GENERIC_PHRASE_RES
    human_markers: tuple[re.Pattern[str], ...] = _HUMAN_MARKER_RES
    connectors: tuple[re.Pattern[str], ...] = _CONNECTOR_RES

    fingerprint_words: int = 3
    connector_basis: float = 0.1


DEFAULT_SIGNAL_PATTERNS = SignalPatterns()

# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SignalSet:
    repetition_count: int
    formality_ratio: float
    personal_touch_count: int
    grammar_perfection: float
    generic_phrase_count: int
    sentence_length_variation: float
    human_marker_count: int
    conversational_flow: float

    def get(self, name: str) -> float:
        return getattr(self, name)

    def to_payload(self) -> dict[str, object]:
        return {
            "repetition_count": self.repetition_count,
            "formality_ratio": self.formality_ratio,
            "personal_touch_count": self.personal_touch_count,
            "grammar_perfection": self.grammar_perfection,
            "generic_phrase_count": self.generic_phrase_count,
            "sentence_length_variation": self.sentence_length_variation,
            "human_marker_count": self.human_marker_count,
            "conversational_flow": self.conversational_flow,
        }


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _count_matches(text: str, patterns: tuple[re.Pattern[str], ...]) -> int:
    return sum(1 for pat in patterns for _ in pat.finditer(text))


# ---------------------------------------------------------------------------
# Extractors
# ---------------------------------------------------------------------------


def repetition_count(text: str, patterns: SignalPatterns = DEFAULT_SIGNAL_PATTERNS) -> int:
    """Number of distinct sentence openings that appear more than once.

    A sentence's opening is its first few words, lower-cased. Sentences that are
    not longer than the opening itself are ignored.
    """
    n = patterns.fingerprint_words
    openings: dict[str, int] = {}
    for sentence in split_sentences(text):
        words = sentence.split()
        if len(words) > n:
            key = " ".join(words[:n]).lower()
            openings[key] = openings.get(key, 0) + 1
    return sum(1 for count in openings.values() if count > 1)


def formality_ratio(text: str, patterns: SignalPatterns = DEFAULT_SIGNAL_PATTERNS) -> float:
    words = text.lower().split()
    if not words:
        return 0.0
    formal = sum(1 for w in words if w in patterns.formal_words)
    return formal / len(words)


def personal_touch_count(text: str, patterns: SignalPatterns = DEFAULT_SIGNAL_PATTERNS) -> int:
    return _count_matches(text, patterns.personal_touch)


def grammar_perfection(text: str, patterns: SignalPatterns = DEFAULT_SIGNAL_PATTERNS) -> float:
    """Share of sentences not offset by a surface imperfection (1.0 = spotless)."""
    sentences = len(split_sentences(text))
    if sentences == 0:
        return 0.0
    errors = _count_matches(text, patterns.imperfections)
    return max(0.0, (sentences - errors) / sentences)


def generic_phrase_count(text: str, patterns: SignalPatterns = DEFAULT_SIGNAL_PATTERNS) -> int:
    return _count_matches(text, patterns.generic_phrases)


def sentence_length_variation(text: str, patterns: SignalPatterns = DEFAULT_SIGNAL_PATTERNS) -> float:
    """Coefficient of variation of sentence word counts, capped at 1."""
    lengths = [len(s.split()) for s in split_sentences(text)]
    if len(lengths) < 2:
        return 0.0
    mean = sum(lengths) / len(lengths)
    if mean <= 0:
        return 0.0
    variance = sum((x - mean) ** 2 for x in lengths) / len(lengths)
    return min(1.0, math.sqrt(variance) / mean)


def human_marker_count(text: str, patterns: SignalPatterns = DEFAULT_SIGNAL_PATTERNS) -> int:
    return _count_matches(text, patterns.human_markers)


def conversational_flow(text: str, patterns: SignalPatterns = DEFAULT_SIGNAL_PATTERNS) -> float:
    wc = word_count(text)
    if wc == 0:
        return 0.0
    return min(1.0, _count_matches(text, patterns.connectors) / (wc * patterns.connector_basis))


def extract_signals(text: str, patterns: SignalPatterns | None = None) -> SignalSet:
    patterns = patterns or DEFAULT_SIGNAL_PATTERNS
    return SignalSet(
        repetition_count=repetition_count(text, patterns),
        formality_ratio=formality_ratio(text, patterns),
        personal_touch_count=personal_touch_count(text, patterns),
        grammar_perfection=grammar_perfection(text, patterns),
        generic_phrase_count=generic_phrase_count(text, patterns),
        sentence_length_variation=sentence_length_variation(text, patterns),
        human_marker_count=human_marker_count(text, patterns),
        conversational_flow=conversational_flow(text, patterns),
    )
