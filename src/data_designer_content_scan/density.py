# Keyword density analyzer.
#
# Counts normalized tokens, converts counts to density percentages, buckets each
# keyword into a density tier and returns the most frequent keywords.

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from data_designer_content_scan.tokenizer import DEFAULT_MIN_TOKEN_LENGTH, tokenize

DensityTier = Literal["low", "good", "optimal", "high"]

# ---------------------------------------------------------------------------
# Policy
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DensityPolicy:
    """Tier boundaries (percent, lower bound inclusive) and report limits."""

    good_min: float = 1.0
    optimal_min: float = 2.0
    high_min: float = 4.0
    min_token_length: int = DEFAULT_MIN_TOKEN_LENGTH
    top_n: int = 20
    precision: int = 2


DEFAULT_DENSITY_POLICY = DensityPolicy()

# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class KeywordRecord:
    word: str
    frequency: int
    density: float
    tier: DensityTier

    def to_payload(self) -> dict[str, object]:
        return {
            "word": self.word,
            "frequency": self.frequency,
            "density": self.density,
            "tier": self.tier,
        }


@dataclass(frozen=True)
class DensityReport:
    total_words: int
    unique_keyword_count: int
    top_keywords: tuple[KeywordRecord, ...]
    average_density: float
    top_density: float

    @classmethod
    def empty(cls) -> DensityReport:
        return cls(total_words=0, unique_keyword_count=0, top_keywords=(), average_density=0.0, top_density=0.0)

    def to_payload(self) -> dict[str, object]:
        return {
            "total_words": self.total_words,
            "unique_keyword_count": self.unique_keyword_count,
            "top_keywords": [k.to_payload() for k in self.top_keywords],
            "average_density": self.average_density,
            "top_density": self.top_density,
        }


# ---------------------------------------------------------------------------
# Analysis
# ---------------------------------------------------------------------------


def classify_density(density: float, policy: DensityPolicy = DEFAULT_DENSITY_POLICY) -> DensityTier:
    if density >= policy.high_min:
        return "high"
    if density >= policy.optimal_min:
        return "optimal"
    if density >= policy.good_min:
        return "good"
    return "low"


def count_frequencies(tokens: list[str]) -> dict[str, int]:
    # dict insertion order doubles as first-seen order for tie-breaking.
    counts: dict[str, int] = {}
    for token in tokens:
        counts[token] = counts.get(token, 0) + 1
    return counts


def analyze_tokens(tokens: list[str], policy: DensityPolicy = DEFAULT_DENSITY_POLICY) -> DensityReport:
    """Build a density report from an already-normalized token stream."""
    total = len(tokens)
    if total == 0:
        return DensityReport.empty()

    counts = count_frequencies(tokens)
    ranked = sorted(counts.items(), key=lambda item: -item[1])[: policy.top_n]

    records = []
    for word, frequency in ranked:
        density = 100 * frequency / total
        records.append(
            KeywordRecord(
                word=word,
                frequency=frequency,
                density=round(density, policy.precision),
                tier=classify_density(density, policy),
            )
        )

    average = round(sum(r.density for r in records) / len(records), policy.precision)
    return DensityReport(
        total_words=total,
        unique_keyword_count=len(counts),
        top_keywords=tuple(records),
        average_density=average,
        top_density=records[0].density,
    )


def analyze_density(text: str, policy: DensityPolicy | None = None) -> DensityReport:
    """Tokenize ``text`` and return its keyword density report.

    Args:
        text: Raw content. Length checks are the caller's job.
        policy: Optional tier/limit overrides. Uses the standard tiers if omitted.

    Returns:
        A ``DensityReport``. Text with no qualifying tokens yields an all-zero report.
    """
    policy = policy or DEFAULT_DENSITY_POLICY
    return analyze_tokens(tokenize(text, policy.min_token_length), policy)
