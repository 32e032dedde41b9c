# Heuristic AI-content detector.
#
# Combines the pattern signals into a bounded 0-100 AI probability using a
# versioned rule table, maps the score to a verdict and confidence band, and
# explains the result with per-indicator descriptions and recommendations.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from data_designer_content_scan.signals import SignalPatterns, SignalSet, extract_signals
from data_designer_content_scan.tokenizer import split_paragraphs, split_sentences, word_count

Confidence = Literal["Low", "Medium", "High"]

# ---------------------------------------------------------------------------
# Scoring policy
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ScoreRule:
    """Adds ``weight`` when ``signal`` is strictly above (or below) ``threshold``."""

    signal: str
    threshold: float
    weight: int
    direction: Literal["above", "below"] = "above"

    def fires(self, signals: SignalSet) -> bool:
        value = signals.get(self.signal)
        if self.direction == "above":
            return value > self.threshold
        return value < self.threshold


@dataclass(frozen=True)
class ScoreDeduction:
    """Subtracts ``weight`` per unit of ``signal``."""

    signal: str
    weight: float


_DEFAULT_RULES = (
    ScoreRule("repetition_count", 3, 15),
    ScoreRule("formality_ratio", 0.7, 20),
    ScoreRule("personal_touch_count", 2, 25, direction="below"),
    ScoreRule("grammar_perfection", 0.95, 15),
    ScoreRule("generic_phrase_count", 5, 15),
    ScoreRule("sentence_length_variation", 0.3, 10, direction="below"),
)

_DEFAULT_DEDUCTIONS = (
    ScoreDeduction("human_marker_count", 5),
    ScoreDeduction("conversational_flow", 10),
)

_DEFAULT_VERDICT_BANDS = (
    (80, "Very likely AI-generated"),
    (60, "Possibly AI-generated"),
    (40, "Mixed signals - uncertain"),
    (20, "Likely human-written"),
)


@dataclass(frozen=True)
class ScoringPolicy:
    """Weights, bands and advice thresholds for the detector."""

    version: str = "v1"
    rules: tuple[ScoreRule, ...] = _DEFAULT_RULES
    deductions: tuple[ScoreDeduction, ...] = _DEFAULT_DEDUCTIONS

    score_min: int = 0
    score_max: int = 100
    verdict_bands: tuple[tuple[int, str], ...] = _DEFAULT_VERDICT_BANDS
    verdict_floor: str = "Very likely human-written"

    # High when score >= high_min or <= high_max, Medium on the second pair.
    confidence_high_min: int = 80
    confidence_high_max: int = 20
    confidence_medium_min: int = 60
    confidence_medium_max: int = 40

    rewrite_block_min: int = 60
    praise_max: int = 30
    conversational_tip_max: float = 0.3
    conversational_note_min: float = 0.5
    human_marker_note_min: int = 3


DEFAULT_SCORING_POLICY = ScoringPolicy()

# ---------------------------------------------------------------------------
# Advice text
# ---------------------------------------------------------------------------

# signal -> (description when its rule fires, description otherwise)
_INDICATOR_TEXT = {
    "repetition_count": (
        "High repetition detected - may indicate AI generation",
        "Natural variation in language patterns",
    ),
    "formality_ratio": (
        "Overly formal vocabulary",
        "Natural vocabulary variation",
    ),
    "personal_touch_count": (
        "Limited personal anecdotes or experiences",
        "Contains personal experiences and human perspective",
    ),
    "grammar_perfection": (
        "Too perfect - may indicate AI",
        "Natural grammar with minor imperfections",
    ),
    "generic_phrase_count": (
        "Frequent stock phrases and filler transitions",
        "Few generic or clichéd phrases",
    ),
    "sentence_length_variation": (
        "Repetitive sentence structure",
        "Good sentence variety",
    ),
}

_REWRITE_BLOCK = (
    "Add more personal anecdotes and experiences to make content more human",
    "Use more conversational language and contractions (I'm, you're, etc.)",
    "Include questions and direct reader engagement",
    "Add some minor grammatical variations and informal expressions",
    "Break up formal sentence structures with shorter, punchier sentences",
)

_SIGNAL_RECOMMENDATIONS = {
    "repetition_count": "Vary sentence starters and paragraph openings",
    "formality_ratio": "Replace formal terms with more casual, everyday language",
    "personal_touch_count": "Include more 'I' statements and personal opinions",
    "grammar_perfection": "Let a few natural, informal constructions through instead of polishing every sentence",
    "generic_phrase_count": "Cut stock phrases like 'in conclusion' and 'studies have shown' and say the point directly",
    "sentence_length_variation": "Mix very short sentences with longer ones to vary the rhythm",
}

_CONVERSATIONAL_TIP = "Add more questions, exclamations, and direct reader address"

_PRAISE = (
    "Great! Your content has strong human characteristics",
    "Consider maintaining this natural, conversational style",
)

# ---------------------------------------------------------------------------
# Dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class IndicatorScore:
    score: float
    description: str

    def to_payload(self) -> dict[str, object]:
        return {"score": self.score, "description": self.description}


@dataclass(frozen=True)
class TextStats:
    word_count: int
    sentence_count: int
    paragraph_count: int
    average_words_per_sentence: int

    def to_payload(self) -> dict[str, object]:
        return {
            "word_count": self.word_count,
            "sentence_count": self.sentence_count,
            "paragraph_count": self.paragraph_count,
            "average_words_per_sentence": self.average_words_per_sentence,
        }


@dataclass(frozen=True)
class ClassificationResult:
    ai_probability: int
    human_probability: int
    verdict: str
    confidence: Confidence
    breakdown: dict[str, IndicatorScore]
    recommendations: tuple[str, ...]
    signals: SignalSet
    text_stats: TextStats
    detailed_breakdown: dict[str, str] = field(default_factory=dict)
    policy_version: str = DEFAULT_SCORING_POLICY.version

    def to_payload(self) -> dict[str, object]:
        return {
            "ai_probability": self.ai_probability,
            "human_probability": self.human_probability,
            "verdict": self.verdict,
            "confidence": self.confidence,
            "breakdown": {name: ind.to_payload() for name, ind in self.breakdown.items()},
            "detailed_breakdown": dict(self.detailed_breakdown),
            "recommendations": list(self.recommendations),
            "signals": self.signals.to_payload(),
            "text_stats": self.text_stats.to_payload(),
            "policy_version": self.policy_version,
        }


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------


def score_signals(signals: SignalSet, policy: ScoringPolicy = DEFAULT_SCORING_POLICY) -> int:
    """Apply the rule table to ``signals`` and clamp to the policy bounds."""
    raw = float(sum(rule.weight for rule in policy.rules if rule.fires(signals)))
    raw -= sum(d.weight * signals.get(d.signal) for d in policy.deductions)
    return max(policy.score_min, min(policy.score_max, round(raw)))


def verdict_for(ai_probability: int, policy: ScoringPolicy = DEFAULT_SCORING_POLICY) -> str:
    for floor, label in policy.verdict_bands:
        if ai_probability >= floor:
            return label
    return policy.verdict_floor


def confidence_for(ai_probability: int, policy: ScoringPolicy = DEFAULT_SCORING_POLICY) -> Confidence:
    if ai_probability >= policy.confidence_high_min or ai_probability <= policy.confidence_high_max:
        return "High"
    if ai_probability >= policy.confidence_medium_min or ai_probability <= policy.confidence_medium_max:
        return "Medium"
    return "Low"


def _fired_signals(signals: SignalSet, policy: ScoringPolicy) -> list[str]:
    return [rule.signal for rule in policy.rules if rule.fires(signals)]


def _breakdown(signals: SignalSet, fired: list[str], policy: ScoringPolicy) -> dict[str, IndicatorScore]:
    out: dict[str, IndicatorScore] = {}
    for signal, (hit, miss) in _INDICATOR_TEXT.items():
        out[signal] = IndicatorScore(signals.get(signal), hit if signal in fired else miss)
    out["human_marker_count"] = IndicatorScore(
        signals.human_marker_count,
        "Multiple human writing markers present"
        if signals.human_marker_count > policy.human_marker_note_min
        else "Few conversational or informal elements",
    )
    out["conversational_flow"] = IndicatorScore(
        signals.conversational_flow,
        "Natural conversational flow detected"
        if signals.conversational_flow > policy.conversational_note_min
        else "Formal, structured writing style",
    )
    return out


def _detailed_breakdown(breakdown: dict[str, IndicatorScore], signals: SignalSet, policy: ScoringPolicy) -> dict[str, str]:
    return {
        "grammar": breakdown["grammar_perfection"].description,
        "vocabulary": breakdown["formality_ratio"].description,
        "structure": breakdown["sentence_length_variation"].description,
        "tone": "Conversational and engaging"
        if signals.conversational_flow > policy.conversational_note_min
        else "Formal and structured",
    }


def _recommendations(ai_probability: int, signals: SignalSet, fired: list[str], policy: ScoringPolicy) -> list[str]:
    recs: list[str] = []
    if ai_probability > policy.rewrite_block_min:
        recs.extend(_REWRITE_BLOCK)
    for signal in fired:
        tip = _SIGNAL_RECOMMENDATIONS.get(signal)
        if tip:
            recs.append(tip)
    if signals.conversational_flow < policy.conversational_tip_max:
        recs.append(_CONVERSATIONAL_TIP)
    if ai_probability <= policy.praise_max:
        recs.extend(_PRAISE)
    return _deduplicate(recs)


def _deduplicate(items: list[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            out.append(item)
    return out


def _text_stats(text: str) -> TextStats:
    wc = word_count(text)
    sc = len(split_sentences(text))
    return TextStats(
        word_count=wc,
        sentence_count=sc,
        paragraph_count=len(split_paragraphs(text)),
        average_words_per_sentence=round(wc / sc) if sc else 0,
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def detect(
    text: str,
    policy: ScoringPolicy | None = None,
    patterns: SignalPatterns | None = None,
) -> ClassificationResult:
    """Estimate how likely ``text`` is to be machine-generated.

    Args:
        text: The prose to classify. Minimum-length checks belong to the caller.
        policy: Optional weight/band overrides. Uses ``DEFAULT_SCORING_POLICY`` if omitted.
        patterns: Optional pattern tables for the signal extractors.

    Returns:
        A ``ClassificationResult``. Never raises for string input; empty text
        scores on zero-valued signals.
    """
    policy = policy or DEFAULT_SCORING_POLICY
    signals = extract_signals(text, patterns)
    ai_probability = score_signals(signals, policy)
    fired = _fired_signals(signals, policy)
    breakdown = _breakdown(signals, fired, policy)

    return ClassificationResult(
        ai_probability=ai_probability,
        human_probability=policy.score_max - ai_probability,
        verdict=verdict_for(ai_probability, policy),
        confidence=confidence_for(ai_probability, policy),
        breakdown=breakdown,
        recommendations=tuple(_recommendations(ai_probability, signals, fired, policy)),
        signals=signals,
        text_stats=_text_stats(text),
        detailed_breakdown=_detailed_breakdown(breakdown, signals, policy),
        policy_version=policy.version,
    )
