from __future__ import annotations

from dataclasses import dataclass

_MINOR_WORDS = frozenset({
    "a", "an", "and", "as", "at", "but", "by", "for", "if", "in",
    "is", "it", "nor", "of", "on", "or", "so", "the", "to", "up", "yet",
})

RULES_APPLIED = (
    "Capitalized major words (nouns, verbs, adjectives)",
    "Kept articles lowercase (a, an, the)",
    "Kept prepositions lowercase (for, to, in, of, etc.)",
    "Capitalized first and last words",
)


@dataclass(frozen=True)
class TitleCaseResult:
    original: str
    converted: str
    rules_applied: tuple[str, ...] = RULES_APPLIED

    def to_payload(self) -> dict[str, object]:
        return {
            "original": self.original,
            "converted": self.converted,
            "rules_applied": list(self.rules_applied),
        }


def _capitalize(word: str) -> str:
    return word[:1].upper() + word[1:]


def to_title_case(text: str, minor_words: frozenset[str] = _MINOR_WORDS) -> TitleCaseResult:
    """Headline-case ``text``: minor words stay lower-case unless first or last."""
    words = text.lower().split()
    last = len(words) - 1
    converted = [
        _capitalize(word) if i in (0, last) or word not in minor_words else word
        for i, word in enumerate(words)
    ]
    return TitleCaseResult(original=text, converted=" ".join(converted))
