# On-page SEO checklist scorer and tag suggester for drafted posts.

from __future__ import annotations

import re
from dataclasses import dataclass

from data_designer_content_scan.tokenizer import split_paragraphs, word_count

_H2_RE = re.compile(r"^##\s", re.MULTILINE)

_CTA_WORDS = ("learn", "discover", "get started", "try", "download", "contact", "subscribe")


@dataclass(frozen=True)
class SeoPolicy:
    """Checklist thresholds and the points each check is worth."""

    title_min_chars: int = 50
    title_max_chars: int = 60
    title_points: int = 15
    min_words: int = 300
    length_points: int = 20
    keyword_in_title_points: int = 5
    keyword_in_content_points: int = 10
    keyword_points_cap: int = 25
    min_headers: int = 3
    header_points: int = 15
    min_paragraphs: int = 4
    paragraph_points: int = 10
    list_points: int = 10
    cta_words: tuple[str, ...] = _CTA_WORDS
    cta_points: int = 5
    score_max: int = 100

    max_tags: int = 5
    title_tags: int = 3
    keyword_tags: int = 2
    tag_min_chars: int = 4


DEFAULT_SEO_POLICY = SeoPolicy()


@dataclass(frozen=True)
class SeoReport:
    score: int
    tips: tuple[str, ...]

    def to_payload(self) -> dict[str, object]:
        return {"score": self.score, "tips": list(self.tips)}


def parse_keywords(keywords: str | None) -> list[str]:
    if not keywords:
        return []
    return [k.strip().lower() for k in keywords.split(",") if k.strip()]


def score_seo(content: str, title: str, keywords: str | None = None, policy: SeoPolicy | None = None) -> SeoReport:
    """Score a draft against a fixed on-page checklist.

    ``keywords`` is a comma-separated string; the keyword check only runs when
    at least one keyword is given. Every failed check contributes a tip.
    """
    hp = policy or DEFAULT_SEO_POLICY
    tips: list[str] = []
    score = 0

    if hp.title_min_chars <= len(title) <= hp.title_max_chars:
        score += hp.title_points
    else:
        tips.append(f"Title should be {hp.title_min_chars}-{hp.title_max_chars} characters for optimal SEO")

    if word_count(content) >= hp.min_words:
        score += hp.length_points
    else:
        tips.append(f"Content should be at least {hp.min_words} words for better SEO")

    keyword_list = parse_keywords(keywords)
    if keyword_list:
        content_lower = content.lower()
        title_lower = title.lower()
        keyword_score = 0
        for keyword in keyword_list:
            if keyword in title_lower:
                keyword_score += hp.keyword_in_title_points
            if keyword in content_lower:
                keyword_score += hp.keyword_in_content_points
        score += min(keyword_score, hp.keyword_points_cap)
        if keyword_score == 0:
            tips.append("Include target keywords in title and content")

    if len(_H2_RE.findall(content)) >= hp.min_headers:
        score += hp.header_points
    else:
        tips.append(f"Use at least {hp.min_headers} H2 headers to structure your content")

    if len(split_paragraphs(content)) >= hp.min_paragraphs:
        score += hp.paragraph_points
    else:
        tips.append(f"Break content into multiple paragraphs ({hp.min_paragraphs}+) for better readability")

    if "- " in content or "* " in content:
        score += hp.list_points
    else:
        tips.append("Use bullet points or lists to improve readability")

    content_lower = content.lower()
    if any(word in content_lower for word in hp.cta_words):
        score += hp.cta_points
    else:
        tips.append("Include a call-to-action to engage readers")

    return SeoReport(score=min(score, hp.score_max), tips=tuple(tips))


def suggest_tags(title: str, keywords: str | None = None, policy: SeoPolicy | None = None) -> list[str]:
    hp = policy or DEFAULT_SEO_POLICY
    title_words = [w for w in title.lower().split() if len(w) >= hp.tag_min_chars]
    tags = title_words[: hp.title_tags] + parse_keywords(keywords)[: hp.keyword_tags]
    return list(dict.fromkeys(tags))[: hp.max_tags]
