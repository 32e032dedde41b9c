from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_content_scan.config import AIDetectorColumnConfig, KeywordDensityColumnConfig
from data_designer_content_scan.density import analyze_density
from data_designer_content_scan.detector import detect

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


def _row_text(values) -> str:
    return " ".join(str(v) for v in values if v is not None)


def _skipped(text: str, min_length: int) -> dict | None:
    if len(text) >= min_length:
        return None
    return {"is_valid": False, "skipped_reason": f"content shorter than {min_length} characters"}


def density_row_output(text: str, config: KeywordDensityColumnConfig) -> dict:
    skipped = _skipped(text, config.min_content_length)
    if skipped:
        return skipped
    report = analyze_density(text)
    output: dict = {
        "is_valid": report.top_density < config.max_top_density,
        "total_words": report.total_words,
        "unique_keyword_count": report.unique_keyword_count,
        "average_density": report.average_density,
        "top_density": report.top_density,
    }
    if config.include_keywords:
        output["keywords"] = [k.to_payload() for k in report.top_keywords]
    return output


def detector_row_output(text: str, config: AIDetectorColumnConfig) -> dict:
    skipped = _skipped(text, config.min_content_length)
    if skipped:
        return skipped
    result = detect(text)
    output: dict = {
        "is_valid": result.ai_probability <= config.max_ai_probability,
        "ai_probability": result.ai_probability,
        "human_probability": result.human_probability,
        "verdict": result.verdict,
        "confidence": result.confidence,
    }
    if config.include_recommendations:
        output["recommendations"] = list(result.recommendations)
    if config.include_breakdown:
        output["breakdown"] = {name: ind.to_payload() for name, ind in result.breakdown.items()}
    return output


class KeywordDensityColumnGenerator(ColumnGeneratorFullColumn[KeywordDensityColumnConfig]):
    """Column generator that reports keyword density for each row."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f511 Analyzing keyword density for column {self.config.name!r}")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   max_top_density: {self.config.max_top_density}")

        results = [
            density_row_output(_row_text(row.values), self.config)
            for _, row in data[self.config.target_columns].iterrows()
        ]

        data = data.copy()
        data[self.config.name] = results
        return data


class AIDetectorColumnGenerator(ColumnGeneratorFullColumn[AIDetectorColumnConfig]):
    """Column generator that scores each row for AI-generated writing signals."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"\U0001f916 Scoring column {self.config.name!r} for AI-generated content")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   max_ai_probability: {self.config.max_ai_probability}")

        results = [
            detector_row_output(_row_text(row.values), self.config)
            for _, row in data[self.config.target_columns].iterrows()
        ]
        skipped = sum(1 for r in results if "skipped_reason" in r)
        if skipped:
            logger.info(f"   skipped {skipped} row(s) below {self.config.min_content_length} characters")

        data = data.copy()
        data[self.config.name] = results
        return data
