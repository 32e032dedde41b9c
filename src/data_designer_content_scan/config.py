from __future__ import annotations

from typing import Literal

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig


class KeywordDensityColumnConfig(SingleColumnConfig):
    """Report keyword density for text columns.

    Tokenizes each row's text, counts keyword frequencies and produces the top
    keywords with their density percentage and density tier.

    Attributes:
        target_columns: Columns whose text content will be concatenated and analyzed.
        max_top_density: Rows whose most frequent keyword reaches this density (percent)
            are flagged ``is_valid=False``. Defaults to 4.0, where the "high" tier starts.
        min_content_length: Rows with fewer characters are skipped and marked invalid.
        include_keywords: Include the ranked keyword records in output.
    """

    target_columns: list[str]
    max_top_density: float = Field(default=4.0, gt=0, le=100, description="Top keyword density that marks a row invalid")
    min_content_length: int = Field(default=50, ge=0, description="Minimum characters required to analyze a row")
    include_keywords: bool = Field(default=True, description="Include ranked keyword records in output")
    column_type: Literal["keyword-density"] = "keyword-density"

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f511"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []


class AIDetectorColumnConfig(SingleColumnConfig):
    """Estimate how likely text columns are to be AI-generated.

    Extracts eight heuristic writing signals per row and combines them into an
    AI probability (0-100), a verdict, a confidence band and recommendations.

    Attributes:
        target_columns: Columns whose text content will be concatenated and scored.
        max_ai_probability: Maximum AI probability for ``is_valid=True``. Defaults to 60
            (the floor of the "Possibly AI-generated" band).
        min_content_length: Rows with fewer characters are skipped and marked invalid.
        include_recommendations: Include rewrite recommendations in output.
        include_breakdown: Include per-indicator scores and descriptions in output.
    """

    target_columns: list[str]
    max_ai_probability: int = Field(default=60, ge=0, le=100, description="Maximum AI probability for is_valid=True")
    min_content_length: int = Field(default=50, ge=0, description="Minimum characters required to score a row")
    include_recommendations: bool = Field(default=True, description="Include recommendation strings in output")
    include_breakdown: bool = Field(default=False, description="Include per-indicator breakdown in output")
    column_type: Literal["ai-detector"] = "ai-detector"

    @staticmethod
    def get_column_emoji() -> str:
        return "\U0001f916"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []
