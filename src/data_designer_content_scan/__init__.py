# SPDX-License-Identifier: Apache-2.0
"""Content Scan plugin for NeMo Data Designer.

Adds ``keyword-density`` and ``ai-detector`` column types. Keyword density
ranks the most frequent words and buckets each into a density tier; the AI
detector scores text on eight regex/statistics signals and maps the result to
a probability, verdict and confidence. No LLM calls, no API dependencies.

Usage::

    from data_designer_content_scan.config import AIDetectorColumnConfig

    builder.add_column(AIDetectorColumnConfig(
        name="ai_check",
        target_columns=["article"],
        max_ai_probability=60,
    ))

The same engine is served over HTTP by ``data_designer_content_scan.api``.
"""

from data_designer_content_scan.density import DensityPolicy, analyze_density
from data_designer_content_scan.detector import ScoringPolicy, detect
from data_designer_content_scan.signals import SignalPatterns, extract_signals

__all__ = [
    "analyze_density",
    "detect",
    "extract_signals",
    "DensityPolicy",
    "ScoringPolicy",
    "SignalPatterns",
]
