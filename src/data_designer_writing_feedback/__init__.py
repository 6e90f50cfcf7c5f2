# SPDX-License-Identifier: Apache-2.0
"""Writing feedback plugin for NeMo Data Designer.

Adds a ``writing-feedback`` column type that annotates prose with readability
and style issues: adverbs, passive voice, complex words, weakening qualifiers,
and optional brevity, conversational or marketing checks. Pure pattern
matching against fixed word lists; no LLM calls.

Usage::

    from data_designer_writing_feedback import WritingFeedbackColumnConfig

    builder.add_column(WritingFeedbackColumnConfig(
        name="feedback",
        target_columns=["article"],
        writing_mode="brevity",
    ))

The analysis can also be used directly::

    from data_designer_writing_feedback import Counters, Settings, analyze_paragraph

    counters = Counters()
    html = analyze_paragraph("The report was carefully written.", counters, Settings())
"""

from data_designer_writing_feedback.config import WritingFeedbackColumnConfig
from data_designer_writing_feedback.core import (
    Counters,
    DocumentAnalysis,
    Settings,
    Thresholds,
    analyze_document,
    analyze_paragraph,
    build_tips,
)
from data_designer_writing_feedback.modes import (
    analyze_brevity_metrics,
    analyze_conversational_tone,
    analyze_cta_strength,
    analyze_marketing_effectiveness,
)
from data_designer_writing_feedback.readability import calculate_level

__all__ = [
    "WritingFeedbackColumnConfig",
    "Counters",
    "DocumentAnalysis",
    "Settings",
    "Thresholds",
    "analyze_document",
    "analyze_paragraph",
    "analyze_brevity_metrics",
    "analyze_conversational_tone",
    "analyze_cta_strength",
    "analyze_marketing_effectiveness",
    "build_tips",
    "calculate_level",
]
