from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from data_designer.engine.column_generators.generators.base import ColumnGeneratorFullColumn

from data_designer_writing_feedback.config import WritingFeedbackColumnConfig
from data_designer_writing_feedback.core import Settings, analyze_document

if TYPE_CHECKING:
    import pandas as pd

logger = logging.getLogger(__name__)


class WritingFeedbackColumnGenerator(ColumnGeneratorFullColumn[WritingFeedbackColumnConfig]):
    """Column generator that annotates text with readability and style feedback."""

    def generate(self, data: pd.DataFrame) -> pd.DataFrame:
        logger.info(f"✍️ Analyzing column {self.config.name!r} for writing feedback")
        logger.info(f"   target columns: {self.config.target_columns}")
        logger.info(f"   writing mode: {self.config.writing_mode}, passive detection: {self.config.passive_detection}")

        settings = Settings(passive_detection=self.config.passive_detection, writing_mode=self.config.writing_mode)
        results = []
        for _, row in data[self.config.target_columns].iterrows():
            text = "\n".join(str(v) for v in row.values if v is not None)
            analysis = analyze_document(text, settings)
            counters = analysis.counters
            difficult = counters.hard_sentences + counters.very_hard_sentences
            ratio = difficult / counters.sentences if counters.sentences else 0.0
            output: dict = {
                "is_valid": ratio <= self.config.max_difficult_ratio,
                "difficult_ratio": round(ratio, 3),
                "readability": counters.to_payload(),
            }
            if self.config.include_tips:
                output["tips"] = analysis.tips
            if self.config.include_mode_report and analysis.mode_report is not None:
                output["mode_report"] = analysis.mode_report
            if self.config.include_html:
                output["html"] = analysis.html
            results.append(output)

        data = data.copy()
        data[self.config.name] = results
        return data
