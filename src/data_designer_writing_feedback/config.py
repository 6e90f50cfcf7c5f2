from __future__ import annotations

from typing import Literal

from pydantic import Field

from data_designer.config.column_configs import SingleColumnConfig


class WritingFeedbackColumnConfig(SingleColumnConfig):
    """Annotate text columns with readability and style feedback.

    Runs the sentence difficulty pipeline (adverbs, complex words, passive voice,
    qualifiers, optional writing mode) over each row's text and reports counts,
    summary tips, and optionally the annotated HTML.

    Attributes:
        target_columns: Columns whose text content will be concatenated and analyzed.
        writing_mode: Optional rhetorical lens applied on top of the standard analysis.
        passive_detection: ``enhanced`` (windowed, irregular participles) or ``legacy``
            (helping verb directly before an -ed word).
        max_difficult_ratio: Largest share of hard plus very hard sentences for
            ``is_valid=True``. Defaults to 0.3.
        include_html: Include the annotated HTML in output.
        include_tips: Include human-readable summary tips in output.
        include_mode_report: Include the writing mode's whole-document report.
    """

    target_columns: list[str]
    writing_mode: Literal["none", "brevity", "conversational", "marketing"] = "none"
    passive_detection: Literal["legacy", "enhanced"] = "enhanced"
    max_difficult_ratio: float = Field(default=0.3, ge=0.0, le=1.0, description="Largest hard-sentence share for is_valid=True")
    include_html: bool = Field(default=False, description="Include annotated HTML in output")
    include_tips: bool = Field(default=True, description="Include summary tips in output")
    include_mode_report: bool = Field(default=True, description="Include the writing mode report in output")
    column_type: Literal["writing-feedback"] = "writing-feedback"

    @staticmethod
    def get_column_emoji() -> str:
        return "✍️"

    @property
    def required_columns(self) -> list[str]:
        return self.target_columns

    @property
    def side_effect_columns(self) -> list[str]:
        return []
