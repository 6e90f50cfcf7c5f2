"""Optional writing modes layered on top of the standard analysis.

Each mode has a per-sentence annotator and a whole-document metrics function.
"""

from data_designer_writing_feedback.modes.brevity import analyze_brevity_metrics, get_brevity_analysis
from data_designer_writing_feedback.modes.conversational import analyze_conversational_tone, get_conversational_analysis
from data_designer_writing_feedback.modes.marketing import analyze_cta_strength, analyze_marketing_effectiveness, get_marketing_analysis

MODE_ANALYZERS = {
    "brevity": get_brevity_analysis,
    "conversational": get_conversational_analysis,
    "marketing": get_marketing_analysis,
}

MODE_METRICS = {
    "brevity": analyze_brevity_metrics,
    "conversational": analyze_conversational_tone,
    "marketing": analyze_marketing_effectiveness,
}

__all__ = [
    "MODE_ANALYZERS",
    "MODE_METRICS",
    "analyze_brevity_metrics",
    "analyze_conversational_tone",
    "analyze_cta_strength",
    "analyze_marketing_effectiveness",
    "get_brevity_analysis",
    "get_conversational_analysis",
    "get_marketing_analysis",
]
