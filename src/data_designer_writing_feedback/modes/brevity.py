# Brevity mode: shorter sentences, fewer wordy and redundant phrases.

from __future__ import annotations

from typing import TYPE_CHECKING

from data_designer_writing_feedback.lexicon import FILLER_WORDS, REDUNDANT_PHRASES, WEAK_QUALIFIERS, WORDY_PHRASES
from data_designer_writing_feedback.modes.utils import (
    average_words_per_sentence,
    calculate_passive_percentage,
    check_sentence_length,
    count_words,
    split_sentences,
)
from data_designer_writing_feedback.spans import count_matches, create_highlight, find_and_span, strip_tags

if TYPE_CHECKING:
    from data_designer_writing_feedback.core import Counters

LONG_SENTENCE_WORDS = 15


def get_brevity_analysis(sentence: str, counters: Counters, full_text: str = "") -> str:
    """Annotate one sentence for length, wordiness, redundancy, filler and hedging."""
    result = sentence

    length_check = check_sentence_length(strip_tags(sentence), LONG_SENTENCE_WORDS)
    if length_check["issue"]:
        counters.brevity.long_sentences += 1
        result = create_highlight(result, "brevity-long-sentence", "Break into shorter sentences", length_check["suggestion"])

    result = find_and_span(result, WORDY_PHRASES, "brevity-wordy", counters, "brevity.wordy_phrases")
    result = find_and_span(result, REDUNDANT_PHRASES, "brevity-redundant", counters, "brevity.redundant_phrases")
    result = find_and_span(
        result, FILLER_WORDS, "brevity-filler", counters, "brevity.filler_words",
        reason="Remove this filler word for more impact",
    )
    result = find_and_span(
        result, WEAK_QUALIFIERS, "brevity-qualifier", counters, "brevity.weak_qualifiers",
        reason="Consider removing this qualifier for stronger writing",
    )
    return result


def analyze_brevity_metrics(text: str) -> dict:
    """Score a whole document for brevity (0-100, higher is more concise).

    Returns:
        Dict with keys: score, average_words_per_sentence, long_sentence_percentage,
        passive_percentage, total_wordy_phrases, recommendations.
    """
    sentences = split_sentences(text)
    average = average_words_per_sentence(text)
    long_sentences = sum(1 for s in sentences if count_words(s) > LONG_SENTENCE_WORDS)
    long_percentage = long_sentences / len(sentences) * 100 if sentences else 0.0
    passive_percentage = calculate_passive_percentage(text)
    total_wordy = count_matches(text, list(WORDY_PHRASES) + list(REDUNDANT_PHRASES))

    score = 100.0
    score -= min(long_percentage * 0.5, 25)
    if passive_percentage > 10:
        score -= min((passive_percentage - 10) * 2, 20)
    score -= min(total_wordy * 3, 20)
    if average > LONG_SENTENCE_WORDS:
        score -= min((average - LONG_SENTENCE_WORDS) * 2, 15)

    return {
        "score": max(0, round(score)),
        "average_words_per_sentence": round(average, 1),
        "long_sentence_percentage": round(long_percentage),
        "passive_percentage": passive_percentage,
        "total_wordy_phrases": total_wordy,
        "recommendations": _recommendations(score, long_percentage, passive_percentage, total_wordy, average),
    }


def _recommendations(score: float, long_percentage: float, passive_percentage: int, total_wordy: int, average: float) -> list[str]:
    recommendations = []
    if long_percentage > 30:
        recommendations.append("Break up long sentences - aim for 15 words or fewer per sentence.")
    if passive_percentage > 15:
        recommendations.append("Use more active voice - replace passive constructions with active ones.")
    if total_wordy > 3:
        recommendations.append("Replace wordy phrases with shorter alternatives (e.g., 'in order to' -> 'to').")
    if average > 20:
        recommendations.append("Reduce average sentence length for better readability.")

    if score > 80:
        recommendations.append("Excellent brevity! Your writing is concise and impactful.")
    elif score > 60:
        recommendations.append("Good brevity with room for improvement.")
    else:
        recommendations.append("Focus on cutting unnecessary words and phrases.")
    return recommendations
