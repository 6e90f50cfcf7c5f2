# Conversational mode: contractions, plain words, direct address, simple sentences.

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from data_designer_writing_feedback.lexicon import (
    COMPLEX_CONJUNCTIONS,
    CONTRACTION_MAP,
    FORMAL_TRANSITIONS,
    FORMAL_WORDS,
    IMPERSONAL_PHRASES,
)
from data_designer_writing_feedback.modes.utils import average_words_per_sentence, count_words, split_sentences
from data_designer_writing_feedback.spans import count_matches, create_highlight, find_and_span, strip_tags

if TYPE_CHECKING:
    from data_designer_writing_feedback.core import Counters

_CLAUSE_INDICATOR_RE = re.compile(
    r"[,;:]\s*(?:and|but|or|which|that|who|where|when|while|although|because|since|if|unless|until|after|before)",
    re.IGNORECASE,
)
_CONTRACTION_RE = re.compile(r"'(t|s|re|ve|ll|d|m)\b", re.IGNORECASE)
_PERSONAL_PRONOUN_RE = re.compile(r"\b(you|we|I|us|me|our|your)\b", re.IGNORECASE)


def has_complex_structure(sentence: str) -> bool:
    """More than two clause indicators, or over 25 words with at least one."""
    clauses = len(_CLAUSE_INDICATOR_RE.findall(sentence))
    return clauses > 2 or (count_words(sentence) > 25 and clauses > 0)


def get_conversational_analysis(sentence: str, counters: Counters, full_text: str = "") -> str:
    result = find_and_span(sentence, CONTRACTION_MAP, "conversational-missing-contraction", counters, "conversational.missing_contractions")
    result = find_and_span(result, FORMAL_WORDS, "conversational-formal", counters, "conversational.formal_words")
    result = find_and_span(result, IMPERSONAL_PHRASES, "conversational-impersonal", counters, "conversational.impersonal_language")
    result = find_and_span(result, COMPLEX_CONJUNCTIONS, "conversational-complex", counters, "conversational.complex_conjunctions")
    result = find_and_span(result, FORMAL_TRANSITIONS, "conversational-transition", counters, "conversational.formal_transitions")

    if has_complex_structure(strip_tags(sentence)):
        counters.conversational.complex_sentences += 1
        result = create_highlight(
            result, "conversational-complex-sentence",
            "Simplify this sentence", "Break this into simpler sentences for better conversation flow",
        )
    return result


def analyze_conversational_tone(text: str) -> dict:
    """Score a whole document for conversational tone (0-100, 50 is neutral).

    Returns:
        Dict with keys: score, question_percentage, contraction_count,
        formal_word_count, personal_pronoun_count, average_words_per_sentence,
        recommendations.
    """
    sentences = split_sentences(text)
    question_count = text.count("?")
    question_percentage = question_count / len(sentences) * 100 if sentences else 0.0
    contraction_count = len(_CONTRACTION_RE.findall(text))
    formal_word_count = count_matches(text, FORMAL_WORDS)
    pronoun_count = len(_PERSONAL_PRONOUN_RE.findall(text))
    total_words = count_words(text)
    average = average_words_per_sentence(text)

    score = 50.0
    score += min(contraction_count * 2, 15)
    score += min(question_percentage * 0.5, 10)
    score += min(pronoun_count * 0.5, 15)
    score -= min(formal_word_count * 3, 25)
    if average > 20:
        score -= min((average - 20) * 1.5, 15)

    recommendations = []
    if contraction_count == 0 and total_words > 50:
        recommendations.append("Use contractions (don't, can't, you're) to sound more natural.")
    if formal_word_count > 5:
        recommendations.append("Replace formal words with simpler alternatives (use 'start' instead of 'commence').")
    if pronoun_count < 3 and total_words > 100:
        recommendations.append("Use more personal pronouns (you, we, I) to connect with readers.")
    if question_count == 0 and total_words > 100:
        recommendations.append("Add questions to engage your readers (What does this mean? How does this help?).")

    if score > 80:
        recommendations.append("Excellent conversational tone! Your writing feels natural and engaging.")
    elif score > 60:
        recommendations.append("Good conversational tone with room to be more natural.")
    elif score > 40:
        recommendations.append("Your writing could be more conversational - try reading it out loud.")
    else:
        recommendations.append("Focus on writing like you talk - use simple words and direct language.")

    return {
        "score": max(0, min(100, round(score))),
        "question_percentage": round(question_percentage),
        "contraction_count": contraction_count,
        "formal_word_count": formal_word_count,
        "personal_pronoun_count": pronoun_count,
        "average_words_per_sentence": round(average, 1),
        "recommendations": recommendations,
    }
