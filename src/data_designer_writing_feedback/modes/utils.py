# Helpers shared by the brevity, conversational and marketing analyzers.

from __future__ import annotations

import re

_SENTENCE_END_RE = re.compile(r"[.!?]+")
_PASSIVE_MARKER_RE = re.compile(r"\b(was|were|been|being|be)\s+\w+ed\b", re.IGNORECASE)

_CTA_PATTERNS = [
    re.compile(r"\b(get|start|try|download|sign up|subscribe|buy|purchase|order|click|join|learn|discover|explore|see|view|watch|read)\b", re.IGNORECASE),
    re.compile(r"\b(free|now|today|instant|immediately)\b", re.IGNORECASE),
    re.compile(r"\bbutton\b", re.IGNORECASE),
    re.compile(r"^(get|start|try|download|sign|buy|click|join)", re.IGNORECASE),
]

_SOCIAL_PROOF_PATTERNS = {
    "testimonials": re.compile(r"\b(testimonials?|reviews?|says)\b|\"[^\"]+\"", re.IGNORECASE),
    "numbers": re.compile(r"\b\d+[kmb]?\+?\s*(customers?|users?|companies|company|people)\b|\b\d+%", re.IGNORECASE),
    "companies": re.compile(r"\b(trusted by|used by|featured in|clients include)\b", re.IGNORECASE),
    "ratings": re.compile(r"\b(\d+\.\d+\s*stars?|\d+/\d+|rated)\b", re.IGNORECASE),
}


def count_words(text: str) -> int:
    return len(text.split())


def split_sentences(text: str) -> list[str]:
    """Split on runs of terminal punctuation, dropping blank pieces."""
    return [s for s in _SENTENCE_END_RE.split(text) if s.strip()]


def average_words_per_sentence(text: str) -> float:
    sentences = split_sentences(text)
    return count_words(text) / len(sentences) if sentences else 0.0


def check_sentence_length(sentence: str, max_words: int = 15) -> dict:
    word_count = count_words(sentence)
    if word_count > max_words:
        return {
            "issue": True,
            "word_count": word_count,
            "suggestion": (
                f"This sentence has {word_count} words. Consider breaking it into shorter "
                f"sentences (aim for {max_words} words or fewer)."
            ),
            "severity": "high" if word_count > max_words * 1.5 else "medium",
        }
    return {"issue": False, "word_count": word_count}


def is_headline_or_opening(text: str, sentence: str) -> bool:
    """True when the sentence sits at the very start of the text.

    Counts as an opening when it appears within the first 100 characters,
    is the first sentence, or is short (< 60 chars) and starts within the
    first 50 characters. The trailing period added by the paragraph splitter
    is ignored, so an unpunctuated headline line still matches the raw text.
    """
    text_start = text.strip()[:200]
    sentence_clean = sentence.strip().rstrip(".")
    if not sentence_clean:
        return False
    position = text_start.find(sentence_clean)
    return (
        0 <= position < 100
        or text_start.startswith(sentence_clean)
        or (len(sentence_clean) < 60 and 0 <= position < 50)
    )


def count_passive_markers(sentence: str) -> int:
    return len(_PASSIVE_MARKER_RE.findall(sentence))


def calculate_passive_percentage(text: str) -> int:
    sentences = split_sentences(text)
    if not sentences:
        return 0
    passive = sum(1 for s in sentences if count_passive_markers(s) > 0)
    return round(passive / len(sentences) * 100)


def is_short_cta(sentence: str) -> bool:
    trimmed = sentence.strip()
    return len(trimmed) < 100 and any(p.search(trimmed) for p in _CTA_PATTERNS)


def extract_ctas(text: str) -> list[str]:
    """Sentences that read like calls to action: short and action-flavoured."""
    return [s for s in split_sentences(text) if is_short_cta(s)]


def analyze_social_proof(text: str) -> dict:
    found = {kind: len(pattern.findall(text)) for kind, pattern in _SOCIAL_PROOF_PATTERNS.items()}
    total = sum(found.values())
    return {"types": found, "total": total, "has_proof": total > 0}
