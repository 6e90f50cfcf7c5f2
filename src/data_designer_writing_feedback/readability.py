"""Grade level (Automated Readability Index coefficients) and sentence difficulty classification."""

from __future__ import annotations

import math
import re
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from data_designer_writing_feedback.core import Thresholds

_NON_LEXICAL_RE = re.compile(r"[^a-z0-9. ]", re.IGNORECASE)


def normalize(text: str) -> str:
    """Drop everything except letters, digits, periods and spaces."""
    return _NON_LEXICAL_RE.sub("", text)


def calculate_level(letters: int, words: int, sentences: int) -> int:
    """Grade level from letter, word and sentence counts.

    ``4.71 * letters/words + 0.5 * words/sentences - 21.43``, rounded half up
    and floored at zero. Returns 0 instead of dividing by zero.
    """
    if words == 0 or sentences == 0:
        return 0
    raw = 4.71 * (letters / words) + 0.5 * words / sentences - 21.43
    level = math.floor(raw + 0.5)
    return max(level, 0)


def sentence_stats(sentence: str) -> tuple[int, int]:
    """Return ``(words, letters)`` for one sentence on its normalized form."""
    clean = normalize(sentence) + "."
    fields = clean.split(" ")
    return len(fields), len("".join(fields))


def classify_level(level: int, word_count: int, thresholds: Thresholds) -> str | None:
    if word_count < thresholds.min_words_for_difficulty:
        return None
    if level >= thresholds.very_hard_level_min:
        return "very_hard"
    if level >= thresholds.hard_level_min:
        return "hard"
    return None
