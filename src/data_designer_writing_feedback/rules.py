# Standard per-sentence analyzers: adverbs, complex words, passive voice, qualifiers.
#
# Each analyzer takes one sentence plus the run's Counters, returns the
# annotated sentence, and updates its own counter bucket. They are applied in
# a fixed order by the pipeline: adverb -> complex -> passive -> qualifier.

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Callable

from data_designer_writing_feedback.lexicon import (
    ADVERB_EXCEPTIONS,
    COMPLEX_WORDS,
    EXPANDED_HELPING_VERBS,
    HELPING_VERBS,
    IRREGULAR_PARTICIPLES,
    PASSIVE_INTERVENERS,
    QUALIFIERS,
)
from data_designer_writing_feedback.readability import normalize
from data_designer_writing_feedback.spans import (
    create_highlight,
    find_and_span,
    open_tag,
    span_balance,
    split_words,
    strip_tags,
)

if TYPE_CHECKING:
    from data_designer_writing_feedback.core import Counters

Analyzer = Callable[[str, "Counters"], str]

PASSIVE_LOOKBACK = 4
BY_PHRASE_LOOKAHEAD = 3

_PASSIVE_TOKEN_RE = re.compile(r"[^a-z']")

# ---------------------------------------------------------------------------
# Adverbs, complex words, qualifiers
# ---------------------------------------------------------------------------


def get_adverbs(sentence: str, counters: Counters) -> str:
    """Highlight words ending in -ly that are not known non-adverbs."""
    words = []
    for word in split_words(sentence):
        clean = normalize(strip_tags(word))
        if clean.endswith("ly") and clean.lower() not in ADVERB_EXCEPTIONS:
            counters.adverbs += 1
            words.append(create_highlight(word, "adverb"))
        else:
            words.append(word)
    return " ".join(words)


def get_complex(sentence: str, counters: Counters) -> str:
    """Highlight every occurrence of a phrase with a simpler alternative."""
    return find_and_span(sentence, COMPLEX_WORDS, "complex", counters)


def get_qualifiers(sentence: str, counters: Counters) -> str:
    """Highlight weakening phrases such as "I think" or "perhaps"."""
    return find_and_span(sentence, QUALIFIERS, "qualifier", counters, counter_key="qualifiers")


# ---------------------------------------------------------------------------
# Passive voice
# ---------------------------------------------------------------------------


def _nesting_range(words: list[str], first: int, last: int) -> tuple[int, int] | None:
    """Widen ``words[first:last + 1]`` until it holds only whole spans.

    A helper or participle inside a multi-word span from an earlier pass pulls
    that whole span into the passive wrap, so existing spans stay nested.
    """
    while True:
        lowest, final = span_balance(" ".join(words[first : last + 1]))
        if lowest < 0:
            if first == 0:
                return None
            first -= 1
        elif final > 0:
            if last == len(words) - 1:
                return None
            last += 1
        else:
            return first, last


def get_passive_legacy(sentence: str, counters: Counters) -> str:
    """Adjacent-word passive check: a helping verb directly before an -ed word.

    Every distinct -ed word is scanned left to right. After a match, scanning
    resumes only after the participle, so one helping verb never serves two
    participles; the first occurrence without a helping verb ends the scan for
    that word.
    """
    original = split_words(sentence)
    words = [normalize(strip_tags(w)).lower() for w in original]
    participles = list(dict.fromkeys(w for w in words if w.endswith("ed")))

    for participle in participles:
        start = 0
        while participle in words[start:]:
            index = words.index(participle, start)
            if index - 1 < start or words[index - 1] not in HELPING_VERBS:
                break
            bounds = _nesting_range(original, index - 1, index)
            if bounds is None:
                start = index + 1
                continue
            first, last = bounds
            counters.passive_voice += 1
            original[first] = open_tag("passive") + original[first]
            original[last] = original[last] + "</span>"
            start = last + 1
    return " ".join(original)


def _is_participle(token: str) -> bool:
    return token.endswith("ed") or token in IRREGULAR_PARTICIPLES


def _find_helper(tokens: list[str], index: int, floor: int) -> int | None:
    """Index of the first helping verb in the chain before ``tokens[index]``.

    Looks back at most PASSIVE_LOOKBACK tokens, never below ``floor``. Only
    adverb-like tokens may sit between the helper chain and the participle.
    """
    found = None
    for j in range(index - 1, max(floor, index - PASSIVE_LOOKBACK) - 1, -1):
        token = tokens[j]
        if token in EXPANDED_HELPING_VERBS:
            found = j
        elif found is not None:
            break
        elif token.endswith("ly") or token in PASSIVE_INTERVENERS:
            continue
        else:
            return None
    return found


def get_passive(sentence: str, counters: Counters) -> str:
    """Windowed passive check with irregular participles and an expanded helper set."""
    original = split_words(sentence)
    tokens = [_PASSIVE_TOKEN_RE.sub("", strip_tags(w).lower()) for w in original]
    floor = 0

    for i, token in enumerate(tokens):
        if i < floor or not _is_participle(token):
            continue
        helper = _find_helper(tokens, i, floor)
        if helper is None:
            continue
        bounds = _nesting_range(original, helper, i)
        if bounds is None:
            continue
        first, last = bounds
        has_agent = "by" in tokens[i + 1 : i + 1 + BY_PHRASE_LOOKAHEAD]
        confidence = "high" if has_agent else "medium"
        counters.passive_voice += 1
        original[first] = open_tag(
            "passive", reason=f"Passive voice ({confidence} confidence): consider an active construction"
        ) + original[first]
        original[last] = original[last] + "</span>"
        floor = last + 1
    return " ".join(original)


PASSIVE_ANALYZERS: dict[str, Analyzer] = {
    "legacy": get_passive_legacy,
    "enhanced": get_passive,
}
