# Inline span annotation shared by every analyzer.
#
# Spans are rendered as <span class="..." data-suggestion="..." data-reason="...">
# around the literal matched text. Matching only ever looks at text between
# existing span tags, so markup inserted by an earlier pass is never matched,
# counted, or corrupted by a later one.

from __future__ import annotations

import html
import re
from collections.abc import Iterable, Mapping
from functools import lru_cache
from typing import TYPE_CHECKING, Callable, Union

if TYPE_CHECKING:
    from data_designer_writing_feedback.core import Counters

MatchSpec = Union[str, Iterable[str], Mapping[str, str]]

_SPAN_TAG_RE = re.compile(r"(</?span\b[^>]*>)", re.IGNORECASE)


@lru_cache(maxsize=2048)
def phrase_pattern(phrase: str) -> re.Pattern[str]:
    """Case-insensitive whole-word pattern for a literal phrase."""
    return re.compile(r"(?<!\w)" + re.escape(phrase) + r"(?!\w)", re.IGNORECASE)


def open_tag(class_name: str, suggestion: str = "", reason: str = "") -> str:
    attributes = f'class="{html.escape(class_name)}"'
    if suggestion:
        attributes += f' data-suggestion="{html.escape(suggestion)}"'
    if reason:
        attributes += f' data-reason="{html.escape(reason)}"'
    return f"<span {attributes}>"


def create_highlight(text: str, class_name: str, suggestion: str = "", reason: str = "") -> str:
    return f"{open_tag(class_name, suggestion, reason)}{text}</span>"


def strip_tags(text: str) -> str:
    return _SPAN_TAG_RE.sub("", text)


def span_balance(text: str) -> tuple[int, int]:
    """Return ``(lowest, final)`` span nesting depth while reading ``text``.

    A fragment can be wrapped in a new span without breaking existing ones
    exactly when both values are zero.
    """
    depth = lowest = 0
    for tag in _SPAN_TAG_RE.findall(text):
        depth += -1 if tag.startswith("</") else 1
        lowest = min(lowest, depth)
    return lowest, depth


def split_words(text: str) -> list[str]:
    """Split on single spaces outside span tags.

    Tags stay glued to the word they touch, so ``" ".join(split_words(s)) == s``
    and the word count matches that of the tag-stripped text.
    """
    tokens = [""]
    for i, part in enumerate(_SPAN_TAG_RE.split(text)):
        if i % 2:
            tokens[-1] += part
            continue
        pieces = part.split(" ")
        tokens[-1] += pieces[0]
        tokens.extend(pieces[1:])
    return tokens


def _subn_outside_tags(text: str, pattern: re.Pattern[str], repl: Callable[[re.Match[str]], str]) -> tuple[str, int]:
    parts = _SPAN_TAG_RE.split(text)
    total = 0
    # re.split with a capturing group alternates text, tag, text, tag, ...
    for i in range(0, len(parts), 2):
        parts[i], n = pattern.subn(repl, parts[i])
        total += n
    return "".join(parts), total


def _items(match_spec: MatchSpec) -> list[tuple[str, str]]:
    if isinstance(match_spec, str):
        return [(match_spec, "")]
    if isinstance(match_spec, Mapping):
        return list(match_spec.items())
    return [(phrase, "") for phrase in match_spec]


def find_and_span(
    sentence: str,
    match_spec: MatchSpec,
    category: str,
    counters: Counters | None = None,
    counter_key: str | None = None,
    reason: str | None = None,
) -> str:
    """Wrap every whole-word occurrence of the given phrases in a category span.

    Args:
        sentence: Text to annotate. May already contain spans from earlier passes.
        match_spec: A single phrase, an iterable of phrases, or a mapping of
            phrase to suggested replacement.
        category: CSS class placed on each span.
        counters: Optional counters; incremented by the number of matches found
            before substitution.
        counter_key: Dotted counter name. Defaults to ``category``.
        reason: Fixed rationale for every span. When omitted, phrases with a
            replacement get ``Consider using "X" instead of "Y"``.

    Returns:
        The annotated sentence. The input string is never modified.
    """
    total = 0
    for phrase, replacement in _items(match_spec):
        if not phrase:
            continue
        why = reason if reason is not None else (
            f'Consider using "{replacement}" instead of "{phrase}"' if replacement else ""
        )
        sentence, n = _subn_outside_tags(
            sentence,
            phrase_pattern(phrase),
            lambda m, r=replacement, w=why: create_highlight(m.group(0), category, r, w),
        )
        total += n
    if counters is not None and total:
        counters.increment(counter_key or category, total)
    return sentence


def count_matches(text: str, phrases: Iterable[str]) -> int:
    """Count whole-word, case-insensitive occurrences of each phrase outside span tags."""
    plain = strip_tags(text)
    return sum(len(phrase_pattern(p).findall(plain)) for p in phrases if p)
