# Sentence difficulty pipeline: the entry point that ties every analyzer together.
#
# A paragraph is split into sentences; each sentence runs through the standard
# analyzers (adverb -> complex -> passive -> qualifier), then the optional
# writing-mode annotator, then is wrapped as hard or very hard when its
# readability level calls for it. All counts land on one Counters object owned
# by the caller for the duration of a single analysis run.

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field, fields
from functools import reduce

from data_designer_writing_feedback.modes import MODE_ANALYZERS, MODE_METRICS
from data_designer_writing_feedback.readability import calculate_level, classify_level, sentence_stats
from data_designer_writing_feedback.rules import PASSIVE_ANALYZERS, Analyzer, get_adverbs, get_complex, get_qualifiers
from data_designer_writing_feedback.spans import create_highlight, strip_tags

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Thresholds and settings
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Thresholds:
    """Readability cut-offs used to classify sentences."""

    hard_level_min: int = 10
    very_hard_level_min: int = 14
    min_words_for_difficulty: int = 14
    issue_excerpt_chars: int = 50


DEFAULT_THRESHOLDS = Thresholds()


@dataclass(frozen=True)
class Settings:
    """Per-run analysis options.

    ``passive_detection`` is ``"legacy"`` or ``"enhanced"``; ``writing_mode`` is
    ``"none"``, ``"brevity"``, ``"conversational"`` or ``"marketing"``. Unknown
    values fall back to the enhanced detector and to no mode.
    """

    passive_detection: str = "enhanced"
    writing_mode: str = "none"


DEFAULT_SETTINGS = Settings()

# ---------------------------------------------------------------------------
# Counters
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SpecificIssue:
    category: str
    text: str
    suggestion: str
    icon: str

    def to_payload(self) -> dict[str, object]:
        return {
            "type": "SpecificIssue",
            "category": self.category,
            "text": self.text,
            "suggestion": self.suggestion,
            "icon": self.icon,
        }


@dataclass
class BrevityCounts:
    long_sentences: int = 0
    wordy_phrases: int = 0
    redundant_phrases: int = 0
    filler_words: int = 0
    weak_qualifiers: int = 0


@dataclass
class ConversationalCounts:
    missing_contractions: int = 0
    formal_words: int = 0
    impersonal_language: int = 0
    complex_conjunctions: int = 0
    formal_transitions: int = 0
    complex_sentences: int = 0


@dataclass
class MarketingCounts:
    weak_headlines: int = 0
    weak_ctas: int = 0
    feature_focused: int = 0
    vague_claims: int = 0
    missing_urgency: int = 0
    cta_positioning: dict | None = None


@dataclass
class Counters:
    """Mutable tallies for one analysis run.

    Create one per document (or call ``reset``); sharing an instance between
    two runs mixes their counts.
    """

    paragraphs: int = 0
    sentences: int = 0
    words: int = 0
    characters: int = 0
    hard_sentences: int = 0
    very_hard_sentences: int = 0
    adverbs: int = 0
    passive_voice: int = 0
    complex: int = 0
    qualifiers: int = 0
    brevity: BrevityCounts = field(default_factory=BrevityCounts)
    conversational: ConversationalCounts = field(default_factory=ConversationalCounts)
    marketing: MarketingCounts = field(default_factory=MarketingCounts)
    specific_issues: list[SpecificIssue] = field(default_factory=list)

    def increment(self, key: str, amount: int = 1) -> None:
        """Add to a counter by dotted name, e.g. ``"brevity.wordy_phrases"``."""
        *path, name = key.split(".")
        target = reduce(getattr, path, self)
        setattr(target, name, getattr(target, name) + amount)

    def reset(self) -> None:
        fresh = Counters()
        for f in fields(self):
            setattr(self, f.name, getattr(fresh, f.name))

    def to_payload(self) -> dict[str, object]:
        payload = asdict(self)
        payload["specific_issues"] = [issue.to_payload() for issue in self.specific_issues]
        return payload


@dataclass(frozen=True)
class DocumentAnalysis:
    html: str
    counters: Counters
    mode_report: dict | None
    tips: list[str]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

_DIFFICULTY = {
    "hard": ("hardSentence", "hard_sentences", "\u26a0\ufe0f", "This sentence is hard to read. Shorten it or split it in two."),
    "very_hard": ("veryHardSentence", "very_hard_sentences", "\U0001f534", "This sentence is very hard to read. Split it into shorter sentences."),
}


def get_sentences_from_paragraph(paragraph: str) -> list[str]:
    """Split on the literal ". " delimiter and re-append a period to each piece.

    Blank pieces are dropped, so an empty paragraph has no sentences. Not
    abbreviation aware: "Mr. Smith" splits after "Mr".
    """
    return [s.rstrip() + "." for s in paragraph.split(". ") if s.strip()]


def _excerpt(sentence: str, limit: int) -> str:
    plain = strip_tags(sentence).strip()
    return plain if len(plain) <= limit else plain[:limit].rstrip() + "..."


def _pipeline_for(settings: Settings) -> list[Analyzer]:
    passive = PASSIVE_ANALYZERS.get(settings.passive_detection, PASSIVE_ANALYZERS["enhanced"])
    return [get_adverbs, get_complex, passive, get_qualifiers]


def build_tips(counters: Counters) -> list[str]:
    """Human-readable summary lines for the counters of a finished run."""
    sentences_are = "s are" if counters.sentences > 1 else " is"
    return [
        f"You have used {counters.adverbs} adverb{'s' if counters.adverbs > 1 else ''}. "
        f"Try to use {round(counters.paragraphs / 3)} or less.",
        f"You have used passive voice {counters.passive_voice} time{'s' if counters.passive_voice > 1 else ''}. "
        f"Aim for {round(counters.sentences / 5)} or less.",
        f"{counters.complex} phrase{'s' if counters.complex > 1 else ''} could be simplified.",
        f"{counters.qualifiers} weakening phrase{'s' if counters.qualifiers > 1 else ''} could be cut.",
        f"{counters.hard_sentences} of {counters.sentences} sentence{sentences_are} hard to read.",
        f"{counters.very_hard_sentences} of {counters.sentences} sentence{sentences_are} very hard to read.",
    ]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def analyze_paragraph(
    paragraph: str,
    counters: Counters,
    settings: Settings | None = None,
    full_text: str = "",
    thresholds: Thresholds | None = None,
) -> str:
    """Annotate one paragraph and accumulate its counts.

    Args:
        paragraph: Raw paragraph text. Passing text that already contains
            rendered spans is unsupported and may double count.
        counters: Counters for the current run, updated in place.
        settings: Passive detector and writing mode. Defaults to enhanced, no mode.
        full_text: Whole document, used by mode annotators for positional
            checks. Defaults to the paragraph itself.
        thresholds: Optional readability cut-offs.

    Returns:
        The paragraph with inline spans, sentences joined by single spaces.
    """
    settings = settings or DEFAULT_SETTINGS
    thresholds = thresholds or DEFAULT_THRESHOLDS
    full_text = full_text or paragraph
    pipeline = _pipeline_for(settings)
    mode_analyzer = MODE_ANALYZERS.get(settings.writing_mode)

    sentences = get_sentences_from_paragraph(paragraph + " ")
    counters.sentences += len(sentences)

    analyzed = []
    for sentence in sentences:
        words, letters = sentence_stats(sentence)
        counters.words += words

        annotated = reduce(lambda text, rule: rule(text, counters), pipeline, sentence)
        if mode_analyzer is not None:
            annotated = mode_analyzer(annotated, counters, full_text)

        difficulty = classify_level(calculate_level(letters, words, 1), words, thresholds)
        if difficulty is not None:
            class_name, counter_key, icon, suggestion = _DIFFICULTY[difficulty]
            counters.increment(counter_key)
            counters.specific_issues.append(
                SpecificIssue(class_name, _excerpt(sentence, thresholds.issue_excerpt_chars), suggestion, icon)
            )
            annotated = create_highlight(annotated, class_name)
        analyzed.append(annotated)

    return " ".join(analyzed)


def analyze_document(
    text: str,
    settings: Settings | None = None,
    counters: Counters | None = None,
    thresholds: Thresholds | None = None,
) -> DocumentAnalysis:
    """Analyze a whole document, one paragraph per line.

    Counters are reset before the run. The document must be raw text; feeding
    the rendered ``html`` of a previous run back in is unsupported.

    Returns:
        DocumentAnalysis with the rendered html (``<p>`` per paragraph), the
        populated counters, the writing mode's metrics report (or None), and
        summary tips.
    """
    settings = settings or DEFAULT_SETTINGS
    counters = counters if counters is not None else Counters()
    counters.reset()

    paragraphs = text.split("\n")
    rendered = [f"<p>{analyze_paragraph(p, counters, settings, text, thresholds)}</p>" for p in paragraphs]
    counters.paragraphs = len(paragraphs)
    counters.characters = len(text)

    metrics = MODE_METRICS.get(settings.writing_mode)
    mode_report = metrics(text) if metrics is not None else None

    logger.debug(
        f"Analyzed {counters.paragraphs} paragraphs, {counters.sentences} sentences, "
        f"{counters.hard_sentences} hard, {counters.very_hard_sentences} very hard "
        f"(mode={settings.writing_mode!r}, passive={settings.passive_detection!r})"
    )
    return DocumentAnalysis(html=" ".join(rendered), counters=counters, mode_report=mode_report, tips=build_tips(counters))
