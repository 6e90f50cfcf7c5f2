# Marketing mode: headlines, calls to action, benefits over features, urgency.
#
# CTA analysis is context aware: the suggested rewrite depends on what the
# whole document is selling (trial, purchase, content, consultation or lead
# generation), and each weak CTA gets a 1-10 strength score and a placement
# score based on where it sits among the document's sentences.

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from data_designer_writing_feedback.lexicon import (
    BENEFIT_WORDS,
    CTA_ACTION_VERBS,
    CTA_BENEFIT_WORDS,
    CTA_CATEGORY_CEILINGS,
    CTA_TENTATIVE_WORDS,
    CTA_URGENCY_WORDS,
    FEATURE_WORDS,
    POWER_WORDS,
    STRONG_CTA_TEMPLATES,
    URGENCY_WORDS,
    VAGUE_CLAIMS,
    WEAK_CTAS,
    WEAK_HEADLINE_STARTERS,
)
from data_designer_writing_feedback.modes.utils import (
    analyze_social_proof,
    extract_ctas,
    is_headline_or_opening,
    split_sentences,
)
from data_designer_writing_feedback.spans import count_matches, create_highlight, find_and_span, phrase_pattern, strip_tags

if TYPE_CHECKING:
    from data_designer_writing_feedback.core import Counters

CTA_TIERS = ("very_weak", "weak", "fair")

_PROMISE_RE = re.compile(r"\b(save|get|boost|increase|reduce|improve|grow|win|earn|gain)\b", re.IGNORECASE)
_ACTION_VERB_RE = re.compile(
    r"\b(get|save|boost|increase|create|build|grow|win|discover|unlock|transform|start|stop|avoid|prevent|achieve|reach)\b",
    re.IGNORECASE,
)
_YOU_RE = re.compile(r"\byou\b", re.IGNORECASE)
_SPECIFIC_OFFER_RE = re.compile(r"\b(free|[\d%]+\s*(off|discount)|\d+\s*(minutes?|hours?|days?))\b", re.IGNORECASE)

_WEAK_CTA_PATTERNS = [
    (re.compile(r"^(we|our|this|it) (will|can|helps?|enables?)", re.IGNORECASE), "starts with company focus instead of customer benefit"),
    (re.compile(r"\b(maybe|perhaps|consider|might want to)\b", re.IGNORECASE), "uses tentative language instead of confident direction"),
    (re.compile(r"\b(feel free to|if you want|you can)\b", re.IGNORECASE), "lacks urgency and commitment"),
    (re.compile(r"\?\s*$"), "ends with question instead of clear direction"),
]

_CALL_TO_ACTION_PATTERNS = [
    re.compile(r"\b(click|get|start|try|download|sign|buy|order|subscribe|join)\b", re.IGNORECASE),
    re.compile(r"\b(button|link)\b", re.IGNORECASE),
    re.compile(r"^(get|start|try|download|sign|buy|click|join)", re.IGNORECASE),
]

_CONTEXT_PATTERNS = [
    ("trial_signup", re.compile(r"\b(trial|demo|test|try)\b", re.IGNORECASE)),
    ("purchase", re.compile(r"\b(buy|purchase|price|cost|order)\b|\$\d", re.IGNORECASE)),
    ("content", re.compile(r"\b(guide|ebook|checklist|template|report)\b", re.IGNORECASE)),
    ("consultation", re.compile(r"\b(consultation|call|meeting|audit|assessment)\b", re.IGNORECASE)),
]

_BENEFIT_PATTERNS = [
    re.compile(r"\b(save|saving)\s+(\w+)", re.IGNORECASE),
    re.compile(r"\b(increase|boost|improve|grow)\s+(\w+)", re.IGNORECASE),
    re.compile(r"\b(free|instant|immediate)\s+(\w+)", re.IGNORECASE),
    re.compile(r"(\d+%)\s+(more|less|faster)", re.IGNORECASE),
]

_TEMPLATE_DEFAULTS = {
    "benefit": "results",
    "product": "our tool",
    "timeframe": "30 days",
    "discount": "discount",
    "amount": "more",
    "percentage": "20%",
}

_POSITION_BANDS = [
    (0.1, "very_early", 6, "Consider providing more value before the CTA"),
    (0.3, "early", 8, "Good early positioning - ensure you've established value"),
    (0.7, "middle", 7, "Consider moving closer to the end after delivering value"),
    (0.9, "late", 9, "Excellent positioning after value delivery"),
    (float("inf"), "very_late", 10, "Perfect positioning - readers are convinced and ready to act"),
]


def _mentions(text: str, phrases) -> bool:
    return any(phrase_pattern(p).search(text) for p in phrases)


# ---------------------------------------------------------------------------
# Headlines
# ---------------------------------------------------------------------------


def analyze_headline(headline: str) -> list[str]:
    """Return the fixes an opening sentence needs; empty when it is strong."""
    lower = headline.lower().strip()
    has_promise = _mentions(lower, POWER_WORDS) or bool(_PROMISE_RE.search(lower))
    issues = []
    if not has_promise:
        issues.append("add a promise or benefit")
    if not _ACTION_VERB_RE.search(headline):
        issues.append("include an action verb")
    if not _YOU_RE.search(headline):
        issues.append("address the reader directly with 'you'")
    if any(lower.startswith(starter) for starter in WEAK_HEADLINE_STARTERS):
        issues.append("avoid weak opening phrases")
    return issues


# ---------------------------------------------------------------------------
# Calls to action
# ---------------------------------------------------------------------------


def cta_strength_tier(strength: int) -> str:
    if strength <= 3:
        return "very_weak"
    if strength <= 6:
        return "weak"
    return "fair"


def analyze_cta_strength(cta: str, context: str = "", category: str | None = None) -> dict:
    """Score a call to action from 1 (weakest) to 10.

    Starts at 5 and adjusts for action verbs, benefits, urgency, tentative
    wording, specific offers and length (2-5 words is ideal). When the CTA was
    matched against a weakness category, the score is capped by that
    category's ceiling, so a very weak phrase never outranks a merely weak one.

    Returns:
        Dict with keys: strength, tier, issues, strengths.
    """
    lower = cta.lower()
    score = 5
    issues: list[str] = []
    strengths: list[str] = []

    if _mentions(lower, CTA_ACTION_VERBS):
        score += 2
        strengths.append("has action verb")
    else:
        score -= 2
        issues.append("missing strong action verb")

    if _mentions(lower, CTA_BENEFIT_WORDS):
        score += 2
        strengths.append("includes clear benefit")
    else:
        score -= 1
        issues.append("missing clear benefit")

    if _mentions(lower, CTA_URGENCY_WORDS):
        score += 1
        strengths.append("creates urgency")

    if _mentions(lower, CTA_TENTATIVE_WORDS):
        score -= 2
        issues.append("uses weak/tentative language")

    if _SPECIFIC_OFFER_RE.search(lower):
        score += 1
        strengths.append("includes specific offer/timeframe")

    word_count = len(cta.split())
    if 2 <= word_count <= 5:
        score += 1
        strengths.append("appropriate length")
    elif word_count > 7:
        score -= 1
        issues.append("too long")
    elif word_count < 2:
        score -= 1
        issues.append("too short")

    strength = max(1, min(10, score))
    if category in CTA_CATEGORY_CEILINGS:
        strength = min(strength, CTA_CATEGORY_CEILINGS[category])
    return {"strength": strength, "tier": cta_strength_tier(strength), "issues": issues, "strengths": strengths}


def detect_content_context(text: str) -> str:
    """Guess what the document is selling from keywords; defaults to lead generation."""
    for context, pattern in _CONTEXT_PATTERNS:
        if pattern.search(text):
            return context
    return "lead_generation"


def extract_possible_benefit(text: str) -> str | None:
    for pattern in _BENEFIT_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(0).lower()
    return None


def _fill(template: str, **values: str) -> str:
    return template.format_map({**_TEMPLATE_DEFAULTS, **values})


def generate_contextual_cta_suggestion(original_cta: str, category: str, full_text: str = "") -> str:
    templates = STRONG_CTA_TEMPLATES[detect_content_context(full_text)]
    if category == "very_weak":
        return f'Replace with benefit-focused action: "{_fill(templates[0], benefit="guide")}"'
    if category == "weak":
        return f'Add specific benefit: "{_fill(templates[1])}"'
    if category == "missing_benefit":
        benefit = extract_possible_benefit(full_text) or "instant access"
        return f'Add clear value: "{_fill(templates[0], benefit=benefit)}"'
    if category == "passive":
        return f'Make it direct and customer-focused: "{_fill(templates[0])}"'
    return f'Strengthen with: Verb + Specific Benefit + Urgency (e.g., "{_fill(templates[0])}")'


def analyze_cta_positioning(cta: str, full_text: str) -> dict:
    """Where the CTA sits among the document's sentences, scored 6-10."""
    needle = strip_tags(cta).strip().rstrip(".!?").strip()
    sentences = split_sentences(full_text)
    index = next((i for i, s in enumerate(sentences) if needle and needle in s), -1)
    if index == -1:
        return {"position": "unknown", "score": 5, "recommendation": "Position after establishing clear value and benefits"}

    ratio = index / len(sentences)
    for upper, position, score, recommendation in _POSITION_BANDS:
        if ratio < upper:
            break
    return {
        "position": position,
        "score": score,
        "index": index,
        "total": len(sentences),
        "recommendation": recommendation,
    }


def check_for_weak_cta(sentence: str, full_text: str = "") -> dict:
    """Classify a sentence as a weak CTA, with strength, suggestion and placement.

    Weak phrase categories are checked weakest first; sentences that match
    none of them fall back to a handful of weak phrasing patterns.
    """
    lower = sentence.lower().strip()
    for category, phrases in WEAK_CTAS.items():
        for phrase in phrases:
            if phrase_pattern(phrase).search(lower):
                strength = analyze_cta_strength(sentence, full_text, category)
                return {
                    "is_weak": True,
                    "weak_cta": phrase,
                    "category": category,
                    "strength": strength["strength"],
                    "tier": strength["tier"],
                    "issues": strength["issues"],
                    "suggestion": generate_contextual_cta_suggestion(sentence, category, full_text),
                    "positioning": analyze_cta_positioning(sentence, full_text),
                }

    for pattern, issue in _WEAK_CTA_PATTERNS:
        match = pattern.search(sentence.strip())
        if match:
            return {
                "is_weak": True,
                "weak_cta": match.group(0),
                "category": "pattern",
                "strength": 2,
                "tier": cta_strength_tier(2),
                "issues": [issue],
                "suggestion": "Make it more direct and benefit-focused",
                "positioning": None,
            }
    return {"is_weak": False}


def is_call_to_action(sentence: str) -> bool:
    return len(sentence) < 100 and any(p.search(sentence) for p in _CALL_TO_ACTION_PATTERNS)


def has_urgency(sentence: str) -> bool:
    return _mentions(sentence, URGENCY_WORDS)


# ---------------------------------------------------------------------------
# Per-sentence annotator
# ---------------------------------------------------------------------------


def get_marketing_analysis(sentence: str, counters: Counters, full_text: str = "") -> str:
    plain = strip_tags(sentence).strip()
    result = sentence

    if is_headline_or_opening(full_text, plain):
        headline_issues = analyze_headline(plain)
        if headline_issues:
            counters.marketing.weak_headlines += 1
            result = create_highlight(
                result, "marketing-weak-headline", "Strengthen headline", f"Improve with: {', '.join(headline_issues)}"
            )

    cta = check_for_weak_cta(plain, full_text)
    if cta["is_weak"]:
        counters.marketing.weak_ctas += 1
        class_name = "marketing-very-weak-cta" if cta["tier"] == "very_weak" else "marketing-weak-cta"
        reason = f"Issues: {', '.join(cta['issues'])}" if cta["issues"] else "Use Verb + Benefit formula for stronger CTAs"
        result = create_highlight(result, class_name, f"{cta['suggestion']} | Strength: {cta['strength']}/10", reason)
        if cta["positioning"]:
            counters.marketing.cta_positioning = cta["positioning"]

    feature_map = {word: BENEFIT_WORDS[i % len(BENEFIT_WORDS)] for i, word in enumerate(FEATURE_WORDS)}
    for word, benefit in feature_map.items():
        result = find_and_span(
            result, {word: benefit}, "marketing-feature-focused", counters, "marketing.feature_focused",
            reason=f'Focus on benefits: "{benefit}" instead of "{word}"',
        )

    result = find_and_span(
        result, {claim: "be specific" for claim in VAGUE_CLAIMS}, "marketing-vague-claim", counters, "marketing.vague_claims",
        reason="Be specific: How much time/money? Include numbers, percentages, or timeframes.",
    )

    if is_call_to_action(plain) and not has_urgency(plain):
        counters.marketing.missing_urgency += 1
        result = create_highlight(
            result, "marketing-missing-urgency",
            "Add urgency", 'Consider adding urgency words like "now", "today", or "limited time"',
        )
    return result


# ---------------------------------------------------------------------------
# Whole-document report
# ---------------------------------------------------------------------------


def analyze_marketing_effectiveness(text: str) -> dict:
    """Score a whole document as marketing copy (0-100, 50 is neutral).

    Returns:
        Dict with keys: score, cta_count, weak_cta_count, power_word_count,
        urgency_word_count, social_proof_score, feature_word_count,
        benefit_word_count, recommendations.
    """
    all_weak_phrases = [phrase for phrases in WEAK_CTAS.values() for phrase in phrases]
    ctas = extract_ctas(text)
    weak_ctas = [cta for cta in ctas if _mentions(cta.lower(), all_weak_phrases)]
    social_proof = analyze_social_proof(text)
    power = count_matches(text, POWER_WORDS)
    urgency = count_matches(text, URGENCY_WORDS)
    features = count_matches(text, FEATURE_WORDS)
    benefits = count_matches(text, BENEFIT_WORDS)

    score = 50.0
    score += min(power * 3, 20)
    score += min(urgency * 4, 15)
    score += 15 if social_proof["has_proof"] else 0
    score += min(benefits * 2, 10)
    score -= min(len(weak_ctas) * 8, 20)
    score -= min(features * 2, 15)
    if ctas:
        score += 5

    recommendations = []
    if not ctas:
        recommendations.append("Add clear calls-to-action to guide readers toward conversion.")
    elif weak_ctas:
        recommendations.append("Strengthen CTAs with Verb + Benefit formula (e.g., 'Get your free report').")
    if power < 2:
        recommendations.append("Add power words like 'guaranteed', 'proven', 'instant' for more impact.")
    if urgency == 0:
        recommendations.append("Create urgency with words like 'now', 'today', 'limited time'.")
    if not social_proof["has_proof"]:
        recommendations.append("Add social proof: testimonials, customer counts, or press mentions.")
    if features > benefits:
        recommendations.append("Focus more on benefits (what it does for customers) than features (what it has).")

    if score > 80:
        recommendations.append("Excellent marketing copy! Your writing is persuasive and action-oriented.")
    elif score > 60:
        recommendations.append("Good marketing copy with room for more persuasive elements.")
    elif score > 40:
        recommendations.append("Add more persuasive elements: CTAs, urgency, social proof.")
    else:
        recommendations.append("Focus on clear benefits, strong CTAs, and trust-building elements.")

    return {
        "score": max(0, min(100, round(score))),
        "cta_count": len(ctas),
        "weak_cta_count": len(weak_ctas),
        "power_word_count": power,
        "urgency_word_count": urgency,
        "social_proof_score": social_proof["total"],
        "feature_word_count": features,
        "benefit_word_count": benefits,
        "recommendations": recommendations,
    }
