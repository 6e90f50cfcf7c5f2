from data_designer_writing_feedback.core import Counters, Settings, analyze_document
from data_designer_writing_feedback.modes.marketing import (
    CTA_TIERS,
    analyze_cta_positioning,
    analyze_cta_strength,
    analyze_headline,
    analyze_marketing_effectiveness,
    check_for_weak_cta,
    cta_strength_tier,
    detect_content_context,
    generate_contextual_cta_suggestion,
    get_marketing_analysis,
)

LANDING_PAGE = "We build tools. They help teams. Results come fast. Everyone is happy. Sign up today."
STRONG_COPY = "Get instant results today. Trusted by 10,000 customers. Save time now."
UNPUNCTUATED_HEADLINE = "Welcome to our website\nWe sell chairs and tables for every room in your home."
LATE_WELCOME = (
    "Discover how you can save time today\n"
    "We ship every order within two days of purchase, anywhere in the country.\n"
    "Welcome to our website"
)


class TestCtaStrength:
    def test_strong_beats_weak(self):
        strong = analyze_cta_strength("Get your free results now")
        weak = analyze_cta_strength("click here")
        assert strong["strength"] > weak["strength"]
        assert strong["strength"] == 10
        assert weak["strength"] == 3
        assert "missing strong action verb" in weak["issues"]

    def test_category_ceiling_orders_tiers(self):
        very_weak = analyze_cta_strength("Read more to save today", category="very_weak")
        weak = analyze_cta_strength("Read more to save today", category="weak")
        assert CTA_TIERS.index(very_weak["tier"]) < CTA_TIERS.index(weak["tier"])
        assert very_weak["strength"] <= 3

    def test_tier_boundaries(self):
        assert cta_strength_tier(1) == "very_weak"
        assert cta_strength_tier(3) == "very_weak"
        assert cta_strength_tier(4) == "weak"
        assert cta_strength_tier(6) == "weak"
        assert cta_strength_tier(7) == "fair"


class TestWeakCta:
    def test_very_weak_phrase(self):
        result = check_for_weak_cta("Click here.", LANDING_PAGE)
        assert result["is_weak"]
        assert result["category"] == "very_weak"
        assert result["tier"] == "very_weak"
        assert result["strength"] <= 3

    def test_whole_word_matching(self):
        assert check_for_weak_cta("Gone fishing today.") == {"is_weak": False}

    def test_pattern_fallback(self):
        result = check_for_weak_cta("Maybe call us sometime.")
        assert result["category"] == "pattern"
        assert result["strength"] == 2
        assert result["positioning"] is None


class TestSuggestions:
    def test_content_context(self):
        assert detect_content_context("Start your free trial today") == "trial_signup"
        assert detect_content_context("Buy now for $5") == "purchase"
        assert detect_content_context("Hello there") == "lead_generation"

    def test_very_weak_suggestion(self):
        assert generate_contextual_cta_suggestion("Click here", "very_weak") == (
            'Replace with benefit-focused action: "Get your free guide"'
        )

    def test_template_defaults(self):
        assert generate_contextual_cta_suggestion("Sign up", "weak", "Start your free trial") == (
            'Add specific benefit: "Try our tool free"'
        )


class TestPositioning:
    def test_late(self):
        result = analyze_cta_positioning("Sign up today.", LANDING_PAGE)
        assert result["position"] == "late"
        assert result["score"] == 9
        assert result["index"] == 4
        assert result["total"] == 5

    def test_very_early(self):
        assert analyze_cta_positioning("We build tools.", LANDING_PAGE)["position"] == "very_early"

    def test_unknown(self):
        result = analyze_cta_positioning("Book a call", LANDING_PAGE)
        assert result["position"] == "unknown"
        assert result["score"] == 5


class TestHeadline:
    def test_weak_headline(self):
        issues = analyze_headline("Welcome to our website")
        assert "avoid weak opening phrases" in issues
        assert "address the reader directly with 'you'" in issues

    def test_strong_headline(self):
        assert analyze_headline("Discover how you can save time today") == []


class TestMarketingAnalysis:
    def test_very_weak_cta_span(self):
        counters = Counters()
        result = get_marketing_analysis("Click here.", counters, "We make great tools for teams. Click here.")
        assert 'class="marketing-very-weak-cta"' in result
        assert "Strength: 3/10" in result
        assert counters.marketing.weak_ctas == 1
        assert counters.marketing.cta_positioning["position"] == "middle"
        assert counters.marketing.missing_urgency == 1

    def test_feature_suggestion_is_deterministic(self):
        first = Counters()
        second = Counters()
        text = "Our app includes sync."
        result = get_marketing_analysis(text, first, text)
        assert result == get_marketing_analysis(text, second, text)
        assert first.marketing.feature_focused == 1
        assert 'class="marketing-feature-focused" data-suggestion="helps you"' in result

    def test_vague_claim(self):
        counters = Counters()
        result = get_marketing_analysis("It saves time.", counters, LANDING_PAGE)
        assert counters.marketing.vague_claims == 1
        assert 'class="marketing-vague-claim"' in result


class TestMarketingEffectiveness:
    def test_strong_copy_beats_plain(self):
        plain = analyze_marketing_effectiveness("We sell chairs.")
        strong = analyze_marketing_effectiveness(STRONG_COPY)
        assert plain["score"] == 50
        assert strong["score"] > plain["score"]
        assert strong["cta_count"] == 2
        assert strong["weak_cta_count"] == 0
        assert strong["social_proof_score"] >= 2

    def test_missing_cta_recommendation(self):
        result = analyze_marketing_effectiveness("We sell chairs.")
        assert result["recommendations"][0].startswith("Add clear calls-to-action")


class TestHeadlinePosition:
    def test_weak_opening_sentence(self):
        counters = Counters()
        result = get_marketing_analysis("Welcome to our website.", counters, "Welcome to our website\nMore text.")
        assert counters.marketing.weak_headlines == 1
        assert result.startswith('<span class="marketing-weak-headline" data-suggestion="Strengthen headline"')

    def test_unpunctuated_headline_in_document(self):
        result = analyze_document(UNPUNCTUATED_HEADLINE, Settings(writing_mode="marketing"))
        first_paragraph = result.html.split("</p>")[0]
        assert "marketing-weak-headline" in first_paragraph
        assert result.counters.marketing.weak_headlines == 2

    def test_only_opening_paragraphs_count_as_headlines(self):
        result = analyze_document(LATE_WELCOME, Settings(writing_mode="marketing"))
        paragraphs = result.html.split("</p>")
        assert "marketing-weak-headline" not in paragraphs[0]
        assert "marketing-weak-headline" in paragraphs[1]
        assert "marketing-weak-headline" not in paragraphs[2]
        assert result.counters.marketing.weak_headlines == 1
