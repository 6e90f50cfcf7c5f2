from data_designer_writing_feedback.core import Counters
from data_designer_writing_feedback.modes.brevity import analyze_brevity_metrics, get_brevity_analysis

LONG_SENTENCE = "We went to the store and then we went to the park and then we went home."

WORDY_TEXT = (
    "In order to win, we must train. Due to the fact that it rains, we stay in. "
    "Prior to lunch we rest. In the near future we leave."
)


class TestBrevityAnalysis:
    def test_long_sentence_is_wrapped_whole(self):
        counters = Counters()
        result = get_brevity_analysis(LONG_SENTENCE, counters)
        assert counters.brevity.long_sentences == 1
        assert result.startswith('<span class="brevity-long-sentence" data-suggestion="Break into shorter sentences"')
        assert "This sentence has 17 words" in result

    def test_wordy_phrase(self):
        counters = Counters()
        result = get_brevity_analysis("We did this in order to succeed.", counters)
        assert counters.brevity.wordy_phrases == 1
        assert 'class="brevity-wordy" data-suggestion="to"' in result

    def test_redundant_phrase(self):
        counters = Counters()
        result = get_brevity_analysis("The end result was fine.", counters)
        assert counters.brevity.redundant_phrases == 1
        assert 'data-suggestion="result"' in result

    def test_filler_word(self):
        counters = Counters()
        result = get_brevity_analysis("This is very good.", counters)
        assert counters.brevity.filler_words == 1
        assert 'data-reason="Remove this filler word for more impact"' in result

    def test_weak_qualifier(self):
        counters = Counters()
        get_brevity_analysis("It is kind of slow.", counters)
        assert counters.brevity.weak_qualifiers == 1

    def test_clean_sentence(self):
        counters = Counters()
        assert get_brevity_analysis("Ship it today.", counters) == "Ship it today."
        assert counters.to_payload() == Counters().to_payload()


class TestBrevityMetrics:
    def test_concise_text(self):
        result = analyze_brevity_metrics("Short and clear. Nice.")
        assert result["score"] == 100
        assert result["long_sentence_percentage"] == 0
        assert result["recommendations"][-1].startswith("Excellent brevity")

    def test_wordy_text(self):
        result = analyze_brevity_metrics(WORDY_TEXT)
        assert result["total_wordy_phrases"] == 4
        assert result["score"] == 88
        assert any(r.startswith("Replace wordy phrases") for r in result["recommendations"])

    def test_result_shape(self):
        expected_keys = {
            "score",
            "average_words_per_sentence",
            "long_sentence_percentage",
            "passive_percentage",
            "total_wordy_phrases",
            "recommendations",
        }
        assert set(analyze_brevity_metrics(WORDY_TEXT).keys()) == expected_keys

    def test_empty_text(self):
        result = analyze_brevity_metrics("")
        assert result["score"] == 100
        assert result["average_words_per_sentence"] == 0.0
