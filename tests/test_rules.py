from data_designer_writing_feedback.core import Counters
from data_designer_writing_feedback.rules import get_adverbs, get_complex, get_passive, get_passive_legacy, get_qualifiers
from data_designer_writing_feedback.spans import span_balance, strip_tags


AGENT_PASSIVE = "The ball was kicked by John."
ADVERB_PASSIVE = "The report was carefully written."
PHRASE_PASSIVE = "The manager is authorized to sign."


class TestAdverbs:
    def test_ly_word(self):
        counters = Counters()
        result = get_adverbs("He quickly ran home.", counters)
        assert counters.adverbs == 1
        assert result == 'He <span class="adverb">quickly</span> ran home.'

    def test_exceptions_are_skipped(self):
        counters = Counters()
        sentence = "The only family member left early."
        assert get_adverbs(sentence, counters) == sentence
        assert counters.adverbs == 0

    def test_tags_from_earlier_passes_are_ignored(self):
        counters = Counters()
        sentence = '<span class="complex" data-reason="totally">big</span> dog'
        assert get_adverbs(sentence, counters) == sentence
        assert counters.adverbs == 0


class TestComplex:
    def test_suggestion(self):
        counters = Counters()
        result = get_complex("We will utilize the tool.", counters)
        assert counters.complex == 1
        assert 'class="complex" data-suggestion="use"' in result

    def test_no_match(self):
        counters = Counters()
        sentence = "We saw the dog."
        assert get_complex(sentence, counters) == sentence
        assert counters.to_payload() == Counters().to_payload()


class TestQualifiers:
    def test_no_match(self):
        counters = Counters()
        sentence = "Justice was served."
        assert get_qualifiers(sentence, counters) == sentence
        assert counters.to_payload() == Counters().to_payload()

    def test_own_counter(self):
        counters = Counters()
        result = get_qualifiers("I think we should perhaps go.", counters)
        assert counters.qualifiers == 2
        assert counters.adverbs == 0
        assert result.count('class="qualifier"') == 2


class TestLegacyPassive:
    def test_agent_phrase(self):
        counters = Counters()
        result = get_passive_legacy(AGENT_PASSIVE, counters)
        assert counters.passive_voice == 1
        assert result == 'The ball <span class="passive">was kicked</span> by John.'

    def test_intervening_adverb_is_missed(self):
        counters = Counters()
        assert get_passive_legacy(ADVERB_PASSIVE, counters) == ADVERB_PASSIVE
        assert counters.passive_voice == 0

    def test_repeated_participle_is_wrapped_once_per_occurrence(self):
        counters = Counters()
        result = get_passive_legacy("It was closed and was closed again.", counters)
        assert counters.passive_voice == 2
        assert result.count('<span class="passive">was closed</span>') == 2

    def test_first_unmatched_occurrence_stops_the_scan(self):
        counters = Counters()
        get_passive_legacy("They closed it and it was closed again.", counters)
        assert counters.passive_voice == 0


class TestEnhancedPassive:
    def test_agent_phrase_is_high_confidence(self):
        counters = Counters()
        result = get_passive(AGENT_PASSIVE, counters)
        assert counters.passive_voice == 1
        assert "was kicked</span>" in result
        assert "high confidence" in result

    def test_intervening_adverb(self):
        counters = Counters()
        result = get_passive(ADVERB_PASSIVE, counters)
        assert counters.passive_voice == 1
        assert "medium confidence" in result
        assert result.endswith("was carefully written.</span>")

    def test_irregular_participle(self):
        counters = Counters()
        get_passive("The window was broken.", counters)
        assert counters.passive_voice == 1

    def test_several_interveners_within_window(self):
        counters = Counters()
        result = get_passive("It was not always fully painted.", counters)
        assert counters.passive_voice == 1
        assert "was not always fully painted.</span>" in result

    def test_other_words_block_the_helper(self):
        counters = Counters()
        sentence = "He was happy and tired."
        assert get_passive(sentence, counters) == sentence
        assert counters.passive_voice == 0

    def test_active_sentence(self):
        counters = Counters()
        sentence = "John kicked the ball."
        assert get_passive(sentence, counters) == sentence
        assert counters.passive_voice == 0

    def test_helper_chain_is_included(self):
        counters = Counters()
        result = get_passive("It will be finished soon.", counters)
        assert counters.passive_voice == 1
        assert "will be finished</span>" in result
        assert result.startswith("It <span")


class TestPassiveAroundExistingSpans:
    def test_legacy_keeps_complex_span_whole(self):
        counters = Counters()
        result = get_passive_legacy(get_complex(PHRASE_PASSIVE, counters), counters)
        assert counters.passive_voice == 1
        assert '">is authorized to</span></span> sign.' in result
        assert result.startswith('The manager <span class="passive"><span class="complex"')
        assert span_balance(result) == (0, 0)

    def test_enhanced_keeps_complex_span_whole(self):
        counters = Counters()
        result = get_passive(get_complex(PHRASE_PASSIVE, counters), counters)
        assert counters.passive_voice == 1
        assert '">is authorized to</span></span> sign.' in result
        assert span_balance(result) == (0, 0)
        assert strip_tags(result) == PHRASE_PASSIVE

    def test_participle_opening_a_span(self):
        counters = Counters()
        sentence = 'It was <span class="complex">provided that</span> we pay.'
        result = get_passive(sentence, counters)
        assert counters.passive_voice == 1
        assert result.endswith('was <span class="complex">provided that</span></span> we pay.')
        assert span_balance(result) == (0, 0)
