from data_designer_writing_feedback.core import Counters
from data_designer_writing_feedback.spans import (
    count_matches,
    create_highlight,
    find_and_span,
    span_balance,
    split_words,
    strip_tags,
)


class TestCreateHighlight:
    def test_class_only(self):
        assert create_highlight("word", "adverb") == '<span class="adverb">word</span>'

    def test_attributes_are_escaped(self):
        html = create_highlight("x", "complex", 'say "hi"', "a < b")
        assert 'data-suggestion="say &quot;hi&quot;"' in html
        assert 'data-reason="a &lt; b"' in html
        assert html.endswith(">x</span>")


class TestFindAndSpan:
    def test_wordy_phrase(self):
        counters = Counters()
        result = find_and_span(
            "We did this in order to succeed.", {"in order to": "to"}, "brevity-wordy", counters, "brevity.wordy_phrases"
        )
        assert counters.brevity.wordy_phrases == 1
        assert 'class="brevity-wordy"' in result
        assert 'data-suggestion="to"' in result
        assert "in order to</span> succeed." in result

    def test_default_reason_names_replacement(self):
        result = find_and_span("Please utilize it.", {"utilize": "use"}, "complex")
        assert 'data-reason="Consider using &quot;use&quot; instead of &quot;utilize&quot;"' in result

    def test_no_match_is_unchanged(self):
        counters = Counters()
        sentence = "Nothing to see here."
        assert find_and_span(sentence, {"in order to": "to"}, "brevity-wordy", counters, "brevity.wordy_phrases") == sentence
        assert counters.to_payload() == Counters().to_payload()

    def test_whole_word_only(self):
        assert find_and_span("Justice prevails.", ["just"], "qualifier") == "Justice prevails."

    def test_case_insensitive_keeps_original_text(self):
        result = find_and_span("In order to win, train.", {"in order to": "to"}, "brevity-wordy")
        assert ">In order to</span>" in result

    def test_every_occurrence_is_counted(self):
        counters = Counters()
        find_and_span("Just do it, just now.", ["just"], "qualifier", counters, "qualifiers")
        assert counters.qualifiers == 2

    def test_single_phrase_spec(self):
        assert find_and_span("go now", "go", "x") == '<span class="x">go</span> now'

    def test_never_matches_inside_tags(self):
        sentence = create_highlight("plan", "complex", "use the plan") + " today"
        counters = Counters()
        assert find_and_span(sentence, ["use"], "x", counters, "complex") == sentence
        assert counters.complex == 0

    def test_matches_text_inside_existing_span(self):
        sentence = create_highlight("in order to", "complex") + " win"
        result = find_and_span(sentence, ["in order to"], "brevity-wordy")
        assert '<span class="complex"><span class="brevity-wordy">in order to</span></span> win' == result


class TestSplitWords:
    def test_round_trip_with_tags(self):
        sentence = 'The <span class="complex" data-reason="a b c">big dog</span> ran'
        words = split_words(sentence)
        assert words == ["The", '<span class="complex" data-reason="a b c">big', "dog</span>", "ran"]
        assert " ".join(words) == sentence

    def test_plain_text(self):
        assert split_words("a b  c") == ["a", "b", "", "c"]


class TestStripTags:
    def test_removes_only_spans(self):
        assert strip_tags('<span class="a">x</span> <b>y</b>') == "x <b>y</b>"


class TestCountMatches:
    def test_counts_outside_tags(self):
        text = create_highlight("in order to", "complex", "in order to") + " go, in order to stay"
        assert count_matches(text, ["in order to"]) == 2


class TestSpanBalance:
    def test_balanced(self):
        assert span_balance(create_highlight("a", "x") + " b") == (0, 0)
        assert span_balance("plain") == (0, 0)

    def test_open_and_close_fragments(self):
        assert span_balance('<span class="x">a b') == (0, 1)
        assert span_balance("a</span> b") == (-1, -1)
