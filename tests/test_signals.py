import pytest

from data_designer_content_scan.signals import (
    SignalPatterns,
    conversational_flow,
    extract_signals,
    formality_ratio,
    generic_phrase_count,
    grammar_perfection,
    human_marker_count,
    personal_touch_count,
    repetition_count,
    sentence_length_variation,
)


class TestRepetition:
    def test_counts_recurring_openings(self):
        text = (
            "The cat sat on the mat. The cat sat on the rug. "
            "The dog ran far away. The dog ran far home. A bird flew over us."
        )
        assert repetition_count(text) == 2

    def test_ignores_short_sentences(self):
        assert repetition_count("Go now fast. Go now fast. Go now fast.") == 0

    def test_opening_is_case_insensitive(self):
        assert repetition_count("We went out today. we went out again.") == 1


class TestFormality:
    def test_ratio_of_transition_words(self):
        assert formality_ratio("furthermore this is moreover fine") == pytest.approx(0.4)

    def test_requires_exact_token_match(self):
        assert formality_ratio("Furthermore, this is fine") == 0.0

    def test_empty(self):
        assert formality_ratio("") == 0.0


class TestPersonalTouch:
    def test_counts_first_person_patterns(self):
        assert personal_touch_count("I think my experience says honestly you know") == 4

    def test_none_in_impersonal_text(self, formal_text):
        assert personal_touch_count(formal_text) == 0


class TestGrammarPerfection:
    def test_clean_text_is_perfect(self):
        assert grammar_perfection("This is fine. This is also fine.") == 1.0

    def test_imperfections_lower_the_ratio(self):
        assert grammar_perfection("This is is wrong.Bad spacing , here.") == 0.0

    def test_double_space_counts(self):
        text = "One sentence here. Another  one here. A third one here. And a fourth."
        assert grammar_perfection(text) == pytest.approx(0.75)

    def test_no_sentences(self):
        assert grammar_perfection("") == 0.0
        assert grammar_perfection("...!?") == 0.0


class TestGenericPhrases:
    def test_counts_stock_phrases(self):
        text = "In conclusion, studies have shown this. In summary, it is."
        assert generic_phrase_count(text) == 3


class TestSentenceVariation:
    def test_single_sentence_is_zero(self):
        assert sentence_length_variation("Only one sentence here without a break") == 0.0

    def test_uniform_lengths_are_zero(self):
        assert sentence_length_variation("One two three. Four five six.") == 0.0

    def test_coefficient_of_variation(self):
        assert sentence_length_variation("One. One two three.") == pytest.approx(0.5)

    def test_capped_at_one(self):
        text = "Yes. No. Maybe. " + " ".join(["word"] * 30) + "."
        assert sentence_length_variation(text) == 1.0


class TestHumanMarkers:
    def test_counts_informal_markers(self):
        assert human_marker_count("Um, I kinda think (sort of) trust me.") == 4

    def test_none_in_formal_text(self, formal_text):
        assert human_marker_count(formal_text) == 0


class TestConversationalFlow:
    def test_capped_at_one(self):
        assert conversational_flow("Do you agree? We should!") == 1.0

    def test_scaled_by_word_count(self):
        text = "You " + " ".join(["word"] * 19)
        assert conversational_flow(text) == pytest.approx(0.5)

    def test_empty(self):
        assert conversational_flow("") == 0.0


class TestExtractSignals:
    def test_formal_text(self, formal_text):
        signals = extract_signals(formal_text)
        assert signals.generic_phrase_count == 8
        assert signals.personal_touch_count == 0
        assert signals.human_marker_count == 0
        assert signals.conversational_flow == 0.0
        assert signals.grammar_perfection == 1.0
        assert signals.sentence_length_variation < 0.3
        assert signals.repetition_count == 1

    def test_ratios_are_bounded(self, formal_text, conversational_text):
        for text in (formal_text, conversational_text, "", "?!?!"):
            signals = extract_signals(text)
            for name in ("formality_ratio", "grammar_perfection", "sentence_length_variation", "conversational_flow"):
                assert 0.0 <= signals.get(name) <= 1.0

    def test_custom_patterns(self):
        patterns = SignalPatterns(formal_words=frozenset({"alpha"}))
        assert extract_signals("alpha beta", patterns).formality_ratio == pytest.approx(0.5)

    def test_payload_has_every_signal(self, conversational_text):
        payload = extract_signals(conversational_text).to_payload()
        assert set(payload) == {
            "repetition_count", "formality_ratio", "personal_touch_count", "grammar_perfection",
            "generic_phrase_count", "sentence_length_variation", "human_marker_count", "conversational_flow",
        }
