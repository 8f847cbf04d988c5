"""
Unit tests for NotOnlyButAlsoRule.
"""

import pytest

from speech_rules import NotOnlyButAlsoRule


@pytest.fixture
def rule(stub_annotator, lexicon):
    return NotOnlyButAlsoRule(stub_annotator, lexicon)


class TestDetect:

    def test_both_pairs_present(self, rule):
        assert rule.detect("She is not only talented but also hardworking.") is True

    @pytest.mark.parametrize("message", [
        "She is not only talented.",
        "She is talented but also lazy.",
        "Not this, only that.",
        "",
    ])
    def test_missing_pair(self, rule, message):
        assert rule.detect(message) is False


class TestSuggestImprovedSentence:

    def test_rewrites_to_both_and(self, rule):
        assert rule.suggest_improved_sentence(
            "She is not only talented but also hardworking."
        ) == "She is both talented and hardworking."

    def test_empty_first_phrase_keeps_single_spaces(self, rule):
        assert rule.suggest_improved_sentence("It is not only but also good.") == "It is both and good."

    def test_lowercase_input_gets_period(self, rule):
        assert rule.suggest_improved_sentence("not only fast but also cheap") == "both fast and cheap."

    def test_sentence_initial_pattern_is_capitalized(self, rule):
        assert rule.suggest_improved_sentence(
            "Not only is it fast, but also cheap!"
        ) == "Both is it fast, and cheap!"

    def test_reversed_order_is_unchanged(self, rule):
        message = "But also this, not only that."

        assert rule.detect(message) is True
        assert rule.suggest_improved_sentence(message) == message

    def test_no_pattern_is_unchanged(self, rule):
        message = "She is talented."

        assert rule.suggest_improved_sentence(message) == message
        assert rule.rewrite(message) == message

    def test_only_first_sentence_is_considered(self, rule):
        message = "I am here. She is not only kind but also smart."

        assert rule.detect(message) is False
        assert rule.suggest_improved_sentence(message) == message
