"""
Guards Test Suite for whole-token matching

Each guard MUST have:
- test_guard_N_prevents_false_positive: Proves guard prevents false positive
- test_guard_N_no_false_negatives: Proves guard doesn't create false negatives
"""

import pytest

from speech_rules import ConjunctionReplacementRule, InjunctionRule, ProfanityRule


@pytest.fixture
def injunction_rule(stub_annotator, lexicon):
    return InjunctionRule(stub_annotator, lexicon)


@pytest.fixture
def conjunction_rule(stub_annotator, lexicon):
    return ConjunctionReplacementRule(stub_annotator, lexicon)


@pytest.fixture
def profanity_rule(stub_annotator, lexicon):
    return ProfanityRule(stub_annotator, lexicon)


class TestGuard1InjunctionWholeTokens:
    """
    GUARD 1: Injunction words only match as whole tokens

    Context: a substring search over the raw text would flag "butterfly"
    (but), "notable" (not) and "nobody" (no).
    """

    def test_guard_1_prevents_false_positive(self, injunction_rule):
        for text in [
            "The butterfly is beautiful.",
            "That was a notable result.",
            "The butler opened the door.",
            "Nobody knows the shoulder of the road.",
        ]:
            assert injunction_rule.is_injunction(text) is False, f"False positive in: {text!r}"

    def test_guard_1_no_false_negatives(self, injunction_rule):
        for text in [
            "The butterfly is not beautiful.",
            "It was notable but late.",
            "You should open the door.",
        ]:
            assert injunction_rule.is_injunction(text) is True, f"Missed injunction in: {text!r}"


class TestGuard2ConjunctionWholeTokens:
    """
    GUARD 2: "but" is only replaced as a whole token
    """

    def test_guard_2_prevents_false_positive(self, conjunction_rule):
        text = "Press the button to buttress the rebuttal."

        assert conjunction_rule.has_conjunction(text) is False
        assert conjunction_rule.suggest(text) == text

    def test_guard_2_no_false_negatives(self, conjunction_rule):
        assert conjunction_rule.suggest("Press the button but wait.") == "Press the button and wait."


class TestGuard3ProfanityWholeTokens:
    """
    GUARD 3: Profanity matches lemmas, never substrings ("Scunthorpe" problem)
    """

    def test_guard_3_prevents_false_positive(self, profanity_rule):
        for text in ["Hello from Scunthorpe.", "Assess the class.", "Shell out cash."]:
            assert profanity_rule.contains_profanity(text) is False, f"False positive in: {text!r}"

    def test_guard_3_no_false_negatives(self, profanity_rule):
        assert profanity_rule.contains_profanity("Hell, that was close.") is True
