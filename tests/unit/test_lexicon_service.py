"""
Unit tests for the lexicon service and the immutable Lexicon it builds.
"""

import dataclasses

import pytest

from speech_rules.services.lexicon_service import LexiconError, LexiconService, get_lexicon

PRONOUN_PAIRS = [('I', 'me'), ('you', 'you'), ('he', 'him'), ('she', 'her'), ('we', 'us'), ('they', 'them')]


class TestPackagedLexicon:

    @pytest.mark.parametrize("subject,obj", PRONOUN_PAIRS)
    def test_pronoun_maps_are_inverse(self, lexicon, subject, obj):
        assert lexicon.to_object_pronoun(subject) == obj
        assert lexicon.to_subject_pronoun(obj) == subject

    def test_non_pronouns_pass_through(self, lexicon):
        assert lexicon.to_object_pronoun('Mary') == 'Mary'
        assert lexicon.to_subject_pronoun('dog') == 'dog'

    def test_negations(self, lexicon):
        assert lexicon.negation_map["can't"] == 'can'
        assert lexicon.negation_map["n't"] == ''
        assert lexicon.negated_stems['ca'] == 'can'
        # quoted in YAML so it stays a string
        assert 'no' in lexicon.negative_adverbs
        assert {'not', 'never', 'no'} <= lexicon.adverb_match_set

    def test_match_sets(self, lexicon):
        assert 'should' in lexicon.modal_match_set
        assert 'but' in lexicon.conjunction_match_set

    def test_expand_contraction(self, lexicon):
        assert lexicon.expand_contraction("Can't") == 'cannot'
        assert lexicon.expand_contraction("won't") == 'will not'
        assert lexicon.expand_contraction("Can’t") == 'cannot'
        assert lexicon.expand_contraction('hello') == 'hello'

    def test_reflexives(self, lexicon):
        assert lexicon.is_reflexive('Herself')
        assert not lexicon.is_reflexive('her')

    def test_profanity_loaded(self, lexicon):
        assert 'damn' in lexicon.profanity
        assert 'hello' not in lexicon.profanity

    def test_lexicon_is_read_only(self, lexicon):
        with pytest.raises(TypeError):
            lexicon.negation_map['never'] = 'always'
        with pytest.raises(dataclasses.FrozenInstanceError):
            lexicon.profanity = frozenset()


class TestLexiconServiceFiles:

    def test_missing_files_give_empty_lexicon(self, tmp_path):
        lexicon = LexiconService(tmp_path, tmp_path / 'missing.txt').load()

        assert dict(lexicon.negation_map) == {}
        assert lexicon.modal_match_set == frozenset()
        assert lexicon.to_object_pronoun('I') == 'I'
        assert lexicon.profanity == frozenset()

    def test_non_mapping_yaml_is_rejected(self, tmp_path):
        (tmp_path / 'negations.yaml').write_text("- not\n- never\n", encoding='utf-8')

        with pytest.raises(LexiconError):
            LexiconService(tmp_path, tmp_path / 'missing.txt').load()

    def test_custom_files(self, tmp_path):
        (tmp_path / 'match_sets.yaml').write_text('modals: ["Must"]\nadverbs: ["hardly"]\n', encoding='utf-8')
        (tmp_path / 'negations.yaml').write_text('negative_adverbs: ["never"]\n', encoding='utf-8')
        words = tmp_path / 'words.txt'
        words.write_text("Heck\n\n  darn  \n", encoding='utf-8')

        lexicon = LexiconService(tmp_path, words).load()

        assert lexicon.modal_match_set == frozenset({'must'})
        assert lexicon.adverb_match_set == frozenset({'hardly', 'never'})
        assert lexicon.profanity == frozenset({'heck', 'darn'})


def test_get_lexicon_is_shared():
    assert get_lexicon() is get_lexicon()
