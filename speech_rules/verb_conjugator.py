"""
Verb Conjugator
Re-inflects a verb lemma for a new subject and tense. Irregular forms come
from the lexicon first, then from pyinflect's inflection tables, and finally
from regular English suffixation.
"""

from typing import Optional

import pyinflect

from .services.lexicon_service import Lexicon

THIRD_PERSON_SINGULAR = frozenset({'he', 'she', 'it'})
SIBILANT_ENDINGS = ('s', 'sh', 'ch', 'x', 'z')
VOWELS = 'aeiou'


def _ends_with_consonant_y(lemma: str) -> bool:
    return len(lemma) > 1 and lemma.endswith('y') and lemma[-2].lower() not in VOWELS


def regular_past_tense(lemma: str) -> str:
    """walk -> walked, bake -> baked, try -> tried"""
    if lemma.endswith('e'):
        return lemma + 'd'
    if _ends_with_consonant_y(lemma):
        return lemma[:-1] + 'ied'
    return lemma + 'ed'


def regular_third_person(lemma: str) -> str:
    """play -> plays, study -> studies, watch -> watches"""
    if _ends_with_consonant_y(lemma):
        return lemma[:-1] + 'ies'
    if lemma.endswith(SIBILANT_ENDINGS):
        return lemma + 'es'
    return lemma + 's'


def is_third_person_singular(subject: str) -> bool:
    return subject.lower() in THIRD_PERSON_SINGULAR


class VerbConjugator:
    """Conjugation helpers bound to a lexicon's irregular verb tables."""

    def __init__(self, lexicon: Lexicon):
        self.lexicon = lexicon

    @staticmethod
    def _inflect(lemma: str, tag: str) -> Optional[str]:
        forms = pyinflect.getInflection(lemma, tag=tag)
        return forms[0] if forms else None

    def past_tense(self, lemma: str) -> str:
        lemma = lemma.lower()
        if lemma in self.lexicon.irregular_past:
            return self.lexicon.irregular_past[lemma]
        return self._inflect(lemma, 'VBD') or regular_past_tense(lemma)

    def present_tense(self, lemma: str, subject: str) -> str:
        """Third person singular form for he/she/it; the bare lemma otherwise."""
        lemma = lemma.lower()
        if not is_third_person_singular(subject):
            return lemma
        if lemma in self.lexicon.irregular_present:
            return self.lexicon.irregular_present[lemma]
        return self._inflect(lemma, 'VBZ') or regular_third_person(lemma)

    @staticmethod
    def be_form(subject: str, past: bool) -> str:
        """Agreeing form of "be": I am/was, he is/was, they are/were."""
        lowered = subject.lower()
        if lowered == 'i':
            return 'was' if past else 'am'
        if lowered in THIRD_PERSON_SINGULAR:
            return 'was' if past else 'is'
        return 'were' if past else 'are'

    @staticmethod
    def do_support_negation(subject: str, past: bool) -> str:
        """Negated "do" auxiliary for a lexical verb: didn't, doesn't, don't."""
        if past:
            return "didn't"
        return "doesn't" if is_third_person_singular(subject) else "don't"
