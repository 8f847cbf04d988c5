"""
Speech rules: classifiers and rewriters for self-limiting language.
"""

from .base_rule import BaseRule
from .causal_complement_rule import CausalComplementRule
from .injunction_rule import InjunctionRule
from .not_only_but_also_rule import NotOnlyButAlsoRule
from .profanity_rule import ProfanityRule
from .replacement_rules import ConjunctionReplacementRule, InjunctionReplacementRule
from .services.lexicon_service import Lexicon, LexiconService, get_lexicon
from .verb_conjugator import VerbConjugator

__all__ = [
    'BaseRule',
    'CausalComplementRule',
    'InjunctionRule',
    'NotOnlyButAlsoRule',
    'ProfanityRule',
    'ConjunctionReplacementRule',
    'InjunctionReplacementRule',
    'Lexicon',
    'LexiconService',
    'get_lexicon',
    'VerbConjugator',
]
