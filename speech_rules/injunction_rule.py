"""
Injunction Rule
Flags negations, prohibitions and restrictive modals or conjunctions.
"""

import logging
from typing import Optional

from nlp_annotation import Annotator, Token
from .base_rule import BaseRule
from .not_only_but_also_rule import NotOnlyButAlsoRule
from .services.lexicon_service import Lexicon

logger = logging.getLogger(__name__)

# Penn Treebank tags
TAG_ADVERB = 'RB'
TAG_MODAL = 'MD'
TAG_CONJUNCTION = 'CC'

NEGATION_SUFFIX = "n't"


class InjunctionRule(BaseRule):
    """
    A sentence is an injunction when it holds the "not only ... but also"
    construction, a negated auxiliary, a negative adverb, or a token from the
    adverb, modal or conjunction match sets. Matching is done on whole tokens,
    so "notable" or "butler" never match.
    """

    def __init__(self, annotator: Annotator, lexicon: Optional[Lexicon] = None,
                 not_only_rule: Optional[NotOnlyButAlsoRule] = None) -> None:
        super().__init__(annotator, lexicon)
        self.not_only_rule = not_only_rule or NotOnlyButAlsoRule(annotator, self.lexicon)

    def _get_rule_type(self) -> str:
        return 'injunction'

    def is_injunction(self, message: str) -> bool:
        if self.not_only_rule.detect(message):
            return True

        for token in self._tokens(message):
            if self._is_injunction_token(token):
                logger.debug(f"Injunction token {token.text!r} ({token.tag}) in {message!r}")
                return True
        return False

    def _is_injunction_token(self, token: Token) -> bool:
        word = self._normalized(token)
        lemma = token.lemma_lower
        lexicon = self.lexicon

        if word in lexicon.negation_map or word in lexicon.negative_adverbs or lemma in lexicon.negative_adverbs:
            return True

        # catches contractions the negation map does not list
        if word.endswith(NEGATION_SUFFIX):
            return True

        match_set = {
            TAG_ADVERB: lexicon.adverb_match_set,
            TAG_MODAL: lexicon.modal_match_set,
            TAG_CONJUNCTION: lexicon.conjunction_match_set,
        }.get(token.tag)
        return match_set is not None and (word in match_set or lemma in match_set)
