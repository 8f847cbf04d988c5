"""
Replacement Rules
Softened paraphrases: negations replaced by their affirmative forms, and
adversative "but" replaced by "and".
"""

import logging
from typing import List, Optional

from nlp_annotation import Token
from .base_rule import BaseRule

logger = logging.getLogger(__name__)

NEGATION_CLITIC = "n't"


class BaseReplacementRule(BaseRule):
    """
    Rebuilds every sentence token by token. `_replace` returns the text to
    emit for a token, `None` to drop it (with its whitespace), or the token
    text itself to keep it.
    """

    def _replace(self, token: Token, following: Optional[Token]) -> Optional[str]:
        raise NotImplementedError

    def suggest(self, message: str) -> str:
        changed = False
        rebuilt: List[str] = []

        for sentence in self._annotate(message):
            tokens = sentence.tokens
            parts = []
            for i, token in enumerate(tokens):
                following = tokens[i + 1] if i + 1 < len(tokens) else None
                replacement = self._replace(token, following)
                if replacement is None:
                    changed = True
                    continue
                if replacement != token.text:
                    changed = True
                parts.append(replacement + token.whitespace)
            rebuilt.append(''.join(parts).strip())

        if not changed:
            return message

        # punctuation is left as the tokens had it
        suggestion = self._capitalize_first_letter(' '.join(rebuilt).strip())
        logger.debug(f"{self.rule_type}: {message!r} -> {suggestion!r}")
        return suggestion


class InjunctionReplacementRule(BaseReplacementRule):
    """Negated auxiliaries become affirmative; bare negative adverbs are dropped."""

    def _get_rule_type(self) -> str:
        return 'injunction_replacement'

    def _replace(self, token: Token, following: Optional[Token]) -> Optional[str]:
        word = self._normalized(token)
        lexicon = self.lexicon
        if word in lexicon.negation_map:
            return lexicon.negation_map[word]
        if word in lexicon.negative_adverbs:
            return None
        if following is not None and self._normalized(following) == NEGATION_CLITIC and word in lexicon.negated_stems:
            return lexicon.negated_stems[word]
        return token.text


class ConjunctionReplacementRule(BaseReplacementRule):
    """Adversative conjunctions ("but") become "and"."""

    REPLACEMENT = 'and'

    def _get_rule_type(self) -> str:
        return 'conjunction_replacement'

    def _replace(self, token: Token, following: Optional[Token]) -> Optional[str]:
        if self._normalized(token) in self.lexicon.conjunction_match_set:
            return self.REPLACEMENT
        return token.text

    def has_conjunction(self, message: str) -> bool:
        conjunctions = self.lexicon.conjunction_match_set
        return any(token.lower in conjunctions for token in self._tokens(message))
