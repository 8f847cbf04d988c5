"""
Profanity Rule
Matches token lemmas against the profanity word list.
"""

from .base_rule import BaseRule


class ProfanityRule(BaseRule):
    """Lemmas are used so inflected forms ("damned", "bitches") still match."""

    def _get_rule_type(self) -> str:
        return 'profanity'

    def contains_profanity(self, message: str) -> bool:
        profanity = self.lexicon.profanity
        if not profanity:
            return False
        return any(token.lemma_lower in profanity for token in self._tokens(message))
