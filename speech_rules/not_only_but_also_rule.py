"""
"Not only ... but also" Rule
Detects the correlative "not only X but also Y" and rewrites it as
"both X and Y".
"""

import logging
from typing import Optional, Sequence, Tuple

from nlp_annotation import Token
from .base_rule import BaseRule

logger = logging.getLogger(__name__)


class NotOnlyButAlsoRule(BaseRule):
    """
    The construction matches when the sentence holds the adjacent pair
    "not only" and, anywhere, the adjacent pair "but also". Only the first
    sentence of the input is considered.
    """

    def _get_rule_type(self) -> str:
        return 'not_only_but_also'

    @staticmethod
    def _is_pair(tokens: Sequence[Token], index: int, first: str, second: str) -> bool:
        return (
            tokens[index].lower == first
            and index + 1 < len(tokens)
            and tokens[index + 1].lower == second
        )

    def _find_pairs(self, tokens: Sequence[Token]) -> Tuple[Optional[int], Optional[int]]:
        """Index of the last "not only" and the last "but also", if present."""
        not_only_index = but_also_index = None
        for i in range(len(tokens)):
            if self._is_pair(tokens, i, 'not', 'only'):
                not_only_index = i
            if self._is_pair(tokens, i, 'but', 'also'):
                but_also_index = i
        return not_only_index, but_also_index

    def detect(self, message: str) -> bool:
        """True when both "not only" and "but also" are present."""
        sentence = self._first_sentence(message)
        if sentence is None:
            return False
        not_only_index, but_also_index = self._find_pairs(sentence.tokens)
        return not_only_index is not None and but_also_index is not None

    def rewrite(self, message: str) -> str:
        """
        Replace "not only X but also Y" with "both X and Y".

        Returns the message unchanged when either pair is missing, or when
        "but also" comes before "not only".
        """
        sentence = self._first_sentence(message)
        if sentence is None:
            return message

        tokens = sentence.tokens
        not_only_index, but_also_index = self._find_pairs(tokens)
        if not_only_index is None or but_also_index is None:
            return message
        if but_also_index < not_only_index + 2:
            logger.debug(f"'but also' precedes 'not only' in {message!r}; leaving it unchanged")
            return message

        first_phrase = self._join_tokens(tokens[not_only_index + 2:but_also_index]).strip()
        second_phrase = self._join_tokens(tokens[but_also_index + 2:])

        parts = [
            self._join_tokens(tokens[:not_only_index]),
            'both',
            tokens[not_only_index + 1].whitespace,   # after "only"
            first_phrase,
            # with an empty first phrase the token before "but" is "only"
            tokens[but_also_index - 1].whitespace if first_phrase else '',
            'and',
            tokens[but_also_index + 1].whitespace,   # after "also"
            second_phrase.strip(),
        ]
        improved = ''.join(parts)

        if message[:1].isupper():
            improved = self._capitalize_first_letter(improved)

        improved = improved.strip()
        if not self._ends_with_punctuation(improved):
            improved += '.'
        return improved

    def suggest_improved_sentence(self, message: str) -> str:
        """The "both ... and ..." rewrite when the pattern is present, else the message."""
        if self.detect(message):
            return self.rewrite(message)
        return message
