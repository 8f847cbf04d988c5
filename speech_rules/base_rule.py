"""
Base Rule Class - Abstract interface for all speech rules.
Every rule works on annotated sentences obtained from an Annotator and on the
shared, read-only Lexicon. Rules never raise on a no-match: classifiers
return False and rewriters return their input unchanged.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional
import re

from nlp_annotation import Annotator, Sentence, Token
from .services.lexicon_service import Lexicon, get_lexicon

SENTENCE_ENDING_PUNCTUATION = re.compile(r'[.!?]$')
TYPOGRAPHIC_APOSTROPHE = '\u2019'


class BaseRule(ABC):
    """Abstract base class for all speech rules."""

    def __init__(self, annotator: Annotator, lexicon: Optional[Lexicon] = None) -> None:
        self.annotator = annotator
        self.lexicon = lexicon if lexicon is not None else get_lexicon()
        self.rule_type = self._get_rule_type()

    @abstractmethod
    def _get_rule_type(self) -> str:
        """Returns the unique identifier for this rule."""

    def _annotate(self, text: str) -> List[Sentence]:
        """Annotate `text`, short-circuiting empty or whitespace-only input."""
        if not text or not text.strip():
            return []
        return self.annotator.annotate(text)

    def _first_sentence(self, text: str) -> Optional[Sentence]:
        sentences = self._annotate(text)
        return sentences[0] if sentences else None

    def _tokens(self, text: str) -> Iterable[Token]:
        for sentence in self._annotate(text):
            yield from sentence.tokens

    @staticmethod
    def _join_tokens(tokens: Iterable[Token]) -> str:
        """Rebuild text from tokens, keeping each token's trailing whitespace."""
        return ''.join(token.text_with_ws for token in tokens)

    @staticmethod
    def _normalized(token: Token) -> str:
        """Lower-cased surface form with typographic apostrophes made ASCII."""
        return token.lower.replace(TYPOGRAPHIC_APOSTROPHE, "'")

    @staticmethod
    def _capitalize_first_letter(text: str) -> str:
        if not text:
            return text
        return text[0].upper() + text[1:]

    @staticmethod
    def _ends_with_punctuation(text: str) -> bool:
        if not text:
            return False
        return bool(SENTENCE_ENDING_PUNCTUATION.search(text.strip()))
