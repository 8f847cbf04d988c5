"""
Sentence Extractor
Splits a growing text buffer into complete sentences and an unconsumed
remainder, for streaming input such as live transcription.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Tuple

from nlp_annotation import Annotator

logger = logging.getLogger(__name__)

SENTENCE_TERMINATORS = ('.', '!', '?')


@dataclass(frozen=True)
class SentenceExtractionResult:
    complete_sentences: List[str] = field(default_factory=list)
    remainder: str = ''

    def as_tuple(self) -> Tuple[List[str], str]:
        return list(self.complete_sentences), self.remainder


class SentenceBoundaryExtractor:
    """
    A sentence is complete only if it ends in '.', '!' or '?'. Extraction
    stops at the first incomplete sentence, so sentences are committed
    strictly left to right.
    """

    def __init__(self, annotator: Annotator):
        self.annotator = annotator

    def extract(self, text: str) -> SentenceExtractionResult:
        if not text or not text.strip():
            return SentenceExtractionResult([], '')

        sentences = self.annotator.annotate(text)
        if not sentences:
            return SentenceExtractionResult([], text)

        complete: List[str] = []
        last_end = 0
        for sentence in sentences:
            sentence_text = sentence.text.strip()
            if not sentence_text.endswith(SENTENCE_TERMINATORS):
                break
            complete.append(sentence_text)
            last_end = sentence.end_char

        return SentenceExtractionResult(complete, text[last_end:])


class StreamingSentenceBuffer:
    """Accumulates streamed text and hands out sentences as they complete."""

    def __init__(self, extractor: SentenceBoundaryExtractor):
        self.extractor = extractor
        self._buffer = ''

    @property
    def pending(self) -> str:
        return self._buffer

    def feed(self, chunk: str) -> List[str]:
        self._buffer += chunk
        result = self.extractor.extract(self._buffer)
        self._buffer = result.remainder
        if result.complete_sentences:
            logger.debug(f"Committed {len(result.complete_sentences)} sentence(s); {len(self._buffer)} chars pending")
        return list(result.complete_sentences)

    def flush(self) -> str:
        """Return whatever is left in the buffer and clear it."""
        remainder, self._buffer = self._buffer, ''
        return remainder
