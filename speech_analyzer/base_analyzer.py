"""
Negative Speech Detector
Main entry point that coordinates the speech rules. Every operation has a
synchronous form and an `*_async` form that runs the synchronous one through
the injected dispatch strategy and hands the result to a callback.
"""

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional, TypeVar

from nlp_annotation import Annotator, SpacyAnnotator
from speech_rules import (
    CausalComplementRule,
    ConjunctionReplacementRule,
    InjunctionReplacementRule,
    InjunctionRule,
    NotOnlyButAlsoRule,
    ProfanityRule,
)
from speech_rules.services.lexicon_service import Lexicon, get_lexicon
from .sentence_extractor import SentenceBoundaryExtractor, SentenceExtractionResult
from .task_executors import Execute, OnceAction, get_task_executor

logger = logging.getLogger(__name__)

T = TypeVar('T')


@dataclass(frozen=True)
class NegativeSpan:
    """A flagged sentence and its character span in the analyzed text."""
    start: int
    end: int
    text: str


class NegativeSpeechDetector:
    """Detects self-limiting language and suggests self-affirming rewrites."""

    WARM_UP_TEXT = 'Warm-up.'

    def __init__(self, execute: Optional[Execute] = None, annotator: Optional[Annotator] = None,
                 lexicon: Optional[Lexicon] = None):
        self.execute = execute or get_task_executor()
        self.annotator = annotator or SpacyAnnotator()
        self.lexicon = lexicon if lexicon is not None else get_lexicon()

        self.not_only_rule = NotOnlyButAlsoRule(self.annotator, self.lexicon)
        self.injunction_rule = InjunctionRule(self.annotator, self.lexicon, not_only_rule=self.not_only_rule)
        self.profanity_rule = ProfanityRule(self.annotator, self.lexicon)
        self.causal_complement_rule = CausalComplementRule(self.annotator, self.lexicon)
        self.injunction_replacement_rule = InjunctionReplacementRule(self.annotator, self.lexicon)
        self.conjunction_replacement_rule = ConjunctionReplacementRule(self.annotator, self.lexicon)
        self.sentence_extractor = SentenceBoundaryExtractor(self.annotator)

    # === SYNCHRONOUS API ===

    def is_injunction(self, message: str) -> bool:
        return self.injunction_rule.is_injunction(message)

    def contains_profanity(self, message: str) -> bool:
        return self.profanity_rule.contains_profanity(message)

    def detect_not_only_but_also(self, message: str) -> bool:
        return self.not_only_rule.detect(message)

    def suggest_improved_sentence(self, message: str) -> str:
        return self.not_only_rule.suggest_improved_sentence(message)

    def suggest_injunction_replacement(self, message: str) -> str:
        return self.injunction_replacement_rule.suggest(message)

    def suggest_conjunction_replacement(self, message: str) -> str:
        return self.conjunction_replacement_rule.suggest(message)

    def has_conjunction(self, message: str) -> bool:
        return self.conjunction_replacement_rule.has_conjunction(message)

    def transform_sentence(self, sentence: str) -> str:
        return self.causal_complement_rule.transform(sentence)

    def extract_complete_sentences(self, text: str) -> SentenceExtractionResult:
        return self.sentence_extractor.extract(text)

    def find_negative_spans(self, text: str) -> List[NegativeSpan]:
        """
        Flag every complete sentence of `text` that is an injunction or
        contains a conjunction. A period is appended first when the text ends
        in a letter or digit, so a trailing fragment still counts as a sentence.
        Offsets refer to the trimmed, punctuated text.
        """
        normalized = (text or '').strip()
        if normalized and normalized[-1].isalnum():
            normalized += '.'

        spans: List[NegativeSpan] = []
        search_from = 0
        for sentence in self.extract_complete_sentences(normalized).complete_sentences:
            start = normalized.find(sentence, search_from)
            if start < 0:
                continue
            search_from = start + len(sentence)
            if self.is_injunction(sentence) or self.has_conjunction(sentence):
                spans.append(NegativeSpan(start, start + len(sentence), sentence))
        return spans

    def needs_replacement_for_text(self, text: str) -> bool:
        return bool(self.find_negative_spans(text))

    # === ASYNCHRONOUS API ===

    def _submit(self, operation: Callable[[str], T], message: str, callback: Callable[[T], None]) -> None:
        self.execute(lambda: callback(operation(message)))

    def is_injunction_async(self, message: str, callback: Callable[[bool], None]) -> None:
        self._submit(self.is_injunction, message, callback)

    def contains_profanity_async(self, message: str, callback: Callable[[bool], None]) -> None:
        self._submit(self.contains_profanity, message, callback)

    def suggest_improved_sentence_async(self, message: str, callback: Callable[[str], None]) -> None:
        self._submit(self.suggest_improved_sentence, message, callback)

    def suggest_injunction_replacement_async(self, message: str, callback: Callable[[str], None]) -> None:
        self._submit(self.suggest_injunction_replacement, message, callback)

    def suggest_conjunction_replacement_async(self, message: str, callback: Callable[[str], None]) -> None:
        self._submit(self.suggest_conjunction_replacement, message, callback)

    def has_conjunction_async(self, message: str, callback: Callable[[bool], None]) -> None:
        self._submit(self.has_conjunction, message, callback)

    def transform_sentence_async(self, sentence: str, callback: Callable[[str], None]) -> None:
        self._submit(self.transform_sentence, sentence, callback)

    def extract_complete_sentences_async(self, text: str,
                                         callback: Callable[[SentenceExtractionResult], None]) -> None:
        self._submit(self.extract_complete_sentences, text, callback)

    def find_negative_spans_async(self, text: str, callback: Callable[[List[NegativeSpan]], None]) -> None:
        self._submit(self.find_negative_spans, text, callback)

    def needs_replacement(self, sentence: str, if_needed: Callable[[], None]) -> None:
        """
        Run the injunction, "not only ... but also" and conjunction checks
        concurrently and call `if_needed` at most once, from whichever check
        matches first.
        """
        once = OnceAction(if_needed)
        checks = (self.is_injunction, self.detect_not_only_but_also, self.has_conjunction)

        for check in checks:
            def task(check=check):
                if check(sentence):
                    once.fire()
            self.execute(task)

    def warm_up(self) -> None:
        """Load the parser model off the caller's thread before real traffic arrives."""
        started = time.perf_counter()

        def report(_result: bool) -> None:
            logger.info(f"Detector pipeline ready in {(time.perf_counter() - started) * 1000:.0f} ms")

        self.is_injunction_async(self.WARM_UP_TEXT, report)
