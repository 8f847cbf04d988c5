"""
Annotators
The Annotator interface the rules depend on, and the spaCy-backed adapter.
"""

import logging
import threading
import time
from abc import ABC, abstractmethod
from typing import List, Optional

try:
    import spacy
    SPACY_AVAILABLE = True
except ImportError:
    SPACY_AVAILABLE = False

from .relations import map_relation
from .types import DependencyGraph, Edge, Sentence, Token

logger = logging.getLogger(__name__)


class AnnotatorUnavailableError(RuntimeError):
    """Raised when the underlying NLP pipeline cannot be loaded."""


class Annotator(ABC):
    """Turns raw text into annotated sentences."""

    @abstractmethod
    def annotate(self, text: str) -> List[Sentence]:
        """Tokenize, tag, lemmatize and dependency-parse `text`."""


class SpacyAnnotator(Annotator):
    """
    Annotator backed by a spaCy pipeline.

    The model is loaded lazily on first use and shared by every call on this
    instance. Pass `nlp` to reuse an already loaded pipeline.
    """

    def __init__(self, nlp=None, model_name: Optional[str] = None):
        if model_name is None:
            from config import Config
            model_name = Config.SPACY_MODEL
        self.model_name = model_name
        self._nlp = nlp
        self._lock = threading.Lock()

    @property
    def nlp(self):
        if self._nlp is None:
            with self._lock:
                if self._nlp is None:
                    self._nlp = self._load_model()
        return self._nlp

    def _load_model(self):
        if not SPACY_AVAILABLE:
            raise AnnotatorUnavailableError("spaCy is not installed")
        started = time.perf_counter()
        try:
            nlp = spacy.load(self.model_name)
        except OSError as e:
            raise AnnotatorUnavailableError(
                f"spaCy model '{self.model_name}' is not installed: {e}"
            ) from e
        logger.info(f"SpaCy model '{self.model_name}' loaded in {time.perf_counter() - started:.2f}s")
        return nlp

    def annotate(self, text: str) -> List[Sentence]:
        doc = self.nlp(text)
        return [self._convert_sentence(sent) for sent in doc.sents]

    @staticmethod
    def _convert_sentence(sent) -> Sentence:
        tokens = tuple(
            Token(
                index=tok.i - sent.start,
                text=tok.text,
                lemma=tok.lemma_,
                tag=tok.tag_,
                whitespace=tok.whitespace_,
                offset=tok.idx,
            )
            for tok in sent
        )

        root = None
        edges = []
        for tok in sent:
            dependent = tokens[tok.i - sent.start]
            if tok.dep_ == 'ROOT' or tok.head.i == tok.i:
                if root is None:
                    root = dependent
                continue
            # heads outside the span only happen with custom sentence boundaries
            if not sent.start <= tok.head.i < sent.end:
                continue
            governor = tokens[tok.head.i - sent.start]
            edges.append(Edge(
                relation=map_relation(tok.dep_, tok.tag_, scheme='spacy'),
                governor=governor,
                dependent=dependent,
                label=tok.dep_,
            ))

        return Sentence(
            tokens=tokens,
            graph=DependencyGraph(edges, root=root),
            text=sent.text,
            start_char=sent.start_char,
            end_char=sent.end_char,
        )
