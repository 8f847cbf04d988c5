"""
Annotation layer: value types for annotated sentences and the adapters that
produce them from an NLP pipeline.
"""

from .annotator import Annotator, AnnotatorUnavailableError, SpacyAnnotator, SPACY_AVAILABLE
from .relations import Relation, map_relation
from .types import DependencyGraph, Edge, Sentence, Token

__all__ = [
    'Annotator',
    'AnnotatorUnavailableError',
    'SpacyAnnotator',
    'SPACY_AVAILABLE',
    'Relation',
    'map_relation',
    'DependencyGraph',
    'Edge',
    'Sentence',
    'Token',
]
