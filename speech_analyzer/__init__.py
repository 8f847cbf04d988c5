"""
Speech analyzer: the detector facade, streaming sentence extraction and the
async dispatch strategies.
"""

from .base_analyzer import NegativeSpan, NegativeSpeechDetector
from .sentence_extractor import SentenceBoundaryExtractor, SentenceExtractionResult, StreamingSentenceBuffer
from .task_executors import OnceAction, PooledExecutor, get_task_executor, run_in_thread, run_inline

__all__ = [
    'NegativeSpan',
    'NegativeSpeechDetector',
    'SentenceBoundaryExtractor',
    'SentenceExtractionResult',
    'StreamingSentenceBuffer',
    'OnceAction',
    'PooledExecutor',
    'get_task_executor',
    'run_in_thread',
    'run_inline',
]
