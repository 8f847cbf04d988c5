"""
Shared fixtures.

Rule tests run against a StubAnnotator so they need no spaCy model. Plain
text is split with a small regex tokenizer that mimics spaCy's handling of
contractions ("can't" -> "ca" + "n't", typographic apostrophes included) and
tags a handful of closed-class words. Tests that need a dependency graph
register a hand-built parse with `stub_annotator.add(text, build_sentence(...))`.
"""

import re

import pytest

from nlp_annotation import Annotator, DependencyGraph, Edge, Sentence, Token, map_relation
from speech_rules.services.lexicon_service import LexiconService

TOKEN_PATTERN = re.compile(r"n['’]t|\w+(?=n['’]t)|\w+|[^\w\s]")
SENTENCE_END = {'.', '!', '?'}
ATTACHES_LEFT = {'.', ',', '!', '?', "n't", "n’t", "'s", "'m", "'re"}

STUB_TAGS = {
    'but': 'CC', 'and': 'CC', 'or': 'CC',
    'should': 'MD', 'can': 'MD', 'ca': 'MD', 'will': 'MD', 'wo': 'MD', 'must': 'MD',
    'not': 'RB', "n't": 'RB', "n’t": 'RB', 'never': 'RB', 'only': 'RB', 'also': 'RB',
    'i': 'PRP', 'you': 'PRP', 'he': 'PRP', 'she': 'PRP', 'it': 'PRP', 'we': 'PRP', 'they': 'PRP',
}
STUB_LEMMAS = {"n't": 'not', "n’t": 'not', 'ca': 'can', 'wo': 'will'}


def _stub_tag(word: str) -> str:
    if word in SENTENCE_END:
        return '.'
    return STUB_TAGS.get(word.lower(), 'NN')


def tokenize(text):
    """Split raw text into stub sentences without dependency edges."""
    matches = list(TOKEN_PATTERN.finditer(text))
    sentences = []
    current = []

    def close():
        if not current:
            return
        start, end = current[0][1].start(), current[-1][1].end()
        tokens = tuple(
            Token(i, m.group(), STUB_LEMMAS.get(m.group().lower(), m.group().lower()),
                  _stub_tag(m.group()), ws if i < len(current) - 1 else '', m.start())
            for i, (ws, m) in enumerate(current)
        )
        sentences.append(Sentence(tokens, DependencyGraph(), text[start:end], start, end))
        current.clear()

    for position, match in enumerate(matches):
        following = matches[position + 1].start() if position + 1 < len(matches) else len(text)
        current.append((text[match.end():following], match))
        if match.group() in SENTENCE_END:
            close()
    close()
    return sentences


def build_sentence(words, edges=(), root=None, start=0):
    """
    Build an annotated sentence by hand.

    Args:
        words: (text, lemma, tag) triples in sentence order.
        edges: (label, governor_index, dependent_index) triples; labels are
            spaCy labels mapped through map_relation.
        root: index of the root token, or None for a rootless graph.
        start: character offset of the sentence in the analyzed text.
    """
    tokens = []
    offset = start
    for i, (text, lemma, tag) in enumerate(words):
        following = words[i + 1][0] if i + 1 < len(words) else None
        whitespace = '' if following is None or following.lower() in ATTACHES_LEFT else ' '
        tokens.append(Token(i, text, lemma, tag, whitespace, offset))
        offset += len(text) + len(whitespace)

    graph_edges = [
        Edge(map_relation(label, tokens[dependent].tag), tokens[governor], tokens[dependent], label)
        for label, governor, dependent in edges
    ]
    text = ''.join(token.text_with_ws for token in tokens)
    graph = DependencyGraph(graph_edges, root=tokens[root] if root is not None else None)
    return Sentence(tuple(tokens), graph, text, start, start + len(text))


class StubAnnotator(Annotator):
    """Annotator returning registered parses, or a regex tokenization otherwise."""

    def __init__(self):
        self.parses = {}
        self.calls = []

    def add(self, text, *sentences):
        self.parses[text] = list(sentences)

    def annotate(self, text):
        self.calls.append(text)
        if text in self.parses:
            return list(self.parses[text])
        return tokenize(text)


@pytest.fixture(scope="session")
def lexicon():
    """The packaged lexicon, loaded once."""
    return LexiconService().load()


@pytest.fixture
def stub_annotator():
    return StubAnnotator()


@pytest.fixture(name="build_sentence")
def build_sentence_fixture():
    return build_sentence
