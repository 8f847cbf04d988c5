"""
Annotation Types
Immutable token, edge, graph and sentence values produced by an annotator.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Set, Tuple

from .relations import Relation


@dataclass(frozen=True)
class Token:
    """A single annotated token. `whitespace` is the text that follows it."""
    index: int
    text: str
    lemma: str
    tag: str
    whitespace: str = ''
    offset: int = 0

    @property
    def lower(self) -> str:
        return self.text.lower()

    @property
    def lemma_lower(self) -> str:
        return self.lemma.lower()

    @property
    def text_with_ws(self) -> str:
        return self.text + self.whitespace


@dataclass(frozen=True)
class Edge:
    relation: Relation
    governor: Token
    dependent: Token
    label: str = ''


class DependencyGraph:
    """
    Directed dependency graph over the tokens of one sentence.
    The graph may have no root when the parser could not find one.
    """

    def __init__(self, edges: Iterable[Edge] = (), root: Optional[Token] = None):
        self._edges: Tuple[Edge, ...] = tuple(edges)
        self._root = root
        self._outgoing: Dict[Token, List[Edge]] = {}
        for edge in self._edges:
            self._outgoing.setdefault(edge.governor, []).append(edge)

    @property
    def root(self) -> Optional[Token]:
        return self._root

    @property
    def edges(self) -> Tuple[Edge, ...]:
        return self._edges

    def outgoing(self, token: Token) -> List[Edge]:
        return list(self._outgoing.get(token, ()))

    def edges_from(self, governor: Token, *relations: Relation) -> List[Edge]:
        """Outgoing edges of `governor` restricted to the given relations."""
        return [edge for edge in self._outgoing.get(governor, ()) if edge.relation in relations]

    def descendants(self, token: Token) -> Set[Token]:
        """All tokens reachable from `token`, excluding the token itself."""
        seen: Set[Token] = set()
        queue = deque([token])
        while queue:
            current = queue.popleft()
            for edge in self._outgoing.get(current, ()):
                if edge.dependent not in seen and edge.dependent != token:
                    seen.add(edge.dependent)
                    queue.append(edge.dependent)
        return seen

    def __repr__(self) -> str:
        return f"DependencyGraph(root={self._root!r}, edges={len(self._edges)})"


@dataclass(frozen=True)
class Sentence:
    """A sentence with its tokens, dependency graph and character span."""
    tokens: Tuple[Token, ...]
    graph: DependencyGraph = field(default_factory=DependencyGraph, compare=False)
    text: str = ''
    start_char: int = 0
    end_char: int = 0

    def __iter__(self):
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)
