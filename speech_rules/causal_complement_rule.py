"""
Causal Complement Rule
Rewrites "Subject Verb Object Complement-clause" sentences into a form where
the speaker owns the feeling:

    "She makes me feel happy."        -> "I feel happy with her."
    "She made me feel happy."         -> "I felt happy with her."
    "He will make me feel proud."     -> "I will feel proud with him."
    "She doesn't make me feel sad."   -> "I don't feel sad with her."
    "She encourages him to be brave." -> "He is brave of her."

The transformation reads only the dependency graph of the first sentence.
Whenever a required piece is missing the input is returned unchanged.
"""

import logging
import re
from collections import deque
from dataclasses import dataclass, field
from typing import List, Optional, Set

from nlp_annotation import Annotator, DependencyGraph, Relation, Token
from .base_rule import BaseRule
from .services.lexicon_service import Lexicon
from .verb_conjugator import VerbConjugator

logger = logging.getLogger(__name__)

TAG_MODAL = 'MD'
TAG_PAST = 'VBD'
INFINITIVE_MARKER = 'to'


@dataclass
class ClauseRoles:
    """Grammatical roles resolved from the main clause."""
    main_verb: Token
    main_subject: Optional[Token] = None
    main_object: Optional[Token] = None
    complement_verb: Optional[Token] = None
    complement_subject: Optional[Token] = None
    modal: str = ''
    negated: bool = False
    past: bool = False
    markers: List[Token] = field(default_factory=list)

    @property
    def infinitive(self) -> bool:
        return any(marker.lower == INFINITIVE_MARKER for marker in self.markers)

    @property
    def complete(self) -> bool:
        return (
            self.main_subject is not None
            and self.complement_subject is not None
            and self.complement_verb is not None
        )


class CausalComplementRule(BaseRule):
    """Turns "X makes Y feel Z" into "Y feel(s) Z with X"."""

    def __init__(self, annotator: Annotator, lexicon: Optional[Lexicon] = None) -> None:
        super().__init__(annotator, lexicon)
        self.conjugator = VerbConjugator(self.lexicon)

    def _get_rule_type(self) -> str:
        return 'causal_complement'

    def transform(self, sentence: str) -> str:
        annotated = self._first_sentence(sentence)
        if annotated is None:
            return sentence

        graph = annotated.graph
        if graph.root is None:
            return sentence

        roles = self._resolve_roles(graph)
        if not roles.complete:
            return sentence

        # "She makes herself feel happy" must not become "Herself feels happy with her"
        if self.lexicon.is_reflexive(roles.complement_subject.text):
            logger.debug(f"Reflexive complement subject in {sentence!r}; not transforming")
            return sentence

        new_subject = self._capitalize_first_letter(self.lexicon.to_subject_pronoun(roles.complement_subject.text))
        new_object = self.lexicon.to_object_pronoun(roles.main_subject.text)

        excluded: Set[Token] = {roles.complement_subject, *roles.markers}
        complement_tokens = self._complement_tokens(graph, roles.complement_verb, excluded)
        complement = self._join_tokens(complement_tokens).strip()

        auxiliary, verb_form = self._verb_phrase(roles, new_subject)
        complement = re.sub(
            r'\b' + re.escape(roles.complement_verb.text) + r'\b',
            lambda _: verb_form,
            complement,
            count=1,
        )

        additional = self._additional_clause(graph, roles.complement_verb, set(complement_tokens), excluded)
        preposition = self._choose_preposition(roles)

        parts = [new_subject]
        if auxiliary:
            parts.append(auxiliary)
        parts.append(complement)
        if additional:
            parts.append(additional)
        parts.extend([preposition, new_object])

        transformed = ' '.join(parts) + '.'
        logger.debug(f"Transformed {sentence!r} -> {transformed!r}")
        return transformed

    def _resolve_roles(self, graph: DependencyGraph) -> ClauseRoles:
        """One pass over the edges to find the main clause's roles."""
        main_verb = graph.root
        roles = ClauseRoles(main_verb=main_verb)
        auxiliaries: Set[Token] = set()
        negation_governors: Set[Token] = set()

        for edge in graph.edges:
            relation = edge.relation
            dependent = edge.dependent

            if relation is Relation.NEGATION:
                negation_governors.add(edge.governor)
                continue
            if edge.governor != main_verb:
                continue

            if relation is Relation.NOMINAL_SUBJECT and roles.main_subject is None:
                roles.main_subject = dependent
            elif relation in (Relation.DIRECT_OBJECT, Relation.INDIRECT_OBJECT) and roles.main_object is None:
                roles.main_object = dependent
            elif relation in (Relation.OPEN_COMPLEMENT, Relation.CLAUSAL_COMPLEMENT) and roles.complement_verb is None:
                roles.complement_verb = dependent
            elif relation is Relation.AUXILIARY:
                auxiliaries.add(dependent)
                if dependent.tag == TAG_MODAL and not roles.modal:
                    roles.modal = dependent.lemma_lower
                if dependent.tag == TAG_PAST:
                    roles.past = True

        if main_verb.tag == TAG_PAST:
            roles.past = True

        # negation sits on the root or, in some tenses, on one of its auxiliaries
        roles.negated = main_verb in negation_governors or bool(auxiliaries & negation_governors)

        if roles.complement_verb is not None:
            verb = roles.complement_verb
            roles.markers = [edge.dependent for edge in graph.edges_from(verb, Relation.MARKER)
                             if edge.dependent.lower == INFINITIVE_MARKER]

            subjects = graph.edges_from(verb, Relation.NOMINAL_SUBJECT)
            if subjects:
                roles.complement_subject = subjects[0].dependent

        # control: "makes me feel" lends the main object to the complement
        if roles.complement_subject is None:
            roles.complement_subject = roles.main_object

        return roles

    @staticmethod
    def _complement_tokens(graph: DependencyGraph, verb: Token, excluded: Set[Token]) -> List[Token]:
        """The complement verb's subtree in sentence order, minus excluded tokens."""
        subtree = graph.descendants(verb) | {verb}
        return sorted(subtree - excluded, key=lambda token: token.index)

    def _verb_phrase(self, roles: ClauseRoles, subject: str):
        """
        Return (auxiliary, verb form) for the new clause.

        A modal keeps the bare lemma after it. Infinitival "to be" agrees with the
        subject and takes a plain "not". Other negated verbs use do-support.
        """
        lemma = roles.complement_verb.lemma.lower()
        conjugator = self.conjugator

        if roles.modal:
            auxiliary = f"{roles.modal} not" if roles.negated else roles.modal
            return auxiliary, lemma

        if lemma == 'be' and roles.infinitive:
            form = conjugator.be_form(subject, roles.past)
            return '', f"{form} not" if roles.negated else form

        if roles.negated:
            return conjugator.do_support_negation(subject, roles.past), lemma

        if roles.past:
            return '', conjugator.past_tense(lemma)
        if roles.main_verb.tag.startswith('VB'):
            return '', conjugator.present_tense(lemma, subject)
        return '', lemma

    @staticmethod
    def _additional_clause(graph: DependencyGraph, verb: Token, included: Set[Token], excluded: Set[Token]) -> str:
        """Modifiers reachable from the complement verb but not yet in the phrase."""
        found: Set[Token] = set()
        visited: Set[Token] = {verb}
        queue = deque([verb])

        while queue:
            current = queue.popleft()
            for edge in graph.outgoing(current):
                dependent = edge.dependent
                if dependent in visited or dependent in included or dependent in excluded:
                    continue
                visited.add(dependent)
                found.add(dependent)
                queue.append(dependent)

        ordered = sorted(found, key=lambda token: token.index)
        return ''.join(token.text_with_ws for token in ordered).strip()

    @staticmethod
    def _choose_preposition(roles: ClauseRoles) -> str:
        if roles.complement_verb.lemma.lower() == 'be' and roles.infinitive:
            return 'of'
        return 'with'
