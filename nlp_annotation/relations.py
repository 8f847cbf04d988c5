"""
Grammatical Relations
Normalized dependency relations shared by every rule, plus the label tables
that map a parser's own vocabulary onto them.
"""

from enum import Enum
from typing import Dict, Optional


class Relation(Enum):
    """Parser-independent dependency relation."""
    NOMINAL_SUBJECT = 'nominal_subject'
    DIRECT_OBJECT = 'direct_object'
    INDIRECT_OBJECT = 'indirect_object'
    OPEN_COMPLEMENT = 'open_complement'
    CLAUSAL_COMPLEMENT = 'clausal_complement'
    AUXILIARY = 'auxiliary'
    NEGATION = 'negation'
    MARKER = 'marker'
    OTHER = 'other'


# ClearNLP labels produced by spaCy's English pipelines
SPACY_LABELS: Dict[str, Relation] = {
    'nsubj': Relation.NOMINAL_SUBJECT,
    'dobj': Relation.DIRECT_OBJECT,
    'dative': Relation.INDIRECT_OBJECT,
    'xcomp': Relation.OPEN_COMPLEMENT,
    'ccomp': Relation.CLAUSAL_COMPLEMENT,
    'aux': Relation.AUXILIARY,
    'neg': Relation.NEGATION,
    'mark': Relation.MARKER,
}

# Universal Dependencies / Stanford labels (CoreNLP, Stanza)
UD_LABELS: Dict[str, Relation] = {
    'nsubj': Relation.NOMINAL_SUBJECT,
    'nsubj:xsubj': Relation.NOMINAL_SUBJECT,
    'dobj': Relation.DIRECT_OBJECT,
    'obj': Relation.DIRECT_OBJECT,
    'iobj': Relation.INDIRECT_OBJECT,
    'xcomp': Relation.OPEN_COMPLEMENT,
    'ccomp': Relation.CLAUSAL_COMPLEMENT,
    'aux': Relation.AUXILIARY,
    'neg': Relation.NEGATION,
    'mark': Relation.MARKER,
}

LABEL_SCHEMES: Dict[str, Dict[str, Relation]] = {
    'spacy': SPACY_LABELS,
    'ud': UD_LABELS,
}

INFINITIVE_TAG = 'TO'


def map_relation(label: str, dependent_tag: Optional[str] = None, scheme: str = 'spacy') -> Relation:
    """
    Map a raw parser label onto a Relation.

    Args:
        label: The dependency label as emitted by the parser.
        dependent_tag: Fine-grained tag of the dependent token, if known.
        scheme: Which label table to use ('spacy' or 'ud').

    Returns:
        The normalized relation, or Relation.OTHER for unknown labels.
    """
    table = LABEL_SCHEMES.get(scheme, SPACY_LABELS)
    relation = table.get(label.lower(), Relation.OTHER)

    # spaCy attaches the infinitive "to" as an auxiliary; UD calls it a marker
    if relation is Relation.AUXILIARY and dependent_tag == INFINITIVE_TAG:
        return Relation.MARKER
    return relation
