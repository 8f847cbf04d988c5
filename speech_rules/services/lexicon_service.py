"""
Lexicon Service

Loads the YAML-based lexical knowledge base (negations, match sets, pronouns,
irregular verbs) and the profanity word list, and exposes them as a single
immutable Lexicon shared by every rule.
"""

import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Mapping, Optional, Union

import yaml

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class LexiconError(ValueError):
    """Raised when a lexicon file parses but has the wrong shape."""


def _frozen_map(data: Optional[Mapping[str, Any]]) -> Mapping[str, str]:
    return MappingProxyType({str(k).lower(): '' if v is None else str(v) for k, v in (data or {}).items()})


def _frozen_set(data) -> FrozenSet[str]:
    return frozenset(str(item).strip().lower() for item in (data or ()) if str(item).strip())


@dataclass(frozen=True)
class Lexicon:
    """
    Read-only lexical tables. Every key is lower case; callers lower-case
    their lookups with `str.lower`.
    """
    negation_map: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    contraction_map: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    negated_stems: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    negative_adverbs: FrozenSet[str] = frozenset()
    adverb_match_set: FrozenSet[str] = frozenset()
    modal_match_set: FrozenSet[str] = frozenset()
    conjunction_match_set: FrozenSet[str] = frozenset()
    subject_to_object: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    object_to_subject: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    reflexive_pronouns: FrozenSet[str] = frozenset()
    irregular_past: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    irregular_present: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    profanity: FrozenSet[str] = frozenset()

    def to_object_pronoun(self, word: str) -> str:
        """Subject-case pronoun to object case; other words come back unchanged."""
        return self.subject_to_object.get(word.lower(), word)

    def to_subject_pronoun(self, word: str) -> str:
        """Object-case pronoun to subject case; other words come back unchanged."""
        return self.object_to_subject.get(word.lower(), word)

    def is_reflexive(self, word: str) -> bool:
        return word.lower() in self.reflexive_pronouns

    def expand_contraction(self, word: str) -> str:
        """Full form of a contraction token ("can't" -> "cannot"), else the word."""
        return self.contraction_map.get(word.lower().replace("\u2019", "'"), word)


class LexiconService:
    """
    Reads lexicon YAML files from a config directory and builds a Lexicon.

    Missing files are logged and treated as empty vocabularies; the profanity
    list is optional in the same way.
    """

    NEGATIONS_FILE = 'negations.yaml'
    MATCH_SETS_FILE = 'match_sets.yaml'
    PRONOUNS_FILE = 'pronouns.yaml'
    VERB_FORMS_FILE = 'verb_forms.yaml'

    def __init__(self, config_dir: Optional[PathLike] = None, profanity_path: Optional[PathLike] = None):
        if config_dir is None or profanity_path is None:
            from config import Config
            config_dir = config_dir or Config.LEXICON_DIR
            profanity_path = profanity_path or Config.PROFANITY_WORDLIST

        self.config_dir = Path(config_dir)
        self.profanity_path = Path(profanity_path)

    def _load_yaml_file(self, filename: str) -> Dict[str, Any]:
        file_path = self.config_dir / filename

        if not file_path.exists():
            logger.warning(f"Lexicon file {file_path} not found. Using empty vocabulary.")
            return {}

        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            raise LexiconError(f"Lexicon file {file_path} must contain a mapping, got {type(data).__name__}")

        logger.info(f"Loaded lexicon vocabulary: {filename}")
        return data

    def load_profanity(self) -> FrozenSet[str]:
        """Load the profanity word list, one word per line."""
        try:
            with open(self.profanity_path, 'r', encoding='utf-8') as f:
                words = _frozen_set(f)
        except FileNotFoundError:
            logger.warning(f"Profanity word list not found at {self.profanity_path}. Profanity detection is disabled.")
            return frozenset()

        logger.info(f"Loaded {len(words)} profane words from {self.profanity_path.name}")
        return words

    def load(self) -> Lexicon:
        negations = self._load_yaml_file(self.NEGATIONS_FILE)
        match_sets = self._load_yaml_file(self.MATCH_SETS_FILE)
        pronouns = self._load_yaml_file(self.PRONOUNS_FILE)
        verb_forms = self._load_yaml_file(self.VERB_FORMS_FILE)

        negative_adverbs = _frozen_set(negations.get('negative_adverbs'))

        return Lexicon(
            negation_map=_frozen_map(negations.get('negation_map')),
            contraction_map=_frozen_map(negations.get('contraction_map')),
            negated_stems=_frozen_map(negations.get('negated_stems')),
            negative_adverbs=negative_adverbs,
            adverb_match_set=negative_adverbs | _frozen_set(match_sets.get('adverbs')),
            modal_match_set=_frozen_set(match_sets.get('modals')),
            conjunction_match_set=_frozen_set(match_sets.get('conjunctions')),
            subject_to_object=_frozen_map(pronouns.get('subject_to_object')),
            # values keep their case ("me" -> "I")
            object_to_subject=_frozen_map(pronouns.get('object_to_subject')),
            reflexive_pronouns=_frozen_set(pronouns.get('reflexive')),
            irregular_past=_frozen_map(verb_forms.get('irregular_past')),
            irregular_present=_frozen_map(verb_forms.get('irregular_present')),
            profanity=self.load_profanity(),
        )


# === GLOBAL LEXICON INSTANCE ===

_lexicon: Optional[Lexicon] = None
_lexicon_lock = threading.Lock()


def get_lexicon() -> Lexicon:
    """Get the process-wide lexicon, loading it on first use."""
    global _lexicon
    if _lexicon is None:
        with _lexicon_lock:
            if _lexicon is None:
                _lexicon = LexiconService().load()
    return _lexicon
