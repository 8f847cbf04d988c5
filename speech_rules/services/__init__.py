from .lexicon_service import Lexicon, LexiconError, LexiconService, get_lexicon

__all__ = ['Lexicon', 'LexiconError', 'LexiconService', 'get_lexicon']
