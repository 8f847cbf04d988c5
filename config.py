"""
Configuration for the Positizer detector.
"""

import os
import logging
from dotenv import load_dotenv
from typing import Dict, Any

# Load environment variables (optional - only if .env file exists)
load_dotenv()

_PACKAGE_LEXICON_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'speech_rules', 'config')


class Config:
    """Detector configuration."""

    # SpaCy model settings
    SPACY_MODEL = os.environ.get('SPACY_MODEL', 'en_core_web_sm')

    # Lexical knowledge base
    LEXICON_DIR = os.environ.get('LEXICON_DIR', _PACKAGE_LEXICON_DIR)
    PROFANITY_WORDLIST = os.environ.get(
        'PROFANITY_WORDLIST',
        os.path.join(LEXICON_DIR, 'profanity', 'profane_words.txt')
    )

    # Async dispatch: 'thread' (one thread per task), 'pool' or 'inline'
    DISPATCH_POLICY = os.environ.get('DISPATCH_POLICY', 'thread').lower()
    DISPATCH_POOL_SIZE = int(os.environ.get('DISPATCH_POOL_SIZE', 4))

    # Logging Configuration
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
    LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

    TESTING = False

    @classmethod
    def init_logging(cls, level: str = None):
        """Configure root logging once for command-line use."""
        logging.basicConfig(
            level=getattr(logging, (level or cls.LOG_LEVEL).upper(), logging.INFO),
            format=cls.LOG_FORMAT,
        )

    @classmethod
    def get_annotation_config(cls) -> Dict[str, Any]:
        """Get annotation pipeline configuration."""
        return {
            'spacy_model': cls.SPACY_MODEL,
        }

    @classmethod
    def get_lexicon_config(cls) -> Dict[str, Any]:
        """Get lexical knowledge base configuration."""
        return {
            'lexicon_dir': cls.LEXICON_DIR,
            'profanity_wordlist': cls.PROFANITY_WORDLIST,
        }

    @classmethod
    def get_dispatch_config(cls) -> Dict[str, Any]:
        """Get async dispatch configuration."""
        return {
            'policy': cls.DISPATCH_POLICY,
            'pool_size': cls.DISPATCH_POOL_SIZE,
        }


# For testing only
class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DISPATCH_POLICY = 'inline'
    LOG_LEVEL = 'DEBUG'
