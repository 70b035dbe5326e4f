"""
Language handling for bilingual (English / Spanish) narratives.
"""

import logging
from typing import Literal, Optional

logger = logging.getLogger(__name__)

Language = Literal['en', 'es']
SUPPORTED_LANGUAGES = ('en', 'es')


def normalize_language(language: Optional[str]) -> Language:
    """Map any tag onto a supported language; anything that is not Spanish reads as English."""
    tag = (language or '').strip().lower()
    if tag in SUPPORTED_LANGUAGES:
        return tag
    logger.warning("Unsupported language %r, falling back to English", language)
    return 'en'


def localize(language: Language, en: str, es: str) -> str:
    """Pick the English or Spanish variant of a narrative."""
    return es if language == 'es' else en
