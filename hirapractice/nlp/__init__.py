"""Natural Language Processing module for hirapractice

This module provides script detection and romanization for the quiz.
"""

from .base import BaseRomanizer

def get_romanizer(language: str) -> BaseRomanizer:
    """Get a romanizer for the specified language.

    Args:
        language: Language code ('ja'/'jp' for Japanese hiragana)

    Returns:
        Language-specific romanizer instance

    Raises:
        ValueError: If language is not supported
    """
    language = language.lower()

    if language in ['ja', 'jp']:
        from .japanese.romanizer import HiraganaRomanizer
        return HiraganaRomanizer()
    else:
        raise ValueError(f"Unsupported language for romanization: {language}")

__all__ = [
    'BaseRomanizer',
    'get_romanizer'
]
