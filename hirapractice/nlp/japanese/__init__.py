"""Japanese (hiragana) language processing module."""

from .script import extract_hiragana, find_annotation, is_hiragana
from .romanizer import ROMAJI_MAP, HiraganaRomanizer, to_romaji

# Public names used by the quiz front end
classify = is_hiragana
transliterate = to_romaji

__all__ = [
    'ROMAJI_MAP',
    'HiraganaRomanizer',
    'classify',
    'extract_hiragana',
    'find_annotation',
    'is_hiragana',
    'to_romaji',
    'transliterate',
]
