"""Hiragana script detection and ``kanji【hiragana】`` annotation handling."""

from typing import Optional

HIRAGANA_FIRST = "ぁ"  # U+3041
HIRAGANA_LAST = "ゟ"   # U+309F

# Marks that may appear inside an otherwise pure-hiragana reading
ALLOWED_PUNCTUATION = frozenset("ー（）、")

ANNOTATION_OPEN = "【"
ANNOTATION_CLOSE = "】"


def find_annotation(text: str) -> Optional[str]:
    """Return the interior of the first ``【…】`` span in *text*.

    The span starts at the first opening bracket and ends at the first closing
    bracket after it; later pairs are ignored.  Returns ``None`` when there is
    no opening bracket or it is never closed.  An empty interior yields ``""``.
    """
    start = text.find(ANNOTATION_OPEN)
    if start < 0:
        return None
    end = text.find(ANNOTATION_CLOSE, start + 1)
    if end < 0:
        return None
    return text[start + 1:end]


def is_hiragana_char(ch: str) -> bool:
    return HIRAGANA_FIRST <= ch <= HIRAGANA_LAST or ch in ALLOWED_PUNCTUATION


def is_hiragana(text: str) -> bool:
    """Check if *text* is pure hiragana.

    Annotated entries such as ``漢字【かんじ】`` are judged by their bracketed
    reading only.  An unclosed bracket means the whole original string is
    checked character by character (and fails on the bracket itself).
    """
    if ANNOTATION_OPEN in text:
        reading = find_annotation(text)
        if reading is not None:
            return is_hiragana(reading)
    return all(is_hiragana_char(ch) for ch in text)


def extract_hiragana(text: str) -> str:
    """Strip a ``kanji【hiragana】`` entry down to its reading."""
    reading = find_annotation(text)
    return text if reading is None else reading
