"""Hiragana to romaji transliteration.

The output is tuned for typing practice rather than strict Hepburn: a sokuon
doubles exactly one following letter (っしゃ -> "ssha") and the long-vowel mark
doubles the preceding vowel (とー -> "too") instead of using a macron.
"""

import re
import string
from types import MappingProxyType
from typing import Dict, List

from hirapractice.nlp.base import BaseRomanizer
from hirapractice.nlp.japanese.script import extract_hiragana, is_hiragana

SOKUON = "っ"
LONG_VOWEL_MARK = "ー"
VOWELS = frozenset("aeiou")
_LATIN_LOWERCASE = frozenset(string.ascii_lowercase)

# Whitespace and stray byte-order marks at either end of the output
_OUTER_BLANKS = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")

_BASE: Dict[str, str] = {
    "あ": "a",  "い": "i",   "う": "u",   "え": "e",  "お": "o",
    "か": "ka", "き": "ki",  "く": "ku",  "け": "ke", "こ": "ko",
    "さ": "sa", "し": "shi", "す": "su",  "せ": "se", "そ": "so",
    "た": "ta", "ち": "chi", "つ": "tsu", "て": "te", "と": "to",
    "な": "na", "に": "ni",  "ぬ": "nu",  "ね": "ne", "の": "no",
    "は": "ha", "ひ": "hi",  "ふ": "fu",  "へ": "he", "ほ": "ho",
    "ま": "ma", "み": "mi",  "む": "mu",  "め": "me", "も": "mo",
    "や": "ya",              "ゆ": "yu",              "よ": "yo",
    "ら": "ra", "り": "ri",  "る": "ru",  "れ": "re", "ろ": "ro",
    "わ": "wa",                                       "を": "wo",
}

_VOICED: Dict[str, str] = {
    "が": "ga", "ぎ": "gi",  "ぐ": "gu",  "げ": "ge", "ご": "go",
    "ざ": "za", "じ": "ji",  "ず": "zu",  "ぜ": "ze", "ぞ": "zo",
    "だ": "da", "ぢ": "ji",  "づ": "zu",  "で": "de", "ど": "do",
    "ば": "ba", "び": "bi",  "ぶ": "bu",  "べ": "be", "ぼ": "bo",
    "ぱ": "pa", "ぴ": "pi",  "ぷ": "pu",  "ぺ": "pe", "ぽ": "po",
}

_DIGRAPHS: Dict[str, str] = {
    "きゃ": "kya", "きゅ": "kyu", "きょ": "kyo",
    "しゃ": "sha", "しゅ": "shu", "しょ": "sho",
    "ちゃ": "cha", "ちゅ": "chu", "ちょ": "cho",
    "にゃ": "nya", "にゅ": "nyu", "にょ": "nyo",
    "ひゃ": "hya", "ひゅ": "hyu", "ひょ": "hyo",
    "みゃ": "mya", "みゅ": "myu", "みょ": "myo",
    "りゃ": "rya", "りゅ": "ryu", "りょ": "ryo",
    "ぎゃ": "gya", "ぎゅ": "gyu", "ぎょ": "gyo",
    "じゃ": "ja",  "じゅ": "ju",  "じょ": "jo",
    "びゃ": "bya", "びゅ": "byu", "びょ": "byo",
    "ぴゃ": "pya", "ぴゅ": "pyu", "ぴょ": "pyo",
}

# Full-width punctuation keeps Latin spacing conventions
_PUNCTUATION: Dict[str, str] = {
    "（": " (", "）": ")", "、": ", ",
}

# っ and ー are intentionally absent: they survive the scan and are resolved
# by the post-processing passes.
ROMAJI_MAP = MappingProxyType({
    **_BASE,
    **_VOICED,
    **_DIGRAPHS,
    "ん": "n",
    **_PUNCTUATION,
})


def _scan(hiragana: str) -> str:
    out: List[str] = []
    i = 0
    n = len(hiragana)
    while i < n:
        pair = hiragana[i:i + 2]
        if len(pair) == 2 and pair in ROMAJI_MAP:
            out.append(ROMAJI_MAP[pair])
            i += 2
            continue
        ch = hiragana[i]
        out.append(ROMAJI_MAP.get(ch, ch))
        i += 1
    return "".join(out)


def _apply_sokuon(romaji: str) -> str:
    """Replace every ``っ`` + lowercase letter with the letter doubled."""
    out: List[str] = []
    i = 0
    n = len(romaji)
    while i < n:
        ch = romaji[i]
        if ch == SOKUON and i + 1 < n and romaji[i + 1] in _LATIN_LOWERCASE:
            out.append(romaji[i + 1] * 2)
            i += 2
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def _apply_long_vowels(romaji: str) -> str:
    """Replace every vowel + ``ー`` with the vowel doubled."""
    out: List[str] = []
    i = 0
    n = len(romaji)
    while i < n:
        ch = romaji[i]
        if ch in VOWELS and i + 1 < n and romaji[i + 1] == LONG_VOWEL_MARK:
            out.append(ch * 2)
            i += 2
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def to_romaji(hiragana: str) -> str:
    """Transliterate *hiragana* into romaji.

    Digraphs win over single characters, anything not in ``ROMAJI_MAP`` is
    copied through unchanged, then gemination and vowel elongation are applied
    (in that order) over the whole string.  Never raises.
    """
    romaji = _scan(hiragana)
    romaji = _apply_sokuon(romaji)
    romaji = _apply_long_vowels(romaji)
    return _OUTER_BLANKS.sub("", romaji)


class HiraganaRomanizer(BaseRomanizer):
    """Romanizer for hiragana vocabulary entries."""

    def accepts(self, text: str) -> bool:
        return is_hiragana(text)

    def extract_reading(self, text: str) -> str:
        return extract_hiragana(text)

    def romanize(self, text: str) -> str:
        return to_romaji(text)
