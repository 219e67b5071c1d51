"""Quiz session: random word selection and answer checking."""

import random
from typing import Optional, Sequence

import jaconv

from hirapractice.logger import logger
from hirapractice.schema import VocabularyEntry


def normalize_answer(text: str) -> str:
    """Normalize free-text input for comparison with the expected romaji.

    Full-width Latin letters typed through a Japanese IME (ｋａ) are folded to
    ASCII before trimming and lower-casing.
    """
    text = jaconv.z2h(text, kana=False, ascii=True, digit=True)
    return text.strip().lower()


class QuizSession:
    """Pick words at random and check answers against their romaji."""

    def __init__(self, entries: Sequence[VocabularyEntry], rng: Optional[random.Random] = None):
        if not entries:
            raise ValueError("QuizSession needs at least one entry")
        undecorated = [entry.id for entry in entries if not entry.is_decorated]
        if undecorated:
            raise ValueError(f"Entries without romaji: {', '.join(undecorated)}")
        self.entries = list(entries)
        self.rng = rng or random.Random()
        self.current: Optional[VocabularyEntry] = None
        self.correct = 0
        self.attempts = 0

    def next_word(self) -> VocabularyEntry:
        self.current = self.rng.choice(self.entries)
        logger.debug(f"Next word: {self.current}")
        return self.current

    def check(self, answer: str) -> bool:
        """Return True if *answer* matches the current word's romaji."""
        if self.current is None:
            return False
        self.attempts += 1
        if normalize_answer(answer) == self.current.romaji:
            self.correct += 1
            return True
        return False

    @property
    def score(self) -> str:
        return f"{self.correct}/{self.attempts}"
