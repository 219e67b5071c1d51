from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

class VocabularyEntry(BaseModel):
    id: str
    jp: str = Field(..., min_length=1)  # display form, possibly kanji【hiragana】
    en: str  # English gloss
    hiragana: Optional[str] = None  # reading extracted from jp, set once by the loader
    romaji: Optional[str] = None  # expected quiz answer, set once by the loader
    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def is_decorated(self) -> bool:
        return self.hiragana is not None and self.romaji is not None

    def decorate(self, hiragana: str, romaji: str) -> "VocabularyEntry":
        """Return a copy carrying the derived reading and romaji."""
        if self.is_decorated:
            raise ValueError(f"Entry {self.id} is already decorated")
        return self.model_copy(update={"hiragana": hiragana, "romaji": romaji})
