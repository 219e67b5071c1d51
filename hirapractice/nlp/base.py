from abc import ABC, abstractmethod


class BaseRomanizer(ABC):
    """Abstract base class for script-specific romanization"""

    @abstractmethod
    def accepts(self, text: str) -> bool:
        """Return True if *text* is written in the script this romanizer handles"""
        pass

    @abstractmethod
    def extract_reading(self, text: str) -> str:
        """Return the phonetic reading embedded in a display form"""
        pass

    @abstractmethod
    def romanize(self, text: str) -> str:
        """Convert a phonetic reading to Latin script"""
        pass

    def reading_to_romaji(self, text: str) -> str:
        """Extract the reading from *text* and romanize it in one go."""
        return self.romanize(self.extract_reading(text))
