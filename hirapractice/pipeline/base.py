from dataclasses import dataclass, field
from typing import Optional, Dict, List
from abc import ABC, abstractmethod

from hirapractice.schema import VocabularyEntry
from hirapractice.vocabulary import VocabularyLoadError

@dataclass
class PipelineContext:
    """Context object passed between pipeline steps"""
    source: str
    language: str = "ja"
    raw_text: Optional[str] = None
    rows: List[Dict[str, str]] = field(default_factory=list)
    entries: List[VocabularyEntry] = field(default_factory=list)
    rejected: int = 0
    error: Optional[VocabularyLoadError] = None

    def fail(self, error: VocabularyLoadError) -> bool:
        """Record *error* as the reason the pipeline stopped."""
        self.error = error
        return False

class PipelineStep(ABC):
    """Base class for all pipeline steps"""
    def __init__(self, name: str):
        self.name = name
        self._next_step: Optional[PipelineStep] = None

    @abstractmethod
    def execute(self, context: 'PipelineContext') -> bool:
        pass

    def set_next(self, step: 'PipelineStep') -> 'PipelineStep':
        self._next_step = step
        return step

    def run_next(self, context: 'PipelineContext') -> bool:
        if self._next_step:
            return self._next_step.execute(context)
        return True
