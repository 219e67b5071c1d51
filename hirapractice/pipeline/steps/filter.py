from typing import Dict, Optional

from pydantic import ValidationError

from hirapractice.nlp import BaseRomanizer, get_romanizer
from hirapractice.pipeline.base import PipelineStep, PipelineContext
from hirapractice.schema import VocabularyEntry
from hirapractice.vocabulary import VocabularyLoadError
from hirapractice.logger import logger

class FilterStep(PipelineStep):
    """Keep rows whose display form the romanizer accepts and derive answers."""

    def __init__(self, name: str, romanizer: Optional[BaseRomanizer] = None):
        super().__init__(name)
        self.romanizer = romanizer

    def execute(self, context: PipelineContext) -> bool:
        try:
            romanizer = self.romanizer or get_romanizer(context.language)
        except ValueError as e:
            logger.error(f"❌ {e}")
            return context.fail(VocabularyLoadError(str(e)))

        entries = []
        rejected = 0
        for row in context.rows:
            entry = self._build_entry(row, romanizer)
            if entry is None:
                rejected += 1
            else:
                entries.append(entry)

        context.entries = entries
        context.rejected = rejected
        logger.info(f"🔎 Kept {len(entries)} entries, rejected {rejected}")

        if not entries:
            return context.fail(VocabularyLoadError("No usable entries in word list"))
        return self.run_next(context)

    @staticmethod
    def _build_entry(row: Dict[str, str], romanizer: BaseRomanizer) -> Optional[VocabularyEntry]:
        if not romanizer.accepts(row["jp"]):
            return None
        try:
            entry = VocabularyEntry(**row)
        except ValidationError as e:
            logger.warning(f"⚠️ Skipping invalid row {row}: {e.error_count()} error(s)")
            return None
        reading = romanizer.extract_reading(entry.jp)
        return entry.decorate(hiragana=reading, romaji=romanizer.romanize(reading))
