from typing import List, Optional
from hirapractice import DATA_URL
from hirapractice.logger import logger
from hirapractice.pipeline.base import PipelineContext
from hirapractice.pipeline.steps.fetch import FetchStep
from hirapractice.pipeline.steps.parse import ParseStep
from hirapractice.pipeline.steps.filter import FilterStep
from hirapractice.schema import VocabularyEntry
from hirapractice.vocabulary import VocabularyLoadError

class VocabularyLoader:
    """Fetch, parse and filter a word list into quiz-ready entries"""
    def __init__(self, source: Optional[str] = None, language: str = "ja", max_retries: Optional[int] = None):
        self.source = source or DATA_URL
        self.language = language
        self.max_retries = max_retries
        self._setup_pipeline()

    def _setup_pipeline(self):
        """Setup the pipeline steps in the correct order"""
        if self.max_retries is None:
            fetch = FetchStep("fetch")
        else:
            fetch = FetchStep("fetch", max_retries=self.max_retries)
        parse = ParseStep("parse")
        filter_ = FilterStep("filter")
        fetch.set_next(parse).set_next(filter_)
        self.pipeline = fetch

    def load(self) -> List[VocabularyEntry]:
        """Run the pipeline and return the accepted entries.

        Raises:
            VocabularyLoadError: if any step fails
        """
        context = PipelineContext(source=self.source, language=self.language)
        if not self.pipeline.execute(context):
            raise context.error or VocabularyLoadError(f"Could not load {self.source}")
        logger.info(f"🎉 Loaded {len(context.entries)} entries from {self.source}")
        return context.entries
