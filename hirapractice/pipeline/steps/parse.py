from hirapractice.pipeline.base import PipelineStep, PipelineContext
from hirapractice.vocabulary import VocabularyLoadError, parse_vocabulary_tsv
from hirapractice.logger import logger

class ParseStep(PipelineStep):
    def execute(self, context: PipelineContext) -> bool:
        if context.raw_text is None:
            return context.fail(VocabularyLoadError("Nothing was fetched"))
        try:
            context.rows = parse_vocabulary_tsv(context.raw_text)
        except VocabularyLoadError as e:
            logger.error(f"❌ Parse failed: {e}")
            return context.fail(e)
        logger.info(f"📋 Parsed {len(context.rows)} rows")
        return self.run_next(context)
