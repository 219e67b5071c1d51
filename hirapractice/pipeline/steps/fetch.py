import os
import time
import random
import requests
from requests.exceptions import InvalidSchema, InvalidURL, MissingSchema
from hirapractice import REQUEST_TIMEOUT, FETCH_RETRIES
from hirapractice.pipeline.base import PipelineStep, PipelineContext
from hirapractice.vocabulary import VocabularyLoadError
from hirapractice.logger import logger

class FetchStep(PipelineStep):
    def __init__(self, name: str, max_retries: int = FETCH_RETRIES, timeout: float = REQUEST_TIMEOUT):
        super().__init__(name)
        self.max_retries = max(1, max_retries)
        self.timeout = timeout

    def execute(self, context: PipelineContext) -> bool:
        """Read the word list from a local file or download it over HTTP."""
        if os.path.isfile(context.source):
            logger.info(f"📄 Reading word list from {context.source}")
            try:
                with open(context.source, 'r', encoding='utf-8-sig') as f:
                    context.raw_text = f.read()
            except (OSError, UnicodeDecodeError) as e:
                logger.error(f"❌ Could not read {context.source}: {e}")
                return context.fail(VocabularyLoadError(str(e)))
            return self.run_next(context)

        logger.info(f"🌐 Fetching word list from {context.source}")
        for attempt in range(1, self.max_retries + 1):
            try:
                context.raw_text = self._attempt_fetch(context.source)
                logger.info(f"✅ Fetched {len(context.raw_text)} characters")
                return self.run_next(context)

            except requests.HTTPError as e:
                # The server answered; asking again will not change the answer
                logger.error(f"❌ HTTP error fetching {context.source}: {e}")
                return context.fail(VocabularyLoadError(str(e)))

            except (MissingSchema, InvalidSchema, InvalidURL) as e:
                # Neither a readable file nor a fetchable URL, usually a mistyped path
                logger.error(f"❌ {e}")
                return context.fail(VocabularyLoadError(f"No such file or URL: {context.source}"))

            except requests.RequestException as e:
                logger.warning(f"❓ Fetch error (attempt {attempt}/{self.max_retries}): {e}")
                if attempt < self.max_retries:
                    self._wait_before_retry(attempt)
                    continue
                logger.error(f"❌ All fetch attempts failed for {context.source}")
                return context.fail(VocabularyLoadError(str(e)))

        return False

    def _attempt_fetch(self, url: str) -> str:
        response = requests.get(url, timeout=self.timeout)
        response.raise_for_status()
        response.encoding = 'utf-8-sig'
        return response.text

    def _wait_before_retry(self, attempt: int):
        """Wait before retry with exponential backoff plus jitter."""
        wait_time = (2 ** attempt) + random.uniform(0.5, 1.5)
        logger.info(f"⏳ Waiting {wait_time:.1f}s before retry...")
        time.sleep(wait_time)
