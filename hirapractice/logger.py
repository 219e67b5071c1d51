import logging
import os
import sys

def _level_from_env(default: int = logging.INFO) -> int:
    level = logging.getLevelName(os.getenv("HIRAPRACTICE_LOG_LEVEL", "").strip().upper())
    return level if isinstance(level, int) else default


logger = logging.getLogger("hirapractice")
logger.setLevel(_level_from_env())


class _BelowWarningFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        return record.levelno < logging.WARNING


stdout_handler = logging.StreamHandler(sys.stdout)
stderr_handler = logging.StreamHandler(sys.stderr)

stdout_handler.setLevel(logging.DEBUG)
stdout_handler.addFilter(_BelowWarningFilter())  # DEBUG / INFO only
stderr_handler.setLevel(logging.WARNING)  # WARNING and above

formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")
stdout_handler.setFormatter(formatter)
stderr_handler.setFormatter(formatter)

if not logger.handlers:
    logger.addHandler(stdout_handler)
    logger.addHandler(stderr_handler)
