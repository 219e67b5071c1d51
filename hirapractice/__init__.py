import os

from dotenv import load_dotenv

load_dotenv()

# Word list: tab-separated, header row naming the id / jp / en columns
DATA_URL = os.getenv(
    'HIRAPRACTICE_DATA_URL',
    "https://raw.githubusercontent.com/AcipenserSturio/hiragana-practice/refs/heads/main/dict.tsv",
)
VOCABULARY_COLUMNS = ("id", "jp", "en")

REQUEST_TIMEOUT = float(os.getenv('HIRAPRACTICE_REQUEST_TIMEOUT', '30'))
FETCH_RETRIES = int(os.getenv('HIRAPRACTICE_FETCH_RETRIES', '3'))

# Seconds to wait after a correct answer before showing the next word
ADVANCE_DELAY = float(os.getenv('HIRAPRACTICE_ADVANCE_DELAY', '0.8'))

from hirapractice.nlp.japanese import classify, extract_hiragana, transliterate  # noqa: E402

__all__ = [
    'classify',
    'extract_hiragana',
    'transliterate',
]
