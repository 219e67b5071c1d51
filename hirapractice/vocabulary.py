from typing import Dict, List, Sequence

from hirapractice import VOCABULARY_COLUMNS
from hirapractice.logger import logger

BOM = "\ufeff"


class VocabularyLoadError(Exception):
    """Raised when the word list cannot be fetched or understood."""


class MissingColumnError(VocabularyLoadError):
    """Raised when the header row lacks one of the required columns."""
    def __init__(self, missing: Sequence[str], header: Sequence[str]):
        super().__init__(
            f"Missing column(s) {', '.join(missing)} in header: {', '.join(header)}"
        )
        self.missing = list(missing)
        self.header = list(header)


def locate_columns(header: Sequence[str], required: Sequence[str] = VOCABULARY_COLUMNS) -> Dict[str, int]:
    """Map each required column name to its index in *header*."""
    header = [name.strip() for name in header]
    missing = [name for name in required if name not in header]
    if missing:
        raise MissingColumnError(missing, header)
    return {name: header.index(name) for name in required}


def parse_vocabulary_tsv(text: str, required: Sequence[str] = VOCABULARY_COLUMNS) -> List[Dict[str, str]]:
    """Parse a tab-separated word list into row dictionaries.

    The first line is the header; columns are found by name so their order
    does not matter and extra columns are ignored.  Rows too short to hold
    every required column are skipped.  Fields are split on TAB only, with no
    quoting and no field size limit.

    Raises:
        VocabularyLoadError: if the text is empty
        MissingColumnError: if a required column is absent from the header
    """
    text = text.lstrip(BOM).strip()
    if not text:
        raise VocabularyLoadError("Word list is empty")

    lines = [line.rstrip("\r") for line in text.split("\n")]
    columns = locate_columns(lines[0].split("\t"), required)
    width = max(columns.values()) + 1

    rows: List[Dict[str, str]] = []
    for line_no, line in enumerate(lines[1:], start=2):
        if not line:
            continue
        fields = line.split("\t")
        if len(fields) < width:
            logger.warning(f"⚠️ Skipping short row at line {line_no}: {fields}")
            continue
        rows.append({name: fields[idx] for name, idx in columns.items()})

    logger.debug(f"Parsed {len(rows)} rows with columns {columns}")
    return rows
