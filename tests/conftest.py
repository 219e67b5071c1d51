"""Test configuration and fixtures."""
import pytest
from unittest.mock import Mock
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from hirapractice.schema import VocabularyEntry


@pytest.fixture
def sample_tsv():
    """Word list with columns out of order, one kanji entry and one rejected row."""
    return (
        "en\tid\tjp\n"
        "ticket\t1\tきっぷ\n"
        "kanji\t2\t漢字【かんじ】\n"
        "coffee\t3\tコーヒー\n"
        "tea\t4\tおちゃ\n"
    )


@pytest.fixture
def sample_entries():
    """Decorated vocabulary entries."""
    return [
        VocabularyEntry(id="1", jp="きっぷ", en="ticket").decorate("きっぷ", "kippu"),
        VocabularyEntry(id="2", jp="漢字【かんじ】", en="kanji").decorate("かんじ", "kanji"),
    ]


@pytest.fixture
def mock_response():
    """Mock requests response."""
    def _make(text="", status_error=None):
        response = Mock()
        response.text = text
        if status_error is not None:
            response.raise_for_status.side_effect = status_error
        return response
    return _make
