"""Tests for FetchStep."""
import pytest
import requests
from unittest.mock import Mock, patch
from hirapractice.pipeline.base import PipelineContext
from hirapractice.pipeline.steps.fetch import FetchStep
from hirapractice.vocabulary import VocabularyLoadError


class TestFetchStep:
    """Test fetching the word list from files and URLs."""

    @pytest.fixture
    def fetch_step(self):
        step = FetchStep("test_fetch", max_retries=3, timeout=5)
        step._wait_before_retry = Mock()
        return step

    def test_reads_local_file(self, fetch_step, tmp_path, sample_tsv):
        path = tmp_path / "dict.tsv"
        path.write_text(sample_tsv, encoding="utf-8")
        context = PipelineContext(source=str(path))

        with patch('hirapractice.pipeline.steps.fetch.requests.get') as mock_get:
            assert fetch_step.execute(context) is True
            mock_get.assert_not_called()

        assert context.raw_text == sample_tsv

    def test_downloads_url(self, fetch_step, mock_response, sample_tsv):
        context = PipelineContext(source="https://example.com/dict.tsv")

        with patch('hirapractice.pipeline.steps.fetch.requests.get') as mock_get:
            mock_get.return_value = mock_response(sample_tsv)
            assert fetch_step.execute(context) is True
            mock_get.assert_called_once_with("https://example.com/dict.tsv", timeout=5)

        assert context.raw_text == sample_tsv
        assert context.error is None

    def test_runs_next_step(self, fetch_step, mock_response):
        next_step = Mock()
        next_step.execute.return_value = True
        fetch_step.set_next(next_step)
        context = PipelineContext(source="https://example.com/dict.tsv")

        with patch('hirapractice.pipeline.steps.fetch.requests.get', return_value=mock_response("id\tjp\ten")):
            assert fetch_step.execute(context) is True

        next_step.execute.assert_called_once_with(context)

    def test_retries_network_errors(self, fetch_step, mock_response):
        context = PipelineContext(source="https://example.com/dict.tsv")

        with patch('hirapractice.pipeline.steps.fetch.requests.get') as mock_get:
            mock_get.side_effect = [
                requests.ConnectionError("boom"),
                mock_response("id\tjp\ten"),
            ]
            assert fetch_step.execute(context) is True
            assert mock_get.call_count == 2

        fetch_step._wait_before_retry.assert_called_once_with(1)

    def test_gives_up_after_max_retries(self, fetch_step):
        context = PipelineContext(source="https://example.com/dict.tsv")

        with patch('hirapractice.pipeline.steps.fetch.requests.get') as mock_get:
            mock_get.side_effect = requests.Timeout("slow")
            assert fetch_step.execute(context) is False
            assert mock_get.call_count == 3

        assert isinstance(context.error, VocabularyLoadError)
        assert "slow" in str(context.error)
        assert fetch_step._wait_before_retry.call_count == 2

    def test_http_error_not_retried(self, fetch_step, mock_response):
        context = PipelineContext(source="https://example.com/missing.tsv")

        with patch('hirapractice.pipeline.steps.fetch.requests.get') as mock_get:
            mock_get.return_value = mock_response(status_error=requests.HTTPError("404 Not Found"))
            assert fetch_step.execute(context) is False
            assert mock_get.call_count == 1

        assert "404" in str(context.error)
        fetch_step._wait_before_retry.assert_not_called()

    def test_wait_before_retry_sleeps(self):
        step = FetchStep("test_fetch")
        with patch('hirapractice.pipeline.steps.fetch.time.sleep') as mock_sleep:
            step._wait_before_retry(1)
            mock_sleep.assert_called_once()
            assert 2.5 <= mock_sleep.call_args[0][0] <= 3.5

    def test_local_file_byte_order_mark_dropped(self, fetch_step, tmp_path):
        path = tmp_path / "dict.tsv"
        path.write_bytes("id\tjp\ten\n".encode("utf-8-sig"))
        context = PipelineContext(source=str(path))

        assert fetch_step.execute(context) is True
        assert context.raw_text == "id\tjp\ten\n"

    def test_decodes_body_as_utf8_sig(self, fetch_step, mock_response):
        response = mock_response("id\tjp\ten")
        context = PipelineContext(source="https://example.com/dict.tsv")

        with patch('hirapractice.pipeline.steps.fetch.requests.get', return_value=response):
            assert fetch_step.execute(context) is True

        assert response.encoding == "utf-8-sig"

    @pytest.mark.parametrize("error", [
        requests.exceptions.MissingSchema("No scheme supplied"),
        requests.exceptions.InvalidSchema("No connection adapters"),
        requests.exceptions.InvalidURL("Invalid URL"),
    ])
    def test_unusable_source_not_retried(self, fetch_step, error):
        context = PipelineContext(source="dcit.tsv")

        with patch('hirapractice.pipeline.steps.fetch.requests.get', side_effect=error) as mock_get:
            assert fetch_step.execute(context) is False
            assert mock_get.call_count == 1

        fetch_step._wait_before_retry.assert_not_called()
        assert str(context.error) == "No such file or URL: dcit.tsv"
