# tests/test_search_service.py

import pytest
from unittest.mock import MagicMock
from minigrep.application.search_service import LineSearchService
from minigrep.domain.errors import FileReadError
from minigrep.domain.models import Config


POEM = "Rust:\nsafe, fast, productive.\nPick three.\nTrust me."


def _make_mock_source(contents: str):
    source = MagicMock()
    source.read_text.return_value = contents
    return source


def test_run_reads_the_configured_file():
    source = _make_mock_source(POEM)
    service = LineSearchService(source)

    service.run(Config(query="duct", file_path="poem.txt"))

    source.read_text.assert_called_once_with("poem.txt")


def test_case_sensitive_run():
    service = LineSearchService(_make_mock_source(POEM))
    matches = service.run(Config(query="rUsT", file_path="poem.txt"))
    assert matches == []


def test_ignore_case_run():
    service = LineSearchService(_make_mock_source(POEM))
    config = Config(query="rUsT", file_path="poem.txt", ignore_case=True)

    matches = service.run(config)

    assert [m.text for m in matches] == ["Rust:", "Trust me."]
    assert [m.line_number for m in matches] == [1, 4]


def test_run_returns_matches_with_offsets():
    service = LineSearchService(_make_mock_source(POEM))
    matches = service.run(Config(query="duct", file_path="poem.txt"))

    assert [m.text for m in matches] == ["safe, fast, productive."]
    assert POEM[matches[0].start:matches[0].end] == "safe, fast, productive."


def test_read_failure_propagates():
    source = MagicMock()
    source.read_text.side_effect = FileReadError("missing.txt", "no such file")
    service = LineSearchService(source)

    with pytest.raises(FileReadError, match="missing.txt"):
        service.run(Config(query="q", file_path="missing.txt"))
