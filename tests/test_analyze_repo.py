"""Tests for the gateway use case."""

from __future__ import annotations

import asyncio
import logging

import pytest
from conftest import RUST_ONLY, StubAnalyzer

from repo_lens.domain.exceptions import (
    GENERIC_ANALYSIS_ERROR,
    AnalysisFailedError,
    MissingRepositoryUrlError,
)
from repo_lens.services.analyze_repo import AnalyzeRepoUseCase


@pytest.mark.parametrize("repo_url", [None, "", "   "])
def test_missing_url_never_reaches_analyzer(repo_url: str | None) -> None:
    analyzer = StubAnalyzer(result=RUST_ONLY)
    use_case = AnalyzeRepoUseCase(analyzer)

    with pytest.raises(MissingRepositoryUrlError, match="Repository URL krävs"):
        asyncio.run(use_case.execute(repo_url))
    assert analyzer.calls == []


def test_result_is_passed_through() -> None:
    analyzer = StubAnalyzer(result=RUST_ONLY)
    result = asyncio.run(AnalyzeRepoUseCase(analyzer).execute(" https://example.com/repo "))

    assert result is RUST_ONLY
    assert analyzer.calls == ["https://example.com/repo"]


def test_analyzer_message_is_kept() -> None:
    analyzer = StubAnalyzer(error=RuntimeError("rate limited"))

    with pytest.raises(AnalysisFailedError) as excinfo:
        asyncio.run(AnalyzeRepoUseCase(analyzer).execute("https://example.com/repo"))
    assert str(excinfo.value) == "rate limited"
    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_analyzer_without_message_gets_fallback() -> None:
    analyzer = StubAnalyzer(error=RuntimeError())

    with pytest.raises(AnalysisFailedError) as excinfo:
        asyncio.run(AnalyzeRepoUseCase(analyzer).execute("https://example.com/repo"))
    assert str(excinfo.value) == GENERIC_ANALYSIS_ERROR


def test_unexpected_result_type_is_a_failure() -> None:
    analyzer = StubAnalyzer(result={"totalSize": 1})

    with pytest.raises(AnalysisFailedError):
        asyncio.run(AnalyzeRepoUseCase(analyzer).execute("https://example.com/repo"))


def test_logs_receipt_and_completion(caplog: pytest.LogCaptureFixture) -> None:
    analyzer = StubAnalyzer(result=RUST_ONLY)
    with caplog.at_level(logging.INFO, logger="repo_lens.services.analyze_repo"):
        asyncio.run(AnalyzeRepoUseCase(analyzer).execute("https://example.com/repo"))

    messages = [record.getMessage() for record in caplog.records]
    assert "Analysing repository: https://example.com/repo" in messages
    assert any("complete" in message for message in messages)


def test_input_error_is_not_logged_as_failure(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.INFO, logger="repo_lens.services.analyze_repo"):
        with pytest.raises(MissingRepositoryUrlError):
            asyncio.run(AnalyzeRepoUseCase(StubAnalyzer()).execute(""))
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
