"""Tests for import-path analyzers and result coercion."""

from __future__ import annotations

import asyncio
import sys
import types

import pytest

from repo_lens.domain.entities import AnalysisResult, LanguageEntry
from repo_lens.domain.exceptions import AnalyzerConfigurationError, InvalidAnalysisResultError
from repo_lens.infrastructure.callable_analyzer import CallableAnalyzer, import_callable
from repo_lens.infrastructure.result_parser import parse_analysis_result

RAW = {
    "totalSize": 1000,
    "languages": [
        {"language": "Go", "bytes": 600, "lines": 100},
        {"language": "TypeScript", "bytes": 400, "lines": 50},
    ],
}


@pytest.fixture
def metrics_module(monkeypatch: pytest.MonkeyPatch) -> types.ModuleType:
    module = types.ModuleType("fake_metrics")

    def analyze_repository(repo_url: str) -> dict[str, object]:
        return RAW

    module.analyze_repository = analyze_repository  # type: ignore[attr-defined]
    module.not_callable = 3  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "fake_metrics", module)
    return module


def test_parse_mapping() -> None:
    result = parse_analysis_result(RAW)
    assert result == AnalysisResult(
        total_size=1000,
        languages=(
            LanguageEntry(language="Go", bytes=600, lines=100),
            LanguageEntry(language="TypeScript", bytes=400, lines=50),
        ),
    )


def test_parse_accepts_snake_case_and_missing_languages() -> None:
    assert parse_analysis_result({"total_size": 0}) == AnalysisResult(total_size=0)


@pytest.mark.parametrize(
    "raw",
    [
        None,
        {"languages": []},
        {"totalSize": -1},
        {"totalSize": 10, "languages": [{"language": "Go", "bytes": "lots"}]},
    ],
)
def test_parse_rejects_malformed(raw: object) -> None:
    with pytest.raises(InvalidAnalysisResultError):
        parse_analysis_result(raw)


def test_import_callable_resolves(metrics_module: types.ModuleType) -> None:
    assert import_callable("fake_metrics:analyze_repository") is metrics_module.analyze_repository


@pytest.mark.parametrize(
    "path",
    [
        "fake_metrics",
        "fake_metrics:missing",
        "fake_metrics:not_callable",
        "no_such_module_anywhere:analyze",
    ],
)
def test_import_callable_errors(metrics_module: types.ModuleType, path: str) -> None:
    with pytest.raises(AnalyzerConfigurationError):
        import_callable(path)


def test_sync_callable(metrics_module: types.ModuleType) -> None:
    analyzer = CallableAnalyzer.from_import_path("fake_metrics:analyze_repository")
    result = asyncio.run(analyzer.analyze("https://example.com/repo"))
    assert result.total_size == 1000
    assert [entry.language for entry in result.languages] == ["Go", "TypeScript"]


def test_async_callable() -> None:
    seen: list[str] = []

    async def analyze_repository(repo_url: str) -> dict[str, object]:
        seen.append(repo_url)
        return RAW

    result = asyncio.run(CallableAnalyzer(analyze_repository).analyze("https://example.com/repo"))
    assert seen == ["https://example.com/repo"]
    assert len(result.languages) == 2


def test_callable_errors_propagate() -> None:
    def analyze_repository(repo_url: str) -> dict[str, object]:
        raise ValueError("invalid repository")

    with pytest.raises(ValueError, match="invalid repository"):
        asyncio.run(CallableAnalyzer(analyze_repository).analyze("nope"))
