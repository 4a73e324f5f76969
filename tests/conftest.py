from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from repo_lens.domain.entities import AnalysisResult, LanguageEntry
from repo_lens.interface.app import create_app
from repo_lens.interface.dependencies import get_analyzer


class StubAnalyzer:
    """Records every URL it is asked about; returns a canned result or raises."""

    def __init__(
        self,
        result: object | None = None,
        error: BaseException | None = None,
    ) -> None:
        self.result = result
        self.error = error
        self.calls: list[str] = []

    async def analyze(self, repo_url: str) -> AnalysisResult:
        self.calls.append(repo_url)
        if self.error is not None:
            raise self.error
        return self.result  # type: ignore[return-value]


RUST_ONLY = AnalysisResult(
    total_size=2048,
    languages=(LanguageEntry(language="Rust", bytes=2048, lines=500),),
)

GO_AND_TYPESCRIPT = AnalysisResult(
    total_size=1000,
    languages=(
        LanguageEntry(language="Go", bytes=600, lines=100),
        LanguageEntry(language="TypeScript", bytes=400, lines=50),
    ),
)


@pytest.fixture
def stub_analyzer() -> StubAnalyzer:
    return StubAnalyzer(result=RUST_ONLY)


@pytest.fixture
def app(stub_analyzer: StubAnalyzer) -> FastAPI:
    app = create_app()
    app.dependency_overrides[get_analyzer] = lambda: stub_analyzer
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
