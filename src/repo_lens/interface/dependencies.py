"""FastAPI dependency injection wiring."""

from __future__ import annotations

import logging

import httpx
from fastapi import Depends

from repo_lens.domain.ports.repo_analyzer import RepoAnalyzer
from repo_lens.infrastructure.callable_analyzer import CallableAnalyzer
from repo_lens.infrastructure.config import get_settings
from repo_lens.infrastructure.github_languages_adapter import GitHubLanguagesAnalyzer
from repo_lens.services.analyze_repo import AnalyzeRepoUseCase

logger = logging.getLogger(__name__)

_http_client: httpx.AsyncClient | None = None
_analyzer: RepoAnalyzer | None = None


async def startup() -> None:
    """Build the configured analyzer — called from the lifespan context manager."""
    global _http_client, _analyzer  # noqa: PLW0603

    settings = get_settings()
    if settings.analyzer:
        _analyzer = CallableAnalyzer.from_import_path(settings.analyzer)
        return

    _http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.request_timeout))
    token = settings.github_token.get_secret_value() if settings.github_token else None
    _analyzer = GitHubLanguagesAnalyzer(client=_http_client, token=token)
    logger.info("Using the GitHub Languages API analyzer")
    logger.warning(
        "GitHub does not report line counts; every language will show 0 lines. "
        "Set ANALYZER=module:function to use a full analyzer."
    )


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client, _analyzer  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None
    _analyzer = None


def get_analyzer() -> RepoAnalyzer:
    assert _analyzer is not None, "startup() was not called"
    return _analyzer


def get_use_case(analyzer: RepoAnalyzer = Depends(get_analyzer)) -> AnalyzeRepoUseCase:
    """Build a use case around the shared analyzer (one per request)."""
    return AnalyzeRepoUseCase(analyzer=analyzer)
