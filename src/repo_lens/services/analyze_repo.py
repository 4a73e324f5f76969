"""Analyze-repository use case — the gateway's single operation.

Validates the inbound URL, delegates to the :class:`RepoAnalyzer` port, and
turns every analyzer failure into an :class:`AnalysisFailedError` carrying a
message that is safe to show the user.  The interface layer maps the
exceptions to HTTP statuses.
"""

from __future__ import annotations

import logging

from repo_lens.domain.entities import AnalysisResult
from repo_lens.domain.exceptions import (
    GENERIC_ANALYSIS_ERROR,
    AnalysisFailedError,
    MissingRepositoryUrlError,
)
from repo_lens.domain.ports.repo_analyzer import RepoAnalyzer

logger = logging.getLogger(__name__)


class AnalyzeRepoUseCase:
    """Runs one analysis request against the configured analyzer.

    Parameters
    ----------
    analyzer:
        Adapter implementing the :class:`RepoAnalyzer` port.
    """

    def __init__(self, analyzer: RepoAnalyzer) -> None:
        self._analyzer = analyzer

    async def execute(self, repo_url: str | None) -> AnalysisResult:
        """Analyse *repo_url* and return the analyzer's result unchanged."""
        url = (repo_url or "").strip()
        if not url:
            logger.debug("Rejected analysis request without a repository URL")
            raise MissingRepositoryUrlError()

        logger.info("Analysing repository: %s", url)

        try:
            result = await self._analyzer.analyze(url)
        except Exception as exc:
            logger.error("Analysis of %s failed", url, exc_info=True)
            raise AnalysisFailedError(_user_message(exc)) from exc

        if not isinstance(result, AnalysisResult):
            logger.error(
                "Analyzer returned %s instead of an analysis result for %s",
                type(result).__name__,
                url,
            )
            raise AnalysisFailedError("Analyzer returned an unexpected result.")

        logger.info(
            "Analysis of %s complete: %d language(s), %d bytes",
            url,
            len(result.languages),
            result.total_size,
        )
        return result


def _user_message(exc: BaseException) -> str:
    """Return the exception's own message, or the generic fallback."""
    message = str(exc).strip()
    return message or GENERIC_ANALYSIS_ERROR
