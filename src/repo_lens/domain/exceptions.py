"""Domain exception hierarchy.

Each exception maps to a specific HTTP status code at the interface layer.
Inner layers raise these; the outermost error-handler translates them.
"""

from __future__ import annotations

GENERIC_ANALYSIS_ERROR = "Något gick fel vid analysen"


class RepoLensError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class MissingRepositoryUrlError(RepoLensError):
    """The request did not carry a usable repository URL."""

    def __init__(self, message: str = "Repository URL krävs") -> None:
        super().__init__(message)


# ── Delegation ──────────────────────────────────────────────────────────────


class AnalysisFailedError(RepoLensError):
    """The analyzer failed; carries a message fit to show the user."""


# ── Analyzer adapters ───────────────────────────────────────────────────────


class AnalyzerError(RepoLensError):
    """Any error raised inside an analyzer adapter."""


class UnsupportedRepositoryError(AnalyzerError):
    """The adapter cannot handle this kind of repository URL."""


class RepositoryNotFoundError(AnalyzerError):
    """The repository does not exist or is not public (404)."""


class AnalyzerRateLimitError(AnalyzerError):
    """The upstream API refused the request because of rate limiting."""


class InvalidAnalysisResultError(AnalyzerError):
    """The analyzer returned something that is not an analysis result."""


class AnalyzerConfigurationError(RepoLensError):
    """The configured analyzer import path cannot be resolved."""
