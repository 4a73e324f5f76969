"""Port: repository analyzer — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from repo_lens.domain.entities import AnalysisResult


class RepoAnalyzer(Protocol):
    """Abstract contract for the external repository analyzer.

    Takes a repository URL and returns its per-language breakdown, or raises
    with a descriptive message. Any implementation is substitutable.
    """

    async def analyze(self, repo_url: str) -> AnalysisResult:
        """Fetch the repository and compute its language statistics."""
        ...
