"""GitHub Languages API adapter — implements the RepoAnalyzer port."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timezone

import httpx

from repo_lens.domain.entities import AnalysisResult, LanguageEntry
from repo_lens.domain.exceptions import (
    AnalyzerError,
    AnalyzerRateLimitError,
    RepositoryNotFoundError,
    UnsupportedRepositoryError,
)

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"

_GITHUB_URL_RE = re.compile(
    r"^(?:https?://)?(?:www\.)?github\.com/(?P<owner>[A-Za-z0-9\-_.]+)/(?P<repo>[A-Za-z0-9\-_.]+?)(?:\.git)?(?:/.*)?$"
)


def parse_github_url(url: str) -> tuple[str, str]:
    """Extract ``(owner, repo)`` from a GitHub repository URL."""
    match = _GITHUB_URL_RE.match(url.strip())
    if not match:
        raise UnsupportedRepositoryError(
            f"Unsupported repository URL: '{url}'. "
            "Expected format: https://github.com/<owner>/<repo>"
        )
    return match["owner"], match["repo"]


class GitHubLanguagesAnalyzer:
    """Concrete ``RepoAnalyzer`` backed by ``GET /repos/{owner}/{repo}/languages``.

    GitHub reports bytes per language, largest first, but no line counts;
    every entry therefore carries ``lines=0``.
    """

    def __init__(self, client: httpx.AsyncClient, token: str | None = None) -> None:
        self._client = client
        self._headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "repo-lens/1.0",
        }
        if token:
            self._headers["Authorization"] = f"Bearer {token}"

    async def analyze(self, repo_url: str) -> AnalysisResult:
        owner, repo = parse_github_url(repo_url)
        resp = await self._api_get(f"/repos/{owner}/{repo}/languages")
        languages = _parse_languages(resp)
        logger.debug("GitHub reported %d language(s) for %s/%s", len(languages), owner, repo)
        return AnalysisResult(
            total_size=sum(entry.bytes for entry in languages),
            languages=languages,
        )

    async def _api_get(self, endpoint: str) -> httpx.Response:
        """Perform a GitHub API GET request with error translation."""
        url = f"{_GITHUB_API}{endpoint}"
        try:
            resp = await self._client.get(url, headers=self._headers)
        except httpx.HTTPError as exc:
            raise AnalyzerError(f"Network error fetching {url}: {exc}") from exc

        if resp.status_code == 200:
            return resp

        if resp.status_code == 404:
            raise RepositoryNotFoundError(
                "Repository not found. Make sure the URL points to a public repository."
            )

        if resp.status_code == 403:
            if resp.headers.get("x-ratelimit-remaining", "") == "0":
                raise AnalyzerRateLimitError(
                    "GitHub API rate limit exceeded. "
                    f"Resets at {_format_reset(resp.headers.get('x-ratelimit-reset', ''))}. "
                    "Set the GITHUB_TOKEN environment variable to increase the limit."
                )
            raise AnalyzerError("Access denied. The repository may be private.")

        if resp.status_code == 429:
            raise AnalyzerRateLimitError("GitHub API rate limit exceeded (HTTP 429).")

        raise AnalyzerError(f"GitHub API returned HTTP {resp.status_code} for {url}")


def _parse_languages(resp: httpx.Response) -> tuple[LanguageEntry, ...]:
    """Turn a ``{language: bytes}`` payload into entries, keeping API order."""
    try:
        data = resp.json()
    except ValueError as exc:
        raise AnalyzerError("GitHub returned an unexpected languages payload.") from exc

    if not isinstance(data, dict) or not all(
        isinstance(name, str) and _is_byte_count(size) for name, size in data.items()
    ):
        raise AnalyzerError("GitHub returned an unexpected languages payload.")

    return tuple(LanguageEntry(language=name, bytes=size, lines=0) for name, size in data.items())


def _is_byte_count(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


def _format_reset(raw: str) -> str:
    try:
        return datetime.fromtimestamp(int(raw), tz=timezone.utc).strftime(
            "%Y-%m-%d %H:%M:%S UTC"
        )
    except (ValueError, OSError):
        return raw or "unknown"
