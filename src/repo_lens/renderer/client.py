"""Async client that drives a :class:`ResultView` through submission cycles.

:class:`AnalysisClient` speaks the JSON envelope contract of
``POST /api/analyze``; :class:`SubmissionController` owns the view and the
in-flight request.  Overlapping submissions are cancel-and-replace: a new
submission cancels the pending one, and a superseded cycle never touches
the view.
"""

from __future__ import annotations

import asyncio
import logging

import httpx
from pydantic import ValidationError

from repo_lens.domain.entities import AnalysisResult
from repo_lens.interface.schemas import AnalyzeResponse, ErrorResponse
from repo_lens.renderer.view import GENERIC_CLIENT_ERROR, ResultView, ViewState

logger = logging.getLogger(__name__)


class SubmissionError(Exception):
    """The request failed: transport error, malformed body, or error envelope."""


class AnalysisClient:
    """Thin wrapper around an ``httpx.AsyncClient`` pointed at the gateway."""

    def __init__(self, client: httpx.AsyncClient, endpoint: str = "/api/analyze") -> None:
        self._client = client
        self._endpoint = endpoint

    async def analyze(self, repo_url: str) -> AnalysisResult:
        try:
            resp = await self._client.post(
                self._endpoint,
                json={"repoUrl": repo_url},
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as exc:
            raise SubmissionError(str(exc) or GENERIC_CLIENT_ERROR) from exc

        try:
            payload = resp.json()
        except ValueError as exc:
            raise SubmissionError(f"Malformed response from server (HTTP {resp.status_code}).") from exc

        if not resp.is_success:
            try:
                message = ErrorResponse.model_validate(payload).error
            except ValidationError:
                message = ""
            raise SubmissionError(message or GENERIC_CLIENT_ERROR)

        try:
            envelope = AnalyzeResponse.model_validate(payload)
        except ValidationError as exc:
            raise SubmissionError("Malformed analysis result from server.") from exc
        return envelope.data.to_entity()


class SubmissionController:
    def __init__(self, view: ResultView, client: AnalysisClient) -> None:
        self.view = view
        self._client = client
        self._generation = 0
        self._inflight: asyncio.Future[AnalysisResult] | None = None

    async def submit(self, repo_url: str) -> ViewState:
        """Run one cycle for *repo_url* and return the state it left the view in."""
        if self._inflight is not None and not self._inflight.done():
            logger.info("Cancelling in-flight analysis in favour of %s", repo_url)
            self._inflight.cancel()

        self._generation += 1
        generation = self._generation
        self.view.begin()

        request = asyncio.ensure_future(self._client.analyze(repo_url))
        self._inflight = request
        try:
            result = await request
        except asyncio.CancelledError:
            if generation != self._generation:
                logger.debug("Submission for %s superseded", repo_url)
                return self.view.state
            raise
        except SubmissionError as exc:
            if generation == self._generation:
                self.view.show_error(str(exc))
        else:
            if generation == self._generation:
                self.view.show_result(result)
        finally:
            if generation == self._generation:
                self._inflight = None
                self.view.settle()
        return self.view.state
