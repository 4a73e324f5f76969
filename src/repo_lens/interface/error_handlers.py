"""Global exception handlers — translate domain errors to HTTP responses.

Input errors become a 400, analyzer failures a 500; both use the
``{"error": "..."}`` envelope (or its rendered HTML counterpart).
"""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import Response

from repo_lens.domain.exceptions import (
    GENERIC_ANALYSIS_ERROR,
    AnalysisFailedError,
    MissingRepositoryUrlError,
    RepoLensError,
)
from repo_lens.interface.responses import error_response

logger = logging.getLogger(__name__)

_EXCEPTION_STATUS: list[tuple[type[RepoLensError], int]] = [
    (MissingRepositoryUrlError, 400),
    (AnalysisFailedError, 500),
]


def register_error_handlers(app: FastAPI) -> None:
    """Attach exception handlers to the FastAPI application."""

    # ── Domain exceptions ───────────────────────────────────────────────

    for exc_type, code in _EXCEPTION_STATUS:

        def _make_handler(status_code: int):  # type: ignore[no-untyped-def]
            async def handler(request: Request, exc: Exception) -> Response:
                return error_response(request, status_code, str(exc))

            return handler

        app.add_exception_handler(exc_type, _make_handler(code))

    # ── Malformed bodies count as a missing URL ─────────────────────────

    @app.exception_handler(RequestValidationError)
    async def validation_handler(
        request: Request, exc: RequestValidationError
    ) -> Response:
        logger.debug("Rejected malformed analysis request: %s", exc.errors())
        return error_response(request, 400, str(MissingRepositoryUrlError()))

    # ── Catch-all for unexpected errors ─────────────────────────────────

    @app.exception_handler(Exception)
    async def generic_handler(request: Request, exc: Exception) -> Response:
        logger.exception("Unhandled exception")
        return error_response(request, 500, GENERIC_ANALYSIS_ERROR)
