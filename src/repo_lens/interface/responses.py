"""Envelope responses, negotiated between JSON and a rendered HTML fragment.

JSON is the default.  The host page asks for ``text/html`` and gets the
three regions already rendered by :class:`ResultView` for the final state,
with the same status code the JSON envelope would carry.
"""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import HTMLResponse, JSONResponse, Response

from repo_lens.domain.entities import AnalysisResult
from repo_lens.interface.schemas import AnalysisResultSchema, AnalyzeResponse, ErrorResponse
from repo_lens.renderer.view import ResultView


def wants_html(request: Request) -> bool:
    """True when the client ranks ``text/html`` above ``application/json``."""
    best_html = best_json = -1.0
    for part in request.headers.get("accept", "").split(","):
        media_type, _, params = part.strip().partition(";")
        quality = 1.0
        for param in params.split(";"):
            key, _, value = param.strip().partition("=")
            if key == "q":
                try:
                    quality = float(value)
                except ValueError:
                    quality = 0.0
        media_type = media_type.strip().lower()
        if media_type == "text/html":
            best_html = max(best_html, quality)
        elif media_type in ("application/json", "*/*"):
            best_json = max(best_json, quality)
    return best_html > 0 and best_html >= best_json


def success_response(request: Request, result: AnalysisResult) -> Response:
    if wants_html(request):
        view = ResultView()
        view.begin()
        view.show_result(result)
        view.settle()
        return HTMLResponse(view.render_html(), status_code=200)

    envelope = AnalyzeResponse(data=AnalysisResultSchema.from_entity(result))
    return JSONResponse(status_code=200, content=envelope.model_dump(by_alias=True))


def error_response(request: Request, status_code: int, message: str) -> Response:
    if wants_html(request):
        view = ResultView()
        view.begin()
        view.show_error(message)
        view.settle()
        return HTMLResponse(view.render_html(), status_code=status_code)

    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=message).model_dump(),
    )
