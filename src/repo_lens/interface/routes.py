"""HTTP routes — the analysis endpoint and the host page."""

from __future__ import annotations

from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates
from markupsafe import Markup

from repo_lens.interface.dependencies import get_use_case
from repo_lens.interface.responses import success_response
from repo_lens.interface.schemas import AnalyzeRequest, AnalyzeResponse, ErrorResponse
from repo_lens.renderer.view import ResultView
from repo_lens.services.analyze_repo import AnalyzeRepoUseCase

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))

router = APIRouter()


@router.post(
    "/api/analyze",
    response_model=AnalyzeResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Repository URL missing"},
        500: {"model": ErrorResponse, "description": "Analyzer failed"},
    },
)
async def analyze(
    request: Request,
    body: AnalyzeRequest,
    use_case: AnalyzeRepoUseCase = Depends(get_use_case),
) -> Response:
    """Analyse a repository and return its language breakdown."""
    result = await use_case.execute(body.repo_url)
    return success_response(request, result)


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index(request: Request) -> HTMLResponse:
    """Serve the host page with every region in its idle state."""
    regions = Markup(ResultView().render_html())
    return templates.TemplateResponse(request, "index.html", {"regions": regions})
