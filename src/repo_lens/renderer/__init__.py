"""Result renderer — turns an analysis envelope into the page's three regions."""

from repo_lens.renderer.formatting import format_bytes, format_lines, percentage
from repo_lens.renderer.view import ResultView, ViewState, visibility

__all__ = [
    "ResultView",
    "ViewState",
    "format_bytes",
    "format_lines",
    "percentage",
    "visibility",
]
