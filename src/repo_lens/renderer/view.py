"""View model for the results page.

The page has three mutually exclusive regions (loading, results, error).
Instead of toggling independent ``hidden`` flags, the view holds one
:class:`ViewState` and :func:`visibility` derives every region's visibility
from it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache

from jinja2 import Environment, PackageLoader, select_autoescape

from repo_lens.domain.entities import AnalysisResult
from repo_lens.renderer.formatting import bar_width, format_bytes, format_lines, percentage

logger = logging.getLogger(__name__)

GENERIC_CLIENT_ERROR = "Något gick fel"


class ViewState(str, Enum):
    """Where the page is in a submission cycle."""

    IDLE = "idle"
    LOADING = "loading"
    RENDERED = "rendered"
    ERRORED = "errored"


class Region(str, Enum):
    LOADING = "loading"
    RESULTS = "results"
    ERROR = "error"


_VISIBLE_REGIONS: dict[ViewState, frozenset[Region]] = {
    ViewState.IDLE: frozenset(),
    ViewState.LOADING: frozenset({Region.LOADING}),
    ViewState.RENDERED: frozenset({Region.RESULTS}),
    ViewState.ERRORED: frozenset({Region.ERROR}),
}


def visibility(state: ViewState) -> dict[Region, bool]:
    """Map a view state to the visibility of every region."""
    shown = _VISIBLE_REGIONS[state]
    return {region: region in shown for region in Region}


@dataclass(frozen=True, slots=True)
class LanguageRow:
    """One rendered bar: everything the template needs, already formatted."""

    language: str
    percentage: str
    bar_width: str
    size: str
    lines: str


def build_rows(result: AnalysisResult) -> tuple[LanguageRow, ...]:
    """Format every language entry, in the order the analyzer returned them.

    Percentages are taken against the declared ``total_size``, never against
    a locally recomputed sum.
    """
    rows = []
    for entry in result.languages:
        share = percentage(entry.bytes, result.total_size)
        rows.append(
            LanguageRow(
                language=entry.language,
                percentage=share,
                bar_width=bar_width(share),
                size=format_bytes(entry.bytes),
                lines=format_lines(entry.lines),
            )
        )
    return tuple(rows)


def total_size_label(total_size: int) -> str:
    return f"Total storlek: {format_bytes(total_size)}"


@lru_cache(maxsize=1)
def _default_environment() -> Environment:
    return Environment(
        loader=PackageLoader("repo_lens.renderer", "templates"),
        autoescape=select_autoescape(default=True),
        trim_blocks=True,
        lstrip_blocks=True,
    )


class ResultView:
    """The page's regions, bound once and updated in place.

    A cycle runs ``begin()`` → ``show_result()`` or ``show_error()`` →
    ``settle()``.  ``settle()`` always leaves the loading state, whatever
    happened in between.
    """

    def __init__(self, environment: Environment | None = None) -> None:
        self._env = environment or _default_environment()
        self.state = ViewState.IDLE
        self.total_size: str | None = None
        self.rows: tuple[LanguageRow, ...] = ()
        self.error_message: str | None = None

    @property
    def visibility(self) -> dict[Region, bool]:
        return visibility(self.state)

    def begin(self) -> None:
        """Start a new submission: clear the previous outcome, show loading."""
        self.total_size = None
        self.rows = ()
        self.error_message = None
        self.state = ViewState.LOADING

    def show_result(self, result: AnalysisResult) -> None:
        self.total_size = total_size_label(result.total_size)
        self.rows = build_rows(result)
        self.error_message = None
        self.state = ViewState.RENDERED

    def show_error(self, message: str | None) -> None:
        self.total_size = None
        self.rows = ()
        self.error_message = (message or "").strip() or GENERIC_CLIENT_ERROR
        self.state = ViewState.ERRORED

    def settle(self) -> None:
        """Hide the loading region once the response is in (or abandoned)."""
        if self.state is ViewState.LOADING:
            logger.debug("Cycle settled without an outcome; returning to idle")
            self.state = ViewState.IDLE

    def render_html(self) -> str:
        """Render the three regions for the current state."""
        template = self._env.get_template("regions.html")
        return template.render(
            state=self.state.value,
            visible={region.value: shown for region, shown in self.visibility.items()},
            total_size=self.total_size,
            rows=self.rows,
            error_message=self.error_message,
        )
