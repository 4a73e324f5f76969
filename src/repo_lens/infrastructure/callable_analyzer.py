"""Adapter for analyzers supplied as a plain Python callable.

The callable is named by an import path such as
``my_metrics.codemetric:analyze_repository``.  Coroutine functions are
awaited; ordinary functions run in a worker thread so a slow clone does not
block the event loop.
"""

from __future__ import annotations

import asyncio
import importlib
import inspect
import logging
from typing import Any, Callable

from repo_lens.domain.entities import AnalysisResult
from repo_lens.domain.exceptions import AnalyzerConfigurationError
from repo_lens.infrastructure.result_parser import parse_analysis_result

logger = logging.getLogger(__name__)


def import_callable(path: str) -> Callable[..., Any]:
    """Resolve ``module:attribute`` (dots allowed in both halves)."""
    module_name, sep, attr_path = path.strip().partition(":")
    if not sep or not module_name or not attr_path:
        raise AnalyzerConfigurationError(
            f"Analyzer must be given as 'module:attribute', got {path!r}."
        )

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise AnalyzerConfigurationError(
            f"Cannot import analyzer module {module_name!r}: {exc}"
        ) from exc

    for part in attr_path.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            raise AnalyzerConfigurationError(
                f"Module {module_name!r} has no attribute {attr_path!r}."
            ) from exc

    if not callable(target):
        raise AnalyzerConfigurationError(f"Analyzer {path!r} is not callable.")
    return target


class CallableAnalyzer:
    """Concrete ``RepoAnalyzer`` wrapping an arbitrary analysis function."""

    def __init__(self, func: Callable[[str], Any]) -> None:
        self._func = func

    @classmethod
    def from_import_path(cls, path: str) -> CallableAnalyzer:
        func = import_callable(path)
        logger.info("Using analyzer %s", path)
        return cls(func)

    async def analyze(self, repo_url: str) -> AnalysisResult:
        if inspect.iscoroutinefunction(self._func):
            raw = await self._func(repo_url)
        else:
            raw = await asyncio.to_thread(self._func, repo_url)
            if inspect.isawaitable(raw):
                raw = await raw
        return parse_analysis_result(raw)
