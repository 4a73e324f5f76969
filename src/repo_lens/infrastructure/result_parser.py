"""Coerce raw analyzer output into domain entities.

Analyzers written against the original JavaScript contract hand back plain
mappings (``totalSize``, ``languages[].language/bytes/lines``).  This module
validates that shape with pydantic and converts it to :class:`AnalysisResult`.
"""

from __future__ import annotations

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, NonNegativeInt, ValidationError

from repo_lens.domain.entities import AnalysisResult, LanguageEntry
from repo_lens.domain.exceptions import InvalidAnalysisResultError


class _RawLanguage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    language: str
    bytes: NonNegativeInt
    lines: NonNegativeInt = 0


class _RawResult(BaseModel):
    model_config = ConfigDict(extra="ignore")

    total_size: NonNegativeInt = Field(
        validation_alias=AliasChoices("totalSize", "total_size"),
    )
    languages: list[_RawLanguage] = Field(default_factory=list)


def parse_analysis_result(raw: Any) -> AnalysisResult:
    """Return *raw* as an :class:`AnalysisResult`.

    Accepts an ``AnalysisResult`` (returned as-is), a mapping, or any object
    exposing the same attributes.  Raises :class:`InvalidAnalysisResultError`
    when the shape does not match.
    """
    if isinstance(raw, AnalysisResult):
        return raw

    try:
        if isinstance(raw, dict):
            parsed = _RawResult.model_validate(raw)
        else:
            parsed = _RawResult.model_validate(raw, from_attributes=True)
    except ValidationError as exc:
        raise InvalidAnalysisResultError(
            f"Analyzer returned a malformed result: {exc.error_count()} validation error(s)."
        ) from exc

    return AnalysisResult(
        total_size=parsed.total_size,
        languages=tuple(
            LanguageEntry(language=lang.language, bytes=lang.bytes, lines=lang.lines)
            for lang in parsed.languages
        ),
    )
