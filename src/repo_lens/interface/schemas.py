"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt

from repo_lens.domain.entities import AnalysisResult, LanguageEntry


class AnalyzeRequest(BaseModel):
    """Request body for ``POST /api/analyze``.

    ``repoUrl`` is optional here so that a missing value reaches the use
    case and is reported as a 400, not as a schema violation.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    repo_url: str | None = Field(default=None, alias="repoUrl")


class LanguageEntrySchema(BaseModel):
    language: str
    bytes: NonNegativeInt
    lines: NonNegativeInt

    @classmethod
    def from_entity(cls, entry: LanguageEntry) -> LanguageEntrySchema:
        return cls(language=entry.language, bytes=entry.bytes, lines=entry.lines)

    def to_entity(self) -> LanguageEntry:
        return LanguageEntry(language=self.language, bytes=self.bytes, lines=self.lines)


class AnalysisResultSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_size: NonNegativeInt = Field(alias="totalSize")
    languages: list[LanguageEntrySchema] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, result: AnalysisResult) -> AnalysisResultSchema:
        return cls(
            total_size=result.total_size,
            languages=[LanguageEntrySchema.from_entity(e) for e in result.languages],
        )

    def to_entity(self) -> AnalysisResult:
        return AnalysisResult(
            total_size=self.total_size,
            languages=tuple(lang.to_entity() for lang in self.languages),
        )


class AnalyzeResponse(BaseModel):
    """Successful response from ``POST /api/analyze``."""

    success: Literal[True] = True
    data: AnalysisResultSchema


class ErrorResponse(BaseModel):
    """Error envelope returned on all failure paths."""

    error: str
