"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class LanguageEntry:
    """Size statistics for one language, as reported by the analyzer."""

    language: str
    bytes: int
    lines: int


@dataclass(frozen=True, slots=True)
class AnalysisResult:
    """Per-language breakdown of a repository.

    ``total_size`` is whatever the analyzer declared; by convention it is the
    sum of all ``LanguageEntry.bytes`` but it is never recomputed here.
    ``languages`` keeps the analyzer's order.
    """

    total_size: int
    languages: tuple[LanguageEntry, ...] = field(default_factory=tuple)
