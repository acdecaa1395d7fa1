"""
Run Summary Model
=================
Aggregated outcome of one walk over a directory tree.

The walker appends to ``results``, ``directory_errors`` and ``stat_errors``
from the event-loop thread only. The counters are derived, never stored.
"""
from typing import List

from pydantic import BaseModel, Field, computed_field

from .annotation_result import AnnotationResult


class PathError(BaseModel):
    """A filesystem error tied to one path (listing or stat failure)."""
    path: str
    error: str


class RunSummary(BaseModel):
    root: str
    policy: str = ""
    results: List[AnnotationResult] = Field(default_factory=list)
    directory_errors: List[PathError] = Field(default_factory=list)
    stat_errors: List[PathError] = Field(default_factory=list)

    @computed_field
    @property
    def files_processed(self) -> int:
        return len(self.results)

    @computed_field
    @property
    def files_written(self) -> int:
        return sum(1 for r in self.results if r.written)

    @computed_field
    @property
    def files_failed(self) -> int:
        return sum(1 for r in self.results if not r.success)

    @computed_field
    @property
    def files_unchanged(self) -> int:
        return sum(1 for r in self.results if r.success and not r.written)
