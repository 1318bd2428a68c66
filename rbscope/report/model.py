"""
Report models for `rbscope scopes`.
"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from ..scope.kinds import ScopeKind


class ScopeMatch(BaseModel):
    """One reference to the target name and its enclosing scopes."""
    line: int = Field(description="1-based line of the reference")
    column: int = Field(description="0-based column of the reference")
    text: str
    scopes: List[ScopeKind] = Field(default_factory=list)
    in_generated_instance: bool = False


class FileReport(BaseModel):
    path: str
    has_syntax_errors: bool = False
    matches: List[ScopeMatch] = Field(default_factory=list)


class ScopeReport(BaseModel):
    target: str
    files: List[FileReport] = Field(default_factory=list)

    @property
    def total_matches(self) -> int:
        return sum(len(f.matches) for f in self.files)


__all__ = ["FileReport", "ScopeMatch", "ScopeReport"]
