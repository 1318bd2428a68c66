from __future__ import annotations

from .builder import build_file_report, build_report, report_document
from .model import FileReport, ScopeMatch, ScopeReport

__all__ = [
    "FileReport",
    "ScopeMatch",
    "ScopeReport",
    "build_file_report",
    "build_report",
    "report_document",
]
