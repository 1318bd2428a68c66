"""
Per-file scope reports.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Sequence

from ..config.model import DslCfg
from ..fs import collect_sources
from ..ruby import RubyDocument
from ..scope import ScopeClassifier
from .model import FileReport, ScopeMatch, ScopeReport

logger = logging.getLogger(__name__)


def report_document(doc: RubyDocument, target: str, classifier: ScopeClassifier) -> FileReport:
    """Scope every bare reference to ``target`` in an already parsed document."""
    has_errors = doc.has_error()
    if has_errors:
        errors = doc.get_errors()
        line, column = doc.position(errors[0]) if errors else (0, 0)
        logger.warning(
            "%s:%d:%d: syntax errors, scopes may be incomplete", doc.path or "<source>", line, column
        )

    matches = []
    for node in doc.find_references(target):
        context = doc.context(node, classifier)
        line, column = doc.position(node)
        matches.append(ScopeMatch(
            line=line,
            column=column,
            text=doc.get_node_text(node),
            scopes=context.scopes,
            in_generated_instance=context.in_generated_instance,
        ))

    return FileReport(
        path=str(doc.path) if doc.path else "<source>",
        has_syntax_errors=has_errors,
        matches=matches,
    )


def build_file_report(path: Path, target: str, classifier: ScopeClassifier) -> FileReport:
    return report_document(RubyDocument.from_file(path), target, classifier)


def build_report(paths: Sequence[Path], target: str, cfg: Optional[DslCfg] = None) -> ScopeReport:
    """
    Build a report over files and directories.

    Raises:
        SourceNotFoundError: If a given path does not exist
    """
    classifier = ScopeClassifier((cfg or DslCfg()).to_table())
    report = ScopeReport(target=target)
    for path in collect_sources(paths):
        report.files.append(build_file_report(path, target, classifier))
    logger.debug("Scoped %d references to %r in %d files", report.total_matches, target, len(report.files))
    return report


__all__ = ["build_file_report", "build_report", "report_document"]
