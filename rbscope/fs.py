from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

import pathspec

from .errors import SourceNotFoundError

logger = logging.getLogger(__name__)

RUBY_EXTENSIONS = frozenset({".rb"})


def build_gitignore_spec(root: Path) -> Optional[pathspec.PathSpec]:
    """Ignore rules from `root/.gitignore`, or None when the project has none."""
    gitignore = root / ".gitignore"
    if not gitignore.is_file():
        return None
    with gitignore.open(encoding="utf-8", errors="ignore") as fh:
        return pathspec.GitIgnoreSpec.from_lines(fh)


def iter_ruby_files(root: Path, *, spec_git: Optional[pathspec.PathSpec]) -> Iterable[Path]:
    """
    Recursive `.rb` iterator with .gitignore support, in sorted order.
    """
    root = root.resolve()
    for dirpath, dirnames, filenames in os.walk(root):
        # Do not enter .git
        if ".git" in dirnames:
            dirnames.remove(".git")

        keep: List[str] = []
        for d in sorted(dirnames):
            rel_dir = Path(dirpath, d).relative_to(root).as_posix()
            # .gitignore can hide a branch completely
            if spec_git and spec_git.match_file(rel_dir + "/"):
                continue
            keep.append(d)
        dirnames[:] = keep

        for fn in sorted(filenames):
            p = Path(dirpath, fn)
            if p.suffix.lower() not in RUBY_EXTENSIONS:
                continue
            rel_posix = p.relative_to(root).as_posix()
            if spec_git and spec_git.match_file(rel_posix):
                continue
            yield p


def collect_sources(paths: Sequence[Path]) -> List[Path]:
    """
    Expand command-line paths: files are taken as is, directories are walked.

    Raises:
        SourceNotFoundError: If a path does not exist
    """
    result: List[Path] = []
    for path in paths:
        if path.is_file():
            result.append(path)
        elif path.is_dir():
            found = list(iter_ruby_files(path, spec_git=build_gitignore_spec(path)))
            logger.debug("Found %d Ruby files under %s", len(found), path)
            result.extend(found)
        else:
            raise SourceNotFoundError(f"No such file or directory: {path}")
    return result


__all__ = ["build_gitignore_spec", "collect_sources", "iter_ruby_files"]
