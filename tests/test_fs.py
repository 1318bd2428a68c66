"""
Tests for Ruby source discovery.
"""

from __future__ import annotations

import pytest

from rbscope.errors import SourceNotFoundError
from rbscope.fs import build_gitignore_spec, collect_sources, iter_ruby_files


def test_iter_ruby_files_honours_gitignore(rbproj):
    files = list(iter_ruby_files(rbproj, spec_git=build_gitignore_spec(rbproj)))
    rel = [p.relative_to(rbproj.resolve()).as_posix() for p in files]
    assert rel == ["spec/foo_spec.rb", "spec/support/helpers.rb"]


def test_iter_ruby_files_without_gitignore(rbproj):
    (rbproj / ".gitignore").unlink()
    assert build_gitignore_spec(rbproj) is None
    files = list(iter_ruby_files(rbproj, spec_git=None))
    assert len(files) == 3


def test_collect_sources_mixes_files_and_dirs(rbproj):
    single = rbproj / "vendor" / "gem_spec.rb"
    files = collect_sources([single, rbproj / "spec"])
    assert files[0] == single
    assert [p.name for p in files[1:]] == ["foo_spec.rb", "helpers.rb"]


def test_collect_sources_missing_path(tmp_path):
    with pytest.raises(SourceNotFoundError):
        collect_sources([tmp_path / "nope.rb"])
