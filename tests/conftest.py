"""
Shared fixtures for rbscope tests.
"""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Callable

import pytest

from rbscope.ruby import RubyDocument

from file_utils import write


@pytest.fixture
def ruby() -> Callable[[str], RubyDocument]:
    """Parse dedented Ruby source into a RubyDocument."""
    def _parse(source: str) -> RubyDocument:
        return RubyDocument(textwrap.dedent(source))
    return _parse


@pytest.fixture
def target(ruby):
    """First bare reference to `target` in the given source."""
    def _find(source: str, name: str = "target"):
        doc = ruby(source)
        refs = doc.find_references(name)
        assert refs, f"{name} not found in source"
        return refs[0]
    return _find


@pytest.fixture
def rbproj(tmp_path: Path) -> Path:
    """Small project: two spec files, an ignored vendor dir and a non-Ruby file."""
    root = tmp_path
    write(root / "spec" / "foo_spec.rb", textwrap.dedent("""
        describe 'foo' do
          it 'works' do
            target
          end
        end
    """).lstrip())
    write(root / "spec" / "support" / "helpers.rb", textwrap.dedent("""
        module Helpers
          def helper
            target
          end
        end
    """).lstrip())
    write(root / "vendor" / "gem_spec.rb", "describe('x') { target }\n")
    write(root / "README.md", "target\n")
    write(root / ".gitignore", "vendor/\n")
    return root
