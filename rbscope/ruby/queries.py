"""
Tree-sitter query definitions for Ruby.
"""

from __future__ import annotations

QUERIES = {
    # Bare names: local variables and receiver-less calls without arguments
    "identifiers": """
    (identifier) @identifier
    """,

    # Heredoc openers (`<<~SQL`) and the bodies that follow the opening line
    "heredocs": """
    (heredoc_beginning) @opener
    (heredoc_body) @body
    """,
}
