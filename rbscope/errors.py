"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from RbScopeUserError.

Programming errors and bugs should NOT inherit from RbScopeUserError;
they propagate with full tracebacks.
"""

from __future__ import annotations


class RbScopeUserError(Exception):
    """
    Base class for all user-facing errors in rbscope.

    These errors indicate problems that the user can fix:
    configuration issues, missing files, etc.
    """
    pass


class ConfigLoadError(RbScopeUserError, ValueError):
    """Invalid configuration file, with the offending key in the message."""
    pass


class SourceNotFoundError(RbScopeUserError):
    """A source path given by the user does not exist."""
    pass


__all__ = ["ConfigLoadError", "RbScopeUserError", "SourceNotFoundError"]
