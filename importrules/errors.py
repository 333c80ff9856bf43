"""
Base exceptions for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from ImportRulesUserError.

Programming errors and bugs should NOT inherit from ImportRulesUserError:
they will propagate with full tracebacks.
"""

from __future__ import annotations


class ImportRulesUserError(Exception):
    """
    Base class for all user-facing errors in import-rules.

    These errors indicate problems that the user can fix:
    invalid configuration, unsupported files, etc.
    """
    pass


class ConfigError(ImportRulesUserError):
    """Invalid or unsupported configuration file."""
    pass


class UnsupportedFileError(ImportRulesUserError):
    """File extension has no parser."""
    pass


__all__ = ["ImportRulesUserError", "ConfigError", "UnsupportedFileError"]
