#!/usr/bin/env python3
"""
Exception Hierarchy for billfold

Every error raised by the library derives from BillfoldError so the CLI can
report it at a single boundary. Each class also derives from the closest
builtin exception, so callers may catch FileNotFoundError / ValueError as usual.
"""


class BillfoldError(Exception):
    """Base class for all billfold errors."""


class IdError(BillfoldError, ValueError):
    """Raised when an identifier or record filename cannot be decoded."""


class SchemaError(BillfoldError, ValueError):
    """Raised when YAML does not match a record's strict schema."""


class InvalidEditError(SchemaError):
    """Raised when hand-edited YAML is rejected; `text` holds the rejected edit."""

    def __init__(self, message: str, text: str):
        super().__init__(message)
        self.text = text


class ConfigError(BillfoldError, ValueError):
    """Raised when the configuration file is invalid."""


class RecordNotFoundError(BillfoldError, FileNotFoundError):
    """Raised when a referenced record file does not exist."""


class TemplateRenderError(BillfoldError, RuntimeError):
    """Raised when a document template cannot be filled."""


class LatexCompileError(BillfoldError, RuntimeError):
    """Raised when the LaTeX compiler is missing or exits unsuccessfully."""

    def __init__(self, message: str, returncode: int | None = None):
        super().__init__(message)
        self.returncode = returncode


class NothingToDoError(BillfoldError, RuntimeError):
    """Raised when a workflow has no work available (e.g. every invoice is paid)."""
