"""Core utilities shared across runtime and parsing layers.

Exports:
    BabelImportError: Exception raised when Babel is required but missing
    is_babel_available: Cached Babel availability check
    require_babel: Fail-fast Babel availability assertion

Python 3.13+.
"""

from .babel_compat import BabelImportError, is_babel_available, require_babel

__all__ = ["BabelImportError", "is_babel_available", "require_babel"]
