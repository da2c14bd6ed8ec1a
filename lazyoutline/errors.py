"""Exceptions raised at lazyoutline input boundaries.

The view-model core never raises for store inconsistencies; these types are
only used when loading outline files or resolving user-supplied paths.
"""

from __future__ import annotations


class LazyOutlineError(Exception):
    """Base class for lazyoutline errors."""


class OutlineLoadError(LazyOutlineError, ValueError):
    """Outline file could not be read or parsed."""


class OutlinePathError(LazyOutlineError, LookupError):
    """A value path does not resolve to a chain of outline nodes."""
