"""Public package surface for lazyoutline.

Exports ``main`` for programmatic CLI invocation. The view-model itself lives
in ``lazyoutline.outline_model``.
"""

from __future__ import annotations

from loguru import logger

logger.disable("lazyoutline")


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
