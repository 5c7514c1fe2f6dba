"""Public runtime orchestration entry points.

This package groups the interactive bootstrap (``run_viewer``), the state
machine, and the event loop used by tests and composition code.
"""

from __future__ import annotations


def run_viewer(*args, **kwargs):
    """Lazily import the bootstrap to avoid heavy imports on package import."""
    from .app import run_viewer as _run_viewer

    return _run_viewer(*args, **kwargs)


def run_main_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_main_loop as _run_main_loop

    return _run_main_loop(*args, **kwargs)


__all__ = [
    "run_main_loop",
    "run_viewer",
]
