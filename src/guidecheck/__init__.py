"""Guidecheck: pattern-based heuristic scanner for codebase guidelines."""

from __future__ import annotations

__version__ = "0.4.0"


class GuidecheckError(Exception):
    """Base class for guidecheck errors surfaced to the CLI."""


__all__ = ["GuidecheckError", "__version__"]
