"""Error types.

Heuristic ambiguity never raises; only an unusable handle does.
"""

from __future__ import annotations


class DocumentProtectionError(Exception):
    """Base error for the package."""

    pass


class HandleReadError(DocumentProtectionError, OSError):
    """The underlying byte source could not be read."""

    pass


__all__ = ["DocumentProtectionError", "HandleReadError"]
