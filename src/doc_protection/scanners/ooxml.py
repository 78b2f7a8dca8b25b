"""OOXML package encryption markers.

This is a raw substring search over the package bytes, not a ZIP or XML parse.
Protection schemes that use other marker strings are not detected.
"""

from __future__ import annotations

from doc_protection.handles import FileHandle

ENCRYPTION_MARKERS = ("Encryption", "EncryptedPackage")


def contains_encryption_marker(text: str) -> bool:
    """Return whether ``text`` contains any OOXML encryption marker."""
    return any(marker in text for marker in ENCRYPTION_MARKERS)


async def has_encryption_marker(handle: FileHandle) -> bool:
    """Return whether the handle's full content contains an encryption marker."""
    return contains_encryption_marker(await handle.read_text())


__all__ = ["ENCRYPTION_MARKERS", "contains_encryption_marker", "has_encryption_marker"]
