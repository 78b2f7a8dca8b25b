"""BIFF FilePass record search for legacy Excel and PowerPoint files."""

from __future__ import annotations

from doc_protection.handles import FileHandle

# FilePass record id 0x002F, little-endian
FILEPASS_MARKER = b"\x2f\x00"

XLS_WINDOW = 1024
PPT_WINDOW = 512


def contains_filepass_marker(data: bytes) -> bool:
    """Return whether ``data`` contains the FilePass marker at any offset.

    Plain byte search: record lengths and boundaries are not parsed.
    """
    return FILEPASS_MARKER in data


async def has_filepass_marker(handle: FileHandle, window: int) -> bool:
    """Search the first ``window`` bytes of the handle for the FilePass marker."""
    return contains_filepass_marker(await handle.read_prefix(window))


__all__ = [
    "FILEPASS_MARKER",
    "PPT_WINDOW",
    "XLS_WINDOW",
    "contains_filepass_marker",
    "has_filepass_marker",
]
