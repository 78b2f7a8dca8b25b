# SPDX-License-Identifier: MIT
"""Compound File Binary (OLE2) directory scanning.

Office 2007+ encryption wraps the real package in an OLE2 envelope holding
``EncryptionInfo`` and ``EncryptedPackage`` streams. The same envelope is used
by third-party protection tools, so this is the most generic check for
protected Office content.

The directory parser is a narrow seam, ``bytes -> set of entry names``, so the
detection logic can be exercised with synthetic listings.
"""

from __future__ import annotations

import io
from typing import Callable, Optional, Set

import olefile
from loguru import logger

from doc_protection.handles import FileHandle

CompoundParser = Callable[[bytes], Set[str]]

ENCRYPTION_STREAM_NAMES = frozenset({"EncryptionInfo", "EncryptedPackage"})


def olefile_stream_names(data: bytes) -> Set[str]:
    """List every storage and stream name in an OLE2 container.

    Raises:
        OSError: ``data`` is not an OLE2 container (olefile's error type)
    """
    if not olefile.isOleFile(data=data):
        raise OSError("Not an OLE container")

    with olefile.OleFileIO(io.BytesIO(data)) as ole:
        entries = ole.listdir(streams=True, storages=True)

    return {part for entry in entries for part in entry}


def has_encryption_marker_stream(names: Set[str]) -> bool:
    """Return whether a directory listing contains an encryption stream."""
    return not ENCRYPTION_STREAM_NAMES.isdisjoint(names)


async def has_encryption_stream(handle: FileHandle, parser: Optional[CompoundParser] = None) -> bool:
    """Return whether the handle is an OLE2 container with encryption streams.

    Parser failures on corrupt or non-OLE bytes resolve to False. Failures to
    read the handle itself propagate.

    Args:
        handle: File handle to inspect
        parser: Directory parser; defaults to :func:`olefile_stream_names`
    """
    parse = parser or olefile_stream_names
    data = await handle.read_all()

    try:
        names = parse(data)
    except Exception as e:
        logger.debug(f"Compound directory parse failed for {handle.name!r}: {e}")
        return False

    found = has_encryption_marker_stream(names)
    if found:
        logger.debug(f"Encryption streams found in {handle.name!r}")
    return found


__all__ = [
    "CompoundParser",
    "ENCRYPTION_STREAM_NAMES",
    "has_encryption_marker_stream",
    "has_encryption_stream",
    "olefile_stream_names",
]
