"""Legacy Word (.doc) protection check.

The File Information Block carries an encryption flag in bit 0 of byte 0x0B.
That only holds when the FIB sits at the start of the file; otherwise it lives
inside the ``WordDocument`` stream, or the whole document is a CDFV2 encrypted
envelope, and the compound directory is checked instead.
"""

from __future__ import annotations

from typing import Optional

from loguru import logger

from doc_protection.handles import FileHandle
from doc_protection.scanners.compound import CompoundParser, has_encryption_stream

DOC_HEADER_SIZE = 512
FIB_FLAGS_OFFSET = 0x0B
FIB_ENCRYPTED_BIT = 0x01


def fib_encrypted_flag(header: bytes) -> bool:
    """Return whether the FIB encryption bit is set in ``header``.

    Headers too short to hold the flag byte are reported as not encrypted.
    """
    if len(header) < FIB_FLAGS_OFFSET + 1:
        return False
    return bool(header[FIB_FLAGS_OFFSET] & FIB_ENCRYPTED_BIT)


async def is_doc_protected(
    handle: FileHandle,
    header_size: int = DOC_HEADER_SIZE,
    parser: Optional[CompoundParser] = None,
) -> bool:
    """Return whether a legacy Word document is password protected.

    Args:
        handle: File handle to inspect
        header_size: Bytes read for the FIB check
        parser: Compound directory parser used by the fallback
    """
    header = await handle.read_prefix(header_size)

    if len(header) < FIB_FLAGS_OFFSET + 1:
        return False

    if fib_encrypted_flag(header):
        logger.debug(f"FIB encryption flag set in {handle.name!r}")
        return True

    return await has_encryption_stream(handle, parser=parser)


__all__ = [
    "DOC_HEADER_SIZE",
    "FIB_ENCRYPTED_BIT",
    "FIB_FLAGS_OFFSET",
    "fib_encrypted_flag",
    "is_doc_protected",
]
