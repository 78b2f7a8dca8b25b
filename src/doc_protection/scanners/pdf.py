"""PDF /Encrypt reference detection.

Only the start of the file is searched, which covers freshly authored or
exported documents whose trailer dictionary appears early. The reference has
to sit inside a single ``<< ... >>`` dictionary, so ``/Encrypt`` appearing as
free text elsewhere does not count.
"""

from __future__ import annotations

import re

from doc_protection.handles import FileHandle, decode_text

PDF_WINDOW = 8192

ENCRYPT_REF_PATTERN = re.compile(r"<<[^>]*/Encrypt\s+\d+\s+\d+\s+R[^>]*>>")


def contains_encrypt_reference(text: str) -> bool:
    """Return whether ``text`` holds a dictionary with an indirect /Encrypt entry."""
    return ENCRYPT_REF_PATTERN.search(text) is not None


async def is_pdf_protected(handle: FileHandle, window: int = PDF_WINDOW) -> bool:
    """Return whether the first ``window`` bytes reference an Encrypt dictionary."""
    return contains_encrypt_reference(decode_text(await handle.read_prefix(window)))


__all__ = ["ENCRYPT_REF_PATTERN", "PDF_WINDOW", "contains_encrypt_reference", "is_pdf_protected"]
