# SPDX-License-Identifier: MIT
"""Document kind classification from declared metadata.

Declared media type is checked first. In non-strict mode the file name's
extension is a fallback. Neither signal is verified against the bytes; both
come from the client and are treated as independent, fallible hints.
"""

from __future__ import annotations

from typing import Optional

from doc_protection.handles import FileHandle
from doc_protection.kinds import DocumentKind, descriptor_for


def is_kind(handle: FileHandle, kind: DocumentKind, strict: bool = False) -> bool:
    """Return whether ``handle`` is declared as ``kind``.

    Args:
        handle: File handle to classify
        kind: Requested document kind
        strict: Only trust the declared media type, ignore the name

    Returns:
        True if the media type matches, or (non-strict) the name ends with the
        kind's extension
    """
    descriptor = descriptor_for(kind)

    if handle.media_type in descriptor.media_types:
        return True

    if not strict and handle.name:
        return handle.name.lower().endswith(descriptor.extension)

    return False


def classify(handle: FileHandle, strict: bool = False) -> Optional[DocumentKind]:
    """Return the first kind ``handle`` is declared as, or None."""
    for kind in DocumentKind:
        if is_kind(handle, kind, strict=strict):
            return kind
    return None


def is_doc(handle: FileHandle, strict: bool = False) -> bool:
    return is_kind(handle, DocumentKind.DOC, strict)


def is_docx(handle: FileHandle, strict: bool = False) -> bool:
    return is_kind(handle, DocumentKind.DOCX, strict)


def is_xls(handle: FileHandle, strict: bool = False) -> bool:
    return is_kind(handle, DocumentKind.XLS, strict)


def is_xlsx(handle: FileHandle, strict: bool = False) -> bool:
    return is_kind(handle, DocumentKind.XLSX, strict)


def is_ppt(handle: FileHandle, strict: bool = False) -> bool:
    return is_kind(handle, DocumentKind.PPT, strict)


def is_pptx(handle: FileHandle, strict: bool = False) -> bool:
    return is_kind(handle, DocumentKind.PPTX, strict)


def is_pdf(handle: FileHandle, strict: bool = False) -> bool:
    return is_kind(handle, DocumentKind.PDF, strict)


__all__ = [
    "is_kind",
    "classify",
    "is_doc",
    "is_docx",
    "is_xls",
    "is_xlsx",
    "is_ppt",
    "is_pptx",
    "is_pdf",
]
