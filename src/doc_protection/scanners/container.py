"""ZIP container sniffing.

A file declared as .docx/.xlsx/.pptx may really be a renamed legacy OLE2 file
(or an Office 2007+ encryption envelope, which is OLE2 as well). Checking the
ZIP magic tells the two apart before a protection strategy is chosen.
"""

from __future__ import annotations

from doc_protection.handles import FileHandle

ZIP_MAGIC = b"PK\x03\x04"


def has_zip_magic(header: bytes) -> bool:
    """Return whether ``header`` starts with a ZIP local file header."""
    return header[: len(ZIP_MAGIC)] == ZIP_MAGIC


async def is_ooxml(handle: FileHandle) -> bool:
    """Return whether the handle's content is a ZIP-based (OOXML) container."""
    return has_zip_magic(await handle.read_prefix(len(ZIP_MAGIC)))


__all__ = ["ZIP_MAGIC", "has_zip_magic", "is_ooxml"]
