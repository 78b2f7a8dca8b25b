"""Supported document kinds and their declared-metadata descriptors."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class DocumentKind(str, Enum):
    """Closed set of document kinds."""

    DOC = "doc"
    DOCX = "docx"
    XLS = "xls"
    XLSX = "xlsx"
    PPT = "ppt"
    PPTX = "pptx"
    PDF = "pdf"


@dataclass(frozen=True)
class KindDescriptor:
    """Media types and file-name extension registered for a kind.

    Attributes:
        media_types: Canonical MIME strings, compared exactly.
        extension: Lower-case name suffix including the dot.
    """

    media_types: Tuple[str, ...]
    extension: str


KIND_DESCRIPTORS: Dict[DocumentKind, KindDescriptor] = {
    DocumentKind.DOC: KindDescriptor(("application/msword", "application/x-msword"), ".doc"),
    DocumentKind.DOCX: KindDescriptor(
        ("application/vnd.openxmlformats-officedocument.wordprocessingml.document",),
        ".docx",
    ),
    # xlt and xla files may be declared with the same media type.
    DocumentKind.XLS: KindDescriptor(("application/vnd.ms-excel",), ".xls"),
    DocumentKind.XLSX: KindDescriptor(
        ("application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",),
        ".xlsx",
    ),
    # pot, pps and ppa files may be declared with the same media type.
    DocumentKind.PPT: KindDescriptor(("application/vnd.ms-powerpoint",), ".ppt"),
    DocumentKind.PPTX: KindDescriptor(
        ("application/vnd.openxmlformats-officedocument.presentationml.presentation",),
        ".pptx",
    ),
    DocumentKind.PDF: KindDescriptor(("application/pdf", "application/x-pdf"), ".pdf"),
}

_LEGACY_COUNTERPARTS = {
    DocumentKind.DOCX: DocumentKind.DOC,
    DocumentKind.XLSX: DocumentKind.XLS,
    DocumentKind.PPTX: DocumentKind.PPT,
}

OOXML_KINDS = frozenset(_LEGACY_COUNTERPARTS)


def descriptor_for(kind: DocumentKind) -> KindDescriptor:
    """Return the descriptor registered for ``kind``."""
    return KIND_DESCRIPTORS[DocumentKind(kind)]


def legacy_counterpart(kind: DocumentKind) -> DocumentKind:
    """Map an OOXML kind to the legacy binary kind it may be a renamed copy of.

    Raises:
        ValueError: ``kind`` is not an OOXML kind.
    """
    try:
        return _LEGACY_COUNTERPARTS[DocumentKind(kind)]
    except KeyError:
        raise ValueError(f"No legacy counterpart for kind: {kind}") from None


__all__ = [
    "DocumentKind",
    "KindDescriptor",
    "KIND_DESCRIPTORS",
    "OOXML_KINDS",
    "descriptor_for",
    "legacy_counterpart",
]
