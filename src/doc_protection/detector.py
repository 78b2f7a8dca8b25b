# SPDX-License-Identifier: MIT
"""Protection detection orchestration.

Each document kind is routed to the scanner chain for its container format:

- doc: FIB flag, then compound directory streams
- xls / ppt: FilePass marker in a 1024 / 512 byte window
- docx / xlsx / pptx: OOXML encryption markers; in non-strict mode a file
  without the ZIP magic is treated as a renamed legacy file and scanned as
  doc / xls / ppt
- pdf: /Encrypt reference in a dictionary near the start of the file

Every ambiguity resolves to "not protected". Only handle read failures raise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from loguru import logger

from doc_protection.classifier import classify
from doc_protection.config import DetectorConfig, get_detector_config
from doc_protection.handles import FileHandle
from doc_protection.kinds import OOXML_KINDS, DocumentKind, legacy_counterpart
from doc_protection.scanners.binary import has_filepass_marker
from doc_protection.scanners.compound import CompoundParser
from doc_protection.scanners.container import is_ooxml
from doc_protection.scanners.doc_fib import is_doc_protected
from doc_protection.scanners.ooxml import has_encryption_marker
from doc_protection.scanners.pdf import is_pdf_protected


@dataclass(frozen=True)
class InspectionResult:
    """Outcome of :meth:`ProtectionDetector.inspect`.

    Attributes:
        kind: Declared kind, or None when the handle matches no supported kind
        is_protected: Whether protection was detected
    """

    kind: Optional[DocumentKind]
    is_protected: bool


class ProtectionDetector:
    """Dispatch a handle to the protection scanners for its kind.

    The detector holds configuration only; it keeps no per-handle state and
    can be shared between concurrent tasks.
    """

    def __init__(
        self,
        config: Optional[DetectorConfig] = None,
        parser: Optional[CompoundParser] = None,
    ):
        """Initialize.

        Args:
            config: Scan window configuration (default: cached default config)
            parser: Compound directory parser (default: olefile)
        """
        self.config = config or get_detector_config()
        self.parser = parser

    async def is_protected(self, handle: FileHandle, kind: DocumentKind, strict: bool = False) -> bool:
        """Return whether ``handle`` is password protected, scanned as ``kind``.

        Args:
            handle: File handle to inspect
            kind: Kind the handle was classified as
            strict: For OOXML kinds, skip the renamed legacy file fallback

        Raises:
            HandleReadError: the handle could not be read
        """
        kind = DocumentKind(kind)

        if kind in OOXML_KINDS:
            if not strict and not await is_ooxml(handle):
                legacy = legacy_counterpart(kind)
                logger.debug(f"{handle.name!r} is not a ZIP container, scanning as {legacy.value}")
                return await self._is_legacy_protected(handle, legacy)
            return await has_encryption_marker(handle)

        if kind is DocumentKind.PDF:
            return await is_pdf_protected(handle, window=self.config.windows.pdf)

        return await self._is_legacy_protected(handle, kind)

    async def _is_legacy_protected(self, handle: FileHandle, kind: DocumentKind) -> bool:
        windows = self.config.windows
        if kind is DocumentKind.DOC:
            return await is_doc_protected(handle, header_size=windows.doc_header, parser=self.parser)
        if kind is DocumentKind.XLS:
            return await has_filepass_marker(handle, windows.xls)
        if kind is DocumentKind.PPT:
            return await has_filepass_marker(handle, windows.ppt)
        raise ValueError(f"Not a legacy kind: {kind}")

    async def inspect(self, handle: FileHandle, strict: bool = False) -> InspectionResult:
        """Classify ``handle`` and check it for protection in one call."""
        kind = classify(handle, strict=strict)
        if kind is None:
            logger.debug(f"{handle.name!r} matches no supported kind")
            return InspectionResult(kind=None, is_protected=False)

        protected = await self.is_protected(handle, kind, strict=strict)
        return InspectionResult(kind=kind, is_protected=protected)


def _default_detector() -> ProtectionDetector:
    return ProtectionDetector()


async def is_password_protected(handle: FileHandle, kind: DocumentKind, strict: bool = False) -> bool:
    """Return whether ``handle`` is password protected, scanned as ``kind``."""
    return await _default_detector().is_protected(handle, kind, strict=strict)


async def is_doc_password_protected(handle: FileHandle, strict: bool = False) -> bool:
    """Return whether a legacy Word document is password protected."""
    return await is_password_protected(handle, DocumentKind.DOC, strict=strict)


async def is_docx_password_protected(handle: FileHandle, strict: bool = False) -> bool:
    """Return whether a docx file is password protected.

    In non-strict mode a misnamed legacy .doc file is scanned as one.
    """
    return await is_password_protected(handle, DocumentKind.DOCX, strict=strict)


async def is_xls_password_protected(handle: FileHandle, strict: bool = False) -> bool:
    """Return whether a legacy Excel workbook carries a FilePass record."""
    return await is_password_protected(handle, DocumentKind.XLS, strict=strict)


async def is_xlsx_password_protected(handle: FileHandle, strict: bool = False) -> bool:
    """Return whether an xlsx file is password protected.

    In non-strict mode a misnamed legacy .xls file is scanned as one.
    """
    return await is_password_protected(handle, DocumentKind.XLSX, strict=strict)


async def is_ppt_password_protected(handle: FileHandle, strict: bool = False) -> bool:
    """Return whether a legacy PowerPoint file carries a FilePass record."""
    return await is_password_protected(handle, DocumentKind.PPT, strict=strict)


async def is_pptx_password_protected(handle: FileHandle, strict: bool = False) -> bool:
    """Return whether a pptx file is password protected.

    In non-strict mode a misnamed legacy .ppt file is scanned as one.
    """
    return await is_password_protected(handle, DocumentKind.PPTX, strict=strict)


async def is_pdf_password_protected(handle: FileHandle, strict: bool = False) -> bool:
    """Return whether a PDF references an Encrypt dictionary near its start."""
    return await is_password_protected(handle, DocumentKind.PDF, strict=strict)


async def inspect(handle: FileHandle, strict: bool = False) -> InspectionResult:
    """Classify ``handle`` and check it for protection in one call."""
    return await _default_detector().inspect(handle, strict=strict)


__all__ = [
    "InspectionResult",
    "ProtectionDetector",
    "inspect",
    "is_doc_password_protected",
    "is_docx_password_protected",
    "is_password_protected",
    "is_pdf_password_protected",
    "is_ppt_password_protected",
    "is_pptx_password_protected",
    "is_xls_password_protected",
    "is_xlsx_password_protected",
]
