"""Password-protection detection for office and PDF uploads.

Components:
- classifier: declared media type / extension based kind checks
- detector: per-kind protection detection (ProtectionDetector)
- handles: in-memory and filesystem byte sources
"""

from loguru import logger

from doc_protection.classifier import (
    classify,
    is_doc,
    is_docx,
    is_kind,
    is_pdf,
    is_ppt,
    is_pptx,
    is_xls,
    is_xlsx,
)
from doc_protection.config import DetectorConfig, load_detector_config
from doc_protection.detector import (
    InspectionResult,
    ProtectionDetector,
    inspect,
    is_doc_password_protected,
    is_docx_password_protected,
    is_password_protected,
    is_pdf_password_protected,
    is_ppt_password_protected,
    is_pptx_password_protected,
    is_xls_password_protected,
    is_xlsx_password_protected,
)
from doc_protection.errors import DocumentProtectionError, HandleReadError
from doc_protection.handles import BytesFileHandle, FileHandle, PathFileHandle
from doc_protection.kinds import DocumentKind

__version__ = "0.1.0"

# Library logging is opt-in: logger.enable("doc_protection")
logger.disable("doc_protection")

__all__ = [
    "BytesFileHandle",
    "DetectorConfig",
    "DocumentKind",
    "DocumentProtectionError",
    "FileHandle",
    "HandleReadError",
    "InspectionResult",
    "PathFileHandle",
    "ProtectionDetector",
    "classify",
    "inspect",
    "is_doc",
    "is_doc_password_protected",
    "is_docx",
    "is_docx_password_protected",
    "is_kind",
    "is_password_protected",
    "is_pdf",
    "is_pdf_password_protected",
    "is_ppt",
    "is_ppt_password_protected",
    "is_pptx",
    "is_pptx_password_protected",
    "is_xls",
    "is_xls_password_protected",
    "is_xlsx",
    "is_xlsx_password_protected",
    "load_detector_config",
]
