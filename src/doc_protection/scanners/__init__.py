"""Format-specific protection scanners."""

from doc_protection.scanners.binary import contains_filepass_marker, has_filepass_marker
from doc_protection.scanners.compound import has_encryption_stream, olefile_stream_names
from doc_protection.scanners.container import is_ooxml
from doc_protection.scanners.doc_fib import is_doc_protected
from doc_protection.scanners.ooxml import has_encryption_marker
from doc_protection.scanners.pdf import is_pdf_protected

__all__ = [
    "contains_filepass_marker",
    "has_encryption_marker",
    "has_encryption_stream",
    "has_filepass_marker",
    "is_doc_protected",
    "is_ooxml",
    "is_pdf_protected",
    "olefile_stream_names",
]
