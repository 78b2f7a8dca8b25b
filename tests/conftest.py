"""Shared fixtures: synthetic office/PDF payloads.

Binary fixtures are built in code. ``build_compound_file`` writes a minimal
version 3 Compound File (header, one FAT sector, one directory sector) whose
streams are all empty, which is enough for a directory listing.
"""

from __future__ import annotations

import io
import struct
import zipfile
from typing import Iterable

import pytest

from doc_protection.handles import BytesFileHandle

OLE_MAGIC = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"
SECTOR_SIZE = 512
FREESECT = 0xFFFFFFFF
ENDOFCHAIN = 0xFFFFFFFE
FATSECT = 0xFFFFFFFD
NOSTREAM = 0xFFFFFFFF

STGTY_STREAM = 2
STGTY_ROOT = 5


def _dir_entry(name: str, entry_type: int, right: int = NOSTREAM, child: int = NOSTREAM) -> bytes:
    raw_name = (name + "\x00").encode("utf-16-le")
    return struct.pack(
        "<64sHBBIII16sIQQIII",
        raw_name.ljust(64, b"\x00"),
        len(raw_name),
        entry_type,
        1,  # black
        NOSTREAM,
        right,
        child,
        b"\x00" * 16,
        0,
        0,
        0,
        ENDOFCHAIN,
        0,
        0,
    )


def build_compound_file(stream_names: Iterable[str]) -> bytes:
    """Build an OLE2 container listing ``stream_names`` (at most three)."""
    names = list(stream_names)
    assert len(names) <= 3, "one directory sector holds four entries"

    header = struct.pack(
        "<8s16sHHHHHHLLLLLLLLLL",
        OLE_MAGIC,
        b"\x00" * 16,
        0x003E,  # minor version
        3,  # major version
        0xFFFE,  # byte order
        9,  # 512-byte sectors
        6,  # 64-byte mini sectors
        0,
        0,
        0,  # directory sectors (v3)
        1,  # FAT sectors
        1,  # first directory sector
        0,
        4096,  # mini stream cutoff
        ENDOFCHAIN,
        0,
        ENDOFCHAIN,
        0,
    )
    difat = struct.pack("<109I", 0, *([FREESECT] * 108))
    fat = struct.pack("<128I", FATSECT, ENDOFCHAIN, *([FREESECT] * 126))

    entries = [_dir_entry("Root Entry", STGTY_ROOT, child=1 if names else NOSTREAM)]
    for index, name in enumerate(names, start=1):
        right = index + 1 if index < len(names) else NOSTREAM
        entries.append(_dir_entry(name, STGTY_STREAM, right=right))
    directory = b"".join(entries).ljust(SECTOR_SIZE, b"\x00")

    return header + difat + fat + directory


def build_zip_package(members: dict[str, bytes]) -> bytes:
    """Build a stored (uncompressed) ZIP package."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_STORED) as zf:
        for name, data in members.items():
            zf.writestr(name, data)
    return buffer.getvalue()


DOCX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


@pytest.fixture
def unprotected_docx() -> BytesFileHandle:
    data = build_zip_package(
        {
            "[Content_Types].xml": b'<?xml version="1.0"?><Types></Types>',
            "word/document.xml": b"<w:document><w:body>hello</w:body></w:document>",
        }
    )
    return BytesFileHandle(data, name="google-unprotected.docx")


@pytest.fixture
def encrypted_envelope_docx() -> BytesFileHandle:
    """Office 2007+ encryption envelope: OLE2 bytes with a .docx name."""
    data = build_compound_file(["EncryptionInfo", "EncryptedPackage"])
    return BytesFileHandle(data, name="google-protected.docx")


@pytest.fixture
def empty_handle():
    def _make(name: str, media_type: str = "") -> BytesFileHandle:
        return BytesFileHandle(b"", name=name, media_type=media_type)

    return _make
