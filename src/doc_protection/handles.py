"""File handles: immutable references to a byte source.

A handle carries the declared metadata supplied with an upload (name and media
type, both untrusted) and knows how to read a prefix, the whole content, or a
decoded text view of its bytes. Detection code never mutates a handle and
never caches what it reads.
"""

from __future__ import annotations

import asyncio
import mimetypes
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, Union

from doc_protection.errors import HandleReadError

TEXT_ENCODING = "utf-8"


def decode_text(data: bytes) -> str:
    """Decode bytes as UTF-8, substituting undecodable sequences."""
    return data.decode(TEXT_ENCODING, errors="replace")


class FileHandle(ABC):
    """Abstract byte source with declared metadata.

    Attributes:
        name: Declared file name, may be ``None``.
        media_type: Declared media type, may be empty.
    """

    def __init__(self, name: Optional[str] = None, media_type: str = "") -> None:
        self._name = name
        self._media_type = media_type or ""

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def media_type(self) -> str:
        return self._media_type

    @property
    @abstractmethod
    def size(self) -> int:
        """Content length in bytes."""

    @abstractmethod
    async def read_prefix(self, length: int) -> bytes:
        """Return at most ``length`` bytes from the start of the content.

        Raises:
            HandleReadError: The byte source is unreadable.
        """

    @abstractmethod
    async def read_all(self) -> bytes:
        """Return the entire content.

        Raises:
            HandleReadError: The byte source is unreadable.
        """

    async def read_text(self, start: int = 0, end: Optional[int] = None) -> str:
        """Return ``content[start:end]`` decoded as text."""
        if start == 0 and end is not None:
            data = await self.read_prefix(end)
        else:
            data = (await self.read_all())[start:end]
        return decode_text(data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, media_type={self.media_type!r})"


class BytesFileHandle(FileHandle):
    """Handle over an in-memory buffer, e.g. an upload body."""

    def __init__(self, data: bytes, name: Optional[str] = None, media_type: str = "") -> None:
        super().__init__(name=name, media_type=media_type)
        self._data = bytes(data)

    @property
    def size(self) -> int:
        return len(self._data)

    async def read_prefix(self, length: int) -> bytes:
        if length < 0:
            raise ValueError(f"length must be >= 0: {length}")
        return self._data[:length]

    async def read_all(self) -> bytes:
        return self._data


class PathFileHandle(FileHandle):
    """Handle over a file on disk.

    Reads run in a worker thread so the event loop is not blocked. Every read
    reopens the file, so a handle stays valid across calls and across tasks.
    """

    def __init__(
        self,
        path: Union[str, Path],
        name: Optional[str] = None,
        media_type: str = "",
    ) -> None:
        self.path = Path(path)
        super().__init__(name=self.path.name if name is None else name, media_type=media_type)

    @classmethod
    def from_path(cls, path: Union[str, Path], media_type: Optional[str] = None) -> "PathFileHandle":
        """Build a handle, guessing the declared media type from the extension.

        This mirrors how browsers fill in an upload's type: from the name only,
        never from the bytes. Unknown extensions yield an empty media type.
        """
        path = Path(path)
        if media_type is None:
            guessed, _encoding = mimetypes.guess_type(path.name)
            media_type = guessed or ""
        return cls(path, media_type=media_type)

    @property
    def size(self) -> int:
        try:
            return self.path.stat().st_size
        except OSError as e:
            raise HandleReadError(f"Cannot stat {self.path}: {e}") from e

    def _read(self, length: Optional[int]) -> bytes:
        try:
            with open(self.path, "rb") as f:
                return f.read() if length is None else f.read(length)
        except OSError as e:
            raise HandleReadError(f"Cannot read {self.path}: {e}") from e

    async def read_prefix(self, length: int) -> bytes:
        if length < 0:
            raise ValueError(f"length must be >= 0: {length}")
        return await asyncio.to_thread(self._read, length)

    async def read_all(self) -> bytes:
        return await asyncio.to_thread(self._read, None)


__all__ = ["FileHandle", "BytesFileHandle", "PathFileHandle", "decode_text"]
