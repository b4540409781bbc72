"""
Range Proxy Domain Models.

Pure value objects for the range-request chunking protocol.
These models contain no external dependencies.
"""

import re
from dataclasses import dataclass
from typing import Dict, Optional

from ...core.errors import RangeParseError, UnsupportedRangeError

RANGE_UNIT_PREFIX = "bytes="
PARTIAL_CONTENT = 206

_RANGE_SPEC = re.compile(r"^(\d+)-(\d*)$")


@dataclass(frozen=True)
class RangeRequest:
    """Client Range header value object.

    ``end`` is the inclusive last byte requested by the client, if any.
    """
    start: int
    end: Optional[int] = None

    def __post_init__(self):
        if self.start < 0:
            raise ValueError("Start byte cannot be negative")
        if self.end is not None and self.end < self.start:
            raise ValueError("End byte cannot be less than start byte")

    @classmethod
    def from_header(cls, range_header: Optional[str]) -> Optional['RangeRequest']:
        """Parse an HTTP Range header.

        Returns None when no header (or an empty one) was sent.

        Raises:
            UnsupportedRangeError: for comma-separated multi-range headers.
            RangeParseError: for anything other than ``bytes=<start>-[<last>]``.
        """
        if range_header is None:
            return None

        range_header = range_header.strip()
        if not range_header:
            return None

        if not range_header.startswith(RANGE_UNIT_PREFIX):
            raise RangeParseError(range_header, "unsupported range unit")

        range_spec = range_header[len(RANGE_UNIT_PREFIX):].strip()  # Remove 'bytes='

        if ',' in range_spec:
            raise UnsupportedRangeError(range_header)

        match = _RANGE_SPEC.match(range_spec)
        if not match:
            raise RangeParseError(range_header)

        start_str, end_str = match.groups()
        start = int(start_str)
        end = int(end_str) if end_str else None

        try:
            return cls(start=start, end=end)
        except ValueError as e:
            raise RangeParseError(range_header, str(e)) from e


@dataclass(frozen=True)
class ChunkWindow:
    """Half-open byte window ``[start, end)`` served for one request"""
    start: int
    end: int

    def __post_init__(self):
        if self.start < 0:
            raise ValueError("Window start cannot be negative")
        if self.end < 0:
            raise ValueError("Window end cannot be negative")

    @classmethod
    def for_request(
        cls,
        range_request: Optional[RangeRequest],
        first_chunk_size: int,
        chunk_size: int
    ) -> 'ChunkWindow':
        """Compute the requested window before clamping.

        Without a range the small first chunk gets playback started quickly;
        a range asks for a full chunk from its start offset.
        """
        if range_request is None:
            return cls(start=0, end=first_chunk_size)

        end = range_request.start + chunk_size
        if range_request.end is not None:
            end = min(end, range_request.end + 1)

        return cls(start=range_request.start, end=end)

    @property
    def size(self) -> int:
        """Number of bytes in the window (0 when start is past the end)"""
        return max(0, self.end - self.start)

    def clamp(self, total: int) -> 'ChunkWindow':
        """Clamp the window end to the resource length.

        The start is left alone, so a start past ``total`` yields an empty
        window whose end is ``total``.
        """
        if self.end > total:
            return ChunkWindow(start=self.start, end=total)
        return self

    def content_range(self, total: int) -> str:
        """Content-Range header value for this window"""
        return f"bytes {self.start}-{self.end}/{total}"


@dataclass(frozen=True)
class ContentBuffer:
    """Full resource bytes fetched from the origin"""
    data: bytes
    declared_length: Optional[int] = None

    @property
    def total(self) -> int:
        return len(self.data)

    @property
    def length_mismatch(self) -> bool:
        """True when the origin declared a length that differs from what arrived"""
        return self.declared_length is not None and self.declared_length != self.total

    def slice(self, window: ChunkWindow) -> bytes:
        return self.data[window.start:window.end]


@dataclass(frozen=True)
class ContentSlice:
    """Bytes read for a clamped window, with the total resource length"""
    window: ChunkWindow
    data: bytes
    total: int


@dataclass(frozen=True)
class ChunkResponse:
    """Partial content reply for one video request"""
    window: ChunkWindow
    body: bytes
    total: int
    media_type: str = "video/mp4"
    status_code: int = PARTIAL_CONTENT

    @property
    def content_length(self) -> int:
        return len(self.body)

    @property
    def content_range(self) -> str:
        return self.window.content_range(self.total)

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Content-Length": str(self.content_length),
            "Content-Range": self.content_range,
            "Accept-Ranges": "bytes",
        }
