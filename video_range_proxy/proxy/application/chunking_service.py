"""
Video Chunking Application Service.

Turns a client Range header into a byte window, reads that window through
the configured content source and frames the partial content reply.
"""

import asyncio
import logging
from typing import Optional

from ...core.errors import RangeParseError, UnsupportedRangeError, UpstreamFetchError
from ...core.logging_config import get_error_tracker
from ..domain.interfaces import ContentSource
from ..domain.models import RangeRequest, ChunkWindow, ChunkResponse


class ChunkingService:
    """Application service for range-restricted video chunks"""

    def __init__(
        self,
        content_source: ContentSource,
        first_chunk_size: int,
        chunk_size: int,
        fetch_timeout_seconds: Optional[float] = None,
        strict_range_parsing: bool = False,
        media_type: str = "video/mp4"
    ):
        self.content_source = content_source
        self.first_chunk_size = first_chunk_size
        self.chunk_size = chunk_size
        self.fetch_timeout_seconds = fetch_timeout_seconds
        self.strict_range_parsing = strict_range_parsing
        self.media_type = media_type
        self.logger = logging.getLogger(__name__)
        self.error_tracker = get_error_tracker("chunking_service")

    def parse_range(self, range_header: Optional[str]) -> Optional[RangeRequest]:
        """Parse the Range header, falling back to offset 0 when lenient.

        Raises:
            UnsupportedRangeError: for multi-range headers, in every mode.
            RangeParseError: for malformed headers in strict mode.
        """
        try:
            return RangeRequest.from_header(range_header)
        except UnsupportedRangeError:
            raise
        except RangeParseError as e:
            if self.strict_range_parsing:
                raise
            self.error_tracker.log_warning(
                f"ignoring unparseable range ({e.reason}): {range_header!r}, starting from 0",
                context="range_parse"
            )
            return None

    def compute_window(self, range_header: Optional[str]) -> ChunkWindow:
        """Compute the requested (unclamped) window for a Range header"""
        range_request = self.parse_range(range_header)
        return ChunkWindow.for_request(range_request, self.first_chunk_size, self.chunk_size)

    async def _read_window(self, window: ChunkWindow):
        if self.fetch_timeout_seconds is None:
            return await self.content_source.read_window(window)
        try:
            return await asyncio.wait_for(
                self.content_source.read_window(window),
                timeout=self.fetch_timeout_seconds
            )
        except asyncio.TimeoutError as e:
            raise UpstreamFetchError(f"Content fetch timed out after {self.fetch_timeout_seconds}s") from e

    async def handle_video_request(self, range_header: Optional[str]) -> ChunkResponse:
        """Serve one video chunk.

        Raises:
            RangeParseError: for headers rejected by :meth:`parse_range`.
            UpstreamFetchError: if the content source fails or times out.
        """
        window = self.compute_window(range_header)
        self.logger.info(f"Requested: {range_header or ''}, window: {window.start}-{window.end}")

        try:
            content = await self._read_window(window)
        except UpstreamFetchError as e:
            self.error_tracker.log_error(e, context=f"window {window.start}-{window.end}")
            raise

        response = ChunkResponse(
            window=content.window,
            body=content.data,
            total=content.total,
            media_type=self.media_type
        )

        self.logger.info(f"Response: {response.content_range}")
        return response
