"""
Content Source Implementations.

HTTP-origin and file system implementations of the content source interface.
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import aiofiles
import aiofiles.os
import requests

from ...core.errors import UpstreamFetchError
from ..domain.interfaces import ContentSource
from ..domain.models import ChunkWindow, ContentBuffer, ContentSlice


class HttpContentSource(ContentSource):
    """Fetches the whole video from the content origin, then slices it.

    Every request downloads the full resource; nothing is cached between
    requests. Each fetch opens its own ``requests.Session``, so no session
    is shared between worker threads. A session passed in is used as-is
    and belongs to the caller.
    """

    def __init__(
        self,
        origin_url: str,
        timeout_seconds: Optional[float] = None,
        session: Optional[requests.Session] = None
    ):
        self.origin_url = origin_url
        self.timeout_seconds = timeout_seconds
        self.session = session
        self.logger = logging.getLogger(__name__)

    async def fetch_all(self) -> ContentBuffer:
        """Download the full video from the origin"""
        # requests is blocking, keep it off the event loop
        return await asyncio.to_thread(self._fetch)

    async def read_window(self, window: ChunkWindow) -> ContentSlice:
        """Fetch the full video and slice out the clamped window"""
        buffer = await self.fetch_all()

        if buffer.length_mismatch:
            self.logger.warning(
                f"Origin declared {buffer.declared_length} bytes but sent {buffer.total}"
            )

        clamped = window.clamp(buffer.total)
        return ContentSlice(window=clamped, data=buffer.slice(clamped), total=buffer.total)

    def _fetch(self) -> ContentBuffer:
        if self.session is not None:
            return self._fetch_with(self.session)
        with requests.Session() as session:
            return self._fetch_with(session)

    def _fetch_with(self, session: requests.Session) -> ContentBuffer:
        try:
            response = session.get(self.origin_url, timeout=self.timeout_seconds)
        except requests.RequestException as e:
            self.logger.error(f"Error fetching video from {self.origin_url}: {e}")
            raise UpstreamFetchError(f"Origin unreachable: {e}") from e

        try:
            if not response.ok:
                self.logger.error(f"Origin {self.origin_url} returned {response.status_code}")
                raise UpstreamFetchError(
                    f"Origin returned status {response.status_code}",
                    status_code=response.status_code
                )

            data = response.content
            declared_length = self._parse_length(response.headers.get("Content-Length"))
        except requests.RequestException as e:
            self.logger.error(f"Error reading video body from {self.origin_url}: {e}")
            raise UpstreamFetchError(f"Origin read failed: {e}") from e
        finally:
            response.close()

        return ContentBuffer(data=data, declared_length=declared_length)

    @staticmethod
    def _parse_length(value: Optional[str]) -> Optional[int]:
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            return None


class FileSystemContentSource(ContentSource):
    """Reads only the requested window straight from the video file"""

    def __init__(self, video_path: str):
        self.video_path = Path(video_path)
        self.logger = logging.getLogger(__name__)

    async def read_window(self, window: ChunkWindow) -> ContentSlice:
        """Seek to the clamped window and read just its bytes"""
        try:
            stat = await aiofiles.os.stat(self.video_path)
            total = stat.st_size
            clamped = window.clamp(total)

            if clamped.size == 0:
                return ContentSlice(window=clamped, data=b"", total=total)

            async with aiofiles.open(self.video_path, 'rb') as f:
                await f.seek(clamped.start)
                data = await f.read(clamped.size)

        except OSError as e:
            self.logger.error(f"Error reading file range from {self.video_path}: {e}")
            raise UpstreamFetchError(f"Cannot read {self.video_path}: {e}") from e

        return ContentSlice(window=clamped, data=data, total=total)
