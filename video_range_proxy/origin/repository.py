"""
Video File Repository.

File system access for the content origin.
"""

import logging
from pathlib import Path
from typing import AsyncIterator

import aiofiles

from ..core.errors import NotFoundError


class VideoFileRepository:
    """Locates the served video and streams its bytes"""

    def __init__(self, video_path: str, chunk_size: int = 64 * 1024):
        self.video_path = Path(video_path)
        self.chunk_size = chunk_size
        self.logger = logging.getLogger(__name__)

    def get_file_size(self) -> int:
        """Size of the video in bytes.

        Raises:
            NotFoundError: if the file does not exist.
        """
        if not self.video_path.is_file():
            raise NotFoundError(str(self.video_path))
        return self.video_path.stat().st_size

    async def iter_file(self) -> AsyncIterator[bytes]:
        """Yield the whole file in fixed-size chunks"""
        try:
            async with aiofiles.open(self.video_path, "rb") as f:
                while True:
                    chunk = await f.read(self.chunk_size)
                    if not chunk:
                        break
                    yield chunk
        except OSError as e:
            self.logger.error(f"Error streaming {self.video_path}: {e}")
            raise
