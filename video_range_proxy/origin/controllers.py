"""
Content Origin HTTP Controllers.
"""

import logging

from fastapi import HTTPException
from fastapi.responses import StreamingResponse

from ..core.errors import NotFoundError
from .repository import VideoFileRepository


class OriginController:
    """Serves the video file in full, ignoring any Range header"""

    def __init__(self, repository: VideoFileRepository, media_type: str = "video/mp4"):
        self.repository = repository
        self.media_type = media_type
        self.logger = logging.getLogger(__name__)

    async def serve_file(self) -> StreamingResponse:
        """Stream the entire video with status 200"""
        try:
            file_size = self.repository.get_file_size()
        except NotFoundError as e:
            self.logger.warning(str(e))
            raise HTTPException(status_code=404, detail=str(e))

        self.logger.info(f"Serving {self.repository.video_path} ({file_size} bytes)")

        headers = {"Content-Length": str(file_size)}
        return StreamingResponse(self.repository.iter_file(), status_code=200, headers=headers, media_type=self.media_type)
