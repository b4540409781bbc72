"""
Range Proxy HTTP Controllers.

Handle HTTP requests and responses for the player page and video chunks.
"""

import logging

from fastapi import HTTPException, Request, Response

from ...core.config import PageConfig
from ...core.errors import RangeParseError, UnsupportedRangeError, UpstreamFetchError
from ..application.chunking_service import ChunkingService
from .pages import render_index_page


class VideoProxyController:
    """Controller for range-restricted video chunks"""

    def __init__(self, chunking_service: ChunkingService):
        self.chunking_service = chunking_service
        self.logger = logging.getLogger(__name__)

    async def stream_chunk(self, request: Request) -> Response:
        """Answer a video request with a 206 partial content chunk"""
        range_header = request.headers.get("range")

        try:
            chunk = await self.chunking_service.handle_video_request(range_header)
        except UnsupportedRangeError as e:
            raise HTTPException(status_code=416, detail=f"Range not satisfiable: {e.reason}")
        except RangeParseError as e:
            raise HTTPException(status_code=400, detail=f"Invalid range request: {e.reason}")
        except UpstreamFetchError as e:
            self.logger.error(f"Error serving video chunk: {e}")
            raise HTTPException(status_code=502, detail=f"Upstream fetch failed: {e}")

        return Response(
            content=chunk.body,
            status_code=chunk.status_code,
            headers=chunk.headers,
            media_type=chunk.media_type
        )


class PageController:
    """Controller for the player page"""

    def __init__(self, page_config: PageConfig, video_src: str = "/video"):
        self._html = render_index_page(page_config, video_src)

    def index_page(self) -> str:
        return self._html
