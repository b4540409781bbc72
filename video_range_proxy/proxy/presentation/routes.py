"""
Range Proxy API Routes.

FastAPI route definitions for the player page and the chunked video endpoint.
"""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from .controllers import VideoProxyController, PageController
from .schemas import ErrorResponse


def create_proxy_routes(
    video_controller: VideoProxyController,
    page_controller: PageController
) -> APIRouter:
    """Create range proxy routes with dependency injection"""

    router = APIRouter(tags=["proxy"])

    @router.get("/", response_class=HTMLResponse)
    async def index_page():
        """Player page embedding the proxied video."""
        return page_controller.index_page()

    @router.get(
        "/video",
        responses={
            206: {"content": {"video/mp4": {}}, "description": "Partial video content"},
            400: {"model": ErrorResponse},
            416: {"model": ErrorResponse},
            502: {"model": ErrorResponse},
        }
    )
    async def stream_video(request: Request):
        """
        Serve one chunk of the video.

        - **No Range header**: the first 100 KiB, to start playback quickly
        - **Range: bytes=<start>-**: a 2 MiB chunk starting at `start`

        The reply is always `206 Partial Content` with `Content-Range`
        `bytes {start}-{end}/{total}`.
        """
        return await video_controller.stream_chunk(request)

    return router
