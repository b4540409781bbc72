"""
Content Origin API Routes.
"""

from fastapi import APIRouter

from ..core.config import OriginConfig
from .controllers import OriginController
from .repository import VideoFileRepository


def create_origin_routes(origin_controller: OriginController) -> APIRouter:
    """Create content origin routes with dependency injection"""

    router = APIRouter(tags=["origin"])

    @router.get("/video", responses={200: {"content": {"video/mp4": {}}}, 404: {"description": "Video file missing"}})
    async def serve_video():
        """
        Serve the full video file.

        The origin has no range support: every request gets the whole file.
        """
        return await origin_controller.serve_file()

    return router


def create_origin_controller(origin_config: OriginConfig) -> OriginController:
    """Wire the repository and controller for the configured video"""
    repository = VideoFileRepository(origin_config.video_path, chunk_size=origin_config.stream_chunk_size)
    return OriginController(repository, media_type=origin_config.media_type)
