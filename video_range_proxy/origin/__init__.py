"""
Content Origin Module.

Holds the video file and serves it in full on every request.
"""

from .repository import VideoFileRepository
from .controllers import OriginController
from .routes import create_origin_routes, create_origin_controller

__all__ = ["VideoFileRepository", "OriginController", "create_origin_routes", "create_origin_controller"]
