"""
Range Proxy Presentation Layer.

Contains HTTP controllers, response models, and API route definitions.
"""

from .controllers import VideoProxyController, PageController
from .schemas import HealthResponse, ErrorResponse, ProxyStatusResponse
from .routes import create_proxy_routes

__all__ = [
    "VideoProxyController",
    "PageController",
    "HealthResponse",
    "ErrorResponse",
    "ProxyStatusResponse",
    "create_proxy_routes",
]
