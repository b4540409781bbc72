"""
API layer for the Video Range Proxy.

This module provides the FastAPI applications and the uvicorn listeners
that serve them.
"""

from .server import ServiceServer, create_proxy_app, create_origin_app

__all__ = ["ServiceServer", "create_proxy_app", "create_origin_app"]
