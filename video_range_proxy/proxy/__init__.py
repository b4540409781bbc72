"""
Range Proxy Module for the Video Range Proxy.

Computes byte windows from client Range headers, retrieves the video through
a content source and frames 206 Partial Content replies.
"""

from .domain.models import RangeRequest, ChunkWindow, ChunkResponse
from .application.chunking_service import ChunkingService
from .integration import ProxyModule, create_proxy_module

__all__ = ["RangeRequest", "ChunkWindow", "ChunkResponse", "ChunkingService", "ProxyModule", "create_proxy_module"]
