"""
Range Proxy Module Integration.

Handles dependency injection and service composition for the range proxy
listener.
"""

import logging
from typing import Optional

from ..core.config import Config

# Domain interfaces
from .domain.interfaces import ContentSource

# Infrastructure implementations
from .infrastructure.sources import HttpContentSource, FileSystemContentSource

# Application services
from .application.chunking_service import ChunkingService

# Presentation layer
from .presentation.controllers import VideoProxyController, PageController
from .presentation.routes import create_proxy_routes


class ProxyModule:
    """
    Range proxy module that provides dependency injection and service composition.

    This class follows the composition root pattern, creating and wiring up
    all dependencies for the chunked video endpoint.
    """

    def __init__(self, config: Config, content_source: Optional[ContentSource] = None):
        self.config = config
        self.logger = logging.getLogger(__name__)

        self.content_source = content_source or self._create_content_source()

        # Application layer
        self.chunking_service = ChunkingService(
            content_source=self.content_source,
            first_chunk_size=config.proxy.first_chunk_size,
            chunk_size=config.proxy.chunk_size,
            fetch_timeout_seconds=config.proxy.fetch_timeout_seconds,
            strict_range_parsing=config.proxy.strict_range_parsing,
            media_type=config.proxy.media_type
        )

        # Presentation layer
        self.video_controller = VideoProxyController(self.chunking_service)
        self.page_controller = PageController(config.page)

        self.logger.info(f"Proxy module initialized with {type(self.content_source).__name__}")

    def _create_content_source(self) -> ContentSource:
        """Create the content source selected in the configuration"""
        if self.config.proxy.content_source == "filesystem":
            return FileSystemContentSource(self.config.source_video_path)
        return HttpContentSource(
            origin_url=self.config.proxy.origin_url,
            timeout_seconds=self.config.proxy.fetch_timeout_seconds
        )

    def get_api_routes(self):
        """Get FastAPI routes for the range proxy"""
        return create_proxy_routes(
            video_controller=self.video_controller,
            page_controller=self.page_controller
        )

    async def cleanup(self):
        """Release the content source"""
        await self.content_source.close()
        self.logger.info("Proxy module cleanup completed")

    def get_module_status(self) -> dict:
        """Get status information about the proxy module"""
        return {
            "content_source": type(self.content_source).__name__,
            "first_chunk_size": self.chunking_service.first_chunk_size,
            "chunk_size": self.chunking_service.chunk_size,
            "fetch_timeout_seconds": self.chunking_service.fetch_timeout_seconds,
            "strict_range_parsing": self.chunking_service.strict_range_parsing,
            "errors": self.chunking_service.error_tracker.get_error_stats()
        }


def create_proxy_module(config: Config, content_source: Optional[ContentSource] = None) -> ProxyModule:
    """Factory function to create a configured proxy module"""
    return ProxyModule(config=config, content_source=content_source)
