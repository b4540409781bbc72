"""
Range Proxy Domain Interfaces.

Abstract interfaces that define contracts for retrieving video content.
These interfaces allow dependency inversion - domain logic doesn't depend on infrastructure.
"""

from abc import ABC, abstractmethod

from .models import ChunkWindow, ContentSlice


class ContentSource(ABC):
    """Abstract retrieval backend for the proxied video"""

    @abstractmethod
    async def read_window(self, window: ChunkWindow) -> ContentSlice:
        """Read the bytes of ``window`` after clamping it to the resource length.

        Raises:
            UpstreamFetchError: if the content cannot be retrieved.
        """
        pass

    async def close(self) -> None:
        """Release any resources held by the source"""
        pass
