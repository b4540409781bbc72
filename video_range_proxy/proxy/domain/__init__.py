"""
Range Proxy Domain Layer.

Contains pure business logic and domain models for the range-request chunking protocol.
No external dependencies - only Python standard library and domain concepts.
"""

from .models import RangeRequest, ChunkWindow, ContentBuffer, ContentSlice, ChunkResponse
from .interfaces import ContentSource

__all__ = [
    "RangeRequest",
    "ChunkWindow",
    "ContentBuffer",
    "ContentSlice",
    "ChunkResponse",
    "ContentSource",
]
