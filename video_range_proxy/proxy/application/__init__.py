"""
Range Proxy Application Layer.

Contains the use case that coordinates range parsing, content retrieval
and partial content framing.
"""

from .chunking_service import ChunkingService

__all__ = [
    "ChunkingService",
]
