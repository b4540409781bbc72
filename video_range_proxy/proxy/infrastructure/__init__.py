"""
Range Proxy Infrastructure Layer.

Contains implementations of domain interfaces using external dependencies
like the HTTP client and async file access.
"""

from .sources import HttpContentSource, FileSystemContentSource

__all__ = [
    "HttpContentSource",
    "FileSystemContentSource",
]
