"""
Video Range Proxy

Serves a single video over HTTP with byte-range support: a range proxy that
returns a player page and 206 partial content chunks, backed by a content
origin that holds the full video file.
"""

__version__ = "1.0.0"

from .main import RangeProxySystem

__all__ = ["RangeProxySystem"]
