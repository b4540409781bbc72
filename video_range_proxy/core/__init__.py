"""
Video Range Proxy - Core Module

This module contains configuration management, logging setup, error types
and service supervision shared by the proxy and origin listeners.
"""

from .config import Config
from .errors import RangeProxyError, RangeParseError, UnsupportedRangeError, UpstreamFetchError, NotFoundError, ListenerError
from .supervisor import ServiceGroup

__all__ = [
    "Config",
    "RangeProxyError",
    "RangeParseError",
    "UnsupportedRangeError",
    "UpstreamFetchError",
    "NotFoundError",
    "ListenerError",
    "ServiceGroup",
]
