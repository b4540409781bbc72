"""
Error types for the Video Range Proxy.

Domain errors are raised by the proxy, origin and supervisor layers and
translated into HTTP responses by the presentation layer.
"""

from typing import Optional


class RangeProxyError(Exception):
    """Base class for all Video Range Proxy errors"""


class RangeParseError(RangeProxyError):
    """Raised when a Range header cannot be parsed"""

    def __init__(self, header: str, reason: str = "malformed range header"):
        self.header = header
        self.reason = reason
        super().__init__(f"{reason}: {header!r}")


class UnsupportedRangeError(RangeParseError):
    """Raised for range forms the proxy refuses to serve (multi-range)"""

    def __init__(self, header: str):
        super().__init__(header, reason="multiple ranges are not supported")


class UpstreamFetchError(RangeProxyError):
    """Raised when the content source cannot deliver the requested bytes"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class NotFoundError(RangeProxyError):
    """Raised by the content origin when the video file is absent"""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Video file not found: {path}")


class ListenerError(RangeProxyError):
    """Raised when a listener fails to start or stops unexpectedly"""

    def __init__(self, service_name: str, message: str):
        self.service_name = service_name
        super().__init__(f"{service_name}: {message}")
