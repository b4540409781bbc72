"""
Range Proxy API Response Schemas.

Pydantic models for API serialization.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """Listener health response"""
    model_config = ConfigDict(json_schema_extra={
        "example": {
            "status": "healthy",
            "service": "proxy",
            "timestamp": "2025-08-04T14:30:22"
        }
    })

    status: str = Field(..., description="Health status")
    service: str = Field(..., description="Listener name")
    timestamp: datetime = Field(..., description="Server time of the check")


class ErrorStatsResponse(BaseModel):
    """Error counters of one component"""
    component: str
    error_count: int = 0
    warning_count: int = 0
    last_error_time: Optional[datetime] = None


class ProxyStatusResponse(BaseModel):
    """Range proxy configuration and error counters"""
    model_config = ConfigDict(json_schema_extra={
        "example": {
            "content_source": "HttpContentSource",
            "first_chunk_size": 102400,
            "chunk_size": 2097152,
            "fetch_timeout_seconds": 30.0,
            "strict_range_parsing": False,
            "errors": {
                "component": "chunking_service",
                "error_count": 0,
                "warning_count": 2,
                "last_error_time": None
            }
        }
    })

    content_source: str = Field(..., description="Content source implementation in use")
    first_chunk_size: int = Field(..., description="Window size when no Range header is sent")
    chunk_size: int = Field(..., description="Window size for an open range")
    fetch_timeout_seconds: Optional[float] = Field(None, description="Bound on one content fetch")
    strict_range_parsing: bool = Field(..., description="Whether malformed ranges are rejected")
    errors: ErrorStatsResponse


class ErrorResponse(BaseModel):
    """Error response body"""
    model_config = ConfigDict(json_schema_extra={
        "example": {
            "detail": "Upstream fetch failed: Origin returned status 404"
        }
    })

    detail: str = Field(..., description="Error description")
