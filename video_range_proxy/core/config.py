"""
Configuration management for the Video Range Proxy.

This module handles all configuration settings including listener addresses,
chunk sizes, the upstream origin address, fetch timeout and logging options.
"""

import json
import logging
from typing import Dict, Optional, Any
from dataclasses import dataclass, asdict
from pathlib import Path

KB = 1024
FIRST_CHUNK_SIZE = 100 * KB
CHUNK_SIZE = 2 * KB * KB


@dataclass
class ProxyConfig:
    """Range proxy (main listener) configuration"""

    host: str = "0.0.0.0"
    port: int = 8000
    origin_url: str = "http://localhost:8001/video"
    first_chunk_size: int = FIRST_CHUNK_SIZE  # Window used when no Range header is sent
    chunk_size: int = CHUNK_SIZE  # Window used for "bytes=<start>-" requests
    fetch_timeout_seconds: float = 30.0
    strict_range_parsing: bool = False  # Answer 400 instead of falling back to offset 0
    content_source: str = "http"  # "http" (fetch from origin) or "filesystem"
    video_path: Optional[str] = None  # Filesystem source only, defaults to origin.video_path
    media_type: str = "video/mp4"

    def __post_init__(self):
        if self.first_chunk_size <= 0 or self.chunk_size <= 0:
            raise ValueError("Chunk sizes must be positive")
        if self.fetch_timeout_seconds <= 0:
            raise ValueError("Fetch timeout must be positive")
        if self.content_source not in ("http", "filesystem"):
            raise ValueError(f"Unknown content source: {self.content_source}")


@dataclass
class OriginConfig:
    """Content origin (file listener) configuration"""

    host: str = "0.0.0.0"
    port: int = 8001
    video_path: str = "video.mp4"
    media_type: str = "video/mp4"
    stream_chunk_size: int = 64 * KB


@dataclass
class PageConfig:
    """Index page <video> element attributes"""

    width: int = 640
    height: int = 480
    controls: bool = True
    autoplay: bool = True
    playsinline: bool = True


@dataclass
class SystemConfig:
    """System-wide configuration"""

    log_level: str = "INFO"
    log_file: Optional[str] = None
    enable_cors: bool = True


class Config:
    """Main configuration manager"""

    def __init__(self, config_file: Optional[str] = None):
        self.config_file = config_file
        self.logger = logging.getLogger(__name__)

        # Default configurations
        self.proxy = ProxyConfig()
        self.origin = OriginConfig()
        self.page = PageConfig()
        self.system = SystemConfig()

        if self.config_file:
            self.load_config()

    def load_config(self) -> None:
        """Load configuration from file"""
        config_path = Path(self.config_file)

        if not config_path.exists():
            self.logger.info(f"Config file {config_path} not found, using defaults")
            self.save_config()  # Save default config
            return

        with open(config_path, "r") as f:
            config_data = json.load(f)

        if "proxy" in config_data:
            self.proxy = ProxyConfig(**config_data["proxy"])

        if "origin" in config_data:
            self.origin = OriginConfig(**config_data["origin"])

        if "page" in config_data:
            self.page = PageConfig(**config_data["page"])

        if "system" in config_data:
            self.system = SystemConfig(**config_data["system"])

        self.logger.info(f"Configuration loaded from {config_path}")

    def save_config(self) -> None:
        """Save current configuration to file"""
        if not self.config_file:
            return

        try:
            with open(self.config_file, "w") as f:
                json.dump(self.to_dict(), f, indent=2)
            self.logger.info(f"Configuration saved to {self.config_file}")
        except OSError as e:
            self.logger.error(f"Error saving config to {self.config_file}: {e}")

    @property
    def source_video_path(self) -> str:
        """Path read by the filesystem content source"""
        return self.proxy.video_path or self.origin.video_path

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return {"proxy": asdict(self.proxy), "origin": asdict(self.origin), "page": asdict(self.page), "system": asdict(self.system)}
