"""
Main Application Coordinator for the Video Range Proxy.

This module wires the proxy and origin listeners together, runs them under
one supervisor and handles graceful shutdown.
"""

import asyncio
import signal
import logging
import sys
from typing import Optional, List
from datetime import datetime

from .core.config import Config, ProxyConfig
from .core.errors import ListenerError
from .core.logging_config import setup_logging
from .core.supervisor import ServiceGroup
from .proxy.integration import create_proxy_module
from .api.server import ServiceServer, create_proxy_app, create_origin_app


class RangeProxySystem:
    """Application coordinator for the proxy and origin listeners"""

    def __init__(self, config: Config):
        self.config = config
        self.logger = logging.getLogger(__name__)

        self.proxy_module = create_proxy_module(config)

        self.proxy_server = ServiceServer(
            "proxy",
            create_proxy_app(config, self.proxy_module),
            host=config.proxy.host,
            port=config.proxy.port,
            log_level=config.system.log_level
        )
        self.origin_server = ServiceServer(
            "origin",
            create_origin_app(config),
            host=config.origin.host,
            port=config.origin.port,
            log_level=config.system.log_level
        )
        self.service_group = ServiceGroup([self.proxy_server, self.origin_server])

        self.start_time: Optional[datetime] = None

        self.logger.info("Video Range Proxy initialized")

    def _install_signal_handlers(self, loop: asyncio.AbstractEventLoop) -> None:
        """Setup signal handlers for graceful shutdown"""
        for signum in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(signum, self._handle_signal, signum)
            except NotImplementedError:
                # add_signal_handler is unavailable on Windows event loops
                signal.signal(signum, lambda s, frame: loop.call_soon_threadsafe(self._handle_signal, s))

    def _handle_signal(self, signum: int) -> None:
        self.logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        self.service_group.request_shutdown()

    async def run_async(self) -> None:
        """Run both listeners until shutdown.

        Raises:
            ListenerError: if either listener fails or exits unexpectedly.
        """
        self.start_time = datetime.now()
        self._install_signal_handlers(asyncio.get_running_loop())

        self.logger.info(
            f"Serving proxy on {self.config.proxy.host}:{self.config.proxy.port}, "
            f"origin on {self.config.origin.host}:{self.config.origin.port}"
        )

        try:
            await self.service_group.run()
        finally:
            await self.proxy_module.cleanup()
            uptime = (datetime.now() - self.start_time).total_seconds()
            self.logger.info(f"System uptime: {uptime:.1f} seconds")

    def run(self) -> None:
        """Run the system (blocking call)"""
        asyncio.run(self.run_async())


def build_parser():
    """Build the command line parser"""
    import argparse

    parser = argparse.ArgumentParser(description="Video Range Proxy")
    parser.add_argument("--config", type=str, help="Path to configuration file", default=None)
    parser.add_argument("--log-level", type=str, choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Override log level", default=None)
    parser.add_argument("--proxy-port", type=int, help="Port of the range proxy listener", default=None)
    parser.add_argument("--origin-port", type=int, help="Port of the content origin listener", default=None)
    parser.add_argument("--video", type=str, help="Path of the video file served by the origin", default=None)
    parser.add_argument("--origin-url", type=str, help="URL the proxy fetches the video from", default=None)
    parser.add_argument("--strict-ranges", action="store_true", help="Reject unparseable Range headers with 400")
    return parser


def apply_overrides(config: Config, args) -> Config:
    """Apply command line overrides on top of the loaded configuration"""
    if args.log_level:
        config.system.log_level = args.log_level
    if args.proxy_port is not None:
        config.proxy.port = args.proxy_port
    if args.origin_port is not None:
        config.origin.port = args.origin_port
        # only follow the origin port while the origin url was never configured
        if args.origin_url is None and config.proxy.origin_url == ProxyConfig.origin_url:
            config.proxy.origin_url = f"http://localhost:{args.origin_port}/video"
    if args.video:
        config.origin.video_path = args.video
    if args.origin_url:
        config.proxy.origin_url = args.origin_url
    if args.strict_ranges:
        config.proxy.strict_range_parsing = True
    return config


def main(argv: Optional[List[str]] = None):
    """Main entry point for the application"""
    args = build_parser().parse_args(argv)

    config = apply_overrides(Config(args.config), args)
    setup_logging(log_level=config.system.log_level, log_file=config.system.log_file)

    system = RangeProxySystem(config)

    try:
        system.run()
    except ListenerError as e:
        logging.critical(f"Fatal listener failure: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
