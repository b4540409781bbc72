"""
FastAPI listeners for the Video Range Proxy.

This module builds the proxy and origin applications and runs each of them
on its own uvicorn server.
"""

import contextlib
import logging
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import uvicorn

from .. import __version__
from ..core.config import Config
from ..core.errors import ListenerError
from ..origin.routes import create_origin_routes, create_origin_controller
from ..proxy.integration import ProxyModule
from ..proxy.presentation.schemas import HealthResponse, ProxyStatusResponse


def create_base_app(title: str, service_name: str, enable_cors: bool = True) -> FastAPI:
    """Create a FastAPI app with CORS and a health check"""
    app = FastAPI(title=title, version=__version__)

    if enable_cors:
        app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_credentials=True, allow_methods=["*"], allow_headers=["*"])

    @app.get("/health", response_model=HealthResponse)
    async def health_check():
        return HealthResponse(status="healthy", service=service_name, timestamp=datetime.now())

    return app


def create_proxy_app(config: Config, proxy_module: ProxyModule) -> FastAPI:
    """Create the range proxy (main) application"""
    app = create_base_app("Video Range Proxy", "proxy", enable_cors=config.system.enable_cors)
    app.include_router(proxy_module.get_api_routes())

    @app.get("/status", response_model=ProxyStatusResponse)
    async def proxy_status():
        """Chunking settings and error counters of the range proxy"""
        return ProxyStatusResponse(**proxy_module.get_module_status())

    return app


def create_origin_app(config: Config) -> FastAPI:
    """Create the content origin (file) application"""
    app = create_base_app("Video Content Origin", "origin", enable_cors=config.system.enable_cors)
    app.include_router(create_origin_routes(create_origin_controller(config.origin)))
    return app


class _UnmanagedSignalServer(uvicorn.Server):
    """uvicorn server that leaves signal handling to the supervisor"""

    def install_signal_handlers(self) -> None:
        pass

    @contextlib.contextmanager
    def capture_signals(self):
        yield


class ServiceServer:
    """One uvicorn listener for a FastAPI application"""

    def __init__(self, name: str, app: FastAPI, host: str, port: int, log_level: str = "info"):
        self.name = name
        self.app = app
        self.host = host
        self.port = port
        self.logger = logging.getLogger(f"{__name__}.{name}")

        # log_config=None keeps the logging set up by setup_logging
        server_config = uvicorn.Config(app, host=host, port=port, log_level=log_level.lower(), log_config=None)
        self._server = _UnmanagedSignalServer(server_config)

        self.running = False

    async def serve(self) -> None:
        """Run the listener until it is stopped.

        Raises:
            ListenerError: if the listener cannot bind or start.
        """
        self.logger.info(f"Starting {self.name} listener on {self.host}:{self.port}")
        self.running = True

        try:
            await self._server.serve()
        except SystemExit as e:
            # uvicorn exits the process when binding fails
            raise ListenerError(self.name, f"failed to start on {self.host}:{self.port}") from e
        finally:
            self.running = False

        self.logger.info(f"{self.name} listener stopped")

    def stop(self) -> None:
        """Ask the listener to finish serving"""
        self._server.should_exit = True

    def is_running(self) -> bool:
        return self.running
