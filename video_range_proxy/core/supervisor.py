"""
Service supervision for the Video Range Proxy.

Runs several listeners on one event loop and treats the loss of any of them
as fatal for the whole group.
"""

import asyncio
import logging
from typing import List, Optional

from .errors import ListenerError
from .logging_config import get_error_tracker


class ServiceGroup:
    """Run services concurrently; any unexpected exit stops all of them.

    A service is any object with a ``name`` attribute, an ``async serve()``
    coroutine that runs until the listener stops, and a ``stop()`` method
    asking it to finish.
    """

    def __init__(self, services: List):
        if not services:
            raise ValueError("ServiceGroup needs at least one service")
        self.services = list(services)
        self.logger = logging.getLogger(__name__)
        self.error_tracker = get_error_tracker("service_group")
        self._shutdown_requested = False
        self._failure: Optional[ListenerError] = None

    @property
    def shutdown_requested(self) -> bool:
        return self._shutdown_requested

    def request_shutdown(self) -> None:
        """Ask every service to stop gracefully"""
        if self._shutdown_requested:
            return
        self.logger.info("Shutdown requested, stopping all services...")
        self._shutdown_requested = True
        for service in self.services:
            service.stop()

    async def run(self) -> None:
        """Run all services until shutdown or the first failure.

        Raises:
            ListenerError: if a service raised or returned without a shutdown request.
        """
        tasks = {asyncio.ensure_future(service.serve()): service for service in self.services}
        pending = set(tasks)

        try:
            while pending:
                done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)

                for task in done:
                    service = tasks[task]
                    if task.cancelled():
                        continue

                    exc = task.exception()
                    if exc is not None:
                        self._record_failure(service.name, exc)
                    elif not self._shutdown_requested:
                        self._record_failure(service.name, ListenerError(service.name, "listener exited unexpectedly"))
                    else:
                        self.logger.info(f"Service {service.name} stopped")

                if self._failure is not None and not self._shutdown_requested:
                    # One listener is gone: the rest go down with it
                    self.request_shutdown()
        finally:
            for task in pending:
                task.cancel()
            if pending:
                await asyncio.gather(*pending, return_exceptions=True)

        if self._failure is not None:
            raise self._failure

    def _record_failure(self, service_name: str, exc: BaseException) -> None:
        self.error_tracker.log_error(exc, f"service {service_name}")
        if self._failure is None:
            if isinstance(exc, ListenerError):
                self._failure = exc
            else:
                failure = ListenerError(service_name, f"listener failed: {exc}")
                failure.__cause__ = exc
                self._failure = failure
