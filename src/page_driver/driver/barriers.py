"""
Barriers - Wait for page activity triggered by an action to settle.

``NetworkActivityMonitor`` receives request notifications from the host
and fans them out to the ``RequestBarrier`` instances created for the
commands in flight. ``PageUnloadBarrier`` is shared by all commands and
tracks whether the page is navigating away.
"""

import asyncio
import logging
from typing import Hashable, Set

from page_driver.config import DriverSettings
from page_driver.interfaces import IBarrier

logger = logging.getLogger(__name__)


class RequestBarrier(IBarrier):
    """
    Waits until the requests it has seen are finished.
    
    A barrier only tracks requests started after it was created. Waiting
    is bounded by ``barrier_timeout_ms``; requests still pending at that
    point are logged and otherwise ignored.
    """
    
    def __init__(self, settings: DriverSettings, monitor: "NetworkActivityMonitor | None" = None):
        self._timeout_ms = settings.barrier_timeout_ms
        self._watch_ms = settings.barrier_watch_ms
        self._monitor = monitor
        self._pending: Set[Hashable] = set()
        self._idle = asyncio.Event()
        self._idle.set()
    
    @property
    def pending_count(self) -> int:
        return len(self._pending)
    
    def request_started(self, request_id: Hashable) -> None:
        self._pending.add(request_id)
        self._idle.clear()
    
    def request_finished(self, request_id: Hashable) -> None:
        self._pending.discard(request_id)
        if not self._pending:
            self._idle.set()
    
    async def wait(self) -> None:
        """Wait for pending requests, then stop listening to the monitor."""
        try:
            if self._watch_ms:
                await asyncio.sleep(self._watch_ms / 1000)
            try:
                await asyncio.wait_for(self._idle.wait(), timeout=self._timeout_ms / 1000)
            except asyncio.TimeoutError:
                logger.warning(
                    f"{self.pending_count} request(s) still pending after {self._timeout_ms}ms"
                )
        finally:
            self.close()
    
    def close(self) -> None:
        """Stop receiving request events from the monitor."""
        if self._monitor is not None:
            self._monitor.discard(self)


class NetworkActivityMonitor:
    """
    Hub between the host's network hooks and per-command barriers.
    
    Example:
        >>> monitor = NetworkActivityMonitor(settings.driver)
        >>> context = DriverContext(..., request_barrier_factory=monitor.create_barrier)
        >>> monitor.request_started("req-1")   # called by the host
    """
    
    def __init__(self, settings: DriverSettings):
        self._settings = settings
        self._barriers: Set[RequestBarrier] = set()
    
    @property
    def barrier_count(self) -> int:
        return len(self._barriers)
    
    def create_barrier(self) -> RequestBarrier:
        barrier = RequestBarrier(self._settings, monitor=self)
        self._barriers.add(barrier)
        return barrier
    
    def discard(self, barrier: RequestBarrier) -> None:
        self._barriers.discard(barrier)
    
    def request_started(self, request_id: Hashable) -> None:
        for barrier in list(self._barriers):
            barrier.request_started(request_id)
    
    def request_finished(self, request_id: Hashable) -> None:
        for barrier in list(self._barriers):
            barrier.request_finished(request_id)


class PageUnloadBarrier(IBarrier):
    """
    Waits while the page is unloading.
    
    The host calls ``unload_started`` when navigation away from the page
    begins and ``unload_finished`` if it is cancelled or completes.
    """
    
    def __init__(self, settings: DriverSettings):
        self._timeout_ms = settings.page_unload_timeout_ms
        self._loaded = asyncio.Event()
        self._loaded.set()
    
    @property
    def unloading(self) -> bool:
        return not self._loaded.is_set()
    
    def unload_started(self) -> None:
        self._loaded.clear()
    
    def unload_finished(self) -> None:
        self._loaded.set()
    
    async def wait(self) -> None:
        if not self.unloading:
            return
        try:
            await asyncio.wait_for(self._loaded.wait(), timeout=self._timeout_ms / 1000)
        except asyncio.TimeoutError:
            logger.warning(f"Page is still unloading after {self._timeout_ms}ms")
