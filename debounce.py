# debounce.py
from __future__ import annotations
import asyncio
from typing import Callable, Optional

from logger import log

DEBOUNCE_DELAY = 0.5   # seconds


class Debouncer:
    """
    Holds at most one pending call. Each trigger() replaces the pending one,
    so only the latest callback runs, `delay` seconds after the last trigger.
    """

    def __init__(self, delay: float = DEBOUNCE_DELAY):
        self.delay = delay
        self._handle: Optional[asyncio.TimerHandle] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def trigger(self, callback: Callable[[], None]) -> None:
        self.cancel()
        loop = asyncio.get_running_loop()
        self._handle = loop.call_later(self.delay, self._fire, callback)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _fire(self, callback: Callable[[], None]) -> None:
        self._handle = None
        try:
            callback()
        except Exception as e:
            log.error("Debounced update failed: %s", e)
