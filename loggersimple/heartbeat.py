"""
Heartbeat Scheduler
===================

Background thread which notifies the Logger-Simple server that the
application is online. Heartbeats are sent at a fixed rate, the failure
of an individual heartbeat never stops the schedule.
"""

import contextlib
import logging
import threading
import time
import typing

from .models import DEFAULT_HEARTBEAT_INTERVAL_MS

logger = logging.getLogger(__name__)


class HeartbeatScheduler(threading.Thread):
    """Execute a heartbeat callback at a fixed rate until terminated.

    The first heartbeat is sent as soon as the thread starts, subsequent
    heartbeats are scheduled relative to the start of the previous
    scheduled firing. If a heartbeat takes longer than the interval the
    next one is sent immediately.
    """

    def __init__(
        self,
        heartbeat: typing.Callable[[], typing.Any],
        termination_trigger: threading.Event,
        interval_ms: int = DEFAULT_HEARTBEAT_INTERVAL_MS,
        on_failure: typing.Callable[[Exception], None] | None = None,
        name: str | None = None,
    ) -> None:
        """Initialise a new heartbeat scheduler.

        Parameters
        ----------
        heartbeat : Callable[[], Any]
            function sending a single heartbeat
        termination_trigger : threading.Event
            a threading event which when set declares that the scheduler
            should terminate
        interval_ms : int, optional
            time between heartbeats in milliseconds, by default 5000
        on_failure : Callable[[Exception], None] | None, optional
            called with the exception of each failed heartbeat, by default None
        name : str | None, optional
            name for underlying thread, default None
        """
        super().__init__(name=name, daemon=True)
        self._heartbeat = heartbeat
        self._termination_trigger = termination_trigger
        self._interval: float = interval_ms / 1000
        self._on_failure = on_failure
        self._firings: int = 0

    @property
    def firings(self) -> int:
        """Number of heartbeats attempted so far"""
        return self._firings

    @property
    def state(self) -> typing.Literal["running", "stopped"]:
        return "stopped" if self._termination_trigger.is_set() else "running"

    def stop(self, wait: bool = False, timeout: float | None = None) -> None:
        """Cancel all further heartbeats.

        A heartbeat already in progress is allowed to complete. Calling
        this method on an already stopped scheduler has no effect.

        Parameters
        ----------
        wait : bool, optional
            block until the thread has finished, by default False
        timeout : float | None, optional
            maximum time to wait in seconds if waiting, by default None
        """
        if not self._termination_trigger.is_set():
            logger.debug(f"Stopping heartbeat '{self.name}'")
            self._termination_trigger.set()

        if wait and self.is_alive() and threading.current_thread() is not self:
            self.join(timeout)

    def _fire(self) -> None:
        self._firings += 1
        try:
            self._heartbeat()
        except Exception as e:
            logger.debug(f"Heartbeat {self._firings} failed: {e}")
            if self._on_failure:
                with contextlib.suppress(Exception):
                    self._on_failure(e)

    def run(self) -> None:
        """Send heartbeats until the termination trigger is set"""
        _next_firing: float = time.monotonic()

        while not self._termination_trigger.is_set():
            self._fire()
            _next_firing += self._interval
            if self._termination_trigger.wait(max(_next_firing - time.monotonic(), 0)):
                break
