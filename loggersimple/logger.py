"""
Logger-Simple Logger
====================

Main class for sending log entries to the Logger-Simple server during
code execution. This forms the central API for users.
"""

import contextlib
import logging
import threading
import traceback as tb
import typing

import pydantic

from .api.transport import Transport
from .config.user import LoggerSimpleConfiguration
from .crash import CrashHandler
from .exception import LoggerSimpleError
from .heartbeat import HeartbeatScheduler
from .models import Credentials, HeartbeatConfig, LogLevel
from .utilities import prettify_pydantic

try:
    from typing import Self
except ImportError:
    from typing_extensions import Self  # noqa: F401

logger = logging.getLogger(__name__)


class Logger:
    """Send log entries and heartbeats for an application.

    Creating a Logger immediately starts sending heartbeats in the
    background and, unless disabled, installs a crash handler which reports
    any uncaught exception as a critical log entry before exiting the process.
    Logging calls are synchronous and raise on failure.
    """

    @pydantic.validate_call
    def __init__(
        self,
        app_id: str | None = None,
        api_key: str | None = None,
        heartbeat_interval_ms: int | None = None,
        *,
        on_heartbeat_failure: typing.Callable[[Exception], None] | None = None,
        crash_handler: bool = True,
        debug: bool | None = None,
    ) -> None:
        """Initialise a new Logger

        Parameters
        ----------
        app_id : str, optional
            identifier of the application, if not given this is read
            from the environment or the configuration file
        api_key : str, optional
            API key of the application, if not given this is read
            from the environment or the configuration file
        heartbeat_interval_ms : int, optional
            time between heartbeats in milliseconds, by default uses the
            configuration file setting, values of zero or less use 5000
        on_heartbeat_failure : Callable[[Exception], None], optional
            called with the exception of each failed background heartbeat,
            by default failures are discarded
        crash_handler : bool, optional
            install the process wide crash handler, default is True
        debug : bool, optional
            run in debug mode, by default uses the configuration file setting
        """
        self._user_config: LoggerSimpleConfiguration = LoggerSimpleConfiguration.fetch(
            app_id=app_id,
            api_key=api_key,
            heartbeat_interval_ms=heartbeat_interval_ms,
        )

        logging.getLogger("loggersimple").setLevel(
            logging.DEBUG
            if (debug is not None and debug)
            or (debug is None and self._user_config.client.debug)
            else logging.INFO
        )

        self._credentials: Credentials = self._user_config.credentials
        self._heartbeat_config: HeartbeatConfig = self._user_config.heartbeat
        self._transport = Transport(self._credentials)
        self._heartbeat_termination_trigger = threading.Event()
        self._heartbeat_thread = HeartbeatScheduler(
            self._transport.send_heartbeat,
            termination_trigger=self._heartbeat_termination_trigger,
            interval_ms=self._heartbeat_config.interval_ms,
            on_failure=on_heartbeat_failure,
            name=f"{self._credentials.app_id}_heartbeat",
        )
        self._crash_handler: CrashHandler | None = (
            CrashHandler(self.log_critical) if crash_handler else None
        )

        logger.debug(
            f"Starting heartbeat every {self._heartbeat_config.interval_ms}ms "
            f"for application '{self._credentials.app_id}'"
        )
        self._heartbeat_thread.start()

        if self._crash_handler:
            self._crash_handler.register()

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: typing.Type[BaseException] | None,
        value: BaseException,
        traceback: typing.Type[BaseException] | BaseException | None,
    ) -> None:
        if exc_type:
            _traceback_out: list[str] = tb.format_exception(exc_type, value, traceback)
            # The original exception propagates once the block is left
            with contextlib.suppress(LoggerSimpleError):
                self.log_critical("".join(_traceback_out))

        self.close()

    @property
    def app_id(self) -> str:
        return self._credentials.app_id

    @property
    def heartbeat_interval_ms(self) -> int:
        """Effective interval between heartbeats in milliseconds"""
        return self._heartbeat_config.interval_ms

    @property
    def online_status_check_active(self) -> bool:
        """Whether background heartbeats are still being sent"""
        return self._heartbeat_thread.state == "running"

    @property
    def heartbeat_count(self) -> int:
        """Number of background heartbeats attempted so far"""
        return self._heartbeat_thread.firings

    @prettify_pydantic
    @pydantic.validate_call
    def log(self, level: LogLevel, message: str) -> str:
        """Send a log entry to the server

        Parameters
        ----------
        level : 'success' | 'info' | 'error' | 'critical'
            level of the log entry
        message : str
            message to record

        Returns
        -------
        str
            raw response from the server

        Raises
        ------
        TransportError
            if the server could not be reached in time
        APIError
            if the server does not report success
        """
        return self._transport.send_log(level, message)

    def log_success(self, message: str) -> str:
        """Send a log entry with level 'success'"""
        return self.log("success", message)

    def log_info(self, message: str) -> str:
        """Send a log entry with level 'info'"""
        return self.log("info", message)

    def log_error(self, message: str) -> str:
        """Send a log entry with level 'error'"""
        return self.log("error", message)

    def log_critical(self, message: str) -> str:
        """Send a log entry with level 'critical'"""
        return self.log("critical", message)

    def send_heartbeat(self) -> str:
        """Notify the server that the application is online

        Unlike background heartbeats, failures are raised to the caller.

        Returns
        -------
        str
            raw response from the server
        """
        return self._transport.send_heartbeat()

    def stop_online_status_check(self) -> None:
        """Stop sending background heartbeats

        This cannot be undone, a new Logger is required to resume heartbeats.
        Calls made after the first have no effect.
        """
        self._heartbeat_thread.stop()

    def close(self) -> None:
        """Stop background heartbeats and remove the crash handler"""
        self._heartbeat_thread.stop(wait=True, timeout=1)
        if self._crash_handler:
            self._crash_handler.unregister()
