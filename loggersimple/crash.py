"""
Crash Handler
=============

Reports any exception left unhandled by the host application to the
Logger-Simple server as a critical log entry, then terminates the process.

Only one crash handler is active per process. Registering a handler
replaces the one registered before it, unregistering the active handler
restores the hooks which were in place before any crash handler.
"""

import logging
import os
import sys
import threading
import traceback as tb
import types
import typing

import click

EXIT_STATUS: int = 1

logger = logging.getLogger(__name__)

_registry_lock = threading.Lock()
_active_handler: "CrashHandler | None" = None
_original_hooks: tuple[typing.Callable, typing.Callable] | None = None


def active_handler() -> "CrashHandler | None":
    """Returns the crash handler currently registered for this process"""
    return _active_handler


class CrashHandler:
    """Process wide fallback for uncaught exceptions."""

    def __init__(
        self,
        log_critical: typing.Callable[[str], typing.Any],
        exit_status: int = EXIT_STATUS,
    ) -> None:
        """Initialise a crash handler.

        Parameters
        ----------
        log_critical : Callable[[str], Any]
            function sending a critical log entry with the given message
        exit_status : int, optional
            status the process exits with, by default 1
        """
        self._log_critical = log_critical
        self._exit_status = exit_status

    @property
    def registered(self) -> bool:
        return _active_handler is self

    def register(self) -> None:
        """Install this handler for the main thread and all other threads"""
        global _active_handler, _original_hooks

        with _registry_lock:
            if _active_handler is None:
                _original_hooks = (sys.excepthook, threading.excepthook)
            elif _active_handler is not self:
                logger.debug("Replacing previously registered crash handler")
            sys.excepthook = self._handle_exception
            threading.excepthook = self._handle_thread_exception
            _active_handler = self

    def unregister(self) -> None:
        """Restore the exception hooks present before registration.

        Has no effect if this handler has since been replaced.
        """
        global _active_handler, _original_hooks

        with _registry_lock:
            if _active_handler is not self:
                return
            if _original_hooks:
                sys.excepthook, threading.excepthook = _original_hooks
            _active_handler = None
            _original_hooks = None

    def _handle_exception(
        self,
        exc_type: type[BaseException],
        value: BaseException,
        traceback: types.TracebackType | None,
    ) -> None:
        _traceback_out: list[str] = tb.format_exception(exc_type, value, traceback)
        click.echo("".join(_traceback_out), err=True, nl=False)

        try:
            self._log_critical(f"Uncaught Exception - {exc_type.__name__}: {value}")
        except Exception as e:
            click.secho(
                f"[loggersimple] Failed to send critical log: {e}",
                fg="red",
                bold=True,
                err=True,
            )
        finally:
            self._terminate()

    def _handle_thread_exception(self, args: threading.ExceptHookArgs) -> None:
        # Mirrors the default thread hook, a thread calling sys.exit is not a crash
        if args.exc_type is SystemExit:
            return
        self._handle_exception(args.exc_type, args.exc_value, args.exc_traceback)

    def _terminate(self) -> None:
        """Exit the process immediately, this may be called from any thread"""
        for _stream in (sys.stdout, sys.stderr):
            if _stream:
                _stream.flush()
        os._exit(self._exit_status)
