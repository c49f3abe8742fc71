"""Logger-Simple Python API."""

from loggersimple.crash import CrashHandler
from loggersimple.exception import APIError, LoggerSimpleError, TransportError
from loggersimple.handler import Handler
from loggersimple.logger import Logger
from loggersimple.version import __version__

__all__ = [
    "APIError",
    "CrashHandler",
    "Handler",
    "Logger",
    "LoggerSimpleError",
    "TransportError",
    "__version__",
]
