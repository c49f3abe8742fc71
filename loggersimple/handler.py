import logging
import threading

from .logger import Logger
from .models import LogLevel

# Loggers written to while a record is being sent
IGNORED_LOGGERS: tuple[str, ...] = (
    "loggersimple",
    "urllib3",
    "requests",
    "charset_normalizer",
)


class Handler(logging.Handler):
    """
    Class for forwarding Python log records to Logger-Simple
    """
    def __init__(self, client: Logger, level: int = logging.NOTSET) -> None:
        logging.Handler.__init__(self, level)
        self._client = client
        self._sending = threading.local()

    @staticmethod
    def log_level(record: logging.LogRecord) -> LogLevel:
        if record.levelno >= logging.CRITICAL:
            return "critical"
        if record.levelno >= logging.ERROR:
            return "error"
        return "info"

    @staticmethod
    def ignored(record: logging.LogRecord) -> bool:
        return any(
            record.name == name or record.name.startswith(f"{name}.")
            for name in IGNORED_LOGGERS
        )

    def emit(self, record: logging.LogRecord) -> None:
        # Records emitted by this thread during a send are dropped
        if self.ignored(record) or getattr(self._sending, "active", False):
            return

        msg = self.format(record)

        self._sending.active = True
        try:
            self._client.log(self.log_level(record), msg)
        except Exception:
            self.handleError(record)
        finally:
            self._sending.active = False
