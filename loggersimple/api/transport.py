"""
Logger-Simple Transport
=======================

Builds authenticated request URLs for the Logger-Simple server and
sends log entries and heartbeats. Each call is an independent HTTP
request so a single transport can be shared between threads.
"""

import logging

import pydantic

from loggersimple.api.request import DEFAULT_API_TIMEOUT, get, get_text_from_response
from loggersimple.api.url import URL
from loggersimple.models import API_URL, APIResponse, Credentials, LogLevel
from loggersimple.version import __version__

LOGGER_ACTION: str = "logger"
NEW_LOG_REQUEST: str = "new_log"
HEARTBEAT_REQUEST: str = "heartbeat"

logger = logging.getLogger(__name__)


class Transport:
    """Send requests to the Logger-Simple server for a given application."""

    def __init__(
        self,
        credentials: Credentials,
        api_url: str = API_URL,
        timeout: int = DEFAULT_API_TIMEOUT,
    ) -> None:
        """Initialise a transport.

        Parameters
        ----------
        credentials : Credentials
            application identifier and API key
        api_url : str, optional
            base endpoint of the server, by default API_URL
        timeout : int, optional
            timeout in seconds for each request, by default DEFAULT_API_TIMEOUT
        """
        self._credentials = credentials
        self._url = URL(api_url)
        self._timeout = timeout
        self._headers: dict[str, str] = {
            "User-Agent": f"Logger-Simple Python client {__version__}"
        }

    def build_url(
        self,
        action: str,
        request: str,
        level: str | None = None,
        message: str | None = None,
    ) -> str:
        """Construct a fully encoded request URL.

        The level and message are only included if provided.

        Parameters
        ----------
        action : str
            top level operation selector
        request : str
            request type within the action
        level : str | None, optional
            log level
        message : str | None, optional
            log message

        Returns
        -------
        str
            the request URL
        """
        _url = self._url.with_params(
            {
                "action": action,
                "request": request,
                "app_id": self._credentials.app_id,
                "api_key": self._credentials.api_key.get_secret_value(),
                "logLevel": level,
                "message": message,
            }
        )
        return f"{_url}"

    def send_get(self, url: str) -> APIResponse:
        """Send a GET request to the given URL.

        Raises
        ------
        TransportError
            if the server could not be reached in time
        """
        _display_url = f"{URL(url).redacted('api_key')}"
        return get(
            url, headers=self._headers, timeout=self._timeout, display_url=_display_url
        )

    @pydantic.validate_call
    def send_log(self, level: LogLevel, message: str) -> str:
        """Send a log entry to the server.

        Parameters
        ----------
        level : 'success' | 'info' | 'error' | 'critical'
            level of the log entry
        message : str
            message to record

        Returns
        -------
        str
            raw response body

        Raises
        ------
        TransportError
            if the server could not be reached in time
        APIError
            if the server does not report success
        """
        _url = self.build_url(LOGGER_ACTION, NEW_LOG_REQUEST, level, message)
        logger.debug(f"Sending '{level}' log for application '{self._credentials.app_id}'")
        return get_text_from_response(f"Sending '{level}' log", self.send_get(_url))

    def send_heartbeat(self) -> str:
        """Notify the server that this application is online.

        Returns
        -------
        str
            raw response body

        Raises
        ------
        TransportError
            if the server could not be reached in time
        APIError
            if the server does not report success
        """
        _url = self.build_url(LOGGER_ACTION, HEARTBEAT_REQUEST)
        return get_text_from_response("Heartbeat", self.send_get(_url))

    def success(self, message: str) -> str:
        return self.send_log("success", message)

    def info(self, message: str) -> str:
        return self.send_log("info", message)

    def error(self, message: str) -> str:
        return self.send_log("error", message)

    def critical(self, message: str) -> str:
        return self.send_log("critical", message)
