"""
Logger-Simple Exception Types
=============================

Custom exceptions for handling of Logger-Simple request scenarios.

"""


class LoggerSimpleError(RuntimeError):
    """Base class for all errors raised when talking to the Logger-Simple server"""

    pass


class TransportError(LoggerSimpleError):
    """For failure establishing a connection or receiving a response in time"""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        super().__init__(f"Failed to reach Logger-Simple server at '{url}': {reason}")


class APIError(LoggerSimpleError):
    """For a response from the server which does not report success"""

    def __init__(self, scenario: str, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"{scenario} failed with status {status_code}: {body}")
