import logging
import threading
import typing
import urllib.parse

import pytest
import requests

import loggersimple.config.user as ls_cfg
from loggersimple import Logger
import loggersimple.crash as ls_crash

SUCCESS_BODY: str = '{"success":true,"message":"ok"}'


def pytest_addoption(parser):
    parser.addoption("--debug-loggersimple", action="store_true", default=False)


class MockResponse:
    def __init__(self, status_code: int, text: str) -> None:
        self.status_code = status_code
        self.text = text


class MockServer:
    """Records requests in place of the Logger-Simple server"""

    def __init__(self) -> None:
        self.requests: list[dict[str, typing.Any]] = []
        self.status_code: int = 200
        self.body: str = SUCCESS_BODY
        self.exception: Exception | None = None
        self._lock = threading.Lock()

    def respond(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        self.exception = None

    def fail_with(self, exception: Exception) -> None:
        self.exception = exception

    def get(self, url: str, **kwargs) -> MockResponse:
        _query = dict(urllib.parse.parse_qsl(urllib.parse.urlparse(url).query))
        with self._lock:
            self.requests.append({"url": url, "params": _query, **kwargs})
        if self.exception:
            raise self.exception
        return MockResponse(self.status_code, self.body)

    def requests_of_type(self, request: str) -> list[dict[str, typing.Any]]:
        with self._lock:
            return [r for r in self.requests if r["params"].get("request") == request]

    @property
    def heartbeats(self) -> list[dict[str, typing.Any]]:
        return self.requests_of_type("heartbeat")

    @property
    def logs(self) -> list[dict[str, typing.Any]]:
        return self.requests_of_type("new_log")


@pytest.fixture(autouse=True)
def mock_server(monkeypatch: pytest.MonkeyPatch) -> MockServer:
    _server = MockServer()
    monkeypatch.setattr(requests, "get", _server.get)
    return _server


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    monkeypatch.delenv("LOGGER_SIMPLE_APP_ID", raising=False)
    monkeypatch.delenv("LOGGER_SIMPLE_API_KEY", raising=False)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", f"{tmp_path}")
    ls_cfg.LoggerSimpleConfiguration.config_file.cache_clear()
    yield
    ls_cfg.LoggerSimpleConfiguration.config_file.cache_clear()


@pytest.fixture(autouse=True)
def restore_exception_hooks() -> None:
    yield
    if _handler := ls_crash.active_handler():
        _handler.unregister()


@pytest.fixture
def process_exits(monkeypatch: pytest.MonkeyPatch) -> list[int]:
    """Record exit requests from the crash handler instead of exiting"""
    _exits: list[int] = []
    monkeypatch.setattr(
        ls_crash.CrashHandler,
        "_terminate",
        lambda self: _exits.append(self._exit_status),
    )
    return _exits


@pytest.fixture
def create_logger(process_exits) -> typing.Generator[typing.Callable, None, None]:
    _loggers = []

    def _create(*args, **kwargs) -> Logger:
        kwargs.setdefault("app_id", "test-app")
        kwargs.setdefault("api_key", "test-key")
        _logger = Logger(*args, **kwargs)
        _loggers.append(_logger)
        return _logger

    yield _create

    for _logger in _loggers:
        _logger.close()


@pytest.fixture(autouse=True)
def setup_logging(pytestconfig) -> None:
    logging.getLogger("loggersimple").setLevel(
        logging.DEBUG
        if pytestconfig.getoption("debug_loggersimple")
        else logging.WARNING
    )
