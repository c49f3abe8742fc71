import http.server
import logging
import threading
import time
import typing
import urllib.parse

import pytest
import requests

from loggersimple import Handler
from loggersimple.api.transport import Transport

REQUESTS_GET = requests.get
SUCCESS_BODY: str = '{"success":true,"message":"ok"}'


def _wait_for(condition, timeout: float = 2) -> bool:
    _start = time.monotonic()
    while time.monotonic() - _start < timeout:
        if condition():
            return True
        time.sleep(0.01)
    return False


@pytest.fixture
def python_logger(create_logger) -> logging.Logger:
    _handler = Handler(create_logger(heartbeat_interval_ms=60000))
    _logger = logging.getLogger("test_handler")
    _logger.setLevel(logging.DEBUG)
    _logger.addHandler(_handler)
    yield _logger
    _logger.removeHandler(_handler)


@pytest.mark.parametrize(
    "level,expected",
    [
        (logging.DEBUG, "info"),
        (logging.INFO, "info"),
        (logging.WARNING, "info"),
        (logging.ERROR, "error"),
        (logging.CRITICAL, "critical"),
    ],
    ids=("debug", "info", "warning", "error", "critical"),
)
def test_record_levels(python_logger, mock_server, level: int, expected: str) -> None:
    python_logger.log(level, "Hello %s", "world")
    assert mock_server.logs[-1]["params"]["logLevel"] == expected
    assert mock_server.logs[-1]["params"]["message"] == "Hello world"


def test_own_records_skipped(create_logger, mock_server) -> None:
    _handler = Handler(create_logger(heartbeat_interval_ms=60000))
    _logger = logging.getLogger("loggersimple.test")
    _logger.addHandler(_handler)
    try:
        _logger.error("Internal message")
    finally:
        _logger.removeHandler(_handler)
    assert not mock_server.logs


def test_send_failure_handled(python_logger, mock_server, monkeypatch) -> None:
    _errors: list[logging.LogRecord] = []
    monkeypatch.setattr(Handler, "handleError", lambda self, record: _errors.append(record))
    mock_server.respond(500, "Internal Server Error")
    python_logger.error("Hello")
    assert len(_errors) == 1


def test_records_during_send_dropped(python_logger, mock_server, monkeypatch) -> None:
    _mock_get = requests.get

    def _logging_get(url: str, **kwargs):
        logging.getLogger("app.during_send").warning("Sending %s", url)
        logging.getLogger("urllib3.connectionpool").debug("Starting new HTTPS connection")
        return _mock_get(url, **kwargs)

    monkeypatch.setattr(requests, "get", _logging_get)
    logging.getLogger("app.during_send").addHandler(python_logger.handlers[0])
    try:
        python_logger.info("Only record")
    finally:
        logging.getLogger("app.during_send").removeHandler(python_logger.handlers[0])
    assert len(mock_server.logs) == 1
    assert mock_server.logs[0]["params"]["message"] == "Only record"


@pytest.mark.parametrize(
    "name",
    ("urllib3", "urllib3.connectionpool", "requests", "charset_normalizer"),
)
def test_http_library_records_skipped(name: str) -> None:
    _record = logging.LogRecord(name, logging.DEBUG, __file__, 1, "message", None, None)
    assert Handler.ignored(_record)
    assert not Handler.ignored(
        logging.LogRecord("urllib3_extra", logging.DEBUG, __file__, 1, "message", None, None)
    )


class _SuccessRequestHandler(http.server.BaseHTTPRequestHandler):
    requests_received: list[str] = []

    def do_GET(self) -> None:
        self.requests_received.append(self.path)
        _body = SUCCESS_BODY.encode()
        self.send_response(200)
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", f"{len(_body)}")
        self.end_headers()
        self.wfile.write(_body)

    def log_message(self, *_, **__) -> None:
        pass


@pytest.fixture
def local_server() -> typing.Generator[str, None, None]:
    _SuccessRequestHandler.requests_received = []
    _server = http.server.HTTPServer(("127.0.0.1", 0), _SuccessRequestHandler)
    _thread = threading.Thread(target=_server.serve_forever, daemon=True)
    _thread.start()
    yield f"http://127.0.0.1:{_server.server_port}/java/"
    _server.shutdown()
    _server.server_close()


def test_root_handler_with_http_debug_logging(
    create_logger, mock_server, local_server: str, monkeypatch
) -> None:
    _client = create_logger(heartbeat_interval_ms=60000, crash_handler=False)
    assert _wait_for(lambda: mock_server.heartbeats)
    _client.stop_online_status_check()

    # Send through the real HTTP stack so urllib3 writes its own debug records
    monkeypatch.setattr(requests, "get", REQUESTS_GET)
    monkeypatch.setattr(_client, "_transport", Transport(_client._credentials, api_url=local_server))

    _handler = Handler(_client)
    _root = logging.getLogger()
    _root_level = _root.level
    _root.setLevel(logging.DEBUG)
    _root.addHandler(_handler)
    try:
        logging.getLogger("app").info("one record")
    finally:
        _root.removeHandler(_handler)
        _root.setLevel(_root_level)

    assert len(_SuccessRequestHandler.requests_received) == 1
    _params = dict(
        urllib.parse.parse_qsl(urllib.parse.urlparse(_SuccessRequestHandler.requests_received[0]).query)
    )
    assert _params["message"] == "one record"
    assert _params["logLevel"] == "info"
