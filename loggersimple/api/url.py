"""URL Library.

Module contains classes for easier handling of URLs.

"""

try:
    from typing import Self
except ImportError:
    from typing_extensions import Self
import copy
import urllib.parse

import pydantic

REDACTED: str = "***"


class URL:
    """URL class for ease of construction and use of server endpoints."""

    @pydantic.validate_call
    def __init__(self, url: str | pydantic.AnyHttpUrl) -> None:
        """Initialise a url from string form."""
        _parsed_url = urllib.parse.urlparse(f"{url}")
        self._scheme: str = _parsed_url.scheme
        self._path: str = _parsed_url.path
        self._host: str | None = _parsed_url.hostname
        self._port: int | None = _parsed_url.port
        self._fragment: str = _parsed_url.fragment
        self._query: list[tuple[str, str]] = urllib.parse.parse_qsl(
            _parsed_url.query, keep_blank_values=True
        )

    def __repr__(self) -> str:
        """Representation of URL"""
        _out_str = f"{self.__class__.__module__}.{self.__class__.__qualname__}"
        return f"{_out_str}(url={self.__str__()!r})"

    def with_params(self, params: dict[str, str | None]) -> Self:
        """Return a copy of this URL with the given query parameters appended.

        Parameters with a value of None are omitted, the remaining
        parameters keep the order in which they are given.

        Parameters
        ----------
        params : dict[str, str | None]
            query parameters to append

        Returns
        -------
        URL
            new URL instance
        """
        _new = copy.deepcopy(self)
        _new._query += [(key, f"{value}") for key, value in params.items() if value is not None]
        return _new

    def redacted(self, *keys: str) -> Self:
        """Return a copy with the values of the given query parameters masked"""
        _new = copy.deepcopy(self)
        _new._query = [
            (key, REDACTED if key in keys else value) for key, value in self._query
        ]
        return _new

    @property
    def scheme(self) -> str:
        return self._scheme

    @property
    def path(self) -> str:
        return self._path

    @property
    def hostname(self) -> str | None:
        return self._host

    @property
    def fragment(self) -> str:
        return self._fragment

    @property
    def port(self) -> int | None:
        return self._port

    @property
    def query(self) -> str:
        """UTF-8 form encoded query string, spaces become '+'"""
        return urllib.parse.urlencode(
            self._query,
            quote_via=urllib.parse.quote_plus,
            encoding="utf-8",
            errors="replace",
        )

    def __str__(self) -> str:
        """Construct string form of the URL"""
        _out_str: str = ""
        if self.scheme:
            _out_str += f"{self.scheme}://"
        if self.hostname:
            _out_str += self.hostname
        if self.port:
            _out_str += f":{self.port}"
        if self.path:
            _out_str += self.path
        if self._query:
            _out_str += f"?{self.query}"
        if self.fragment:
            _out_str += f"#{self.fragment}"
        return _out_str
