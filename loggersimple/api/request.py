"""
Logger-Simple API Connection
============================

Provides methods for sending requests to the Logger-Simple server.
Requests are sent once, a failed request is reported to the caller
rather than retried.
"""

import http
import logging

import requests

from loggersimple.exception import APIError, TransportError
from loggersimple.models import APIResponse

DEFAULT_API_TIMEOUT: int = 10

logger = logging.getLogger(__name__)


def get(
    url: str,
    headers: dict[str, str] | None = None,
    timeout: int = DEFAULT_API_TIMEOUT,
    display_url: str | None = None,
) -> APIResponse:
    """HTTP GET

    Parameters
    ----------
    url : str
        URL to send the request to
    headers : dict[str, str], optional
        headers for the get request
    timeout : int, optional
        timeout for both connection and response, by default DEFAULT_API_TIMEOUT
    display_url : str, optional
        form of the URL to use in logs and errors, by default the URL itself

    Returns
    -------
    APIResponse
        status code and body of the server response

    Raises
    ------
    TransportError
        if the server could not be reached or the request timed out
    """
    _display_url: str = display_url or url
    logger.debug(f"GET: {_display_url}")

    try:
        _response = requests.get(url, headers=headers, timeout=(timeout, timeout))
    except requests.exceptions.RequestException as e:
        raise TransportError(_display_url, f"{e.__class__.__name__}") from e

    return APIResponse(status_code=_response.status_code, body=_response.text)


def get_text_from_response(scenario: str, response: APIResponse) -> str:
    """Return the body of a response if it reports success.

    A response is successful only if it has status 200 and the body
    contains the success marker, no other parsing of the body occurs.

    Parameters
    ----------
    scenario : str
        description of the request, used in the error message
    response : APIResponse
        server response

    Returns
    -------
    str
        raw response body

    Raises
    ------
    APIError
        if the response does not report success
    """
    if response.successful:
        return response.body

    if response.status_code != http.HTTPStatus.OK:
        logger.debug(f"{scenario} returned status {response.status_code}")

    raise APIError(scenario, response.status_code, response.body)
