"""Canned HTTP responses and a stub transport for client tests.

Responses are real requests.Response objects backed by an in-memory stream,
so iter_content/content/close behave the way they do on the wire.
"""

import io
from unittest.mock import MagicMock

import requests


def make_response(status_code=200, body=b"", request=None, headers=None):
    """Builds a requests.Response whose body is streamed from memory."""
    if isinstance(body, str):
        body = body.encode("utf-8")

    response = requests.Response()
    response.status_code = status_code
    response.raw = io.BytesIO(body)
    response.headers["Content-Type"] = "application/json"
    if headers:
        response.headers.update(headers)
    response.encoding = "utf-8"
    response.request = request
    response.url = request.url if request is not None else None
    return response


def track_close(response):
    """Wraps response.close in a mock so tests can count calls."""
    response.close = MagicMock(wraps=response.close)
    return response


def stub_session(status_code=200, body=b"", headers=None, error=None, handler=None):
    """
    Returns a requests.Session whose send() never hits the network.

    Args:
        status_code: Status of every canned response
        body: Body of every canned response
        headers: Extra response headers
        error: Exception raised by send() instead of returning a response
        handler: Optional callable(request) -> (status_code, body) used instead of
            the fixed status/body

    The session records every response it handed out in session.responses.
    """
    session = requests.Session()
    session.responses = []

    def send(request, **kwargs):
        if error is not None:
            raise error
        status, payload = handler(request) if handler is not None else (status_code, body)
        response = track_close(make_response(status, payload, request=request, headers=headers))
        session.responses.append(response)
        return response

    session.send = MagicMock(side_effect=send)
    return session
