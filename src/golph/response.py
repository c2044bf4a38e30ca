#-
# #%L
# Contrast AI SmartFix
# %%
# Copyright (C) 2025 Contrast Security, Inc.
# %%
# Contact: support@contrastsecurity.com
# License: Commercial
# NOTICE: This Software and the patented inventions embodied within may only be
# used as part of Contrast Security's commercial offerings. Even though it is
# made available through public repositories, use of this Software is subject to
# the applicable End User Licensing Agreement found at
# https://www.contrastsecurity.com/enduser-terms-0317a or as otherwise agreed
# between Contrast Security and the End User. The Software may not be reverse
# engineered, modified, repackaged, sold, redistributed or otherwise used in a
# way not consistent with the End User License Agreement.
# #L%
#

from typing import Optional

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError

from golph.errors import ErrorResponse, ResponseDecodeError
from golph.models import Cursor

# Upper bound on how much of an error body is kept for decoding
MAX_ERROR_BODY_BYTES = 1024 * 1024

CHUNK_SIZE = 64 * 1024


class Response:
    """
    Wraps the requests.Response returned by the transport.

    Attribute access that is not answered here (status_code, headers, url, ...)
    is delegated to the wrapped response.
    """

    def __init__(self, http_response: requests.Response):
        self.http_response = http_response

        # Monitoring URI
        self.monitor = ""

        # Pagination cursor, set by the resource service that understands the envelope
        self.cursor: Optional[Cursor] = None

        # Decoded body, when the caller asked for one
        self.data = None

    def __getattr__(self, name):
        if name == "http_response":
            raise AttributeError(name)
        return getattr(self.http_response, name)

    def __repr__(self):
        return f"<golph.Response [{self.http_response.status_code}]>"


class ErrorEnvelope(BaseModel):
    """JSON body of a non-2xx response. Only the message is kept."""

    message: Optional[str] = None


# A JSON null body decodes to None and is treated like an empty body
_ERROR_ENVELOPE = TypeAdapter(Optional[ErrorEnvelope])


def read_body(http_response: requests.Response, limit: Optional[int] = None) -> bytes:
    """Reads the whole body, keeping at most limit bytes.

    The stream is always consumed to the end so the connection can be reused.
    """
    buffer = bytearray()
    for chunk in http_response.iter_content(chunk_size=CHUNK_SIZE):
        if limit is None:
            buffer.extend(chunk)
        elif len(buffer) < limit:
            buffer.extend(chunk[:limit - len(buffer)])
    return bytes(buffer)


def drain(http_response: requests.Response):
    """Consumes and discards the rest of the body."""
    for _ in http_response.iter_content(chunk_size=CHUNK_SIZE):
        pass


def check_response(response):
    """
    Checks the API response for errors and raises them if present.

    A response is an error if its status code is outside 200..299. Error bodies
    are expected to be empty, JSON null, or a JSON object with an optional
    "message" field. Invalid UTF-8 in the body is replaced with U+FFFD.

    Args:
        response: A Response wrapper or a bare requests.Response

    Raises:
        ErrorResponse: For a non-2xx status with an empty or JSON body
        ResponseDecodeError: For a non-2xx status whose body is not a JSON error object
    """
    if not isinstance(response, Response):
        response = Response(response)

    status_code = response.http_response.status_code
    if 200 <= status_code <= 299:
        return None

    data = read_body(response.http_response, limit=MAX_ERROR_BODY_BYTES)
    if not data:
        raise ErrorResponse(response)

    try:
        envelope = _ERROR_ENVELOPE.validate_json(data.decode("utf-8", errors="replace"))
    except ValidationError as e:
        raise ResponseDecodeError(f"Could not decode {status_code} error response body: {e}", response) from e

    message = envelope.message if envelope is not None else None
    raise ErrorResponse(response, message or "")
