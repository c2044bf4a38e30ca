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

from typing import Any, Callable, Optional
from urllib.parse import urljoin

import requests
from pydantic import TypeAdapter, ValidationError

from golph.config import GolphConfig, get_config
from golph.errors import ResponseDecodeError
from golph.form import encode_form
from golph.options import ListOptions, add_options, parse_url
from golph.projects import ProjectsService
from golph.response import CHUNK_SIZE, Response, check_response, drain, read_body
from golph.tasks import TasksService
from golph.utils import debug_log

__all__ = [
    "Client",
    "ListOptions",
    "Response",
    "add_options",
    "check_response",
    "DEFAULT_BASE_URL",
    "USER_AGENT",
]

DEFAULT_BASE_URL = "https://secure.phabricator.url/"
USER_AGENT = GolphConfig.USER_AGENT
MEDIA_TYPE = "application/json"
POST_MEDIA_TYPE = "application/x-www-form-urlencoded; param=value"

RequestCompletionCallback = Callable[[requests.PreparedRequest, requests.Response], None]


class Client:
    """
    Manages communication with the Phabricator Conduit API.

    Conduit is not versioned, so response shapes are handled per endpoint by the
    resource services (client.projects, client.tasks).
    """

    def __init__(self, api_token: str = "", base_url: str = "", session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None):
        """
        Initialize the client.

        Args:
            api_token: Conduit API token. Stored only; requests do not carry it.
            base_url: Phabricator base URL; DEFAULT_BASE_URL when empty
            session: requests.Session used as the transport; a new one when None
            timeout: Passed to the transport on every send; None leaves it to the session
        """
        self.api_token = api_token
        self.base_url = base_url or DEFAULT_BASE_URL
        self.user_agent = USER_AGENT
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

        # Optional function called after every request made to the Conduit API
        self._on_request_completed: Optional[RequestCompletionCallback] = None

        self.projects = ProjectsService(self)
        self.tasks = TasksService(self)

    @classmethod
    def from_config(cls, config: Optional[GolphConfig] = None, session: Optional[requests.Session] = None) -> "Client":
        """Builds a client from GOLPH_* environment configuration."""
        config = config or get_config()
        return cls(
            api_token=config.api_token,
            base_url=config.base_url,
            session=session,
            timeout=config.http_timeout,
        )

    def on_request_completed(self, callback: Optional[RequestCompletionCallback]):
        """Sets the request completion callback; None removes it."""
        self._on_request_completed = callback

    def new_request(self, method: str, url_str: str, body: Any = None) -> requests.PreparedRequest:
        """
        Creates an API request.

        A relative URL is resolved against base_url and should be given without a
        leading slash. If body is not None it is form encoded and sent as the
        request body.

        Raises:
            URLParseError: If url_str is not a valid URL reference
            TypeError: If body cannot be form encoded
        """
        parse_url(url_str)
        url = urljoin(self.base_url, url_str)

        data = encode_form(body) if body is not None else ""

        headers = {
            "Content-Type": POST_MEDIA_TYPE,
            "Accept": MEDIA_TYPE,
            "User-Agent": self.user_agent,
        }
        return self.session.prepare_request(requests.Request(method, url, data=data, headers=headers))

    def do(self, request: requests.PreparedRequest, target: Any = None) -> Response:
        """
        Sends an API request and decodes the JSON response.

        Args:
            request: A request built by new_request
            target: Type the body is validated into (a pydantic model, dict, ...).
                When None the body is read and discarded.

        Returns:
            Response: The wrapper, with the decoded body on response.data

        Raises:
            ErrorResponse: For a non-2xx status
            ResponseDecodeError: If the body does not decode into target
            requests.RequestException: Transport failures, unchanged
        """
        adapter = TypeAdapter(target) if target is not None else None

        http_response = self._send(request)
        try:
            response = self._complete(request, http_response)
            if adapter is None:
                drain(http_response)
                return response

            body = read_body(http_response)
            try:
                response.data = adapter.validate_json(body)
            except ValidationError as e:
                raise ResponseDecodeError(f"Could not decode response body: {e}", response) from e
            return response
        finally:
            http_response.close()

    def do_raw(self, request: requests.PreparedRequest, sink) -> Response:
        """
        Sends an API request and writes the raw response body to sink.

        Args:
            request: A request built by new_request
            sink: Binary file-like object with a write() method

        Returns:
            Response: The wrapper; response.data stays None
        """
        http_response = self._send(request)
        try:
            response = self._complete(request, http_response)
            for chunk in http_response.iter_content(chunk_size=CHUNK_SIZE):
                sink.write(chunk)
            return response
        finally:
            http_response.close()

    def _send(self, request: requests.PreparedRequest) -> requests.Response:
        debug_log(f"Making {request.method} request to: {request.url}")

        send_kwargs = {"stream": True}
        if self.timeout is not None:
            send_kwargs["timeout"] = self.timeout
        http_response = self.session.send(request, **send_kwargs)

        debug_log(f"Conduit API Response Status Code: {http_response.status_code}")
        return http_response

    def _complete(self, request: requests.PreparedRequest, http_response: requests.Response) -> Response:
        if self._on_request_completed is not None:
            # The hook and the decoder both read the body, so it is buffered first.
            http_response.content
            self._on_request_completed(request, http_response)

        response = Response(http_response)
        check_response(response)
        return response
