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

"""Exception types raised by the golph client.

Transport failures are not wrapped here; they surface as the ``requests``
exceptions raised by the session.
"""


class GolphError(Exception):
    """Base class for all errors raised by golph."""


class ConfigError(GolphError):
    """Raised when a required configuration value is missing or unusable."""


class URLParseError(GolphError, ValueError):
    """Raised when a path cannot be parsed as a URL reference."""

    def __init__(self, url, reason):
        super().__init__(f'parse "{url}": {reason}')
        self.op = "parse"
        self.url = url
        self.reason = reason


class ErrorResponse(GolphError):
    """
    Reports an API request that came back with a status outside 200..299.

    Attributes:
        response: The Response wrapper for the failed call
        message: The ``message`` field of the JSON error body, or "" when the body was empty
    """

    def __init__(self, response, message=""):
        self.response = response
        self.message = message
        super().__init__(str(self))

    def __str__(self):
        http_response = getattr(self.response, "http_response", self.response)
        request = getattr(http_response, "request", None)
        method = getattr(request, "method", "") or ""
        url = getattr(request, "url", "") or ""
        status_code = getattr(http_response, "status_code", 0)
        return f"{method} {url}: {status_code} {self.message}"


class ResponseDecodeError(GolphError, ValueError):
    """Raised when a response body cannot be decoded; the underlying error is the __cause__."""

    def __init__(self, message, response=None):
        super().__init__(message)
        self.response = response


class ConduitError(GolphError):
    """Raised when a 2xx Conduit envelope carries an error_code."""

    def __init__(self, error_code, error_info, response=None):
        super().__init__(f"{error_code}: {error_info}")
        self.error_code = error_code
        self.error_info = error_info
        self.response = response


class UnsupportedOperationError(GolphError, NotImplementedError):
    """Raised by service operations that Conduit does not offer."""
