"""Test helpers package for the golph test suite.

This package provides a stub transport and canned responses so tests never
touch the network.
"""

from .http_fixtures import (
    make_response,
    stub_session,
    track_close,
)
