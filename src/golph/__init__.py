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

"""Client library for the Phabricator Conduit API."""

from golph.client import DEFAULT_BASE_URL, USER_AGENT, Client
from golph.config import GolphConfig, get_config, reset_config
from golph.errors import (
    ConduitError,
    ConfigError,
    ErrorResponse,
    GolphError,
    ResponseDecodeError,
    UnsupportedOperationError,
    URLParseError,
)
from golph.models import Cursor
from golph.options import ListOptions, add_options
from golph.projects import Project, ProjectCreateRequest, ProjectUpdateRequest, ProjectsService
from golph.response import Response, check_response
from golph.tasks import (
    Task,
    TaskCreateRequest,
    TaskGetRequest,
    TaskSearchRequest,
    TaskUpdateRequest,
    TasksService,
)

__version__ = GolphConfig.VERSION
