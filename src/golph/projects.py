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

import json
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from pydantic import Field, field_validator

from golph.errors import UnsupportedOperationError
from golph.form import FormRequest
from golph.models import ConduitEnvelope, ConduitModel, Cursor, empty_list_as_map
from golph.options import ListOptions, add_options
from golph.response import Response

PROJECTS_QUERY_PATH = "api/project.query"
PROJECTS_CREATE_PATH = "api/project.create"


class Project(ConduitModel):
    """A Phabricator project."""

    phid: str = ""
    name: str = ""
    tags: List[str] = Field(default_factory=list, alias="slugs")
    members: List[str] = Field(default_factory=list)
    icon: str = ""
    color: str = ""


@dataclass
class ProjectCreateRequest(FormRequest):
    """Parameters for project.create. List fields are not form encodable and go out empty."""

    name: str
    tags: List[str] = field(default_factory=list)
    members: List[str] = field(default_factory=list)
    icon: str = ""
    color: str = ""


@dataclass
class ProjectUpdateRequest(FormRequest):
    phid: str
    name: str = ""
    tags: List[str] = field(default_factory=list)
    members: List[str] = field(default_factory=list)
    icon: str = ""
    color: str = ""


class ProjectResult(ConduitModel):
    data: Dict[str, Project] = Field(default_factory=dict)
    cursor: Optional[Cursor] = None

    @field_validator("data", mode="before")
    @classmethod
    def _empty_data(cls, value):
        return empty_list_as_map(value)


class ProjectResponse(ConduitEnvelope):
    """Envelope of project.query: {"result": {"data": {phid: project}, "cursor": {...}}}."""

    result: ProjectResult = Field(default_factory=ProjectResult)
    cursor: Optional[Cursor] = None


class ProjectCreateResponse(ConduitEnvelope):
    """Envelope of project.create: {"result": {project}}."""

    result: Project = Field(default_factory=Project)


class ProjectsService:
    """
    Project operations over Conduit.
    See https://secure.phabricator.com/conduit/ (search for project).
    """

    def __init__(self, client):
        self.client = client

    def list(self, opt: Optional[ListOptions] = None) -> Tuple[List[Project], Response]:
        """Lists all projects, in the order the server returned them."""
        path = add_options(PROJECTS_QUERY_PATH, opt)
        request = self.client.new_request("POST", path)
        response = self.client.do(request, ProjectResponse)
        return self._projects(response), response

    def get(self, name: str) -> Tuple[Optional[Project], Response]:
        """Fetches a single project by name. Returns None when nothing matches."""
        form = {"names": json.dumps([name])}
        request = self.client.new_request("POST", PROJECTS_QUERY_PATH, form)
        response = self.client.do(request, ProjectResponse)

        projects = self._projects(response)
        if not projects:
            return None, response
        return projects[0], response

    def create(self, create_request: ProjectCreateRequest) -> Tuple[Optional[Project], Response]:
        """Creates a project and returns it as the server reports it."""
        request = self.client.new_request("POST", PROJECTS_CREATE_PATH, create_request)
        response = self.client.do(request, ProjectCreateResponse)

        root = response.data
        root.raise_for_error(response)
        if not root.result.phid:
            return None, response
        return root.result, response

    def update(self, update_request: ProjectUpdateRequest) -> Response:
        raise UnsupportedOperationError("Update is not available for Projects")

    def delete(self, project: Project) -> Response:
        raise UnsupportedOperationError("Delete is not available for Projects")

    @staticmethod
    def _projects(response: Response) -> List[Project]:
        root = response.data
        root.raise_for_error(response)
        response.cursor = root.result.cursor if root.result.cursor is not None else root.cursor
        return [project for project in root.result.data.values()]
