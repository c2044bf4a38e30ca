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

import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from pydantic import Field, field_validator

from golph.errors import UnsupportedOperationError
from golph.form import FormRequest
from golph.models import ConduitEnvelope, ConduitModel, empty_list_as_map
from golph.options import ListOptions, add_options
from golph.response import Response

TASKS_QUERY_PATH = "api/maniphest.query"
TASKS_FETCH_PATH = "api/maniphest.info"
TASKS_CREATE_PATH = "api/maniphest.createtask"
TASKS_UPDATE_PATH = "api/maniphest.update"

_OBJECT_NAME = re.compile(r"^T(\d+)$")


class Task(ConduitModel):
    """
    A Maniphest task, as returned by maniphest.info:

        {
          "id": "5000",
          "phid": "PHID-TASK-1234",
          "authorPHID": "PHID-USER-1234",
          "ownerPHID": null,
          "ccPHIDs": ["PHID-USER-5000"],
          "status": "resolved",
          "statusName": "Resolved",
          "isClosed": true,
          "priority": "Needs Triage",
          "priorityColor": "violet",
          "title": "Task title here",
          "description": "Task description here",
          "projectPHIDs": ["PHID-PROJ-1", "PHID-PROJ-2"],
          "uri": "https://phabricator.example.com/T5000",
          "objectName": "T5000",
          ...
        }
    """

    phid: str = ""
    author: str = Field(default="", alias="authorPHID")
    owner: str = Field(default="", alias="ownerPHID")
    title: str = ""
    description: str = ""
    projects: List[str] = Field(default_factory=list, alias="projectPHIDs")
    ccs: List[str] = Field(default_factory=list, alias="ccPHIDs")
    status: str = ""
    uri: str = ""
    object_name: str = Field(default="", alias="objectName")
    status_name: str = Field(default="", alias="statusName")
    is_closed: bool = Field(default=False, alias="isClosed")
    priority: str = ""
    priority_color: str = Field(default="", alias="priorityColor")


@dataclass
class TaskGetRequest(FormRequest):
    # The "5000" part of "T5000"
    task_id: str = field(default="", metadata={"form": "task_id"})


@dataclass
class TaskSearchRequest(FormRequest):
    ids: str = field(default="", metadata={"form": "ids"})
    phids: str = field(default="", metadata={"form": "phids"})
    owner_phids: List[str] = field(default_factory=list, metadata={"form": "ownerPHIDs"})
    author_phids: List[str] = field(default_factory=list, metadata={"form": "authorPHIDs"})
    project_phids: List[str] = field(default_factory=list, metadata={"form": "projectPHIDs"})
    full_text: str = field(default="", metadata={"form": "fullText"})
    status: str = field(default="", metadata={"form": "status"})
    order: str = field(default="", metadata={"form": "order"})
    limit: str = field(default="", metadata={"form": "limit"})
    offset: str = field(default="", metadata={"form": "offset"})


@dataclass
class TaskCreateRequest(FormRequest):
    title: str = field(default="", metadata={"form": "title"})
    description: str = field(default="", metadata={"form": "description"})
    projects: str = field(default="", metadata={"form": "projectPHIDs"})
    owner_phid: str = field(default="", metadata={"form": "ownerPHID"})
    ccs: str = field(default="", metadata={"form": "ccPHIDs"})
    priority: str = field(default="", metadata={"form": "priority"})


@dataclass
class TaskUpdateRequest(FormRequest):
    id: str = field(default="", metadata={"form": "id"})
    phid: str = field(default="", metadata={"form": "phid"})
    title: str = field(default="", metadata={"form": "title"})
    description: str = field(default="", metadata={"form": "description"})
    projects: str = field(default="", metadata={"form": "projectPHIDs"})
    owner_phid: str = field(default="", metadata={"form": "ownerPHID"})
    cc_phids: str = field(default="", metadata={"form": "ccPHIDs"})
    priority: str = field(default="", metadata={"form": "priority"})
    comment: str = field(default="", metadata={"form": "comments"})


class SingleTaskResponse(ConduitEnvelope):
    """Envelope of maniphest.info, createtask and update: {"result": {task}}."""

    result: Task = Field(default_factory=Task)


class TaskResponse(ConduitEnvelope):
    """Envelope of maniphest.query: {"result": {phid: task}}."""

    result: Dict[str, Task] = Field(default_factory=dict)

    @field_validator("result", mode="before")
    @classmethod
    def _empty_result(cls, value):
        return empty_list_as_map(value)


class TasksService:
    """
    Maniphest task operations over Conduit.
    See https://secure.phabricator.com/conduit/ (search for maniphest).
    """

    def __init__(self, client):
        self.client = client

    def list(self, opt: Optional[ListOptions] = None) -> Tuple[List[Task], Response]:
        """Lists all tasks."""
        path = add_options(TASKS_QUERY_PATH, opt)
        request = self.client.new_request("POST", path)
        return self._query(request)

    def search(self, search_request: TaskSearchRequest) -> Tuple[List[Task], Response]:
        """Searches for tasks with maniphest.query."""
        request = self.client.new_request("POST", TASKS_QUERY_PATH, search_request)
        return self._query(request)

    def get(self, task_id: str) -> Tuple[Task, Response]:
        """Fetches one task by numeric id ("5000") or object name ("T5000")."""
        match = _OBJECT_NAME.match(str(task_id))
        if match:
            task_id = match.group(1)

        request = self.client.new_request("POST", TASKS_FETCH_PATH, TaskGetRequest(task_id=str(task_id)))
        return self._single(request)

    def create(self, create_request: TaskCreateRequest) -> Tuple[Task, Response]:
        request = self.client.new_request("POST", TASKS_CREATE_PATH, create_request)
        return self._single(request)

    def update(self, update_request: TaskUpdateRequest) -> Response:
        request = self.client.new_request("POST", TASKS_UPDATE_PATH, update_request)
        _, response = self._single(request)
        return response

    def delete(self, task_id: str) -> Response:
        raise UnsupportedOperationError("Delete is not available for Tasks")

    def _query(self, request) -> Tuple[List[Task], Response]:
        response = self.client.do(request, TaskResponse)
        root = response.data
        root.raise_for_error(response)
        return [task for task in root.result.values()], response

    def _single(self, request) -> Tuple[Task, Response]:
        response = self.client.do(request, SingleTaskResponse)
        root = response.data
        root.raise_for_error(response)
        return root.result, response
