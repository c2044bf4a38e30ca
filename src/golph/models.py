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

"""Shared pydantic models for Conduit payloads."""

from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from golph.errors import ConduitError


def empty_list_as_map(value: Any) -> Any:
    # PHP encodes an empty associative array as []
    if isinstance(value, list) and not value:
        return {}
    return value


class ConduitModel(BaseModel):
    """Base for Conduit objects: unknown fields are ignored and nulls fall back to defaults."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", coerce_numbers_to_str=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Cursor(ConduitModel):
    """Opaque pagination cursor returned by query methods."""

    limit: int = 0
    after: str = ""
    before: str = ""


class ConduitEnvelope(ConduitModel):
    """Fields every Conduit response envelope carries next to its result."""

    error_code: str = ""
    error_info: str = ""

    def raise_for_error(self, response=None):
        """Raises ConduitError when the envelope reports a method-level failure."""
        if self.error_code:
            raise ConduitError(self.error_code, self.error_info, response)
