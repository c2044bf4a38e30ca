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

"""Form encoding for Conduit request bodies.

Conduit methods take their parameters as an ``application/x-www-form-urlencoded``
POST body. Request types are flat dataclasses; each field becomes one form
parameter, named after the attribute unless ``metadata={"form": ...}`` says
otherwise.
"""

import dataclasses
from collections.abc import Mapping
from urllib.parse import urlencode


def format_value(value) -> str:
    """Converts a single field value to its form representation.

    Only strings, bytes and numbers are supported; anything else (None, bools,
    lists, nested objects) encodes as an empty string.
    Bytes that are not valid UTF-8 are carried as surrogate escapes so that
    encode_form sends the original octets.
    """
    if isinstance(value, bool):
        return ""
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return f"{value:.4f}"
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="surrogateescape")
    if isinstance(value, str):
        return value
    return ""


def struct_to_values(obj) -> dict[str, str]:
    """Flattens a dataclass instance into a mapping of form names to string values.

    Args:
        obj: A dataclass instance (not the class itself)

    Returns:
        dict: Form parameter name -> encoded value, in field declaration order

    Raises:
        TypeError: If obj is not a dataclass instance
    """
    if not dataclasses.is_dataclass(obj) or isinstance(obj, type):
        raise TypeError(f"struct_to_values expects a dataclass instance, got {type(obj).__name__}")

    values = {}
    for field in dataclasses.fields(obj):
        name = field.metadata.get("form") or field.name
        values[name] = format_value(getattr(obj, field.name))
    return values


class FormRequest:
    """Mixin for request dataclasses that can be sent as a form body."""

    def to_form(self) -> dict[str, str]:
        return struct_to_values(self)


def encode_form(body) -> str:
    """Serializes a request body into an urlencoded string with sorted keys.

    Raises:
        TypeError: If the body cannot be represented as form fields
    """
    if hasattr(body, "to_form"):
        values = body.to_form()
    elif isinstance(body, Mapping):
        values = {str(key): format_value(value) for key, value in body.items()}
    elif dataclasses.is_dataclass(body) and not isinstance(body, type):
        values = struct_to_values(body)
    else:
        raise TypeError(f"Cannot form-encode a request body of type {type(body).__name__}")

    return urlencode(sorted(values.items()), encoding="utf-8", errors="surrogateescape")
