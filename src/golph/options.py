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
from dataclasses import dataclass
from typing import Dict, Optional
from urllib.parse import SplitResult, parse_qsl, urlencode, urlsplit, urlunsplit

from golph.errors import URLParseError

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


@dataclass
class ListOptions:
    """
    Optional parameters for List methods that support pagination.
    A zero value leaves the parameter out of the query string.
    """

    # For paginated result sets, page of results to retrieve.
    page: int = 0

    # For paginated result sets, the number of results to include per page.
    per_page: int = 0

    def to_query(self) -> Dict[str, str]:
        query = {}
        if self.page:
            query["page"] = str(self.page)
        if self.per_page:
            query["per_page"] = str(self.per_page)
        return query


def parse_url(url_str: str) -> SplitResult:
    """Parses an absolute or relative URL reference.

    Raises:
        URLParseError: If url_str is not a valid URL reference
    """
    if any(ord(c) < 0x20 or ord(c) == 0x7f for c in url_str):
        raise URLParseError(url_str, "invalid control character in URL")
    if url_str.startswith(":"):
        raise URLParseError(url_str, "missing protocol scheme")
    bad_escape = _BAD_ESCAPE.search(url_str)
    if bad_escape:
        escape = url_str[bad_escape.start():bad_escape.start() + 3]
        raise URLParseError(url_str, f'invalid URL escape "{escape}"')
    try:
        parts = urlsplit(url_str)
    except ValueError as e:
        raise URLParseError(url_str, str(e)) from e

    if not parts.scheme and not parts.netloc and ":" in parts.path.split("/", 1)[0]:
        raise URLParseError(url_str, "first path segment in URL cannot contain colon")
    return parts


def add_options(path: str, opt: Optional[ListOptions]) -> str:
    """Merges list options into the query string of path.

    Options overwrite existing parameters of the same name; every other
    existing parameter is kept. The resulting query is sorted by key.

    Args:
        path: Absolute or relative URL, possibly with a query string
        opt: Options to merge, or None to leave path untouched

    Returns:
        str: The path with the merged query string
    """
    if opt is None:
        return path

    parts = parse_url(path)

    values: Dict[str, list] = {}
    for key, value in parse_qsl(parts.query, keep_blank_values=True):
        values.setdefault(key, []).append(value)
    for key, value in opt.to_query().items():
        values[key] = [value]

    query = urlencode(sorted(values.items()), doseq=True)
    return urlunsplit(parts._replace(query=query))
