#!/usr/bin/env python3
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

import unittest

from golph.errors import URLParseError
from golph.options import ListOptions, add_options, parse_url


class TestAddOptions(unittest.TestCase):
    """Tests for merging list options into a query string."""

    def test_add_options(self):
        self.assertEqual(add_options("/action", ListOptions(page=1)), "/action?page=1")

    def test_add_options_with_existing_parameters(self):
        self.assertEqual(add_options("/action?scope=all", ListOptions(page=1)), "/action?page=1&scope=all")

    def test_page_and_per_page(self):
        self.assertEqual(
            add_options("api/project.query", ListOptions(page=3, per_page=50)),
            "api/project.query?page=3&per_page=50",
        )

    def test_colliding_parameters_are_overwritten(self):
        self.assertEqual(add_options("/action?page=9&scope=all", ListOptions(page=2)), "/action?page=2&scope=all")

    def test_other_parameters_are_preserved(self):
        result = add_options("/action?tag=a&tag=b&empty=", ListOptions(per_page=10))

        self.assertEqual(result, "/action?empty=&per_page=10&tag=a&tag=b")

    def test_none_options_returns_path_unchanged(self):
        self.assertEqual(add_options("/action?b=2&a=1", None), "/action?b=2&a=1")

    def test_zero_options_leave_no_trailing_question_mark(self):
        self.assertEqual(add_options("/action", ListOptions()), "/action")
        self.assertEqual(add_options("/action?scope=all", ListOptions()), "/action?scope=all")

    def test_absolute_url(self):
        self.assertEqual(
            add_options("https://phabricator.example.com/api/maniphest.query", ListOptions(page=1)),
            "https://phabricator.example.com/api/maniphest.query?page=1",
        )

    def test_invalid_escape_in_existing_query_raises(self):
        with self.assertRaises(URLParseError):
            add_options("api/x?a=%zz", ListOptions(page=1))

    def test_invalid_path_raises_url_parse_error(self):
        with self.assertRaises(URLParseError) as ctx:
            add_options(":", ListOptions(page=1))

        self.assertEqual(ctx.exception.op, "parse")


class TestParseUrl(unittest.TestCase):
    """Tests for URL reference validation."""

    def test_relative_path(self):
        self.assertEqual(parse_url("api/project.query").path, "api/project.query")

    def test_missing_scheme(self):
        with self.assertRaises(URLParseError):
            parse_url(":")

    def test_control_character(self):
        with self.assertRaises(URLParseError):
            parse_url("api/project.query\n")

    def test_colon_in_first_segment(self):
        with self.assertRaises(URLParseError):
            parse_url("api project:query")

    def test_invalid_escape(self):
        with self.assertRaises(URLParseError) as ctx:
            parse_url("foo%zz")

        self.assertEqual(ctx.exception.reason, 'invalid URL escape "%zz"')

    def test_truncated_escape_at_end(self):
        with self.assertRaises(URLParseError):
            parse_url("api/project.query?name=a%4")

    def test_valid_escapes_are_accepted(self):
        self.assertEqual(parse_url("api/project.query?name=a%20b%2F").query, "name=a%20b%2F")

    def test_url_parse_error_is_value_error(self):
        with self.assertRaises(ValueError):
            parse_url("http://[::1/")


if __name__ == '__main__':
    unittest.main()
