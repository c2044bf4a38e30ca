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
from dataclasses import dataclass, field
from urllib.parse import parse_qs

from golph.form import FormRequest, encode_form, format_value, struct_to_values


@dataclass
class Sample(FormRequest):
    title: str = ""
    count: int = 0
    ratio: float = 0.0
    raw: bytes = b""
    renamed: str = field(default="", metadata={"form": "task_id"})


@dataclass
class Unsupported:
    flag: bool = True
    tags: list = field(default_factory=lambda: ["a", "b"])
    missing: object = None
    nested: Sample = field(default_factory=Sample)


class TestStructToValues(unittest.TestCase):
    """Tests for flattening request dataclasses into form fields."""

    def test_formats_supported_types(self):
        values = struct_to_values(Sample(title="hello", count=-42, ratio=1.5, raw=b"bytes", renamed="5000"))

        self.assertEqual(values, {
            "title": "hello",
            "count": "-42",
            "ratio": "1.5000",
            "raw": "bytes",
            "task_id": "5000",
        })

    def test_float_is_fixed_to_four_places(self):
        self.assertEqual(format_value(3.14159265), "3.1416")
        self.assertEqual(format_value(2.0), "2.0000")

    def test_unsupported_types_encode_as_empty_string(self):
        values = struct_to_values(Unsupported())

        self.assertEqual(values, {"flag": "", "tags": "", "missing": "", "nested": ""})

    def test_form_metadata_overrides_field_name(self):
        values = struct_to_values(Sample(renamed="abc"))

        self.assertIn("task_id", values)
        self.assertNotIn("renamed", values)

    def test_rejects_non_dataclass(self):
        with self.assertRaises(TypeError):
            struct_to_values({"title": "x"})

    def test_rejects_dataclass_type(self):
        with self.assertRaises(TypeError):
            struct_to_values(Sample)


class TestEncodeForm(unittest.TestCase):
    """Tests for serializing request bodies."""

    def test_keys_are_sorted(self):
        body = encode_form(Sample(title="t", count=1))

        self.assertEqual(body, "count=1&ratio=0.0000&raw=&task_id=&title=t")

    def test_values_are_urlencoded(self):
        body = encode_form({"names": '["Project 1"]'})

        self.assertEqual(body, "names=%5B%22Project+1%22%5D")

    def test_mapping_values_use_field_formatting(self):
        body = encode_form({"limit": 10, "ratio": 0.5, "skip": None})

        self.assertEqual(parse_qs(body, keep_blank_values=True), {
            "limit": ["10"],
            "ratio": ["0.5000"],
            "skip": [""],
        })

    def test_plain_dataclass_is_accepted(self):
        self.assertEqual(encode_form(Unsupported()), "flag=&missing=&nested=&tags=")

    def test_decoding_the_body_reproduces_the_fields(self):
        request = Sample(title="Fix the build & ship", count=7, ratio=0.25, raw="café".encode("utf-8"),
                         renamed="T12")

        decoded = {key: values[0] for key, values in parse_qs(encode_form(request)).items()}

        self.assertEqual(decoded, {
            "title": "Fix the build & ship",
            "count": "7",
            "ratio": "0.2500",
            "raw": "café",
            "task_id": "T12",
        })

    def test_non_utf8_bytes_are_sent_unchanged(self):
        body = encode_form(Sample(raw=b"\xff\xfe"))

        self.assertIn("raw=%FF%FE", body)
        self.assertEqual(parse_qs(body, encoding="latin-1")["raw"], ["\xff\xfe"])

    def test_unencodable_body_raises_type_error(self):
        with self.assertRaises(TypeError):
            encode_form(42)


if __name__ == '__main__':
    unittest.main()
