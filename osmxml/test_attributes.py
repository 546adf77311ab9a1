# © Copyright 2024 Mikołaj Kuranowski
# SPDX-License-Identifier: GPL-3.0-or-later

from unittest import TestCase

from .attributes import optional_choice, require_bool, require_float, require_int, require_str
from .err import InvalidAttributeError


class TestRequireStr(TestCase):
    def test(self) -> None:
        self.assertEqual(require_str({"k": "name"}, "k", "tag"), "name")
        self.assertEqual(require_str({"k": ""}, "k", "tag"), "")

    def test_missing(self) -> None:
        with self.assertRaises(InvalidAttributeError) as ctx:
            require_str({"k": "name"}, "v", "tag")

        self.assertEqual(ctx.exception.attribute, "v")
        self.assertEqual(ctx.exception.element, "tag")
        self.assertIsNone(ctx.exception.value)


class TestRequireInt(TestCase):
    def test(self) -> None:
        self.assertEqual(require_int({"id": "42"}, "id", "node"), 42)
        self.assertEqual(require_int({"id": "-100"}, "id", "node"), -100)
        self.assertEqual(require_int({"id": "+7"}, "id", "node"), 7)
        self.assertEqual(require_int({"id": "9007199254740993"}, "id", "node"), 9007199254740993)

    def test_invalid(self) -> None:
        for value in ("", "1.5", " 1", "1_000", "0x10", "one"):
            with self.subTest(value=value), self.assertRaises(InvalidAttributeError) as ctx:
                require_int({"ref": value}, "ref", "nd")

            self.assertEqual(ctx.exception.attribute, "ref")
            self.assertEqual(ctx.exception.element, "nd")
            self.assertEqual(ctx.exception.value, value)

    def test_missing(self) -> None:
        with self.assertRaises(InvalidAttributeError):
            require_int({}, "id", "way")


class TestRequireFloat(TestCase):
    def test(self) -> None:
        self.assertEqual(require_float({"lat": "52.2297"}, "lat", "node"), 52.2297)
        self.assertEqual(require_float({"lat": "-1"}, "lat", "node"), -1.0)
        self.assertEqual(require_float({"lat": "1e-3"}, "lat", "node"), 0.001)

    def test_invalid(self) -> None:
        for value in ("", "north", "nan", "inf", "-Infinity"):
            with self.subTest(value=value), self.assertRaises(InvalidAttributeError):
                require_float({"lon": value}, "lon", "node")


class TestRequireBool(TestCase):
    def test(self) -> None:
        self.assertTrue(require_bool({"visible": "true"}, "visible", "node"))
        self.assertTrue(require_bool({"visible": "1"}, "visible", "node"))
        self.assertFalse(require_bool({"visible": "false"}, "visible", "node"))
        self.assertFalse(require_bool({"visible": "0"}, "visible", "node"))

    def test_invalid(self) -> None:
        for value in ("", "yes", "True", "FALSE"):
            with self.subTest(value=value), self.assertRaises(InvalidAttributeError):
                require_bool({"visible": value}, "visible", "node")


class TestOptionalChoice(TestCase):
    CHOICES = ("node", "way", "relation")

    def test(self) -> None:
        self.assertEqual(optional_choice({"type": "way"}, "type", "member", self.CHOICES), "way")
        self.assertIsNone(optional_choice({}, "type", "member", self.CHOICES))

    def test_invalid(self) -> None:
        with self.assertRaises(InvalidAttributeError) as ctx:
            optional_choice({"type": "area"}, "type", "member", self.CHOICES)

        self.assertEqual(ctx.exception.value, "area")
