"""
Faults module behavioral tests (ConfigurationError, warnings, rich rendering).

Conventions
- Test method names follow CamelCase per project convention.
"""
import io
import unittest
from unittest import TestCase

from rich.console import Console

from optwright.faults import (
    ConfigurationError,
    ConfigurationWarning,
    DuplicateFlagWarning,
    FlaglessOptionWarning,
)


def render(renderable):
    stream = io.StringIO()
    Console(file=stream, width=100, color_system=None).print(renderable)
    return stream.getvalue()


class TestConfigurationError(TestCase):
    """Behavioral tests for ConfigurationError."""

    def testMessageAndContext(self):
        error = ConfigurationError("bad option", option="level")
        self.assertEqual(error.message, "bad option")
        self.assertEqual(str(error), "bad option")
        self.assertEqual(error.context["option"], "level")

    def testDefaultMessage(self):
        self.assertEqual(ConfigurationError().message, "invalid configuration")

    def testContextIsReadOnly(self):
        error = ConfigurationError("bad option", option="level")
        with self.assertRaises(TypeError):
            error.context["option"] = "other"

    def testRichRendering(self):
        output = render(ConfigurationError("bad option", option="level"))
        self.assertIn("[ optwright | configuration error ]", output)
        self.assertIn("bad option", output)
        self.assertIn("option: level", output)


class TestConfigurationWarning(TestCase):
    """Behavioral tests for the warning hierarchy."""

    def testHierarchy(self):
        for kind in (FlaglessOptionWarning, DuplicateFlagWarning):
            with self.subTest(kind=kind):
                self.assertTrue(issubclass(kind, ConfigurationWarning))
                self.assertTrue(issubclass(kind, Warning))
                self.assertFalse(issubclass(kind, ConfigurationError))

    def testRichRendering(self):
        output = render(DuplicateFlagWarning("flag '-v' is already in use"))
        self.assertIn("[ optwright | configuration warning ]", output)
        self.assertIn("flag '-v' is already in use", output)


if __name__ == '__main__':
    unittest.main()
