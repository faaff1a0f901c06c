"""
Printing module behavioral tests (standard and template help printers).

Conventions
- Test method names follow CamelCase per project convention.
- Output is captured with a rich Console writing to a StringIO.
"""
import io
import os
import tempfile
import unittest
from unittest import TestCase

from rich.console import Console

from optwright import Command, SuperCommand
from optwright.printing import Color, HelpPrinter, TemplatePrinter


def sample(builder):
    builder.summary("Copies files around")
    builder.boolean("verbose", "Talk more")
    builder.separator()
    builder.integer("level", "Compression level")
    builder.option("force", lambda option: option.long("--force").negate().desc("Overwrite"))


class TestColor(TestCase):
    """Behavioral tests for the Color switch."""

    def testToggle(self):
        color = Color()
        self.assertTrue(color)
        color.disable()
        self.assertFalse(color)
        color.enable()
        self.assertTrue(color)


class TestHelpPrinter(TestCase):
    """Behavioral tests for HelpPrinter."""

    def render(self, command):
        stream = io.StringIO()
        printer = HelpPrinter(color=False, console=Console(file=stream, width=100, color_system=None))
        printer.print_help(command)
        return stream.getvalue()

    def testUsageAndSummary(self):
        output = self.render(Command("copier", sample))
        self.assertIn("Usage: copier [OPTIONS]", output)
        self.assertIn("Copies files around", output)

    def testOptionRows(self):
        output = self.render(Command("copier", sample))
        self.assertIn("-v, --verbose", output)
        self.assertIn("-l, --level LEVEL", output)
        self.assertIn("--[no-]force", output)
        self.assertIn("Compression level", output)

    def testSuperCommandRows(self):
        command = SuperCommand("tool", lambda builder: (
            builder.command("sync", lambda sub: sub.summary("Synchronize")),
            builder.help(),
        ))
        output = self.render(command)
        self.assertIn("Usage: tool COMMAND", output)
        self.assertIn("sync", output)
        self.assertIn("Synchronize", output)
        self.assertIn("Show this help message", output)

    def testCommandPrintHelpUsesItsPrinter(self):
        stream = io.StringIO()
        console = Console(file=stream, width=100, color_system=None)
        command = Command("copier", lambda builder: (
            builder.printer(HelpPrinter(console=console)),
            builder.boolean("verbose", "Talk more"),
        ))
        command.print_help()
        self.assertIn("--verbose", stream.getvalue())


class TestTemplatePrinter(TestCase):
    """Behavioral tests for TemplatePrinter."""

    def testPlaceholders(self):
        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, "help.txt")
            with open(path, "w", encoding="utf-8") as file:
                file.write("$name: $summary\n$usage\n$options\n$unknown")
            output = TemplatePrinter(path).render(Command("copier", sample))

        lines = output.splitlines()
        self.assertEqual(lines[0], "copier: Copies files around")
        self.assertEqual(lines[1], "copier [OPTIONS]")
        self.assertEqual(lines[2], "  -v, --verbose    Talk more")
        self.assertEqual(lines[3], "")
        self.assertEqual(lines[4], "  -l, --level LEVEL    Compression level")
        self.assertEqual(lines[5], "  --[no-]force    Overwrite")
        self.assertEqual(lines[6], "$unknown")

    def testRejectsNonPath(self):
        with self.assertRaises(TypeError):
            TemplatePrinter(42)


if __name__ == '__main__':
    unittest.main()
