"""
Signals module behavioral tests (HelpCalled/VersionCalled and evaluate()).

Conventions
- Test method names follow CamelCase per project convention.
"""
import unittest
from unittest import TestCase

from optwright import ConfigurationError
from optwright.signals import (
    Continue,
    ControlSignal,
    HelpCalled,
    RequestHelp,
    RequestVersion,
    VersionCalled,
    evaluate,
)


class TestSignals(TestCase):
    """Behavioral tests for the control-flow signals."""

    def testHelpPayload(self):
        self.assertIsNone(HelpCalled().command)
        self.assertEqual(HelpCalled("sync").command, "sync")

    def testVersionPayload(self):
        self.assertEqual(VersionCalled("tool 2.0").message, "tool 2.0")

    def testSignalsAreNotFaults(self):
        for signal in (HelpCalled(), VersionCalled("1.0")):
            with self.subTest(signal=signal):
                self.assertIsInstance(signal, ControlSignal)
                self.assertNotIsInstance(signal, ConfigurationError)


class TestEvaluate(TestCase):
    """Behavioral tests for evaluate()."""

    def testMissingStepPassesTokensThrough(self):
        self.assertEqual(evaluate(None, ["a", "b"]), Continue(("a", "b")))

    def testStepResultIsContinued(self):
        self.assertEqual(evaluate(lambda tokens: len(tokens), ["a"]), Continue(1))

    def testHelpBecomesRequestHelp(self):
        def step(tokens):
            raise HelpCalled(tokens[0] if tokens else None)

        self.assertEqual(evaluate(step, []), RequestHelp(None))
        self.assertEqual(evaluate(step, ["sync"]), RequestHelp("sync"))

    def testVersionBecomesRequestVersion(self):
        def step(tokens):
            raise VersionCalled("tool 2.0")

        self.assertEqual(evaluate(step, []), RequestVersion("tool 2.0"))

    def testOtherErrorsPropagate(self):
        def step(tokens):
            raise ValueError("bad value")

        with self.assertRaises(ValueError):
            evaluate(step, ["x"])

    def testTagsAreDistinguishableByType(self):
        match evaluate(None, []):
            case RequestHelp() | RequestVersion():
                self.fail("expected a Continue")
            case Continue(value=value):
                self.assertEqual(value, ())

    def testNonCallableStepFails(self):
        with self.assertRaises(TypeError):
            evaluate("step", [])


if __name__ == '__main__':
    unittest.main()
