"""
Utils module behavioral tests (Unset, coalesce, rename, mirror, flag helpers).

Conventions
- Test method names follow CamelCase per project convention.
"""
import copy
import pickle
import unittest
from unittest import TestCase

from optwright.arguments import Arity
from optwright.utils import Unset, UnsetType, coalesce, flagify, mirror, paramify, rename


class TestUnset(TestCase):
    """Behavioral tests for the Unset sentinel."""

    def testSingleton(self):
        self.assertIs(UnsetType(), Unset)
        self.assertIs(copy.copy(Unset), Unset)
        self.assertIs(copy.deepcopy(Unset), Unset)
        self.assertIs(pickle.loads(pickle.dumps(Unset)), Unset)

    def testFalseyAndPrintable(self):
        self.assertFalse(Unset)
        self.assertEqual(repr(Unset), "Unset")

    def testSealed(self):
        with self.assertRaises(TypeError):
            type("Subclass", (UnsetType,), {})

    def testCoalesce(self):
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIs(coalesce(False, True), False)
        self.assertIsNone(coalesce(None, 1))


class TestHelpers(TestCase):
    """Behavioral tests for the naming helpers."""

    def testRename(self):
        def function():
            pass

        self.assertIs(rename(function, "other"), function)
        self.assertEqual(function.__name__, "other")

        @rename("decorated")
        def function():
            pass

        self.assertEqual(function.__qualname__, "decorated")

    def testMirrorDetachesContainers(self):
        class Holder:
            values = mirror("values")

            def __init__(self):
                self._values = ("a",)

        holder = Holder()
        self.assertEqual(holder.values, ["a"])
        with self.assertRaises(AttributeError):
            holder.values = []

    def testFlagify(self):
        self.assertEqual(flagify("dry_run"), "--dry-run")
        self.assertEqual(flagify("Level"), "--level")
        self.assertEqual(flagify("dry_run", short=True), "-d")

    def testParamify(self):
        self.assertIsNone(paramify("verbose", Arity.ZERO))
        self.assertEqual(paramify("file", Arity.ONE), "FILE")
        self.assertEqual(paramify("file", Arity.MANY), "FILE+")


if __name__ == '__main__':
    unittest.main()
