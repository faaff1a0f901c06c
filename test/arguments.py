"""
Arguments module behavioral tests (value object defaults and finalize).

Scope
- Validate Argument defaults before finalize (Unset arity/cast, no restriction).
- Validate the shared finalize rules: arity → ZERO, cast resolution by shape,
  default checked against allowable values, idempotence.

Conventions
- Test method names follow CamelCase per project convention.
- Private fields are written directly here, standing in for a builder.
"""
import unittest
from unittest import TestCase

from optwright import Argument, Arity, ConfigurationError
from optwright.utils import Unset


class TestArgument(TestCase):
    """Behavioral tests for the Argument value object."""

    def testFreshArgumentIsUndeclared(self):
        argument = Argument()
        self.assertIs(argument.arity, Unset)
        self.assertIs(argument.cast_to, Unset)
        self.assertIs(argument.default_value, Unset)
        self.assertIsNone(argument.validation_step)
        self.assertFalse(argument.restricted)
        self.assertFalse(argument.finalized)

    def testFreshArgumentIsBooleanShaped(self):
        self.assertTrue(Argument().boolean)

    def testFinalizeDefaultsArityToZero(self):
        argument = Argument().finalize()
        self.assertIs(argument.arity, Arity.ZERO)

    def testFinalizeCastsZeroArityToBoolean(self):
        self.assertEqual(Argument().finalize().cast_to, "boolean")

    def testFinalizeCastsValueArityToString(self):
        argument = Argument()
        argument._arity = Arity.MANY
        self.assertEqual(argument.finalize().cast_to, "string")

    def testFinalizeCastsRestrictedZeroArityToString(self):
        argument = Argument()
        argument._allowable_values = ("a", "b")
        self.assertEqual(argument.finalize().cast_to, "string")

    def testFinalizeKeepsExplicitCast(self):
        argument = Argument()
        argument._arity = Arity.ONE
        argument._cast_to = "integer"
        self.assertEqual(argument.finalize().cast_to, "integer")

    def testFinalizeRejectsDefaultOutsideAllowedValues(self):
        argument = Argument()
        argument._arity = Arity.ONE
        argument._allowable_values = ("fast", "slow")
        argument._default_value = "medium"
        with self.assertRaises(ConfigurationError):
            argument.finalize("speed")

    def testFinalizeChecksEveryManyDefault(self):
        argument = Argument()
        argument._arity = Arity.MANY
        argument._allowable_values = ("a", "b")
        argument._default_value = ["a", "c"]
        with self.assertRaises(ConfigurationError):
            argument.finalize()

    def testFinalizeAcceptsAllowedDefault(self):
        argument = Argument()
        argument._arity = Arity.ONE
        argument._allowable_values = ("fast", "slow")
        argument._default_value = "slow"
        self.assertEqual(argument.finalize().default_value, "slow")

    def testFinalizeIsIdempotent(self):
        argument = Argument().finalize()
        self.assertIs(argument.finalize(), argument)
        self.assertTrue(argument.finalized)

    def testAllowableValuesAreDetached(self):
        argument = Argument()
        argument._allowable_values = ("a",)
        argument.allowable_values.append("b")
        self.assertEqual(tuple(argument.allowable_values), ("a",))


class TestArity(TestCase):
    """Behavioral tests for the Arity enumeration."""

    def testOrdering(self):
        self.assertLess(Arity.ZERO, Arity.ONE)
        self.assertLess(Arity.ONE, Arity.MANY)

    def testFromValue(self):
        self.assertIs(Arity(2), Arity.MANY)


if __name__ == '__main__':
    unittest.main()
