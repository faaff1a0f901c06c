r"""
Optwright argument values: the part of a declaration that carries a value.

Overview
- Arity
  • ZERO: presence-only (a flag), ONE: exactly one token, MANY: an ordered,
    unbounded sequence (repeated occurrences collect into a list).

- Argument
  • Plain value object shared by every value-bearing declaration:
    arity, cast_to, default_value, validation_step, allowable_values, metaname.
  • Options hold one (composition); see optwright.options.Option.
  • Mutable through its owning builder until finalize(); read-only afterwards.

Finalize rules (shared part)
- arity defaults to ZERO.
- cast_to defaults to "boolean" when the argument is boolean-shaped (arity ZERO
  and no restricted values), otherwise to "string".
- a default outside a non-empty set of allowable values is rejected.

Option-specific rules (boolean vs. restricted, negation) are layered on top by
Option.finalize().

Quick example:
    >>> argument = Argument()
    >>> argument = argument.finalize()
    >>> argument.cast_to, argument.arity
    ('boolean', <Arity.ZERO: 0>)
"""
import enum
import logging

from . import converters
from .faults import ConfigurationError
from .utils import *

logger = logging.getLogger(__name__)


class Arity(enum.IntEnum):
    """
    How many tokens a declaration consumes.
    """
    ZERO = 0
    ONE = 1
    MANY = 2


class Argument:
    """
    Value-bearing half of a declaration.

    Properties (read-only; the builder writes the private fields)
    - arity: Arity | Unset before finalize, Arity after.
    - cast_to: canonical converter kind, Unset until finalize.
    - default_value: any value, Unset when never declared.
    - validation_step: callable over the raw token sequence, or None.
    - allowable_values: tuple of accepted values; empty means unrestricted.
    - metaname: display label of the parameter (e.g. "FILE+"), or None.
    """

    arity = mirror("arity")
    cast_to = mirror("cast_to")
    default_value = mirror("default_value")
    validation_step = mirror("validation_step")
    allowable_values = mirror("allowable_values")
    metaname = mirror("metaname")
    finalized = mirror("finalized")

    def __init__(self):
        self._arity = Unset
        self._cast_to = Unset
        self._default_value = Unset
        self._validation_step = None
        self._allowable_values = ()
        self._metaname = None
        self._finalized = False

    @property
    def boolean(self):
        """
        True for presence-only arguments (arity ZERO, or not yet declared).
        """
        return coalesce(self._arity, Arity.ZERO) is Arity.ZERO

    @property
    def restricted(self):
        return len(self._allowable_values) > 0

    def finalize(self, label="argument"):
        """
        Resolve the shared defaults and freeze the value object.

        `label` names the owner in error messages (an option passes its name).
        Calling finalize() again is a no-op.
        """
        if self._finalized:
            return self

        self._arity = coalesce(self._arity, Arity.ZERO)

        if self._cast_to is Unset:
            self._cast_to = converters.BOOLEAN if self.boolean and not self.restricted else converters.STRING

        if self.restricted and self._default_value is not Unset:
            defaults = self._default_value if self._arity is Arity.MANY and isinstance(self._default_value, list | tuple) else (self._default_value,)
            for default in defaults:
                if default not in self._allowable_values:
                    raise ConfigurationError(
                        f"the default value {default!r} is not one of the allowed values: {label}", option=label
                    )

        self._finalized = True
        return self

    def __repr__(self):
        return (
            f"argument(arity={self._arity!r}, cast_to={self._cast_to!r}, default_value={self._default_value!r}, "
            f"allowable_values={self._allowable_values!r}, metaname={self._metaname!r})"
        )


__all__ = (
    "Arity",
    "Argument",
)
