r"""
Optwright options: named flags and the fluent builder that declares them.

Overview
- Option
  • A named flag (-v/--verbose, --output FILE, ...) holding an Argument for its
    value semantics (arity, cast, default, validation, restrictions).
  • Adds: name, description, short/long flags, negation prefix, dependencies.
  • Unified accessors forward to the argument, so callers never need to know
    about the composition (option.arity, option.cast_to, ...).

- OptionBuilder
  • Fluent, mutable accumulator over one Option draft. Every setter returns the
    builder, so declarations chain:
        OptionBuilder("level").short("-l").long("--level").cast("integer").default(3)
  • from_mapping() applies a configuration mapping (keys: short, long,
    description/desc, cast, default, restricted, negation, dependencies);
    unknown keys are ignored and, the mapping being applied in order, the last
    write to a field wins.
  • finalize() validates the draft and returns the Option. Any later mutation
    through the builder raises ConfigurationError.

Finalize rules (in order, first failure wins)
1. arity unset → ZERO.
2. cast unset → "boolean" for arity ZERO without restricted values, else "string".
3. boolean cast:
   a. restricted values are rejected;
   b. a negation without a long flag is rejected;
   c. an unset or None default becomes False.
4. any other cast: a negation is rejected.

Negation
- With long flag "--force" and negation "no" the negated flag is "--no-force".

Quick example:
    >>> builder = OptionBuilder("force").short("-f").long("--force").negate()
    >>> builder.finalize().negated_flag
    '--no-force'
"""
import functools
import logging
import re
import warnings
from collections.abc import Iterable, Mapping

from . import converters
from .arguments import Arity, Argument
from .faults import ConfigurationError, FlaglessOptionWarning
from .utils import *

logger = logging.getLogger(__name__)


class Option:
    """
    Named, flag-addressed declaration.

    Properties
    - name: str, unique within the owning command.
    - description: str | None.
    - short_flag / long_flag: str | None ("-x" / "--long-name").
    - negation: str | None, prefix of the negated long flag.
    - dependent_options: tuple of option names that must be given alongside.
    - argument: the Argument carrying the value semantics.
    """

    __introspectable__ = (
        "name",
        "description",
        "short_flag",
        "long_flag",
        "negation",
        "dependent_options",
        "arity",
        "cast_to",
        "default_value",
        "allowable_values",
        "metaname",
    )

    name = mirror("name")
    description = mirror("description")
    short_flag = mirror("short_flag")
    long_flag = mirror("long_flag")
    negation = mirror("negation")
    argument = mirror("argument")

    def __init__(self, name):
        self._name = name
        self._description = None
        self._short_flag = None
        self._long_flag = None
        self._negation = None
        self._dependent_options = ()
        self._argument = Argument()

    # Value semantics, forwarded to the argument.

    @property
    def arity(self):
        return self._argument.arity

    @property
    def cast_to(self):
        return self._argument.cast_to

    @property
    def default_value(self):
        return self._argument.default_value

    @property
    def validation_step(self):
        return self._argument.validation_step

    @property
    def allowable_values(self):
        return self._argument.allowable_values

    @property
    def metaname(self):
        return self._argument.metaname

    @property
    def boolean(self):
        return self._argument.boolean

    @property
    def restricted(self):
        return self._argument.restricted

    @property
    def finalized(self):
        return self._argument.finalized

    @property
    def dependent_options(self):
        return tuple(self._dependent_options)

    @property
    def negated(self):
        return self._negation is not None

    @functools.cached_property
    def negated_flag(self):
        """
        The long flag with the negation prefix embedded ("--force" → "--no-force").
        """
        if not self.negated or self._long_flag is None:
            return None
        return re.sub(r"^--", f"--{self._negation}-", self._long_flag)

    def finalize(self):
        """
        Resolve defaults, check flag/cast/negation consistency, freeze.

        Returns self. Raises ConfigurationError naming the option on the first
        inconsistency. Calling it again on a finalized option is a no-op.
        """
        if self.finalized:
            return self

        argument = self._argument
        argument._arity = coalesce(argument._arity, Arity.ZERO)
        if argument._cast_to is Unset:
            argument._cast_to = converters.BOOLEAN if argument.boolean and not argument.restricted else converters.STRING

        if argument._cast_to == converters.BOOLEAN:
            if argument.restricted:
                raise ConfigurationError(
                    f"options cannot be both boolean and restricted to certain arguments: {self._name}",
                    option=self._name,
                )
            if self.negated and self._long_flag is None:
                raise ConfigurationError(f"the long flag is required for negation: {self._name}", option=self._name)
            if argument._default_value is Unset or argument._default_value is None:
                argument._default_value = False
        elif self.negated:
            raise ConfigurationError(f"unable to negate a non-boolean option: {self._name}", option=self._name)

        argument.finalize(self._name)

        if self._short_flag is None and self._long_flag is None:
            warnings.warn(
                FlaglessOptionWarning(f"option {self._name!r} has neither a short nor a long flag", option=self._name),
                stacklevel=3,
            )

        logger.debug("finalized %r", self)
        return self

    def __rich_repr__(self):
        for name in type(self).__introspectable__:
            yield name, getattr(self, name)

    def __repr__(self):
        return "option(%s)" % ", ".join("%s=%r" % pair for pair in self.__rich_repr__())


_SHORT_FLAG = re.compile(r"-[^-\s]")
_LONG_FLAG = re.compile(r"--[^-\s][^\s=]*")
_NEGATION = re.compile(r"[^\W_](-?[^\W_]+)*")


class OptionBuilder:
    """
    Fluent builder over a single Option draft.

    The draft is reachable as `builder.option` at any time; it only becomes a
    valid, read-only specification once finalize() succeeded.
    """

    def __init__(self, name):
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError("the option name must be a non-empty string", option=name)
        self._option = Option(name)

    @property
    def option(self):
        return self._option

    @property
    def name(self):
        return self._option.name

    def _draft(self):
        if self._option.finalized:
            raise ConfigurationError(f"the option is already finalized: {self._option.name}", option=self._option.name)
        return self._option

    def short(self, flag):
        option = self._draft()
        if not isinstance(flag, str) or not _SHORT_FLAG.fullmatch(flag):
            raise ConfigurationError(f"malformed short flag {flag!r}: {option.name}", option=option.name)
        option._short_flag = flag
        return self

    def long(self, flag):
        option = self._draft()
        if not isinstance(flag, str) or not _LONG_FLAG.fullmatch(flag):
            raise ConfigurationError(f"malformed long flag {flag!r}: {option.name}", option=option.name)
        option._long_flag = flag
        option.__dict__.pop("negated_flag", None)
        return self

    def desc(self, text):
        option = self._draft()
        if text is not None and not isinstance(text, str):
            raise ConfigurationError(f"the description must be a string: {option.name}", option=option.name)
        option._description = text
        return self

    description = desc

    def cast(self, kind):
        option = self._draft()
        try:
            option._argument._cast_to = converters.resolve(kind)
        except ConfigurationError:
            raise ConfigurationError(f"unknown cast kind {kind!r}: {option.name}", option=option.name) from None
        return self

    def arity(self, arity):
        option = self._draft()
        try:
            option._argument._arity = Arity(arity)
        except ValueError:
            raise ConfigurationError(f"unknown arity {arity!r}: {option.name}", option=option.name) from None
        return self

    def param(self, label):
        """
        Set the display label of the parameter.

        None leaves the arity untouched; a trailing "+" ("FILE+") means MANY,
        any other label means ONE.
        """
        option = self._draft()
        if label is None:
            option._argument._metaname = None
            return self
        if not isinstance(label, str) or not label.strip():
            raise ConfigurationError(f"the parameter label must be a non-empty string: {option.name}", option=option.name)
        option._argument._metaname = label
        option._argument._arity = Arity.MANY if label.endswith("+") else Arity.ONE
        return self

    def dependencies(self, names):
        option = self._draft()
        if isinstance(names, str) or not isinstance(names, Iterable):
            raise ConfigurationError(f"dependencies must be a sequence of option names: {option.name}", option=option.name)
        names = tuple(names)
        if not all(isinstance(name, str) and name for name in names):
            raise ConfigurationError(f"dependencies must be a sequence of option names: {option.name}", option=option.name)
        if option.name in names:
            raise ConfigurationError(f"an option cannot depend on itself: {option.name}", option=option.name)
        option._dependent_options = names
        return self

    def default(self, value):
        self._draft()._argument._default_value = value
        return self

    def only(self, *values):
        """
        Restrict the accepted values. Duplicates are rejected.
        """
        option = self._draft()
        allowed = []
        for value in values:
            if value in allowed:
                raise ConfigurationError(f"restricted values cannot contain duplicates: {option.name}", option=option.name)
            allowed.append(value)
        option._argument._allowable_values = tuple(allowed)
        return self

    def negate(self, prefix="no"):
        option = self._draft()
        if not isinstance(prefix, str) or not _NEGATION.fullmatch(prefix):
            raise ConfigurationError(f"malformed negation prefix {prefix!r}: {option.name}", option=option.name)
        option._negation = prefix
        option.__dict__.pop("negated_flag", None)
        return self

    def validate(self, step=Unset, /):
        """
        Attach the validation step: a callable over the raw token sequence that
        returns the validated value or raises.

        Usable directly (builder.validate(step), returning the builder) or, called
        without a step, as a decorator that hands the step back:

            @builder.validate()
            def check(tokens): ...
        """
        if step is Unset:
            @rename("validate")
            def wrapper(step, /):
                self.validate(step)
                return step
            return wrapper
        option = self._draft()
        if not callable(step):
            raise ConfigurationError(f"the validation step must be callable: {option.name}", option=option.name)
        option._argument._validation_step = step
        return self

    def from_mapping(self, config):
        """
        Apply a configuration mapping, key by key, in iteration order.
        """
        option = self._draft()
        if not isinstance(config, Mapping):
            raise ConfigurationError(f"the option configuration must be a mapping: {option.name}", option=option.name)

        for key, value in config.items():
            match key:
                case "short":
                    self.short(value)
                case "long":
                    self.long(value)
                case "description" | "desc":
                    self.desc(value)
                case "cast":
                    self.cast(value)
                case "default":
                    self.default(value)
                case "restricted":
                    if isinstance(value, str) or not isinstance(value, Iterable):
                        raise ConfigurationError(f"restricted values must be a collection: {option.name}", option=option.name)
                    self.only(*value)
                case "negation":
                    self.negate(value)
                case "dependencies":
                    self.dependencies(value)
                case _:
                    logger.debug("ignoring unknown configuration key %r for option %r", key, option.name)
        return self

    def finalize(self):
        return self._option.finalize()

    def __repr__(self):
        return f"option-builder(option={self._option!r})"


__all__ = (
    "Option",
    "OptionBuilder",
)
