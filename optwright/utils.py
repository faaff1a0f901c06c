"""
Optwright utilities (small helpers shared by the declaration layers)

Overview
- UnsetType / Unset
  • Singleton sentinel meaning “never declared”, distinct from None/False/0.
  • Falsey, printable as "Unset", sealed against subclassing.

- coalesce(value, default=None)
  • Materialize Unset into a concrete default, keeping legitimate falsey values.

- rename(callable, name) / @rename("name")
  • Give generated callables (declaration methods, validation steps) readable
    __name__/__qualname__ so tracebacks and reprs stay clean.

- mirror("attr")
  • Read-only property over a private backing field (self._attr); containers are
    handed out as fresh copies so callers cannot reach into finalized state.

- flagify(name, /, *, short=False)
  • Derive "--long-flag" / "-s" forms from a declared option name.

- paramify(name, arity)
  • Derive the display parameter label (NAME, NAME+, or None) for an arity.

Stability
- Everything listed in __all__ is re-exported by the package; the rest is internal.
"""
import builtins
import functools
from collections.abc import Sequence, Mapping, Set
from typing import final


@final
class UnsetType:
    """
    Sentinel type for a value that was never declared.

    Builders start every field as Unset so finalize() can tell “the author said
    nothing” apart from “the author said None/False”. There is exactly one
    instance, Unset.
    """

    def __or__(self, other, /):
        """
        Support PEP 604 unions in isinstance checks (e.g., str | Unset).
        """
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    def __ror__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo, /):
        return self

    def __reduce__(self):
        return "Unset"

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")


def coalesce(object, default=None, /):
    """
    Return object unless it is Unset, in which case return default.

    None, 0, "" and empty containers are preserved; only the sentinel is replaced.

    Examples
    - coalesce("name", "fallback") -> "name"
    - coalesce(Unset, "fallback")  -> "fallback"
    - coalesce(False, True)        -> False
    """
    return object if object is not Unset else default


def rename(*parameters):
    """
    Set __name__/__qualname__ on a callable, or return a decorator doing so.

    Forms
    - rename(callable, name) -> callable (renamed in place)
    - rename(name)           -> decorator

    Used for the generated declaration methods of CommandBuilder (so that
    `CommandBuilder.integers.__name__ == "integers"`) and for the built-in
    help/version validation steps.
    """
    match len(parameters):
        case 2:
            callable, name = parameters
            if not builtins.callable(callable):
                raise TypeError("rename() first argument must be callable")
            if not isinstance(name, str):
                raise TypeError("rename() second argument must be a string")
            try:
                callable.__qualname__ = name
                callable.__name__ = name
            except (AttributeError, TypeError):
                raise TypeError("rename() first argument must be a updatable callable") from None
            return callable
        case 1:
            name, = parameters
            if not isinstance(name, str):
                raise TypeError("@rename() argument must be a string")

            def wrapper(callable):
                if not builtins.callable(callable):
                    raise TypeError("@rename() must be applied to a callable")
                return rename(callable, name)

            return rename(wrapper, "rename")
        case _:
            raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


def _detach(object):
    """
    Shallow-copy containers so public accessors never leak the backing storage.

    - Sequence (non-string) → list
    - Mapping → dict (same keys, same values)
    - Set → set
    - anything else → returned as-is

    Elements are not copied: an Option inside a listing stays the same object,
    which the identity-based checks of the command layer rely on.
    """
    if isinstance(object, Sequence) and not isinstance(object, str):
        return list(object)
    elif isinstance(object, Mapping):
        return dict(object)
    elif isinstance(object, Set):
        return set(object)
    return object


def mirror(name, /):
    """
    Define a read-only property exposing self._{name}.

    Containers are returned as fresh copies (see _detach).
    """
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")

    @rename(name)
    def getter(self):
        return _detach(getattr(self, "_" + name))

    return property(getter)


def flagify(name, /, *, short=False):
    """
    Derive a flag from a declared option name.

    - long:  "--" + lower-cased name with underscores turned into hyphens
             ("dry_run" → "--dry-run")
    - short: "-" + the first character of the name ("dry_run" → "-d")
    """
    if not isinstance(name, str) or not name:
        raise TypeError("flagify() argument must be a non-empty string")
    if short:
        return "-" + name[0]
    return "--" + name.lower().replace("_", "-")


def paramify(name, arity, /):
    """
    Display label for an option parameter: NAME for one value, NAME+ for many,
    None when the option takes no value.
    """
    # Imported lazily: arguments imports this module.
    from .arguments import Arity

    match Arity(arity):
        case Arity.ZERO:
            return None
        case Arity.ONE:
            return name.upper()
        case Arity.MANY:
            return name.upper() + "+"


Unset = UnsetType()
"""
The single “never declared” marker. Falsey, distinct from None.
"""


__all__ = (
    # Functions
    "coalesce",
    "rename",
    "mirror",
    "flagify",
    "paramify",

    # Types
    "UnsetType",

    # Constants
    "Unset",
)
