"""
Optwright faults (declaration errors and warnings) and their rendering.

Scope
- ConfigurationError: the single error kind for mistakes in a program's own
  option/command declarations. It is a programmer error: raised synchronously
  by the builders and never recovered internally.
- ConfigurationWarning: base for non-fatal declaration smells, emitted through
  the warnings module so hosts can filter or escalate them.
- FlaglessOptionWarning: an option finalized with neither a short nor a long flag.
- DuplicateFlagWarning: two options of one command answer to the same flag.

Rendering
- Both kinds implement __rich__, so `rich.print(error)` shows a compact
  "[ optwright | configuration error ]" header followed by the message and,
  when present, the offending option/command name.
- Styles can be overridden from the host via a __styles__ mapping in __main__.

Control-flow signals (help/version) deliberately live in optwright.signals and
share no base class with these faults.
"""
from collections import defaultdict
from types import MappingProxyType

from rich.console import Group
from rich.text import Text

from .utils import Unset


def _styles(defaults):
    return defaultdict(str, defaults | getattr(__import__("__main__"), "__styles__", {}))


class ConfigurationError(Exception):
    """
    An option, argument or command declaration is inconsistent.

    Attributes
    - message: str, the human-readable description.
    - context: read-only mapping with whatever the raiser knew (typically
      `option=` or `command=` holding the offending name).
    """

    def __init__(self, message=Unset, /, **context):
        assert isinstance(message, str | Unset)
        super().__init__(message or "invalid configuration")
        self.message = message or "invalid configuration"
        self.context = MappingProxyType(context)

    def __rich__(self):
        styles = _styles({
            "fault-title": "bold #FF4DA6",
            "fault-message": "#C8C8D0",
            "fault-subject": "bold #00E5FF",
        })

        header = Text.assemble("[ optwright | ", ("configuration error", styles["fault-title"]), " ]")
        message = Text(self.message, styles["fault-message"])

        subjects = [Text.assemble(" → ", key, ": ", (str(value), styles["fault-subject"]))
                    for key, value in self.context.items()]
        return Group(header, message, *subjects)


class ConfigurationWarning(Warning):
    """
    Base for declarations that are legal but probably not what the author meant.
    """

    def __init__(self, message=Unset, /, **context):
        assert isinstance(message, str | Unset)
        super().__init__(message or "suspicious configuration")
        self.message = message or "suspicious configuration"
        self.context = MappingProxyType(context)

    def __rich__(self):
        styles = _styles({
            "warning-title": "bold #FFC2E0",
            "warning-message": "#D6D6DE",
        })
        header = Text.assemble("[ optwright | ", ("configuration warning", styles["warning-title"]), " ]")
        return Group(header, Text(self.message, styles["warning-message"]))


class FlaglessOptionWarning(ConfigurationWarning): ...
class DuplicateFlagWarning(ConfigurationWarning): ...


__all__ = (
    "ConfigurationError",
    "ConfigurationWarning",
    "FlaglessOptionWarning",
    "DuplicateFlagWarning",
)
