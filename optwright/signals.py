"""
Control-flow signals for the built-in help and version declarations.

HelpCalled and VersionCalled are not failures. They are raised from the
validation steps of the `help`/`version` declarations to say “stop normal
processing and do this instead”, and they unwind to whatever drives the
program, which renders the help/version text and decides how to exit. This
library never terminates the process itself.

Because they derive from ControlSignal and not from ConfigurationError, a
driver can always tell them apart by type:

    try:
        ...
    except HelpCalled as signal:
        command.printer.print_help(command)
    except VersionCalled as signal:
        print(signal.message)

Drivers that prefer plain return values can use evaluate(), which runs a
validation step and folds the signals into tagged results:

    match evaluate(option.validation_step, tokens):
        case RequestHelp(command=name): ...
        case RequestVersion(message=message): ...
        case Continue(value=value): ...
"""
from typing import NamedTuple


class ControlSignal(Exception):
    """
    Base for non-error, non-local exits raised during validation.
    """


class HelpCalled(ControlSignal):
    """
    Help was requested; `command` names the subcommand the user asked about,
    or is None for help on the current command.
    """

    def __init__(self, command=None, /):
        super().__init__(command)
        self.command = command


class VersionCalled(ControlSignal):
    """
    The version was requested; `message` is the text to show.
    """

    def __init__(self, message, /):
        super().__init__(message)
        self.message = message


class Continue(NamedTuple):
    value: object


class RequestHelp(NamedTuple):
    command: str | None


class RequestVersion(NamedTuple):
    message: str


def evaluate(step, tokens, /):
    """
    Run a validation step over raw tokens and return a tagged result.

    - A missing step (None) passes the tokens through as Continue(tuple(tokens)).
    - HelpCalled → RequestHelp(command); VersionCalled → RequestVersion(message).
    - Any other exception, ConfigurationError included, propagates untouched.
    """
    tokens = tuple(tokens)
    if step is None:
        return Continue(tokens)
    if not callable(step):
        raise TypeError("evaluate() first argument must be callable or None")
    try:
        return Continue(step(tokens))
    except HelpCalled as signal:
        return RequestHelp(signal.command)
    except VersionCalled as signal:
        return RequestVersion(signal.message)


__all__ = (
    "ControlSignal",
    "HelpCalled",
    "VersionCalled",
    "Continue",
    "RequestHelp",
    "RequestVersion",
    "evaluate",
)
