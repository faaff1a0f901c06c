"""
Capability protocols checked when a command is configured.

- Executable: an object exposing execute(arguments, options).
- HelpRenderer: an object exposing print_help(command).
- ColorToggleable: a renderer exposing a `color` switch with enable()/disable().

They are runtime-checkable, so the builders validate executors and printers
with isinstance() at declaration time instead of failing later, mid-run.
"""
from typing import Protocol, runtime_checkable


@runtime_checkable
class Executable(Protocol):
    def execute(self, arguments, options): ...


@runtime_checkable
class HelpRenderer(Protocol):
    def print_help(self, command): ...


@runtime_checkable
class Toggle(Protocol):
    def enable(self): ...
    def disable(self): ...


@runtime_checkable
class ColorToggleable(Protocol):
    color: Toggle


__all__ = (
    "Executable",
    "HelpRenderer",
    "Toggle",
    "ColorToggleable",
)
