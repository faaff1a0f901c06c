"""
Help printers bundled with optwright.

Two printers satisfy the HelpRenderer capability (print_help(command)) and the
ColorToggleable one (a `color` switch):

- HelpPrinter: the standard printer; lays out usage, summary, description and
  the command listing (options, separators, subcommands) with rich.
- TemplatePrinter: fills a user template file with string.Template, for
  programs that want full control over the help layout. Placeholders:
  $name, $summary, $description, $usage, $options, $commands.

Palette
- Define a mapping named __styles__ in __main__ to override any entry of
  HelpPrinter's palette (keys: usage-label, program-name, metaname, option-name,
  parameter, description, command-name, separator).
- With color disabled every style is dropped.
"""
import os.path
import string
from collections import defaultdict

from rich.console import Console, Group
from rich.table import Table
from rich.text import Text

from .options import Option


class Color:
    """
    On/off switch for styled output.
    """

    def __init__(self, enabled=True):
        self.enabled = bool(enabled)

    def enable(self):
        self.enabled = True

    def disable(self):
        self.enabled = False

    def __bool__(self):
        return self.enabled

    def __repr__(self):
        return f"color(enabled={self.enabled!r})"


def _flags(option):
    """
    "-f, --[no-]force" / "-l, --level LEVEL" style rendering of an option's flags.
    """
    names = []
    if option.short_flag:
        names.append(option.short_flag)
    if option.long_flag:
        names.append(f"--[{option.negation}-]{option.long_flag[2:]}" if option.negated else option.long_flag)
    return ", ".join(names)


def _usage(command):
    """
    One-line usage: program name, an [OPTIONS] marker when options exist and,
    for super commands, the metaname placeholder.
    """
    parts = [command.name]
    if command.option_builders:
        parts.append("[OPTIONS]")
    if (metaname := getattr(command, "metaname", None)) is not None:
        parts.append(metaname)
    return " ".join(parts)


def _entries(command):
    """
    Split the listing into plain rows: ("option", flags, param, text),
    ("command", name, summary), or ("separator", text).
    """
    from .commands import Command

    for entry in command.listing:
        if isinstance(entry, Option):
            yield "option", _flags(entry), entry.metaname or "", entry.description or ""
        elif isinstance(entry, Command):
            yield "command", entry.name, entry.summary or ""
        else:
            yield "separator", str(entry)


class HelpPrinter:
    """
    Standard rich-based help layout.

    Options
    - color: bool, styled output (default True).
    - width: int | None, forced console width.
    - console: rich Console to print to (created per call when omitted).
    """

    def __init__(self, *, color=True, width=None, console=None):
        self.color = Color(color)
        self.width = width
        self.console = console

    def _styler(self):
        styles = defaultdict(str, {
            "usage-label": "bold #00E6FF",
            "program-name": "bold #FF4D94",
            "metaname": "bold italic #FFD600",
            "option-name": "bold #00E6FF",
            "parameter": "bold #FFD600",
            "description": "#9CA3AF",
            "command-name": "bold #22C55E",
            "separator": "bold #FFFFFF",
        } | getattr(__import__("__main__"), "__styles__", {}))
        return lambda style: styles[style] if self.color else ""

    def render(self, command):
        """
        Build the help renderable for a finalized command.
        """
        styler = self._styler()
        renders = []

        usage = Text()
        usage.append("Usage", styler("usage-label")).append(": ")
        usage.append(command.name, styler("program-name"))
        for part in _usage(command).split(" ")[1:]:
            usage.append(" ").append(part, styler("metaname") if part == getattr(command, "metaname", None) else "")
        renders.append(usage)

        if command.summary:
            renders.append(Text(command.summary, styler("description")))
        if command.description:
            renders.append(Text("\n" + command.description, styler("description")))

        table = None
        for kind, *fields in _entries(command):
            if table is None:
                table = Table.grid(padding=(0, 2))
                table.add_column(no_wrap=True)
                table.add_column()
            match kind:
                case "option":
                    flags, param, description = fields
                    head = Text("  ").append(flags, styler("option-name"))
                    if param:
                        head.append(" ").append(param, styler("parameter"))
                    table.add_row(head, Text(description, styler("description")))
                case "command":
                    name, summary = fields
                    table.add_row(Text("  ").append(name, styler("command-name")), Text(summary, styler("description")))
                case "separator":
                    text, = fields
                    table.add_row(Text(text, styler("separator")), Text(""))

        if table is not None:
            renders.append(Text(""))
            renders.append(table)

        return Group(*renders)

    def print_help(self, command):
        console = self.console or Console(width=self.width, no_color=not self.color, highlight=False)
        console.print(self.render(command))


class TemplatePrinter:
    """
    Template-file driven help. The template must exist when the printer is
    configured; it is read each time help is printed.
    """

    def __init__(self, template, *, color=True, console=None):
        if not isinstance(template, str | os.PathLike):
            raise TypeError("TemplatePrinter() template must be a path")
        self.template = os.fspath(template)
        self.color = Color(color)
        self.console = console

    def render(self, command):
        options = []
        commands = []
        for kind, *fields in _entries(command):
            match kind:
                case "option":
                    flags, param, description = fields
                    options.append(f"  {flags}{' ' + param if param else ''}    {description}".rstrip())
                case "command":
                    name, summary = fields
                    commands.append(f"  {name}    {summary}".rstrip())
                case "separator":
                    options.append(fields[0])

        with open(self.template, encoding="utf-8") as file:
            template = string.Template(file.read())

        return template.safe_substitute(
            name=command.name,
            summary=command.summary or "",
            description=command.description or "",
            usage=_usage(command),
            options="\n".join(options),
            commands="\n".join(commands),
        )

    def print_help(self, command):
        console = self.console or Console(no_color=not self.color, highlight=False)
        console.print(self.render(command), markup=False)


__all__ = (
    "Color",
    "HelpPrinter",
    "TemplatePrinter",
)
