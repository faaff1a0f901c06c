"""
Optwright command layer: declare commands, their options and subcommands.

What this module provides
- Command: an ordered listing of entries (separators, Options, nested
  Commands), a registry of option builders keyed by option name, an executor,
  a printer, summary/description text and an optional validation step for the
  residual positional arguments.
- CommandBuilder: the fluent DSL over a Command. Besides executor/printer/text
  setters it exposes one family of option declarations per converter kind.
- SuperCommand / SuperCommandBuilder: a Command that also routes to named
  subcommands, with a "parsimonious" mode and a metaname placeholder label.

Declaration matrix
- For every converter kind except boolean, four methods are generated once at
  import time (string shown; integer, int, float, file and date follow suit):
    string(name, desc, config=None, block=None)    -s/--name NAME     (one value)
    strings(name, desc, config=None, block=None)   -s/--name NAME+    (many values)
    string_(name, desc, config=None, block=None)   --name NAME        (no short flag)
    strings_(name, desc, config=None, block=None)  --name NAME+       (no short flag)
- boolean/boolean_ (aliases bool/bool_) declare presence-only flags.
- single/single_ and multiple/multiple_ read better than string/strings.

Quick start
    from optwright import Command, SuperCommand

    def build(builder):
        builder.summary("Copies files around")
        builder.boolean("verbose", "Talk more")
        builder.integer("level", "Compression level", {"default": 3})
        builder.strings_("exclude", "Patterns to skip")
        builder.help()
        builder.version("copier 1.0.0")

        @builder.executor
        def run(arguments, options):
            ...

    copier = Command("copier", build)

    tool = SuperCommand("tool", lambda builder: (
        builder.command(copier),
        builder.command("clean", lambda sub: sub.boolean("force", "Do not ask")),
        builder.help(),
    ))

Lifecycle
- Command(name, block) creates the command and its builder, hands the builder
  to the block, then finalizes (ensures a printer, defaulting to the standard
  one; super commands also default their metaname to "COMMAND").
- Every declared option is finalized (validated and frozen) as soon as it is
  declared, so configuration mistakes surface at the declaring line.
"""
import logging
import os.path
import warnings
from collections.abc import Mapping, Sequence

from . import converters
from .arguments import Arity
from .capabilities import Executable, HelpRenderer, ColorToggleable, Toggle
from .faults import ConfigurationError, DuplicateFlagWarning
from .options import Option, OptionBuilder
from .printing import HelpPrinter, TemplatePrinter
from .signals import HelpCalled, VersionCalled
from .utils import *

logger = logging.getLogger(__name__)

HELP = "__help__"
VERSION = "__version__"
METANAME = "COMMAND"


def _block(block, subject):
    if block is not None and not callable(block):
        raise ConfigurationError(f"the configuration block must be callable: {subject}", option=subject)
    return block


class CommandBuilder:
    """
    Fluent DSL over a Command.

    Every option declaration returns the finalized Option; the text/flag
    setters return the builder so calls can be chained.
    """

    def __init__(self, command):
        self._command = command

    @property
    def target(self):
        """
        The command under construction.
        """
        return self._command

    def executor(self, executor=Unset, /):
        """
        Set what runs once arguments are parsed.

        Accepts a callable taking (arguments, options), or an Executable object
        exposing execute(arguments, options). A class is treated as a plain
        callable, even when it defines execute(). Usable as a decorator:

            @builder.executor
            def run(arguments, options): ...
        """
        if executor is Unset:
            return rename(lambda executor, /: self.executor(executor), "executor")
        if executor is None:
            raise ConfigurationError("the executor was None", command=self._command.name)
        if not callable(executor) and not isinstance(executor, Executable):
            raise ConfigurationError(
                "the executor must be callable or implement 'execute'", command=self._command.name
            )
        self._command._executor = executor
        return executor

    def summary(self, text):
        self._command._summary = text
        return self

    def desc(self, text):
        self._command._description = text
        return self

    def printer(self, kind, options=None):
        """
        Choose how help is rendered.

        kind
        - "standard": the bundled HelpPrinter.
        - "template": the bundled TemplatePrinter; options["template"] must name
          an existing, readable file.
        - any HelpRenderer object, used as-is.

        options["color"], when present and falsy, disables color on printers
        that support toggling it. None as kind is ignored.
        """
        if kind is None:
            return None
        if options is not None and not isinstance(options, Mapping):
            raise ConfigurationError("the printer options must be a mapping", command=self._command.name)
        options = dict(options or {})

        match kind:
            case "standard":
                printer = HelpPrinter(width=options.get("width"))
            case "template":
                if (template := options.get("template")) is None:
                    raise ConfigurationError("no template file given to the template printer", command=self._command.name)
                if not os.path.isfile(template) or not os.access(template, os.R_OK):
                    raise ConfigurationError(
                        f"the template file doesn't exist or isn't readable: {template}", command=self._command.name
                    )
                printer = TemplatePrinter(template)
            case _ if isinstance(kind, HelpRenderer):
                printer = kind
            case _:
                raise ConfigurationError(f"unknown printing method for help: {kind!r}", command=self._command.name)

        if "color" in options and isinstance(printer, ColorToggleable) and isinstance(printer.color, Toggle):
            if options["color"]:
                printer.color.enable()
            else:
                printer.color.disable()

        self._command._printer = printer
        return printer

    def separator(self, text=None):
        """
        Append a blank line (no text) or a literal line to the listing.
        """
        if text is not None and not isinstance(text, str):
            raise ConfigurationError("the separator must be a string", command=self._command.name)
        self._command._listing.append("" if text is None else text)
        return self

    def option(self, declaration, block=None):
        """
        Declare an option in full.

        Forms
        - option("name", block): block receives the OptionBuilder.
        - option({"name": ["other", ...]}): dependencies only.
        - option({"name": {"short": "-n", ...}}): configuration mapping.
        A block may follow either mapping form for further customization.
        """
        if declaration is None:
            raise ConfigurationError("the option name was None", command=self._command.name)

        if isinstance(declaration, Mapping):
            if len(declaration) != 1:
                raise ConfigurationError("malformed option declaration", command=self._command.name)
            (name, body), = declaration.items()
            builder = OptionBuilder(name)
            if isinstance(body, Mapping):
                builder.from_mapping(body)
            elif isinstance(body, Sequence) and not isinstance(body, str):
                builder.dependencies(body)
            else:
                raise ConfigurationError("malformed option declaration", command=self._command.name, option=name)
        elif isinstance(declaration, str):
            builder = OptionBuilder(declaration)
            if block is None:
                raise ConfigurationError(f"no configuration block was given: {declaration}", option=declaration)
        else:
            raise ConfigurationError("malformed option declaration", command=self._command.name)

        if (block := _block(block, builder.name)) is not None:
            block(builder)
        return self._register(builder)

    def boolean(self, name, desc, config=None, block=None):
        return self._declare(name, desc, True, Arity.ZERO, converters.BOOLEAN, config, block)

    def boolean_(self, name, desc, config=None, block=None):
        return self._declare(name, desc, False, Arity.ZERO, converters.BOOLEAN, config, block)

    bool = boolean
    bool_ = boolean_

    def help(self, message=None):
        """
        Declare -h/--help. Its validation step raises HelpCalled, carrying the
        first token (a subcommand name) when one was given.
        """
        builder = OptionBuilder(HELP).short("-h").long("--help").desc(message or "Show this help message")

        @builder.validate()
        @rename("help")
        def step(tokens):
            raise HelpCalled(tokens[0] if tokens else None)

        return self._register(builder)

    def version(self, message, block=None):
        """
        Declare --version. Its validation step raises VersionCalled(message).
        """
        if not isinstance(message, str) or not message:
            raise ConfigurationError("the version message must be a non-empty string", command=self._command.name)
        builder = OptionBuilder(VERSION).long("--version").desc("The version number")

        @builder.validate()
        @rename("version")
        def step(tokens):
            raise VersionCalled(message)

        if (block := _block(block, VERSION)) is not None:
            block(builder)
        return self._register(builder)

    def arguments(self, step=Unset, /):
        """
        Attach the validation step for the positional arguments left after
        flag parsing. Usable as a decorator.
        """
        if step is Unset:
            return rename(lambda step, /: self.arguments(step), "arguments")
        if step is None or not callable(step):
            raise ConfigurationError("no validation step given to arguments", command=self._command.name)
        self._command._argument_validation = step
        return step

    def finalize(self):
        if self._command._printer is None:
            self.printer("standard")
        return self._command

    def _declare(self, name, desc, short, arity, kind, config, block):
        block = _block(block, name)
        builder = OptionBuilder(name)
        builder.desc(desc)
        if short:
            builder.short(flagify(name, short=True))
        builder.long(flagify(name))
        builder.param(paramify(name, arity))
        builder.arity(arity)
        builder.cast(kind)
        if config is not None:
            builder.from_mapping(config)
        if block is not None:
            block(builder)
        return self._register(builder)

    def _register(self, builder):
        command = self._command
        if builder.name in command._option_builders:
            raise ConfigurationError(
                f"the option name is already in use: {builder.name}", command=command.name, option=builder.name
            )

        option = builder.finalize()

        taken = {flag for other in command.options for flag in (other.short_flag, other.long_flag, other.negated_flag)}
        for flag in (option.short_flag, option.long_flag, option.negated_flag):
            if flag is not None and flag in taken:
                warnings.warn(
                    DuplicateFlagWarning(f"flag {flag!r} of option {option.name!r} is already in use", option=option.name),
                    stacklevel=3,
                )

        command._option_builders[option.name] = builder
        command._listing.append(option)
        logger.debug("registered option %r on command %r", option.name, command.name)
        return option

    def __repr__(self):
        return f"{type(self).__name__.lower()}(command={self._command.name!r})"


def _declarator(kind, short, arity, name):
    @rename(name)
    def declare(self, name, desc, config=None, block=None):
        return self._declare(name, desc, short, arity, kind, config, block)

    declare.__doc__ = (
        f"Declare a {kind} option taking {'many values' if arity is Arity.MANY else 'one value'}, "
        f"{'with' if short else 'without'} a short flag."
    )
    return declare


# (method name pattern, short flag?, arity), generated for every non-boolean kind.
_SHAPES = (
    ("{}", True, Arity.ONE),
    ("{}s", True, Arity.MANY),
    ("{}_", False, Arity.ONE),
    ("{}s_", False, Arity.MANY),
)

for _kind in converters.kinds():
    if converters.is_boolean(_kind):
        continue
    for _pattern, _short, _arity in _SHAPES:
        setattr(CommandBuilder, _pattern.format(_kind), _declarator(_kind, _short, _arity, _pattern.format(_kind)))
del _kind, _pattern, _short, _arity

CommandBuilder.single = CommandBuilder.string
CommandBuilder.single_ = CommandBuilder.string_
CommandBuilder.multiple = CommandBuilder.strings
CommandBuilder.multiple_ = CommandBuilder.strings_


class SuperCommandBuilder(CommandBuilder):
    """
    CommandBuilder for super commands: adds subcommand registration, the
    parsimonious switch and the metaname label.
    """

    def command(self, source, block=None):
        """
        Register a subcommand.

        - command("name", block): build a fresh Command, handing its builder to
          the block, then finalize it.
        - command(existing): register an already built Command as-is.
        """
        if isinstance(source, Command):
            if block is not None:
                raise ConfigurationError(
                    f"a block cannot be applied to an already built command: {source.name}", command=source.name
                )
            command = source
        else:
            command = Command(source, block)

        registry = self._command._command_builders
        if command.name in registry:
            raise ConfigurationError(f"the command name is already in use: {command.name}", command=command.name)

        registry[command.name] = command.builder
        self._command._listing.append(command)
        logger.debug("registered command %r on %r", command.name, self._command.name)
        return command

    def parsimonious(self):
        self._command._parsimonious = True
        return self

    def metaname(self, label):
        if not isinstance(label, str) or not label.strip():
            raise ConfigurationError("the metaname must be a non-empty string", command=self._command.name)
        self._command._metaname = label
        return self

    def help(self, message=None):
        """
        Register a `help` subcommand. Its argument validation raises HelpCalled
        carrying the first argument (the command to explain), or no payload.
        """
        def build(builder):
            builder.summary(message or "Show this help message")

            @builder.arguments
            @rename("help")
            def step(tokens):
                raise HelpCalled(tokens[0] if tokens else None)

        return self.command(Command("help", build))

    def finalize(self):
        if self._command._metaname is None:
            self._command._metaname = METANAME
        return super().finalize()


class Command:
    """
    A declared command.

    Properties (read-only; mutate through `builder`)
    - name, summary, description
    - listing: ordered entries (str separators, Options, Commands)
    - option_builders: option name → OptionBuilder
    - options: the Options of the listing, in order
    - executor, printer, argument_validation
    """

    __builder__ = CommandBuilder
    __introspectable__ = (
        "name",
        "summary",
        "description",
        "listing",
        "executor",
        "printer",
        "argument_validation",
    )

    name = mirror("name")
    summary = mirror("summary")
    description = mirror("description")
    listing = mirror("listing")
    option_builders = mirror("option_builders")
    executor = mirror("executor")
    printer = mirror("printer")
    argument_validation = mirror("argument_validation")
    builder = mirror("builder")

    def __init__(self, name, block=None):
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError("the command name must be a non-empty string", command=name)
        self._name = name
        self._summary = None
        self._description = None
        self._listing = []
        self._option_builders = {}
        self._executor = None
        self._printer = None
        self._argument_validation = None
        self._builder = type(self).__builder__(self)

        if (block := _block(block, name)) is not None:
            block(self._builder)
        self._builder.finalize()

    @property
    def options(self):
        return tuple(entry for entry in self._listing if isinstance(entry, Option))

    def execute(self, arguments, options=None):
        """
        Run the executor with the parsed arguments and options.
        """
        if self._executor is None:
            raise ConfigurationError(f"no executor was given: {self._name}", command=self._name)
        options = {} if options is None else options
        if isinstance(self._executor, Executable) and not isinstance(self._executor, type):
            return self._executor.execute(arguments, options)
        return self._executor(arguments, options)

    def print_help(self):
        self._printer.print_help(self)

    def __rich_repr__(self):
        for name in type(self).__introspectable__:
            yield name, getattr(self, name)

    def __repr__(self):
        return "%s(%s)" % (
            "super-command" if isinstance(self, SuperCommand) else "command",
            ", ".join("%s=%r" % pair for pair in self.__rich_repr__()),
        )


class SuperCommand(Command):
    """
    A command that dispatches to named subcommands.

    Additional properties
    - command_builders: subcommand name → CommandBuilder
    - commands: the Commands of the listing, in order
    - parsimonious: once a subcommand is recognized, every remaining token
      belongs to it (default False)
    - metaname: placeholder label for the subcommand in usage ("COMMAND")
    """

    __builder__ = SuperCommandBuilder
    __introspectable__ = Command.__introspectable__ + (
        "parsimonious",
        "metaname",
    )

    command_builders = mirror("command_builders")
    parsimonious = mirror("parsimonious")
    metaname = mirror("metaname")

    def __init__(self, name, block=None):
        self._command_builders = {}
        self._parsimonious = False
        self._metaname = None
        super().__init__(name, block)

    @property
    def commands(self):
        return tuple(entry for entry in self._listing if isinstance(entry, Command))


__all__ = (
    "HELP",
    "VERSION",
    "METANAME",
    "Command",
    "CommandBuilder",
    "SuperCommand",
    "SuperCommandBuilder",
)
