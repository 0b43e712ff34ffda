"""
Command Dispatcher.

Maps the first CLI token to a CommandDescriptor, splits the remaining
tokens into options and positional arguments, checks the arity, and runs
the handler with the endpoint client passed in explicitly.

Options follow flag-set rules: they take one or two leading dashes, and
`--` ends them. Parsing stops at the first positional token unless the
command is interspersed (`remove vm1 --yes`). Otherwise everything after
it reaches the handler untouched, so `ssh vm1 -p 2222` hands `-p 2222`
to ssh.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mezasi.cli.descriptors import CommandDescriptor, CommandRegistry
from mezasi.core.exceptions import InvalidArguments
from mezasi.core.logging import get_logger

logger = get_logger(__name__)
console = Console()

HELP_COMMAND = "help"
HELP_FLAGS = frozenset({"-h", "-help", "--help"})

_TRUE = frozenset({"1", "t", "T", "true", "TRUE", "True"})
_FALSE = frozenset({"0", "f", "F", "false", "FALSE", "False"})


@dataclass
class Invocation:
    """A parsed command line. descriptor is None for the general help screen."""

    descriptor: CommandDescriptor | None
    args: list[str] = field(default_factory=list)
    options: dict[str, Any] = field(default_factory=dict)
    help: bool = False


def _parse_bool(name: str, value: str) -> bool:
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise InvalidArguments(f"invalid boolean value {value!r} for flag -{name}")


def parse_options(
    descriptor: CommandDescriptor, tokens: Sequence[str],
) -> tuple[dict[str, Any], list[str], bool]:
    """
    Split tokens into (options, positional args, help requested).

    Parsing stops at the first positional token unless the descriptor is
    interspersed, in which case flags after positionals are parsed too.
    `--` always ends option parsing.

    Raises:
        InvalidArguments: On an unknown flag, bad flag syntax, or missing value
    """
    options = descriptor.defaults()
    args: list[str] = []
    index = 0

    while index < len(tokens):
        token = tokens[index]
        index += 1
        if token == "--":
            args.extend(tokens[index:])
            break
        if len(token) < 2 or not token.startswith("-"):
            if not descriptor.interspersed:
                args.extend(tokens[index - 1:])
                break
            args.append(token)
            continue
        if token in HELP_FLAGS:
            return options, [], True

        name = token[2:] if token.startswith("--") else token[1:]
        if not name or name[0] in "-=":
            raise InvalidArguments(f"bad flag syntax: {token}")

        value: str | None = None
        if "=" in name:
            name, value = name.split("=", 1)

        spec = descriptor.options.get(name)
        if spec is None:
            raise InvalidArguments(
                f"flag provided but not defined: -{name}\nUsage: {descriptor.usage}"
            )

        if spec.is_flag:
            options[name] = True if value is None else _parse_bool(name, value)
            continue

        if value is None:
            if index >= len(tokens):
                raise InvalidArguments(f"flag needs an argument: -{name}")
            value = tokens[index]
            index += 1
        options[name] = value

    return options, args, False


def parse_invocation(registry: CommandRegistry, tokens: Sequence[str]) -> Invocation:
    """
    Resolve the command named by the first token and parse the rest.

    Raises:
        UnknownCommand: If the first token names no command
        InvalidArguments: If the options cannot be parsed
    """
    if not tokens or tokens[0] in HELP_FLAGS:
        return Invocation(descriptor=None, help=True)

    if tokens[0] == HELP_COMMAND:
        descriptor = registry.get(tokens[1]) if len(tokens) > 1 else None
        return Invocation(descriptor=descriptor, help=True)

    descriptor = registry.get(tokens[0])
    options, args, help_requested = parse_options(descriptor, tokens[1:])
    return Invocation(descriptor=descriptor, args=args, options=options, help=help_requested)


def print_help(registry: CommandRegistry, descriptor: CommandDescriptor | None = None) -> None:
    """Print the command table, or one command's usage and options."""
    if descriptor is None:
        table = Table(title="Commands", show_header=True)
        table.add_column("Usage", style="cyan")
        table.add_column("Description")
        for command in registry:
            table.add_row(escape(command.usage), escape(command.summary))
        console.print(table)
        return

    console.print(f"Usage: {escape(descriptor.usage)}")
    if descriptor.summary:
        console.print(f"\n{escape(descriptor.summary)}")
    if descriptor.options:
        table = Table(show_header=True)
        table.add_column("Option", style="cyan")
        table.add_column("Type")
        table.add_column("Description")
        for name, spec in descriptor.options.items():
            table.add_row(f"--{name}", spec.type.__name__, escape(spec.help))
        console.print(table)


class Dispatcher:
    """
    Runs one command against an endpoint client.

    Usage:
        dispatcher = Dispatcher(build_registry(), client)
        exit_code = dispatcher.dispatch(["info", "vm1"])
    """

    def __init__(self, registry: CommandRegistry, client: Any) -> None:
        self._registry = registry
        self._client = client

    @property
    def registry(self) -> CommandRegistry:
        return self._registry

    def run(self, invocation: Invocation) -> int:
        """Check arity and run the handler of a parsed invocation."""
        if invocation.help or invocation.descriptor is None:
            print_help(self._registry, invocation.descriptor)
            return 0

        descriptor = invocation.descriptor
        descriptor.arity.check(invocation.args, descriptor.usage)

        logger.debug(
            "Dispatching command",
            command=descriptor.name,
            args=invocation.args,
            options=invocation.options,
        )
        exit_code = descriptor.handler(self._client, invocation.args, invocation.options)
        return exit_code or 0

    def dispatch(self, tokens: Sequence[str]) -> int:
        """Parse tokens and run the selected command. Returns the exit code."""
        return self.run(parse_invocation(self._registry, tokens))
