"""
Command Descriptors.

A CommandDescriptor declares one subcommand: its name, usage line,
arity, options, and the handler that builds and sends its request.
Descriptors are collected in a CommandRegistry, which refuses duplicate
names and resolves the first CLI token to a descriptor.
"""

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from mezasi.cli.arity import Arity
from mezasi.core.exceptions import UnknownCommand

# handler(client, args, options) -> exit code (None means 0)
Handler = Callable[[Any, list[str], dict[str, Any]], int | None]


@dataclass(frozen=True)
class OptionSpec:
    """A named command option of type str or bool."""

    type: type = str
    default: Any = None
    help: str = ""

    def __post_init__(self) -> None:
        if self.type not in (str, bool):
            raise ValueError(f"unsupported option type: {self.type!r}")
        if self.default is None:
            object.__setattr__(self, "default", "" if self.type is str else False)

    @property
    def is_flag(self) -> bool:
        return self.type is bool


@dataclass(frozen=True)
class CommandDescriptor:
    """
    Declarative definition of a subcommand.

    With interspersed set, known flags are still parsed after the first
    positional argument, so `remove vm1 --yes` works. Without it,
    everything from the first positional on reaches the handler as is.
    """

    name: str
    usage: str
    handler: Handler
    arity: Arity = field(default_factory=Arity)
    options: Mapping[str, OptionSpec] = field(default_factory=dict)
    summary: str = ""
    interspersed: bool = False

    def defaults(self) -> dict[str, Any]:
        """Option values before any CLI token is parsed."""
        return {name: spec.default for name, spec in self.options.items()}


class CommandRegistry:
    """Ordered set of command descriptors keyed by unique name."""

    def __init__(self, descriptors: list[CommandDescriptor] | None = None) -> None:
        self._commands: dict[str, CommandDescriptor] = {}
        for descriptor in descriptors or []:
            self.register(descriptor)

    def register(self, descriptor: CommandDescriptor) -> CommandDescriptor:
        if descriptor.name in self._commands:
            raise ValueError(f"duplicate command name: {descriptor.name}")
        self._commands[descriptor.name] = descriptor
        return descriptor

    def get(self, name: str) -> CommandDescriptor:
        """
        Look up a descriptor by exact name.

        Raises:
            UnknownCommand: If no descriptor has that name
        """
        try:
            return self._commands[name]
        except KeyError:
            raise UnknownCommand(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self._commands

    def __iter__(self) -> Iterator[CommandDescriptor]:
        return iter(self._commands.values())

    def __len__(self) -> int:
        return len(self._commands)
