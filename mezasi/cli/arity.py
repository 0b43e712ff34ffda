"""
Positional argument arity.

Each command carries an explicit Arity. Arity.from_usage derives the same
value from a usage line, where:

    <name>   required positional argument
    [name]   optional positional argument
    ...      every remaining argument is accepted
    other    literal, ignored

Usage:
    arity = Arity.from_usage("public_key <name> [file]")   # Arity(1, 2)
    arity.check(["vm1"], usage="public_key <name> [file]")
"""

import re
from collections.abc import Sequence
from dataclasses import dataclass

from mezasi.core.exceptions import ArgumentCountError

_REQUIRED = re.compile(r"<\w+>")
_OPTIONAL = re.compile(r"\[\w+\]")
VARIADIC = "..."


@dataclass(frozen=True)
class Arity:
    """Accepted positional argument count: minimum..maximum, or unbounded when maximum is None."""

    minimum: int = 0
    maximum: int | None = 0

    def __post_init__(self) -> None:
        if self.minimum < 0:
            raise ValueError("minimum must be >= 0")
        if self.maximum is not None and self.maximum < self.minimum:
            raise ValueError("maximum must be >= minimum")

    @property
    def unbounded(self) -> bool:
        return self.maximum is None

    @classmethod
    def from_usage(cls, usage: str) -> "Arity":
        """Derive the arity encoded in a usage line."""
        required = 0
        optional = 0
        for token in usage.split():
            if _REQUIRED.search(token):
                required += 1
            if _OPTIONAL.search(token):
                optional += 1
            # Arguments after the marker are never counted.
            if token == VARIADIC:
                return cls(minimum=required, maximum=None)
        return cls(minimum=required, maximum=required + optional)

    def accepts(self, count: int) -> bool:
        if count < self.minimum:
            return False
        return self.maximum is None or count <= self.maximum

    def check(self, args: Sequence[str], usage: str) -> None:
        """
        Raise ArgumentCountError unless len(args) fits this arity.

        Args:
            args: Positional arguments supplied to the command
            usage: Usage line shown to the user on failure
        """
        if not self.accepts(len(args)):
            raise ArgumentCountError(usage)
