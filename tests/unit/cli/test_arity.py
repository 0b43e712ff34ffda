"""Unit tests for positional argument arity."""

import pytest

from mezasi.cli.arity import Arity
from mezasi.core.exceptions import ArgumentCountError, InvalidArguments


class TestFromUsage:
    """Tests for deriving arity from a usage line."""

    @pytest.mark.parametrize(
        ("usage", "expected"),
        [
            ("list", Arity(0, 0)),
            ("info <name>", Arity(1, 1)),
            ("public_key <name> [file]", Arity(1, 2)),
            ("register [options]", Arity(0, 1)),
            ("copy <src> <dst> [mode] [owner]", Arity(2, 4)),
            ("ssh <name> ...", Arity(1, None)),
            ("remove <name> [--yes]", Arity(1, 1)),
            ("exec ...", Arity(0, None)),
        ],
    )
    def test_usage_lines(self, usage: str, expected: Arity) -> None:
        assert Arity.from_usage(usage) == expected

    def test_arguments_after_variadic_marker_are_ignored(self) -> None:
        """Only the minimum accumulated before '...' counts."""
        assert Arity.from_usage("run <a> ... <b>") == Arity(1, None)

    def test_extra_whitespace_is_ignored(self) -> None:
        assert Arity.from_usage("  info   <name>  ") == Arity(1, 1)

    def test_placeholder_embedded_in_token_still_counts(self) -> None:
        assert Arity.from_usage("tag <name>, [value]") == Arity(1, 2)


class TestCheck:
    """Tests for accepting and rejecting argument counts."""

    @pytest.mark.parametrize(
        "usage",
        ["list", "info <name>", "public_key <name> [file]", "cp <a> <b> [c]", "opt [a] [b]"],
    )
    @pytest.mark.parametrize("count", range(0, 6))
    def test_bounded_usage_accepts_exactly_min_to_max(self, usage: str, count: int) -> None:
        arity = Arity.from_usage(usage)
        args = [f"arg{i}" for i in range(count)]
        should_accept = arity.minimum <= count <= arity.maximum

        if should_accept:
            arity.check(args, usage)
        else:
            with pytest.raises(ArgumentCountError) as exc_info:
                arity.check(args, usage)
            assert exc_info.value.usage == usage
            assert usage in str(exc_info.value)

    @pytest.mark.parametrize("count", [1, 2, 5, 20])
    def test_variadic_accepts_any_count_at_or_above_minimum(self, count: int) -> None:
        usage = "ssh <name> ..."
        Arity.from_usage(usage).check(["x"] * count, usage)

    def test_variadic_rejects_count_below_minimum(self) -> None:
        usage = "ssh <name> ..."
        with pytest.raises(ArgumentCountError, match="Usage: ssh <name> ..."):
            Arity.from_usage(usage).check([], usage)

    def test_variadic_boundary_with_two_required(self) -> None:
        usage = "scp <name> <path> ..."
        arity = Arity.from_usage(usage)
        with pytest.raises(ArgumentCountError):
            arity.check(["vm1"], usage)
        arity.check(["vm1", "/tmp"], usage)

    def test_argument_count_error_is_invalid_arguments(self) -> None:
        with pytest.raises(InvalidArguments):
            Arity(1, 1).check([], "info <name>")


class TestArityValue:
    """Tests for the Arity value object."""

    def test_unbounded_when_maximum_is_none(self) -> None:
        assert Arity(1, None).unbounded
        assert not Arity(1, 2).unbounded

    def test_rejects_negative_minimum(self) -> None:
        with pytest.raises(ValueError):
            Arity(-1, 0)

    def test_rejects_maximum_below_minimum(self) -> None:
        with pytest.raises(ValueError):
            Arity(2, 1)
