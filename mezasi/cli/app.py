"""
mezasi CLI entry point.

Global options are parsed by Typer. Everything from the first command
token onward goes to the Dispatcher.

Usage:
    mezasi                                   # Show commands
    mezasi help register                     # Show one command's options

    mezasi list                              # GET vm/list
    mezasi info vm1                          # GET vm/info/vm1
    mezasi config                            # GET config
    mezasi register --name vm1 --base ubuntu --wait
    mezasi start vm1                         # also stop, force_stop
    mezasi remove vm1 --yes
    mezasi public_key vm1 ~/.ssh/id_ed25519.pub
    mezasi user_data vm1                     # show current boot script
    mezasi ssh vm1 -l root

Options:
    --profile, -p     Profile in the profile store (default from pit.yaml)
    --endpoint, -e    Endpoint URL, bypasses the profile store
    --debug, -d       Enable debug mode (DEBUG level logging)
    --quiet, -q       Only log warnings and errors
"""

from typing import Optional

import typer
from rich.console import Console

from mezasi.cli.client import EndpointClient
from mezasi.cli.commands import build_registry
from mezasi.cli.dispatcher import Dispatcher, parse_invocation, print_help
from mezasi.core.config import resolve_endpoint
from mezasi.core.exceptions import MezasiError
from mezasi.core.logging import get_logger, setup_logging

logger = get_logger(__name__)

app = typer.Typer(
    name="mezasi",
    help="mezasi - command-line client for the VM management service.",
    add_completion=False,
    rich_markup_mode="rich",
)

err_console = Console(stderr=True)


@app.command(
    context_settings={
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    },
)
def main(
    ctx: typer.Context,
    profile: Optional[str] = typer.Option(
        None,
        "--profile",
        "-p",
        help="Profile to read the endpoint from",
    ),
    endpoint: Optional[str] = typer.Option(
        None,
        "--endpoint",
        "-e",
        help="Service endpoint URL (overrides the profile)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only log warnings and errors",
    ),
) -> None:
    """
    Manage VMs on a remote VM service.

    Run without a command to list the available commands.
    """
    if debug:
        setup_logging(level="DEBUG")
    elif quiet:
        setup_logging(level="WARNING")
    else:
        setup_logging()

    registry = build_registry()

    try:
        invocation = parse_invocation(registry, ctx.args)
        if invocation.help:
            print_help(registry, invocation.descriptor)
            return

        endpoint_url = resolve_endpoint(endpoint=endpoint, profile=profile)
        logger.info("endpoint", endpoint=endpoint_url)

        with EndpointClient(endpoint_url) as client:
            exit_code = Dispatcher(registry, client).run(invocation)

    except MezasiError as e:
        logger.debug("Command failed", code=e.code, error=e.message)
        err_console.print(
            f"Error: {e.message}", style="red", markup=False, highlight=False, soft_wrap=True,
        )
        raise typer.Exit(1)

    if exit_code:
        raise typer.Exit(exit_code)


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
