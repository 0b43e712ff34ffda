"""
VM Commands.

Listing, inspection, registration, power-state actions and removal.
Every handler presents the response whatever its status; only
request-building and transport failures raise.
"""

import sys
from typing import Any

import typer

from mezasi.cli import intents
from mezasi.cli.client import EndpointClient
from mezasi.cli.descriptors import OptionSpec
from mezasi.cli.intents import LifecycleVerb
from mezasi.cli.presenter import present
from mezasi.core.exceptions import MissingRequiredOption, UserDeclined
from mezasi.core.logging import get_logger

logger = get_logger(__name__)

REGISTER_USAGE = "register [options]"
REGISTER_REQUIRED = ("name", "base")
REGISTER_OPTIONS = {
    "name": OptionSpec(str, help="vm name (* required)"),
    "base": OptionSpec(str, help="base image (* required)"),
    "public-key": OptionSpec(str, help="path to ssh public key file (for root@vm)"),
    "user-data": OptionSpec(str, help="path to shell script executed on boot up"),
    "wait": OptionSpec(bool, help="wait for vm boot up"),
}

REMOVE_USAGE = "remove <name> [--yes]"
REMOVE_OPTIONS = {
    "yes": OptionSpec(bool, help="skip the confirmation prompt"),
}


def run_list(client: EndpointClient, args: list[str], options: dict[str, Any]) -> None:
    present(client.send(intents.list_vms()))


def run_config(client: EndpointClient, args: list[str], options: dict[str, Any]) -> None:
    present(client.send(intents.service_config()))


def run_info(client: EndpointClient, args: list[str], options: dict[str, Any]) -> None:
    present(client.send(intents.vm_info(args[0])))


def run_lifecycle(
    verb: LifecycleVerb,
    client: EndpointClient,
    args: list[str],
    options: dict[str, Any],
) -> None:
    """POST vm/<verb>/<name>. Bound to a verb with functools.partial."""
    present(client.send(intents.lifecycle(verb, args[0])))


def confirm_remove(name: str) -> bool:
    """Ask on stdout, read one line from stdin. Only an answer starting with y or Y confirms."""
    typer.echo(f"Really remove {name}? [y/N]")
    answer = sys.stdin.readline().strip()
    return answer[:1] in ("y", "Y")


def run_remove(client: EndpointClient, args: list[str], options: dict[str, Any]) -> None:
    name = args[0]
    if not options["yes"] and not confirm_remove(name):
        raise UserDeclined(f"{name} was not removed")
    present(client.send(intents.remove_vm(name)))


def run_register(client: EndpointClient, args: list[str], options: dict[str, Any]) -> None:
    """
    Register a VM from a base image.

    --name and --base are checked before any file is read. With --wait,
    a successful registration is followed by a blocking GET notify/<name>
    that returns once the VM reports boot completion.
    """
    missing = [option for option in REGISTER_REQUIRED if not options[option]]
    if missing:
        raise MissingRequiredOption(REGISTER_USAGE, missing)

    name = options["name"]
    response = client.send(
        intents.register_vm(
            name,
            options["base"],
            public_key=options["public-key"],
            user_data=options["user-data"],
        )
    )
    present(response)

    if not options["wait"]:
        return
    if not response.is_success:
        logger.warning("Registration failed, not waiting for boot", name=name)
        return

    logger.info("waiting for vm boot up...", name=name)
    present(client.send(intents.wait_for_boot(name)))
