"""
CLI Commands.

Organized by resource. build_registry() returns the full command set in
the order shown by `mezasi help`.
"""

from functools import partial

from mezasi.cli.arity import Arity
from mezasi.cli.commands import attachments, ssh, vm
from mezasi.cli.descriptors import CommandDescriptor, CommandRegistry
from mezasi.cli.intents import Attachment, LifecycleVerb

_LIFECYCLE_SUMMARIES = {
    LifecycleVerb.START: "Start a VM",
    LifecycleVerb.STOP: "Stop a VM",
    LifecycleVerb.FORCE_STOP: "Force a VM off",
}

_ATTACHMENT_SUMMARIES = {
    Attachment.PUBLIC_KEY: "Show or replace a VM's ssh public key",
    Attachment.USER_DATA: "Show or replace a VM's boot script",
}


def build_registry() -> CommandRegistry:
    """Create the descriptor for every subcommand."""
    registry = CommandRegistry([
        CommandDescriptor(
            "list", "list", vm.run_list, Arity(0, 0), summary="List VMs",
        ),
        CommandDescriptor(
            "info", "info <name>", vm.run_info, Arity(1, 1), summary="Show a VM",
        ),
        CommandDescriptor(
            "config", "config", vm.run_config, Arity(0, 0),
            summary="Show the service configuration",
        ),
        CommandDescriptor(
            "register", vm.REGISTER_USAGE, vm.run_register, Arity(0, 1),
            options=vm.REGISTER_OPTIONS,
            summary="Register a VM from a base image",
            interspersed=True,
        ),
    ])

    for verb in LifecycleVerb:
        registry.register(CommandDescriptor(
            verb.value,
            f"{verb.value} <name>",
            partial(vm.run_lifecycle, verb),
            Arity(1, 1),
            summary=_LIFECYCLE_SUMMARIES[verb],
        ))

    registry.register(CommandDescriptor(
        "remove", vm.REMOVE_USAGE, vm.run_remove, Arity(1, 1),
        options=vm.REMOVE_OPTIONS,
        summary="Remove a VM (asks first unless --yes)",
        interspersed=True,
    ))

    for attachment in Attachment:
        registry.register(CommandDescriptor(
            attachment.value,
            f"{attachment.value} <name> [file]",
            partial(attachments.run_attachment, attachment),
            Arity(1, 2),
            summary=_ATTACHMENT_SUMMARIES[attachment],
        ))

    registry.register(CommandDescriptor(
        "ssh", "ssh <name> ...", ssh.run_ssh, Arity(1, None),
        summary="Open an ssh session to a VM",
    ))
    return registry


__all__ = ["build_registry"]
