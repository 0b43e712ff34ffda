"""
SSH Command.

Looks up a VM's address and runs an ssh client against it in the
foreground. Tokens after the VM name go to ssh verbatim.
"""

import shutil
import subprocess
from typing import Any

from mezasi.cli import intents
from mezasi.cli.client import EndpointClient
from mezasi.cli.presenter import present
from mezasi.core.exceptions import (
    ExternalCommandError,
    FieldMissing,
    PresentationError,
    RemoteLookupError,
)
from mezasi.core.logging import get_logger

logger = get_logger(__name__)

ADDRESS_FIELD = "ip_addr"
SSH_BINARY = "ssh"


def lookup_address(client: EndpointClient, name: str) -> str:
    """
    Return the address reported by GET vm/info/<name>.

    Raises:
        RemoteLookupError: If the lookup does not return 200 (the response is presented first)
        PresentationError: If the body is not JSON
        FieldMissing: If the body has no string ip_addr
    """
    response = client.send(intents.vm_info(name))
    if response.status_code != 200:
        present(response)
        raise RemoteLookupError(
            f"cannot look up {name}: {response.status_code} {response.reason_phrase}",
            response.status_code,
        )

    try:
        info = response.json()
    except ValueError as e:
        raise PresentationError(f"Malformed JSON response for {name}: {e}") from e

    address = info.get(ADDRESS_FIELD) if isinstance(info, dict) else None
    if not isinstance(address, str) or not address:
        raise FieldMissing(ADDRESS_FIELD)
    return address


def run_ssh(client: EndpointClient, args: list[str], options: dict[str, Any]) -> int:
    address = lookup_address(client, args[0])

    ssh_path = shutil.which(SSH_BINARY)
    if ssh_path is None:
        raise ExternalCommandError(f"{SSH_BINARY} not found in PATH")

    command = [ssh_path, address, *args[1:]]
    logger.debug("Starting ssh", command=command)
    try:
        completed = subprocess.run(command)
    except OSError as e:
        raise ExternalCommandError(f"cannot run {ssh_path}: {e}") from e
    return completed.returncode
