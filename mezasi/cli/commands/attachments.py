"""
Attachment Commands.

public_key and user_data read back or replace a per-VM file:

    public_key <name>          GET public_key/<name>
    public_key <name> <file>   POST public_key/<name>, multipart field public_key
"""

from typing import Any

from mezasi.cli import intents
from mezasi.cli.client import EndpointClient
from mezasi.cli.intents import Attachment
from mezasi.cli.presenter import present
from mezasi.core.exceptions import InvalidArguments


def run_attachment(
    attachment: Attachment,
    client: EndpointClient,
    args: list[str],
    options: dict[str, Any],
) -> None:
    """Bound to an attachment with functools.partial."""
    if len(args) == 1:
        intent = intents.get_attachment(attachment, args[0])
    elif len(args) == 2:
        intent = intents.put_attachment(attachment, args[0], args[1])
    else:
        raise InvalidArguments("invalid arguments")
    present(client.send(intent))
