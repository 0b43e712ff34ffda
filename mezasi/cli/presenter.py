"""
Response Presenter.

Writes a response body to stdout: JSON bodies re-indented with four
spaces, everything else as the raw bytes received. The status line goes
to the log.
"""

import json

import httpx
import typer

from mezasi.core.exceptions import PresentationError
from mezasi.core.logging import get_logger

logger = get_logger(__name__)

INDENT = 4


def is_json(content_type: str) -> bool:
    return "json" in content_type.lower()


def render(response: httpx.Response) -> str | bytes:
    """
    Render a response body for output.

    Returns re-indented text for JSON and the undecoded body bytes for
    anything else.

    Raises:
        PresentationError: If the body is declared JSON but does not decode
    """
    content_type = response.headers.get("Content-Type", "")
    if not is_json(content_type):
        return response.content

    try:
        data = json.loads(response.content)
    except ValueError as e:
        raise PresentationError(f"Malformed JSON response ({content_type}): {e}") from e
    return json.dumps(data, indent=INDENT, ensure_ascii=False)


def present(response: httpx.Response) -> str | bytes:
    """Log the status line, print the rendered body, and return it."""
    logger.info(f"{response.status_code} {response.reason_phrase}".rstrip())
    body = render(response)
    # bytes go to the binary stream unchanged
    typer.echo(body)
    return body
