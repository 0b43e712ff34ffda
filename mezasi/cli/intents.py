"""
Request Intents.

Pure builders that turn validated command arguments into a RequestIntent:
method, path relative to the endpoint, and an optional body. Nothing here
touches the network. File parts are read only when the Endpoint Client
encodes the intent.

Wire protocol (relative to the configured endpoint):
    GET  vm/list
    GET  config
    GET  vm/info/<name>
    POST vm/<verb>/<name>          start, stop, force_stop
    POST vm/remove/<name>
    POST vm/register               multipart: name, base, [public_key], [user_data]
    GET  notify/<name>             blocks until the VM reports boot completion
    GET  <attachment>/<name>       public_key, user_data
    POST <attachment>/<name>       multipart: <attachment>
"""

import enum
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class FormField:
    """Plain multipart field."""

    name: str
    value: str


@dataclass(frozen=True)
class FileField:
    """Multipart field whose content is read from a local file."""

    name: str
    path: str

    def read(self) -> bytes:
        with open(Path(self.path).expanduser(), "rb") as f:
            return f.read()


Part = FormField | FileField


@dataclass(frozen=True)
class RequestIntent:
    """Method, relative path, and body of one request. Body is raw bytes, multipart parts, or nothing."""

    method: str
    path: str
    content: bytes | None = None
    parts: tuple[Part, ...] = field(default_factory=tuple)


class LifecycleVerb(str, enum.Enum):
    """Power-state actions that share the POST vm/<verb>/<name> shape."""

    START = "start"
    STOP = "stop"
    FORCE_STOP = "force_stop"

    @property
    def path_template(self) -> str:
        return _LIFECYCLE_PATHS[self]


_LIFECYCLE_PATHS = {
    LifecycleVerb.START: "vm/start/{name}",
    LifecycleVerb.STOP: "vm/stop/{name}",
    LifecycleVerb.FORCE_STOP: "vm/force_stop/{name}",
}


class Attachment(str, enum.Enum):
    """Per-VM files that can be read back or replaced."""

    PUBLIC_KEY = "public_key"
    USER_DATA = "user_data"


def list_vms() -> RequestIntent:
    return RequestIntent("GET", "vm/list")


def service_config() -> RequestIntent:
    return RequestIntent("GET", "config")


def vm_info(name: str) -> RequestIntent:
    return RequestIntent("GET", f"vm/info/{name}")


def lifecycle(verb: LifecycleVerb, name: str) -> RequestIntent:
    return RequestIntent("POST", verb.path_template.format(name=name))


def remove_vm(name: str) -> RequestIntent:
    return RequestIntent("POST", f"vm/remove/{name}")


def register_vm(
    name: str,
    base: str,
    public_key: str = "",
    user_data: str = "",
) -> RequestIntent:
    """
    Build the registration request.

    public_key and user_data are local file paths. Each becomes a part only
    when non-empty.
    """
    parts: list[Part] = [FormField("name", name), FormField("base", base)]
    if public_key:
        parts.append(FileField(Attachment.PUBLIC_KEY.value, public_key))
    if user_data:
        parts.append(FileField(Attachment.USER_DATA.value, user_data))
    return RequestIntent("POST", "vm/register", parts=tuple(parts))


def wait_for_boot(name: str) -> RequestIntent:
    return RequestIntent("GET", f"notify/{name}")


def get_attachment(attachment: Attachment, name: str) -> RequestIntent:
    return RequestIntent("GET", f"{attachment.value}/{name}")


def put_attachment(attachment: Attachment, name: str, path: str) -> RequestIntent:
    return RequestIntent(
        "POST",
        f"{attachment.value}/{name}",
        parts=(FileField(attachment.value, path),),
    )
