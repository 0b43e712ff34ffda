"""Unit tests for request intents."""

from mezasi.cli import intents
from mezasi.cli.intents import Attachment, FileField, FormField, LifecycleVerb


class TestSimpleIntents:
    """Tests for body-less requests."""

    def test_list(self) -> None:
        assert intents.list_vms() == intents.RequestIntent("GET", "vm/list")

    def test_config(self) -> None:
        assert intents.service_config() == intents.RequestIntent("GET", "config")

    def test_info(self) -> None:
        assert intents.vm_info("vm1") == intents.RequestIntent("GET", "vm/info/vm1")

    def test_remove(self) -> None:
        assert intents.remove_vm("vm1") == intents.RequestIntent("POST", "vm/remove/vm1")

    def test_wait_for_boot(self) -> None:
        assert intents.wait_for_boot("vm1") == intents.RequestIntent("GET", "notify/vm1")


class TestLifecycle:
    """Tests for the lifecycle verb table."""

    def test_verbs(self) -> None:
        assert [verb.value for verb in LifecycleVerb] == ["start", "stop", "force_stop"]

    def test_every_verb_posts_to_its_own_path(self) -> None:
        for verb in LifecycleVerb:
            intent = intents.lifecycle(verb, "vm1")
            assert intent.method == "POST"
            assert intent.path == f"vm/{verb.value}/vm1"
            assert intent.content is None
            assert intent.parts == ()


class TestRegister:
    """Tests for the registration intent."""

    def test_required_fields_only(self) -> None:
        intent = intents.register_vm("vm1", "ubuntu")
        assert intent.method == "POST"
        assert intent.path == "vm/register"
        assert intent.parts == (FormField("name", "vm1"), FormField("base", "ubuntu"))

    def test_file_fields_added_when_set(self) -> None:
        intent = intents.register_vm("vm1", "ubuntu", public_key="key.pub", user_data="boot.sh")
        assert intent.parts[2:] == (
            FileField("public_key", "key.pub"),
            FileField("user_data", "boot.sh"),
        )

    def test_empty_file_options_are_skipped(self) -> None:
        intent = intents.register_vm("vm1", "ubuntu", public_key="", user_data="boot.sh")
        assert [part.name for part in intent.parts] == ["name", "base", "user_data"]


class TestAttachments:
    """Tests for public_key and user_data intents."""

    def test_get(self) -> None:
        intent = intents.get_attachment(Attachment.PUBLIC_KEY, "vm1")
        assert intent == intents.RequestIntent("GET", "public_key/vm1")

    def test_put_uses_attachment_name_as_field(self) -> None:
        intent = intents.put_attachment(Attachment.USER_DATA, "vm1", "boot.sh")
        assert intent.method == "POST"
        assert intent.path == "user_data/vm1"
        assert intent.parts == (FileField("user_data", "boot.sh"),)


class TestFileField:
    """Tests for reading file parts."""

    def test_read_returns_file_bytes(self, tmp_path) -> None:
        path = tmp_path / "key.pub"
        path.write_bytes(b"ssh-rsa AAA")
        assert FileField("public_key", str(path)).read() == b"ssh-rsa AAA"
