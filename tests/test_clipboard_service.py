import io
from unittest.mock import patch

import pytest

from conftest import FakeRunner, klipper
from clipany.clipboard.base import ClipboardManager
from clipany.clipboard.factory import BACKENDS
from clipany.config import ClipboardConfig
from clipany.models import Capability, ClipboardManagerName, Operation, Outcome
from clipany.services.clipboard_service import ClipboardService
from clipany.utils.process import ProcessRunner

PRIMARY_IN = ("xclip", "-i", "-selection", "primary")


def all_operations(service):
    return [
        lambda m: service.get_clipboard_content(m),
        lambda m: service.add_clipboard_content("text", m),
        lambda m: service.clear_clipboard_content(m),
        lambda m: service.clear_clipboard_history(m),
        lambda m: service.list_clipboard_history(m),
        lambda m: service.get_clipboard_history_item(0, m),
    ]


class TestManagerResolution:
    def test_invalid_manager_rejected_before_any_call(self, runner, service):
        for operation in all_operations(service):
            outcome = operation("gpaste")
            assert outcome.status == 400
            assert "gpaste" in outcome.message
        assert runner.calls == []

    def test_invalid_default_manager_from_config(self, runner):
        service = ClipboardService(runner=runner, config=ClipboardConfig(clipboard_manager="nope"))
        assert service.get_clipboard_content().status == 400
        assert runner.calls == []

    def test_no_manager_detected(self, runner, service):
        for operation in all_operations(service):
            outcome = operation(None)
            assert outcome.status == 412
            assert outcome.message == "Can't detect any known clipboard manager"

    def test_explicit_manager_skips_detection(self, runner, service):
        runner.script(klipper("getClipboardContents"), stdout="hi\n")
        outcome = service.get_clipboard_content("klipper")
        assert outcome == Outcome(status=200, message="OK", payload="hi")
        assert all(call[0] == "run" for call in runner.calls)

    def test_enum_and_case_accepted(self, runner, service):
        assert service.get_clipboard_content(ClipboardManagerName.XCLIP).ok
        assert service.get_clipboard_content("XClip").ok

    def test_detected_manager_is_used(self):
        runner = FakeRunner(paths=["xclip"])
        runner.script(("xclip", "-o", "-selection", "primary"), stdout="sel\n")
        outcome = ClipboardService(runner=runner).get_clipboard_content()
        assert outcome.payload == "sel"

    def test_config_default_manager(self, runner):
        service = ClipboardService(runner=runner, config=ClipboardConfig(clipboard_manager="xclip"))
        service.clear_clipboard_content()
        assert runner.commands("write") == [(PRIMARY_IN, "")]
        assert not any(call[0] == "which" for call in runner.calls)


class TestAddContent:
    @pytest.mark.parametrize("manager", ["klipper", "parcellite", "clipit", "xclip", None])
    def test_missing_content(self, runner, service, manager):
        outcome = service.add_clipboard_content(None, manager)
        assert outcome.status == 400
        assert outcome.message == "Please specify content"
        assert not any(call[0] in ("run", "write") for call in runner.calls)

    def test_add_with_klipper(self, runner, service):
        outcome = service.add_clipboard_content("copied", "klipper")
        assert outcome.ok
        assert runner.commands() == [klipper("setClipboardContents", "copied")]

    def test_tee_echoes_content(self, runner):
        out = io.StringIO()
        service = ClipboardService(runner=runner, stdout=out)
        assert service.add_clipboard_content("piped", "xclip", tee=True).ok
        assert out.getvalue() == "piped"

    def test_tee_is_independent_of_write_outcome(self, runner):
        out = io.StringIO()
        runner.fail_write(PRIMARY_IN, 1)
        service = ClipboardService(runner=runner, stdout=out)
        outcome = service.add_clipboard_content("piped", "xclip", tee=True)
        assert outcome.status == 500
        assert out.getvalue() == "piped"

    def test_no_tee_by_default(self, runner):
        out = io.StringIO()
        ClipboardService(runner=runner, stdout=out).add_clipboard_content("x", "xclip")
        assert out.getvalue() == ""


class TestBackendFailures:
    def test_non_zero_exit_is_500_with_code(self, runner, service):
        runner.script(klipper("getClipboardContents"), returncode=42)
        outcome = service.get_clipboard_content("klipper")
        assert outcome.status == 500
        assert outcome.message == "/klipper's getClipboardContents failed: 42"
        assert outcome.payload is None

    def test_list_history_failure_embeds_index(self, runner, service):
        runner.script(klipper("getClipboardHistoryItem", "0"), stdout="a\n")
        runner.script(klipper("getClipboardHistoryItem", "1"), returncode=7)
        outcome = service.list_clipboard_history("klipper")
        assert outcome.status == 500
        assert "getClipboardHistoryItem(1)" in outcome.message
        assert outcome.message.endswith(": 7")

    def test_xclip_clear_history_second_write_fails(self, runner, service):
        runner.fail_write(("xclip", "-i", "-selection", "clipboard"), 1)
        outcome = service.clear_clipboard_history("xclip")
        assert outcome.status == 500
        assert outcome.message.endswith(": 1")


class TestCapabilities:
    @pytest.mark.parametrize("manager", ["parcellite", "clipit"])
    def test_stubbed_operations_are_501(self, runner, service, manager):
        outcomes = [
            service.add_clipboard_content("text", manager),
            service.clear_clipboard_content(manager),
            service.clear_clipboard_history(manager),
            service.list_clipboard_history(manager),
            service.get_clipboard_history_item(0, manager),
        ]
        assert [outcome.status for outcome in outcomes] == [501] * 5
        assert runner.calls == []

    @pytest.mark.parametrize("manager", ["parcellite", "clipit"])
    def test_get_content_supported(self, runner, service, manager):
        runner.script((manager, "-c"), stdout="daemon text\n")
        assert service.get_clipboard_content(manager).payload == "daemon text"


class TestHistory:
    def test_klipper_history(self, runner, service):
        for index, item in enumerate(["a", "b", "", ""]):
            runner.script(klipper("getClipboardHistoryItem", str(index)), stdout=item + "\n")
        outcome = service.list_clipboard_history("klipper")
        assert outcome.ok
        assert outcome.payload == ["a", "b", ""]

    def test_xclip_history_item_absent(self, runner, service):
        outcome = service.get_clipboard_history_item(2, "xclip")
        assert outcome.status == 200
        assert outcome.payload is None

    def test_xclip_history_item_one_is_clipboard(self, runner, service):
        runner.script(("xclip", "-o", "-selection", "clipboard"), stdout="clip\n")
        assert service.get_clipboard_history_item(1, "xclip").payload == "clip"

    @pytest.mark.parametrize("index", [-1, "0", 1.5, True])
    def test_invalid_index(self, runner, service, index):
        outcome = service.get_clipboard_history_item(index, "klipper")
        assert outcome.status == 400
        assert runner.calls == []


def test_outcome_envelope():
    assert Outcome.success().as_envelope() == [200, "OK"]
    assert Outcome.success(["a"]).as_envelope() == [200, "OK", ["a"]]
    assert Outcome(status=412, message="nope").ok is False


class TestUnusualContent:
    @patch("clipany.utils.process.subprocess.run", side_effect=ValueError("embedded null byte"))
    def test_nul_byte_with_klipper(self, mock_run):
        service = ClipboardService(runner=ProcessRunner())
        outcome = service.add_clipboard_content("a\x00b", "klipper")
        assert outcome.status == 500
        assert outcome.message.endswith(": -1")

    @patch("clipany.utils.process.subprocess.Popen")
    def test_lone_surrogate_with_xclip(self, mock_popen):
        service = ClipboardService(runner=ProcessRunner())
        outcome = service.add_clipboard_content("bad \udcff", "xclip")
        assert outcome.status == 500
        assert "add clipboard content" in outcome.message
        mock_popen.assert_not_called()


class ReadOnlyManager(ClipboardManager):
    name = ClipboardManagerName.XCLIP
    capabilities = {Operation.GET_CONTENT: Capability.SUPPORTED}

    @classmethod
    def probe(cls, runner, config):
        return True

    def get_content(self):
        return "read only"


def test_operation_missing_from_capabilities_is_412(runner, monkeypatch):
    monkeypatch.setitem(BACKENDS, ClipboardManagerName.XCLIP, ReadOnlyManager)
    service = ClipboardService(runner=runner)
    assert service.get_clipboard_content("xclip").payload == "read only"

    outcome = service.clear_clipboard_history("xclip")
    assert outcome.status == 412
    assert outcome.message == "Cannot clear clipboard history (clipboard manager=xclip)"
    assert runner.calls == []
