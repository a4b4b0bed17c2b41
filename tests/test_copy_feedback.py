"""Tests for copy feedback state and clipboard access."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from template_manager.catalog.models import TemplateEntry
from template_manager.exceptions import ClipboardError
from template_manager.ui.clipboard import clipboard_command, copy_to_clipboard
from template_manager.ui.copy_feedback import CopyFeedback, CopyState, copy_entry


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def feedback(clock: FakeClock) -> CopyFeedback:
    return CopyFeedback(duration=2.0, time_fn=clock)


@pytest.fixture
def entry() -> TemplateEntry:
    return TemplateEntry(id="hiroshima-story.html", name="Story", category="hiroshima", content="<p>s</p>", owner="sameer")


class TestCopyFeedback:
    def test_starts_idle(self, feedback: CopyFeedback):
        assert feedback.state_for("a") is CopyState.IDLE
        assert feedback.label_for("a") == "Copy"
        assert feedback.copied_id is None

    def test_copied_then_reverts_after_duration(self, feedback: CopyFeedback, clock: FakeClock):
        feedback.mark_copied("a")
        assert feedback.state_for("a") is CopyState.COPIED
        assert feedback.label_for("a") == "Copied!"
        clock.now += 1.9
        assert feedback.state_for("a") is CopyState.COPIED
        clock.now += 0.5
        assert feedback.state_for("a") is CopyState.IDLE

    def test_only_one_entry_shows_copied(self, feedback: CopyFeedback):
        feedback.mark_copied("a")
        feedback.mark_copied("b")
        assert feedback.state_for("a") is CopyState.IDLE
        assert feedback.state_for("b") is CopyState.COPIED

    def test_recopy_restarts_timer(self, feedback: CopyFeedback, clock: FakeClock):
        feedback.mark_copied("a")
        clock.now += 1.5
        feedback.mark_copied("a")
        clock.now += 1.5
        assert feedback.state_for("a") is CopyState.COPIED

    def test_reset_on_outside_click(self, feedback: CopyFeedback):
        feedback.mark_copied("a")
        feedback.reset()
        assert feedback.state_for("a") is CopyState.IDLE

    def test_rejects_non_positive_duration(self):
        with pytest.raises(ValueError):
            CopyFeedback(duration=0)


class TestCopyEntry:
    def test_success_marks_copied(self, entry, feedback: CopyFeedback):
        writer = MagicMock()
        copy_entry(entry, feedback, writer=writer)
        writer.assert_called_once_with("<p>s</p>")
        assert feedback.copied_id == entry.id

    def test_failure_leaves_state_untouched(self, entry, feedback: CopyFeedback):
        feedback.mark_copied("other")
        writer = MagicMock(side_effect=ClipboardError("Failed to copy to clipboard"))
        with pytest.raises(ClipboardError):
            copy_entry(entry, feedback, writer=writer)
        assert feedback.copied_id == "other"

    def test_defaults_to_system_clipboard(self, entry, feedback: CopyFeedback):
        with patch("template_manager.ui.copy_feedback.copy_to_clipboard") as mock_copy:
            copy_entry(entry, feedback)
        mock_copy.assert_called_once_with("<p>s</p>")


class TestClipboard:
    def test_macos_command(self):
        with patch("template_manager.ui.clipboard.sys.platform", "darwin"):
            assert clipboard_command() == ["pbcopy"]

    def test_windows_command(self):
        with patch("template_manager.ui.clipboard.sys.platform", "win32"):
            assert clipboard_command() == ["clip"]

    def test_linux_prefers_first_available(self):
        with (
            patch("template_manager.ui.clipboard.sys.platform", "linux"),
            patch("template_manager.ui.clipboard.shutil.which", side_effect=lambda c: "/usr/bin/xclip" if c == "xclip" else None),
        ):
            assert clipboard_command() == ["xclip", "-selection", "clipboard"]

    def test_no_command_raises(self):
        with patch("template_manager.ui.clipboard.clipboard_command", return_value=None):
            with pytest.raises(ClipboardError, match="Failed to copy"):
                copy_to_clipboard("x")

    def test_writes_utf8_to_stdin(self):
        with (
            patch("template_manager.ui.clipboard.clipboard_command", return_value=["pbcopy"]),
            patch("template_manager.ui.clipboard.subprocess.run") as mock_run,
        ):
            copy_to_clipboard("héllo")
        args, kwargs = mock_run.call_args
        assert args[0] == ["pbcopy"]
        assert kwargs["input"] == "héllo".encode("utf-8")
        assert kwargs["check"] is True

    def test_command_failure_raises(self):
        with (
            patch("template_manager.ui.clipboard.clipboard_command", return_value=["xclip"]),
            patch(
                "template_manager.ui.clipboard.subprocess.run",
                side_effect=subprocess.CalledProcessError(1, ["xclip"]),
            ),
        ):
            with pytest.raises(ClipboardError) as exc_info:
                copy_to_clipboard("x")
        assert exc_info.value.details
