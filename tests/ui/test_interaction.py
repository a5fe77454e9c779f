"""Test suite for user interaction helpers."""

from io import StringIO
from unittest.mock import patch

import pytest
from rich.console import Console

from terminal_feedback.errors import PromptCancelledError
from terminal_feedback.ui.interaction import password, format_action, log_action


@pytest.fixture
def mock_questionary():
    """Patch questionary in the interaction module."""
    with patch("terminal_feedback.ui.interaction.questionary") as mock:
        yield mock


class TestPassword:
    """Test the masked password prompt."""

    def test_returns_answer(self, mock_questionary):
        mock_questionary.password.return_value.ask.return_value = "secret"

        assert password() == "secret"
        mock_questionary.password.assert_called_once_with("Password: ")

    def test_custom_message(self, mock_questionary):
        mock_questionary.password.return_value.ask.return_value = "secret"

        password("Token: ")

        mock_questionary.password.assert_called_once_with("Token: ")

    def test_asks_again_when_empty(self, mock_questionary):
        """Empty answers repeat the question."""
        mock_questionary.password.return_value.ask.side_effect = ["", "", "hunter2"]

        assert password() == "hunter2"
        assert mock_questionary.password.call_count == 3

    def test_cancel_raises(self, mock_questionary):
        mock_questionary.password.return_value.ask.return_value = None

        with pytest.raises(PromptCancelledError):
            password()

    def test_keyboard_interrupt_raises(self, mock_questionary):
        mock_questionary.password.return_value.ask.side_effect = KeyboardInterrupt

        with pytest.raises(PromptCancelledError):
            password()


class TestLogAction:
    """Test action logging."""

    def test_format_action_right_aligns(self):
        assert format_action("create", "path/to/file.py") == "         create  path/to/file.py"

    def test_format_action_joins_args(self):
        assert format_action("remove", "a.py", "b.py") == "         remove  a.py b.py"

    def test_format_action_long_action(self):
        assert format_action("a" * 20) == "a" * 20 + "  "

    def test_log_action_prints(self):
        stream = StringIO()
        console = Console(file=stream, width=200)

        log_action("processed", "3 items", console=console)

        assert stream.getvalue() == "      processed  3 items\n"
