"""Tests for slash command detection and parsing."""

import pytest

from queue_picker.shared.slash_commands import (
    is_command_name,
    parse_slash_command,
    should_bypass_picker,
)


class TestShouldBypassPicker:
    @pytest.mark.parametrize(
        "text",
        [
            "/",
            "/help",
            "/model q",
            "/skill:deep-research",
            "/edit_queue",
            "  /help  ",
            "/clear all of it",
        ],
    )
    def test_commands_bypass(self, text):
        assert should_bypass_picker(text) is True

    @pytest.mark.parametrize(
        "text",
        [
            "help me",
            "/tmp/build.log",
            "/usr/bin/env python",
            "look at /tmp",
            "/model.name",
            "",
        ],
    )
    def test_chat_text_does_not_bypass(self, text):
        assert should_bypass_picker(text) is False


class TestIsCommandName:
    @pytest.mark.parametrize("name", ["help", "edit-queue", "skill:x", "a_b", "Q2"])
    def test_valid(self, name):
        assert is_command_name(name)

    @pytest.mark.parametrize("name", ["", "two words", "a/b", "dot.name"])
    def test_invalid(self, name):
        assert not is_command_name(name)


class TestParseSlashCommand:
    def test_command_without_argument(self):
        assert parse_slash_command("/help") == ("help", "")

    def test_command_with_argument(self):
        assert parse_slash_command("/edit-queue now please") == (
            "edit-queue",
            "now please",
        )

    def test_command_is_lowercased(self):
        assert parse_slash_command("/HELP") == ("help", "")

    @pytest.mark.parametrize("text", ["not a command", "/", "   "])
    def test_not_a_command(self, text):
        assert parse_slash_command(text) is None
