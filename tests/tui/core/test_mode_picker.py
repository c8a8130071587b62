"""Tests for the delivery mode picker state machine."""

import pytest

from queue_picker.queue.types import (
    FOLLOW_UP,
    STEER,
    ModePickerCancel,
    ModePickerSelect,
)
from queue_picker.tui.core.keys import KeyPress
from queue_picker.tui.core.mode_picker import ModePickerState, handle_mode_picker_input


class TestModePicker:
    @pytest.fixture
    def state(self):
        return ModePickerState(message_text="fix the build")

    def test_defaults_to_steer(self, state):
        assert state.selected == STEER

    @pytest.mark.parametrize("key", ["tab", "up", "down"])
    def test_toggle_keys_switch_mode(self, state, key):
        assert handle_mode_picker_input(state, key) is None
        assert state.selected == FOLLOW_UP
        handle_mode_picker_input(state, key)
        assert state.selected == STEER

    def test_left_and_right_select_directly(self, state):
        handle_mode_picker_input(state, "right")
        assert state.selected == FOLLOW_UP
        handle_mode_picker_input(state, "right")
        assert state.selected == FOLLOW_UP
        handle_mode_picker_input(state, "left")
        assert state.selected == STEER

    def test_enter_selects_current_mode(self, state):
        handle_mode_picker_input(state, "tab")
        assert handle_mode_picker_input(state, "enter") == ModePickerSelect(FOLLOW_UP)

    def test_escape_cancels(self, state):
        assert isinstance(handle_mode_picker_input(state, "escape"), ModePickerCancel)

    def test_aliases_are_accepted(self, state):
        assert handle_mode_picker_input(state, "return") == ModePickerSelect(STEER)
        assert isinstance(handle_mode_picker_input(state, "esc"), ModePickerCancel)

    def test_other_keys_are_ignored(self, state):
        assert handle_mode_picker_input(state, KeyPress("x", "x")) is None
        assert state.selected == STEER
        assert state.message_text == "fix the build"
