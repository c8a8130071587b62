"""Tests for the queue editor state machine."""

import pytest

from queue_picker.queue.types import (
    FOLLOW_UP,
    STEER,
    BufferedMessage,
    QueueEditorCancel,
    QueueEditorSave,
)
from queue_picker.tui.core.keys import KeyPress
from queue_picker.tui.core.queue_editor import (
    cancel_inline_edit,
    create_queue_editor_state,
    handle_queue_editor_input,
    open_inline_edit,
    submit_inline_edit,
)


def _messages(*texts: str) -> list[BufferedMessage]:
    return [BufferedMessage(text=text) for text in texts]


def _feed(state, *tokens):
    action = None
    for token in tokens:
        action = handle_queue_editor_input(state, token)
    return action


class TestQueueEditorSetup:
    def test_state_works_on_a_clone(self):
        originals = _messages("a", "b")
        state = create_queue_editor_state(originals)

        state.items[0].text = "changed"
        _feed(state, "d")

        assert [m.text for m in originals] == ["a", "b"]
        assert [m.id for m in originals][1] == state.items[0].id

    def test_starts_in_list_mode_on_first_item(self):
        state = create_queue_editor_state(_messages("a", "b"))
        assert state.mode == "list"
        assert state.selected == 0


class TestListNavigation:
    @pytest.fixture
    def state(self):
        return create_queue_editor_state(_messages("a", "b", "c"))

    def test_down_and_up_move_cursor_with_clamping(self, state):
        _feed(state, "down", "down", "down")
        assert state.selected == 2
        _feed(state, "up", "up", "up")
        assert state.selected == 0
        assert [m.text for m in state.items] == ["a", "b", "c"]

    def test_j_moves_selected_item_down_and_cursor_follows(self, state):
        _feed(state, "j")
        assert [m.text for m in state.items] == ["b", "a", "c"]
        assert state.selected == 1

    def test_k_moves_selected_item_up_and_cursor_follows(self, state):
        _feed(state, "down", "down", "k")
        assert [m.text for m in state.items] == ["a", "c", "b"]
        assert state.selected == 1

    def test_shift_variants_reorder(self, state):
        _feed(state, KeyPress("shift+j", "J"))
        assert [m.text for m in state.items] == ["b", "a", "c"]
        _feed(state, "shift+up")
        assert [m.text for m in state.items] == ["a", "b", "c"]
        assert state.selected == 0

    def test_reorder_at_boundaries_is_noop(self, state):
        _feed(state, "k")
        assert [m.text for m in state.items] == ["a", "b", "c"]
        assert state.selected == 0

        _feed(state, "down", "down", "j")
        assert [m.text for m in state.items] == ["a", "b", "c"]
        assert state.selected == 2

    def test_tab_toggles_mode_of_selected_item(self, state):
        _feed(state, "down", "tab")
        assert [m.mode for m in state.items] == [FOLLOW_UP, STEER, FOLLOW_UP]
        _feed(state, "tab")
        assert state.items[1].mode == FOLLOW_UP

    def test_delete_last_item_clamps_selection(self, state):
        _feed(state, "down", "down", "d")
        assert [m.text for m in state.items] == ["a", "b"]
        assert state.selected == 1

    @pytest.mark.parametrize("key", ["d", "D", "delete", "backspace"])
    def test_delete_keys(self, state, key):
        _feed(state, key)
        assert [m.text for m in state.items] == ["b", "c"]
        assert state.selected == 0

    def test_unknown_keys_are_ignored(self, state):
        assert _feed(state, KeyPress("x", "x"), "f1") is None
        assert [m.text for m in state.items] == ["a", "b", "c"]


class TestSaveAndCancel:
    def test_enter_saves_current_order_modes_and_texts(self):
        originals = _messages("a", "b")
        state = create_queue_editor_state(originals)

        action = _feed(state, "j", "tab", "enter")

        assert isinstance(action, QueueEditorSave)
        assert [m.text for m in action.items] == ["b", "a"]
        assert [m.mode for m in action.items] == [FOLLOW_UP, STEER]
        assert [m.id for m in action.items] == [originals[1].id, originals[0].id]

    def test_escape_cancels(self):
        state = create_queue_editor_state(_messages("a"))
        assert isinstance(_feed(state, "tab", "escape"), QueueEditorCancel)

    def test_deleting_everything_then_enter_saves_empty(self):
        state = create_queue_editor_state(_messages("a", "b"))
        action = _feed(state, "d", "d", "enter")
        assert action == QueueEditorSave(items=[])

    def test_deleting_everything_then_escape_cancels(self):
        state = create_queue_editor_state(_messages("a"))
        action = _feed(state, "d", "escape")
        assert isinstance(action, QueueEditorCancel)

    def test_opened_empty_escape_saves_empty(self):
        state = create_queue_editor_state([])
        assert _feed(state, "escape") == QueueEditorSave(items=[])

    def test_opened_empty_ignores_other_keys(self):
        state = create_queue_editor_state([])
        assert _feed(state, "j", "e", "d", "tab") is None
        assert state.mode == "list"


class TestInlineEdit:
    @pytest.fixture
    def state(self):
        return create_queue_editor_state(_messages("run tests", "deploy"))

    def test_e_enters_edit_mode(self, state):
        _feed(state, "e")
        assert state.mode == "edit"

    def test_open_inline_edit_returns_selected_text(self, state):
        state.selected = 1
        assert open_inline_edit(state) == "deploy"
        assert state.mode == "edit"

    def test_open_inline_edit_on_empty_list(self):
        state = create_queue_editor_state([])
        assert open_inline_edit(state) is None
        assert state.mode == "list"

    def test_submit_replaces_text_and_returns_to_list(self, state):
        _feed(state, "e")
        submit_inline_edit(state, "run tests again")

        assert state.mode == "list"
        assert state.items[0].text == "run tests again"

    def test_submit_trims_whitespace(self, state):
        _feed(state, "e")
        submit_inline_edit(state, "  run tests now \n")
        assert state.items[0].text == "run tests now"

    def test_blank_submit_keeps_original_text(self, state):
        _feed(state, "e")
        submit_inline_edit(state, "   ")
        assert state.mode == "list"
        assert state.items[0].text == "run tests"

    def test_submit_outside_edit_mode_is_ignored(self, state):
        submit_inline_edit(state, "changed")
        assert state.items[0].text == "run tests"

    def test_escape_discards_edit(self, state):
        _feed(state, "e")
        assert _feed(state, "escape") is None
        assert state.mode == "list"
        assert state.items[0].text == "run tests"

    def test_cancel_inline_edit(self, state):
        _feed(state, "e")
        cancel_inline_edit(state)
        assert state.mode == "list"

    def test_list_keys_are_ignored_while_editing(self, state):
        _feed(state, "down", "e")
        assert _feed(state, "j", "k", "d", "tab", KeyPress("x", "x"), "enter") is None

        assert state.mode == "edit"
        assert [m.text for m in state.items] == ["run tests", "deploy"]
        assert [m.mode for m in state.items] == [FOLLOW_UP, FOLLOW_UP]
        assert state.selected == 1

    def test_saved_edit_is_reported_on_save(self, state):
        _feed(state, "e")
        submit_inline_edit(state, "run tests!")
        action = _feed(state, "enter")
        assert isinstance(action, QueueEditorSave)
        assert action.items[0].text == "run tests!"
