from queue_picker.tui.modals.mode_picker_modal import ModePickerModal
from queue_picker.tui.modals.queue_editor_modal import QueueEditorModal


__all__ = ["ModePickerModal", "QueueEditorModal"]
