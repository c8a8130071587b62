from queue_picker.stores.settings import (
    DEFAULT_EDITOR_COMMAND,
    DEFAULT_EDITOR_SHORTCUT,
    QueuePickerSettings,
)


__all__ = [
    "DEFAULT_EDITOR_COMMAND",
    "DEFAULT_EDITOR_SHORTCUT",
    "QueuePickerSettings",
]
