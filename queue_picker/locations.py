import os


PERSISTENCE_DIR_ENV = "QUEUE_PICKER_PERSISTENCE_DIR"


def get_persistence_dir() -> str:
    """Directory holding queue picker configuration."""
    return os.environ.get(PERSISTENCE_DIR_ENV, os.path.expanduser("~/.queue_picker"))


SETTINGS_FILENAME = "queue_picker.json"
