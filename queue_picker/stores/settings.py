"""Queue picker settings model and persistence."""

import json
from pathlib import Path

from pydantic import BaseModel, field_validator

from queue_picker.locations import SETTINGS_FILENAME, get_persistence_dir
from queue_picker.queue.types import STEER, PickerMode
from queue_picker.shared.slash_commands import is_command_name


DEFAULT_EDITOR_SHORTCUT = "ctrl+j"
DEFAULT_EDITOR_COMMAND = "edit-queue"


class QueuePickerSettings(BaseModel):
    """User-facing settings for the picker and the queue editor."""

    # Preselected mode the first time the picker opens in a session
    default_mode: PickerMode = STEER
    show_status_hint: bool = True
    editor_shortcut: str = DEFAULT_EDITOR_SHORTCUT
    # Slash command name, without the leading "/"
    editor_command: str = DEFAULT_EDITOR_COMMAND

    @field_validator("editor_shortcut")
    @classmethod
    def validate_shortcut(cls, v: str) -> str:
        v = v.strip().lower()
        if not v:
            raise ValueError("Editor shortcut must not be empty")
        return v

    @field_validator("editor_command")
    @classmethod
    def validate_command(cls, v: str) -> str:
        v = v.strip().lstrip("/")
        if not is_command_name(v):
            raise ValueError(f"Invalid command name: {v!r}")
        return v

    @property
    def status_hint(self) -> str | None:
        if not self.show_status_hint:
            return None
        return (
            f"{self.editor_shortcut} or /{self.editor_command} queue editor"
            " · e edit · d delete · j/k move"
        )

    @classmethod
    def get_config_path(cls) -> Path:
        return Path(get_persistence_dir()) / SETTINGS_FILENAME

    @classmethod
    def load(cls) -> "QueuePickerSettings":
        """Load settings from file.

        Returns:
            Settings from the config file, or defaults if it is missing or
            unreadable
        """
        config_path = cls.get_config_path()

        if not config_path.exists():
            return cls()

        try:
            with open(config_path) as f:
                data = json.load(f)
            return cls.model_validate(data)
        except (json.JSONDecodeError, ValueError):
            # If file is corrupted, return defaults
            return cls()

    def save(self) -> None:
        config_path = self.get_config_path()

        # Ensure the persistence directory exists
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            json.dump(self.model_dump(), f, indent=2)
