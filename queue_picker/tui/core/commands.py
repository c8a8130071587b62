"""Command definitions and help for the queue picker TUI.

The queue editor command name comes from settings, so the command list is
built per app instead of being a module constant.
"""

from textual.containers import VerticalScroll
from textual.widgets import Static

from queue_picker.stores.settings import QueuePickerSettings
from queue_picker.theme import QUEUE_PICKER_THEME


def get_commands(settings: QueuePickerSettings) -> list[tuple[str, str]]:
    """Return (command, description) pairs available in the app."""
    return [
        ("/help", "Display available commands"),
        (f"/{settings.editor_command}", "Review and edit queued messages"),
        ("/clear", "Drop all queued messages"),
        ("/new", "Start a new session"),
        ("/exit", "Exit the application"),
    ]


def show_help(main_display: VerticalScroll, settings: QueuePickerSettings) -> None:
    """Display help information in the main display.

    Args:
        main_display: The VerticalScroll widget to mount help content to
        settings: Settings naming the queue editor command and shortcut
    """
    primary = QUEUE_PICKER_THEME.primary
    secondary = QUEUE_PICKER_THEME.secondary

    command_lines = "\n".join(
        f"  [{secondary}]{command}[/{secondary}] - {description}"
        for command, description in get_commands(settings)
    )
    help_text = f"""
[bold {primary}]Queue Picker Help[/bold {primary}]
[dim]Available commands:[/dim]

{command_lines}

[dim]Tips:[/dim]
  • While the agent is working, each message asks: steer now or follow up later
  • Press {settings.editor_shortcut} to reorder, retag, edit or delete queued messages
  • Commands like /help never ask; they run right away
"""
    main_display.mount(Static(help_text, classes="help-message"))
