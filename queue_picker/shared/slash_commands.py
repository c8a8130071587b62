"""Slash command parsing utilities.

Used both to route commands inside the TUI and to decide which submissions
skip the delivery mode picker.
"""

import re


# Letters, digits, ':', '_' and '-' after the slash. "/" alone also counts.
_COMMAND_TOKEN = re.compile(r"/[A-Za-z0-9:_-]*")


def is_command_name(name: str) -> bool:
    """Return True if ``name`` (without the slash) is a valid command name."""
    return bool(name) and _COMMAND_TOKEN.fullmatch(f"/{name}") is not None


def should_bypass_picker(text: str) -> bool:
    """Return True if a submission is a slash command rather than chat text.

    Only the first whitespace-separated token is inspected, so arguments are
    allowed. A token with another '/' in it is a path, not a command.

    Examples:
        >>> should_bypass_picker("/model q")
        True
        >>> should_bypass_picker("/skill:deep-research")
        True
        >>> should_bypass_picker("/tmp/build.log")
        False
        >>> should_bypass_picker("help me with this")
        False
    """
    stripped = text.strip()
    if not stripped.startswith("/"):
        return False
    token = stripped.split(None, 1)[0]
    return _COMMAND_TOKEN.fullmatch(token) is not None


def parse_slash_command(text: str) -> tuple[str, str] | None:
    """Parse a slash command from user input.

    Args:
        text: User input text

    Returns:
        Tuple of (command, argument) if text is a slash command, None otherwise.
        The command is always lowercase.

    Examples:
        >>> parse_slash_command("/help")
        ('help', '')
        >>> parse_slash_command("/edit-queue now")
        ('edit-queue', 'now')
        >>> parse_slash_command("not a command")
        None
        >>> parse_slash_command("/")
        None
    """
    text = text.strip()
    if not text.startswith("/"):
        return None

    # Remove leading slash
    text = text[1:].strip()

    # If nothing after the slash, it's not a valid command
    if not text:
        return None

    # Split into command and argument
    parts = text.split(None, 1)
    command = parts[0].lower()
    argument = parts[1] if len(parts) > 1 else ""

    return command, argument
