#!/usr/bin/env python3
"""
Main entry point for the queue picker CLI.
"""

import logging
import os
import warnings

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import HTML

from queue_picker.argparsers.main_parser import create_main_parser
from queue_picker.terminal_compat import (
    check_terminal_compatibility,
    limited_terminal_reason,
    strict_mode_enabled,
)


logger = logging.getLogger(__name__)

debug_env = os.getenv("DEBUG", "false").lower()
if debug_env != "1" and debug_env != "true":
    logging.disable(logging.WARNING)
    warnings.filterwarnings("ignore")


def setup_file_logging(log_file: str) -> None:
    """Send debug logging to ``log_file``, even when DEBUG is unset."""
    logging.disable(logging.NOTSET)
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.FileHandler(log_file)],
    )
    logger.info(f"Logging to {log_file}")


def main() -> None:
    """Main entry point for the queue picker CLI.

    Raises:
        SystemExit: If the terminal is unusable and strict mode is on
        Exception: On other error conditions
    """
    parser = create_main_parser()
    args = parser.parse_args()

    if args.log_file:
        setup_file_logging(args.log_file)

    compat = check_terminal_compatibility()
    if not compat.compatible:
        if strict_mode_enabled():
            print_formatted_text(
                HTML(f"<red>Terminal not supported: {compat.reason}</red>")
            )
            raise SystemExit(2)
        print_formatted_text(HTML(f"<yellow>Warning: {compat.reason}</yellow>"))

    reason = limited_terminal_reason()
    if reason:
        logger.info(f"Mode picker disabled: {reason}")

    try:
        # Import the TUI only when needed
        from queue_picker.stores.settings import QueuePickerSettings
        from queue_picker.tui.textual_app import QueuePickerApp

        app = QueuePickerApp(
            settings=QueuePickerSettings.load(),
            busy_seconds=args.busy_seconds,
            limited_terminal=reason is not None,
        )
        app.run()
    except KeyboardInterrupt:
        print_formatted_text(HTML("\n<yellow>Goodbye! 👋</yellow>"))
    except EOFError:
        print_formatted_text(HTML("\n<yellow>Goodbye! 👋</yellow>"))
    except Exception as e:
        print_formatted_text(HTML(f"<red>Error: {e}</red>"))
        import traceback

        traceback.print_exc()
        raise


if __name__ == "__main__":
    main()
