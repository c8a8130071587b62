"""Main argument parser for the queue picker CLI."""

import argparse

from queue_picker import __version__


def _positive_float(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}")
    if seconds <= 0:
        raise argparse.ArgumentTypeError("must be greater than zero")
    return seconds


def create_main_parser() -> argparse.ArgumentParser:
    """Create the main argument parser.

    Returns:
        The configured argument parser
    """
    parser = argparse.ArgumentParser(
        prog="queue-picker",
        description="Queue Picker - steer a busy agent or queue follow-ups",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
            While the agent is working, every message you send asks whether
            it should steer the current task or wait as a follow-up.

            Examples:
                queue-picker                        # Start the TUI
                queue-picker --busy-seconds 3       # Shorter simulated tasks
                queue-picker --log-file picker.log  # Write debug logs to a file
        """,
    )

    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"Queue Picker {__version__}",
        help="Show the version number and exit",
    )

    parser.add_argument(
        "--busy-seconds",
        type=_positive_float,
        default=10.0,
        help="How long the simulated agent works on each message (default: 10)",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Write debug logs to this file",
    )

    return parser
