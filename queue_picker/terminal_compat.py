import os
import sys
from dataclasses import dataclass


DISABLE_ENV = "QUEUE_PICKER_DISABLE"
LIMITED_TERMINAL_ENV = "QUEUE_PICKER_LIMITED_TERMINAL"
STRICT_TERMINAL_ENV = "QUEUE_PICKER_STRICT_TERMINAL"

# TERM_PROGRAM / LC_TERMINAL values reported by phone and tablet SSH clients.
MOBILE_TERMINAL_PROGRAMS = frozenset(
    {"blink", "blinkshell", "termius", "a-shell", "ish", "juicessh", "prompt"}
)


@dataclass
class TerminalCompatibilityResult:
    compatible: bool
    reason: str | None
    is_tty: bool


def _env_flag_true(value: str | None) -> bool:
    if value is None:
        return False
    value = value.strip().lower()
    return value in {"1", "true", "yes", "on"}


def check_terminal_compatibility(
    *,
    stdout: object | None = None,
    env: dict[str, str] | None = None,
) -> TerminalCompatibilityResult:
    if stdout is None:
        stdout = sys.stdout
    if env is None:
        env = os.environ  # type: ignore[assignment]

    is_tty = bool(getattr(stdout, "isatty", lambda: False)())

    term = env.get("TERM", "")
    term_lower = term.lower()

    if not is_tty:
        return TerminalCompatibilityResult(
            compatible=False,
            reason="stdout is not a TTY; interactive TUI may not render correctly",
            is_tty=is_tty,
        )

    if term_lower in {"", "dumb"}:
        return TerminalCompatibilityResult(
            compatible=False,
            reason="TERM is unset or 'dumb'; advanced cursor controls may not work",
            is_tty=is_tty,
        )

    return TerminalCompatibilityResult(
        compatible=True,
        reason=None,
        is_tty=is_tty,
    )


def strict_mode_enabled(env: dict[str, str] | None = None) -> bool:
    if env is None:
        env = os.environ  # type: ignore[assignment]
    return _env_flag_true(env.get(STRICT_TERMINAL_ENV))


def picker_disabled(env: dict[str, str] | None = None) -> bool:
    if env is None:
        env = os.environ  # type: ignore[assignment]
    return _env_flag_true(env.get(DISABLE_ENV))


def limited_terminal_reason(env: dict[str, str] | None = None) -> str | None:
    """Explain why popups should be skipped in this terminal, if they should.

    Returns None for a full terminal. Popups are skipped when the user
    disables them, forces limited mode, or the session looks like it comes
    from a mobile SSH client.
    """
    if env is None:
        env = os.environ  # type: ignore[assignment]

    if picker_disabled(env):
        return f"{DISABLE_ENV} is set"
    if _env_flag_true(env.get(LIMITED_TERMINAL_ENV)):
        return f"{LIMITED_TERMINAL_ENV} is set"
    if env.get("TERMUX_VERSION"):
        return "running inside Termux"
    for var in ("TERM_PROGRAM", "LC_TERMINAL"):
        program = env.get(var, "").strip().lower()
        if program in MOBILE_TERMINAL_PROGRAMS:
            return f"{var}={env[var]} looks like a mobile terminal"
    if env.get("TERM", "").lower() in {"", "dumb"}:
        return "TERM is unset or 'dumb'"
    return None


def is_limited_terminal(env: dict[str, str] | None = None) -> bool:
    return limited_terminal_reason(env) is not None
