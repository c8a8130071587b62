from __future__ import annotations

from textual.timer import Timer
from textual.widgets import Static


class WorkingStatusLine(Static):
    """Status line showing the working indicator and elapsed time (above input)."""

    DEFAULT_CSS = """
    #working_status_line {
        height: 1;
        background: $background;
        color: $secondary;
        padding: 0 1;
    }
    """

    FRAMES = ["⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧"]

    def __init__(self, **kwargs) -> None:
        super().__init__("", id="working_status_line", markup=False, **kwargs)
        self._timer: Timer | None = None
        self._working_frame: int = 0
        self._is_running: bool = False
        self._ticks: int = 0
        self._queued: int = 0

    @property
    def elapsed_seconds(self) -> int:
        return self._ticks // 10

    def on_mount(self) -> None:
        """Initialize the working status line and start animation timer."""
        self._update_text()
        # Runs continuously but only animates when working
        self._timer = self.set_interval(0.1, self._on_tick)

    def on_unmount(self) -> None:
        """Stop timer when widget is removed."""
        if self._timer:
            self._timer.stop()
            self._timer = None

    def set_running(self, running: bool) -> None:
        if running and not self._is_running:
            self._ticks = 0
        self._is_running = running
        self._update_text()

    def set_queued(self, count: int) -> None:
        self._queued = count
        self._update_text()

    # ----- Internal helpers -----

    def _on_tick(self) -> None:
        """Periodic update for animation."""
        if self._is_running:
            self._ticks += 1
            self._working_frame = (self._working_frame + 1) % len(self.FRAMES)
            self._update_text()

    def _get_working_text(self) -> str:
        """Return working status text if the agent is running."""
        if not self._is_running:
            return ""

        working_indicator = f"{self.FRAMES[self._working_frame]} Working"
        queued = f" • {self._queued} queued" if self._queued else ""
        return f"{working_indicator} ({self.elapsed_seconds}s{queued})"

    def _update_text(self) -> None:
        working_text = self._get_working_text()
        self.update(working_text if working_text else " ")
