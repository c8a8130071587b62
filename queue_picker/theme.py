from textual.theme import Theme


QUEUE_PICKER_THEME = Theme(
    name="queue-picker",
    primary="#ffe165",
    secondary="#b9b9b9",
    accent="#4fa3ff",
    warning="#ffb454",
    error="#ff6b6b",
    success="#7bd88f",
    foreground="#e6e6e6",
    background="#1b1d21",
    surface="#24272d",
    panel="#2d3139",
    dark=True,
)
