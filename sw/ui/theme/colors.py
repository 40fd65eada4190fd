from PySide6.QtGui import QColor
from sw.core.record import State

# Background of the State column for each state, light pastels so the text stays readable.
STATE_COLORS = {
    State.WAITING: "#add8e6",  # light blue
    State.ACTIVE: "#ffffe0",   # light yellow
    State.EXPIRED: "#d3d3d3",  # light gray
    State.FREE: "#90ee90",     # light green
}

# Resolves the display color for a state, letting the user's `state_colors` setting (keyed by state name) override
# the defaults. Invalid color strings fall back to the default for that state.
def state_color(state: State, overrides: dict | None = None) -> QColor:
    name = (overrides or {}).get(state.value)
    if name:
        color = QColor(name)
        if color.isValid():
            return color
    return QColor(STATE_COLORS[state])
