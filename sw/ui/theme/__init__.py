"""Theme system, colors for each session state."""
from .colors import STATE_COLORS, state_color

__all__ = ["STATE_COLORS", "state_color"]
