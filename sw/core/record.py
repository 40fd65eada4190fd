from dataclasses import dataclass, field
from datetime import datetime, timedelta
from enum import Enum
from sw.common.logger import log


class State(Enum):
    WAITING = "WAITING"
    ACTIVE = "ACTIVE"
    EXPIRED = "EXPIRED"
    FREE = "FREE"


# Whole seconds in the given duration, sign dropped and fractions truncated.
def _whole_seconds(delta: timedelta) -> int:
    return abs(delta) // timedelta(seconds=1)

def format_hms(delta: timedelta) -> str:
    """Format a duration as HH:MM:SS. Hours are not wrapped at 24."""
    h, rem = divmod(_whole_seconds(delta), 3600)
    m, s = divmod(rem, 60)
    return f"{h:02d}:{m:02d}:{s:02d}"

def format_hm(delta: timedelta) -> str:
    """Format a duration as HH:MM, dropping the seconds."""
    h, rem = divmod(_whole_seconds(delta), 3600)
    return f"{h:02d}:{rem // 60:02d}"


# One session row. `state` and `remaining` are derived: they only ever change through evaluate(), which the refresh
# loop calls once per tick.
@dataclass(eq=False)
class Record:
    code: str = ""
    input_time: datetime | None = None
    output_time: datetime | None = None
    state: State = field(default=State.FREE, init=False)
    remaining: str = field(default="", init=False)

    # Whether both ends of the session window have been set.
    @property
    def is_configured(self):
        return self.input_time is not None and self.output_time is not None

    def evaluate(self, now: datetime) -> tuple[State, str]:
        """Derive this record's state and remaining-time text as of `now`.

        Rules, first match wins:

        * either time unset -> FREE, ""
        * input_time <= now <= output_time -> ACTIVE, time left as HH:MM:SS
        * now before input_time -> WAITING, the window length as HH:MM
        * otherwise the window has closed -> EXPIRED, "0"

        The result is also stored on the record.
        """
        if not self.is_configured:
            state, text = State.FREE, ""
        elif self.input_time <= now <= self.output_time:
            state, text = State.ACTIVE, format_hms(self.output_time - now)
        elif self.input_time > now:
            # Length of the upcoming window, not the time until it opens
            state, text = State.WAITING, format_hm(self.output_time - self.input_time)
        else:
            state, text = State.EXPIRED, "0"

        if state is not self.state:
            log.debug(f"Session '{self.code}' went from {self.state.value} to {state.value} at {now:%Y-%m-%d %H:%M:%S}")
        self.state = state
        self.remaining = text
        return state, text
