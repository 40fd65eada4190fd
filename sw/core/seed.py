from datetime import datetime, timedelta
from sw.core.record import Record

# Builds the four demo sessions shown on first launch, one per state. `now` is rounded down to the minute so the
# displayed input/output times look tidy.
def build_sample_records(now: datetime | None = None) -> list[Record]:
    now = (now or datetime.now()).replace(second=0, microsecond=0)
    hour = timedelta(hours=1)
    ten_minutes = timedelta(minutes=10)
    five_minutes = timedelta(minutes=5)

    return [
        # Closed an hour ago
        Record("fix0001", input_time=now - hour, output_time=now - hour + ten_minutes),
        # Open for the next ten minutes
        Record("fix0002", input_time=now, output_time=now + ten_minutes),
        # Never configured
        Record("fix0003"),
        # Opens in five minutes
        Record("fix0004", input_time=now + five_minutes, output_time=now + five_minutes + ten_minutes),
    ]
