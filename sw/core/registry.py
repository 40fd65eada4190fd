"""Ordered collection of session records, pure logic, no UI.

The registry is the only long-lived owner of its records. Display code reads
rows through it and learns about changes through subscribed listeners rather
than holding its own copy of the list.
"""

from collections.abc import Callable, Iterator
from datetime import datetime
from sw.common.logger import log
from sw.core.record import Record

ADDED = "added"
REMOVED = "removed"
CLEARED = "cleared"
REFRESHED = "refreshed"

# listener(event, row) - row is the affected index for added/removed, None otherwise
Listener = Callable[[str, int | None], None]


class SessionRegistry:

    def __init__(self, records=None):
        self._records: list[Record] = list(records or ())
        self._listeners: list[Listener] = []

    def __len__(self):
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __getitem__(self, row) -> Record:
        return self._records[row]

    # Position of the given record, matched by identity so look-alike records stay distinct.
    def index(self, record: Record) -> int:
        for i, existing in enumerate(self._records):
            if existing is record:
                return i
        raise ValueError(f"Session '{record.code}' is not in the registry")

    # ------------------------------------------------------------------ #
    #  Listeners                                                           #
    # ------------------------------------------------------------------ #

    def subscribe(self, listener: Listener):
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, event, row=None):
        for listener in list(self._listeners):
            listener(event, row)

    # ------------------------------------------------------------------ #
    #  Mutation                                                            #
    # ------------------------------------------------------------------ #

    def add(self, record: Record) -> int:
        """Append a record at the end of the display order. Returns its row."""
        self._records.append(record)
        row = len(self._records) - 1
        log.debug(f"Added session '{record.code}' at row {row}")
        self._notify(ADDED, row)
        return row

    def remove(self, record: Record) -> int:
        """Remove a record, raising ValueError if it isn't held. Returns the row it had."""
        row = self.index(record)
        del self._records[row]
        log.debug(f"Removed session '{record.code}' from row {row}")
        self._notify(REMOVED, row)
        return row

    def clear(self):
        self._records.clear()
        log.debug("Cleared all sessions")
        self._notify(CLEARED)

    # ------------------------------------------------------------------ #
    #  Refresh                                                             #
    # ------------------------------------------------------------------ #

    def refresh(self, now: datetime | None = None) -> datetime:
        """Re-evaluate every record against one reading of the clock.

        Every record is evaluated, none are skipped, then listeners get a
        single REFRESHED event. Returns the `now` that was used.
        """
        now = now if now is not None else datetime.now()
        for record in self._records:
            record.evaluate(now)
        self._notify(REFRESHED)
        return now
