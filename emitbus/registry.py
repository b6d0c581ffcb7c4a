"""Registry for listener management.

This module provides ListenerRegistry, the table mapping each event name
to its listener records in registration order.
"""

from loguru import logger

from emitbus._types import EventTable, Listener
from emitbus.records import ListenerRecord
from emitbus.utils import callable_name, same_callback

log = logger.bind(source=__name__)


class ListenerRegistry:
    """Registry table for event listeners.

    Lists are created on first registration for a name and the key is
    deleted as soon as its list becomes empty, so a present key always has
    at least one live listener.  The one exception is a list that a
    dispatch pass is still walking after it was detached from the table.

    Record lists are mutated in place.  A dispatch pass iterating a list
    therefore observes removals made by listeners it calls.
    """

    def __init__(self) -> None:
        """Initialize empty registry.

        Post:
            _events is an empty dict.
        """
        self._events: EventTable = {}

    @property
    def events(self) -> EventTable:
        """The live table.  Not a copy; treat as read-only."""
        return self._events

    def lookup(self, name: str) -> list[ListenerRecord]:
        """Return the live record list for *name*, or a fresh empty list."""
        return self._events.get(name, [])

    def add(self, names: list[str], record: ListenerRecord) -> None:
        """Append *record* to the list of every name in *names*.

        Args:
            names: Event names to register under.
            record: Listener record shared by all names.

        Post:
            record is the last entry of each name's list.
        """
        for name in names:
            self._events.setdefault(name, []).append(record)

    def remove(self, names: list[str], callback: Listener | None) -> None:
        """Remove listeners from registry.

        Supports two modes:
        - (names, callback): Remove every record of callback under names.
        - (names, None): Remove all listeners under names.

        Callbacks are matched by identity; bound methods match when they
        wrap the same function on the same instance.  A callback
        registered twice under one name loses both records.

        Args:
            names: Event names to remove from.
            callback: Callback to remove, or None for all.

        Post:
            Matching records removed in place.
            Names left without records are deleted.
        """
        for name in names:
            if callback is None:
                if self._events.pop(name, None) is not None:
                    log.debug("Removed all listeners of {!r}", name)
                continue

            records = self._events.get(name)
            if records is None:
                continue

            length = initial = len(records)
            i = 0
            while i < length:
                if same_callback(records[i].callback, callback):
                    del records[i]
                    length -= 1
                else:
                    i += 1
            if length < initial:
                log.debug(
                    "Removed {} record(s) of {} from {!r}",
                    initial - length,
                    callable_name(callback),
                    name,
                )
            self._drop_if_empty(name, records)

    def clear(self) -> None:
        """Remove every listener of every name.

        The table object itself is kept, so references obtained from
        :attr:`events` stay live.
        """
        self._events.clear()

    def pop_at(self, name: str, records: list[ListenerRecord], index: int) -> None:
        """Delete ``records[index]`` and drop *name* if its list is now empty.

        Args:
            name: Event name that owns *records*.
            records: Record list being dispatched.
            index: Position of the record to delete.
        """
        del records[index]
        self._drop_if_empty(name, records)

    def _drop_if_empty(self, name: str, records: list[ListenerRecord]) -> None:
        # Only drop the key while it still maps to this list; it may have
        # been replaced by a fresh registration after a clear.
        if not records and self._events.get(name) is records:
            del self._events[name]
