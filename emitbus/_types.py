"""Shared type definitions for emitbus.

All type aliases use PEP 695 ``type`` statement syntax.
"""

from collections.abc import Callable
from typing import Any

from emitbus.records import ListenerRecord

type Payload = Any
"""Value passed to every listener of an event.  Not inspected by emitbus."""

type Listener = Callable[[Payload], Any]
"""Listener callback.  Its return value is ignored."""

type EventTable = dict[str, list[ListenerRecord]]
"""Mapping from event name to its listener records in registration order."""
