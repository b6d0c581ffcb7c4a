"""Synchronous event emitter."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

from loguru import logger

from emitbus._types import EventTable, Listener, Payload
from emitbus.config import EmitterConfig, load_config
from emitbus.handle import Unsubscriber
from emitbus.records import ListenerRecord
from emitbus.registry import ListenerRegistry
from emitbus.utils import callable_name, split_names

log = logger.bind(source=__name__)


class EventEmitter:
    """In-process publish/subscribe registry.

    Listeners are registered on event names and called synchronously, in
    registration order, when one of those names is emitted.  Listeners on
    the wildcard name (``"*"`` unless configured otherwise) run after the
    exact-name listeners of every emitted event.

    Several names can be given at once as a comma-separated string.
    Registration strips whitespace around each name; ``emit()`` and
    ``off()`` only do so when ``trim_emit_names`` is enabled.

    Example::

        bus = EventEmitter()
        off = bus.on("saved, loaded", print).once("closed", print)
        bus.emit("saved", {"path": "a.txt"})
        off()  # removes all three registrations
    """

    def __init__(self, config: EmitterConfig | None = None) -> None:
        """Initialize emitter.

        Args:
            config: Emitter settings; defaults when omitted.
        """
        self._config = config if config is not None else EmitterConfig()
        self._registry = ListenerRegistry()

    @classmethod
    def from_pyproject(cls, pyproject_path: Path) -> "EventEmitter":
        """Create an emitter configured by ``[tool.emitbus]`` in a pyproject.

        Raises:
            ConfigError: If the file cannot be parsed.
            ConfigValidationError: If a setting has an invalid value.
        """
        return cls(load_config(pyproject_path))

    @property
    def config(self) -> EmitterConfig:
        return self._config

    def on(self, names: str, callback: Listener, once: bool = False) -> Unsubscriber:
        """Register *callback* for every name in *names*.

        Args:
            names: One or more comma-separated event names.  Each name is
                stripped of surrounding whitespace.  An empty string
                registers nothing.
            callback: Called with the payload of each matching emit.
            once: Remove the listener right before its first call.

        Returns:
            Handle removing *callback* from every name registered here.

        Post:
            A record is appended to each name's listener list.
        """
        registered = self._split(names, trim=True) if names else []
        self._register(registered, callback, once=bool(once))
        return self._unsubscriber(registered, callback)

    def once(self, names: str, callback: Listener) -> Unsubscriber:
        """Register *callback* to run at most once for every name in *names*.

        Each name gets an independent one-shot listener: emitting ``"a"``
        consumes the ``"a"`` registration only.

        Returns:
            Handle removing *callback* from every name registered here.
        """
        registered = self._split(names, trim=True) if names else []
        self._register(registered, callback, once=True)
        return self._unsubscriber(registered, callback)

    def emit(self, names: str, payload: Payload = None) -> None:
        """Call the listeners of every name in *names* with *payload*.

        Names are processed left to right.  For each name its own
        listeners run first, then the wildcard listeners.  One-shot records
        are removed before their callback runs, so a callback that emits
        the same event again does not see itself.

        Listeners registered during a pass are not guaranteed to run in
        that pass.

        Warning:
            Listeners can recursively call emit().  Cycles are not
            detected; an infinite chain ends in RecursionError.

        Args:
            names: One or more comma-separated event names.
            payload: Value passed to every listener.

        Raises:
            Exception: Whatever a listener raises, unchanged.  Remaining
                listeners, the wildcard pass and later names are skipped,
                and consumed one-shot records stay removed.
        """
        wildcard = self._config.wildcard
        for name in self._split(names, trim=self._config.trim_emit_names):
            exact = self._registry.lookup(name)
            wild = self._registry.lookup(wildcard)
            log.debug(
                "Emit {!r} ({} listener(s), {} wildcard)", name, len(exact), len(wild)
            )
            self._run_pass(name, exact, payload)
            self._run_pass(wildcard, wild, payload)

    def off(self, names: str | None = None, callback: Listener | None = None) -> None:
        """Unregister listeners.

        Supports three modes:
        - (): Remove every listener of every name, ignoring *callback*.
        - (names): Remove all listeners of the given names.
        - (names, callback): Remove *callback* from the given names.

        Unknown names and callbacks are ignored.

        Args:
            names: Comma-separated event names, or empty for all.
            callback: Callback to remove, or None for all.
        """
        if not names:
            self._registry.clear()
            log.debug("Removed all listeners")
            return
        self._registry.remove(
            self._split(names, trim=self._config.trim_emit_names), callback
        )

    def get_events(self) -> EventTable:
        """Return the live name-to-records table.

        The table is not a copy.  Mutating it bypasses the emitter's
        invariants.
        """
        return self._registry.events

    def listener(
        self, names: str, *, once: bool = False
    ) -> Callable[[Listener], Listener]:
        """Decorator to register a plain function as listener.

        Registers the callback immediately.  For methods, use
        :meth:`on_method` so the bound method is registered when the
        owning :class:`~emitbus.EmitterAware` class is instantiated.

        Args:
            names: One or more comma-separated event names.
            once: Register as a one-shot listener.

        Returns:
            Decorator function that returns the original function unchanged.
        """

        def decorator(func: Listener) -> Listener:
            self.on(names, func, once)
            return func

        return decorator

    def on_method[F: Callable[..., Any]](
        self, names: str, *, once: bool = False
    ) -> Callable[[F], F]:
        """Decorator to mark a method for registration at instantiation.

        Does **not** register anything.  It stamps the names, the once flag
        and this emitter on the function so that
        :class:`~emitbus.EmitterAware` can register the *bound* method.

        Args:
            names: One or more comma-separated event names.
            once: Register as a one-shot listener.

        Returns:
            Decorator function that returns the original function unchanged.
        """

        def decorator(func: F) -> F:
            func._emitbus_names = names  # type: ignore[attr-defined]
            func._emitbus_once = once  # type: ignore[attr-defined]
            func._emitbus_emitter = self  # type: ignore[attr-defined]
            return func

        return decorator

    def _register(self, names: list[str], callback: Listener, *, once: bool) -> None:
        if not names:
            return
        record = ListenerRecord(callback=callback, once=once)
        self._registry.add(names, record)
        log.debug(
            "Registered {} on {} (once={})", callable_name(callback), names, once
        )

    def _split(self, names: str | None, *, trim: bool) -> list[str]:
        return split_names(names, self._config.separator, trim=trim)

    def _unsubscriber(self, names: list[str], callback: Listener) -> Unsubscriber:
        def cleanup() -> None:
            if names:
                self._registry.remove(names, callback)

        return Unsubscriber(self, cleanup)

    def _run_pass(
        self, name: str, records: list[ListenerRecord], payload: Payload
    ) -> None:
        """Invoke *records* in order, consuming one-shot records first.

        The bound is fixed when the pass starts and shrinks with each
        one-shot removal.  Slots that disappeared because a listener
        removed records from this list are skipped.
        """
        length = len(records)
        i = 0
        while i < length:
            if i >= len(records):
                i += 1
                continue
            record = records[i]
            if record.once:
                self._registry.pop_at(name, records, i)
                length -= 1
                log.debug(
                    "Consumed once listener {} on {!r}",
                    callable_name(record.callback),
                    name,
                )
            else:
                i += 1
            record.callback(payload)
