"""Chainable unsubscription handle returned by every registration."""

from collections.abc import Callable
from types import TracebackType
from typing import TYPE_CHECKING

from emitbus._types import Listener

if TYPE_CHECKING:
    from emitbus.emitter import EventEmitter


class Unsubscriber:
    """Undo token for one or more registrations on an emitter.

    Calling the handle removes the callbacks registered by the call that
    produced it.  :meth:`on` and :meth:`once` register more listeners right
    away and return a new handle that also undoes everything earlier in the
    chain::

        off = (
            bus.on("e1", on_e1)
            .once("e2", on_e2)
            .on("e3", on_e3)
        )
        off()  # e1, e2 and e3 listeners are gone

    Handles also work as context managers; leaving the block calls them.
    Calling a handle again is harmless.  Removal matches event name and
    callback, so the same callback registered elsewhere under one of these
    names is removed too.
    """

    def __init__(self, emitter: "EventEmitter", cleanup: Callable[[], None]) -> None:
        """Initialize handle.

        Args:
            emitter: Emitter that chained registrations are made on.
            cleanup: Undoes the registrations this handle stands for.
        """
        self._emitter = emitter
        self._cleanup = cleanup

    def __call__(self) -> None:
        self._cleanup()

    def on(
        self, names: str, callback: Listener, once: bool = False
    ) -> "Unsubscriber":
        """Register *callback* and extend the chain.

        See :meth:`EventEmitter.on`.

        Returns:
            Handle undoing this registration and every earlier link.
        """
        return self._chain(self._emitter.on(names, callback, once))

    def once(self, names: str, callback: Listener) -> "Unsubscriber":
        """Register a one-shot *callback* and extend the chain.

        See :meth:`EventEmitter.once`.

        Returns:
            Handle undoing this registration and every earlier link.
        """
        return self._chain(self._emitter.once(names, callback))

    def _chain(self, latest: "Unsubscriber") -> "Unsubscriber":
        def cleanup() -> None:
            self()
            latest()

        return Unsubscriber(self._emitter, cleanup)

    def __enter__(self) -> "Unsubscriber":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Undo the registrations when leaving the block."""
        self()
