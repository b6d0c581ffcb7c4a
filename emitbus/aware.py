"""EmitterAware mixin for method listeners.

Provides ``EmitterAware`` (mixin) and ``EmitterAwareMeta`` (metaclass)
that together register ``@emitter.on_method()`` decorated methods as
listeners on instantiation.
"""

from types import TracebackType
from typing import Any

from loguru import logger

from emitbus.handle import Unsubscriber

log = logger.bind(source=__name__)


class EmitterAwareMeta(type):
    """Metaclass that registers ``@emitter.on_method()`` listeners.

    Overrides ``__call__`` so that ``_bind_listener_methods()`` runs
    *after* ``__init__`` returns, regardless of whether the subclass
    calls ``super().__init__()``.
    """

    def __call__(cls, *args: Any, **kwargs: Any) -> Any:
        instance = super().__call__(*args, **kwargs)
        instance._bind_listener_methods()
        return instance


class EmitterAware(metaclass=EmitterAwareMeta):
    """Mixin that auto-registers ``@emitter.on_method()`` decorated methods.

    The decorator only stamps metadata on the function; the metaclass
    registers the *bound* methods once ``__init__`` completes.  Each
    instance therefore gets its own listeners.

    Supports context manager protocol for scoped listener lifetime::

        with Auditor() as auditor:
            bus.emit("saved", path)
        # listeners removed here

    For manual cleanup, call ``instance.unsubscribe()``.

    ``@staticmethod`` and ``@classmethod`` are supported; place them
    **outside** ``@on_method()``:

    Example::

        class Auditor(EmitterAware):
            def __init__(self) -> None:
                self.seen: list[str] = []

            @bus.on_method("saved, deleted")
            def record(self, path: str) -> None:
                self.seen.append(path)

            @staticmethod
            @bus.on_method("closed", once=True)
            def farewell(payload: Any) -> None:
                print("bye")
    """

    _listener_handles: list[Unsubscriber]

    def _bind_listener_methods(self) -> None:
        """Scan for marked methods and register them as bound callbacks."""
        self._listener_handles = []

        seen: set[str] = set()
        for klass in type(self).__mro__:
            for name, attr in vars(klass).items():
                if name in seen:
                    continue
                # Unwrap staticmethod/classmethod to access inner function
                inner = attr
                if isinstance(attr, (staticmethod, classmethod)):
                    inner = attr.__func__
                if not (callable(inner) and hasattr(inner, "_emitbus_names")):
                    continue
                seen.add(name)
                bound = getattr(self, name)
                handle = inner._emitbus_emitter.on(
                    inner._emitbus_names, bound, inner._emitbus_once
                )
                self._listener_handles.append(handle)

        if self._listener_handles:
            log.debug(
                "Bound {} listener method(s) on {}",
                len(self._listener_handles),
                type(self).__qualname__,
            )

    def unsubscribe(self) -> None:
        """Remove every listener registered by this instance.

        Safe to call multiple times.
        """
        for handle in self._listener_handles:
            handle()
        self._listener_handles.clear()

    def __enter__(self) -> "EmitterAware":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        """Remove every listener registered by this instance."""
        self.unsubscribe()
