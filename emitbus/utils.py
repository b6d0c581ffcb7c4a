import inspect
from typing import Any


def callable_name(cb: Any) -> str:
    """Return a human-readable name for a callable, safe for logging.

    Falls back through ``__qualname__``, ``__name__``, and ``repr()``
    so that ``functools.partial``, callable instances, and other exotic
    callables never raise ``AttributeError``.

    Args:
        cb: Any callable object.

    Returns:
        Display name string.
    """
    return (
        getattr(cb, "__qualname__", None) or getattr(cb, "__name__", None) or repr(cb)
    )


def split_names(names: str | None, separator: str, *, trim: bool) -> list[str]:
    """Split a batched event-name string into individual names.

    ``None`` yields no names.  Any other string, including ``""``, yields at
    least one piece, mirroring ``str.split``.  Empty pieces are kept.

    Args:
        names: Separator-delimited event names, e.g. ``"save, load"``.
        separator: Delimiter between names.
        trim: Strip surrounding whitespace from every piece.

    Returns:
        Event names in the order they appear.
    """
    if names is None:
        return []
    pieces = names.split(separator)
    if trim:
        return [piece.strip() for piece in pieces]
    return pieces


def same_callback(stored: Any, callback: Any) -> bool:
    """Return True when *stored* is the registered object *callback*.

    Matching is by identity.  Bound methods are rebuilt on every attribute
    access, so two bound methods match when they wrap the same function on
    the same instance.  Distinct callables that merely compare equal never
    match.

    Args:
        stored: Callback held by a listener record.
        callback: Callback passed to ``off()``.

    Returns:
        Whether the two refer to the same registration target.
    """
    if stored is callback:
        return True
    return (
        inspect.ismethod(stored)
        and inspect.ismethod(callback)
        and stored.__self__ is callback.__self__
        and stored.__func__ is callback.__func__
    )
