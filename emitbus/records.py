"""Listener record model for emitbus."""

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, SkipValidation


class ListenerRecord(BaseModel):
    """One registration of a callback under one event name.

    Attributes:
        callback: Single-argument callable invoked with the emitted payload.
            Stored as-is and not validated, so removal can match it against
            the object the caller registered.
        once: When True the record is removed immediately before its
            callback runs for the first time.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    callback: SkipValidation[Callable[[Any], Any]]
    once: bool = False
