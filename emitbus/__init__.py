"""emitbus - An in-process publish/subscribe event emitter for Python.

This package provides synchronous dispatch of named events to registered
listeners, with one-shot and wildcard listeners and chainable
unsubscription handles.
"""

__version__ = "0.1.0"

from loguru import logger

# Disable all emitbus logging by default.  Users opt in with:
#     from loguru import logger
#     logger.enable("emitbus")
logger.disable("emitbus")

from emitbus.aware import EmitterAware
from emitbus.config import EmitterConfig, load_config
from emitbus.emitter import EventEmitter
from emitbus.exceptions import ConfigError, ConfigValidationError, EmitbusError
from emitbus.handle import Unsubscriber
from emitbus.records import ListenerRecord

__all__ = [
    # Version
    "__version__",
    # Emitter
    "EventEmitter",
    "Unsubscriber",
    "ListenerRecord",
    "EmitterAware",
    # Configuration
    "EmitterConfig",
    "load_config",
    # Exception classes
    "EmitbusError",
    "ConfigError",
    "ConfigValidationError",
]
