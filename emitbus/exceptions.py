"""Exception hierarchy for emitbus.

All custom exceptions inherit from EmitbusError base class.  The emitter
itself never raises these: exceptions thrown by listeners propagate out of
``emit()`` unchanged.
"""


class EmitbusError(Exception):
    """Base exception for all emitbus errors.

    Allows users to catch all package-specific errors with a single except
    clause.
    """


class ConfigError(EmitbusError):
    """Emitter configuration could not be loaded.

    Raised when a ``pyproject.toml`` is not valid TOML or when its
    ``[tool.emitbus]`` entry is not a table.
    """


class ConfigValidationError(ConfigError, ValueError):
    """Emitter configuration failed validation.

    This wraps pydantic.ValidationError to provide a package-specific
    exception type.
    """
