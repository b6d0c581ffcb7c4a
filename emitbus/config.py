"""Emitter configuration for emitbus.

Settings may be given programmatically or declared in the ``[tool.emitbus]``
table of a project's ``pyproject.toml``::

    [tool.emitbus]
    wildcard = "*"
    separator = ","
    trim_emit_names = false
"""

import tomllib
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from emitbus.exceptions import ConfigError, ConfigValidationError

log = logger.bind(source=__name__)

CONFIG_TABLE = "emitbus"


class EmitterConfig(BaseModel):
    """Immutable settings shared by one :class:`~emitbus.EventEmitter`.

    Attributes:
        wildcard: Event name whose listeners receive every emitted event.
        separator: Delimiter for batched event names such as ``"a,b"``.
        trim_emit_names: Strip whitespace around names passed to ``emit()``
            and ``off()``.  Registration always strips; dispatch does not
            unless this is enabled, so ``emit(" a ")`` misses ``on("a")``.

    Raises:
        ConfigValidationError: If fields fail pydantic validation.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    wildcard: str = Field(default="*", min_length=1)
    separator: str = Field(default=",", min_length=1)
    trim_emit_names: bool = False

    def __init__(self, **data: Any) -> None:
        """Wrap pydantic ValidationError into ConfigValidationError."""
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise ConfigValidationError(str(exc)) from exc


def load_config(pyproject_path: Path) -> EmitterConfig:
    """Read emitter settings from a ``pyproject.toml`` file.

    A file without a ``[tool.emitbus]`` table produces the defaults.

    Args:
        pyproject_path: Path to the ``pyproject.toml`` file.

    Returns:
        Validated configuration.

    Raises:
        FileNotFoundError: If *pyproject_path* does not exist.
        ConfigError: If the file is not valid TOML or the entry is not a
            table.
        ConfigValidationError: If a setting has an invalid value.
    """
    with open(pyproject_path, "rb") as fh:
        try:
            document = tomllib.load(fh)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML in {pyproject_path}") from exc

    table = document.get("tool", {}).get(CONFIG_TABLE, {})
    if not isinstance(table, dict):
        raise ConfigError(
            f"[tool.{CONFIG_TABLE}] in {pyproject_path} must be a table, "
            f"got {type(table).__name__}"
        )

    if not table:
        log.info("No [tool.{}] settings in {}", CONFIG_TABLE, pyproject_path)
    else:
        log.info("Loaded [tool.{}] settings from {}", CONFIG_TABLE, pyproject_path)
    return EmitterConfig(**table)
