"""
Interpreter configuration: the construction-time settings and their loader.

InterpreterConfig is frozen; an Interpreter reads it once at construction and
never again. load_config() reads the same settings from a YAML document:

    cell_count: 30000
    pointer_overflow: wrap_around
    value_overflow: throw_exception

Missing keys keep their defaults; unknown keys are rejected.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from bfinterp.errors import ConfigurationError
from bfinterp.machine.policy import OverflowPolicy
from bfinterp.machine.state import validate_cell_count

logger = logging.getLogger(__name__)

DEFAULT_CELL_COUNT: int = 1 << 15


@dataclass(frozen=True)
class InterpreterConfig:
    """
    Construction-time settings for an Interpreter.

    Attributes:
        cell_count: Number of cells on the tape. Must be at least 1.
        pointer_overflow: Policy for pointer moves off either end of the tape.
        value_overflow: Policy for cell values outside [0, 255].
    """

    cell_count: int = DEFAULT_CELL_COUNT
    pointer_overflow: OverflowPolicy = OverflowPolicy.IGNORE
    value_overflow: OverflowPolicy = OverflowPolicy.WRAP_AROUND

    def __post_init__(self) -> None:
        validate_cell_count(self.cell_count)
        # Accept policy names at construction sites and promote to OverflowPolicy.
        object.__setattr__(self, "pointer_overflow", OverflowPolicy.parse(self.pointer_overflow))
        object.__setattr__(self, "value_overflow", OverflowPolicy.parse(self.value_overflow))

    def with_overrides(self, **overrides: Any) -> InterpreterConfig:
        """Return a copy with every non-None keyword replaced."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return dataclasses.replace(self, **changes)


_KNOWN_KEYS = frozenset(f.name for f in dataclasses.fields(InterpreterConfig))


def config_from_mapping(data: Any) -> InterpreterConfig:
    """
    Build an InterpreterConfig from a parsed YAML document.

    None (an empty document) yields the defaults. Raises ConfigurationError
    listing every problem found if the document is not a mapping or names
    unknown keys.
    """
    if data is None:
        return InterpreterConfig()
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration must be a mapping, got {type(data).__name__}"
        )

    errors = [f"unknown configuration key: {key!r}" for key in data if key not in _KNOWN_KEYS]
    if errors:
        raise ConfigurationError("Invalid configuration:\n" + "\n".join(f"  - {e}" for e in errors))
    return InterpreterConfig(**data)


def load_config(path: Path | str) -> InterpreterConfig:
    """Load an InterpreterConfig from a YAML file."""
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Could not parse {path}: {exc}") from exc
    config = config_from_mapping(data)
    logger.debug("Loaded configuration from %s: %s", path, config)
    return config
