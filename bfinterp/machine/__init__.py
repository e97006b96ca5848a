"""
Machine layer: the tape, the pointer, and their overflow policies.
"""

from .policy import OverflowPolicy
from .state import (
    BYTE_MAX,
    BYTE_MIN,
    MachineState,
    resolve_pointer,
    resolve_value,
    validate_cell_count,
)

__all__ = [
    "OverflowPolicy",
    "MachineState",
    "resolve_pointer",
    "resolve_value",
    "validate_cell_count",
    "BYTE_MIN",
    "BYTE_MAX",
]
