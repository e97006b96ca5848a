"""
Machine state for the tape interpreter.

MachineState owns the tape (a fixed-length array of unsigned bytes), the
pointer into it, and the two overflow policies. Every mutation goes through
one of two boundary checks, one per axis:

- pointer axis: a move to ``pointer - 1 < 0`` or ``pointer + 1 >= cell_count``
- value axis: a store of a value outside ``[0, 255]``

Under IGNORE the mutation is discarded and the previous valid state persists.
Under WRAP_AROUND the candidate jumps to the opposite end of its range (not a
modulo: any value above 255 becomes 0, any value below 0 becomes 255).
Under THROW_EXCEPTION the raw candidate is reported in the raised error and
nothing is stored.

Unlike the frozen value objects elsewhere in the package, MachineState is
mutable in place and is not safe to share between concurrent runs.
"""

from __future__ import annotations

import logging

from bfinterp.errors import CellOverflow, CellValueOverflow, ConfigurationError

from .policy import OverflowPolicy

logger = logging.getLogger(__name__)

BYTE_MIN: int = 0
BYTE_MAX: int = 255


def resolve_pointer(candidate: int, cell_count: int, policy: OverflowPolicy) -> int | None:
    """
    Apply the pointer overflow policy to a requested pointer position.

    Returns the position to store, or None if the move must be discarded.
    Raises CellOverflow under THROW_EXCEPTION.
    """
    if 0 <= candidate < cell_count:
        return candidate
    if policy is OverflowPolicy.THROW_EXCEPTION:
        raise CellOverflow(candidate)
    if policy is OverflowPolicy.IGNORE:
        logger.debug("Pointer move to %d ignored (tape has %d cells)", candidate, cell_count)
        return None
    wrapped = cell_count - 1 if candidate < 0 else 0
    logger.debug("Pointer move to %d wrapped to %d", candidate, wrapped)
    return wrapped


def resolve_value(candidate: int, policy: OverflowPolicy) -> int | None:
    """
    Apply the value overflow policy to a requested cell value.

    Returns the byte to store, or None if the store must be discarded.
    Raises CellValueOverflow under THROW_EXCEPTION.
    """
    if BYTE_MIN <= candidate <= BYTE_MAX:
        return candidate
    if policy is OverflowPolicy.THROW_EXCEPTION:
        raise CellValueOverflow(candidate)
    if policy is OverflowPolicy.IGNORE:
        logger.debug("Cell value %d ignored", candidate)
        return None
    wrapped = BYTE_MIN if candidate > BYTE_MAX else BYTE_MAX
    logger.debug("Cell value %d wrapped to %d", candidate, wrapped)
    return wrapped


def validate_cell_count(cell_count: int) -> int:
    """Return ``cell_count`` if it is a positive integer, else raise ConfigurationError."""
    if isinstance(cell_count, bool) or not isinstance(cell_count, int) or cell_count < 1:
        raise ConfigurationError(f"cell_count must be a positive integer, got {cell_count!r}")
    return cell_count


class MachineState:
    """
    The tape, the pointer, and the overflow policies that guard them.

    Attributes:
        pointer_overflow: Policy applied when the pointer would leave the tape.
        value_overflow: Policy applied when a cell would leave [0, 255].
    """

    def __init__(
        self,
        cell_count: int,
        pointer_overflow: OverflowPolicy = OverflowPolicy.IGNORE,
        value_overflow: OverflowPolicy = OverflowPolicy.WRAP_AROUND,
    ) -> None:
        self._cells = bytearray(validate_cell_count(cell_count))
        self._pointer = 0
        self.pointer_overflow = OverflowPolicy.parse(pointer_overflow)
        self.value_overflow = OverflowPolicy.parse(value_overflow)

    # ── Inspection ─────────────────────────────────────────────────────────────

    @property
    def cells(self) -> bytes:
        """Read-only snapshot of the whole tape."""
        return bytes(self._cells)

    @property
    def pointer(self) -> int:
        return self._pointer

    @property
    def cell_count(self) -> int:
        return len(self._cells)

    def get_current_value(self) -> int:
        """Return the byte under the pointer."""
        return self._cells[self._pointer]

    # ── Pointer axis ───────────────────────────────────────────────────────────

    def move_pointer_left(self) -> None:
        self._move_pointer(self._pointer - 1)

    def move_pointer_right(self) -> None:
        self._move_pointer(self._pointer + 1)

    def _move_pointer(self, candidate: int) -> None:
        resolved = resolve_pointer(candidate, len(self._cells), self.pointer_overflow)
        if resolved is not None:
            self._pointer = resolved

    # ── Value axis ─────────────────────────────────────────────────────────────

    def increment_cell(self) -> None:
        self._change_cell(self.get_current_value() + 1)

    def decrement_cell(self) -> None:
        self._change_cell(self.get_current_value() - 1)

    def set_cell(self, raw_value: int) -> None:
        """
        Store an arbitrary integer in the current cell.

        Used for input, where the raw value may be an end-of-stream sentinel
        outside the byte range; such values go through the value overflow
        policy like any other out-of-range candidate.
        """
        self._change_cell(raw_value)

    def _change_cell(self, candidate: int) -> None:
        resolved = resolve_value(candidate, self.value_overflow)
        if resolved is not None:
            self._cells[self._pointer] = resolved

    # ── Lifecycle ──────────────────────────────────────────────────────────────

    def reset(self) -> None:
        """Zero every cell and return the pointer to 0."""
        self._cells[:] = bytes(len(self._cells))
        self._pointer = 0

    def __repr__(self) -> str:
        return (
            f"MachineState(cell_count={len(self._cells)}, pointer={self._pointer}, "
            f"pointer_overflow={self.pointer_overflow.value}, "
            f"value_overflow={self.value_overflow.value})"
        )
