"""
Exception taxonomy for the tape-machine interpreter.

Every error raised by the interpreter derives from InterpreterError so
embedding applications can catch a single type. All errors are fail-fast:
they abort the in-progress run and leave the machine state exactly as it was
at the failure point.
"""

from __future__ import annotations


class InterpreterError(Exception):
    """Base class for all interpreter failures."""


class ConfigurationError(InterpreterError, ValueError):
    """Raised when interpreter settings are invalid (e.g. a non-positive cell count)."""


class InvalidArgument(InterpreterError, ValueError):
    """Raised when the program source is None, empty, or whitespace only."""


class CellOverflow(InterpreterError):
    """Raised when the pointer leaves the tape under the THROW_EXCEPTION policy.

    Attributes:
        requested_index: The pointer value the move attempted to reach.
    """

    def __init__(self, requested_index: int) -> None:
        super().__init__(
            f"Cell overflow: pointer moved to {requested_index}, outside the tape"
        )
        self.requested_index = requested_index


class CellValueOverflow(InterpreterError):
    """Raised when a cell value leaves [0, 255] under the THROW_EXCEPTION policy.

    Attributes:
        requested_value: The value the mutation attempted to store.
    """

    def __init__(self, requested_value: int) -> None:
        super().__init__(
            f"Cell value overflow: {requested_value} is outside the byte range [0, 255]"
        )
        self.requested_value = requested_value


class UnbalancedBracket(InterpreterError):
    """Raised when a loop bracket has no partner.

    Attributes:
        position: Index in the source of the offending ``[`` or ``]``.
    """

    def __init__(self, position: int) -> None:
        super().__init__(f"Unbalanced loop bracket at position {position}")
        self.position = position
