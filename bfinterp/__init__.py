"""
bfinterp: a tree-walking interpreter for the eight-instruction tape language.

The interpreter scans program text once, left to right, against a fixed-size
tape of byte cells. Pointer moves and cell mutations that leave their valid
range are handled by two independently configured overflow policies (ignore,
wrap around, or raise). Loops are matched at run time: skipped loops are
found by a forward bracket scan, taken loops by an explicit loop stack.
"""

from .errors import (
    CellOverflow,
    CellValueOverflow,
    ConfigurationError,
    InterpreterError,
    InvalidArgument,
    UnbalancedBracket,
)
from .machine import MachineState, OverflowPolicy
from .config import DEFAULT_CELL_COUNT, InterpreterConfig, load_config
from .interpreter import (
    EOF,
    BufferSink,
    BufferSource,
    ByteSink,
    ByteSource,
    Instruction,
    Interpreter,
    StreamSink,
    StreamSource,
)

__all__ = [
    # Execution
    "Interpreter",
    "Instruction",
    # Machine
    "MachineState",
    "OverflowPolicy",
    # Configuration
    "InterpreterConfig",
    "DEFAULT_CELL_COUNT",
    "load_config",
    # I/O
    "EOF",
    "ByteSource",
    "ByteSink",
    "StreamSource",
    "StreamSink",
    "BufferSource",
    "BufferSink",
    # Errors
    "InterpreterError",
    "ConfigurationError",
    "InvalidArgument",
    "CellOverflow",
    "CellValueOverflow",
    "UnbalancedBracket",
]
