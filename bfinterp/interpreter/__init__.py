"""
Interpreter layer: instruction dispatch, loop control, and I/O collaborators.
"""

from .instructions import INSTRUCTION_SYMBOLS, Instruction, is_instruction
from .interpreter import Interpreter, find_matching_bracket
from .io import (
    EOF,
    BufferSink,
    BufferSource,
    ByteSink,
    ByteSource,
    StreamSink,
    StreamSource,
    TextStreamSource,
)

__all__ = [
    # Execution
    "Interpreter",
    "find_matching_bracket",
    # Instructions
    "Instruction",
    "INSTRUCTION_SYMBOLS",
    "is_instruction",
    # I/O
    "EOF",
    "ByteSource",
    "ByteSink",
    "StreamSource",
    "TextStreamSource",
    "StreamSink",
    "BufferSource",
    "BufferSink",
]
