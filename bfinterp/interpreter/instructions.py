"""
The eight instruction symbols of the tape language.

Any other character in a program is a comment.
"""

from __future__ import annotations

from enum import Enum


class Instruction(str, Enum):
    """Recognized instruction symbols."""

    MOVE_POINTER_RIGHT = ">"
    MOVE_POINTER_LEFT = "<"
    INCREMENT_CELL = "+"
    DECREMENT_CELL = "-"
    OUTPUT_CELL = "."
    GET_INPUT = ","
    LOOP_START = "["
    LOOP_END = "]"


INSTRUCTION_SYMBOLS: frozenset[str] = frozenset(i.value for i in Instruction)


def is_instruction(char: str) -> bool:
    return char in INSTRUCTION_SYMBOLS
