"""
Single-pass interpreter for the eight-instruction tape language.

run() scans the program text left to right. Non-instruction characters are
comments. Cell and pointer instructions are dispatched to MachineState
handlers through _DISPATCH; the two bracket instructions are handled inline
because they move the scan index:

- ``[`` with a non-zero cell pushes its own index on the loop stack. With a
  zero cell the body is skipped by scanning forward for the matching ``]``
  (find_matching_bracket), every time the loop is skipped.
- ``]`` pops the loop stack. With a non-zero cell the scan resumes *at* the
  popped ``[``, which re-tests the cell and re-pushes itself.

There is no precomputed jump table. The loop stack lives only for the
duration of one run() call.

Bracket errors:
- an unmatched ``[`` being skipped raises UnbalancedBracket at that ``[``
- a ``]`` with an empty loop stack raises UnbalancedBracket at that ``]``
- a non-empty loop stack when the scan ends raises UnbalancedBracket at the
  innermost unclosed ``[``
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable

from bfinterp.config.settings import DEFAULT_CELL_COUNT, InterpreterConfig
from bfinterp.errors import InvalidArgument, UnbalancedBracket
from bfinterp.machine.policy import OverflowPolicy
from bfinterp.machine.state import MachineState

from .instructions import INSTRUCTION_SYMBOLS, Instruction
from .io import ByteSink, ByteSource, StreamSink, StreamSource

logger = logging.getLogger(__name__)

_Handler = Callable[[MachineState, ByteSource, ByteSink], None]


def find_matching_bracket(source: str, start: int) -> int | None:
    """
    Return the index of the ``]`` matching the ``[`` at ``start``.

    Nested brackets are counted; any other character is skipped. Returns None
    if the end of the source is reached first.
    """
    depth = 1
    pos = start
    while pos + 1 < len(source):
        pos += 1
        char = source[pos]
        if char == Instruction.LOOP_START.value:
            depth += 1
        elif char == Instruction.LOOP_END.value:
            depth -= 1
            if depth == 0:
                return pos
    return None


class Interpreter:
    """
    Runs tape-language programs against one MachineState.

    The machine state persists for the interpreter's lifetime; run() zeroes it
    first unless told not to. An Interpreter is not safe to run concurrently;
    use one instance per concurrent task.

    Attributes:
        config: The effective construction-time settings.
        state: The owned MachineState.
    """

    def __init__(
        self,
        cell_count: int = DEFAULT_CELL_COUNT,
        pointer_overflow: OverflowPolicy | str = OverflowPolicy.IGNORE,
        value_overflow: OverflowPolicy | str = OverflowPolicy.WRAP_AROUND,
        input_source: ByteSource | None = None,
        output_sink: ByteSink | None = None,
    ) -> None:
        self.config = InterpreterConfig(
            cell_count=cell_count,
            pointer_overflow=pointer_overflow,
            value_overflow=value_overflow,
        )
        self.state = MachineState(
            self.config.cell_count,
            self.config.pointer_overflow,
            self.config.value_overflow,
        )
        self._input_source = input_source
        self._output_sink = output_sink
        logger.debug(
            "Interpreter created: %d cells, pointer overflow %s, value overflow %s",
            self.config.cell_count,
            self.config.pointer_overflow.value,
            self.config.value_overflow.value,
        )

    @classmethod
    def from_config(
        cls,
        config: InterpreterConfig,
        input_source: ByteSource | None = None,
        output_sink: ByteSink | None = None,
    ) -> Interpreter:
        return cls(
            cell_count=config.cell_count,
            pointer_overflow=config.pointer_overflow,
            value_overflow=config.value_overflow,
            input_source=input_source,
            output_sink=output_sink,
        )

    def run(
        self,
        source: str,
        reset_state: bool = True,
        *,
        input_source: ByteSource | None = None,
        output_sink: ByteSink | None = None,
    ) -> None:
        """
        Execute a program.

        Parameters
        ----------
        source:
            Program text. Only ``> < + - . , [ ]`` are meaningful.
        reset_state:
            Zero the tape and pointer before running. Pass False to keep the
            state left by a previous run.
        input_source, output_sink:
            Per-call I/O overrides. Fall back to the collaborators given at
            construction, then to standard input / standard output.

        Raises
        ------
        InvalidArgument
            If ``source`` is None, empty, or whitespace only.
        CellOverflow, CellValueOverflow
            Under the THROW_EXCEPTION policies.
        UnbalancedBracket
            If a bracket has no partner.
        """
        if source is None or not source.strip():
            raise InvalidArgument("Source code cannot be None, empty, or whitespace only")

        reader = input_source if input_source is not None else self._input_source
        if reader is None:
            reader = StreamSource(sys.stdin.buffer)
        writer = output_sink if output_sink is not None else self._output_sink
        if writer is None:
            writer = StreamSink(sys.stdout.buffer)

        if reset_state:
            self.state.reset()
        logger.debug("Running %d-character program (reset_state=%s)", len(source), reset_state)

        state = self.state
        loop_stack: list[int] = []
        idx = 0
        while idx < len(source):
            char = source[idx]
            if char not in INSTRUCTION_SYMBOLS:
                idx += 1
                continue

            if char == Instruction.LOOP_START.value:
                if state.get_current_value() != 0:
                    loop_stack.append(idx)
                else:
                    loop_end = find_matching_bracket(source, idx)
                    if loop_end is None:
                        raise UnbalancedBracket(idx)
                    idx = loop_end
            elif char == Instruction.LOOP_END.value:
                if not loop_stack:
                    raise UnbalancedBracket(idx)
                loop_start = loop_stack.pop()
                if state.get_current_value() != 0:
                    idx = loop_start - 1
            else:
                _DISPATCH[Instruction(char)](state, reader, writer)
            idx += 1

        if loop_stack:
            raise UnbalancedBracket(loop_stack[-1])
        logger.debug("Program finished with pointer at %d", state.pointer)


# ── Cell and pointer handlers ──────────────────────────────────────────────────


def _exec_move_right(state: MachineState, reader: ByteSource, writer: ByteSink) -> None:
    state.move_pointer_right()


def _exec_move_left(state: MachineState, reader: ByteSource, writer: ByteSink) -> None:
    state.move_pointer_left()


def _exec_increment(state: MachineState, reader: ByteSource, writer: ByteSink) -> None:
    state.increment_cell()


def _exec_decrement(state: MachineState, reader: ByteSource, writer: ByteSink) -> None:
    state.decrement_cell()


def _exec_output(state: MachineState, reader: ByteSource, writer: ByteSink) -> None:
    writer.write(state.get_current_value())


def _exec_input(state: MachineState, reader: ByteSource, writer: ByteSink) -> None:
    # EOF (-1) is stored through the value overflow policy like any other value.
    state.set_cell(reader.read())


_DISPATCH: dict[Instruction, _Handler] = {
    Instruction.MOVE_POINTER_RIGHT: _exec_move_right,
    Instruction.MOVE_POINTER_LEFT: _exec_move_left,
    Instruction.INCREMENT_CELL: _exec_increment,
    Instruction.DECREMENT_CELL: _exec_decrement,
    Instruction.OUTPUT_CELL: _exec_output,
    Instruction.GET_INPUT: _exec_input,
}
