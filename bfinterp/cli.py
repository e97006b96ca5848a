"""
Command-line front end.

    bfinterp -i program.b            run a program file; ``,`` reads stdin
    echo '++++[>++<-]>.' | bfinterp  run a program piped on stdin
    bfinterp                         run one line typed at the terminal

When the program is piped on stdin, stdin is used up, so ``,`` always sees
end of input. When it is typed at a terminal, ``,`` reads the keystrokes that
follow the program line. Program text that is not valid UTF-8 is decoded
with replacement characters; such bytes can only appear in comments.
"""

from __future__ import annotations

import argparse
import io
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from bfinterp.config.settings import InterpreterConfig, load_config
from bfinterp.errors import InterpreterError
from bfinterp.interpreter.interpreter import Interpreter
from bfinterp.interpreter.io import (
    BufferSource,
    ByteSource,
    StreamSink,
    StreamSource,
    TextStreamSource,
)
from bfinterp.machine.policy import OverflowPolicy

logger = logging.getLogger(__name__)

_POLICY_CHOICES = [p.value for p in OverflowPolicy]


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="bfinterp",
        description="Run a tape-language program from a file or from standard input.",
    )
    ap.add_argument(
        "-i",
        "--input",
        dest="program_file",
        type=Path,
        help="Program file to run. Without it the program is read from stdin.",
    )
    ap.add_argument("--config", type=Path, help="YAML file with interpreter settings")
    ap.add_argument("--cells", type=int, help="Number of tape cells (default 32768)")
    ap.add_argument(
        "--pointer-overflow",
        choices=_POLICY_CHOICES,
        help="What happens when the pointer leaves the tape (default ignore)",
    )
    ap.add_argument(
        "--value-overflow",
        choices=_POLICY_CHOICES,
        help="What happens when a cell leaves 0..255 (default wrap_around)",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return ap


def _read_program(program_file: Path | None) -> str:
    if program_file is not None:
        return program_file.read_text(encoding="utf-8", errors="replace")
    if sys.stdin.isatty():
        return sys.stdin.readline()
    return sys.stdin.read()


def _resolve_config(args: argparse.Namespace) -> InterpreterConfig:
    config = load_config(args.config) if args.config is not None else InterpreterConfig()
    return config.with_overrides(
        cell_count=args.cells,
        pointer_overflow=args.pointer_overflow,
        value_overflow=args.value_overflow,
    )


def _stdout_buffer() -> io.BufferedIOBase:
    # Text-only replacements of sys.stdout (e.g. io.StringIO) have no .buffer.
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        raise InterpreterError("standard output does not accept bytes")
    return buffer


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )

    try:
        source = _read_program(args.program_file)
        if not source.strip():
            print(
                "Program source was empty. Pass a file with -i FILE or pipe the program on stdin.",
                file=sys.stderr,
            )
            return 1

        config = _resolve_config(args)
        reader: ByteSource
        if args.program_file is not None:
            reader = StreamSource(sys.stdin.buffer)
        elif sys.stdin.isatty():
            reader = TextStreamSource(sys.stdin)
        else:
            reader = BufferSource(b"")
        interpreter = Interpreter.from_config(
            config,
            input_source=reader,
            output_sink=StreamSink(_stdout_buffer()),
        )
        interpreter.run(source)
    except (InterpreterError, OSError, UnicodeDecodeError) as exc:
        logger.debug("Run failed", exc_info=True)
        print(f"Error while running the CLI: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
