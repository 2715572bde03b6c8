import io
import sys
from typing import BinaryIO, Optional, Union

from .alphabet import Alphabet
from .brainfuck import DEFAULT_TAPE_LIMIT, EOF_ZERO, BrainfuckInterpreter
from .jump_table import Program, parse


def read_source(path: str, stdin: Optional[BinaryIO] = None) -> str:
    """Read program text from a UTF-8 file, or from stdin when path is '-'."""
    if path == "-":
        stream = stdin if stdin is not None else sys.stdin.buffer
        return stream.read().decode("utf-8")
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def load_program(source: str, alphabet: Optional[Alphabet] = None) -> Program:
    """Tokenize source with the alphabet (default Brainfuck if None) and resolve its jumps."""
    return parse(source, alphabet)


def execute(source: Union[str, Program], input_data: bytes = b"", alphabet: Optional[Alphabet] = None,
            tape_limit: int = DEFAULT_TAPE_LIMIT, eof: str = EOF_ZERO) -> bytes:
    """Run a program on in-memory input and return everything it wrote.
    Fresh tape each call (stateless).
    """
    program = source if isinstance(source, Program) else load_program(source, alphabet)
    out = io.BytesIO()
    itp = BrainfuckInterpreter(tape_limit=tape_limit, eof=eof)
    itp.run(program, io.BytesIO(input_data), out)
    return out.getvalue()
