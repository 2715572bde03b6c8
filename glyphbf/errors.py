"""Error kinds raised while loading or running a program.

Every error remembers where it happened: the instruction index and the
code-point offset into the program text, when those are known.
"""

from typing import Optional


class BrainfuckError(Exception):
    """Base class for everything the interpreter reports to its caller."""

    exit_code = 1

    def __init__(self, message: str, index: Optional[int] = None, source_offset: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.index = index
        self.source_offset = source_offset

    def __str__(self) -> str:
        return self.message


class ConfigError(BrainfuckError, ValueError):
    """Malformed alphabet or settings."""

    exit_code = 2


class BrainfuckSyntaxError(BrainfuckError, SyntaxError):
    """Unmatched loop bracket."""

    exit_code = 3


class BrainfuckRuntimeError(BrainfuckError, RuntimeError):
    """Tape underflow/overflow or a failing input/output stream."""

    exit_code = 4
