"""Brainfuck interpreter for programs spelled in any 8-symbol alphabet."""

__version__ = "0.1.0"

from .alphabet import CANONICAL_ORDER, DEFAULT_SYMBOLS, Alphabet, Instruction
from .bf_runner import execute, load_program, read_source
from .brainfuck import BrainfuckInterpreter
from .errors import BrainfuckError, BrainfuckRuntimeError, BrainfuckSyntaxError, ConfigError
from .jump_table import Program, build_jump_table, parse
from .lexer import Token, locate, render, tokenize
