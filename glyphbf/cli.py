"""
glyphbf - run Brainfuck programs written in any 8-symbol alphabet.

    glyphbf hello.bf
    glyphbf -s abcdefgh hello_abc.bf
    glyphbf -s "👍 👎 👉 👈 ✍️ 📣 🔁 🔚" hello_emoji.bf
    echo "+[,.]" | glyphbf -
"""

import argparse
import sys
from typing import BinaryIO, List, Optional

from dotenv import find_dotenv, load_dotenv

from . import __version__
from .alphabet import DEFAULT_SYMBOLS, Alphabet
from .bf_runner import load_program, read_source
from .brainfuck import EOF_POLICIES, BrainfuckInterpreter
from .errors import BrainfuckError, BrainfuckRuntimeError
from .lexer import locate, render
from .settings import load_settings

PROG = "glyphbf"


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog=PROG, description="Brainfuck interpreter with custom instruction alphabets")
    ap.add_argument("program", help="Brainfuck program file to run ('-' reads the program from stdin)")
    ap.add_argument("-s", "--language", "--alphabet", dest="alphabet", default=None,
                    help=f"8 symbols in the order of {DEFAULT_SYMBOLS} (separate them with spaces for multi-character symbols)")
    ap.add_argument("-c", "--config", default=None, help="YAML file with alphabet / tape_limit / eof settings")
    ap.add_argument("--tape-limit", type=int, default=None, help="Maximum number of tape cells")
    ap.add_argument("--eof", choices=EOF_POLICIES, default=None,
                    help="What ',' does at end of input: zero the cell (default), leave it unchanged, or fail")
    ap.add_argument("--emit", metavar="ALPHABET", default=None,
                    help="Don't run; print the program spelled in ALPHABET instead")
    ap.add_argument("-v", "--verbose", action="store_true", help="Print program and run statistics to stderr")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def _report(err: BrainfuckError, source: Optional[str]) -> None:
    where = ""
    if source is not None and err.source_offset is not None:
        line, column = locate(source, err.source_offset)
        where = f" (line {line}, column {column})"
    print(f"{PROG}: error: {err}{where}", file=sys.stderr)


def main(argv: Optional[List[str]] = None, stdin: Optional[BinaryIO] = None,
         stdout: Optional[BinaryIO] = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    args = build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin.buffer
    stdout = stdout if stdout is not None else sys.stdout.buffer

    source = None
    try:
        settings = load_settings(
            config_path=args.config,
            overrides={"alphabet": args.alphabet, "tape_limit": args.tape_limit, "eof": args.eof},
        )
        alphabet = settings.resolve_alphabet()

        try:
            source = read_source(args.program, stdin)
        except (OSError, UnicodeDecodeError) as e:
            print(f"{PROG}: error: cannot read program {args.program}: {e}", file=sys.stderr)
            return 1

        program = load_program(source, alphabet)
        if args.verbose:
            print(f"📜 {len(program)} instructions, {program.loop_count} loops, alphabet {alphabet}",
                  file=sys.stderr)

        if args.emit is not None:
            target = Alphabet.from_string(args.emit)
            try:
                stdout.write((render(program.instructions, target) + "\n").encode("utf-8"))
                stdout.flush()
            except OSError as e:
                raise BrainfuckRuntimeError(f"output failed: {e}") from e
            return 0

        itp = BrainfuckInterpreter(tape_limit=settings.tape_limit, eof=settings.eof)
        itp.run(program, stdin, stdout)
    except BrainfuckError as e:
        _report(e, source)
        return e.exit_code

    if args.verbose:
        print(f"🎯 halted after {itp.steps} steps, cursor at cell {itp.pointer}, "
              f"{itp.input_reads} bytes read, {itp.output_writes} bytes written", file=sys.stderr)
    return 0
