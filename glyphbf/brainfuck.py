"""
Brainfuck Execution Engine

Runs a loaded Program against a tape of unsigned 8-bit cells:
    - cells start at 0 and wrap modulo 256
    - the tape starts small and grows to the right on demand, up to tape_limit
    - moving left of cell 0 is an error (the tape is not doubly infinite)
    - input and output are byte streams, one byte per instruction

There is no step limit. A program that loops forever runs forever.
"""

from typing import BinaryIO

from .alphabet import Instruction
from .errors import BrainfuckRuntimeError, ConfigError
from .jump_table import Program

DEFAULT_TAPE_LIMIT = 1024 * 1024
INITIAL_TAPE_SIZE = 1024

EOF_ZERO = "zero"
EOF_UNCHANGED = "unchanged"
EOF_ERROR = "error"
EOF_POLICIES = (EOF_ZERO, EOF_UNCHANGED, EOF_ERROR)


class BrainfuckInterpreter:
    def __init__(self, tape_limit: int = DEFAULT_TAPE_LIMIT, eof: str = EOF_ZERO):
        if not isinstance(tape_limit, int) or isinstance(tape_limit, bool) or tape_limit < 1:
            raise ConfigError(f"tape limit must be a positive integer, got {tape_limit!r}")
        if eof not in EOF_POLICIES:
            raise ConfigError(f"unknown end-of-input policy {eof!r} (expected one of {', '.join(EOF_POLICIES)})")
        self.tape_limit = tape_limit
        self.eof = eof
        self.reset()

    def reset(self):
        self.memory = bytearray(min(INITIAL_TAPE_SIZE, self.tape_limit))
        self.pointer = 0
        self.instruction_pointer = 0
        self.steps = 0
        self.input_reads = 0
        self.output_writes = 0
        self.last_output = None

    def run(self, program: Program, stdin: BinaryIO, stdout: BinaryIO) -> None:
        """Execute program until the instruction pointer runs off its end.

        Tape and cursors are fresh for every run. The output stream is flushed
        when the run halts normally; after a failure, bytes already written
        stay in the stream for its owner to flush.
        """
        self.reset()
        code = program.instructions
        jump_table = program.jumps
        memory = self.memory
        n = len(code)

        while self.instruction_pointer < n:
            ip = self.instruction_pointer
            cmd = code[ip]

            if cmd is Instruction.INCREMENT:
                memory[self.pointer] = (memory[self.pointer] + 1) & 0xFF

            elif cmd is Instruction.DECREMENT:
                memory[self.pointer] = (memory[self.pointer] - 1) & 0xFF

            elif cmd is Instruction.MOVE_RIGHT:
                self.pointer += 1
                if self.pointer >= len(memory):
                    memory = self._grow(program, ip)

            elif cmd is Instruction.MOVE_LEFT:
                if self.pointer == 0:
                    raise BrainfuckRuntimeError(
                        f"tape underflow: moved left of cell 0 at instruction {ip}",
                        index=ip, source_offset=program.offset_of(ip))
                self.pointer -= 1

            elif cmd is Instruction.OUTPUT:
                self._write(stdout, memory[self.pointer], program, ip)

            elif cmd is Instruction.INPUT:
                self._read(stdin, stdout, program, ip)

            elif cmd is Instruction.LOOP_OPEN:
                if memory[self.pointer] == 0:
                    self.instruction_pointer = jump_table[ip]

            elif cmd is Instruction.LOOP_CLOSE:
                if memory[self.pointer] != 0:
                    self.instruction_pointer = jump_table[ip]

            # Jumps land on the matching bracket, so the loop body (or the
            # code after the loop) starts one past it
            self.instruction_pointer += 1
            self.steps += 1

        if self.last_output is not None:
            self._flush(stdout, program, self.last_output)

    def _grow(self, program: Program, ip: int) -> bytearray:
        if self.pointer >= self.tape_limit:
            raise BrainfuckRuntimeError(
                f"tape overflow: moved right of cell {self.tape_limit - 1} at instruction {ip}",
                index=ip, source_offset=program.offset_of(ip))
        new_size = min(max(len(self.memory) * 2, self.pointer + 1), self.tape_limit)
        self.memory.extend(bytes(new_size - len(self.memory)))
        return self.memory

    def _write(self, stdout: BinaryIO, value: int, program: Program, ip: int):
        try:
            stdout.write(bytes((value,)))
        except OSError as e:
            raise BrainfuckRuntimeError(
                f"output failed at instruction {ip}: {e}",
                index=ip, source_offset=program.offset_of(ip)) from e
        self.output_writes += 1
        self.last_output = ip

    def _read(self, stdin: BinaryIO, stdout: BinaryIO, program: Program, ip: int):
        # Let an interactive user see any prompt before blocking on input
        self._flush(stdout, program, ip)
        try:
            data = stdin.read(1)
        except OSError as e:
            raise BrainfuckRuntimeError(
                f"input failed at instruction {ip}: {e}",
                index=ip, source_offset=program.offset_of(ip)) from e

        if data:
            self.memory[self.pointer] = data[0]
            self.input_reads += 1
        elif self.eof == EOF_ZERO:
            self.memory[self.pointer] = 0
        elif self.eof == EOF_ERROR:
            raise BrainfuckRuntimeError(
                f"unexpected end of input at instruction {ip}",
                index=ip, source_offset=program.offset_of(ip))
        # EOF_UNCHANGED: leave the cell as it is

    @staticmethod
    def _flush(stdout: BinaryIO, program: Program, ip: int):
        flush = getattr(stdout, "flush", None)
        if flush is None:
            return
        try:
            flush()
        except OSError as e:
            raise BrainfuckRuntimeError(
                f"output failed at instruction {ip}: {e}",
                index=ip, source_offset=program.offset_of(ip)) from e
