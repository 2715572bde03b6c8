from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from .alphabet import Alphabet, Instruction
from .errors import BrainfuckSyntaxError
from .lexer import Token, tokenize


@dataclass(frozen=True)
class Program:
    """Instructions plus the matching bracket for every loop instruction.

    Source offsets are kept for diagnostics only and do not take part in
    equality: two sources that differ only in comments load to equal programs.
    """
    instructions: Tuple[Instruction, ...]
    jumps: Mapping[int, int]
    offsets: Tuple[int, ...] = field(default=(), compare=False)

    def __post_init__(self):
        # a loaded program is read-only
        object.__setattr__(self, "instructions", tuple(self.instructions))
        object.__setattr__(self, "jumps", MappingProxyType(dict(self.jumps)))
        object.__setattr__(self, "offsets", tuple(self.offsets))

    def __hash__(self):
        return hash((self.instructions, tuple(sorted(self.jumps.items()))))

    def __len__(self) -> int:
        return len(self.instructions)

    def offset_of(self, index: int) -> Optional[int]:
        if 0 <= index < len(self.offsets):
            return self.offsets[index]
        return None

    @property
    def loop_count(self) -> int:
        return len(self.jumps) // 2


def build_jump_table(instructions: Sequence[Instruction], offsets: Sequence[int] = ()) -> Dict[int, int]:
    """Pair every loop open with its loop close, in both directions."""
    jump_table: Dict[int, int] = {}
    stack: List[int] = []

    def _offset(i):
        return offsets[i] if i < len(offsets) else None

    for i, ins in enumerate(instructions):
        if ins is Instruction.LOOP_OPEN:
            stack.append(i)
        elif ins is Instruction.LOOP_CLOSE:
            if not stack:
                raise BrainfuckSyntaxError(
                    f"unmatched bracket: loop close at instruction {i} has no opening",
                    index=i, source_offset=_offset(i))
            start = stack.pop()
            jump_table[start] = i
            jump_table[i] = start

    if stack:
        # Report the innermost unclosed loop
        i = stack[-1]
        raise BrainfuckSyntaxError(
            f"unmatched bracket: loop open at instruction {i} is never closed",
            index=i, source_offset=_offset(i))

    return jump_table


def parse(text: str, alphabet: Optional[Alphabet] = None) -> Program:
    """Load source text into a runnable Program."""
    tokens: List[Token] = tokenize(text, alphabet or Alphabet.default())
    instructions = tuple(t.instruction for t in tokens)
    offsets = tuple(t.offset for t in tokens)
    jumps = build_jump_table(instructions, offsets)
    return Program(instructions=instructions, jumps=jumps, offsets=offsets)
