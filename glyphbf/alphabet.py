"""
Brainfuck instructions and the alphabets that spell them.

Brainfuck has only 8 instructions:
    +   Increment the memory cell at the pointer
    -   Decrement the memory cell at the pointer
    >   Move the pointer to the right
    <   Move the pointer to the left
    ,   Input a byte and store it in the cell at the pointer
    .   Output the byte in the cell at the pointer
    [   Jump past the matching ] if the cell at the pointer is 0
    ]   Jump back to the matching [ if the cell at the pointer is nonzero

An alphabet is any 8 distinct symbols standing in for them, listed in that
order. A symbol may be longer than one code point (compound emoji, words).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, Tuple

from .errors import ConfigError


class Instruction(Enum):
    INCREMENT = "increment"
    DECREMENT = "decrement"
    MOVE_RIGHT = "move_right"
    MOVE_LEFT = "move_left"
    INPUT = "input"
    OUTPUT = "output"
    LOOP_OPEN = "loop_open"
    LOOP_CLOSE = "loop_close"


# Position i of every alphabet spells CANONICAL_ORDER[i]
CANONICAL_ORDER: Tuple[Instruction, ...] = (
    Instruction.INCREMENT,
    Instruction.DECREMENT,
    Instruction.MOVE_RIGHT,
    Instruction.MOVE_LEFT,
    Instruction.INPUT,
    Instruction.OUTPUT,
    Instruction.LOOP_OPEN,
    Instruction.LOOP_CLOSE,
)

DEFAULT_SYMBOLS = "+-><,.[]"


@dataclass(frozen=True)
class Alphabet:
    """Validated symbol <-> instruction mapping."""
    symbols: Tuple[str, ...]
    _by_symbol: Dict[str, Instruction] = field(init=False, repr=False, compare=False)
    _by_instruction: Dict[Instruction, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        symbols = tuple(self.symbols)
        if len(symbols) != len(CANONICAL_ORDER):
            raise ConfigError(
                f"alphabet must have exactly {len(CANONICAL_ORDER)} symbols, got {len(symbols)}"
            )
        seen = set()
        for sym in symbols:
            if not isinstance(sym, str) or not sym:
                raise ConfigError(f"alphabet symbols must be non-empty strings, got {sym!r}")
            if sym in seen:
                raise ConfigError(f"alphabet symbol {sym!r} is used more than once")
            seen.add(sym)

        # frozen dataclass: derived tables are set through object.__setattr__
        object.__setattr__(self, "symbols", symbols)
        object.__setattr__(self, "_by_symbol", dict(zip(symbols, CANONICAL_ORDER)))
        object.__setattr__(self, "_by_instruction", dict(zip(CANONICAL_ORDER, symbols)))

    @classmethod
    def default(cls) -> 'Alphabet':
        return cls.from_string(DEFAULT_SYMBOLS)

    @classmethod
    def from_symbols(cls, symbols: Iterable[str]) -> 'Alphabet':
        return cls(tuple(symbols))

    @classmethod
    def from_string(cls, text: str) -> 'Alphabet':
        """Build an alphabet from a string.

        With whitespace in it, the string is a whitespace-separated list of
        symbols ("👍🏽 👎🏽 ➡️ ⬅️ 📥 📤 🔁 🔚"). Otherwise every code point is a
        symbol ("abcdefgh").
        """
        if not isinstance(text, str):
            raise ConfigError(f"alphabet must be a string, got {type(text).__name__}")
        stripped = text.strip()
        if any(ch.isspace() for ch in stripped):
            return cls.from_symbols(stripped.split())
        return cls.from_symbols(list(stripped))

    def instruction_for(self, symbol: str) -> Instruction:
        try:
            return self._by_symbol[symbol]
        except KeyError:
            raise KeyError(f"{symbol!r} is not a symbol of this alphabet") from None

    def symbol_for(self, instruction: Instruction) -> str:
        return self._by_instruction[instruction]

    def items(self):
        """(symbol, instruction) pairs in canonical order."""
        return zip(self.symbols, CANONICAL_ORDER)

    def __contains__(self, symbol) -> bool:
        return symbol in self._by_symbol

    def __str__(self) -> str:
        if all(len(sym) == 1 for sym in self.symbols):
            return "".join(self.symbols)
        return " ".join(self.symbols)
