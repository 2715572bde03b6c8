"""Turn source text into instruction tokens.

Anything that is not a symbol of the active alphabet is a comment. Symbols
are matched whole and longest-first, and a match must end on a grapheme
cluster boundary: a skin-tone or ZWJ emoji sequence is one character, never
a symbol followed by leftovers. A symbol that is a prefix of another one
does not shadow it.
"""

from typing import Dict, Iterable, List, NamedTuple, Set, Tuple

import regex

from .alphabet import Alphabet, Instruction

_END = object()  # marks a complete symbol inside the trie
_CLUSTER = regex.compile(r"\X")


class Token(NamedTuple):
    instruction: Instruction
    offset: int  # code-point offset of the symbol in the source text


def _build_trie(alphabet: Alphabet) -> Dict:
    root: Dict = {}
    for symbol, instruction in alphabet.items():
        node = root
        for ch in symbol:
            node = node.setdefault(ch, {})
        node[_END] = instruction
    return root


def _cluster_ends(text: str) -> Set[int]:
    return {m.end() for m in _CLUSTER.finditer(text)}


def tokenize(text: str, alphabet: Alphabet) -> List[Token]:
    """Scan text and return the instructions it spells, in order."""
    trie = _build_trie(alphabet)
    boundaries = _cluster_ends(text)
    tokens: List[Token] = []
    i = 0
    n = len(text)
    while i < n:
        node = trie
        match = None
        j = i
        while j < n and text[j] in node:
            node = node[text[j]]
            j += 1
            if _END in node and j in boundaries:
                match = (node[_END], j)
        if match is None:
            # not a symbol: skip the whole user-perceived character
            i = _CLUSTER.match(text, i).end()
            continue
        instruction, end = match
        tokens.append(Token(instruction, i))
        i = end
    return tokens


def render(instructions: Iterable[Instruction], alphabet: Alphabet) -> str:
    """Spell instructions with the given alphabet (the inverse of tokenize)."""
    sep = "" if all(len(sym) == 1 for sym in alphabet.symbols) else " "
    return sep.join(alphabet.symbol_for(ins) for ins in instructions)


def locate(text: str, offset: int) -> Tuple[int, int]:
    """1-based (line, column) of a code-point offset in text."""
    line = text.count("\n", 0, offset) + 1
    column = offset - (text.rfind("\n", 0, offset) + 1) + 1
    return line, column
