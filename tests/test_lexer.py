import pytest

from glyphbf.alphabet import Alphabet, Instruction
from glyphbf.lexer import Token, locate, render, tokenize

Ins = Instruction


def kinds(tokens):
    return [t.instruction for t in tokens]


def test_parse_ops():
    tokens = tokenize("+-.,[><]", Alphabet.default())
    assert kinds(tokens) == [
        Ins.INCREMENT, Ins.DECREMENT, Ins.OUTPUT, Ins.INPUT,
        Ins.LOOP_OPEN, Ins.MOVE_RIGHT, Ins.MOVE_LEFT, Ins.LOOP_CLOSE,
    ]


def test_custom_language():
    tokens = tokenize("abcdefgh", Alphabet.from_string("abcdefgh"))
    assert kinds(tokens) == [
        Ins.INCREMENT, Ins.DECREMENT, Ins.MOVE_RIGHT, Ins.MOVE_LEFT,
        Ins.INPUT, Ins.OUTPUT, Ins.LOOP_OPEN, Ins.LOOP_CLOSE,
    ]


def test_comments_are_skipped_and_offsets_kept():
    tokens = tokenize("a + b\n-x.", Alphabet.default())
    assert tokens == [
        Token(Ins.INCREMENT, 2),
        Token(Ins.DECREMENT, 6),
        Token(Ins.OUTPUT, 8),
    ]


def test_default_symbols_are_comments_under_custom_alphabet():
    assert tokenize("+-><,.[]", Alphabet.from_string("abcdefgh")) == []


@pytest.mark.parametrize("text", ["", "hello world", "\n\n\t", "日本語のコメント"])
def test_no_instructions(text):
    assert tokenize(text, Alphabet.default()) == []


def test_removing_comments_does_not_change_instructions():
    alphabet = Alphabet.from_string("abcdefgh")
    noisy = "xx a1b2 c!d? [e] f  g,h. zz"
    clean = "".join(ch for ch in noisy if ch in alphabet)
    assert clean == "abcdefgh"
    assert kinds(tokenize(noisy, alphabet)) == kinds(tokenize(clean, alphabet))


def test_multi_codepoint_symbols_match_whole():
    alphabet = Alphabet.from_string("👍🏽 👎🏽 👉 👈 ✍️ 📣 🔁 🔚")
    # a bare thumbs-up shares its first code point with 👍🏽 but is not a symbol
    tokens = tokenize("👍 👍🏽👎🏽📣", alphabet)
    assert kinds(tokens) == [Ins.INCREMENT, Ins.DECREMENT, Ins.OUTPUT]
    assert [t.offset for t in tokens] == [2, 4, 6]


def test_symbol_never_matches_part_of_a_skin_tone_emoji():
    alphabet = Alphabet.from_string("👍 👎 👉 👈 ✍ 📣 🔁 🔚")
    assert tokenize("👍🏽", alphabet) == []
    assert tokenize("📣🏽👍", alphabet) == [Token(Ins.INCREMENT, 2)]


def test_symbol_never_matches_part_of_a_zwj_sequence():
    alphabet = Alphabet.from_string("👨 👩 👉 👈 ✍ 📣 🔁 🔚")
    family = "\U0001F468\u200D\U0001F469\u200D\U0001F467"
    assert tokenize(family, alphabet) == []
    assert tokenize(family + "👩👨", alphabet) == [Token(Ins.DECREMENT, 5), Token(Ins.INCREMENT, 6)]


def test_combining_mark_turns_symbol_into_comment():
    # "+" with a combining acute accent is a different character
    assert tokenize("+\u0301+", Alphabet.default()) == [Token(Ins.INCREMENT, 2)]


def test_longest_symbol_wins():
    alphabet = Alphabet.from_symbols(["a", "ab", "c", "d", "e", "f", "g", "h"])
    assert kinds(tokenize("aab", alphabet)) == [Ins.INCREMENT, Ins.DECREMENT]
    assert kinds(tokenize("aax", alphabet)) == [Ins.INCREMENT, Ins.INCREMENT]


def test_render_into_other_alphabet():
    tokens = tokenize("+[->.<]", Alphabet.default())
    assert render(kinds(tokens), Alphabet.from_string("abcdefgh")) == "agbcfdh"
    emoji = Alphabet.from_string("👍🏽 👎🏽 👉 👈 ✍️ 📣 🔁 🔚")
    spelled = render(kinds(tokens), emoji)
    assert spelled == "👍🏽 🔁 👎🏽 👉 📣 👈 🔚"
    assert kinds(tokenize(spelled, emoji)) == kinds(tokens)


@pytest.mark.parametrize("offset,expected", [
    (0, (1, 1)),
    (2, (1, 3)),
    (3, (1, 4)),
    (4, (2, 1)),
    (7, (3, 2)),
])
def test_locate(offset, expected):
    assert locate("abc\nd\nef", offset) == expected
