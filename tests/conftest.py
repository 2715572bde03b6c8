import os

import pytest

PROGRAMS_DIR = os.path.join(os.path.dirname(__file__), "programs")

HELLO_BF = "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]>>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
HELLO_OUTPUT = b"Hello World!\n"


@pytest.fixture
def program_path():
    def _path(name):
        return os.path.join(PROGRAMS_DIR, name)
    return _path


@pytest.fixture
def hello_bf():
    return HELLO_BF


@pytest.fixture
def hello_output():
    return HELLO_OUTPUT
