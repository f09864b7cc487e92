from __future__ import annotations

import sys
from pathlib import Path

# Allow importing the package when running plain `pytest` without an editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))

import pytest

from loxscope import Interpreter, ScopeArena, Token


@pytest.fixture
def tok():
    def _tok(lexeme: str, line: int = 1) -> Token:
        return Token(lexeme, line)

    return _tok


@pytest.fixture
def globals_env():
    return ScopeArena().global_env()


@pytest.fixture
def run_program():
    def _run(statements, *, env=None, resolved=()):
        interpreter = Interpreter(env=env)
        for expr, depth in resolved:
            interpreter.resolve(expr, depth)
        result = interpreter.run(statements)
        return interpreter, result

    return _run
