"""Lexical scope chain for a tree-walking Lox interpreter."""

from .common import UNINITIALIZED, Cell, Token
from .core import RunResult
from .errors import (
    LoxRuntimeError,
    OperandError,
    ScopeChainError,
    UndefinedVariable,
    UninitializedVariable,
)
from .main import Interpreter
from .scopes import Environment, Frame, ScopeArena

__all__ = [
    "UNINITIALIZED",
    "Cell",
    "Environment",
    "Frame",
    "Interpreter",
    "LoxRuntimeError",
    "OperandError",
    "RunResult",
    "ScopeArena",
    "ScopeChainError",
    "Token",
    "UndefinedVariable",
    "UninitializedVariable",
]
