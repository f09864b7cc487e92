from __future__ import annotations

from .common import Token


class LoxRuntimeError(RuntimeError):
    """An error in the interpreted program, reported against a source token."""

    def __init__(self, token: Token, message: str):
        super().__init__(message)
        self.token = token
        self.message = message

    def __str__(self) -> str:
        return f"{self.message}\n[line {self.token.line}]"


class UndefinedVariable(LoxRuntimeError):
    def __init__(self, token: Token):
        super().__init__(token, f"Undefined variable '{token.lexeme}'.")


class UninitializedVariable(LoxRuntimeError):
    def __init__(self, token: Token):
        super().__init__(token, f"Accessing unwritten variable '{token.lexeme}'.")


class OperandError(LoxRuntimeError):
    pass


class ScopeChainError(RuntimeError):
    """
    The scope chain disagrees with the distances it was handed.

    Raised by the resolved-distance path and by frame construction. This is an
    interpreter bug, not an error in the interpreted program, so it is kept out
    of the LoxRuntimeError hierarchy and is never captured by a run.
    """
