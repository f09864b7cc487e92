from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping, Optional

from .errors import LoxRuntimeError
from .scopes import Environment, ScopeArena
from .syntax import Expr, Stmt

logger = logging.getLogger(__name__)


class RunResult:
    def __init__(self, environment: Environment, exception: Optional[LoxRuntimeError] = None):
        self.environment = environment
        self.exception = exception

    @property
    def ok(self) -> bool:
        return self.exception is None

    def raise_for_exception(self) -> None:
        if self.exception is not None:
            raise self.exception

    def __repr__(self) -> str:
        state = "ok" if self.ok else f"failed: {self.exception.message}"
        return f"<RunResult {state}>"


class InterpreterCore:
    def __init__(self, env: Optional[Mapping[str, Any]] = None):
        """
        env:
          - None -> the global frame starts empty
          - {"answer": 42} -> each name is declared and initialized up front
        """
        self.arena = ScopeArena()
        self.globals = self.arena.global_env()
        self.environment = self.globals
        # Distances handed over by the resolver. Nodes hash by identity and
        # stay alive as keys.
        self.locals: Dict[Expr, int] = {}
        for name, value in (env or {}).items():
            self.globals.define(name, value)

    # ----- static resolution results -----

    def resolve(self, expr: Expr, depth: int) -> None:
        if depth < 0:
            raise ValueError(f"scope distance must be non-negative, got {depth}")
        self.locals[expr] = depth

    def distance_of(self, expr: Expr) -> Optional[int]:
        return self.locals.get(expr)

    # ----- run -----

    def run(self, statements: Iterable[Stmt]) -> RunResult:
        """
        Execute `statements` in the global frame.

        A LoxRuntimeError aborts the run and is returned on the result rather
        than raised; anything else propagates.
        """
        try:
            for stmt in statements:
                self.exec_stmt(stmt)
        except LoxRuntimeError as exc:
            logger.debug("run aborted: %s", exc.message)
            return RunResult(self.globals, exc)
        return RunResult(self.globals)

    def execute_block(self, statements: Iterable[Stmt], environment: Environment) -> None:
        previous = self.environment
        try:
            self.environment = environment
            for stmt in statements:
                self.exec_stmt(stmt)
        finally:
            self.environment = previous

    # ----- dispatch -----

    def exec_stmt(self, node: Stmt) -> None:
        m = getattr(self, f"exec_{node.__class__.__name__}", None)
        if m is None:
            raise NotImplementedError(f"Statement not supported: {node.__class__.__name__}")
        m(node)

    def eval_expr(self, node: Expr) -> Any:
        m = getattr(self, f"eval_{node.__class__.__name__}", None)
        if m is None:
            raise NotImplementedError(f"Expression not supported: {node.__class__.__name__}")
        return m(node)
