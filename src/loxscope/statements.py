from __future__ import annotations

from . import syntax


class StatementMixin:
    def exec_Expression(self, node: syntax.Expression) -> None:
        self.eval_expr(node.expression)

    def exec_Var(self, node: syntax.Var) -> None:
        # No initializer leaves the cell declared but unwritten; reading it
        # before the first assignment is an error, not nil.
        if node.initializer is None:
            self.environment.define(node.name.lexeme)
            return
        value = self.eval_expr(node.initializer)
        self.environment.define(node.name.lexeme, value)

    def exec_Block(self, node: syntax.Block) -> None:
        environment = self.environment.child()
        try:
            self.execute_block(node.statements, environment)
        finally:
            self.arena.release(environment.index)
