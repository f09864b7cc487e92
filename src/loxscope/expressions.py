from __future__ import annotations

import operator
from typing import Any

from . import syntax
from .helpers import is_equal, is_truthy

_COMPARISONS = {
    ">": operator.gt,
    ">=": operator.ge,
    "<": operator.lt,
    "<=": operator.le,
}


class ExpressionMixin:
    def eval_Literal(self, node: syntax.Literal) -> Any:
        return node.value

    def eval_Grouping(self, node: syntax.Grouping) -> Any:
        return self.eval_expr(node.expression)

    def eval_Unary(self, node: syntax.Unary) -> Any:
        right = self.eval_expr(node.right)
        op = node.operator.lexeme
        if op == "-":
            self._check_number_operand(node.operator, right)
            return -right
        if op == "!":
            return not is_truthy(right)
        raise NotImplementedError(f"Unary operator not supported: {op}")

    def eval_Binary(self, node: syntax.Binary) -> Any:
        left = self.eval_expr(node.left)
        right = self.eval_expr(node.right)
        op = node.operator.lexeme

        if op == "+":
            return self._add(node.operator, left, right)
        if op == "-":
            self._check_number_operands(node.operator, left, right)
            return left - right
        if op == "*":
            self._check_number_operands(node.operator, left, right)
            return left * right
        if op == "/":
            return self._divide(node.operator, left, right)
        if op == "==":
            return is_equal(left, right)
        if op == "!=":
            return not is_equal(left, right)
        compare = _COMPARISONS.get(op)
        if compare is None:
            raise NotImplementedError(f"Binary operator not supported: {op}")
        self._check_number_operands(node.operator, left, right)
        return compare(left, right)

    def eval_Logical(self, node: syntax.Logical) -> Any:
        left = self.eval_expr(node.left)
        op = node.operator.lexeme
        if op == "or":
            if is_truthy(left):
                return left
        elif op == "and":
            if not is_truthy(left):
                return left
        else:
            raise NotImplementedError(f"Logical operator not supported: {op}")
        return self.eval_expr(node.right)

    def eval_Variable(self, node: syntax.Variable) -> Any:
        distance = self.distance_of(node)
        if distance is None:
            return self.environment.get(node.name)
        return self.environment.get_at(distance, node.name)

    def eval_Assign(self, node: syntax.Assign) -> Any:
        value = self.eval_expr(node.value)
        distance = self.distance_of(node)
        if distance is None:
            self.environment.assign(node.name, value)
        else:
            self.environment.assign_at(distance, node.name, value)
        return value
