from __future__ import annotations

from typing import Any

from .common import Token
from .errors import OperandError


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_truthy(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(a: Any, b: Any) -> bool:
    # Python would call True == 1; Lox does not.
    if isinstance(a, bool) or isinstance(b, bool):
        return type(a) is type(b) and a == b
    return a == b


class HelperMixin:
    def _check_number_operand(self, operator: Token, operand: Any) -> None:
        if _is_number(operand):
            return
        raise OperandError(operator, "Operand must be a number.")

    def _check_number_operands(self, operator: Token, left: Any, right: Any) -> None:
        if _is_number(left) and _is_number(right):
            return
        raise OperandError(operator, "Operands must be numbers.")

    def _add(self, operator: Token, left: Any, right: Any) -> Any:
        if _is_number(left) and _is_number(right):
            return left + right
        if isinstance(left, str) and isinstance(right, str):
            return left + right
        raise OperandError(operator, "Operands must be two numbers or two strings.")

    def _divide(self, operator: Token, left: Any, right: Any) -> Any:
        self._check_number_operands(operator, left, right)
        if right == 0:
            raise OperandError(operator, "Division by zero.")
        return left / right
