"""
Expression and statement nodes walked by the interpreter.

The node set is closed: each variant is a plain record, and the interpreter
dispatches on the class name (`eval_Binary`, `exec_Block`, ...). Nodes compare
by identity so they can key the resolver's distance table.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional

from .common import Token


class Expr:
    pass


class Stmt:
    pass


@dataclass(eq=False)
class Literal(Expr):
    value: Any


@dataclass(eq=False)
class Grouping(Expr):
    expression: Expr


@dataclass(eq=False)
class Unary(Expr):
    operator: Token
    right: Expr


@dataclass(eq=False)
class Binary(Expr):
    left: Expr
    operator: Token
    right: Expr


@dataclass(eq=False)
class Logical(Expr):
    left: Expr
    operator: Token
    right: Expr


@dataclass(eq=False)
class Variable(Expr):
    name: Token


@dataclass(eq=False)
class Assign(Expr):
    name: Token
    value: Expr


@dataclass(eq=False)
class Expression(Stmt):
    expression: Expr


@dataclass(eq=False)
class Var(Stmt):
    name: Token
    initializer: Optional[Expr] = None


@dataclass(eq=False)
class Block(Stmt):
    statements: List[Stmt] = field(default_factory=list)
