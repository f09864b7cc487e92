from __future__ import annotations

from typing import Any, NamedTuple, Optional


class _Uninitialized:
    """Marker held by a cell that was declared without a value."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "UNINITIALIZED"


UNINITIALIZED = _Uninitialized()


class Token(NamedTuple):
    """A name as it appeared in source: its text plus where to point errors."""

    lexeme: str
    line: int = 0
    column: Optional[int] = None


class Cell:
    """One declared variable slot."""

    __slots__ = ("value",)

    def __init__(self, value: Any = UNINITIALIZED):
        self.value = value

    @property
    def initialized(self) -> bool:
        return self.value is not UNINITIALIZED

    def write(self, value: Any) -> None:
        self.value = value

    def __repr__(self) -> str:
        return "<Cell UNINITIALIZED>" if self.value is UNINITIALIZED else f"<Cell {self.value!r}>"
