from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from .common import UNINITIALIZED, Cell, Token
from .errors import ScopeChainError, UndefinedVariable, UninitializedVariable

logger = logging.getLogger(__name__)


class Frame:
    __slots__ = ("bindings", "parent")

    def __init__(self, parent: Optional[int]):
        self.bindings: Dict[str, Cell] = {}
        self.parent = parent

    def __repr__(self) -> str:
        return f"<Frame parent={self.parent} bindings={self.bindings!r}>"


class ScopeArena:
    """
    Owns the live frames of one interpreter run, addressed by index.

    Frame 0 is the global frame. Each later frame names its enclosing frame
    by index, and that index is always smaller than its own, so following
    parents can never loop. Frames form a stack: a frame is released when
    its scope exits, together with anything opened after it.
    """

    def __init__(self) -> None:
        self._frames: List[Frame] = [Frame(None)]

    def __len__(self) -> int:
        return len(self._frames)

    def open(self, parent: int) -> int:
        index = len(self._frames)
        if parent is None or not 0 <= parent < index:
            raise ScopeChainError(f"cannot open frame {index} under missing frame {parent}")
        self._frames.append(Frame(parent))
        logger.debug("opened frame %d (parent %s)", index, parent)
        return index

    def release(self, index: int) -> None:
        """
        Drop frame `index` and every frame opened after it.

        Scopes close in the reverse order they opened, so when a block exits
        the frames above its own are its nested blocks, already closed. Any
        handle still pointing at a released index is invalid.
        """
        if not 0 < index < len(self._frames):
            raise ScopeChainError(f"cannot release frame {index}")
        del self._frames[index:]
        logger.debug("released frame %d", index)

    def frame(self, index: int) -> Frame:
        return self._frames[index]

    def global_env(self) -> Environment:
        return Environment(self, 0)


class Environment:
    """
    A handle on one frame of a ScopeArena.

    Two ways to reach a binding:
      - by name (get/assign): search this frame, then each enclosing frame
      - by distance (get_at/assign_at): hop exactly `distance` parents, then
        index that frame directly; the distance comes from a resolver that
        already proved the name lives there
    """

    __slots__ = ("arena", "index")

    def __init__(self, arena: ScopeArena, index: int):
        self.arena = arena
        self.index = index

    @property
    def frame(self) -> Frame:
        return self.arena.frame(self.index)

    @property
    def enclosing(self) -> Environment | None:
        parent = self.frame.parent
        if parent is None:
            return None
        return Environment(self.arena, parent)

    @property
    def depth(self) -> int:
        hops = 0
        parent = self.frame.parent
        while parent is not None:
            hops += 1
            parent = self.arena.frame(parent).parent
        return hops

    def child(self) -> Environment:
        return Environment(self.arena, self.arena.open(self.index))

    def __contains__(self, name: str) -> bool:
        return name in self.frame.bindings

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Environment):
            return NotImplemented
        return self.arena is other.arena and self.index == other.index

    def __hash__(self) -> int:
        return hash((id(self.arena), self.index))

    def __repr__(self) -> str:
        return f"<Environment frame={self.index} depth={self.depth}>"

    # ----- declaration -----

    def define(self, name: str, value: Any = UNINITIALIZED) -> None:
        # Redeclaring in the same frame replaces the old cell outright.
        self.frame.bindings[name] = Cell(value)

    # ----- dynamic lookup -----

    def _find(self, token: Token) -> Cell:
        index: Optional[int] = self.index
        while index is not None:
            frame = self.arena.frame(index)
            cell = frame.bindings.get(token.lexeme)
            if cell is not None:
                return cell
            index = frame.parent
        raise UndefinedVariable(token)

    def get(self, token: Token) -> Any:
        cell = self._find(token)
        if not cell.initialized:
            raise UninitializedVariable(token)
        return cell.value

    def assign(self, token: Token, value: Any) -> None:
        self._find(token).write(value)

    # ----- resolved-distance lookup -----

    def ancestor(self, distance: int) -> Environment:
        if distance < 0:
            raise ScopeChainError(f"distance must be non-negative, got {distance}")
        index = self.index
        for _ in range(distance):
            parent = self.arena.frame(index).parent
            if parent is None:
                raise ScopeChainError(
                    f"distance {distance} from frame {self.index} walks past the global frame"
                )
            index = parent
        return Environment(self.arena, index)

    def _cell_at(self, distance: int, token: Token) -> Cell:
        target = self.ancestor(distance)
        try:
            return target.frame.bindings[token.lexeme]
        except KeyError:
            raise ScopeChainError(
                f"resolved '{token.lexeme}' at distance {distance} "
                f"but frame {target.index} does not declare it"
            ) from None

    def get_at(self, distance: int, token: Token) -> Any:
        cell = self._cell_at(distance, token)
        if not cell.initialized:
            raise UninitializedVariable(token)
        return cell.value

    def assign_at(self, distance: int, token: Token, value: Any) -> None:
        self._cell_at(distance, token).write(value)

    def snapshot(self) -> Dict[str, Any]:
        """Initialized bindings of this frame only."""
        return {
            name: cell.value
            for name, cell in self.frame.bindings.items()
            if cell.value is not UNINITIALIZED
        }
