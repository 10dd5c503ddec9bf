from __future__ import annotations
import logging
import operator
from typing import Generic, Iterable, Iterator, Optional, TypeVar

from .table import TableLike, at, is_table_like, materialize
from .wrap import wrap_index, wrap_offset
from .iteration import CycleIter, Direction
from .models.state import CursorState

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _as_int(value, what: str) -> int:
    if isinstance(value, bool):
        raise TypeError(f"{what} must be an integer, got bool")
    try:
        return operator.index(value)
    except TypeError:
        raise TypeError(f"{what} must be an integer, got {type(value).__name__}") from None


class CycleCursor(Generic[T]):
    """
    Cyclic, seekable and peekable cursor over a table-like sequence.

    The cursor is either empty (table of length 0, position ``None``) or
    positioned at an index in ``[0, len(table))``. Seeking past either end
    wraps around. Every query that would return an element or position
    returns ``None`` for an empty table.

    The table is borrowed, not copied; mutating it while a cursor is alive
    is out of contract.
    """
    __slots__ = ("_table", "_pos")

    def __init__(self, table: TableLike[T], start: int = 0):
        if not is_table_like(table):
            raise TypeError(f"{type(table).__name__} is not table-like (needs positional __len__ and __getitem__)")
        start = _as_int(start, "start")
        self._table = table
        n = len(table)
        if n == 0:
            logger.debug("cursor bound to empty %s", type(table).__name__)
            self._pos: Optional[int] = None
        else:
            self._pos = wrap_index(start, n)

    @classmethod
    def from_iterable(cls, items: Iterable[T], start: int = 0) -> "CycleCursor[T]":
        return cls(materialize(items), start)

    @classmethod
    def from_state(cls, table: TableLike[T], state: CursorState) -> "CycleCursor[T]":
        """Rebuild a cursor at the position recorded in ``state``."""
        n = len(table)
        if n != state.length:
            raise ValueError(f"state recorded length {state.length}, table has {n}")
        logger.debug("restoring cursor at %s of %d", state.position, n)
        return cls(table, state.position or 0)

    # state
    @property
    def table(self) -> TableLike[T]: return self._table
    def __len__(self) -> int: return len(self._table)
    def is_empty(self) -> bool: return self._pos is None
    def position(self) -> Optional[int]: return self._pos

    def state(self) -> CursorState:
        return CursorState(length=len(self._table), position=self._pos)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self._pos}, length={len(self._table)})"

    # seek
    def seek(self, offset: int) -> Optional[T]:
        """Move by ``offset`` (any sign or size), wrapping; return the new current element."""
        offset = _as_int(offset, "offset")
        if self._pos is None:
            return None
        self._pos = wrap_offset(self._pos, offset, len(self._table))
        return at(self._table, self._pos)

    def seek_to(self, index: int) -> Optional[T]:
        """Move to ``index`` wrapped into range, regardless of the current position."""
        index = _as_int(index, "index")
        if self._pos is None:
            return None
        self._pos = wrap_index(index, len(self._table))
        return at(self._table, self._pos)

    def cycle_next(self) -> Optional[T]: return self.seek(1)
    def cycle_prev(self) -> Optional[T]: return self.seek(-1)

    # peek (never moves)
    def peek(self) -> Optional[T]:
        if self._pos is None:
            return None
        return at(self._table, self._pos)

    def peek_at(self, offset: int) -> Optional[T]:
        offset = _as_int(offset, "offset")
        if self._pos is None:
            return None
        return at(self._table, wrap_offset(self._pos, offset, len(self._table)))

    # iteration
    def forward(self) -> CycleIter[T]: return CycleIter(self, Direction.FORWARD)
    def backward(self) -> CycleIter[T]: return CycleIter(self, Direction.BACKWARD)

    def lap(self, direction: Direction = Direction.FORWARD) -> Iterator[T]:
        """
        One full turn starting at the current element, ``len(table)`` items.
        Reads only; the cursor is left where it was.
        """
        step = Direction(direction).value
        if self._pos is None:
            return iter(())
        return self._lap(self._pos, step)

    def _lap(self, start: int, step: int) -> Iterator[T]:
        n = len(self._table)
        for i in range(n):
            yield at(self._table, wrap_offset(start, i * step, n))
