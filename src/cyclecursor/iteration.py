from __future__ import annotations
from enum import IntEnum
from itertools import islice
from typing import TYPE_CHECKING, Generic, List, TypeVar

if TYPE_CHECKING:
    from .cursor import CycleCursor

T = TypeVar("T")


class Direction(IntEnum):
    FORWARD = 1
    BACKWARD = -1


class CycleIter(Generic[T]):
    """
    Endless iterator over a cursor, one seek per step.
    Shares the cursor, so consuming it moves the cursor. Stops only when
    the table is empty; bound it with ``take``/``islice`` otherwise.
    """
    __slots__ = ("cursor", "direction")

    def __init__(self, cursor: CycleCursor[T], direction: Direction = Direction.FORWARD):
        self.cursor = cursor
        self.direction = Direction(direction)

    def __iter__(self) -> CycleIter[T]:
        return self

    def __next__(self) -> T:
        if self.cursor.is_empty():
            raise StopIteration
        return self.cursor.seek(self.direction.value)

    def __reversed__(self) -> CycleIter[T]:
        return self.reversed()

    def reversed(self) -> CycleIter[T]:
        return CycleIter(self.cursor, Direction(-self.direction.value))

    def take(self, n: int) -> List[T]:
        if n < 0:
            raise ValueError("take count must be >= 0")
        return list(islice(self, n))

    def __repr__(self) -> str:
        return f"CycleIter({self.cursor!r}, {self.direction.name})"
