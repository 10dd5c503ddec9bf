from __future__ import annotations
from collections.abc import Mapping
from typing import Any, Iterable, Protocol, Tuple, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class PreconditionViolated(IndexError):
    """Raised when a table is read outside ``[0, len(table))``."""


@runtime_checkable
class TableLike(Protocol[T_co]):
    """Fixed-length, randomly addressable, read-only sequence."""

    def __len__(self) -> int: ...
    def __getitem__(self, index: int) -> T_co: ...


def is_table_like(obj: Any) -> bool:
    # mappings have __getitem__ too, but keyed rather than positional
    return isinstance(obj, TableLike) and not isinstance(obj, Mapping)


def length(table: TableLike[T]) -> int:
    return len(table)


def at(table: TableLike[T], index: int) -> T:
    """
    Checked element read.
    Negative indices are a violation here, not Python's "count from the end".
    """
    n = len(table)
    if not (0 <= index < n):
        raise PreconditionViolated(f"index {index} outside table of length {n}")
    return table[index]


def materialize(items: Iterable[T]) -> Tuple[T, ...]:
    """Collect any iterable (set, generator, dict view) into a cursorable tuple."""
    if isinstance(items, tuple):
        return items
    return tuple(items)
