from __future__ import annotations


def wrap_index(pos: int, n: int) -> int:
    """
    Wrap ``pos`` into ``[0, n)`` using true modulo.
    Python's ``%`` takes the sign of the divisor, so a positive ``n`` already
    gives a non-negative result for any ``pos``.
    """
    if n <= 0:
        raise ValueError(f"cannot wrap into an empty range (n={n})")
    return pos % n


def wrap_offset(pos: int, offset: int, n: int) -> int:
    return wrap_index(pos + offset, n)
