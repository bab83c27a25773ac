"""Unsigned 64-bit arithmetic helpers."""

U64_MAX = 2**64 - 1


def add(left: int, right: int) -> int:
    """Return ``left + right`` for unsigned 64-bit operands.

    Raises ``ValueError`` for negative operands and ``OverflowError`` when
    an operand or the sum does not fit in 64 bits.
    """
    for value in (left, right):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"expected an integer, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"operand must be non-negative: {value}")
        if value > U64_MAX:
            raise OverflowError(f"operand does not fit in 64 bits: {value}")
    result = left + right
    if result > U64_MAX:
        raise OverflowError("attempt to add with overflow")
    return result