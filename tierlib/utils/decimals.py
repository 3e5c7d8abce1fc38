"""Decimal coercion and null-aware arithmetic helpers."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Iterable, Optional, Union

NumberLike = Union[Decimal, int, float, str]


def to_decimal(value: Optional[NumberLike]) -> Optional[Decimal]:
    """Convert a number-like to Decimal, keeping None as None.

    Floats go through ``str`` so 0.1 becomes Decimal("0.1") rather than its
    binary expansion.
    """
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise TypeError(f"Unsupported numeric value: {value!r}")
    if isinstance(value, (int, str)):
        try:
            return Decimal(value)
        except InvalidOperation as exc:
            raise ValueError(f"Unsupported numeric value: {value!r}") from exc
    if isinstance(value, float):
        return Decimal(str(value))
    # numpy / pandas scalars expose item()
    if hasattr(value, "item"):
        return to_decimal(value.item())
    raise TypeError(f"Unsupported numeric value: {value!r}")


def nullable_add(a: Optional[Decimal], b: Optional[Decimal]) -> Optional[Decimal]:
    """Null only when both sides are null; otherwise a missing side counts as zero."""
    if a is None and b is None:
        return None
    return (a if a is not None else Decimal(0)) + (b if b is not None else Decimal(0))


def nullable_sum(values: Iterable[Optional[Decimal]]) -> Optional[Decimal]:
    """Sum of the non-null values, or None if there are none."""
    total: Optional[Decimal] = None
    for value in values:
        if value is not None:
            total = value if total is None else total + value
    return total


def nullable_multiply(
    value: Optional[Decimal], factor: Optional[Decimal]
) -> Optional[Decimal]:
    if value is None or factor is None:
        return None
    return value * factor
