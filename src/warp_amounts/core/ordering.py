"""
Ordering helpers for arbitrary-precision values (Decimal / int).

Used downstream to merge gas and payment totals from several sources without
ever round-tripping through float. Ties return the second operand, so callers
that fold over a sequence always end up holding the latest equal value.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TypeVar

N = TypeVar("N", Decimal, int)


def min_of(a: N, b: N) -> N:
    """Return the smaller operand; `b` on ties."""
    return b if a >= b else a


def max_of(a: N, b: N) -> N:
    """Return the larger operand; `b` on ties."""
    return b if a <= b else a


__all__ = ["min_of", "max_of"]
