"""
Amount extraction for warp-route messages (integer domain).

- Message amounts are Python ints (uint256 on the wire); never floats.
- `scale` is validated once at the boundary by `parse_scale`; downstream code
  only ever sees a positive int or None.
- Division is floor division: low-end precision loss is deterministic and the
  remainder is dropped silently.

# Leniency notes:
# - Scale values come from loosely-typed registry configuration. Zero, negative,
#   fractional, oversized or unparsable scales are treated as "no scale" (1),
#   never as an error.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional

from .constants import MAX_SAFE_INTEGER
from .decimals import TokenLike, as_token_config
from .exc import AmountDomainError

# Debug printing control
DEBUG_AMOUNTS = False

def _dbg(msg: str) -> None:
    if DEBUG_AMOUNTS:
        print(msg)


# ----------------------------
# Integer rounding helpers
# ----------------------------

def _floor_div(a: int, b: int) -> int:
    if a < 0 or b <= 0:
        raise AmountDomainError("_floor_div expects a>=0 and b>0")
    return a // b


def _check_message_amount(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise AmountDomainError(f"message amount must be int, got {type(value).__name__}")
    if value < 0:
        raise AmountDomainError("message amount must be >= 0")
    return value


# ----------------------------
# Scale parsing
# ----------------------------

# BigInt-style literals: signed ASCII decimal, or unsigned 0x/0o/0b prefixed.
_DEC_INT_RE = re.compile(r"[+-]?[0-9]+", re.ASCII)
_PREFIXED_INT_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)", re.ASCII)


def _parse_scale_str(scale: str) -> Optional[int]:
    text = scale.strip()
    if _DEC_INT_RE.fullmatch(text):
        # via Decimal: int(str) refuses very long digit strings
        parsed = int(Decimal(text))
    elif _PREFIXED_INT_RE.fullmatch(text):
        parsed = int(text, 0)
    else:
        return None
    return parsed if parsed > 0 else None


def _parse_scale_number(scale: Any) -> Optional[int]:
    # float/Decimal path: finite, positive, integral and exactly representable.
    # Bounds are checked before int() so huge Decimals never materialise.
    if isinstance(scale, Decimal):
        if not scale.is_finite():
            return None
    elif not math.isfinite(scale):
        return None
    if scale <= 0 or scale > MAX_SAFE_INTEGER:
        return None
    value = int(scale)
    return value if scale == value else None


def parse_scale(scale: Any) -> Optional[int]:
    """Parse a config `scale` into a positive int, or None when absent/invalid.

    - None -> None
    - str -> integer literal (decimal with optional sign, or 0x/0o/0b), any length;
      unparsable or <= 0 -> None
    - int -> valid if 0 < scale <= MAX_SAFE_INTEGER
    - float/Decimal -> valid if finite, integral and 0 < scale <= MAX_SAFE_INTEGER
    - bool and any other type -> None
    """
    if scale is None or isinstance(scale, bool):
        return None
    if isinstance(scale, str):
        return _parse_scale_str(scale)
    if isinstance(scale, int):
        return scale if 0 < scale <= MAX_SAFE_INTEGER else None
    if isinstance(scale, (float, Decimal)):
        return _parse_scale_number(scale)
    _dbg(f"parse_scale: unsupported type {type(scale).__name__} -> None")
    return None


# ----------------------------
# Amount parts
# ----------------------------

@dataclass(frozen=True)
class WarpRouteAmountParts:
    """Display-ready warp amount: `amount` smallest units, `decimals` fractional digits."""
    amount: int
    decimals: int


def extract_amount_parts(message_amount: int, config: TokenLike = None) -> WarpRouteAmountParts:
    """Divide a raw message amount by the route's explicit scale (if any).

    `config` supplies `decimals` (default 18) and `scale` (default 1). Without a
    valid scale the amount is assumed to already be in `decimals` units: Cosmos
    routes carry origin native decimals, EVM/Sealevel callers pass wire decimals.

    Raises AmountDomainError if `message_amount` is not a non-negative int;
    malformed `scale` or `decimals` never raise.
    """
    amount = _check_message_amount(message_amount)
    cfg = as_token_config(config)
    token_decimals = cfg.decimals_or_default()
    scale_value = parse_scale(cfg.scale) or 1
    _dbg(f"extract: amount={amount}, scale={cfg.scale!r}->{scale_value}, decimals={token_decimals}")
    return WarpRouteAmountParts(
        amount=_floor_div(amount, scale_value),
        decimals=token_decimals,
    )


__all__ = [
    "WarpRouteAmountParts",
    "parse_scale",
    "extract_amount_parts",
]
