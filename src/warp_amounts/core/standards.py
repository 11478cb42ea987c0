"""
Token standard classification.

Warp routes built on Cosmos-family standards (CosmWasm, Cosmos native/IBC)
transmit amounts in the origin token's native decimals. Every other family
(EVM, Sealevel, ...) normalises to the route's wire decimals. This module
answers the single question "does this standard skip normalisation?".
"""

from __future__ import annotations

from typing import Optional

from .constants import NON_NORMALIZING_STANDARDS


def is_non_normalizing_standard(standard_id: Optional[str]) -> bool:
    """Return True if `standard_id` names a Cosmos-family (non-normalising) standard.

    Matching is exact. Empty, None and unknown identifiers are normalising.
    """
    if not standard_id or not isinstance(standard_id, str):
        return False
    return standard_id in NON_NORMALIZING_STANDARDS


__all__ = ["is_non_normalizing_standard"]
