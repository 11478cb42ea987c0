"""
End-to-end warp transfer amount resolution.

Glue between the message decoder and the core: decode the body, work out
which decimals the wire amount is in, then strip any explicit route scale.
"""

from __future__ import annotations

from dataclasses import dataclass

from .core.amounts import extract_amount_parts
from .core.decimals import TokenDecimalsConfig, TokenLike, as_token_config, resolve_effective_decimals
from .message import parse_warp_message_body


@dataclass(frozen=True)
class WarpTransfer:
    recipient: str
    amount: int
    decimals: int


def resolve_warp_transfer(body: str, origin_token: TokenLike, destination_token: TokenLike = None) -> WarpTransfer:
    """Return recipient, true amount and its decimals for a warp message body.

    Raises MessageBodyError if the body cannot be decoded; bad scale or
    decimals metadata falls back to defaults.
    """
    message = parse_warp_message_body(body)
    origin = as_token_config(origin_token)
    effective = resolve_effective_decimals(origin, destination_token)
    parts = extract_amount_parts(
        message.amount,
        TokenDecimalsConfig(decimals=effective, scale=origin.scale),
    )
    return WarpTransfer(recipient=message.recipient, amount=parts.amount, decimals=parts.decimals)


__all__ = ["WarpTransfer", "resolve_warp_transfer"]
