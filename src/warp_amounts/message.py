"""
Warp route message body decoding.

A TokenRouter message body is ABI-packed:

    bytes  0..32   recipient (bytes32, left-padded for 20-byte addresses)
    bytes 32..64   amount    (uint256, big-endian)
    bytes 64..     optional metadata (ignored)

The amount is in wire units: see `resolve_effective_decimals` for how many
decimals it carries on a given route.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .core.constants import WARP_BODY_MIN_BYTES, WARP_WORD_BYTES
from .core.exc import MessageBodyError


@dataclass(frozen=True)
class WarpMessage:
    """Decoded warp body: 0x-prefixed 32-byte recipient and raw uint256 amount."""
    recipient: str
    amount: int


# Recipient + amount words as hex characters; anything after is metadata.
_HEAD_HEX_CHARS = 2 * WARP_BODY_MIN_BYTES
_HEAD_RE = re.compile(r"[0-9a-fA-F]{%d}" % _HEAD_HEX_CHARS, re.ASCII)


def _head_bytes(body: str) -> bytes:
    if not isinstance(body, str):
        raise MessageBodyError(body, "not_str")
    hex_body = body[2:] if body[:2] in ("0x", "0X") else body
    if len(hex_body) < _HEAD_HEX_CHARS:
        raise MessageBodyError(body, "too_short")
    head = hex_body[:_HEAD_HEX_CHARS]
    if not _HEAD_RE.fullmatch(head):
        raise MessageBodyError(body, "not_hex")
    return bytes.fromhex(head)


def parse_warp_message_body(body: str) -> WarpMessage:
    """Decode a hex warp body into (recipient, amount). Raises MessageBodyError.

    Only the first 64 bytes are read; trailing metadata is never decoded.
    """
    raw = _head_bytes(body)
    recipient = "0x" + raw[:WARP_WORD_BYTES].hex()
    amount = int.from_bytes(raw[WARP_WORD_BYTES:], "big")
    return WarpMessage(recipient=recipient, amount=amount)


def try_parse_warp_message_body(body: str) -> Optional[WarpMessage]:
    """Like parse_warp_message_body, but returns None for undecodable bodies."""
    try:
        return parse_warp_message_body(body)
    except MessageBodyError:
        return None


__all__ = [
    "WarpMessage",
    "parse_warp_message_body",
    "try_parse_warp_message_body",
]
