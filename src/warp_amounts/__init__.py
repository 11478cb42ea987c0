"""
Top-level API for warp_amounts.

Interprets the amount carried in a cross-chain warp-route message:
  - is_non_normalizing_standard: which token standards skip decimal normalisation
  - resolve_effective_decimals: which decimals a raw message amount is in
  - extract_amount_parts: strip an explicit route scale, yielding (amount, decimals)

Supporting surface: message body decoding, registry route-config parsing and
the one-call `resolve_warp_transfer`. Nothing here performs I/O or formats
amounts as strings; callers own presentation.
"""

from __future__ import annotations

from .core import (
    DEFAULT_TOKEN_DECIMALS,
    NON_NORMALIZING_STANDARDS,
    TokenDecimalsConfig,
    WarpRouteAmountParts,
    is_non_normalizing_standard,
    resolve_effective_decimals,
    parse_scale,
    extract_amount_parts,
    min_of,
    max_of,
    AmountDomainError,
    MessageBodyError,
    RouteConfigError,
)
from .message import WarpMessage, parse_warp_message_body, try_parse_warp_message_body
from .route_config import (
    WarpToken,
    WarpRouteMap,
    ChainDisplayNames,
    parse_chain_metadata_yaml,
    get_chain_display_name,
    parse_warp_route_config_yaml,
    lookup_warp_token,
)
from .transfer import WarpTransfer, resolve_warp_transfer

__all__ = [
    # core
    "DEFAULT_TOKEN_DECIMALS",
    "NON_NORMALIZING_STANDARDS",
    "TokenDecimalsConfig",
    "WarpRouteAmountParts",
    "is_non_normalizing_standard",
    "resolve_effective_decimals",
    "parse_scale",
    "extract_amount_parts",
    "min_of",
    "max_of",
    # message bodies
    "WarpMessage",
    "parse_warp_message_body",
    "try_parse_warp_message_body",
    # registry
    "WarpToken",
    "WarpRouteMap",
    "parse_warp_route_config_yaml",
    "lookup_warp_token",
    "ChainDisplayNames",
    "parse_chain_metadata_yaml",
    "get_chain_display_name",
    # transfer
    "WarpTransfer",
    "resolve_warp_transfer",
    # exceptions
    "AmountDomainError",
    "MessageBodyError",
    "RouteConfigError",
]
