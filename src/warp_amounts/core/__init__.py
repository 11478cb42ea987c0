"""
Warp Amounts Core
=================

Unified exports for the integer-domain primitives used to interpret warp-route
message amounts: standard classification, effective-decimals resolution,
scale-aware amount extraction and Decimal-safe min/max.

All arithmetic is on Python ints. Decimal appears only in the ordering helpers,
which compare values and never convert them.
"""

# NOTE:
#   Functions here are pure. Malformed configuration (scale, decimals) degrades
#   to documented defaults rather than raising; only a malformed message amount
#   raises AmountDomainError.

# Constants
from .constants import (
    DEFAULT_TOKEN_DECIMALS,
    MAX_SAFE_INTEGER,
    NON_NORMALIZING_STANDARDS,
    WARP_WORD_BYTES,
    WARP_BODY_MIN_BYTES,
    REGISTRY_IMG_BASE_URL,
)

# Standard classification
from .standards import is_non_normalizing_standard

# Decimals metadata and resolution
from .decimals import (
    TokenDecimalsConfig,
    as_token_config,
    valid_decimals,
    resolve_effective_decimals,
)

# Amount extraction
from .amounts import (
    WarpRouteAmountParts,
    parse_scale,
    extract_amount_parts,
)

# Ordering helpers
from .ordering import min_of, max_of

# Core exceptions
from .exc import AmountDomainError, MessageBodyError, RouteConfigError

__all__ = [
    # constants
    "DEFAULT_TOKEN_DECIMALS",
    "MAX_SAFE_INTEGER",
    "NON_NORMALIZING_STANDARDS",
    "WARP_WORD_BYTES",
    "WARP_BODY_MIN_BYTES",
    "REGISTRY_IMG_BASE_URL",
    # standards
    "is_non_normalizing_standard",
    # decimals
    "TokenDecimalsConfig",
    "as_token_config",
    "valid_decimals",
    "resolve_effective_decimals",
    # amounts
    "WarpRouteAmountParts",
    "parse_scale",
    "extract_amount_parts",
    # ordering
    "min_of",
    "max_of",
    # exceptions
    "AmountDomainError",
    "MessageBodyError",
    "RouteConfigError",
]
