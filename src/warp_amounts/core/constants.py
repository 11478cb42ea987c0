"""
Warp Amounts Core Constants
===========================

Integer-domain defaults and the closed token-standard classification used when
interpreting warp-route message amounts. Nothing here is mutated at runtime.
"""

# NOTE: Amounts are Python ints end to end; there is no float constant in this module.

# ---------------------------------------------------------------------------
# Decimal defaults
# ---------------------------------------------------------------------------

#: Decimal count assumed when a token config carries none (EVM convention).
DEFAULT_TOKEN_DECIMALS: int = 18

#: Largest integer a JSON/JS number can carry exactly (2**53 - 1).
#: Numeric scale values above this are treated as untrustworthy.
MAX_SAFE_INTEGER: int = (1 << 53) - 1


# ---------------------------------------------------------------------------
# Token standards
# ---------------------------------------------------------------------------

#: Cosmos-family warp standards. These do not normalise amounts to the
#: route-wide max decimals; message bodies carry the origin token's native units.
NON_NORMALIZING_STANDARDS: frozenset = frozenset({
    # CosmWasm token standards
    "CW20",
    "CWNative",
    "CW721",
    "CwHypNative",
    "CwHypCollateral",
    "CwHypSynthetic",
    # Cosmos native/IBC standards
    "CosmosNative",
    "CosmosIbc",
    "CosmosIcs20",
    "CosmosIcs721",
    "CosmosNativeHypCollateral",
    "CosmosNativeHypSynthetic",
})


# ---------------------------------------------------------------------------
# Message body layout
# ---------------------------------------------------------------------------

#: Width of one ABI word in bytes.
WARP_WORD_BYTES: int = 32

#: Minimum warp body size: recipient word + uint256 amount word.
WARP_BODY_MIN_BYTES: int = 2 * WARP_WORD_BYTES


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

#: Base URL prepended to registry-relative logo paths (those starting with "/").
REGISTRY_IMG_BASE_URL: str = "https://raw.githubusercontent.com/hyperlane-xyz/hyperlane-registry/main"


# ---------------------------------------------------------------------------
# Metadata
# ---------------------------------------------------------------------------

__all__ = [
    "DEFAULT_TOKEN_DECIMALS",
    "MAX_SAFE_INTEGER",
    "NON_NORMALIZING_STANDARDS",
    "WARP_WORD_BYTES",
    "WARP_BODY_MIN_BYTES",
    "REGISTRY_IMG_BASE_URL",
]
