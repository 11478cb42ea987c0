"""
Token decimal metadata and effective-decimals resolution.

A message body amount can be expressed in three different units depending on
the route:

- explicit scale: the origin router multiplied the native amount by `scale`,
  so after dividing it back out the amount is in origin native decimals;
- Cosmos-family standard on either side: no normalisation, origin native decimals;
- otherwise (EVM/Sealevel): normalised to the route's wire (max) decimals.

Rules are evaluated in exactly that order; the first match wins.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from .constants import DEFAULT_TOKEN_DECIMALS
from .standards import is_non_normalizing_standard

# Debug printing control
DEBUG_DECIMALS = False

def _dbg(msg: str) -> None:
    if DEBUG_DECIMALS:
        print(msg)


# Accepted spellings for each field when coercing loosely-typed records.
_FIELD_ALIASES = {
    "decimals": ("decimals",),
    "scale": ("scale",),
    "standard": ("standard",),
    "wire_decimals": ("wire_decimals", "wireDecimals"),
    "max_decimals": ("max_decimals", "maxDecimals"),
}


@dataclass(frozen=True)
class TokenDecimalsConfig:
    """One token's chain-side metadata as known by the caller.

    Fields (None means absent):
    - decimals: native decimal exponent of the token.
    - scale: multiplier the origin router applied before encoding (int or numeric string).
    - standard: token/bridge implementation family, e.g. "EvmHypCollateral" or "CW20".
    - wire_decimals: max decimals across every token in the route (preferred).
    - max_decimals: legacy alias of wire_decimals.
    """

    decimals: Optional[int] = None
    scale: Optional[Union[int, str]] = None
    standard: Optional[str] = None
    wire_decimals: Optional[int] = None
    max_decimals: Optional[int] = None

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "TokenDecimalsConfig":
        """Build from a plain dict, accepting camelCase or snake_case keys. Unknown keys are ignored."""
        if not data:
            return cls()
        kwargs = {}
        for field_name, aliases in _FIELD_ALIASES.items():
            for key in aliases:
                if data.get(key) is not None:
                    kwargs[field_name] = data[key]
                    break
        return cls(**kwargs)

    def decimals_or_default(self) -> int:
        d = valid_decimals(self.decimals)
        return d if d is not None else DEFAULT_TOKEN_DECIMALS


def valid_decimals(value: Any) -> Optional[int]:
    """Return `value` if it is a usable decimal count (non-negative int), else None."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value >= 0 else None


TokenLike = Union[TokenDecimalsConfig, Mapping[str, Any], None]


def as_token_config(token: TokenLike) -> TokenDecimalsConfig:
    """Coerce a config, mapping, registry token or None into a TokenDecimalsConfig.

    Registry tokens (anything with `to_decimals_config()`, e.g. WarpToken) are
    converted; any other object raises TypeError.
    """
    if isinstance(token, TokenDecimalsConfig):
        return token
    if token is None or isinstance(token, Mapping):
        return TokenDecimalsConfig.from_mapping(token)
    to_config = getattr(token, "to_decimals_config", None)
    if callable(to_config):
        return to_config()
    raise TypeError(f"expected TokenDecimalsConfig, mapping or registry token, got {type(token).__name__}")


def resolve_effective_decimals(origin_token: TokenLike, destination_token: TokenLike = None) -> int:
    """Return the decimal count that a raw message body amount is expressed in.

    Decision order:
    1. origin scale present -> origin decimals (default 18);
    2. either standard is non-normalising -> origin decimals (default 18);
    3. otherwise -> wire_decimals, max_decimals, decimals, then 18.
    """
    origin = as_token_config(origin_token)
    destination = as_token_config(destination_token)

    if origin.scale is not None:
        _dbg(f"resolve: scale={origin.scale!r} -> origin decimals")
        return origin.decimals_or_default()

    if is_non_normalizing_standard(origin.standard) or is_non_normalizing_standard(destination.standard):
        _dbg(f"resolve: non-normalising route ({origin.standard!r} -> {destination.standard!r})")
        return origin.decimals_or_default()

    for candidate in (origin.wire_decimals, origin.max_decimals, origin.decimals):
        candidate = valid_decimals(candidate)
        if candidate is not None:
            _dbg(f"resolve: normalised route -> {candidate}")
            return candidate
    return DEFAULT_TOKEN_DECIMALS


__all__ = [
    "TokenDecimalsConfig",
    "TokenLike",
    "as_token_config",
    "valid_decimals",
    "resolve_effective_decimals",
]
