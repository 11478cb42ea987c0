"""
Warp route registry parsing.

Turns the registry's `warpRouteConfigs.yaml` into a lookup map
`chain name -> normalised token address -> WarpToken`, annotating every token
with its route's wire decimals (the max decimals across the route's tokens,
which is what EVM and Sealevel routers normalise message amounts to).

Chain metadata YAML (`chains/metadata.yaml`) is parsed the same way into
chain name -> display names, used to label the origin and destination chains.

Parsing is lenient: incomplete token entries are skipped and an unreadable
document yields an empty map, so a bad registry never breaks amount display.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional

import base58
import yaml

from .core.constants import REGISTRY_IMG_BASE_URL
from .core.decimals import TokenDecimalsConfig, valid_decimals
from .core.exc import RouteConfigError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class WarpToken:
    """One registry token deployment with its route-wide wire decimals."""

    symbol: str
    name: str
    decimals: int
    wire_decimals: int
    logo_uri: str
    chain_name: str
    address_or_denom: str
    standard: Optional[str] = None
    scale: Optional[Any] = None

    def to_decimals_config(self) -> TokenDecimalsConfig:
        return TokenDecimalsConfig(
            decimals=self.decimals,
            scale=self.scale,
            standard=self.standard,
            wire_decimals=self.wire_decimals,
        )


WarpRouteMap = Dict[str, Dict[str, WarpToken]]


# ---------------------------------------------------------------------------
# Address normalisation
# ---------------------------------------------------------------------------

def normalize_address(address: str) -> str:
    """Lowercase 0x hex as-is; decode base58 (Sealevel) into 0x hex; else lowercase."""
    if address.startswith("0x"):
        return address.lower()
    try:
        raw = base58.b58decode(address)
    except ValueError:
        return address.lower()
    return "0x" + raw.hex()


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def _route_wire_decimals(tokens: Iterable[Mapping[str, Any]]) -> int:
    wire = 0
    for token in tokens:
        d = valid_decimals(token.get("decimals"))
        if d is not None and d > wire:
            wire = d
    return wire


def _logo_uri(raw: Optional[str], img_base_url: str) -> str:
    logo = raw or ""
    return f"{img_base_url}{logo}" if logo.startswith("/") else logo


def _load_mapping(yaml_str: str, keys: str) -> Mapping[str, Any]:
    data = yaml.safe_load(yaml_str)
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise RouteConfigError(f"expected a mapping of {keys}, got {type(data).__name__}")
    return data


# ---------------------------------------------------------------------------
# Chain metadata
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ChainDisplayNames:
    display_name: str
    display_name_short: Optional[str] = None


def parse_chain_metadata_yaml(yaml_str: str) -> Dict[str, ChainDisplayNames]:
    """Parse registry chain metadata YAML into chain name -> display names.

    Chains without a `displayName` are skipped; bad YAML is logged and yields {}.
    """
    try:
        data = _load_mapping(yaml_str, "chain names")
    except (yaml.YAMLError, RouteConfigError) as e:
        log.error("Failed to parse chain metadata YAML: %s", e)
        return {}
    names: Dict[str, ChainDisplayNames] = {}
    for chain_name, metadata in data.items():
        if not isinstance(metadata, Mapping) or not metadata.get("displayName"):
            continue
        names[str(chain_name)] = ChainDisplayNames(
            display_name=metadata["displayName"],
            display_name_short=metadata.get("displayNameShort"),
        )
    return names


def get_chain_display_name(chain_name: str, chain_metadata: Mapping[str, ChainDisplayNames]) -> str:
    """Prefer displayNameShort, then displayName, else title-case the chain name."""
    names = chain_metadata.get(chain_name)
    if names is not None:
        return names.display_name_short if names.display_name_short is not None else names.display_name
    return " ".join(word[:1].upper() + word[1:].lower() for word in re.split(r"[-_\s]+", chain_name))


def build_warp_route_map(routes: Mapping[str, Any], *, img_base_url: str = REGISTRY_IMG_BASE_URL) -> WarpRouteMap:
    """Build the chain/address lookup map from already-loaded route configs."""
    route_map: WarpRouteMap = {}
    for route in routes.values():
        tokens = route.get("tokens") if isinstance(route, Mapping) else None
        if not isinstance(tokens, list):
            continue
        tokens = [t for t in tokens if isinstance(t, Mapping)]
        wire_decimals = _route_wire_decimals(tokens)

        for token in tokens:
            address = token.get("addressOrDenom")
            chain_name = token.get("chainName")
            decimals = valid_decimals(token.get("decimals"))
            symbol = token.get("symbol")
            if not address or not chain_name or decimals is None or not symbol:
                continue

            route_map.setdefault(chain_name, {})[normalize_address(str(address))] = WarpToken(
                symbol=symbol,
                name=token.get("name") or "",
                decimals=decimals,
                wire_decimals=wire_decimals,
                logo_uri=_logo_uri(token.get("logoURI"), img_base_url),
                chain_name=chain_name,
                address_or_denom=str(address),
                standard=token.get("standard"),
                scale=token.get("scale"),
            )
    return route_map


def parse_warp_route_config_yaml(yaml_str: str, *, img_base_url: str = REGISTRY_IMG_BASE_URL) -> WarpRouteMap:
    """Parse registry warp route YAML into a WarpRouteMap; logs and returns {} on bad input."""
    try:
        routes = _load_mapping(yaml_str, "route ids")
    except (yaml.YAMLError, RouteConfigError) as e:
        log.error("Failed to parse warp route config YAML: %s", e)
        return {}
    return build_warp_route_map(routes, img_base_url=img_base_url)


def lookup_warp_token(route_map: WarpRouteMap, chain_name: str, address: str) -> Optional[WarpToken]:
    """Find a token by chain and address, using the same address normalisation as parsing."""
    chain_tokens = route_map.get(chain_name)
    if not chain_tokens:
        return None
    return chain_tokens.get(normalize_address(address))


__all__ = [
    "WarpToken",
    "WarpRouteMap",
    "ChainDisplayNames",
    "normalize_address",
    "parse_chain_metadata_yaml",
    "get_chain_display_name",
    "build_warp_route_map",
    "parse_warp_route_config_yaml",
    "lookup_warp_token",
]
